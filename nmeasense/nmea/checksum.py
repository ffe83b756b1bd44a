"""NMEA 0183 checksum.

The checksum is the XOR of every character between '$' and '*', written
after the '*' as two hexadecimal digits:

    $GPGGA,202530.00,5109.0262,N,11401.8407,W,5,40,0.5,1097.36,M,-17.00,M,18,TSTR*61
     <------------------------------ XOR'ed ------------------------------>  0x61

``Parser`` folds characters in one at a time with ``update_checksum``.
``validate_checksum`` is a standalone check for a complete sentence.
"""

import string

__all__ = [
    "calculate_checksum",
    "parse_checksum",
    "update_checksum",
    "validate_checksum",
]

_CHECKSUM_LENGTH = 2


def update_checksum(current: int, char: str) -> int:
    """Fold one character into a running XOR checksum.

    Example:
        >>> update_checksum(0, "G")
        71
    """
    return current ^ ord(char)


def calculate_checksum(content: str) -> int:
    """XOR checksum of ``content``, the text between '$' and '*'."""
    checksum = 0
    for char in content:
        checksum = update_checksum(checksum, char)
    return checksum


def parse_checksum(text: str) -> int | None:
    """Parse the two hexadecimal checksum digits that follow '*'.

    Returns:
        The checksum byte, or None if ``text`` is not exactly two
        hexadecimal digits. Lowercase digits are accepted.

    Example:
        >>> parse_checksum("7F")
        127
        >>> parse_checksum("G1") is None
        True
    """
    if len(text) != _CHECKSUM_LENGTH:
        return None
    if any(c not in string.hexdigits for c in text):
        return None
    return int(text, 16)


def validate_checksum(sentence: str) -> bool:
    """Check the checksum of a complete "$...*hh" sentence.

    Surrounding whitespace is ignored. Only the checksum is checked; the
    sentence is not parsed.

    Returns:
        False for a missing '$' or '*', a checksum that is not two
        hexadecimal digits, or a mismatch.

    Example:
        >>> validate_checksum("$GNVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*3B")
        True
    """
    body = sentence.strip()
    if not body.startswith("$"):
        return False

    content, delimiter, provided = body[1:].partition("*")
    if not delimiter:
        return False

    received = parse_checksum(provided)
    return received is not None and received == calculate_checksum(content)
