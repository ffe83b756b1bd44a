"""Sequential reader for delimiter-separated NMEA fields.

NMEA fields are comma-separated and may be empty (consecutive commas
indicate missing data). ``FieldReader`` walks one buffer with an explicit
cursor, handing out one field per call and converting it to a primitive
type. Empty fields surface as ``EmptyFieldError`` so that decoders can tell
"no data" apart from "bad data"; ``read_optional`` maps them to None.

Example:
    >>> reader = FieldReader("054.7,T,,M")
    >>> reader.read(float)
    54.7
    >>> reader.skip()
    True
    >>> reader.read_optional(float) is None
    True
"""

from collections.abc import Callable
from typing import TypeVar

from nmeasense.nmea.errors import (
    EmptyFieldError,
    FieldDecodeError,
    InvalidFormatError,
)

__all__ = ["FieldReader", "uint8", "uint16"]

T = TypeVar("T")

_SEPARATOR = ","


def _parse_unsigned(text: str, maximum: int) -> int:
    # int() would also accept signs, whitespace and underscores
    if not text.isdigit():
        raise ValueError(f"not an unsigned integer: {text!r}")
    value = int(text)
    if value > maximum:
        raise ValueError(f"{value} out of range 0..{maximum}")
    return value


def uint8(text: str) -> int:
    """Parse an unsigned 8-bit integer such as a fix quality or day."""
    return _parse_unsigned(text, 0xFF)


def uint16(text: str) -> int:
    """Parse an unsigned 16-bit integer such as a year."""
    return _parse_unsigned(text, 0xFFFF)


class FieldReader:
    """Cursor over a single buffer of separated fields.

    The buffer is never copied or split up front: ``position`` is the
    offset of the next unread character and each call slices exactly one
    field out of the buffer.

    Separator handling:
        * the separator following a field is consumed with it;
        * a final field without a trailing separator is returned once;
        * once the cursor reaches the end, every read raises
          ``EmptyFieldError`` and ``skip`` returns False.

    Args:
        data: Field text. ``bytes`` are decoded as ASCII one field at a
            time.
        separator: Single separator character (default: ``","``).
    """

    def __init__(self, data: str | bytes, separator: str = _SEPARATOR) -> None:
        if len(separator) != 1:
            raise ValueError("separator must be a single character")
        self._data = data
        self._separator: str | bytes = (
            separator.encode("ascii") if isinstance(data, bytes) else separator
        )
        self._position = 0
        self._index = 0

    @property
    def position(self) -> int:
        """Offset of the next unread character in the buffer."""
        return self._position

    @property
    def index(self) -> int:
        """Number of fields consumed so far."""
        return self._index

    @property
    def exhausted(self) -> bool:
        """True once the cursor has reached the end of the buffer."""
        return self._position >= len(self._data)

    def _advance(self) -> str | bytes:
        """Slice the next raw field and move the cursor past its separator."""
        end = self._data.find(self._separator, self._position)  # type: ignore[arg-type]
        if end < 0:
            field = self._data[self._position :]
            self._position = len(self._data)
        else:
            field = self._data[self._position : end]
            self._position = end + 1
        self._index += 1
        return field

    def _next(self, name: str | None) -> str:
        """Return the next field as text.

        Raises:
            EmptyFieldError: If the buffer is exhausted or the field is empty.
            FieldDecodeError: If the field is not ASCII.
        """
        index = self._index
        if self.exhausted:
            raise EmptyFieldError("no field left", index, name)

        raw = self._advance()
        if isinstance(raw, bytes):
            try:
                text = raw.decode("ascii")
            except UnicodeDecodeError as e:
                raise FieldDecodeError("undecodable bytes", index, name) from e
        else:
            text = raw
            if not text.isascii():
                raise FieldDecodeError("non-ASCII characters", index, name)

        if not text:
            raise EmptyFieldError("empty field", index, name)
        return text

    def skip(self) -> bool:
        """Consume and discard the next field.

        Returns:
            True if a field (possibly empty) was consumed, False if the
            buffer was already exhausted.
        """
        if self.exhausted:
            return False
        self._advance()
        return True

    def read(self, parse: Callable[[str], T], name: str | None = None) -> T:
        """Read the next field and convert it with ``parse``.

        Args:
            parse: Conversion such as ``float``, ``int``, ``str``,
                ``uint8`` or ``uint16``. Must raise ``ValueError`` on
                malformed text.
            name: Field name used in error messages.

        Raises:
            EmptyFieldError: No field remained, or the field was empty.
            InvalidFormatError: ``parse`` rejected the field text.
            FieldDecodeError: The field was not ASCII.
        """
        index = self._index
        text = self._next(name)
        try:
            return parse(text)
        except ValueError as e:
            raise InvalidFormatError(text, index, name) from e

    def read_optional(
        self, parse: Callable[[str], T], name: str | None = None
    ) -> T | None:
        """Like ``read``, but an empty or missing field yields None."""
        try:
            return self.read(parse, name)
        except EmptyFieldError:
            return None
