"""Error types raised while reading fields and parsing NMEA sentences.

Two families are defined:

    FieldReadError
        Raised by ``FieldReader`` for a single field. Decoders let these
        propagate; the parser turns them into ``InvalidFieldsError``.

    NMEAError
        Raised by ``Parser.push`` for a whole sentence. The parser has
        always been reset by the time one of these reaches the caller, so
        the next '$' starts a clean attempt.

Both derive from ``ValueError`` since they describe malformed input.
"""

from nmeasense.nmea.types import SentenceKind


class FieldReadError(ValueError):
    """A field could not be read from a ``FieldReader``.

    Attributes:
        index: Zero-based position of the field within the buffer.
        name: Field name given by the decoder, or None.
    """

    def __init__(self, message: str, index: int, name: str | None = None) -> None:
        label = name if name is not None else f"field {index}"
        super().__init__(f"{label}: {message}")
        self.index = index
        self.name = name


class EmptyFieldError(FieldReadError):
    """No field text remained (end of buffer, or an empty field)."""


class InvalidFormatError(FieldReadError):
    """Field text was present but did not parse as the requested type."""

    def __init__(self, text: str, index: int, name: str | None = None) -> None:
        super().__init__(f"invalid format {text!r}", index, name)
        self.text = text


class FieldDecodeError(FieldReadError):
    """Field held data that is not ASCII text."""


class NMEAError(ValueError):
    """Base class for sentence-level parse failures."""


class InvalidSyncError(NMEAError):
    """A sentence did not start with '$'."""

    def __init__(self, char: str) -> None:
        super().__init__(f"invalid sync character {char!r}")
        self.char = char


class InvalidIdError(NMEAError):
    """The identifier field matched none of the supported sentence kinds."""

    def __init__(self, identifier: str) -> None:
        super().__init__(f"unknown sentence identifier {identifier!r}")
        self.identifier = identifier


class InvalidFieldsError(NMEAError):
    """The data section could not be decoded for the sentence kind.

    The underlying ``FieldReadError`` is available as ``__cause__``.
    """

    def __init__(self, kind: SentenceKind) -> None:
        super().__init__(f"invalid {kind.value} fields")
        self.kind = kind


class ChecksumMismatchError(NMEAError):
    """The transmitted checksum differs from the computed one.

    Attributes:
        expected: Checksum computed over the received characters.
        received: Checksum transmitted after '*', or None when it was
            not a hexadecimal byte.
    """

    def __init__(self, expected: int, received: int | None) -> None:
        shown = f"{received:02X}" if received is not None else "none"
        super().__init__(
            f"checksum mismatch: expected {expected:02X}, received {shown}"
        )
        self.expected = expected
        self.received = received


class InvalidChecksumError(ChecksumMismatchError):
    """The two characters after '*' are not hexadecimal digits."""

    def __init__(self, expected: int, text: str) -> None:
        super().__init__(expected, None)
        self.args = (f"non-hexadecimal checksum {text!r}",)
        self.text = text


class TruncatedSentenceError(NMEAError):
    """Input ended before the sentence checksum was complete."""
