"""Incremental NMEA 0183 parser.

``Parser`` consumes one character per ``push`` call and keeps just enough
state to decode a sentence without lookahead:

    SYNC --'$'--> ID --','--> DATA --'*'--> CHECKSUM --2 digits--> SYNC

    SYNC      Waits for '$'.
    ID        Buffers the identifier (e.g. "GPGGA"); classified on ','.
    DATA      Buffers the data section; decoded on '*'.
    CHECKSUM  Collects two hex digits and compares them with the XOR of
              every character between '$' and '*'.

``push`` returns None while a sentence is still on-going and the decoded
sentence on its last checksum digit. Anything that makes the sentence
unusable raises an ``NMEAError``; the parser resets itself before raising,
so the caller can simply keep pushing characters.

Example:
    >>> parser = Parser()
    >>> for char in "$GNVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*3B":
    ...     sentence = parser.push(char)
    >>> sentence.cog_true
    54.7
"""

from enum import Enum

from nmeasense.nmea.checksum import parse_checksum, update_checksum
from nmeasense.nmea.decoders import decode_fields
from nmeasense.nmea.errors import (
    ChecksumMismatchError,
    FieldReadError,
    InvalidChecksumError,
    InvalidFieldsError,
    InvalidIdError,
    InvalidSyncError,
    NMEAError,
    TruncatedSentenceError,
)
from nmeasense.nmea.types import Sentence, SentenceKind

__all__ = ["Parser", "ParserState", "parse_sentence"]

_SYNC_CHAR = "$"
_FIELD_SEPARATOR = ","
_CHECKSUM_DELIMITER = "*"
_CHECKSUM_DIGITS = 2


class ParserState(Enum):
    """Which part of the sentence the parser expects next."""

    SYNC = "sync"
    ID = "id"
    DATA = "data"
    CHECKSUM = "checksum"


class Parser:
    """Character-driven NMEA sentence parser.

    Not thread-safe: a single caller owns the instance and feeds it
    characters in order.
    """

    def __init__(self) -> None:
        self._state = ParserState.SYNC
        self._kind = SentenceKind.UNRECOGNIZED
        self._sentence: Sentence | None = None
        self._buffer: list[str] = []
        self._checksum = 0
        self._received_checksum: int | None = None

    @property
    def state(self) -> ParserState:
        return self._state

    @property
    def kind(self) -> SentenceKind:
        """Kind of the sentence in progress (UNRECOGNIZED before its ID)."""
        return self._kind

    @property
    def checksum(self) -> int:
        """Running XOR checksum of the sentence in progress."""
        return self._checksum

    @property
    def received_checksum(self) -> int | None:
        """Checksum read from the last completed sentence."""
        return self._received_checksum

    def reset(self) -> None:
        """Abandon any sentence in progress and wait for the next '$'."""
        self._state = ParserState.SYNC
        self._kind = SentenceKind.UNRECOGNIZED
        self._sentence = None
        self._buffer.clear()
        self._checksum = 0
        self._received_checksum = None

    def _fail(self, error: NMEAError) -> NMEAError:
        self.reset()
        return error

    def push(self, char: str) -> Sentence | None:
        """Feed one character.

        Returns:
            The decoded sentence when ``char`` completes a valid one,
            otherwise None.

        Raises:
            InvalidSyncError: A sentence did not start with '$'.
            InvalidIdError: The identifier is not GGA, VTG, RMC or ZDA.
            InvalidFieldsError: The data section did not decode.
            ChecksumMismatchError: The checksum did not match.
        """
        if self._state is ParserState.SYNC:
            self._push_sync(char)
        elif self._state is ParserState.ID:
            self._push_id(char)
        elif self._state is ParserState.DATA:
            self._push_data(char)
        else:
            return self._push_checksum(char)
        return None

    def _push_sync(self, char: str) -> None:
        if char != _SYNC_CHAR:
            raise self._fail(InvalidSyncError(char))
        self.reset()
        self._state = ParserState.ID

    def _push_id(self, char: str) -> None:
        # the separating comma counts towards the checksum
        self._checksum = update_checksum(self._checksum, char)
        if char != _FIELD_SEPARATOR:
            self._buffer.append(char)
            return

        identifier = "".join(self._buffer)
        kind = SentenceKind.from_identifier(identifier)
        if kind is SentenceKind.UNRECOGNIZED:
            raise self._fail(InvalidIdError(identifier))

        self._kind = kind
        self._state = ParserState.DATA
        self._buffer.clear()

    def _push_data(self, char: str) -> None:
        if char != _CHECKSUM_DELIMITER:
            self._buffer.append(char)
            self._checksum = update_checksum(self._checksum, char)
            return

        kind = self._kind
        try:
            self._sentence = decode_fields(kind, "".join(self._buffer))
        except FieldReadError as e:
            raise self._fail(InvalidFieldsError(kind)) from e

        self._state = ParserState.CHECKSUM
        self._buffer.clear()

    def _push_checksum(self, char: str) -> Sentence | None:
        self._buffer.append(char)
        if len(self._buffer) < _CHECKSUM_DIGITS:
            return None

        text = "".join(self._buffer)
        expected = self._checksum
        received = parse_checksum(text)
        if received is None:
            raise self._fail(InvalidChecksumError(expected, text))
        if received != expected:
            raise self._fail(ChecksumMismatchError(expected, received))

        sentence = self._sentence
        self._received_checksum = received
        self._sentence = None
        self._buffer.clear()
        self._state = ParserState.SYNC
        return sentence


def parse_sentence(text: str) -> Sentence:
    """Parse one complete sentence such as "$GPZDA,...*60".

    Surrounding whitespace (e.g. "\\r\\n") is ignored.

    Raises:
        NMEAError: As raised by ``Parser.push`` (characters after the
            checksum raise ``InvalidSyncError``), or
            ``TruncatedSentenceError`` if the text ends early.
    """
    text = text.strip()
    parser = Parser()
    sentence = None
    for char in text:
        sentence = parser.push(char)
    if sentence is None:
        raise TruncatedSentenceError(f"incomplete sentence {text!r}")
    return sentence
