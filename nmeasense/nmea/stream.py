"""Byte stream adapter around ``Parser``.

Serial ports and sockets deliver NMEA as arbitrary chunks of bytes with
"\\r\\n" line endings. ``NMEAStream`` turns such chunks into decoded
sentences:

    * every byte is pushed into a ``Parser`` as one character;
    * line terminators reset the parser instead of being pushed, so a
      sentence that never reaches its checksum is dropped at the end of
      its line;
    * lines longer than ``max_sentence_length`` are discarded up to the
      next terminator;
    * parse failures are counted and logged, never raised; the rest of a
      failed sentence is skipped until the next '$' or line terminator, so
      one bad sentence counts as one error.

Example:
    >>> stream = NMEAStream()
    >>> [sentence] = stream.feed(b"$GNVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*3B\\r\\n")
    >>> sentence.sog_kph
    10.2
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from nmeasense.nmea.errors import NMEAError
from nmeasense.nmea.parser import Parser, ParserState
from nmeasense.nmea.types import Sentence

__all__ = ["NMEAStream", "StreamStatistics"]

logger = logging.getLogger(__name__)

# NMEA 0183 caps a sentence at 82 characters
_MAX_SENTENCE_LENGTH = 82

_LINE_TERMINATORS = ("\r", "\n")

_SENTENCE_START = "$"


@dataclass
class StreamStatistics:
    """Counters kept by ``NMEAStream``.

    Attributes:
        sentences: Sentences decoded successfully.
        errors: Sentences dropped for a parse failure (bad sync, unknown
            id, bad fields, bad checksum), counted once per sentence.
        overruns: Lines abandoned for exceeding the maximum length.
    """

    sentences: int = 0
    errors: int = 0
    overruns: int = 0


class NMEAStream:
    """Feed raw NMEA bytes in, get decoded sentences out.

    Args:
        on_sentence: Called with each decoded sentence.
        on_error: Called with each ``NMEAError`` after it was counted.
        max_sentence_length: Longest line accepted, in characters,
            excluding line terminators. None disables the limit.
    """

    def __init__(
        self,
        on_sentence: Callable[[Sentence], None] | None = None,
        on_error: Callable[[NMEAError], None] | None = None,
        max_sentence_length: int | None = _MAX_SENTENCE_LENGTH,
    ) -> None:
        self._parser = Parser()
        self._on_sentence = on_sentence
        self._on_error = on_error
        self._max_sentence_length = max_sentence_length
        self._line_length = 0
        self._discarding = False
        self._skipping = False
        self.statistics = StreamStatistics()

    def reset(self) -> None:
        """Drop any partial line."""
        self._parser.reset()
        self._line_length = 0
        self._discarding = False
        self._skipping = False

    def _end_line(self) -> None:
        if self._parser.state is not ParserState.SYNC:
            logger.debug(
                "Dropping incomplete %s sentence at end of line",
                self._parser.kind.value,
            )
        self.reset()

    def _overrun(self) -> None:
        self.statistics.overruns += 1
        logger.warning(
            "Discarding line longer than %d characters",
            self._max_sentence_length,
        )
        self._parser.reset()
        self._discarding = True

    def _push(self, char: str) -> Sentence | None:
        try:
            sentence = self._parser.push(char)
        except NMEAError as e:
            self.statistics.errors += 1
            self._skipping = True
            logger.debug("Dropped NMEA sentence: %s", e)
            if self._on_error is not None:
                self._on_error(e)
            return None

        if sentence is not None:
            self.statistics.sentences += 1
            if self._on_sentence is not None:
                self._on_sentence(sentence)
        return sentence

    def feed(self, data: bytes | str) -> list[Sentence]:
        """Consume a chunk of input.

        Args:
            data: Raw bytes (one byte per character) or already decoded
                text. Chunks may split sentences anywhere.

        Returns:
            Sentences completed by this chunk, in order.
        """
        text = data.decode("latin-1") if isinstance(data, bytes) else data
        result: list[Sentence] = []

        for char in text:
            if char in _LINE_TERMINATORS:
                self._end_line()
                continue
            if self._discarding:
                continue

            self._line_length += 1
            if (
                self._max_sentence_length is not None
                and self._line_length > self._max_sentence_length
            ):
                self._overrun()
                continue
            if self._skipping:
                if char != _SENTENCE_START:
                    continue
                self._skipping = False

            sentence = self._push(char)
            if sentence is not None:
                result.append(sentence)

        return result
