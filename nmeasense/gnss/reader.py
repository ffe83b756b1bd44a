"""Raw NMEA sentences relayed by gpsd.

gpsd owns the receiver's serial port; clients that want the receiver's own
sentences ask for them with a WATCH command carrying ``"nmea":true``. gpsd
then writes each sentence verbatim on its own line, mixed with JSON
reports of its own (VERSION, DEVICES, WATCH) that start with '{'.

``NMEAReader`` drops the JSON reports and pushes every other line through
an ``NMEAStream``, so corrupted or unsupported sentences are counted in
``reader.stream.statistics`` instead of reaching the caller.

Lines are assembled from ``recv()`` chunks in a local buffer rather than
through ``socket.makefile()``: a file object wrapping a socket refuses
every read after its first timeout, while a bare ``recv()`` can simply be
retried.
"""

import contextlib
import logging
import socket
from collections import deque
from collections.abc import Iterator

from nmeasense.nmea.stream import NMEAStream
from nmeasense.nmea.types import Sentence

__all__ = ["NMEAReader"]

logger = logging.getLogger(__name__)

_DEFAULT_HOST = "localhost"
_DEFAULT_PORT = 2947

# upper bound on how long cancel() waits for a blocked read
_READ_TIMEOUT = 2.0

_WATCH_NMEA = b'?WATCH={"enable":true,"nmea":true}\n'

_JSON_REPORT_START = b"{"

_LINE_END = b"\n"
_RECV_SIZE = 4096

_NOT_OPEN = "NMEAReader must be used as a context manager."


class NMEAReader:
    """Blocking reader of decoded NMEA sentences from gpsd.

    Use it as a context manager, then either iterate over it::

        with NMEAReader() as nmea:
            for sentence in nmea:
                if isinstance(sentence, DataGGA) and sentence.valid:
                    print(sentence.latitude_degrees, sentence.longitude_degrees)

    or call ``read()`` for one sentence at a time. A quiet receiver is
    not an error: reads that time out are retried. Another thread may call
    ``cancel()`` to stop a blocked reader; the reader then raises
    ``EOFError``.

    Args:
        host: gpsd host name or address.
        port: gpsd TCP port.
        stream: Stream adapter fed with every NMEA line. A fresh
            ``NMEAStream`` is used when omitted.
        timeout: Socket read timeout in seconds.
    """

    def __init__(
        self,
        host: str = _DEFAULT_HOST,
        port: int = _DEFAULT_PORT,
        stream: NMEAStream | None = None,
        timeout: float = _READ_TIMEOUT,
    ) -> None:
        self._address = (host, port)
        self._timeout = timeout
        self._stream = stream if stream is not None else NMEAStream()
        self._connection: socket.socket | None = None
        self._received = bytearray()
        self._cancel_requested = False
        self._decoded: deque[Sentence] = deque()

    @property
    def stream(self) -> NMEAStream:
        return self._stream

    def open(self) -> None:
        """Connect to gpsd and request raw NMEA output."""
        connection = socket.create_connection(self._address)
        try:
            connection.settimeout(self._timeout)
            connection.sendall(_WATCH_NMEA)
        except OSError:
            connection.close()
            raise
        self._connection = connection
        self._cancel_requested = False
        self._received.clear()
        self._decoded.clear()
        self._stream.reset()
        logger.info("Watching NMEA from gpsd at %s:%d", *self._address)

    def close(self) -> None:
        """Disconnect from gpsd. Safe to call more than once."""
        connection, self._connection = self._connection, None
        self._received.clear()
        if connection is not None:
            connection.close()

    def __enter__(self) -> "NMEAReader":
        self.open()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def cancel(self) -> None:
        """Make the current or next blocked ``read()`` raise ``EOFError``.

        Shutting the socket down wakes a ``recv()`` that is waiting for
        data; otherwise the flag is noticed at the next read timeout.
        """
        self._cancel_requested = True
        if self._connection is None:
            return
        with contextlib.suppress(OSError):
            self._connection.shutdown(socket.SHUT_RDWR)

    def _receive(self, connection: socket.socket) -> bool:
        """Append one chunk to the line buffer; False when the read timed out."""
        try:
            chunk = connection.recv(_RECV_SIZE)
        except TimeoutError:
            if self._cancel_requested:
                raise EOFError("gpsd read cancelled.") from None
            return False
        except OSError as e:
            raise EOFError("gpsd connection closed.") from e
        if not chunk:
            raise EOFError("gpsd stream ended.")
        self._received += chunk
        return True

    def _next_line(self) -> bytes | None:
        """One complete line from gpsd, or None when the read timed out.

        A line cut off by a timeout stays buffered and is completed by a
        later call.
        """
        if self._connection is None:
            raise RuntimeError(_NOT_OPEN)
        end = self._received.find(_LINE_END)
        while end < 0:
            if not self._receive(self._connection):
                return None
            end = self._received.find(_LINE_END)
        line = bytes(self._received[: end + 1])
        del self._received[: end + 1]
        return line

    def _consume(self, line: bytes) -> None:
        if line.lstrip().startswith(_JSON_REPORT_START):
            return
        self._decoded.extend(self._stream.feed(line))

    def read(self) -> Sentence:
        """Return the next decoded sentence, blocking until one arrives.

        Raises:
            RuntimeError: The reader is not open.
            EOFError: The connection ended or ``cancel()`` was called.
        """
        if self._connection is None:
            raise RuntimeError(_NOT_OPEN)
        while not self._decoded:
            line = self._next_line()
            if line is not None:
                self._consume(line)
        return self._decoded.popleft()

    def __iter__(self) -> Iterator[Sentence]:
        """Yield sentences until ``read()`` raises."""
        while True:
            yield self.read()
