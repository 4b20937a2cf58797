"""Reading the piped ccusage document from stdin."""

from __future__ import annotations

import logging
import threading
from typing import BinaryIO

from ccgraph.errors.types import InputReadError
from ccgraph.errors.types import InputTimeoutError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0
CHUNK_SIZE = 64 * 1024


class _StreamReader:
    """Reads a stream to EOF on a daemon thread.

    ``started`` is set as soon as the first chunk or EOF arrives, ``finished``
    once the stream is exhausted or fails.
    """

    def __init__(self, stream: BinaryIO) -> None:
        self.stream = stream
        self.started = threading.Event()
        self.finished = threading.Event()
        self.chunks: list[bytes] = []
        self.error: OSError | None = None
        self._thread = threading.Thread(
            target=self._run, name="ccgraph-stdin", daemon=True
        )

    def start(self) -> None:
        self._thread.start()

    def _run(self) -> None:
        try:
            while chunk := self.stream.read1(CHUNK_SIZE):
                self.chunks.append(chunk)
                self.started.set()
        except OSError as e:
            self.error = e
        finally:
            self.started.set()
            self.finished.set()


def read_input(stream: BinaryIO, timeout: float = DEFAULT_TIMEOUT) -> bytes:
    """Read a stream to completion, giving up if it stays silent.

    The deadline only covers the wait for the first bytes; once data is
    flowing the read runs until EOF.

    Args:
        stream: Binary stream, normally ``sys.stdin.buffer``
        timeout: Seconds to wait for the first bytes

    Returns:
        Everything read from the stream

    Raises:
        InputTimeoutError: If nothing arrived before the deadline
        InputReadError: If the stream could not be read
    """
    reader = _StreamReader(stream)
    reader.start()

    if not reader.started.wait(timeout):
        raise InputTimeoutError(f"No input received within {timeout:g} seconds")

    reader.finished.wait()
    if reader.error is not None:
        raise InputReadError(f"Error reading input: {reader.error}") from reader.error

    data = b"".join(reader.chunks)
    logger.debug("Read %d bytes from input", len(data))
    return data
