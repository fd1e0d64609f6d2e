import logging
import sys
from typing import Optional, TextIO

from cli_interpreter.exceptions import InputReadError
from cli_interpreter.ports.io.line_reader_port import LineReaderPort


class StreamLineReader(LineReaderPort):
    """Reads lines from a text stream (standard input by default)."""

    def __init__(
        self, stream: Optional[TextIO] = None, logger: Optional[logging.Logger] = None
    ) -> None:
        self._stream = stream
        self._logger = logger or logging.getLogger(__name__)

    def read_line(self) -> Optional[str]:
        stream = self._stream if self._stream is not None else sys.stdin
        # Read raw bytes and decode one line at a time, so an undecodable
        # line does not take the rest of the buffered input with it
        source = getattr(stream, "buffer", stream)
        try:
            raw = source.readline()
        except OSError as e:
            self._logger.error(f"Failed to read input: {e}")
            raise InputReadError(e)
        except ValueError as e:
            # readline on a closed stream; nothing more will ever arrive
            self._logger.info(f"Input stream closed: {e}")
            return None
        if not raw:
            return None
        if isinstance(raw, bytes):
            encoding = getattr(stream, "encoding", None) or "utf-8"
            try:
                return raw.decode(encoding)
            except UnicodeDecodeError as e:
                self._logger.error(f"Failed to read input: {e}")
                raise InputReadError(e)
        return raw
