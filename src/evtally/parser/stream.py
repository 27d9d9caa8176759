"""One-character reader over a text handle."""

from typing import Optional, TextIO

from ..logging import get_logger

logger = get_logger(__name__)

END_OF_STREAM = ""


class CharStream:
    """
    Reads a text handle one character at a time.

    A read error leaves the stream in a bad state: ``bad`` becomes True,
    ``error`` holds the message and every later read returns END_OF_STREAM.
    """

    def __init__(self, handle: TextIO) -> None:
        self._handle = handle
        self._peeked: Optional[str] = None
        self._error: Optional[str] = None
        self._position = 0

    @property
    def bad(self) -> bool:
        return self._error is not None

    @property
    def error(self) -> Optional[str]:
        return self._error

    @property
    def position(self) -> int:
        """Number of characters consumed so far."""
        return self._position

    def read(self) -> str:
        """Consume and return the next character, or END_OF_STREAM."""
        if self._peeked is not None:
            char, self._peeked = self._peeked, None
        else:
            char = self._fetch()
        if char:
            self._position += 1
        return char

    def peek(self) -> str:
        """Return the next character without consuming it."""
        if self._peeked is None:
            self._peeked = self._fetch()
        return self._peeked

    def _fetch(self) -> str:
        if self._error is not None:
            return END_OF_STREAM
        try:
            return self._handle.read(1)
        except (OSError, UnicodeDecodeError) as exc:
            self._error = str(exc)
            logger.warning(f"Input stream went bad after {self._position} characters: {exc}")
            return END_OF_STREAM
