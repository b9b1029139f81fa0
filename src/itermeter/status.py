"""In-place status line."""

from __future__ import annotations

from typing import IO


def flush_sink(file: IO[str], /) -> None:
    """Flush `file` if it can be flushed; append-only sinks just take writes."""
    if (flush := getattr(file, "flush", None)) is not None:
        flush()


class StatusPrinter:
    """Overwrites a single line of `file` on every call; never writes a newline."""

    def __init__(self, file: IO[str]) -> None:
        self.file = file
        self._last_len = 0

    def print_status(self, text: str) -> None:
        # Blank out whatever is left of a longer previous line
        pad = " " * max(self._last_len - len(text), 0)
        self.file.write(f"\r{text}{pad}\r")
        flush_sink(self.file)
        self._last_len = len(text)
