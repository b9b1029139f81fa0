from __future__ import annotations

import io


class AppendOnlySink:
    """Text sink with `write` and nothing else (no `flush`)."""

    def __init__(self) -> None:
        self.chunks: list[str] = []

    def write(self, text: str) -> int:
        self.chunks.append(text)
        return len(text)

    def getvalue(self) -> str:
        return "".join(self.chunks)


def lines(sink: io.StringIO | AppendOnlySink) -> list[str]:
    """Non-blank status lines written to `sink`, in order."""
    return [s.rstrip() for s in sink.getvalue().replace("\n", "\r").split("\r") if s.strip()]
