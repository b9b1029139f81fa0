from __future__ import annotations

import io

import pytest


class FakeClock:
    """Manually advanced stand-in for `time.monotonic` that counts reads."""

    def __init__(self, t: float = 100.0) -> None:
        self.t = t
        self.reads = 0

    def __call__(self) -> float:
        self.reads += 1
        return self.t

    def advance(self, seconds: float) -> None:
        self.t += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def sink() -> io.StringIO:
    return io.StringIO()
