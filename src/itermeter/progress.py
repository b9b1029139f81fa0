"""Throttled progress meter."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import IO, TYPE_CHECKING, Final, Literal

from .status import StatusPrinter, flush_sink
from .utils.display import format_meter

if TYPE_CHECKING:
    from collections.abc import Callable


DEFAULT_MIN_ITERS: Final = 1
DEFAULT_MIN_INTERVAL: Final = 0.5

type Stage = Literal["idle", "running", "finished"]


class MisuseError(RuntimeError):
    """Lifecycle hook called out of order (`step`/`finish` before `start`, or twice)."""


@dataclass(frozen=True, slots=True)
class MeterConfig:
    """Immutable meter settings. `file` is required; nothing falls back to a global stream here."""

    file: IO[str]
    desc: str | None = None
    total: int | None = None
    min_iters: int = DEFAULT_MIN_ITERS
    min_interval: float = DEFAULT_MIN_INTERVAL
    leave: bool = False

    def __post_init__(self) -> None:
        if self.total is not None and self.total < 0:
            emsg = f"total must be >= 0 (got {self.total})"
            raise ValueError(emsg)
        if self.min_iters < 1:
            emsg = f"min_iters must be >= 1 (got {self.min_iters})"
            raise ValueError(emsg)
        if self.min_interval < 0:
            emsg = f"min_interval must be >= 0 (got {self.min_interval})"
            raise ValueError(emsg)

    @property
    def prefix(self) -> str:
        return f"{self.desc}: " if self.desc else ""


@dataclass(slots=True)
class MeterState:
    start_t: float
    last_print_t: float
    last_print_n: int = 0
    n: int = 0


class ProgressMeter:
    """Single-use progress meter: `start`, any number of `step`s, then one `finish`.

    A reprint only happens once both `min_iters` steps and `min_interval`
    seconds have passed since the last one. Calling a hook out of order raises
    `MisuseError`.
    """

    def __init__(self, config: MeterConfig, *, clock: Callable[[], float] = time.monotonic) -> None:
        self.config = config
        self.stage: Stage = "idle"
        self._clock = clock
        self._printer = StatusPrinter(config.file)
        self._state: MeterState | None = None

    @property
    def n(self) -> int:
        return self._state.n if self._state is not None else 0

    def _print_meter(self, n: int, elapsed: float) -> None:
        self._printer.print_status(self.config.prefix + format_meter(n, self.config.total, elapsed))

    def _running(self, hook: str) -> MeterState:
        if self.stage != "running" or self._state is None:
            emsg = f"{hook}() called on a meter that is {self.stage}"
            raise MisuseError(emsg)
        return self._state

    def start(self) -> None:
        if self.stage != "idle":
            emsg = f"start() called on a meter that is {self.stage}"
            raise MisuseError(emsg)

        now = self._clock()
        self._state = MeterState(start_t=now, last_print_t=now)
        self.stage = "running"
        self._print_meter(0, 0)

    def step(self) -> None:
        state = self._running("step")
        state.n += 1

        # Counter first, so the clock is only read when a reprint is possible
        if state.n - state.last_print_n < self.config.min_iters:
            return
        now = self._clock()
        if now - state.last_print_t < self.config.min_interval:
            return

        self._print_meter(state.n, now - state.start_t)
        state.last_print_n = state.n
        state.last_print_t = now

    def finish(self) -> None:
        """Erase the line, or (with `leave`) bring it up to date and end it with a newline."""
        state = self._running("finish")
        self.stage = "finished"
        file = self.config.file

        if not self.config.leave:
            self._printer.print_status("")
            file.write("\r")
        else:
            if state.last_print_n < state.n:
                self._print_meter(state.n, self._clock() - state.start_t)
            file.write("\n")

        flush_sink(file)
