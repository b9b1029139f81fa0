"""Progress-tracked iteration."""

from __future__ import annotations

import operator
import time
from collections.abc import Iterator, Sized
from typing import TYPE_CHECKING, Final, Unpack

from .progress import DEFAULT_MIN_INTERVAL, DEFAULT_MIN_ITERS, MeterConfig, ProgressMeter
from .utils.console import resolve_sink

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from .utils.types import MeterOptions


# Raised by sources that cannot report (or be asked for) their size
_UNSUPPORTED: Final = (TypeError, NotImplementedError)


def detect_total(items: Iterable[object], /) -> int | None:
    """Return the number of items in `items`, or `None` if it can't be known.

    Sized sources report `len()`. One-shot iterators are only asked for a
    length hint, since counting them would consume them. Anything else that
    can be iterated more than once is counted by a full pass.

    Only "unsupported" errors (`TypeError`, `NotImplementedError`) mean unknown;
    anything else, such as a `__len__` raising `ValueError`, propagates.
    """
    if isinstance(items, Sized):
        try:
            return len(items)
        except _UNSUPPORTED:
            pass

    try:
        if isinstance(items, Iterator):
            hint = operator.length_hint(items, -1)
            return hint if hint >= 0 else None
        return sum(1 for _ in items)
    except _UNSUPPORTED:
        return None


class Tracked[T]:
    """Iterable wrapper that draws a progress meter on every pass over `items`.

    Items are passed through unchanged. Each pass gets its own `ProgressMeter`,
    and the meter is finished on every exit path: exhaustion, `break`, or an
    exception raised by the loop body.
    """

    def __init__(
        self,
        items: Iterable[T],
        /,
        *,
        clock: Callable[[], float] = time.monotonic,
        **opts: Unpack[MeterOptions],
    ) -> None:
        self._items = items
        self._clock = clock

        total = opts.get("total")
        self.config = MeterConfig(
            file=resolve_sink(opts.get("file")),
            desc=opts.get("desc"),
            total=total if total is not None else detect_total(items),
            min_iters=opts.get("min_iters", DEFAULT_MIN_ITERS),
            min_interval=opts.get("min_interval", DEFAULT_MIN_INTERVAL),
            leave=opts.get("leave", False),
        )

    @property
    def total(self) -> int | None:
        return self.config.total

    def __len__(self) -> int:
        return len(self._items)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[T]:
        meter = ProgressMeter(self.config, clock=self._clock)
        meter.start()
        try:
            for item in self._items:
                yield item
                meter.step()
        finally:
            meter.finish()


def tracked[T](items: Iterable[T], /, **opts: Unpack[MeterOptions]) -> Tracked[T]:
    """Wrap `items` so iterating it prints a progress meter.

    Keyword Args:
    (Optional)
        desc: Short label shown before the meter
        total: Expected number of items (detected from `items` if omitted)
        file: Text stream or rich `Console` to draw on (stderr if omitted)
        leave: Keep the final meter on screen instead of erasing it
        min_iters: Minimum steps between reprints
        min_interval: Minimum seconds between reprints
    """
    return Tracked(items, **opts)
