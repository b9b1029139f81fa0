from __future__ import annotations

from typing import IO, Annotated, TypedDict

from annotated_types import Ge
from rich.console import Console

Uint = Annotated[int, Ge(0)]
Ufloat = Annotated[float, Ge(0.0)]
PosInt = Annotated[int, Ge(1)]
Sink = IO[str] | Console


class MeterOptions(TypedDict, total=False):
    """Keyword options accepted by `tracked` and `Tracked`."""

    desc: str | None  # rendered as "<desc>: " before every line
    total: Uint | None  # overrides size detection
    file: Sink | None  # defaults to stderr
    leave: bool  # keep the final line on screen
    min_iters: PosInt
    min_interval: Ufloat  # seconds
