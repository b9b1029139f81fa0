"""Console printing (shorthands for `cout.print` and `cerr.print`) + sink handling."""

from __future__ import annotations

import sys
from contextlib import contextmanager
from typing import IO, TYPE_CHECKING, Any, TypedDict, Unpack

from rich.console import Console

if TYPE_CHECKING:
    from collections.abc import Generator

    from rich.console import JustifyMethod, OverflowMethod
    from rich.style import Style

    from .types import Sink


class RichConsolePrintKwargs(TypedDict, total=False):
    """Typed keyword arguments for `rich.console.print`."""

    sep: str
    end: str
    style: str | Style | None
    justify: JustifyMethod | None
    overflow: OverflowMethod | None
    no_wrap: bool | None
    emoji: bool | None
    markup: bool | None
    highlight: bool | None
    width: int | None
    height: int | None
    crop: bool
    soft_wrap: bool | None
    new_line_start: bool


class _Console(Console):
    def __call__(
        self,
        *objects: Any,  # noqa: ANN401
        **kwargs: Unpack[RichConsolePrintKwargs],
    ) -> None:
        self.print(*objects, **kwargs)


class _ErrConsole(Console):
    def __call__(
        self,
        *objects: Any,  # noqa: ANN401
        exit_code: int | None = None,
        prefix: str = "[bold red]error:[/]",
        **kwargs: Unpack[RichConsolePrintKwargs],
    ) -> None:
        self.print(prefix, *objects, **kwargs)
        if exit_code is not None:
            sys.exit(exit_code)


cout = _Console()
cerr = _ErrConsole(stderr=True)


@contextmanager
def graceful_exit(msg: str = "exiting") -> Generator[None]:
    """Catch KeyboardInterrupt & exit."""
    try:
        yield
    except KeyboardInterrupt:
        cerr(msg, exit_code=130, prefix="[bold yellow]>[/]")


def resolve_sink(file: Sink | None, /) -> IO[str]:
    """Return the raw text stream behind `file` (stderr if `None`).

    A rich `Console` is unwrapped to its `file`, so carriage returns reach the
    terminal untouched instead of going through rich's renderer.
    """
    if file is None:
        return sys.stderr
    if isinstance(file, Console):
        return file.file
    return file
