"""Meter formatting."""

from __future__ import annotations

from typing import Final

from rich.rule import Rule

from .console import cout

BAR_WIDTH: Final = 10
BAR_FILL: Final = "#"
BAR_EMPTY: Final = "-"


def section_header(title: str) -> None:
    """Print a styled section header."""

    cout()
    cout(Rule(f"[dim]{title}[/]", style="dim"))
    cout()


def format_interval(seconds: float) -> str:
    """Format seconds as `MM:SS`, or `H:MM:SS` once an hour has passed."""
    mins, secs = divmod(int(seconds), 60)
    hrs, mins = divmod(mins, 60)

    if hrs > 0:
        return f"{hrs:d}:{mins:02d}:{secs:02d}"
    return f"{mins:02d}:{secs:02d}"


def format_meter(n: int, total: int | None, elapsed: float) -> str:
    """Format a count + elapsed time as a progress line.

    Args:
        n: Number of finished iterations
        total: Expected number of iterations (`None` if unknown)
        elapsed: Seconds since the first iteration started

    A count past `total` drops the bar, since it cannot show more than 100%.
    """
    if total is not None and n > total:
        total = None

    elapsed_str = format_interval(elapsed)
    rate = f"{n / elapsed:5.2f}" if elapsed > 0 else "?"

    if total is None:
        return f"{n:d} [elapsed: {elapsed_str}, {rate} iters/sec]"

    # An empty sequence is complete as soon as it starts
    frac = n / total if total else 1.0

    filled = int(frac * BAR_WIDTH)
    bar = BAR_FILL * filled + BAR_EMPTY * (BAR_WIDTH - filled)
    percentage = f"{int(frac * 100):3d}%"
    left_str = format_interval(elapsed / n * (total - n)) if n > 0 else "?"

    stats = f"{n:d}/{total:d} {percentage}"
    return f"|{bar}| {stats} [elapsed: {elapsed_str} left: {left_str}, {rate} iters/sec]"
