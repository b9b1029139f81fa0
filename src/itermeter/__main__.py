"""Demo: `python -m itermeter`."""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

from itermeter import tracked
from itermeter.utils.console import cout, graceful_exit
from itermeter.utils.display import section_header

if TYPE_CHECKING:
    from collections.abc import Iterator


def _numbers(n: int) -> Iterator[int]:
    yield from range(n)


def main() -> None:
    section_header("Known total")
    for _ in tracked(range(40), desc="Sleeping", file=cout, leave=True, min_interval=0.1):
        time.sleep(0.05)

    section_header("Unknown total")
    for _ in tracked(_numbers(40), desc="Generating", file=cout, leave=True, min_interval=0.1):
        time.sleep(0.05)

    section_header("Erased on finish")
    for _ in tracked(range(40), desc="Vanishing", file=cout, min_interval=0.1):
        time.sleep(0.05)
    cout("[dim]done[/]")


if __name__ == "__main__":
    with graceful_exit("demo stopped"):
        main()
