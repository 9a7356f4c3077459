"""Wall-clock pacing for replaying a run in real time."""

from __future__ import annotations

import time
from typing import Callable, Iterable, Iterator, TypeVar

T = TypeVar("T")


def paced(
    records: Iterable[T],
    delay_s: float,
    sleep: Callable[[float], None] = time.sleep,
) -> Iterator[T]:
    """Re-yield ``records``, sleeping ``delay_s`` between successive elements."""
    first = True
    for record in records:
        if not first and delay_s > 0:
            sleep(delay_s)
        first = False
        yield record
