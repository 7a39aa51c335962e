"""
Drop Pacing
===========
Throttles a sequence of snapshots for animated display.

Pacing only delays consumption, the values of the sequence are untouched.
The clock is injected so that tests and Qt threads can supply their own.
"""
from __future__ import annotations

import time
from typing import Callable, Iterable, Iterator, TypeVar

from buffonpi.exceptions import InvalidConfiguration

T = TypeVar("T")


def ms_to_seconds(milliseconds: float) -> float:
    return milliseconds / 1000.0


def paced(
    items: Iterable[T],
    delay: float,
    sleep: Callable[[float], None] = time.sleep,
) -> Iterator[T]:
    """
    Yield ``items`` one by one, sleeping ``delay`` seconds after each.

    Args:
        items: Any iterable, typically ``Simulator.run(...)``.
        delay: Pause after every item in seconds. ``0`` disables pacing.
        sleep: Clock used to wait.
    """
    if delay < 0:
        raise InvalidConfiguration(f"Delay must not be negative, got {delay}.")
    return _paced(items, delay, sleep)


def _paced(items: Iterable[T], delay: float, sleep: Callable[[float], None]) -> Iterator[T]:
    for item in items:
        yield item
        if delay > 0:
            sleep(delay)
