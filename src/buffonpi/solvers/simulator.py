from __future__ import annotations

from enum import Enum
import logging
import math
from typing import TYPE_CHECKING, Callable, Iterator, Optional

import numpy as np

from buffonpi.exceptions import InvalidConfiguration
from buffonpi.model.geometry_utils import (
    covered_interval,
    crossings_mask,
    horizontal_span,
    interval_hits_line,
    is_backwards,
)
from buffonpi.model.state import DropOutcome, SimulationState, Snapshot, format_estimate

if TYPE_CHECKING:
    from buffonpi.model.field import Field

logger = logging.getLogger(__name__)

FULL_TURN = 360

# Drops evaluated at once by run_batch, bounds the (drops x lines) work array
BATCH_CHUNK = 100_000


def validate_drop_count(total_drops: int) -> int:
    if isinstance(total_drops, bool) or not isinstance(total_drops, (int, np.integer)):
        raise InvalidConfiguration(f"Number of drops must be an integer, got {total_drops!r}.")
    if total_drops < 0:
        raise InvalidConfiguration(f"Number of drops must not be negative, got {total_drops}.")
    return int(total_drops)


def whole_unit(value: float, low: float, high: float) -> float:
    """Floor a draw from [low, high) to a whole unit without leaving the range."""
    floored = max(math.floor(value), math.ceil(low))
    if floored >= high:
        # no whole unit inside the range
        return value
    return float(floored)


def whole_units(values: np.ndarray, low: float, high: float) -> np.ndarray:
    """Vectorised :func:`whole_unit`."""
    floored = np.maximum(np.floor(values), math.ceil(low))
    return np.where(floored < high, floored, values)


class SimulatorPhase(Enum):
    IDLE = "idle"
    RUNNING = "running"


class Simulator:
    """
    Class for the Buffon's needle simulation.

    Owns the counters of one run. Every drop is sampled at random, tested
    against the guide lines of the field and folded into the counters.
    """

    def __init__(
        self,
        field: Field,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None,
        on_drop: Optional[Callable[[Snapshot], None]] = None,
    ) -> None:
        """
        Initialize the simulator with a field.

        Args:
            field: The guide lines and toothpick length.
            rng: Random generator to draw from. Takes precedence over ``seed``.
            seed: Seed for a fresh ``numpy.random.default_rng``.
            on_drop: Sink called with every snapshot produced by :meth:`step`.
        """
        self.field = field
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.on_drop = on_drop
        self._state = SimulationState()

    @property
    def state(self) -> SimulationState:
        """Copy of the counters, the live state is only changed by the simulator."""
        return SimulationState(self._state.throw_count, self._state.cross_count)

    @property
    def throw_count(self) -> int:
        return self._state.throw_count

    @property
    def cross_count(self) -> int:
        return self._state.cross_count

    @property
    def pi_estimate(self) -> float:
        return self._state.pi_estimate

    @property
    def phase(self) -> SimulatorPhase:
        return SimulatorPhase.IDLE if self._state.throw_count == 0 else SimulatorPhase.RUNNING

    def random_drop(self) -> tuple[float, float, float]:
        """
        Get random coordinates and angle of a toothpick.

        Coordinates are floored to whole units inside their range. The lower
        bound of ``y`` keeps half a toothpick of room at the top edge so a
        drawn toothpick stays inside the playground; ``y`` plays no part in
        the crossing test.

        Returns:
            Tuple ``(x, y, angle_degrees)``.
        """
        min_x = self.field.origin_x
        max_x = self.field.origin_x + self.field.extent_width
        min_y = self.field.origin_y + self.field.segment_length / 2
        max_y = self.field.extent_height

        x = whole_unit(self.rng.random() * (max_x - min_x) + min_x, min_x, max_x)
        y = whole_unit(self.rng.random() * (max_y - min_y) + min_y, min_y, max_y)
        angle = float(math.floor(self.rng.random() * FULL_TURN))
        return x, y, angle

    def test_crossing(self, x: float, angle_degrees: float) -> bool:
        """
        Check if a toothpick crossed a line.

        Args:
            x: X coordinate of the toothpick's reference end.
            angle_degrees: Orientation of the toothpick.

        Returns:
            True if any guide line lies within the toothpick's horizontal extent.
        """
        return self.evaluate(x, 0.0, angle_degrees).crossed

    def evaluate(self, x: float, y: float, angle_degrees: float) -> DropOutcome:
        span = horizontal_span(self.field.segment_length, angle_degrees)
        interval = covered_interval(x, span, is_backwards(angle_degrees))
        crossed = interval_hits_line(interval, self.field.line_positions)
        return DropOutcome(x=x, y=y, angle_degrees=angle_degrees, crossed=crossed, horizontal_span=span)

    def step(self) -> Snapshot:
        """Throw one toothpick and return the updated values."""
        x, y, angle = self.random_drop()
        outcome = self.evaluate(x, y, angle)
        self._state.record(outcome.crossed)

        snapshot = self._state.snapshot(outcome)
        logger.debug(
            f"Drop #{snapshot.throw_count}: x={x}, y={y}, angle={angle}, crossed={outcome.crossed}, "
            f"pi={snapshot.pi_display}"
        )
        if self.on_drop is not None:
            self.on_drop(snapshot)
        return snapshot

    def run(self, total_drops: int) -> Iterator[Snapshot]:
        """
        Lazily throw ``total_drops`` toothpicks.

        The counters are never reset, so a second call continues the same run.

        Args:
            total_drops: Number of toothpicks to throw.

        Returns:
            Iterator yielding one snapshot per drop.

        Raises:
            InvalidConfiguration: If ``total_drops`` is negative or not an integer.
        """
        total_drops = validate_drop_count(total_drops)
        logger.info(f"Throwing {total_drops} toothpicks...")
        return self._drops(total_drops)

    def _drops(self, total_drops: int) -> Iterator[Snapshot]:
        for _ in range(total_drops):
            yield self.step()
        logger.info(
            f"Finished: {self._state.throw_count} throws, {self._state.cross_count} crossings, "
            f"pi = {format_estimate(self._state.pi_estimate)}"
        )

    def run_batch(self, total_drops: int, chunk_size: int = BATCH_CHUNK) -> SimulationState:
        """
        Throw ``total_drops`` toothpicks without producing snapshots.

        Drops are drawn and tested as numpy arrays in chunks of ``chunk_size``.
        Only ``x`` and the angle are sampled since ``y`` does not affect the result.

        Args:
            total_drops: Number of toothpicks to throw.
            chunk_size: Maximum number of drops evaluated at once.

        Returns:
            Copy of the counters after the batch.
        """
        total_drops = validate_drop_count(total_drops)
        if chunk_size <= 0:
            raise InvalidConfiguration(f"Chunk size must be positive, got {chunk_size}.")

        min_x = self.field.origin_x
        max_x = min_x + self.field.extent_width

        remaining = total_drops
        while remaining > 0:
            n = min(remaining, chunk_size)
            xs = whole_units(self.rng.random(n) * (max_x - min_x) + min_x, min_x, max_x)
            angles = np.floor(self.rng.random(n) * FULL_TURN)
            crossed = crossings_mask(xs, angles, self.field.segment_length, self.field.line_positions)
            self._state.add(n, int(np.count_nonzero(crossed)))
            remaining -= n

        logger.info(
            f"Batch of {total_drops} drops done: {self._state.throw_count} throws, "
            f"{self._state.cross_count} crossings, pi = {format_estimate(self._state.pi_estimate)}"
        )
        return self.state
