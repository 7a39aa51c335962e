"""
Sharded Estimation
==================
Splits a large number of drops across worker threads.

Each shard owns a Simulator with its own counters and its own random stream
spawned from a single ``numpy.random.SeedSequence``. The field is shared
read-only. Counters are merged by summation once every shard has finished,
so only the merged estimate is meaningful, not a per-drop sequence.
"""
from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
import logging
from typing import TYPE_CHECKING, Iterable, Optional

import numpy as np

from buffonpi.exceptions import InvalidConfiguration
from buffonpi.model.state import estimate_pi, format_estimate
from buffonpi.solvers.simulator import Simulator, validate_drop_count

if TYPE_CHECKING:
    from buffonpi.model.field import Field

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShardResult:
    """Counters of one shard, or of several shards merged together."""
    throw_count: int = 0
    cross_count: int = 0

    @property
    def pi_estimate(self) -> float:
        return estimate_pi(self.throw_count, self.cross_count)

    @staticmethod
    def combine(results: Iterable[ShardResult]) -> ShardResult:
        throws = 0
        crosses = 0
        for result in results:
            throws += result.throw_count
            crosses += result.cross_count
        return ShardResult(throw_count=throws, cross_count=crosses)


def split_drops(total_drops: int, shards: int) -> list[int]:
    """Divide ``total_drops`` into ``shards`` near-equal parts."""
    base, extra = divmod(total_drops, shards)
    return [base + 1 if i < extra else base for i in range(shards)]


def _run_shard(field: Field, drops: int, seed: np.random.SeedSequence) -> ShardResult:
    simulator = Simulator(field, rng=np.random.default_rng(seed))
    state = simulator.run_batch(drops)
    return ShardResult(throw_count=state.throw_count, cross_count=state.cross_count)


def estimate_sharded(
    field: Field,
    total_drops: int,
    shards: int = 4,
    seed: Optional[int] = None,
) -> ShardResult:
    """
    Estimate pi with ``total_drops`` toothpicks spread over ``shards`` workers.

    Args:
        field: Field shared by all shards.
        total_drops: Total number of toothpicks.
        shards: Number of independent simulators.
        seed: Root seed; the same seed and shard count give the same result.

    Returns:
        Merged counters of all shards.
    """
    total_drops = validate_drop_count(total_drops)
    if isinstance(shards, bool) or not isinstance(shards, int) or shards < 1:
        raise InvalidConfiguration(f"Number of shards must be a positive integer, got {shards!r}.")

    parts = split_drops(total_drops, shards)
    seeds = np.random.SeedSequence(seed).spawn(shards)
    logger.info(f"Running {total_drops} drops in {shards} shards: {parts}")

    with ThreadPoolExecutor(max_workers=shards) as executor:
        results = list(executor.map(_run_shard, [field] * shards, parts, seeds))

    merged = ShardResult.combine(results)
    logger.info(
        f"Merged {merged.throw_count} throws, {merged.cross_count} crossings, "
        f"pi = {format_estimate(merged.pi_estimate)}"
    )
    return merged
