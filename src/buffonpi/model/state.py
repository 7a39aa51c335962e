"""
Simulation State (Data Model)
=============================
This module defines the data produced while toothpicks are being thrown.

Why is this file needed?
------------------------
1. State Management: The two counters of a run live in one place and are
   changed only by the Simulator.
2. Data Contract: Views and loggers receive immutable snapshots instead of
   a reference to the live counters.

Classes:
    DropOutcome: One random placement of the toothpick and its result.
    SimulationState: The mutable counters of a run.
    Snapshot: Values after a single drop, handed to presentation code.
"""
from __future__ import annotations

from dataclasses import dataclass

# Reported while no toothpick has crossed a line yet
UNDEFINED_ESTIMATE = 0.0

# Digits shown when the estimate is displayed
DISPLAY_DECIMALS = 5


def estimate_pi(throw_count: int, cross_count: int) -> float:
    """
    N - all toothpicks
    C - toothpicks crossing a line
    P = 2N/C
    """
    if cross_count == 0:
        return UNDEFINED_ESTIMATE
    return (2 * throw_count) / cross_count


def format_estimate(value: float) -> str:
    return f"{value:.{DISPLAY_DECIMALS}f}"


@dataclass(frozen=True)
class DropOutcome:
    """A single toothpick placement."""
    x: float
    y: float
    angle_degrees: float
    crossed: bool
    horizontal_span: float = 0.0


@dataclass(frozen=True)
class Snapshot:
    """Values after one drop."""
    x: float
    y: float
    angle_degrees: float
    crossed: bool
    throw_count: int
    cross_count: int
    pi_estimate: float

    @property
    def pi_display(self) -> str:
        return format_estimate(self.pi_estimate)


@dataclass
class SimulationState:
    throw_count: int = 0
    cross_count: int = 0

    @property
    def pi_estimate(self) -> float:
        return estimate_pi(self.throw_count, self.cross_count)

    def record(self, crossed: bool) -> None:
        self.throw_count += 1
        if crossed:
            self.cross_count += 1

    def add(self, throws: int, crosses: int) -> None:
        """Fold a block of drops into the counters."""
        if crosses > throws or throws < 0 or crosses < 0:
            raise ValueError(f"Invalid block of drops: {throws} throws, {crosses} crosses.")
        self.throw_count += throws
        self.cross_count += crosses

    def snapshot(self, outcome: DropOutcome) -> Snapshot:
        return Snapshot(
            x=outcome.x,
            y=outcome.y,
            angle_degrees=outcome.angle_degrees,
            crossed=outcome.crossed,
            throw_count=self.throw_count,
            cross_count=self.cross_count,
            pi_estimate=self.pi_estimate,
        )
