"""
Field Geometry (Data Model)
===========================
This module defines the fixed layout of guide lines a toothpick is dropped on.

Why is this file needed?
------------------------
1. Immutability: The line layout and the effective toothpick length are
   derived once and never change during a run, so the crossing test stays
   valid for every drop.
2. Decoupling: A playground view reads the derived geometry from here
   instead of computing it from its own widget sizes.

Classes:
    Field: Frozen container of the line positions and extents.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging

from buffonpi.exceptions import InvalidConfiguration
from buffonpi.model.geometry_utils import LINE_POSITION_DECIMALS

logger = logging.getLogger(__name__)


def clamp_length(requested_length: float, line_count: int, max_total_width: float) -> float:
    """
    Shrink the toothpick so that all lines fit into the maximum width.

    Args:
        requested_length: Desired toothpick length (and line spacing).
        line_count: Number of guide lines.
        max_total_width: Maximum width available for the whole field.

    Returns:
        The requested length, or ``max_total_width / line_count`` when
        ``requested_length * line_count`` exceeds the maximum width.
    """
    actual_width = requested_length * line_count
    if actual_width > max_total_width:
        return max_total_width / line_count
    return requested_length


def compute_line_positions(origin: float, spacing: float, line_count: int) -> tuple[float, ...]:
    """Place ``line_count`` lines starting at ``origin``, each one ``spacing`` after the previous."""
    positions = [origin]
    for _ in range(1, line_count):
        positions.append(round(positions[-1] + spacing, LINE_POSITION_DECIMALS))
    return tuple(positions)


@dataclass(frozen=True)
class Field:
    """
    Guide lines and toothpick length for one simulation run.

    Use :meth:`Field.create` rather than the constructor, it validates the
    input and derives the line layout.
    """
    segment_length: float
    line_count: int
    line_positions: tuple[float, ...]
    extent_height: float
    origin_x: float = 0.0
    origin_y: float = 0.0

    @property
    def extent_width(self) -> float:
        return self.segment_length * (self.line_count - 1)

    @classmethod
    def create(
        cls,
        requested_length: float,
        line_count: int,
        max_total_width: float,
        extent_height: float = 600.0,
        origin_x: float = 0.0,
        origin_y: float = 0.0,
    ) -> Field:
        """
        Build a field from the setup parameters.

        Args:
            requested_length: Desired toothpick length, also the line spacing.
            line_count: Number of parallel guide lines, at least 2.
            max_total_width: Width limit used to clamp the toothpick length.
            extent_height: Height of the area drops are sampled from.
            origin_x: X coordinate of the first line.
            origin_y: Top edge of the sampling area.

        Returns:
            The immutable field.

        Raises:
            InvalidConfiguration: If any of the sizes is not usable.
        """
        if isinstance(line_count, bool) or not isinstance(line_count, int):
            raise InvalidConfiguration(f"Line count must be an integer, got {line_count!r}.")
        if line_count < 2:
            raise InvalidConfiguration(f"At least 2 lines are required, got {line_count}.")
        if requested_length <= 0:
            raise InvalidConfiguration(f"Toothpick length must be positive, got {requested_length}.")
        if max_total_width <= 0:
            raise InvalidConfiguration(f"Maximum width must be positive, got {max_total_width}.")
        if extent_height <= 0:
            raise InvalidConfiguration(f"Playground height must be positive, got {extent_height}.")

        length = clamp_length(float(requested_length), line_count, float(max_total_width))
        if length != requested_length:
            logger.info(f"Toothpick length reduced from {requested_length} to {length} to fit {line_count} lines.")
        if origin_y + length / 2 >= extent_height:
            raise InvalidConfiguration(
                f"Playground height {extent_height} leaves no room for a toothpick of length {length}."
            )

        positions = compute_line_positions(float(origin_x), length, line_count)
        logger.debug(f"Line positions: {positions}")

        return cls(
            segment_length=length,
            line_count=line_count,
            line_positions=positions,
            extent_height=float(extent_height),
            origin_x=float(origin_x),
            origin_y=float(origin_y),
        )
