from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from math import sqrt, sin, pi
import numpy as np

if TYPE_CHECKING:
    from numpy import typing as npt

# Rounding that keeps line positions and spans reproducible
LINE_POSITION_DECIMALS = 2
SPAN_DECIMALS = 10

RIGHT_ANGLE = 90.0


def deg2rad(degrees: float) -> float:
    return degrees * pi / 180


def is_backwards(angle_degrees: float) -> bool:
    """True if the free end of the toothpick points towards decreasing x."""
    return 90 < angle_degrees < 270


def fold_angle(angle_degrees: float) -> float:
    """Fold an angle in [0, 360) into [0, 180]; a segment at a and a + 180 projects the same."""
    return angle_degrees if angle_degrees <= 180 else abs(angle_degrees - 180)


def horizontal_span(length: float, angle_degrees: float) -> float:
    """
    Length of the toothpick projected onto the x axis.

    The toothpick is the hypotenuse of a right triangle. The leg opposite the
    folded angle follows from the sine rule, the horizontal leg from Pythagoras.

    Args:
        length: Toothpick length.
        angle_degrees: Orientation in degrees.

    Returns:
        The horizontal span, rounded to ``SPAN_DECIMALS`` digits.
    """
    reflex = fold_angle(angle_degrees)
    opposite = (length / sin(deg2rad(RIGHT_ANGLE))) * sin(deg2rad(reflex))
    # opposite can overshoot length by one ulp near 90 degrees
    span = sqrt(max(length ** 2 - opposite ** 2, 0.0))
    return round(span, SPAN_DECIMALS)


def covered_interval(x: float, span: float, backwards: bool) -> tuple[float, float]:
    """Closed x interval covered by a toothpick whose reference end sits at ``x``."""
    if backwards:
        return x - span, x
    return x, x + span


def interval_hits_line(interval: tuple[float, float], line_positions: Sequence[float]) -> bool:
    """Bounds are inclusive, a line touching either end counts as a crossing."""
    a, b = interval
    for position in line_positions:
        if a <= position <= b:
            return True
    return False


def horizontal_spans(length: float, angles: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
    """Vectorised :func:`horizontal_span` for an array of angles in degrees."""
    reflex = np.where(angles <= 180, angles, np.abs(angles - 180))
    opposite = (length / np.sin(np.deg2rad(RIGHT_ANGLE))) * np.sin(np.deg2rad(reflex))
    span = np.sqrt(np.clip(length ** 2 - opposite ** 2, 0.0, None))
    return np.round(span, SPAN_DECIMALS)


def crossings_mask(
    xs: npt.NDArray[np.float64],
    angles: npt.NDArray[np.float64],
    length: float,
    line_positions: Sequence[float],
) -> npt.NDArray[np.bool_]:
    """
    Vectorised crossing test.

    Args:
        xs: Reference x coordinates of the drops, shape (n,).
        angles: Orientations in degrees, shape (n,).
        length: Toothpick length.
        line_positions: X coordinates of the guide lines.

    Returns:
        Boolean array of shape (n,), True where the drop crosses a line.
    """
    spans = horizontal_spans(length, angles)
    backwards = (angles > 90) & (angles < 270)
    lower = np.where(backwards, xs - spans, xs)
    upper = np.where(backwards, xs, xs + spans)

    lines = np.asarray(line_positions, dtype=np.float64)
    # (n, 1) against (1, m)
    hits = (lower[:, None] <= lines[None, :]) & (lines[None, :] <= upper[:, None])
    return hits.any(axis=1)
