import numpy as np
import pytest

from buffonpi.model.geometry_utils import (
    covered_interval,
    crossings_mask,
    fold_angle,
    horizontal_span,
    horizontal_spans,
    interval_hits_line,
    is_backwards,
)


def test_span_horizontal_toothpick():
    assert horizontal_span(100, 0) == 100
    assert horizontal_span(37.5, 0) == 37.5


def test_span_vertical_toothpick():
    assert horizontal_span(100, 90) == pytest.approx(0, abs=1e-9)
    assert horizontal_span(100, 270) == pytest.approx(0, abs=1e-9)


def test_span_sixty_degrees():
    assert horizontal_span(100, 60) == pytest.approx(50)


@pytest.mark.parametrize("angle", range(0, 180, 7))
def test_span_symmetric_under_half_turn(angle):
    assert horizontal_span(100, angle) == pytest.approx(horizontal_span(100, angle + 180))
    if angle != 90:
        assert is_backwards(angle) != is_backwards(angle + 180)


def test_fold_angle():
    assert fold_angle(0) == 0
    assert fold_angle(180) == 180
    assert fold_angle(181) == 1
    assert fold_angle(359) == 179


def test_backwards():
    assert not is_backwards(90)
    assert is_backwards(91)
    assert is_backwards(269)
    assert not is_backwards(270)


def test_covered_interval():
    assert covered_interval(50, 100, backwards=False) == (50, 150)
    assert covered_interval(50, 100, backwards=True) == (-50, 50)


def test_interval_bounds_inclusive():
    assert interval_hits_line((0, 100), [100])
    assert interval_hits_line((100, 100), [100])
    assert not interval_hits_line((10, 10), [0, 100])


def test_vectorised_spans_match():
    angles = np.arange(360, dtype=np.float64)
    expected = [horizontal_span(100, a) for a in range(360)]
    np.testing.assert_allclose(horizontal_spans(100, angles), expected, atol=1e-9)


def test_vectorised_crossings_match_scalar_test(field):
    xs, angles = np.meshgrid(np.arange(0, 900, 7, dtype=np.float64), np.arange(360, dtype=np.float64))
    xs = xs.ravel()
    angles = angles.ravel()

    mask = crossings_mask(xs, angles, field.segment_length, field.line_positions)

    expected = []
    for x, angle in zip(xs, angles):
        span = horizontal_span(field.segment_length, angle)
        expected.append(interval_hits_line(covered_interval(x, span, is_backwards(angle)), field.line_positions))
    assert mask.tolist() == expected
