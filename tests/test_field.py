import dataclasses

import pytest

from buffonpi.exceptions import InvalidConfiguration
from buffonpi.model.field import Field, clamp_length, compute_line_positions


def test_line_positions(field):
    assert field.line_positions == tuple(float(100 * i) for i in range(10))
    assert field.segment_length == 100
    assert field.extent_width == 900
    assert field.extent_height == 600


@pytest.mark.parametrize("length, count, max_width", [
    (100, 2, 1400),
    (100, 10, 1400),
    (33.337, 7, 1000),
    (150, 3, 400),
    (200, 20, 1400),
    (0.5, 50, 1400),
])
def test_line_positions_uniform(length, count, max_width):
    field = Field.create(length, count, max_width)
    positions = field.line_positions
    assert len(positions) == count
    for previous, current in zip(positions, positions[1:]):
        assert current > previous
        assert current - previous == pytest.approx(field.segment_length, abs=1e-2)


def test_length_clamped_to_max_width():
    field = Field.create(requested_length=200, line_count=10, max_total_width=1400)
    assert field.segment_length == 1400 / 10
    assert field.line_positions[1] == 140.0


def test_length_kept_when_it_fits():
    assert clamp_length(100.0, 10, 1000.0) == 100.0
    assert clamp_length(101.0, 10, 1000.0) == 100.0
    assert clamp_length(150.0, 3, 400.0) == 400.0 / 3


def test_positions_rounded_to_two_decimals():
    positions = compute_line_positions(0.0, 400.0 / 3, 3)
    assert positions == (0.0, 133.33, 266.66)


def test_origin_offset():
    field = Field.create(100, 3, 1400, origin_x=8.0, origin_y=8.0)
    assert field.line_positions == (8.0, 108.0, 208.0)
    assert field.extent_width == 200


@pytest.mark.parametrize("length, count, max_width, height", [
    (100, 1, 1400, 600),
    (100, 0, 1400, 600),
    (100, 2.5, 1400, 600),
    (0, 10, 1400, 600),
    (-5, 10, 1400, 600),
    (100, 10, 0, 600),
    (100, 10, 1400, 0),
    (100, 10, 1400, 50),
])
def test_invalid_configuration(length, count, max_width, height):
    with pytest.raises(InvalidConfiguration):
        Field.create(length, count, max_width, extent_height=height)


def test_invalid_configuration_is_value_error():
    with pytest.raises(ValueError):
        Field.create(100, 1, 1400)


def test_field_is_immutable(field):
    with pytest.raises(dataclasses.FrozenInstanceError):
        field.segment_length = 50
