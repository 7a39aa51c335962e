import pytest

from buffonpi.model.field import Field


@pytest.fixture
def field() -> Field:
    """Ten lines, 100 apart, starting at x = 0."""
    return Field.create(requested_length=100, line_count=10, max_total_width=1400, extent_height=600)
