import pytest

from triggerfx.core.numbers import clamp


@pytest.mark.parametrize("p", [0, 0.0, 0.5, 7, 19.99, 20, 20.0])
def test_clamp_in_range_passes_through(p):
    assert clamp(p, 0.0, 20.0) == p


@pytest.mark.parametrize("p", [-0.001, -1, -1000])
def test_clamp_below_range(p):
    assert clamp(p, 0.0, 20.0) == 0.0


@pytest.mark.parametrize("p", [20.001, 25, 1e9])
def test_clamp_above_range(p):
    assert clamp(p, 0.0, 20.0) == 20.0


def test_clamp_degenerate_range():
    assert clamp(5, 3, 3) == 3
