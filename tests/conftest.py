"""Shared fixtures for cubicmvc tests."""

import pytest

from cubicmvc.domain import Boundary


@pytest.fixture
def square() -> list[tuple[float, float]]:
    """Counter-clockwise 4x4 square."""
    return [(0.0, 0.0), (4.0, 0.0), (4.0, 4.0), (0.0, 4.0)]


@pytest.fixture
def pentagon() -> list[tuple[float, float]]:
    """Convex counter-clockwise pentagon."""
    return [(0.0, 0.0), (5.0, 0.0), (6.0, 3.0), (3.0, 6.0), (-1.0, 4.0)]


@pytest.fixture
def l_shape() -> list[tuple[float, float]]:
    """Non-convex counter-clockwise L shape."""
    return [(0.0, 0.0), (4.0, 0.0), (4.0, 2.0), (2.0, 2.0), (2.0, 4.0), (0.0, 4.0)]


@pytest.fixture
def square_with_hole() -> Boundary:
    """8x8 square (counter-clockwise) with a 2x2 clockwise hole in the middle."""
    outer = [(0.0, 0.0), (8.0, 0.0), (8.0, 8.0), (0.0, 8.0)]
    hole = [(3.0, 3.0), (3.0, 5.0), (5.0, 5.0), (5.0, 3.0)]
    return Boundary.from_loops(outer, hole)
