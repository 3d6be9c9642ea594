"""Unit tests for coordinates of query points lying on an edge."""

import pytest

from cubicmvc.core.boundary_coords import boundary_coordinates

SQUARE = [0j, complex(4, 0), complex(4, 4), complex(0, 4)]


class TestBoundaryCoordinates:
    """Tests for the cubic Hermite blend along an edge."""

    def test_midpoint(self):
        coords = boundary_coordinates(SQUARE, complex(2, 0), 4, 0, 0, 1)
        assert coords.value_coords == pytest.approx([0.5, 0.5, 0.0, 0.0])
        assert coords.normal_grad_coords == [0.0] * 8
        assert coords.tangent_grad_coords == pytest.approx([0.5, 0.5] + [0.0] * 6)
        assert coords.boundary_edge == 0

    def test_hermite_basis(self):
        """At parameter t the value weights are the cubic Hermite basis."""
        t = 0.25
        coords = boundary_coordinates(SQUARE, complex(4, 4 * t), 4, 1, 1, 2)
        assert coords.value_coords[1] == pytest.approx(2 * t**3 - 3 * t**2 + 1)
        assert coords.value_coords[2] == pytest.approx(-2 * t**3 + 3 * t**2)
        assert coords.tangent_grad_coords[2] == pytest.approx(4 * t * (1 - t) ** 2)
        assert coords.tangent_grad_coords[3] == pytest.approx(4 * t**2 * (1 - t))

    def test_only_edge_slots_set(self):
        coords = boundary_coordinates(SQUARE, complex(0, 1), 4, 3, 3, 0)
        assert coords.value_coords[1] == 0.0
        assert coords.value_coords[2] == 0.0
        assert coords.value_sum == pytest.approx(1.0)
        assert [k for k, w in enumerate(coords.tangent_grad_coords) if w] == [6, 7]

    def test_wraparound_edge_indexes_vertices(self):
        """The closing edge (3, 0) writes to vertices 3 and 0."""
        coords = boundary_coordinates(SQUARE, complex(0, 3), 4, 3, 3, 0)
        assert coords.value_coords[3] > coords.value_coords[0] > 0.0
