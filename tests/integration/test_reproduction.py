"""End-to-end precision tests.

Interpolating vertex values and gradients of a function with the coordinates
must reproduce:
- linear and quadratic functions anywhere in the domain, holes included
- cubic functions along the boundary, where the coordinates reduce to the
  1D Hermite blend
"""

import pytest

from cubicmvc import Boundary, CubicMVCEvaluator, cubic_mvc


def linear(x, y):
    return 2.0 + 3.0 * x - y


def linear_grad(x, y):
    return (3.0, -1.0)


def quadratic(x, y):
    return x * x - 0.7 * x * y + 2.0 * y * y + x


def quadratic_grad(x, y):
    return (2.0 * x - 0.7 * y + 1.0, -0.7 * x + 4.0 * y)


def cubic(x, y):
    return x**3 - 2.0 * x * y * y + y + 0.5 * x * x


def cubic_grad(x, y):
    return (3.0 * x * x - 2.0 * y * y + x, -4.0 * x * y + 1.0)


def interpolate(boundary, coords, f, grad):
    values = [f(p.x, p.y) for p in boundary.vertices]
    gradients = [grad(p.x, p.y) for p in boundary.vertices]
    return coords.interpolate(boundary, values, gradients)


PENTAGON = [(0.0, 0.0), (5.0, 0.0), (6.0, 3.0), (3.0, 6.0), (-1.0, 4.0)]
L_SHAPE = [(0.0, 0.0), (4.0, 0.0), (4.0, 2.0), (2.0, 2.0), (2.0, 4.0), (0.0, 4.0)]
TRIANGLE = [(0.0, 0.0), (3.0, 0.0), (0.0, 3.0)]


class TestLinearPrecision:
    """Linear functions are reproduced at interior points."""

    @pytest.mark.parametrize(
        ("polygon", "query"),
        [
            (PENTAGON, (2.5, 2.0)),
            (PENTAGON, (0.3, 0.4)),
            (L_SHAPE, (1.0, 1.0)),
            (L_SHAPE, (1.0, 2.0)),
            (L_SHAPE, (3.0, 1.5)),
            (TRIANGLE, (1.0, 1.0)),
        ],
    )
    def test_simple_polygon(self, polygon, query):
        boundary = Boundary.from_polygon(polygon)
        coords = cubic_mvc(polygon, query)
        result = interpolate(boundary, coords, linear, linear_grad)
        assert result == pytest.approx(linear(*query), rel=1e-9, abs=1e-9)

    @pytest.mark.parametrize("query", [(1.5, 4.0), (6.0, 6.5), (4.0, 1.0), (2.0, 6.0)])
    def test_domain_with_hole(self, square_with_hole, query):
        coords = CubicMVCEvaluator(square_with_hole).evaluate(query)
        assert coords.value_sum == pytest.approx(1.0, abs=1e-10)
        result = interpolate(square_with_hole, coords, linear, linear_grad)
        assert result == pytest.approx(linear(*query), rel=1e-9, abs=1e-9)


class TestQuadraticPrecision:
    """Quadratic functions are reproduced at interior points."""

    @pytest.mark.parametrize(
        ("polygon", "query"),
        [
            (PENTAGON, (2.5, 2.0)),
            (PENTAGON, (1.0, 1.0)),
            (PENTAGON, (3.3, 4.1)),
            (L_SHAPE, (1.0, 1.0)),
            (L_SHAPE, (3.0, 1.5)),
            (L_SHAPE, (1.0, 3.0)),
        ],
    )
    def test_simple_polygon(self, polygon, query):
        boundary = Boundary.from_polygon(polygon)
        coords = cubic_mvc(polygon, query)
        result = interpolate(boundary, coords, quadratic, quadratic_grad)
        assert result == pytest.approx(quadratic(*query), rel=1e-9, abs=1e-9)

    @pytest.mark.parametrize("query", [(1.5, 4.0), (6.0, 6.5), (4.0, 1.0)])
    def test_domain_with_hole(self, square_with_hole, query):
        coords = CubicMVCEvaluator(square_with_hole).evaluate(query)
        result = interpolate(square_with_hole, coords, quadratic, quadratic_grad)
        assert result == pytest.approx(quadratic(*query), rel=1e-9, abs=1e-9)


class TestBoundaryPrecision:
    """Cubic functions are reproduced along edges."""

    @pytest.mark.parametrize("fraction", [0.1, 0.3, 0.5, 0.85])
    def test_cubic_on_pentagon_edge(self, fraction):
        (x0, y0), (x1, y1) = PENTAGON[1], PENTAGON[2]
        query = (x0 + fraction * (x1 - x0), y0 + fraction * (y1 - y0))

        boundary = Boundary.from_polygon(PENTAGON)
        coords = cubic_mvc(PENTAGON, query)

        assert coords.boundary_edge == 1
        result = interpolate(boundary, coords, cubic, cubic_grad)
        assert result == pytest.approx(cubic(*query), rel=1e-9, abs=1e-9)

    def test_cubic_on_hole_edge(self, square_with_hole):
        query = (3.0, 4.5)
        coords = CubicMVCEvaluator(square_with_hole).evaluate(query)

        assert coords.boundary_edge == 4
        result = interpolate(square_with_hole, coords, cubic, cubic_grad)
        assert result == pytest.approx(cubic(*query), rel=1e-9, abs=1e-9)

    def test_closing_edge(self, square):
        boundary = Boundary.from_polygon(square)
        coords = cubic_mvc(square, (0.0, 1.0))

        result = interpolate(boundary, coords, cubic, cubic_grad)
        assert result == pytest.approx(cubic(0.0, 1.0), rel=1e-9, abs=1e-9)


class TestSymmetry:
    """Symmetric configurations give symmetric coordinates."""

    def test_square_center_reproduces_cubic(self, square):
        """At the center of a square odd terms cancel."""
        boundary = Boundary.from_polygon(square)
        coords = cubic_mvc(square, (2.0, 2.0))

        def f(x, y):
            return (x - 2.0) ** 3 + (x - 2.0) * (y - 2.0) ** 2 + 7.0

        def grad(x, y):
            return (3.0 * (x - 2.0) ** 2 + (y - 2.0) ** 2, 2.0 * (x - 2.0) * (y - 2.0))

        assert interpolate(boundary, coords, f, grad) == pytest.approx(7.0)

    def test_mirror_queries(self, square):
        """Mirroring the query across x = 2 permutes the value coordinates."""
        left = cubic_mvc(square, (1.0, 3.0)).value_coords
        right = cubic_mvc(square, (3.0, 3.0)).value_coords
        assert right == pytest.approx([left[1], left[0], left[3], left[2]])
