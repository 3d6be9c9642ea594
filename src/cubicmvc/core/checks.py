"""Validity and degeneracy checks.

Polygon well-formedness tests run once per evaluation; the on-edge test runs
per edge on vertices already translated so that the query point sits at the
origin.
"""

from collections import Counter
from collections.abc import Sequence

from cubicmvc.config.settings import DEFAULT_COLLINEAR_TOLERANCE
from cubicmvc.core.kernel import area, dist_squared, inner
from cubicmvc.exceptions import CoincidentQueryError, InvalidEdgeListError, InvalidPolygonError


def is_valid_polygon(points: Sequence[complex]) -> bool:
    """Check that a polygon has at least 3 vertices and no repeated neighbours.

    Args:
        points: Polygon vertices as complex numbers

    Returns:
        False if fewer than 3 vertices or two cyclically consecutive vertices
        are identical, True otherwise
    """
    n = len(points)
    if n < 3:
        return False
    return all(points[i] != points[(i + 1) % n] for i in range(n))


def validate_polygon(points: Sequence[complex]) -> None:
    """Raise if :func:`is_valid_polygon` fails.

    Raises:
        InvalidPolygonError: With the first problem found
    """
    n = len(points)
    if n < 3:
        raise InvalidPolygonError(f"need at least 3 vertices, got {n}")
    for i in range(n):
        j = (i + 1) % n
        if points[i] == points[j]:
            raise InvalidPolygonError(f"vertices {i} and {j} are identical")


def validate_edges(
    points: Sequence[complex],
    edges: Sequence[tuple[int, int]],
    require_closed_loops: bool = True,
) -> None:
    """Check an explicit edge list against its vertex array.

    Args:
        points: Shared vertex array
        edges: Directed (i, j) index pairs
        require_closed_loops: Also require every vertex to have as many
            outgoing as incoming edges

    Raises:
        InvalidPolygonError: If there are fewer than 3 vertices
        InvalidEdgeListError: If an edge is out of range or zero length, or
            the edges do not form closed loops
    """
    n = len(points)
    if n < 3:
        raise InvalidPolygonError(f"need at least 3 vertices, got {n}")
    if len(edges) < 3:
        raise InvalidEdgeListError(f"needs at least 3 edges, got {len(edges)}")

    for k, (i, j) in enumerate(edges):
        if not (0 <= i < n and 0 <= j < n):
            raise InvalidEdgeListError(f"edge {k} ({i}, {j}) references a missing vertex")
        if points[i] == points[j]:
            raise InvalidEdgeListError(f"edge {k} ({i}, {j}) has zero length")

    if require_closed_loops:
        outgoing = Counter(i for i, _ in edges)
        incoming = Counter(j for _, j in edges)
        if outgoing != incoming:
            open_vertices = sorted(v for v in outgoing.keys() | incoming.keys()
                                   if outgoing[v] != incoming[v])
            raise InvalidEdgeListError(f"is not closed at vertices {open_vertices}")


def find_coincident_vertex(points: Sequence[complex], query: complex) -> int | None:
    """Index of the first vertex equal to the query point, if any."""
    for k, p in enumerate(points):
        if p == query:
            return k
    return None


def check_query(points: Sequence[complex], query: complex) -> None:
    """Reject a query point that sits exactly on a vertex.

    Raises:
        CoincidentQueryError: If the query equals a vertex
    """
    k = find_coincident_vertex(points, query)
    if k is not None:
        raise CoincidentQueryError(k, (query.real, query.imag))


def is_near_radial(a: complex, b: complex, tolerance: float = DEFAULT_COLLINEAR_TOLERANCE) -> bool:
    """Check whether segment (a, b) is numerically collinear with the origin."""
    return abs(area(b, a)) < tolerance * dist_squared(a, b)


def cross_origin(a: complex, b: complex, tolerance: float = DEFAULT_COLLINEAR_TOLERANCE) -> bool:
    """Check whether segment (a, b) passes through the origin.

    True when the signed area of (a, b) is below ``tolerance`` times the
    squared segment length and the origin projects inside the segment, with
    the inner products bounded by ``(1 + tolerance) * |a - b|^2``.

    Args:
        a: Segment start, relative to the query point
        b: Segment end, relative to the query point
        tolerance: Relative tolerance

    Returns:
        True if the query point lies on the segment
    """
    dist_sq = dist_squared(a, b)
    max_inner = (1 + tolerance) * dist_sq
    return (
        abs(area(a, b)) < tolerance * dist_sq
        and inner(a - b, a) < max_inner
        and inner(b - a, b) < max_inner
    )
