"""Public entry points for cubic mean value coordinates.

Both call shapes enumerate directed edges and hand them to one shared
evaluation routine:

- :func:`cubic_mvc` walks the implicit cycle (k, k+1 mod n) of a simple polygon.
- :func:`cubic_mvc_with_edges` walks an explicit edge list, which may describe an
  outer loop plus hole loops over a shared vertex array.

The interior must lie to the left of every directed edge.
"""

import logging
from collections.abc import Iterable, Iterator, Sequence

import structlog

from cubicmvc.config import CubicMVCSettings, get_default_settings
from cubicmvc.config.settings import DEFAULT_COLLINEAR_TOLERANCE
from cubicmvc.core.accumulator import EvaluationWorkspace, accumulate_edge
from cubicmvc.core.boundary_coords import boundary_coordinates
from cubicmvc.core.checks import (
    check_query,
    cross_origin,
    is_near_radial,
    validate_edges,
    validate_polygon,
)
from cubicmvc.core.kernel import modulus
from cubicmvc.core.solver import blend_weights, combine
from cubicmvc.domain import Boundary, CubicMVCCoordinates, Point, PointLike
from cubicmvc.exceptions import CubicMVCError

logger = structlog.wrap_logger(logging.getLogger(__name__))


def iter_cyclic_edges(vertex_count: int) -> Iterator[tuple[int, int]]:
    """Yield the edges (k, k+1 mod n) of a simple polygon."""
    for k in range(vertex_count):
        yield k, (k + 1) % vertex_count


def iter_edge_pairs(edges: Iterable[Sequence[int]]) -> Iterator[tuple[int, int]]:
    """Yield (i, j) pairs from an explicit edge list."""
    for edge in edges:
        yield int(edge[0]), int(edge[1])


def _to_complex(points: Iterable[PointLike]) -> list[complex]:
    return [Point.coerce(p).to_complex() for p in points]


def evaluate_edges(
    points: Sequence[complex],
    edges: Iterable[tuple[int, int]],
    edge_count: int,
    query: complex,
    tolerance: float = DEFAULT_COLLINEAR_TOLERANCE,
    workspace: EvaluationWorkspace | None = None,
) -> CubicMVCCoordinates:
    """Evaluate coordinates of a query point against enumerated edges.

    Inputs are assumed validated. The query point must not coincide with a
    vertex.

    Args:
        points: Boundary vertices as complex numbers
        edges: Directed (i, j) pairs, ``edge_count`` of them
        edge_count: Number of edges, used to size the gradient arrays
        query: Query point
        tolerance: Relative tolerance of the on-edge test
        workspace: Scratch storage to reuse; allocated when None

    Returns:
        Coordinates of the query point

    Raises:
        SingularSystemError: If the blend weights cannot be normalized
    """
    if workspace is None:
        workspace = EvaluationWorkspace.allocate(len(points), edge_count)
    else:
        workspace.reset(len(points), edge_count)

    y = [p - query for p in points]
    z = [v / modulus(v) for v in y]

    for k, (i, j) in enumerate(edges):
        if is_near_radial(y[i], y[j], tolerance):
            if cross_origin(y[i], y[j], tolerance):
                logger.debug("Query point on boundary edge", edge=k, start=i, end=j)
                return boundary_coordinates(points, query, edge_count, k, i, j)
            logger.debug("Skipping edge collinear with query point", edge=k, start=i, end=j)
            continue
        accumulate_edge(workspace, k, i, j, y[i], y[j], z[i], z[j])

    weights = blend_weights(workspace.a, workspace.b, workspace.c)
    return combine(workspace, weights)


def cubic_mvc(
    polygon: Sequence[PointLike],
    query: PointLike,
    tolerance: float = DEFAULT_COLLINEAR_TOLERANCE,
    validate: bool = True,
    workspace: EvaluationWorkspace | None = None,
) -> CubicMVCCoordinates:
    """Cubic mean value coordinates of a point in a simple polygon.

    Args:
        polygon: Counter-clockwise polygon vertices
        query: Query point
        tolerance: Relative tolerance of the on-edge test
        validate: Check the polygon before evaluating
        workspace: Scratch storage to reuse

    Returns:
        Coordinates with ``len(polygon)`` value coordinates and
        ``2 * len(polygon)`` normal and tangential gradient coordinates

    Raises:
        InvalidPolygonError: If the polygon is malformed
        CoincidentQueryError: If the query equals a vertex
        SingularSystemError: If the blend weights cannot be normalized
    """
    points = _to_complex(polygon)
    q = Point.coerce(query).to_complex()
    if validate:
        validate_polygon(points)
    check_query(points, q)
    return evaluate_edges(
        points, iter_cyclic_edges(len(points)), len(points), q, tolerance, workspace
    )


def cubic_mvc_with_edges(
    polygon: Sequence[PointLike],
    edges: Sequence[Sequence[int]],
    query: PointLike,
    tolerance: float = DEFAULT_COLLINEAR_TOLERANCE,
    validate: bool = True,
    require_closed_loops: bool = True,
    workspace: EvaluationWorkspace | None = None,
) -> CubicMVCCoordinates:
    """Cubic mean value coordinates of a point in a domain with holes.

    Args:
        polygon: Shared vertex array of all loops
        edges: Directed (i, j) vertex index pairs with the interior on the left
        query: Query point
        tolerance: Relative tolerance of the on-edge test
        validate: Check the vertex array and edge list before evaluating
        require_closed_loops: When validating, require the edges to close up
        workspace: Scratch storage to reuse

    Returns:
        Coordinates with ``len(polygon)`` value coordinates and
        ``2 * len(edges)`` normal and tangential gradient coordinates

    Raises:
        InvalidPolygonError: If the vertex array or edge list is malformed
        CoincidentQueryError: If the query equals a vertex
        SingularSystemError: If the blend weights cannot be normalized
    """
    points = _to_complex(polygon)
    pairs = list(iter_edge_pairs(edges))
    q = Point.coerce(query).to_complex()
    if validate:
        validate_edges(points, pairs, require_closed_loops)
    check_query(points, q)
    return evaluate_edges(points, pairs, len(pairs), q, tolerance, workspace)


class CubicMVCEvaluator:
    """Evaluates coordinates of many query points against one boundary.

    The boundary is validated once on construction. Each call to
    :meth:`evaluate` uses its own workspace unless one is passed in, so a
    single evaluator can be shared by several threads.

    Example:
        boundary = Boundary.from_loops(outer, hole)
        evaluator = CubicMVCEvaluator(boundary)
        coords = evaluator.evaluate((1.5, 4.0))
    """

    def __init__(
        self,
        boundary: Boundary,
        settings: CubicMVCSettings | None = None,
    ) -> None:
        """Initialize the evaluator.

        Args:
            boundary: Boundary to evaluate against
            settings: Tolerance and validation settings (defaults if None)

        Raises:
            InvalidPolygonError: If validation is enabled and fails
        """
        self.boundary = boundary
        self.settings = settings or get_default_settings()
        self._points = [p.to_complex() for p in boundary.vertices]

        if self.settings.validation.validate_boundary:
            if boundary.is_simple:
                validate_polygon(self._points)
            else:
                validate_edges(
                    self._points,
                    boundary.edges,
                    self.settings.validation.require_closed_loops,
                )

        logger.debug(
            "Evaluator ready",
            vertices=boundary.vertex_count,
            edges=boundary.edge_count,
            simple=boundary.is_simple,
        )

    @property
    def tolerance(self) -> float:
        """Relative tolerance of the on-edge test."""
        return self.settings.geometry.collinear_tolerance

    def evaluate(
        self,
        query: PointLike,
        workspace: EvaluationWorkspace | None = None,
    ) -> CubicMVCCoordinates:
        """Evaluate coordinates of one query point.

        Raises:
            CoincidentQueryError: If the query equals a vertex
            SingularSystemError: If the blend weights cannot be normalized
        """
        q = Point.coerce(query).to_complex()
        try:
            check_query(self._points, q)
            return evaluate_edges(
                self._points,
                self.boundary.edges,
                self.boundary.edge_count,
                q,
                self.tolerance,
                workspace,
            )
        except CubicMVCError as e:
            logger.warning(
                "Evaluation failed",
                query=(q.real, q.imag),
                error=str(e),
                error_type=type(e).__name__,
            )
            raise

    def evaluate_many(self, queries: Iterable[PointLike]) -> list[CubicMVCCoordinates]:
        """Evaluate several query points sequentially, reusing one workspace."""
        workspace = EvaluationWorkspace.allocate(
            self.boundary.vertex_count, self.boundary.edge_count
        )
        return [self.evaluate(q, workspace) for q in queries]
