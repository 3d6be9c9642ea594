"""Closed-form coordinates for a query point lying on an edge.

On an edge the coordinates reduce to the 1D cubic Hermite blend of the two
endpoint values and their derivatives along the edge. Every other coordinate
is zero.
"""

from collections.abc import Sequence

from cubicmvc.core.kernel import dist
from cubicmvc.domain import CubicMVCCoordinates


def boundary_coordinates(
    points: Sequence[complex],
    query: complex,
    edge_count: int,
    edge_index: int,
    i: int,
    j: int,
) -> CubicMVCCoordinates:
    """Coordinates for a query point on edge ``edge_index`` = (i, j).

    Args:
        points: Boundary vertices
        query: Query point on the edge
        edge_count: Number of edges (gradient arrays hold two slots per edge)
        edge_index: Index of the edge containing the query
        i: Start vertex of the edge
        j: End vertex of the edge

    Returns:
        Coordinates with only the two endpoint values and the edge's two
        tangential gradient slots set
    """
    value_coords = [0.0] * len(points)
    normal_grad_coords = [0.0] * (2 * edge_count)
    tangent_grad_coords = [0.0] * (2 * edge_count)

    dist_i = dist(query, points[i])
    dist_j = dist(query, points[j])
    dist_ij = dist(points[i], points[j])

    alpha_i = dist_j / (dist_i + dist_j)
    alpha_j = dist_i / (dist_i + dist_j)
    cubic_i = alpha_i * alpha_i * alpha_j
    cubic_j = alpha_j * alpha_j * alpha_i

    value_coords[i] = alpha_i + cubic_i - cubic_j
    value_coords[j] = alpha_j + cubic_j - cubic_i
    tangent_grad_coords[2 * edge_index] = dist_ij * cubic_i
    tangent_grad_coords[2 * edge_index + 1] = dist_ij * cubic_j

    return CubicMVCCoordinates(
        value_coords=value_coords,
        normal_grad_coords=normal_grad_coords,
        tangent_grad_coords=tangent_grad_coords,
        boundary_edge=edge_index,
    )
