"""Result type of a cubic mean value coordinate evaluation."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from cubicmvc.domain.boundary import Boundary


@dataclass
class CubicMVCCoordinates:
    """Value and gradient coordinates for one query point.

    Gradient coordinates come in pairs per edge. For edge k = (i, j):

    - ``normal_grad_coords[2k]`` weights the gradient at vertex i along the
      left normal of the edge, ``normal_grad_coords[2k+1]`` the gradient at
      vertex j along the same normal.
    - ``tangent_grad_coords[2k]`` weights the gradient at vertex i along the
      direction i -> j, ``tangent_grad_coords[2k+1]`` the gradient at vertex j
      along the direction j -> i.

    Attributes:
        value_coords: One weight per vertex
        normal_grad_coords: Two weights per edge
        tangent_grad_coords: Two weights per edge
        boundary_edge: Index of the edge containing the query point, if any
    """

    value_coords: list[float]
    normal_grad_coords: list[float]
    tangent_grad_coords: list[float]
    boundary_edge: int | None = None

    @property
    def value_sum(self) -> float:
        """Sum of value coordinates (1 for any valid query)."""
        return sum(self.value_coords)

    @property
    def on_boundary(self) -> bool:
        """True when the query point was found on a boundary edge."""
        return self.boundary_edge is not None

    def interpolate(
        self,
        boundary: Boundary,
        values: Sequence[float],
        gradients: Sequence[tuple[float, float]],
    ) -> float:
        """Blend per-vertex values and gradients into a value at the query.

        Args:
            boundary: Boundary the coordinates were evaluated against
            values: Function value at each vertex
            gradients: Gradient (gx, gy) at each vertex

        Returns:
            Interpolated value at the query point

        Raises:
            ValueError: If array sizes do not match the boundary
        """
        if len(values) != boundary.vertex_count or len(gradients) != boundary.vertex_count:
            raise ValueError(
                f"Expected {boundary.vertex_count} values and gradients, "
                f"got {len(values)} and {len(gradients)}"
            )
        if len(self.normal_grad_coords) != 2 * boundary.edge_count:
            raise ValueError("Coordinates do not match the boundary edge count")

        result = sum(w * f for w, f in zip(self.value_coords, values))

        for k, (i, j) in enumerate(boundary.edges):
            (tx, ty), (nx, ny) = boundary.edge_frame(k)
            gi = gradients[i]
            gj = gradients[j]
            result += self.normal_grad_coords[2 * k] * (gi[0] * nx + gi[1] * ny)
            result += self.normal_grad_coords[2 * k + 1] * (gj[0] * nx + gj[1] * ny)
            result += self.tangent_grad_coords[2 * k] * (gi[0] * tx + gi[1] * ty)
            result -= self.tangent_grad_coords[2 * k + 1] * (gj[0] * tx + gj[1] * ty)

        return result

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {
            "value_coords": list(self.value_coords),
            "normal_grad_coords": list(self.normal_grad_coords),
            "tangent_grad_coords": list(self.tangent_grad_coords),
            "boundary_edge": self.boundary_edge,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CubicMVCCoordinates":
        """Deserialize from dictionary."""
        return cls(
            value_coords=list(data["value_coords"]),
            normal_grad_coords=list(data["normal_grad_coords"]),
            tangent_grad_coords=list(data["tangent_grad_coords"]),
            boundary_edge=data.get("boundary_edge"),
        )
