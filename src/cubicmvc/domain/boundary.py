"""Boundary representation for simple and multiply-connected domains.

A boundary is a shared vertex array plus a list of directed edges. The
interior of the domain lies to the left of every directed edge, so outer
loops run counter-clockwise and hole loops run clockwise.
"""

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any

from cubicmvc.domain.point import Point, PointLike


@dataclass
class Boundary:
    """Vertex array plus directed edge list.

    Attributes:
        vertices: Boundary vertices, shared by all loops
        edges: Directed edges as (start index, end index) pairs
        is_simple: True when edges are the implicit cycle over ``vertices``
    """

    vertices: list[Point]
    edges: list[tuple[int, int]]
    is_simple: bool = False
    _cached_area: float | None = field(default=None, repr=False, init=False)

    @classmethod
    def from_polygon(cls, points: Sequence[PointLike]) -> "Boundary":
        """Create a simple polygon boundary with edges (k, k+1 mod n).

        Args:
            points: Polygon vertices, counter-clockwise

        Returns:
            Boundary with implicit cyclic edges
        """
        vertices = [Point.coerce(p) for p in points]
        n = len(vertices)
        edges = [(k, (k + 1) % n) for k in range(n)]
        return cls(vertices=vertices, edges=edges, is_simple=True)

    @classmethod
    def from_edges(
        cls,
        points: Sequence[PointLike],
        edges: Iterable[Sequence[int]],
    ) -> "Boundary":
        """Create a boundary from a vertex array and explicit edge pairs.

        Args:
            points: Shared vertex array
            edges: Directed (i, j) vertex index pairs

        Returns:
            Boundary using the given edges
        """
        vertices = [Point.coerce(p) for p in points]
        pairs = [(int(e[0]), int(e[1])) for e in edges]
        return cls(vertices=vertices, edges=pairs, is_simple=False)

    @classmethod
    def from_loops(
        cls,
        outer: Sequence[PointLike],
        *holes: Sequence[PointLike],
    ) -> "Boundary":
        """Create a boundary from an outer loop and any number of hole loops.

        Loops are concatenated into one vertex array and each loop is closed
        cyclically. Orientation is taken as given: the outer loop should be
        counter-clockwise and holes clockwise.

        Args:
            outer: Outer loop vertices
            *holes: Hole loop vertices

        Returns:
            Boundary with one closed edge cycle per loop
        """
        if not holes:
            return cls.from_polygon(outer)

        vertices: list[Point] = []
        edges: list[tuple[int, int]] = []
        for loop in (outer, *holes):
            start = len(vertices)
            vertices.extend(Point.coerce(p) for p in loop)
            n = len(vertices) - start
            edges.extend((start + k, start + (k + 1) % n) for k in range(n))
        return cls(vertices=vertices, edges=edges, is_simple=False)

    @property
    def vertex_count(self) -> int:
        """Number of vertices."""
        return len(self.vertices)

    @property
    def edge_count(self) -> int:
        """Number of directed edges."""
        return len(self.edges)

    def signed_area(self) -> float:
        """Signed enclosed area, summed over all edges.

        Positive when the interior lies to the left of the edges. Holes with
        clockwise winding subtract their area. Result is cached.

        Returns:
            Signed area
        """
        if self._cached_area is not None:
            return self._cached_area

        area = 0.0
        for i, j in self.edges:
            a = self.vertices[i]
            b = self.vertices[j]
            area += a.x * b.y - b.x * a.y

        self._cached_area = area / 2.0
        return self._cached_area

    def loop_count(self) -> int:
        """Count closed edge cycles by following each edge to its successor."""
        successors: dict[int, list[int]] = {}
        for k, (i, _) in enumerate(self.edges):
            successors.setdefault(i, []).append(k)

        visited: set[int] = set()
        loops = 0
        for k in range(len(self.edges)):
            if k in visited:
                continue
            loops += 1
            current = k
            while current not in visited:
                visited.add(current)
                nxt = [e for e in successors.get(self.edges[current][1], []) if e not in visited]
                if not nxt:
                    break
                current = nxt[0]
        return loops

    def edge_frame(self, k: int) -> tuple[tuple[float, float], tuple[float, float]]:
        """Unit tangent and left normal of edge k.

        Args:
            k: Edge index

        Returns:
            Tuple (tangent, normal) where tangent points from the edge start to
            its end and normal is the tangent rotated 90 degrees
            counter-clockwise (pointing into the domain)

        Raises:
            ValueError: If the edge has zero length
        """
        i, j = self.edges[k]
        dx = self.vertices[j].x - self.vertices[i].x
        dy = self.vertices[j].y - self.vertices[i].y
        length = math.hypot(dx, dy)
        if length == 0.0:
            raise ValueError(f"Edge {k} has zero length")
        tx, ty = dx / length, dy / length
        return (tx, ty), (-ty, tx)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {
            "vertices": [p.to_dict() for p in self.vertices],
            "edges": [list(e) for e in self.edges],
            "is_simple": self.is_simple,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Boundary":
        """Deserialize from dictionary."""
        vertices = [Point.from_dict(p) for p in data["vertices"]]
        edges = [(int(i), int(j)) for i, j in data["edges"]]
        return cls(vertices=vertices, edges=edges, is_simple=data.get("is_simple", False))
