"""Domain models for cubicmvc.

This module contains the data passed into and out of an evaluation. All models
are designed to be:

- Immutable where possible (using frozen dataclasses)
- Serializable for inter-process communication (parallel processing)
- Independent of the numerical core

Key classes:
- Point: A 2D point
- Boundary: Vertex array plus directed edge list (outer loop and holes)
- CubicMVCCoordinates: Value and gradient coordinates for one query point
"""

from cubicmvc.domain.boundary import Boundary
from cubicmvc.domain.coordinates import CubicMVCCoordinates
from cubicmvc.domain.point import Point, PointLike

__all__: list[str] = [
    "Boundary",
    "CubicMVCCoordinates",
    "Point",
    "PointLike",
]
