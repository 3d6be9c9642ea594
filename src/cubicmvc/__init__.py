"""cubicmvc - Cubic mean value coordinates for planar polygons.

cubicmvc evaluates cubic mean value coordinates for a query point inside a
polygon, optionally with holes. The result blends vertex values together with
directional derivatives supplied at the boundary vertices, so the interpolant
matches cubic Hermite data along every edge.

Example:
    >>> from cubicmvc import cubic_mvc
    >>> coords = cubic_mvc([(0, 0), (4, 0), (4, 4), (0, 4)], (2, 0))
    >>> coords.value_coords
    [0.5, 0.5, 0.0, 0.0]
"""

from cubicmvc.core.evaluator import CubicMVCEvaluator, cubic_mvc, cubic_mvc_with_edges
from cubicmvc.domain import Boundary, CubicMVCCoordinates, Point

__version__ = "0.1.0"

__all__ = [
    "Boundary",
    "CubicMVCCoordinates",
    "CubicMVCEvaluator",
    "Point",
    "__version__",
    "cubic_mvc",
    "cubic_mvc_with_edges",
]
