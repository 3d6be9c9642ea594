"""Exception hierarchy for cubicmvc."""


class CubicMVCError(Exception):
    """Base exception for all cubicmvc errors."""

    pass


class GeometryError(CubicMVCError):
    """Errors caused by the input boundary or query point."""

    pass


class InvalidPolygonError(GeometryError):
    """Boundary is not a well-formed polygon."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid polygon: {reason}")


class InvalidEdgeListError(InvalidPolygonError):
    """Edge list is malformed or does not form closed loops."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"edge list {reason}")


class CoincidentQueryError(GeometryError):
    """Query point coincides with a boundary vertex."""

    def __init__(self, vertex_index: int, query: tuple[float, float]) -> None:
        self.vertex_index = vertex_index
        self.query = query
        super().__init__(
            f"Query point ({query[0]}, {query[1]}) coincides with vertex {vertex_index}"
        )


class SingularSystemError(CubicMVCError):
    """Blend weight normalization has a zero denominator."""

    def __init__(self, weights: tuple[float, float, float]) -> None:
        self.weights = weights
        super().__init__(
            "Cannot normalize blend weights: moment system is singular "
            f"(unnormalized weights {weights})"
        )


class BoundaryIOError(CubicMVCError):
    """Errors reading boundaries or writing results."""

    pass


class BoundaryLoadError(BoundaryIOError):
    """Error loading a boundary or query file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load '{path}': {reason}")


class ResultSaveError(BoundaryIOError):
    """Error saving evaluation results."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save results '{path}': {reason}")
