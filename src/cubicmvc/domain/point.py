"""Point type shared by boundaries and query points."""

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True, slots=True)
class Point:
    """A point in the plane.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)

    def to_complex(self) -> complex:
        """Interpret the point as the complex number x + iy."""
        return complex(self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary."""
        return cls(x=float(data["x"]), y=float(data["y"]))

    @classmethod
    def coerce(cls, value: "PointLike") -> "Point":
        """Build a Point from a Point or an (x, y) pair.

        Raises:
            ValueError: If value is not a pair of numbers
        """
        if isinstance(value, Point):
            return value
        try:
            x, y = value
        except (TypeError, ValueError) as e:
            raise ValueError(f"Expected an (x, y) pair, got {value!r}") from e
        return cls(float(x), float(y))


PointLike = Union[Point, tuple[float, float], list[float]]
