"""Boundary reader for JSON boundary and query files.

Accepted boundary documents:

- ``{"vertices": [[x, y], ...]}``: simple polygon
- ``{"vertices": [[x, y], ...], "edges": [[i, j], ...]}``: explicit edges
- ``{"loops": [[[x, y], ...], ...]}``: outer loop followed by hole loops

Query documents have the form ``{"queries": [[x, y], ...]}``.
"""

import json
from pathlib import Path
from typing import Any

from cubicmvc.domain import Boundary, Point
from cubicmvc.exceptions import BoundaryLoadError


class BoundaryReader:
    """Loads boundaries and query points from JSON files.

    Example:
        reader = BoundaryReader(Path("square.json"))
        boundary = reader.load()
    """

    def __init__(self, path: Path) -> None:
        """Initialize the reader.

        Args:
            path: Path to the JSON document
        """
        self._path = path

    def _read_json(self) -> dict[str, Any]:
        if not self._path.exists():
            raise BoundaryLoadError(str(self._path), "file not found")
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise BoundaryLoadError(str(self._path), str(e)) from e
        if not isinstance(data, dict):
            raise BoundaryLoadError(str(self._path), "top-level value must be an object")
        return data

    def load(self) -> Boundary:
        """Load a boundary.

        Returns:
            Boundary described by the document

        Raises:
            BoundaryLoadError: If the file is missing, unreadable or malformed
        """
        data = self._read_json()
        try:
            if "loops" in data:
                loops = data["loops"]
                if not loops:
                    raise ValueError("'loops' is empty")
                return Boundary.from_loops(*loops)
            if "vertices" not in data:
                raise ValueError("expected 'vertices' or 'loops'")
            if "edges" in data:
                return Boundary.from_edges(data["vertices"], data["edges"])
            return Boundary.from_polygon(data["vertices"])
        except (TypeError, ValueError, IndexError) as e:
            raise BoundaryLoadError(str(self._path), str(e)) from e

    def load_queries(self) -> list[Point]:
        """Load query points.

        Raises:
            BoundaryLoadError: If the file is missing, unreadable or malformed
        """
        data = self._read_json()
        if "queries" not in data:
            raise BoundaryLoadError(str(self._path), "expected 'queries'")
        try:
            return [Point.coerce(q) for q in data["queries"]]
        except (TypeError, ValueError) as e:
            raise BoundaryLoadError(str(self._path), str(e)) from e
