"""Writer for evaluation results."""

import json
from collections.abc import Sequence
from pathlib import Path

from cubicmvc.domain import CubicMVCCoordinates, Point
from cubicmvc.exceptions import ResultSaveError


class CoordinatesWriter:
    """Saves evaluation results as JSON.

    Each query becomes one record with its coordinates, or ``null``
    coordinates and the error message when its evaluation failed.

    Example:
        writer = CoordinatesWriter(Path("out.json"))
        writer.save(queries, results)
    """

    def __init__(self, output_path: Path) -> None:
        """Initialize the writer.

        Args:
            output_path: Path to write results to
        """
        self._output_path = output_path

    def save(
        self,
        queries: Sequence[Point],
        results: Sequence[CubicMVCCoordinates | None],
        errors: dict[tuple[float, float], str] | None = None,
    ) -> None:
        """Write results to the output path.

        Args:
            queries: Query points, in the order they were evaluated
            results: Coordinates per query, None for failed queries
            errors: Error message per failed query point

        Raises:
            ResultSaveError: If the file cannot be written
        """
        if len(queries) != len(results):
            raise ResultSaveError(
                str(self._output_path),
                f"{len(queries)} queries but {len(results)} results",
            )

        errors = errors or {}
        records = []
        for query, coords in zip(queries, results):
            record: dict = {"query": list(query.to_tuple())}
            if coords is None:
                record["coordinates"] = None
                record["error"] = errors.get(query.to_tuple(), "evaluation failed")
            else:
                record["coordinates"] = coords.to_dict()
            records.append(record)

        try:
            self._output_path.parent.mkdir(parents=True, exist_ok=True)
            self._output_path.write_text(
                json.dumps({"results": records}, indent=2), encoding="utf-8"
            )
        except OSError as e:
            raise ResultSaveError(str(self._output_path), str(e)) from e

    @staticmethod
    def get_default_path(boundary_path: Path) -> Path:
        """Generate the default result path for a boundary file.

        Example: square.json -> square-coords.json
        """
        return boundary_path.with_name(f"{boundary_path.stem}-coords.json")
