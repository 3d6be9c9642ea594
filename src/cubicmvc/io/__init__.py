"""File I/O layer for cubicmvc.

This module reads boundaries and query points from JSON documents and writes
evaluation results back out.

Key classes:
- BoundaryReader: Load boundaries and query lists
- CoordinatesWriter: Save evaluation results
"""

from cubicmvc.io.reader import BoundaryReader
from cubicmvc.io.writer import CoordinatesWriter

__all__ = [
    "BoundaryReader",
    "CoordinatesWriter",
]
