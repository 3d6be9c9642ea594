"""Core algorithms for cubicmvc.

This module contains:

- Complex arithmetic on plane vectors with a fixed logarithm branch
- Polygon validity and on-edge degeneracy checks
- Closed-form coordinates for query points on an edge
- Closed-form edge integrals accumulated into a per-call workspace
- Blend weight solve and final coordinate assembly
- Public entry points and batch evaluation

All functions are stateless; scratch storage lives in an
EvaluationWorkspace owned by the caller or allocated per call.

Key functions:
- cubic_mvc: Coordinates in a simple polygon
- cubic_mvc_with_edges: Coordinates in a domain with holes
- evaluate_edges: Shared evaluation over enumerated edges
- blend_weights: Solve for the basis blend weights

Key classes:
- CubicMVCEvaluator: Repeated evaluation against one validated boundary
- BatchEvaluator: Parallel evaluation of many query points
- EvaluationWorkspace: Per-call accumulators and coefficient tables
"""

from cubicmvc.core.accumulator import EvaluationWorkspace, accumulate_edge
from cubicmvc.core.boundary_coords import boundary_coordinates
from cubicmvc.core.checks import (
    check_query,
    cross_origin,
    is_near_radial,
    is_valid_polygon,
    validate_edges,
    validate_polygon,
)
from cubicmvc.core.evaluator import (
    CubicMVCEvaluator,
    cubic_mvc,
    cubic_mvc_with_edges,
    evaluate_edges,
    iter_cyclic_edges,
    iter_edge_pairs,
)
from cubicmvc.core.processor import BatchEvaluator, evaluate_chunk, evaluate_query
from cubicmvc.core.solver import blend_weights, combine

__all__ = [
    # Processor classes
    "BatchEvaluator",
    # Evaluator classes
    "CubicMVCEvaluator",
    "EvaluationWorkspace",
    # Functions
    "accumulate_edge",
    "blend_weights",
    "boundary_coordinates",
    "check_query",
    "combine",
    "cross_origin",
    "cubic_mvc",
    "cubic_mvc_with_edges",
    "evaluate_chunk",
    "evaluate_edges",
    "evaluate_query",
    "is_near_radial",
    "is_valid_polygon",
    "iter_cyclic_edges",
    "iter_edge_pairs",
    "validate_edges",
    "validate_polygon",
]
