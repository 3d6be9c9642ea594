"""Blend weights and final coordinate assembly.

The three bases are blended so that the combination integrates to one against
the constant kernel and has zero first moments. Those two zero-moment
conditions say the weight vector is orthogonal to both B and C, so it is
parallel to their cross product; the remaining condition fixes its scale.
"""

import math

from cubicmvc.core.accumulator import BASIS_COUNT, EvaluationWorkspace
from cubicmvc.domain import CubicMVCCoordinates
from cubicmvc.exceptions import SingularSystemError


def blend_weights(
    a: list[float],
    b: list[float],
    c: list[float],
) -> tuple[float, float, float]:
    """Solve for the basis blend weights.

    Args:
        a: Constant-kernel moments
        b: Cosine-weighted moments
        c: Sine-weighted moments

    Returns:
        Weights ``(B x C) / (A . (B x C))``

    Raises:
        SingularSystemError: If ``A . (B x C)`` is zero or not finite
    """
    weights = (
        b[1] * c[2] - b[2] * c[1],
        b[2] * c[0] - b[0] * c[2],
        b[0] * c[1] - b[1] * c[0],
    )
    total = a[0] * weights[0] + a[1] * weights[1] + a[2] * weights[2]
    if total == 0.0 or not math.isfinite(total):
        raise SingularSystemError(weights)

    inv_total = 1.0 / total
    return (weights[0] * inv_total, weights[1] * inv_total, weights[2] * inv_total)


def combine(
    workspace: EvaluationWorkspace,
    weights: tuple[float, float, float],
) -> CubicMVCCoordinates:
    """Blend the per-basis coefficient tables into final coordinates."""

    def blend(tables: list[list[float]]) -> list[float]:
        return [
            sum(weights[t] * tables[t][k] for t in range(BASIS_COUNT))
            for k in range(len(tables[0]))
        ]

    return CubicMVCCoordinates(
        value_coords=blend(workspace.v_coeff),
        normal_grad_coords=blend(workspace.gn_coeff),
        tangent_grad_coords=blend(workspace.gt_coeff),
    )
