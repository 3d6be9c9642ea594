"""Closed-form edge integrals for cubic mean value coordinates.

For each directed edge the three trial kernels of the method (the constant
kernel and the cosine/sine weighted kernels) are integrated exactly along the
edge. Everything is expressed through the unit direction ``z = y / |y|`` of
the edge endpoints relative to the query point, and through the complex
coefficient kappa that writes the reciprocal distance to the edge line as
``1/u = kappa * z + conj(kappa) / z``.

Contributions are added into an :class:`EvaluationWorkspace`, which holds
the three moment triples (A, B, C) and one coefficient table per basis for
value, normal-gradient and tangential-gradient coordinates. Vertices shared
by two edges accumulate both edges' contributions.
"""

import math
from dataclasses import dataclass, field

from cubicmvc.core.kernel import area, conj, inner, modulus, principal_atan, rotate_right

BASIS_COUNT = 3


@dataclass
class EvaluationWorkspace:
    """Scratch storage for one evaluation.

    A workspace belongs to a single call. It can be handed to repeated calls
    from the same thread to avoid reallocation, but never shared between
    concurrent evaluations.

    Attributes:
        a: Moments of the three bases against the constant kernel
        b: Moments against the cosine-weighted kernel
        c: Moments against the sine-weighted kernel
        v_coeff: Per-basis value coefficients, one per vertex
        gn_coeff: Per-basis normal-gradient coefficients, two per edge
        gt_coeff: Per-basis tangential-gradient coefficients, two per edge
    """

    a: list[float] = field(default_factory=lambda: [0.0] * BASIS_COUNT)
    b: list[float] = field(default_factory=lambda: [0.0] * BASIS_COUNT)
    c: list[float] = field(default_factory=lambda: [0.0] * BASIS_COUNT)
    v_coeff: list[list[float]] = field(default_factory=list)
    gn_coeff: list[list[float]] = field(default_factory=list)
    gt_coeff: list[list[float]] = field(default_factory=list)

    @classmethod
    def allocate(cls, vertex_count: int, edge_count: int) -> "EvaluationWorkspace":
        """Create a zeroed workspace sized for a boundary."""
        workspace = cls()
        workspace.reset(vertex_count, edge_count)
        return workspace

    def reset(self, vertex_count: int, edge_count: int) -> None:
        """Zero all accumulators and resize the coefficient tables."""
        self.a = [0.0] * BASIS_COUNT
        self.b = [0.0] * BASIS_COUNT
        self.c = [0.0] * BASIS_COUNT
        self.v_coeff = [[0.0] * vertex_count for _ in range(BASIS_COUNT)]
        self.gn_coeff = [[0.0] * (2 * edge_count) for _ in range(BASIS_COUNT)]
        self.gt_coeff = [[0.0] * (2 * edge_count) for _ in range(BASIS_COUNT)]


def _angular_split(value: float, intg: complex) -> tuple[float, float, float]:
    """Split a cos/sin moment pair into (cos*cos, sin*sin, sin*cos) parts."""
    return (value + intg.real) / 2, (value - intg.real) / 2, intg.imag / 2


def _add_normal_terms(
    workspace: EvaluationWorkspace,
    basis: int,
    k: int,
    i: int,
    j: int,
    vec_ij: complex,
    inv_dist_ij: float,
    p_i: complex,
    p_j: complex,
) -> None:
    """Add the normal-gradient terms of one basis and their value correction."""
    g_ij = -inner(vec_ij, p_i + p_j)
    workspace.gn_coeff[basis][2 * k] += area(vec_ij, p_i)
    workspace.gn_coeff[basis][2 * k + 1] += area(vec_ij, p_j)
    workspace.v_coeff[basis][i] -= g_ij * inv_dist_ij
    workspace.v_coeff[basis][j] += g_ij * inv_dist_ij


def _add_tangent_terms(
    workspace: EvaluationWorkspace,
    basis: int,
    k: int,
    vec_ij: complex,
    p_i: complex,
    p_j: complex,
) -> None:
    """Add the tangential-gradient terms of one basis."""
    workspace.gt_coeff[basis][2 * k] -= inner(vec_ij, p_i)
    workspace.gt_coeff[basis][2 * k + 1] += inner(vec_ij, p_j)


def accumulate_edge(
    workspace: EvaluationWorkspace,
    k: int,
    i: int,
    j: int,
    y_i: complex,
    y_j: complex,
    z_i: complex,
    z_j: complex,
) -> None:
    """Add the contributions of edge k = (i, j) to the workspace.

    The edge must not be collinear with the query point; callers filter
    those out with :func:`cubicmvc.core.checks.is_near_radial` first.

    Args:
        workspace: Accumulators to update
        k: Edge index (gradient slots 2k and 2k+1)
        i: Start vertex index
        j: End vertex index
        y_i: Start vertex relative to the query point
        y_j: End vertex relative to the query point
        z_i: Unit direction of y_i
        z_j: Unit direction of y_j
    """
    area_ij = area(y_j, y_i)
    dist_ij = modulus(y_j - y_i)
    inv_dist_ij = 1.0 / dist_ij

    alpha_i = y_j / area_ij
    kappa_i = complex(alpha_i.imag / 2, alpha_i.real / 2)
    kappa_i_c = complex(alpha_i.imag / 2, -alpha_i.real / 2)
    alpha_j = y_i / (-area_ij)
    kappa_j = complex(alpha_j.imag / 2, alpha_j.real / 2)
    kappa_j_c = complex(alpha_j.imag / 2, -alpha_j.real / 2)
    kappa = kappa_i + kappa_j
    kappa_c = kappa_i_c + kappa_j_c

    # antiderivatives of z^2, 1 and z^-2 along the edge
    intg2 = (z_j * z_j * z_j - z_i * z_i * z_i) / 3
    intg1 = z_j - z_i
    intg0 = conj(z_i) - conj(z_j)

    vec_ij = (y_j - y_i) * inv_dist_ij

    kappa_sq = kappa * kappa
    kappa_intg1 = kappa * intg1
    kappa_conj_intg0 = kappa_c * intg0
    kappa_ij = kappa_i * kappa_j
    kappa_i2 = kappa_i * kappa_i
    kappa_i3 = kappa_i * kappa_i2
    kappa_i_intg2 = kappa_i * intg2
    kappa_i_abs_sq = (kappa_i * kappa_i_c).real
    kappa_j2 = kappa_j * kappa_j
    kappa_j3 = kappa_j * kappa_j2
    kappa_j_intg2 = kappa_j * intg2
    kappa_j_abs_sq = (kappa_j * kappa_j_c).real

    a = workspace.a
    b = workspace.b
    c = workspace.c
    v_coeff = workspace.v_coeff
    gt_coeff = workspace.gt_coeff

    # constant kernel: A[0], v_coeff[0]
    tmp_i = kappa_c * kappa_i
    tmp_j = kappa_c * kappa_j
    value_i = 2 * (kappa_sq * kappa_i_intg2 + (tmp_i + 2 * tmp_i.real) * kappa_intg1).imag
    value_j = 2 * (kappa_sq * kappa_j_intg2 + (tmp_j + 2 * tmp_j.real) * kappa_intg1).imag
    v_coeff[0][i] += 2 * value_i
    v_coeff[0][j] += 2 * value_j
    a[0] += 2 * (value_i + value_j)

    # linear moments: A[1], A[2], B[0], C[0], v_coeff[1..2], gn_coeff[0]
    intg_i = rotate_right(
        kappa * kappa_i_intg2 + 2 * tmp_i.real * intg1 + kappa_i_c * kappa_conj_intg0
    )
    intg_j = rotate_right(
        kappa * kappa_j_intg2 + 2 * tmp_j.real * intg1 + kappa_j_c * kappa_conj_intg0
    )
    v_coeff[1][i] += 3 * intg_i.real
    v_coeff[1][j] += 3 * intg_j.real
    v_coeff[2][i] += 3 * intg_i.imag
    v_coeff[2][j] += 3 * intg_j.imag
    b[0] += intg_i.real + intg_j.real
    c[0] += intg_i.imag + intg_j.imag
    a[1] += 3 * (intg_i.real + intg_j.real)
    a[2] += 3 * (intg_i.imag + intg_j.imag)
    _add_normal_terms(workspace, 0, k, i, j, vec_ij, inv_dist_ij, intg_i, intg_j)

    # quadratic moments: B[1..2], C[1..2], gn_coeff[1..2]
    intg_i = rotate_right(kappa_i_intg2 + kappa_i_c * intg1)
    intg_j = rotate_right(kappa_j_intg2 + kappa_j_c * intg1)
    cos_cos_i, sin_sin_i, sin_cos_i = _angular_split(2 * (kappa_i * intg1).imag, intg_i)
    cos_cos_j, sin_sin_j, sin_cos_j = _angular_split(2 * (kappa_j * intg1).imag, intg_j)
    b[1] += 2 * (cos_cos_i + cos_cos_j)
    b[2] += 2 * (sin_cos_i + sin_cos_j)
    c[1] += 2 * (sin_cos_i + sin_cos_j)
    c[2] += 2 * (sin_sin_i + sin_sin_j)
    _add_normal_terms(
        workspace, 1, k, i, j, vec_ij, inv_dist_ij,
        complex(cos_cos_i, sin_cos_i), complex(cos_cos_j, sin_cos_j),
    )
    _add_normal_terms(
        workspace, 2, k, i, j, vec_ij, inv_dist_ij,
        complex(sin_cos_i, sin_sin_i), complex(sin_cos_j, sin_sin_j),
    )

    # cubic components: gt_coeff[0..2] and their value corrections
    tmp_i = kappa_i_c * kappa_j
    tmp_j = kappa_j_c * kappa_i
    value_i = 2 * dist_ij * (
        kappa_i2 * kappa_j_intg2 + (tmp_i + 2 * tmp_i.real) * kappa_i * intg1
    ).imag
    value_j = 2 * dist_ij * (
        kappa_j2 * kappa_i_intg2 + (tmp_j + 2 * tmp_j.real) * kappa_j * intg1
    ).imag
    gt_coeff[0][2 * k] += 2 * value_i
    gt_coeff[0][2 * k + 1] += 2 * value_j

    tmp_intg_ii = kappa_i2 * intg2 + 2 * kappa_i_abs_sq * intg1 + conj(kappa_i2) * intg0
    tmp_intg_jj = kappa_j2 * intg2 + 2 * kappa_j_abs_sq * intg1 + conj(kappa_j2) * intg0
    tmp_intg_ij = kappa_ij * intg2 + (tmp_i + tmp_j).real * intg1 + conj(kappa_ij) * intg0
    _add_tangent_terms(
        workspace, 0, k, vec_ij,
        rotate_right(tmp_intg_ii - 2 * tmp_intg_ij),
        rotate_right(tmp_intg_jj - 2 * tmp_intg_ij),
    )

    # the cubic kernel is not linear in z; integrate 1 / (1 + (kappa z / |kappa|)^2)
    inv_kappa_abs = 1.0 / modulus(kappa)
    inv_kappa = kappa_c * inv_kappa_abs * inv_kappa_abs
    kappa_r = kappa_c * inv_kappa
    intg_z1 = (
        principal_atan(z_j * kappa * inv_kappa_abs) - principal_atan(z_i * kappa * inv_kappa_abs)
    ) * inv_kappa_abs
    intg_z0 = intg1 * inv_kappa - intg_z1 * kappa_r

    s_i = kappa_i3 * inv_kappa
    t_i = kappa_i2 * (3 * kappa_i_c - kappa_i * kappa_r)
    s_j = kappa_j3 * inv_kappa
    t_j = kappa_j2 * (3 * kappa_j_c - kappa_j * kappa_r)
    intg_i = dist_ij * rotate_right(
        tmp_intg_ii - (s_i * intg2 + conj(s_i) * intg0 + t_i * intg_z0 + conj(t_i) * intg_z1)
    )
    intg_j = dist_ij * rotate_right(
        tmp_intg_jj - (s_j * intg2 + conj(s_j) * intg0 + t_j * intg_z0 + conj(t_j) * intg_z1)
    )
    gt_coeff[1][2 * k] += 3 * intg_i.real
    gt_coeff[1][2 * k + 1] += 3 * intg_j.real
    gt_coeff[2][2 * k] += 3 * intg_i.imag
    gt_coeff[2][2 * k + 1] += 3 * intg_j.imag

    s_i = 3 * kappa_i2 * inv_kappa - 2 * kappa_i
    u_i = 6 * kappa_i_abs_sq - 6 * (kappa_i2 * kappa_r).real
    s_j = 3 * kappa_j2 * inv_kappa - 2 * kappa_j
    u_j = 6 * kappa_j_abs_sq - 6 * (kappa_j2 * kappa_r).real
    intg_i = rotate_right(s_i * intg2 + conj(s_i) * intg1 + u_i * intg_z0)
    intg_j = rotate_right(s_j * intg2 + conj(s_j) * intg1 + u_j * intg_z0)
    cos_cos_i, sin_sin_i, sin_cos_i = _angular_split(
        2 * (s_i * intg1).imag + 2 * u_i * intg_z1.imag, intg_i
    )
    cos_cos_j, sin_sin_j, sin_cos_j = _angular_split(
        2 * (s_j * intg1).imag + 2 * u_j * intg_z1.imag, intg_j
    )
    _add_tangent_terms(
        workspace, 1, k, vec_ij,
        complex(cos_cos_i, sin_cos_i), complex(cos_cos_j, sin_cos_j),
    )
    _add_tangent_terms(
        workspace, 2, k, vec_ij,
        complex(sin_cos_i, sin_sin_i), complex(sin_cos_j, sin_sin_j),
    )

    for basis in range(BASIS_COUNT):
        delta = (gt_coeff[basis][2 * k] - gt_coeff[basis][2 * k + 1]) * inv_dist_ij
        v_coeff[basis][i] += delta
        v_coeff[basis][j] -= delta
