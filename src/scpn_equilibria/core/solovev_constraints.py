# ──────────────────────────────────────────────────────────────────────
# SCPN Equilibria — Solov'ev X-point Constraint Assembly
# © 1998–2026 Miroslav Šotek. All rights reserved.
# Contact: www.anulum.li | protoscience@anulum.li
# ORCID: https://orcid.org/0009-0009-3560-0851
# License: GNU AGPL v3 | Commercial licensing available
# ──────────────────────────────────────────────────────────────────────
"""
Boundary and shape constraints of the single-null Solov'ev equilibrium.

The plasma boundary ψ = 0 is pinned at four points of the normalised
(x, y) plane: the outer and inner equatorial points, the high point and
the X-point.  Together with the up-down symmetry, extremum, null-gradient
and curvature conditions of Cerfon & Freidberg (2010) this gives twelve
equations that are linear in the coefficients c₁ … c₁₂:

    Σᵢ cᵢ Lψᵢ(p) = −Lψ₀(p)

where L is a fixed linear combination of ψ and its partial derivatives
and p one of the control points.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import NamedTuple, Tuple

import numpy as np

from scpn_equilibria.core.errors import SingularSystemError
from scpn_equilibria.core.solovev_basis import N_HOMOGENEOUS, evaluate_basis

Point2D = Tuple[float, float]

COINCIDENCE_TOLERANCE = 1.0e-9


class ControlPoints(NamedTuple):
    """Normalised (x, y) locations where the boundary is constrained."""

    outer: Point2D
    inner: Point2D
    high: Point2D
    xpoint: Point2D


@dataclass(frozen=True)
class ConstraintSystem:
    """Dense linear system  matrix @ c = rhs  with one label per row."""

    matrix: np.ndarray
    rhs: np.ndarray
    labels: Tuple[str, ...]


def control_points(
    epsilon: float, kappa: float, delta: float, x_sep: float, y_sep: float
) -> ControlPoints:
    return ControlPoints(
        outer=(1.0 + epsilon, 0.0),
        inner=(1.0 - epsilon, 0.0),
        high=(1.0 - delta * epsilon, kappa * epsilon),
        xpoint=(float(x_sep), float(y_sep)),
    )


def check_distinct(points: ControlPoints, epsilon: float) -> None:
    """Raise SingularSystemError if two control points coincide.

    Points closer than ``COINCIDENCE_TOLERANCE * epsilon`` are treated as the
    same point; their value and slope rows would repeat.
    """
    tol = COINCIDENCE_TOLERANCE * abs(epsilon)
    named = list(points._asdict().items())
    for i, (name_i, p_i) in enumerate(named):
        for name_j, p_j in named[i + 1:]:
            if math.hypot(p_i[0] - p_j[0], p_i[1] - p_j[1]) <= tol:
                raise SingularSystemError(
                    f"Control points {name_i} and {name_j} coincide at {p_i}; "
                    "constraints are not independent"
                )


def curvature_factors(
    epsilon: float, kappa: float, delta: float
) -> Tuple[float, float, float]:
    """Curvature coefficients N₁, N₂, N₃ at the outer, inner and high points.

    With α = asin δ:
        N₁ = −(1 + α)² / (ϵ κ²)
        N₂ =  (1 − α)² / (ϵ κ²)
        N₃ = −κ / (ϵ cos² α) = −κ / (ϵ (1 − δ²))
    """
    if epsilon == 0.0 or kappa == 0.0 or abs(delta) >= 1.0:
        raise SingularSystemError(
            "Boundary shape collapses: need epsilon != 0, kappa != 0, |delta| < 1 "
            f"(got epsilon={epsilon!r}, kappa={kappa!r}, delta={delta!r})"
        )
    alpha = math.asin(delta)
    n1 = -((1.0 + alpha) ** 2) / (epsilon * kappa**2)
    n2 = (1.0 - alpha) ** 2 / (epsilon * kappa**2)
    n3 = -kappa / (epsilon * (1.0 - delta**2))
    if not all(math.isfinite(v) for v in (n1, n2, n3)):
        raise SingularSystemError(
            f"Non-finite curvature factors N1={n1!r}, N2={n2!r}, N3={n3!r}"
        )
    return n1, n2, n3


def _equation_table(
    points: ControlPoints, factors: Tuple[float, float, float]
) -> Tuple[Tuple[str, Point2D, Tuple[Tuple[str, float], ...]], ...]:
    n1, n2, n3 = factors
    return (
        ("psi(outer)", points.outer, (("psi", 1.0),)),
        ("psi(inner)", points.inner, (("psi", 1.0),)),
        ("psi(high)", points.high, (("psi", 1.0),)),
        ("psi(xpoint)", points.xpoint, (("psi", 1.0),)),
        ("psi_y(outer)", points.outer, (("y", 1.0),)),
        ("psi_y(inner)", points.inner, (("y", 1.0),)),
        ("psi_x(high)", points.high, (("x", 1.0),)),
        ("psi_x(xpoint)", points.xpoint, (("x", 1.0),)),
        ("psi_y(xpoint)", points.xpoint, (("y", 1.0),)),
        ("curvature(outer)", points.outer, (("yy", 1.0), ("x", n1))),
        ("curvature(inner)", points.inner, (("yy", 1.0), ("x", n2))),
        ("curvature(high)", points.high, (("xx", 1.0), ("y", n3))),
    )


def assemble_constraints(
    epsilon: float,
    kappa: float,
    delta: float,
    a: float,
    x_sep: float,
    y_sep: float,
) -> ConstraintSystem:
    """Build the 12×12 constraint matrix and right-hand side."""
    points = control_points(epsilon, kappa, delta, x_sep, y_sep)
    factors = curvature_factors(epsilon, kappa, delta)
    check_distinct(points, epsilon)
    table = _equation_table(points, factors)

    matrix = np.zeros((len(table), N_HOMOGENEOUS), dtype=float)
    rhs = np.zeros(len(table), dtype=float)
    labels = []
    for row, (label, (x, y), combination) in enumerate(table):
        for derivative, weight in combination:
            particular, homogeneous = evaluate_basis(x, y, a, derivative)
            matrix[row] += weight * homogeneous
            rhs[row] -= weight * particular
        labels.append(label)

    return ConstraintSystem(matrix=matrix, rhs=rhs, labels=tuple(labels))
