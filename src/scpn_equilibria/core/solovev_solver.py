# ──────────────────────────────────────────────────────────────────────
# SCPN Equilibria — Solov'ev X-point Coefficient Solver
# © 1998–2026 Miroslav Šotek. All rights reserved.
# Contact: www.anulum.li | protoscience@anulum.li
# ORCID: https://orcid.org/0009-0009-3560-0851
# License: GNU AGPL v3 | Commercial licensing available
# ──────────────────────────────────────────────────────────────────────
"""
Dense LU solve of the Solov'ev X-point constraint system.

The twelve constraints are linear in c₁ … c₁₂ once the shape parameters are
fixed, so the basis values at the control points are assembled numerically
and solved with a standard LU factorisation of the row and column
equilibrated matrix.

The monomial basis is badly conditioned for thin shapes (small ϵ) even though
the system is regular and LU solves it to working precision, so the
condition number alone does not decide singularity.  A system is rejected
with :class:`SingularSystemError` when it has non-finite entries, an empty
row or column, an exactly zero pivot, or when the computed coefficients do
not satisfy the constraints (backward error above ``RESIDUAL_TOLERANCE``).
Coincident control points are caught earlier by the assembler.
"""

from __future__ import annotations

import logging
import warnings
from typing import Optional, Tuple

import numpy as np
from scipy.linalg import LinAlgWarning, lu_factor, lu_solve

from scpn_equilibria.core.errors import SingularSystemError
from scpn_equilibria.core.solovev_constraints import (
    ConstraintSystem,
    assemble_constraints,
)

logger = logging.getLogger(__name__)

# Normwise relative backward error accepted after the solve.
RESIDUAL_TOLERANCE = 1.0e-10


def equilibrate(matrix: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """Row and column scale factors bringing every row and column max to 1."""
    row_max = np.max(np.abs(matrix), axis=1)
    if np.any(row_max == 0.0):
        raise SingularSystemError("Constraint system has an all-zero row")
    row_scale = 1.0 / row_max
    col_max = np.max(np.abs(matrix * row_scale[:, None]), axis=0)
    if np.any(col_max == 0.0):
        raise SingularSystemError("Constraint system has an all-zero column")
    return row_scale, 1.0 / col_max


def backward_error(system: ConstraintSystem, coefficients: np.ndarray) -> float:
    """‖A c − b‖∞ / (‖A‖∞ ‖c‖∞ + ‖b‖∞)."""
    residual = system.matrix @ coefficients - system.rhs
    scale = (
        np.linalg.norm(system.matrix, np.inf) * np.linalg.norm(coefficients, np.inf)
        + np.linalg.norm(system.rhs, np.inf)
    )
    if scale == 0.0:
        return 0.0
    return float(np.linalg.norm(residual, np.inf) / scale)


def solve_system(
    system: ConstraintSystem, *, max_condition: Optional[float] = None
) -> np.ndarray:
    """Solve an assembled constraint system, rejecting singular matrices.

    ``max_condition`` optionally caps the 2-norm condition number of the
    equilibrated matrix; ``None`` applies no cap.
    """
    if not (np.all(np.isfinite(system.matrix)) and np.all(np.isfinite(system.rhs))):
        raise SingularSystemError("Constraint system contains non-finite entries")

    row_scale, col_scale = equilibrate(system.matrix)
    scaled = system.matrix * row_scale[:, None] * col_scale[None, :]
    condition = float(np.linalg.cond(scaled))
    if max_condition is not None and not condition <= max_condition:
        raise SingularSystemError(
            f"Equilibrated constraint system is ill-conditioned "
            f"(cond={condition:.3e} > {max_condition:.3e})"
        )

    with warnings.catch_warnings():
        warnings.simplefilter("error", LinAlgWarning)
        try:
            lu, piv = lu_factor(scaled, check_finite=False)
        except (LinAlgWarning, np.linalg.LinAlgError) as exc:
            raise SingularSystemError(
                f"Constraint system is singular; control points are not independent ({exc})"
            ) from exc
    if np.any(np.diag(lu) == 0.0):
        raise SingularSystemError(
            "Constraint system is singular; control points are not independent"
        )

    coefficients = col_scale * lu_solve((lu, piv), row_scale * system.rhs, check_finite=False)
    if not np.all(np.isfinite(coefficients)):
        raise SingularSystemError("Solved coefficients are not finite")

    error = backward_error(system, coefficients)
    if error > RESIDUAL_TOLERANCE:
        raise SingularSystemError(
            f"Solved coefficients do not satisfy the constraints "
            f"(backward error {error:.3e} > {RESIDUAL_TOLERANCE:.1e})"
        )

    residual = float(np.max(np.abs(system.matrix @ coefficients - system.rhs)))
    logger.debug(
        "Solov'ev constraint system solved",
        extra={
            "physics_context": {
                "condition": condition,
                "backward_error": error,
                "max_residual": residual,
            }
        },
    )
    return coefficients


def solve_coefficients(
    epsilon: float,
    kappa: float,
    delta: float,
    a: float,
    x_sep: float,
    y_sep: float,
    *,
    max_condition: Optional[float] = None,
) -> Tuple[float, ...]:
    """Coefficients c₁ … c₁₂ of the X-point equilibrium as a tuple of floats.

    Parameters
    ----------
    epsilon, kappa, delta : inverse aspect ratio, elongation, triangularity.
    a : free constant of the particular solution ψ₀.
    x_sep, y_sep : normalised X-point location.
    max_condition : optional cap on the equilibrated condition number.

    Raises
    ------
    SingularSystemError
        If the constraint geometry is degenerate.
    """
    system = assemble_constraints(epsilon, kappa, delta, a, x_sep, y_sep)
    coefficients = solve_system(system, max_condition=max_condition)
    return tuple(float(c) for c in coefficients)


def constraint_residuals(
    coefficients: Tuple[float, ...],
    epsilon: float,
    kappa: float,
    delta: float,
    a: float,
    x_sep: float,
    y_sep: float,
) -> np.ndarray:
    """Residual A c − b of every constraint for a given coefficient vector."""
    system = assemble_constraints(epsilon, kappa, delta, a, x_sep, y_sep)
    return system.matrix @ np.asarray(coefficients, dtype=float) - system.rhs
