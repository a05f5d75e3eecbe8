# ──────────────────────────────────────────────────────────────────────
# SCPN Equilibria — Solov'ev Basis Flux Functions
# © 1998–2026 Miroslav Šotek. All rights reserved.
# Contact: www.anulum.li | protoscience@anulum.li
# ORCID: https://orcid.org/0009-0009-3560-0851
# License: GNU AGPL v3 | Commercial licensing available
# ──────────────────────────────────────────────────────────────────────
"""
Closed-form solution basis of the Solov'ev Grad-Shafranov equation.

Cerfon & Freidberg, "One size fits all" analytic solutions to the
Grad-Shafranov equation, Phys. Plasmas 17, 032502 (2010).

In normalised coordinates x = R/R₀, y = Z/R₀ the flux function

    ψ(x, y) = ψ₀(x, y; a) + Σᵢ cᵢ ψᵢ(x, y),   i = 1 … 12

solves  x ∂/∂x (1/x ∂ψ/∂x) + ∂²ψ/∂y² = (1 − a) x² + a.

ψ₀ is the particular solution, ψ₁ … ψ₇ are the up-down symmetric and
ψ₈ … ψ₁₂ the antisymmetric homogeneous solutions.  Every function is a sum
of terms  k · xⁿ · yᵐ · (ln x)ˡ  with l ∈ {0, 1}; the tables below are the
published polynomials, and all partial derivatives are taken term by term.
"""

from __future__ import annotations

from typing import Any, Tuple

import numpy as np

from scpn_equilibria.core.errors import DomainError

# (coefficient, power of x, power of y, multiplied by ln x)
Term = Tuple[float, int, int, bool]

N_HOMOGENEOUS = 12

DERIVATIVES: dict[str, Tuple[int, int]] = {
    "psi": (0, 0),
    "x": (1, 0),
    "y": (0, 1),
    "xx": (2, 0),
    "yy": (0, 2),
}

HOMOGENEOUS_TERMS: Tuple[Tuple[Term, ...], ...] = (
    # ψ₁ = 1
    ((1.0, 0, 0, False),),
    # ψ₂ = x²
    ((1.0, 2, 0, False),),
    # ψ₃ = y² − x² ln x
    ((1.0, 0, 2, False), (-1.0, 2, 0, True)),
    # ψ₄ = x⁴ − 4x²y²
    ((1.0, 4, 0, False), (-4.0, 2, 2, False)),
    # ψ₅ = 2y⁴ − 9y²x² + 3x⁴ ln x − 12x²y² ln x
    (
        (2.0, 0, 4, False),
        (-9.0, 2, 2, False),
        (3.0, 4, 0, True),
        (-12.0, 2, 2, True),
    ),
    # ψ₆ = x⁶ − 12x⁴y² + 8x²y⁴
    ((1.0, 6, 0, False), (-12.0, 4, 2, False), (8.0, 2, 4, False)),
    # ψ₇ = 8y⁶ − 140y⁴x² + 75y²x⁴ − 15x⁶ ln x + 180x⁴y² ln x − 120x²y⁴ ln x
    (
        (8.0, 0, 6, False),
        (-140.0, 2, 4, False),
        (75.0, 4, 2, False),
        (-15.0, 6, 0, True),
        (180.0, 4, 2, True),
        (-120.0, 2, 4, True),
    ),
    # ψ₈ = y
    ((1.0, 0, 1, False),),
    # ψ₉ = y x²
    ((1.0, 2, 1, False),),
    # ψ₁₀ = y³ − 3y x² ln x
    ((1.0, 0, 3, False), (-3.0, 2, 1, True)),
    # ψ₁₁ = 3y x⁴ − 4y³x²
    ((3.0, 4, 1, False), (-4.0, 2, 3, False)),
    # ψ₁₂ = 8y⁵ − 45y x⁴ − 80y³x² ln x + 60y x⁴ ln x
    (
        (8.0, 0, 5, False),
        (-45.0, 4, 1, False),
        (-80.0, 2, 3, True),
        (60.0, 4, 1, True),
    ),
)


def particular_terms(a: float) -> Tuple[Term, ...]:
    """Terms of ψ₀ = x⁴/8 + a (x² ln x / 2 − x⁴/8)."""
    return (
        ((1.0 - a) / 8.0, 4, 0, False),
        (a / 2.0, 2, 0, True),
    )


# ── Term calculus ─────────────────────────────────────────────────────


def _falling(n: int, k: int) -> float:
    """Falling factorial n (n−1) … (n−k+1)."""
    out = 1.0
    for j in range(k):
        out *= n - j
    return out


def _x_factor(x: Any, n: int, log: bool, order: int, ln_x: Any) -> Any:
    if not log:
        k = _falling(n, order)
        return 0.0 if k == 0.0 else k * x ** (n - order)
    # d/dx (xⁿ ln x) = n xⁿ⁻¹ ln x + xⁿ⁻¹
    if order == 0:
        return x**n * ln_x
    if order == 1:
        return n * x ** (n - 1) * ln_x + x ** (n - 1)
    if order == 2:
        return n * (n - 1) * x ** (n - 2) * ln_x + (2 * n - 1) * x ** (n - 2)
    raise ValueError(f"x-derivative order {order} not supported")


def _y_factor(y: Any, m: int, order: int) -> Any:
    k = _falling(m, order)
    return 0.0 if k == 0.0 else k * y ** (m - order)


def _evaluate_terms(
    terms: Tuple[Term, ...], x: Any, y: Any, ln_x: Any, dx: int, dy: int
) -> Any:
    total: Any = 0.0
    for coeff, n, m, log in terms:
        if coeff == 0.0:
            continue
        total = total + coeff * _x_factor(x, n, log, dx, ln_x) * _y_factor(y, m, dy)
    return total


def _as_float(v: Any) -> Any:
    arr = np.asarray(v, dtype=float)
    return arr if arr.ndim else float(arr)


def _prepare(x: Any, y: Any) -> Tuple[Any, Any, Any]:
    """Coerce (x, y) to floats or arrays and return them together with ln x."""
    x_val, y_val = _as_float(x), _as_float(y)
    if not np.all(np.asarray(x_val) > 0.0):
        raise DomainError(f"normalised radius x = R/R0 must be > 0, got {x!r}")
    return x_val, y_val, np.log(x_val)


def _derivative_orders(derivative: str) -> Tuple[int, int]:
    try:
        return DERIVATIVES[derivative]
    except KeyError:
        raise ValueError(
            f"Unknown derivative {derivative!r}; must be one of {sorted(DERIVATIVES)}"
        ) from None


# ── Public evaluation API ─────────────────────────────────────────────


def psi_particular(x: Any, y: Any, a: float, derivative: str = "psi") -> Any:
    """ψ₀(x, y; a) or one of its partial derivatives."""
    dx, dy = _derivative_orders(derivative)
    x, y, ln_x = _prepare(x, y)
    return _evaluate_terms(particular_terms(a), x, y, ln_x, dx, dy)


def psi_homogeneous(x: Any, y: Any, derivative: str = "psi") -> Tuple[Any, ...]:
    """The twelve homogeneous solutions ψ₁ … ψ₁₂ (or a partial derivative of each)."""
    dx, dy = _derivative_orders(derivative)
    x, y, ln_x = _prepare(x, y)
    return tuple(
        _evaluate_terms(terms, x, y, ln_x, dx, dy) for terms in HOMOGENEOUS_TERMS
    )


def dpsi_homogeneous_dx(x: Any, y: Any) -> Tuple[Any, ...]:
    return psi_homogeneous(x, y, "x")


def dpsi_homogeneous_dy(x: Any, y: Any) -> Tuple[Any, ...]:
    return psi_homogeneous(x, y, "y")


def d2psi_homogeneous_dx2(x: Any, y: Any) -> Tuple[Any, ...]:
    return psi_homogeneous(x, y, "xx")


def d2psi_homogeneous_dy2(x: Any, y: Any) -> Tuple[Any, ...]:
    return psi_homogeneous(x, y, "yy")


def evaluate_basis(
    x: float, y: float, a: float, derivative: str = "psi"
) -> Tuple[float, np.ndarray]:
    """Return (ψ₀ part, 12-vector of ψᵢ parts) for one point and derivative."""
    particular = float(psi_particular(x, y, a, derivative))
    homogeneous = np.array(psi_homogeneous(x, y, derivative), dtype=float)
    return particular, homogeneous


def flux(
    x: Any, y: Any, a: float, coefficients: Tuple[float, ...], derivative: str = "psi"
) -> Any:
    """ψ₀ + Σ cᵢ ψᵢ evaluated for the given derivative."""
    if len(coefficients) != N_HOMOGENEOUS:
        raise ValueError(
            f"Expected {N_HOMOGENEOUS} coefficients, got {len(coefficients)}"
        )
    total = psi_particular(x, y, a, derivative)
    for c_i, psi_i in zip(coefficients, psi_homogeneous(x, y, derivative)):
        total = total + c_i * psi_i
    return total


def grad_shafranov_operator(
    x: Any, y: Any, a: float, coefficients: Tuple[float, ...]
) -> Any:
    """Δ*ψ = ψ_xx − ψ_x / x + ψ_yy for the full flux function."""
    return (
        flux(x, y, a, coefficients, "xx")
        - flux(x, y, a, coefficients, "x") / np.asarray(x, dtype=float)
        + flux(x, y, a, coefficients, "yy")
    )
