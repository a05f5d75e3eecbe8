# ──────────────────────────────────────────────────────────────────────
# SCPN Equilibria — Analytic Equilibrium Contract
# © 1998–2026 Miroslav Šotek. All rights reserved.
# Contact: www.anulum.li | protoscience@anulum.li
# ORCID: https://orcid.org/0009-0009-3560-0851
# License: GNU AGPL v3 | Commercial licensing available
# ──────────────────────────────────────────────────────────────────────
"""
Formula interface shared by every analytic equilibrium.

A point ``x`` is a length-3 sequence in the equilibrium's own coordinates.
Components may be floats or equally shaped numpy arrays, in which case every
formula is evaluated element-wise.  Vector potential components are covariant
components in the coordinate basis; the metric is diagonal.
"""

from __future__ import annotations

import math
from typing import Any, Protocol, Sequence, Tuple, runtime_checkable

import numpy as np

from scpn_equilibria.core.errors import ConstructionError, DomainError

TWO_PI = 2.0 * math.pi

Point = Sequence[Any]


@runtime_checkable
class AnalyticEquilibrium(Protocol):
    """Capability set of an analytic equilibrium model."""

    name: str

    def X(self, x: Point) -> Any: ...
    def Y(self, x: Point) -> Any: ...
    def Z(self, x: Point) -> Any: ...
    def R(self, x: Point) -> Any: ...
    def r(self, x: Point) -> Any: ...
    def r2(self, x: Point) -> Any: ...
    def theta(self, x: Point) -> Any: ...
    def phi(self, x: Point) -> Any: ...

    def A1(self, x: Point) -> Any: ...
    def A2(self, x: Point) -> Any: ...
    def A3(self, x: Point) -> Any: ...

    def g11(self, x: Point) -> Any: ...
    def g22(self, x: Point) -> Any: ...
    def g33(self, x: Point) -> Any: ...

    def periodicity(self, x: Point) -> np.ndarray: ...


# ── Helpers ──────────────────────────────────────────────────────────


def as_point(x: Point) -> Tuple[Any, Any, Any]:
    """Validate a coordinate triple and return it as a tuple."""
    if isinstance(x, (str, bytes)) or not hasattr(x, "__len__") or len(x) != 3:
        raise ValueError(f"Expected a 3-component coordinate point, got {x!r}")
    return x[0], x[1], x[2]


def require_positive_radius(name: str, value: Any) -> Any:
    """Signal DomainError where 1/R or ln R would be singular or undefined."""
    if not np.all(np.asarray(value, dtype=float) > 0.0):
        raise DomainError(f"{name} must be > 0, got {value!r}")
    return value


def require_finite(name: str, value: float) -> float:
    value_f = float(value)
    if not math.isfinite(value_f):
        raise ConstructionError(f"{name} must be finite, got {value!r}")
    return value_f


def require_positive(name: str, value: float) -> float:
    value_f = require_finite(name, value)
    if value_f <= 0.0:
        raise ConstructionError(f"{name} must be > 0, got {value!r}")
    return value_f


def default_periodicity() -> np.ndarray:
    """Only the toroidal angle (third coordinate) is periodic."""
    p = np.zeros(3)
    p[2] = TWO_PI
    return p


# ── Aggregates over the protocol ─────────────────────────────────────


def vector_potential(equ: AnalyticEquilibrium, x: Point) -> np.ndarray:
    """Covariant components (A₁, A₂, A₃) stacked along the first axis."""
    shape = np.broadcast_shapes(*(np.shape(c) for c in as_point(x)))
    return np.stack(
        [np.broadcast_to(np.asarray(c, dtype=float), shape) for c in (equ.A1(x), equ.A2(x), equ.A3(x))]
    )


def metric(equ: AnalyticEquilibrium, x: Point) -> np.ndarray:
    """Diagonal metric tensor; shape (3, 3) or (3, 3, *point_shape)."""
    # Constant components still follow the shape of the point
    shape = np.broadcast_shapes(*(np.shape(c) for c in as_point(x)))
    g = np.zeros((3, 3) + shape)
    for i, g_ii in enumerate((equ.g11(x), equ.g22(x), equ.g33(x))):
        g[i, i] = g_ii
    return g


def describe(equ: AnalyticEquilibrium) -> str:
    """Human-readable multi-line parameter summary."""
    return str(equ)
