# ──────────────────────────────────────────────────────────────────────
# SCPN Equilibria — Solov'ev X-point Equilibrium
# © 1998–2026 Miroslav Šotek. All rights reserved.
# Contact: www.anulum.li | protoscience@anulum.li
# ORCID: https://orcid.org/0009-0009-3560-0851
# License: GNU AGPL v3 | Commercial licensing available
# ──────────────────────────────────────────────────────────────────────
"""
Axisymmetric Solov'ev equilibrium with a lower X-point.

Coordinates are (R/R₀, Z/R₀, ϕ).  Based on Cerfon & Freidberg, Physics of
Plasmas 17, 032502 (2010).  The poloidal flux ψ is the toroidal covariant
component of the vector potential, A₃.

The coefficients c₁ … c₁₂ are solved once in ``__post_init__`` from the
shape parameters; an instance with unsolved coefficients is never returned.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional, Tuple

import numpy as np

from scpn_equilibria.core import solovev_basis
from scpn_equilibria.core.equilibrium import (
    Point,
    as_point,
    default_periodicity,
    require_finite,
    require_positive,
    require_positive_radius,
)
from scpn_equilibria.core.errors import ConstructionError
from scpn_equilibria.core.solovev_constraints import ControlPoints, control_points
from scpn_equilibria.core.solovev_solver import (
    constraint_residuals,
    solve_coefficients,
)

logger = logging.getLogger(__name__)


def _validate_shape(epsilon: float, kappa: float, delta: float, x_sep: float) -> None:
    # kappa == 0 and |delta| == 1 collapse the boundary and are reported by
    # the constraint assembler as singular geometry.
    if not 0.0 < epsilon < 1.0:
        raise ConstructionError(f"epsilon must lie in (0, 1), got {epsilon!r}")
    if kappa < 0.0:
        raise ConstructionError(f"kappa must be > 0, got {kappa!r}")
    if abs(delta) > 1.0:
        raise ConstructionError(f"delta must lie in (-1, 1), got {delta!r}")
    if x_sep <= 0.0:
        raise ConstructionError(f"x_sep must be > 0, got {x_sep!r}")


@dataclass(frozen=True)
class SolovevXpoint:
    """
    Parameters
    ----------
    R0 : position of the magnetic axis [m]
    B0 : magnetic field at the magnetic axis [T]
    epsilon : inverse aspect ratio
    kappa : elongation
    delta : triangularity
    a : free constant, determined to match a given beta value
    x_sep : normalised x position of the X-point
    y_sep : normalised y position of the X-point
    max_condition : optional cap on the equilibrated condition number of
        the coefficient system (None: no cap)
    """

    R0: float
    B0: float
    epsilon: float
    kappa: float
    delta: float
    a: float
    x_sep: float
    y_sep: float
    max_condition: Optional[float] = field(default=None, repr=False, compare=False)
    name: str = field(default="SolovevXpointEquilibrium", init=False)
    c: Tuple[float, ...] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        for attr in ("B0", "epsilon", "kappa", "delta", "a", "x_sep", "y_sep"):
            object.__setattr__(self, attr, require_finite(attr, getattr(self, attr)))
        object.__setattr__(self, "R0", require_positive("R0", self.R0))
        _validate_shape(self.epsilon, self.kappa, self.delta, self.x_sep)

        coefficients = solve_coefficients(
            self.epsilon,
            self.kappa,
            self.delta,
            self.a,
            self.x_sep,
            self.y_sep,
            max_condition=self.max_condition,
        )
        object.__setattr__(self, "c", coefficients)
        logger.info(
            "Solov'ev X-point coefficients solved",
            extra={
                "physics_context": {
                    "epsilon": self.epsilon,
                    "kappa": self.kappa,
                    "delta": self.delta,
                    "x_sep": self.x_sep,
                    "y_sep": self.y_sep,
                }
            },
        )

    def __str__(self) -> str:
        return (
            "Solovev Xpoint Equilibrium with\n"
            f"  R₀ = {self.R0}\n"
            f"  B₀ = {self.B0}\n"
            f"  ϵ  = {self.epsilon}\n"
            f"  κ  = {self.kappa}\n"
            f"  δ  = {self.delta}\n"
            f"  a  = {self.a}\n"
            f"  xₛₑₚ  = {self.x_sep}\n"
            f"  yₛₑₚ  = {self.y_sep}"
        )

    @property
    def coefficients(self) -> Tuple[float, ...]:
        return self.c

    def control_points(self) -> ControlPoints:
        return control_points(self.epsilon, self.kappa, self.delta, self.x_sep, self.y_sep)

    def constraint_residuals(self) -> np.ndarray:
        return constraint_residuals(
            self.c, self.epsilon, self.kappa, self.delta, self.a, self.x_sep, self.y_sep
        )

    # ── Flux function on normalised (x, y) ───────────────────────────

    def psi(self, x: Any, y: Any) -> Any:
        return solovev_basis.flux(x, y, self.a, self.c)

    def dpsi_dx(self, x: Any, y: Any) -> Any:
        return solovev_basis.flux(x, y, self.a, self.c, "x")

    def dpsi_dy(self, x: Any, y: Any) -> Any:
        return solovev_basis.flux(x, y, self.a, self.c, "y")

    def d2psi_dx2(self, x: Any, y: Any) -> Any:
        return solovev_basis.flux(x, y, self.a, self.c, "xx")

    def d2psi_dy2(self, x: Any, y: Any) -> Any:
        return solovev_basis.flux(x, y, self.a, self.c, "yy")

    # ── Coordinates ──────────────────────────────────────────────────

    def X(self, x: Point) -> Any:
        return self.R(x) * np.cos(self.phi(x))

    def Y(self, x: Point) -> Any:
        return self.R(x) * np.sin(self.phi(x))

    def Z(self, x: Point) -> Any:
        return self.R0 * as_point(x)[1]

    def R(self, x: Point) -> Any:
        return self.R0 * as_point(x)[0]

    def r(self, x: Point) -> Any:
        return np.sqrt(self.r2(x))

    def r2(self, x: Point) -> Any:
        return (self.R(x) - self.R0) ** 2 + self.Z(x) ** 2

    def theta(self, x: Point) -> Any:
        return np.arctan2(self.Z(x), self.R(x) - self.R0)

    def phi(self, x: Point) -> Any:
        return as_point(x)[2]

    def periodicity(self, x: Point) -> np.ndarray:
        as_point(x)
        return default_periodicity()

    # ── Vector potential ─────────────────────────────────────────────

    def A1(self, x: Point) -> Any:
        x1, x2, _ = as_point(x)
        require_positive_radius("R/R0", x1)
        return self.B0 * self.R0 * x2 / x1 / 2

    def A2(self, x: Point) -> Any:
        x1 = require_positive_radius("R/R0", as_point(x)[0])
        return -self.B0 * self.R0 * np.log(x1) / 2

    def A3(self, x: Point) -> Any:
        x1, x2, _ = as_point(x)
        return self.psi(x1, x2)

    # ── Metric ───────────────────────────────────────────────────────

    def g11(self, x: Point) -> Any:
        return self.R0**2

    def g22(self, x: Point) -> Any:
        return self.R0**2

    def g33(self, x: Point) -> Any:
        return self.R(x) ** 2
