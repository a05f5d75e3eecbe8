# ──────────────────────────────────────────────────────────────────────
# SCPN Equilibria — Axisymmetric Tokamak (Cylindrical Coordinates)
# © 1998–2026 Miroslav Šotek. All rights reserved.
# Contact: www.anulum.li | protoscience@anulum.li
# ORCID: https://orcid.org/0009-0009-3560-0851
# License: GNU AGPL v3 | Commercial licensing available
# ──────────────────────────────────────────────────────────────────────
"""Axisymmetric tokamak equilibrium in (R, Z, ϕ) coordinates.

Toroidal field B₀R₀/R and circular flux surfaces around the magnetic axis
at R = R₀ with constant safety factor q₀.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np

from scpn_equilibria.core.equilibrium import (
    Point,
    as_point,
    default_periodicity,
    require_finite,
    require_positive,
    require_positive_radius,
)
from scpn_equilibria.core.errors import ConstructionError


@dataclass(frozen=True)
class AxisymmetricTokamakCylindrical:
    """
    Parameters
    ----------
    R0 : position of the magnetic axis [m]
    B0 : magnetic field at the magnetic axis [T]
    q0 : safety factor at the magnetic axis
    """

    R0: float = 1.0
    B0: float = 1.0
    q0: float = 2.0
    name: str = field(default="AxisymmetricTokamakCylindricalEquilibrium", init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "R0", require_positive("R0", self.R0))
        object.__setattr__(self, "B0", require_finite("B0", self.B0))
        q0 = require_finite("q0", self.q0)
        if q0 == 0.0:
            raise ConstructionError("q0 must be non-zero")
        object.__setattr__(self, "q0", q0)

    def __str__(self) -> str:
        return (
            "Axisymmetric Tokamak Equilibrium in (R,Z,ϕ) Coordinates with\n"
            f"  R₀ = {self.R0}\n"
            f"  B₀ = {self.B0}\n"
            f"  q₀ = {self.q0}"
        )

    # ── Coordinates ──────────────────────────────────────────────────

    def X(self, x: Point) -> Any:
        return self.R(x) * np.cos(self.phi(x))

    def Y(self, x: Point) -> Any:
        return self.R(x) * np.sin(self.phi(x))

    def Z(self, x: Point) -> Any:
        return as_point(x)[1]

    def R(self, x: Point) -> Any:
        return as_point(x)[0]

    def r(self, x: Point) -> Any:
        return np.sqrt(self.r2(x))

    def r2(self, x: Point) -> Any:
        return (self.R(x) - self.R0) ** 2 + self.Z(x) ** 2

    def theta(self, x: Point) -> Any:
        return np.arctan2(self.Z(x), self.R(x) - self.R0)

    def phi(self, x: Point) -> Any:
        return as_point(x)[2]

    def J(self, x: Point) -> Any:
        return self.R(x)

    def periodicity(self, x: Point) -> np.ndarray:
        as_point(x)
        return default_periodicity()

    # ── Vector potential ─────────────────────────────────────────────

    def A1(self, x: Point) -> Any:
        R = require_positive_radius("R", self.R(x))
        return self.B0 * self.R0 * self.Z(x) / R / 2

    def A2(self, x: Point) -> Any:
        R = require_positive_radius("R", self.R(x))
        return -self.B0 * self.R0 * np.log(R / self.R0) / 2

    def A3(self, x: Point) -> Any:
        return -self.B0 * self.r2(x) / self.q0 / 2

    # ── Metric ───────────────────────────────────────────────────────

    def g11(self, x: Point) -> Any:
        return 1.0

    def g22(self, x: Point) -> Any:
        return 1.0

    def g33(self, x: Point) -> Any:
        return self.R(x) ** 2
