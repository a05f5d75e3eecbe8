# ──────────────────────────────────────────────────────────────────────
# SCPN Equilibria — Symmetric Quadratic Field
# © 1998–2026 Miroslav Šotek. All rights reserved.
# Contact: www.anulum.li | protoscience@anulum.li
# ORCID: https://orcid.org/0009-0009-3560-0851
# License: GNU AGPL v3 | Commercial licensing available
# ──────────────────────────────────────────────────────────────────────
"""Symmetric quadratic equilibrium in Cartesian (x, y, z) coordinates.

    B(x, y, z) = B₀ (0, 0, 1 + x² + y²)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np

from scpn_equilibria.core.equilibrium import Point, as_point, require_finite


@dataclass(frozen=True)
class SymmetricQuadratic:
    B0: float = 1.0
    name: str = field(default="SymmetricQuadraticEquilibrium", init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "B0", require_finite("B0", self.B0))

    def __str__(self) -> str:
        return "Symmetric Quadratic Equilibrium"

    def X(self, x: Point) -> Any:
        return as_point(x)[0]

    def Y(self, x: Point) -> Any:
        return as_point(x)[1]

    def Z(self, x: Point) -> Any:
        return as_point(x)[2]

    def R(self, x: Point) -> Any:
        return self.r(x)

    def r(self, x: Point) -> Any:
        return np.sqrt(self.r2(x))

    def r2(self, x: Point) -> Any:
        return self.X(x) ** 2 + self.Y(x) ** 2

    def theta(self, x: Point) -> Any:
        return np.arctan2(self.Y(x), self.X(x))

    def phi(self, x: Point) -> Any:
        return self.theta(x)

    def periodicity(self, x: Point) -> np.ndarray:
        as_point(x)
        return np.zeros(3)

    def A1(self, x: Point) -> Any:
        x1, x2, _ = as_point(x)
        return -self.B0 * x2 * (2 + x1**2 + x2**2) / 4

    def A2(self, x: Point) -> Any:
        x1, x2, _ = as_point(x)
        return self.B0 * x1 * (2 + x1**2 + x2**2) / 4

    def A3(self, x: Point) -> Any:
        return np.zeros_like(np.asarray(as_point(x)[0], dtype=float))[()]

    def g11(self, x: Point) -> Any:
        return 1.0

    def g22(self, x: Point) -> Any:
        return 1.0

    def g33(self, x: Point) -> Any:
        return 1.0
