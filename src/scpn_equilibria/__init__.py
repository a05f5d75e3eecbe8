# ──────────────────────────────────────────────────────────────────────
# SCPN Equilibria — Package Init
# © 1998–2026 Miroslav Šotek. All rights reserved.
# Contact: www.anulum.li | protoscience@anulum.li
# ORCID: https://orcid.org/0009-0009-3560-0851
# License: GNU AGPL v3 | Commercial licensing available
# ──────────────────────────────────────────────────────────────────────
"""scpn-equilibria: closed-form analytic magnetic field equilibria."""
from __future__ import annotations

__version__ = "0.1.0"

from scpn_equilibria.core import (
    AnalyticEquilibrium,
    AxisymmetricTokamakCylindrical,
    ConstructionError,
    DomainError,
    EquilibriumError,
    SingularSystemError,
    SolovevXpoint,
    SymmetricQuadratic,
    get_preset,
    metric,
    solovev_xpoint_iter,
    solovev_xpoint_nstx,
    vector_potential,
)

__all__ = [
    "__version__",
    "AnalyticEquilibrium",
    "AxisymmetricTokamakCylindrical",
    "SolovevXpoint",
    "SymmetricQuadratic",
    "EquilibriumError",
    "ConstructionError",
    "SingularSystemError",
    "DomainError",
    "get_preset",
    "solovev_xpoint_iter",
    "solovev_xpoint_nstx",
    "vector_potential",
    "metric",
]
