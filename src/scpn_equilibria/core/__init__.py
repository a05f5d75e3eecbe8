# ──────────────────────────────────────────────────────────────────────
# SCPN Equilibria — Core Package Init
# © 1998–2026 Miroslav Šotek. All rights reserved.
# Contact: www.anulum.li | protoscience@anulum.li
# ORCID: https://orcid.org/0009-0009-3560-0851
# License: GNU AGPL v3 | Commercial licensing available
# ──────────────────────────────────────────────────────────────────────
from .errors import ConstructionError, DomainError, EquilibriumError, SingularSystemError
from .equilibrium import AnalyticEquilibrium, describe, metric, vector_potential
from .axisymmetric_tokamak import AxisymmetricTokamakCylindrical
from .solovev_xpoint import SolovevXpoint
from .symmetric_quadratic import SymmetricQuadratic
from .solovev_solver import solve_coefficients
from .presets import (
    PRESET_PARAMETERS,
    available_presets,
    get_preset,
    solovev_xpoint_iter,
    solovev_xpoint_nstx,
)

# pydantic is only needed for config validation
_LAZY_IMPORTS: dict[str, tuple[str, str]] = {
    "SolverSettings": (".config_schema", "SolverSettings"),
    "build_equilibrium": (".config_schema", "build_equilibrium"),
    "validate_equilibrium_config": (".config_schema", "validate_equilibrium_config"),
}


def __getattr__(name: str):
    if name in _LAZY_IMPORTS:
        module_path, attr = _LAZY_IMPORTS[name]
        import importlib
        mod = importlib.import_module(module_path, __name__)
        val = getattr(mod, attr)
        globals()[name] = val
        return val
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
