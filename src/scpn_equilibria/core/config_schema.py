# ─────────────────────────────────────────────────────────────────────
# SCPN Equilibria — Configuration Schema
# © 1998–2026 Miroslav Šotek. All rights reserved.
# ─────────────────────────────────────────────────────────────────────
"""
Strict schema validation for analytic equilibrium configurations using Pydantic.
Catches malformed parameter sets before the coefficient solve is attempted.
"""

from __future__ import annotations

import os
from typing import Annotated, Any, Literal, Mapping, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    field_validator,
    model_validator,
)

from scpn_equilibria.core.axisymmetric_tokamak import AxisymmetricTokamakCylindrical
from scpn_equilibria.core.equilibrium import AnalyticEquilibrium
from scpn_equilibria.core.presets import canonical_preset_name, get_preset
from scpn_equilibria.core.solovev_xpoint import SolovevXpoint
from scpn_equilibria.core.symmetric_quadratic import SymmetricQuadratic

MAX_CONDITION_ENV = "SCPN_EQ_MAX_CONDITION"

_SHAPE_FIELDS = ("R0", "B0", "epsilon", "kappa", "delta", "a", "x_sep", "y_sep")


class SolverSettings(BaseModel):
    model_config = ConfigDict(extra="allow", allow_inf_nan=False)
    max_condition: Optional[float] = Field(default=None, gt=1.0)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "SolverSettings":
        env = os.environ if environ is None else environ
        raw = env.get(MAX_CONDITION_ENV)
        if raw is None or not raw.strip():
            return cls()
        return cls(max_condition=raw.strip())


class AxisymmetricTokamakParams(BaseModel):
    model_config = ConfigDict(extra="allow", allow_inf_nan=False)
    kind: Literal["axisymmetric_tokamak"]
    R0: float = Field(default=1.0, gt=0)
    B0: float = 1.0
    q0: float = 2.0

    @field_validator("q0")
    @classmethod
    def q0_nonzero(cls, v: float) -> float:
        if v == 0.0:
            raise ValueError("q0 must be non-zero")
        return v


class SolovevXpointParams(BaseModel):
    model_config = ConfigDict(extra="allow", allow_inf_nan=False)
    kind: Literal["solovev_xpoint"]
    preset: Optional[str] = None
    R0: Optional[float] = Field(default=None, gt=0)
    B0: Optional[float] = None
    epsilon: Optional[float] = Field(default=None, gt=0, lt=1)
    kappa: Optional[float] = Field(default=None, gt=0)
    delta: Optional[float] = Field(default=None, gt=-1, lt=1)
    a: Optional[float] = None
    x_sep: Optional[float] = Field(default=None, gt=0)
    y_sep: Optional[float] = None
    solver: SolverSettings = Field(default_factory=lambda: SolverSettings.from_env())

    @field_validator("preset")
    @classmethod
    def preset_known(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        try:
            return canonical_preset_name(v)
        except KeyError as exc:
            raise ValueError(str(exc)) from exc

    @model_validator(mode="after")
    def preset_or_parameters(self) -> "SolovevXpointParams":
        given = [f for f in _SHAPE_FIELDS if getattr(self, f) is not None]
        if self.preset is not None:
            if given:
                raise ValueError(
                    f"preset {self.preset!r} cannot be combined with explicit parameters {given}"
                )
            return self
        missing = [f for f in _SHAPE_FIELDS if getattr(self, f) is None]
        if missing:
            raise ValueError(f"missing Solov'ev parameters: {missing}")
        return self


class SymmetricQuadraticParams(BaseModel):
    model_config = ConfigDict(extra="allow", allow_inf_nan=False)
    kind: Literal["symmetric_quadratic"]
    B0: float = 1.0


EquilibriumConfig = Annotated[
    Union[AxisymmetricTokamakParams, SolovevXpointParams, SymmetricQuadraticParams],
    Field(discriminator="kind"),
]

_CONFIG_ADAPTER: TypeAdapter[Any] = TypeAdapter(EquilibriumConfig)


def validate_equilibrium_config(config_dict: dict) -> Any:
    """Validate a raw configuration dictionary and return the matching params model."""
    return _CONFIG_ADAPTER.validate_python(config_dict)


def build_equilibrium(config_dict: dict) -> AnalyticEquilibrium:
    """Validate ``config_dict`` and construct the equilibrium it describes."""
    params = validate_equilibrium_config(config_dict)
    if isinstance(params, AxisymmetricTokamakParams):
        return AxisymmetricTokamakCylindrical(R0=params.R0, B0=params.B0, q0=params.q0)
    if isinstance(params, SymmetricQuadraticParams):
        return SymmetricQuadratic(B0=params.B0)
    if params.preset is not None:
        return get_preset(params.preset)
    return SolovevXpoint(
        **{f: getattr(params, f) for f in _SHAPE_FIELDS},
        max_condition=params.solver.max_condition,
    )
