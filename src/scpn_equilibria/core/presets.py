# ──────────────────────────────────────────────────────────────────────
# SCPN Equilibria — Named Solov'ev Presets
# © 1998–2026 Miroslav Šotek. All rights reserved.
# Contact: www.anulum.li | protoscience@anulum.li
# ORCID: https://orcid.org/0009-0009-3560-0851
# License: GNU AGPL v3 | Commercial licensing available
# ──────────────────────────────────────────────────────────────────────
"""Canonical Solov'ev X-point equilibria with fixed literal parameters.

Parameters follow Cerfon & Freidberg (2010), Table I.  Each preset is built
on first use and then shared process-wide; instances are immutable.
"""

from __future__ import annotations

import logging
import threading
from types import MappingProxyType
from typing import Dict, Mapping, Tuple

from scpn_equilibria.core.solovev_xpoint import SolovevXpoint

logger = logging.getLogger(__name__)

PRESET_PARAMETERS: Mapping[str, Mapping[str, float]] = MappingProxyType(
    {
        "ITER-like": MappingProxyType(
            dict(R0=6.2, B0=5.3, epsilon=0.32, kappa=1.7, delta=0.33,
                 a=-0.155, x_sep=0.88, y_sep=-0.60)
        ),
        "NSTX-like": MappingProxyType(
            dict(R0=0.85, B0=0.3, epsilon=0.78, kappa=2.0, delta=0.35,
                 a=-0.05, x_sep=0.70, y_sep=-1.71)
        ),
    }
)

_ALIASES: Dict[str, str] = {
    "iter": "ITER-like",
    "iter-like": "ITER-like",
    "nstx": "NSTX-like",
    "nstx-like": "NSTX-like",
}

_CACHE: Dict[str, SolovevXpoint] = {}
_LOCK = threading.Lock()


def available_presets() -> Tuple[str, ...]:
    return tuple(PRESET_PARAMETERS)


def canonical_preset_name(name: str) -> str:
    try:
        return _ALIASES[name.strip().lower()]
    except KeyError:
        raise KeyError(
            f"Unknown preset {name!r}; available: {', '.join(available_presets())}"
        ) from None


def get_preset(name: str) -> SolovevXpoint:
    """Return the shared instance of a named preset, building it at most once."""
    key = canonical_preset_name(name)
    with _LOCK:
        equ = _CACHE.get(key)
        if equ is None:
            equ = SolovevXpoint(**PRESET_PARAMETERS[key])
            _CACHE[key] = equ
            logger.info("Built Solov'ev preset %s", key)
    return equ


def solovev_xpoint_iter() -> SolovevXpoint:
    return get_preset("ITER-like")


def solovev_xpoint_nstx() -> SolovevXpoint:
    return get_preset("NSTX-like")
