# ──────────────────────────────────────────────────────────────────────
# SCPN Equilibria — Preset Tests
# © 1998–2026 Miroslav Šotek. All rights reserved.
# Contact: www.anulum.li | protoscience@anulum.li
# ORCID: https://orcid.org/0009-0009-3560-0851
# License: GNU AGPL v3 | Commercial licensing available
# ──────────────────────────────────────────────────────────────────────
from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from scpn_equilibria import solovev_xpoint_iter, solovev_xpoint_nstx
from scpn_equilibria.core.presets import (
    PRESET_PARAMETERS,
    available_presets,
    canonical_preset_name,
    get_preset,
)
from scpn_equilibria.core.solovev_xpoint import SolovevXpoint


def test_available_presets() -> None:
    assert available_presets() == ("ITER-like", "NSTX-like")


def test_iter_literal_parameters() -> None:
    equ = solovev_xpoint_iter()
    assert isinstance(equ, SolovevXpoint)
    assert (equ.R0, equ.B0, equ.epsilon, equ.kappa, equ.delta) == (6.2, 5.3, 0.32, 1.7, 0.33)
    assert (equ.a, equ.x_sep, equ.y_sep) == (-0.155, 0.88, -0.60)


def test_nstx_literal_parameters() -> None:
    equ = solovev_xpoint_nstx()
    assert (equ.R0, equ.B0, equ.epsilon, equ.kappa, equ.delta) == (0.85, 0.3, 0.78, 2.0, 0.35)
    assert (equ.a, equ.x_sep, equ.y_sep) == (-0.05, 0.70, -1.71)


def test_presets_are_shared_instances() -> None:
    assert solovev_xpoint_iter() is solovev_xpoint_iter()
    assert solovev_xpoint_iter() is get_preset("ITER-like")
    assert solovev_xpoint_nstx() is get_preset("nstx")


@pytest.mark.parametrize("alias", ["iter", "ITER", " iter-like ", "ITER-like"])
def test_aliases_resolve(alias: str) -> None:
    assert canonical_preset_name(alias) == "ITER-like"


def test_unknown_preset_raises_key_error() -> None:
    with pytest.raises(KeyError, match="Unknown preset"):
        get_preset("JET")


def test_parameter_table_is_read_only() -> None:
    with pytest.raises(TypeError):
        PRESET_PARAMETERS["ITER-like"]["kappa"] = 2.0  # type: ignore[index]


def test_concurrent_access_yields_one_instance() -> None:
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda _: solovev_xpoint_nstx(), range(32)))
    assert all(r is results[0] for r in results)
