# ──────────────────────────────────────────────────────────────────────
# SCPN Equilibria — Symmetric Quadratic Tests
# © 1998–2026 Miroslav Šotek. All rights reserved.
# Contact: www.anulum.li | protoscience@anulum.li
# ORCID: https://orcid.org/0009-0009-3560-0851
# License: GNU AGPL v3 | Commercial licensing available
# ──────────────────────────────────────────────────────────────────────
from __future__ import annotations

import math

import numpy as np
import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from scpn_equilibria.core.errors import ConstructionError
from scpn_equilibria.core.symmetric_quadratic import SymmetricQuadratic

coords = st.floats(min_value=-5.0, max_value=5.0)


def test_defaults_and_rendering() -> None:
    equ = SymmetricQuadratic()
    assert equ.B0 == 1.0
    assert equ.name == "SymmetricQuadraticEquilibrium"
    assert str(equ) == "Symmetric Quadratic Equilibrium"


def test_non_finite_field_rejected() -> None:
    with pytest.raises(ConstructionError):
        SymmetricQuadratic(B0=float("inf"))


@settings(max_examples=100, deadline=None)
@given(x=coords, y=coords, z=coords)
def test_axial_potential_vanishes(x: float, y: float, z: float) -> None:
    assert SymmetricQuadratic(B0=2.0).A3((x, y, z)) == 0.0


@settings(max_examples=100, deadline=None)
@given(x=coords, y=coords, z=coords)
def test_cylindrical_radius(x: float, y: float, z: float) -> None:
    equ = SymmetricQuadratic()
    assert equ.r2((x, y, z)) == pytest.approx(x**2 + y**2)
    assert equ.R((x, y, z)) == equ.r((x, y, z))
    assert equ.phi((x, y, z)) == equ.theta((x, y, z))


def test_cartesian_pass_through() -> None:
    equ = SymmetricQuadratic()
    pt = (0.3, -1.2, 4.0)
    assert (equ.X(pt), equ.Y(pt), equ.Z(pt)) == pt
    assert equ.theta(pt) == pytest.approx(math.atan2(-1.2, 0.3))


def test_vector_potential_formulas() -> None:
    equ = SymmetricQuadratic(B0=1.5)
    x, y = 0.4, -0.7
    s = 2 + x**2 + y**2
    assert equ.A1((x, y, 0.0)) == pytest.approx(-1.5 * y * s / 4)
    assert equ.A2((x, y, 0.0)) == pytest.approx(1.5 * x * s / 4)


@pytest.mark.parametrize("x,y", [(0.0, 0.0), (0.5, -0.3), (-1.1, 2.0)])
def test_curl_gives_quadratic_axial_field(x: float, y: float) -> None:
    equ = SymmetricQuadratic(B0=0.8)
    h = 1e-6
    dA2_dx = (equ.A2((x + h, y, 0.0)) - equ.A2((x - h, y, 0.0))) / (2 * h)
    dA1_dy = (equ.A1((x, y + h, 0.0)) - equ.A1((x, y - h, 0.0))) / (2 * h)
    assert dA2_dx - dA1_dy == pytest.approx(0.8 * (1 + x**2 + y**2), rel=1e-6)


def test_metric_is_identity_and_nothing_is_periodic() -> None:
    equ = SymmetricQuadratic()
    pt = (1.0, 2.0, 3.0)
    assert (equ.g11(pt), equ.g22(pt), equ.g33(pt)) == (1.0, 1.0, 1.0)
    np.testing.assert_array_equal(equ.periodicity(pt), np.zeros(3))


def test_array_points() -> None:
    equ = SymmetricQuadratic()
    x = np.array([0.0, 1.0, 2.0])
    y = np.array([1.0, 1.0, 0.0])
    z = np.zeros(3)
    np.testing.assert_allclose(equ.r2((x, y, z)), [1.0, 2.0, 4.0])
    np.testing.assert_array_equal(equ.A3((x, y, z)), np.zeros(3))
