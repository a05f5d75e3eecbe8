# ──────────────────────────────────────────────────────────────────────
# SCPN Equilibria — Error Taxonomy
# © 1998–2026 Miroslav Šotek. All rights reserved.
# Contact: www.anulum.li | protoscience@anulum.li
# ORCID: https://orcid.org/0009-0009-3560-0851
# License: GNU AGPL v3 | Commercial licensing available
# ──────────────────────────────────────────────────────────────────────
"""Exceptions raised by analytic equilibrium construction and evaluation."""

from __future__ import annotations


class EquilibriumError(Exception):
    """Base class for all analytic equilibrium failures."""


class ConstructionError(EquilibriumError, ValueError):
    """Raised when an equilibrium cannot be built from its parameters."""


class SingularSystemError(ConstructionError):
    """Raised when the Solov'ev shape constraints form a degenerate system."""


class DomainError(EquilibriumError, ValueError):
    """Raised when a coordinate lies outside the domain of a formula (e.g. R <= 0)."""
