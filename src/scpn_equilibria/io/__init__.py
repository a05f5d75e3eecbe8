# ──────────────────────────────────────────────────────────────────────
# SCPN Equilibria — IO Package Init
# © 1998–2026 Miroslav Šotek. All rights reserved.
# Contact: www.anulum.li | protoscience@anulum.li
# ORCID: https://orcid.org/0009-0009-3560-0851
# License: GNU AGPL v3 | Commercial licensing available
# ──────────────────────────────────────────────────────────────────────
"""Logging setup for the analytic equilibrium library."""

from .logging_config import EquilibriaJSONFormatter, setup_equilibria_logging

__all__ = ["EquilibriaJSONFormatter", "setup_equilibria_logging"]
