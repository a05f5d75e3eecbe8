# ──────────────────────────────────────────────────────────────────────
# SCPN Equilibria — Pytest Configuration
# © 1998–2026 Miroslav Šotek. All rights reserved.
# Contact: www.anulum.li | protoscience@anulum.li
# ORCID: https://orcid.org/0009-0009-3560-0851
# License: GNU AGPL v3 | Commercial licensing available
# ──────────────────────────────────────────────────────────────────────
"""
Puts src/ on sys.path for uninstalled runs and registers the hypothesis
profiles used by the property tests (select with HYPOTHESIS_PROFILE=ci).
"""

import os
import sys
from pathlib import Path

from hypothesis import settings

_SRC = str(Path(__file__).resolve().parent / "src")
if _SRC not in sys.path:
    sys.path.insert(0, _SRC)

settings.register_profile("dev", deadline=None)
settings.register_profile("ci", deadline=None, max_examples=300, derandomize=True)
settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "dev"))
