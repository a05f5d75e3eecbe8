# ──────────────────────────────────────────────────────────────────────
# SCPN Equilibria — Structured Logging Configuration
# © 1998–2026 Miroslav Šotek. All rights reserved.
# Contact: www.anulum.li | protoscience@anulum.li
# ──────────────────────────────────────────────────────────────────────
from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict

import numpy as np

ROOT_LOGGER_NAME = "scpn_equilibria"

_TEXT_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"


def _json_default(value: Any) -> Any:
    # Solver diagnostics carry numpy scalars and coefficient arrays
    if isinstance(value, np.generic):
        return value.item()
    if isinstance(value, np.ndarray):
        return value.tolist()
    return str(value)


class EquilibriaJSONFormatter(logging.Formatter):
    """
    One JSON object per record.  Solver and model records attach their
    shape parameters and conditioning under ``physics_context``.
    """
    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "module": record.module,
            "line": record.lineno,
            "message": record.getMessage(),
        }
        context = getattr(record, "physics_context", None)
        if context is not None:
            log_data["physics_context"] = context
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data, default=_json_default)


def setup_equilibria_logging(
    level: int = logging.INFO,
    json_output: bool = True,
    log_file: str | None = None
) -> logging.Logger:
    """
    Route the ``scpn_equilibria`` logger to stdout, and to ``log_file`` when
    given.  Existing handlers are replaced.  The file sink is always JSON so
    it stays machine-readable when the console uses plain text.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(EquilibriaJSONFormatter() if json_output else logging.Formatter(_TEXT_FORMAT))
    logger.addHandler(console)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(EquilibriaJSONFormatter())
        logger.addHandler(file_handler)

    return logger
