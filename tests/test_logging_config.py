from __future__ import annotations

import json
import logging

import numpy as np

from scpn_equilibria.io.logging_config import (
    ROOT_LOGGER_NAME,
    EquilibriaJSONFormatter,
    setup_equilibria_logging,
)


def test_equilibria_json_formatter_includes_context_fields() -> None:
    record = logging.LogRecord(
        name="scpn_equilibria",
        level=logging.INFO,
        pathname=__file__,
        lineno=42,
        msg="unit test message",
        args=(),
        exc_info=None,
    )
    record.physics_context = {"kappa": 1.7}  # type: ignore[attr-defined]
    payload = json.loads(EquilibriaJSONFormatter().format(record))
    assert payload["level"] == "INFO"
    assert payload["message"] == "unit test message"
    assert payload["line"] == 42
    assert payload["physics_context"]["kappa"] == 1.7


def test_formatter_omits_context_when_absent() -> None:
    record = logging.LogRecord("scpn_equilibria", logging.WARNING, __file__, 1, "plain", (), None)
    payload = json.loads(EquilibriaJSONFormatter().format(record))
    assert "physics_context" not in payload
    assert "exception" not in payload


def test_setup_equilibria_logging_emits_json_lines(capsys) -> None:
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    old_handlers = list(logger.handlers)
    old_level = logger.level
    try:
        setup_equilibria_logging(level=logging.INFO, json_output=True)
        logging.getLogger("scpn_equilibria.core.solovev_xpoint").info(
            "built equilibrium", extra={"physics_context": {"epsilon": 0.32}}
        )
        out = capsys.readouterr().out.strip().splitlines()
        assert out
        parsed = json.loads(out[-1])
        assert parsed["message"] == "built equilibrium"
        assert parsed["logger"] == "scpn_equilibria.core.solovev_xpoint"
        assert parsed["physics_context"]["epsilon"] == 0.32
    finally:
        logger.handlers[:] = old_handlers
        logger.setLevel(old_level)


def test_setup_equilibria_logging_writes_file(tmp_path) -> None:
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    old_handlers = list(logger.handlers)
    old_level = logger.level
    log_file = tmp_path / "equilibria.log"
    try:
        setup_equilibria_logging(level=logging.INFO, json_output=True, log_file=str(log_file))
        logger.warning("to file")
        for handler in logger.handlers:
            handler.flush()
        lines = log_file.read_text(encoding="utf-8").strip().splitlines()
        assert json.loads(lines[-1])["message"] == "to file"
    finally:
        for handler in logger.handlers:
            if handler not in old_handlers:
                handler.close()
        logger.handlers[:] = old_handlers
        logger.setLevel(old_level)


def test_formatter_serialises_numpy_context() -> None:
    record = logging.LogRecord("scpn_equilibria", logging.DEBUG, __file__, 7, "solved", (), None)
    record.physics_context = {  # type: ignore[attr-defined]
        "condition": np.float64(3.5e9),
        "coefficients": np.array([1.0, -2.0]),
    }
    payload = json.loads(EquilibriaJSONFormatter().format(record))
    assert payload["physics_context"]["condition"] == 3.5e9
    assert payload["physics_context"]["coefficients"] == [1.0, -2.0]


def test_file_sink_stays_json_with_text_console(tmp_path, capsys) -> None:
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    old_handlers = list(logger.handlers)
    old_level = logger.level
    log_file = tmp_path / "equilibria.log"
    try:
        setup_equilibria_logging(level=logging.INFO, json_output=False, log_file=str(log_file))
        logger.info("mixed sinks")
        for handler in logger.handlers:
            handler.flush()
        assert "INFO scpn_equilibria: mixed sinks" in capsys.readouterr().out
        lines = log_file.read_text(encoding="utf-8").strip().splitlines()
        assert json.loads(lines[-1])["message"] == "mixed sinks"
    finally:
        for handler in logger.handlers:
            if handler not in old_handlers:
                handler.close()
        logger.handlers[:] = old_handlers
        logger.setLevel(old_level)
