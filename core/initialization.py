"""
core/initialization.py
----------------------
Loads configuration from an .env-style file into a plain dict. Every
component downstream reads its settings through ConfigManager.
"""

from __future__ import annotations

import os
import logging
from typing import Dict, Optional

from dotenv import load_dotenv

from analytics.metrics_engine import DEFAULT_INITIAL_BALANCE, DEFAULT_RISK_FREE_RATE

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name, "")
    return float(raw) if raw.strip() else default


def _env_int(name: str) -> Optional[int]:
    raw = os.getenv(name, "")
    return int(raw) if raw.strip() else None


def load_configuration(env_path: str = "config.env") -> Dict:
    """
    Load settings from an .env-style file and return a config dict.
    Variables already set in the environment win over the file.
    """
    log = logging.getLogger(__name__)
    loaded = load_dotenv(dotenv_path=env_path)
    log.debug("load_dotenv(%s) -> %s", env_path, loaded)

    sample_size = _env_int("SAMPLE_SIZE")
    conf: Dict[str, object] = {
        "INITIAL_BALANCE": _env_float("INITIAL_BALANCE", DEFAULT_INITIAL_BALANCE),
        "RISK_FREE_RATE": _env_float("RISK_FREE_RATE", DEFAULT_RISK_FREE_RATE),
        "CURRENCY_SYMBOL": os.getenv("CURRENCY_SYMBOL", "$"),
        "TRADES_CSV": os.getenv("TRADES_CSV") or None,
        "SAMPLE_SIZE": 150 if sample_size is None else sample_size,
        "SAMPLE_SEED": _env_int("SAMPLE_SEED"),
        "VALIDATE_TRADES": os.getenv("VALIDATE_TRADES", "").strip().lower() in _TRUE_VALUES,
    }

    log.debug("Parsed INITIAL_BALANCE: %s", conf["INITIAL_BALANCE"])
    log.debug("Parsed RISK_FREE_RATE: %s", conf["RISK_FREE_RATE"])
    log.debug("Trade source: %s", conf["TRADES_CSV"] or "sample generator")

    return conf
