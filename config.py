"""
Configuration, logging setup and export conversion for the debt tracker
"""
from __future__ import annotations
import json
import logging
import os
from dataclasses import asdict
from typing import Optional

from computations import debt_history
from models import LedgerState
from utils import app_dir

DEFAULT_SETTINGS = {
    "log_level": "WARNING",
    "export_dir": "",
    "window_geometry": "1000x600",
}

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def load_settings(path: str) -> dict:
    """Load settings from JSON file, falling back to defaults for missing keys"""
    settings = dict(DEFAULT_SETTINGS)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        return settings
    for key in DEFAULT_SETTINGS:
        if key in data:
            settings[key] = data[key]
    return settings


def get_settings() -> dict:
    """Load settings.json from the application directory"""
    return load_settings(os.path.join(app_dir(), "settings.json"))


def setup_logging(level: Optional[str] = None) -> None:
    """Configure root logging; unknown level names fall back to WARNING"""
    name = (level or DEFAULT_SETTINGS["log_level"]).upper()
    lvl = logging.getLevelName(name)
    if not isinstance(lvl, int):
        lvl = logging.WARNING
    logging.basicConfig(level=lvl, format=LOG_FORMAT)


def state_to_dict(state: LedgerState) -> dict:
    """Convert LedgerState to plain data for exports"""
    debts = debt_history(state)
    return {
        "debt": state.debt,
        "initial_debt": state.initial_debt,
        "next_period_start": state.next_period_start.isoformat(),
        "cycles": [
            {
                "date_range": c.date_range,
                "received_money": c.received_money,
                "expenses": [asdict(e) for e in c.expenses],
                "free_money": c.free_money,
                "debt_payment": c.debt_payment,
                "remaining_free_money": c.remaining_free_money,
                "debt_after": debt_after,
            } for c, debt_after in zip(state.cycles, debts)
        ],
    }
