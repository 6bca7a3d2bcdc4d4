"""
Utility functions for the debt tracker
"""
from __future__ import annotations
import math
import os
from datetime import date
from typing import Optional


def today() -> date:
    """Get today's date"""
    return date.today()


def safe_float(x, default: Optional[float] = 0.0) -> Optional[float]:
    """Convert value to a finite float, returning default on error"""
    if x is None:
        return default
    if isinstance(x, str):
        x = x.strip().replace(",", "")
        if not x:
            return default
    try:
        v = float(x)
    except (TypeError, ValueError):
        return default
    if not math.isfinite(v):
        return default
    return v


def format_money(x: float) -> str:
    """Display an amount with thousands separators, dropping a zero fraction"""
    if float(x).is_integer():
        return f"{x:,.0f}"
    return f"{x:,.2f}"


def app_dir() -> str:
    """
    Get application data directory: ~/.debt_tracker
    (or $DEBT_TRACKER_HOME). Creates directory if it doesn't exist.
    """
    path = os.environ.get("DEBT_TRACKER_HOME") or os.path.expanduser("~/.debt_tracker")
    os.makedirs(path, exist_ok=True)
    return path
