"""
CSV export of the cycle history
"""
from __future__ import annotations
import csv
import logging

from config import state_to_dict
from models import LedgerState

logger = logging.getLogger(__name__)

CSV_COLUMNS = [
    "date_range", "received_money", "expenses", "total_expenses",
    "free_money", "debt_payment", "remaining_free_money", "debt_after",
]


def export_cycles_to_csv(state: LedgerState, filepath: str) -> int:
    """
    Export cycles to CSV file, one row per cycle.
    Expenses are written as "description:amount" pairs joined by ';'.
    Returns the number of rows written.
    """
    data = state_to_dict(state)
    with open(filepath, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(CSV_COLUMNS)
        for c in data["cycles"]:
            exp_str = ";".join(f"{e['description']}:{e['amount']}" for e in c["expenses"])
            writer.writerow([
                c["date_range"],
                c["received_money"],
                exp_str,
                sum(e["amount"] for e in c["expenses"]),
                c["free_money"],
                c["debt_payment"],
                c["remaining_free_money"],
                c["debt_after"],
            ])
    logger.info("Exported %d cycles to %s", len(data["cycles"]), filepath)
    return len(data["cycles"])
