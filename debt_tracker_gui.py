"""
Debt Payment Tracker GUI
- Enter the current debt, then log half-month payment cycles (income, expenses, debt payment).
- Shows remaining debt and the cycle history; exports to CSV or Excel.

Run:
  python debt_tracker_gui.py

Dependencies:
  pip install openpyxl
(Tkinter ships with most Python distributions; on some Linux you may need: sudo apt-get install python3-tk)
"""
from __future__ import annotations

try:
    import tkinter as tk
except ModuleNotFoundError:
    tk = None

from config import get_settings, setup_logging


def main():
    """Main entry point for the application"""
    if tk is None:
        raise RuntimeError(
            'tkinter is not available. Install it (e.g., on Ubuntu: sudo apt-get install python3-tk) '
            'and re-run to use the GUI.'
        )

    settings = get_settings()
    setup_logging(settings.get("log_level"))

    from main_app import DebtTrackerApp

    root = tk.Tk()
    DebtTrackerApp(root, settings)
    root.mainloop()


if __name__ == "__main__":
    main()
