"""
Main application window for the debt tracker GUI
"""
from __future__ import annotations
import logging
import os
from typing import Optional

try:
    import tkinter as tk
    from tkinter import ttk, messagebox, filedialog
except ModuleNotFoundError:
    tk = None
    ttk = None
    messagebox = None
    filedialog = None

from computations import debt_history, summarize
from csv_handler import export_cycles_to_csv
from excel_export import export_excel
from gui_dialogs import CycleDialog, DebtDialog
from models import LedgerState
from utils import format_money

logger = logging.getLogger(__name__)


class DebtTrackerApp(ttk.Frame):
    """Main application window"""

    def __init__(self, master: tk.Tk, settings: Optional[dict] = None):
        super().__init__(master, padding=8)
        self.master = master
        self.settings = settings or {}
        self.master.title("Debt Payment Tracker")
        self.master.geometry(self.settings.get("window_geometry") or "1000x600")
        self.grid(row=0, column=0, sticky="nsew")
        self.master.rowconfigure(0, weight=1)
        self.master.columnconfigure(0, weight=1)

        self.ledger: Optional[LedgerState] = None

        self._build_menu()
        self._build_ui()
        self.refresh_all()
        self.after_idle(self.ask_debt)

    # ---------- Menu ----------
    def _build_menu(self):
        """Build application menu bar"""
        menubar = tk.Menu(self.master)
        filem = tk.Menu(menubar, tearoff=0)
        filem.add_command(label="Export CSV…", command=self.export_csv_dialog)
        filem.add_command(label="Export Excel…", command=self.export_excel_dialog)
        filem.add_separator()
        filem.add_command(label="Exit", command=self.master.destroy)
        menubar.add_cascade(label="File", menu=filem)
        self.master.config(menu=menubar)

    # ---------- UI ----------
    def _build_ui(self):
        """Left panel with the debt figure, right panel with the cycle history"""
        self.rowconfigure(0, weight=1)
        self.columnconfigure(1, weight=1)

        left = ttk.Frame(self, padding=(0, 0, 12, 0))
        left.grid(row=0, column=0, sticky="ns")
        ttk.Label(left, text="Debt Payment Tracker", font=("TkDefaultFont", 14, "bold")).grid(
            row=0, column=0, sticky="w"
        )
        self.debt_var = tk.StringVar(value="")
        ttk.Label(left, textvariable=self.debt_var, font=("TkDefaultFont", 12)).grid(
            row=1, column=0, sticky="w", pady=(8, 0)
        )
        self.summary_var = tk.StringVar(value="")
        ttk.Label(left, textvariable=self.summary_var, justify="left").grid(
            row=2, column=0, sticky="w", pady=(8, 0)
        )
        self.add_btn = ttk.Button(left, text="Add Payment Cycle", command=self.add_cycle)
        self.add_btn.grid(row=3, column=0, sticky="w", pady=(12, 0))

        right = ttk.Frame(self)
        right.grid(row=0, column=1, sticky="nsew")
        right.rowconfigure(0, weight=1)
        right.columnconfigure(0, weight=1)

        cols = ("period", "received", "expenses", "free", "payment", "remaining", "debt")
        heads = ("Period", "Received", "Expenses", "Free Money", "Debt Payment",
                 "Remaining Free Money", "Debt After")
        self.cycle_tree = ttk.Treeview(right, columns=cols, show="headings", height=16)
        for c, h, w in zip(cols, heads, [100, 100, 100, 100, 110, 150, 110]):
            self.cycle_tree.heading(c, text=h)
            self.cycle_tree.column(c, width=w, anchor="w")
        self.cycle_tree.grid(row=0, column=0, sticky="nsew")
        self.cycle_tree.bind("<<TreeviewSelect>>", lambda e: self.refresh_expense_detail())

        yscroll = ttk.Scrollbar(right, orient="vertical", command=self.cycle_tree.yview)
        self.cycle_tree.configure(yscroll=yscroll.set)
        yscroll.grid(row=0, column=1, sticky="ns")

        self.empty_var = tk.StringVar(value="")
        ttk.Label(right, textvariable=self.empty_var).grid(row=1, column=0, sticky="w", pady=(4, 0))

        ttk.Label(right, text="Expenses of selected cycle:").grid(row=2, column=0, sticky="w",
                                                                 pady=(10, 0))
        self.exp_list = tk.Listbox(right, height=6)
        self.exp_list.grid(row=3, column=0, sticky="ew")

    # ---------- Actions ----------
    def ask_debt(self):
        """Show the initial debt dialog until a valid debt is entered or it is cancelled"""
        dlg = DebtDialog(self.master)
        self.master.wait_window(dlg)
        if dlg.result is not None:
            self.ledger = dlg.result
        self.refresh_all()

    def add_cycle(self):
        """Open the cycle dialog and apply the recorded cycle"""
        if self.ledger is None:
            self.ask_debt()
            return
        dlg = CycleDialog(self.master, self.ledger)
        self.master.wait_window(dlg)
        if dlg.result:
            self.ledger, cycle = dlg.result
            logger.info("Cycle %s recorded, debt now %s", cycle.date_range, self.ledger.debt)
            self.refresh_all()

    # ---------- Export ----------
    def _ask_export_path(self, title: str, ext: str, filetypes) -> Optional[str]:
        if self.ledger is None or not self.ledger.cycles:
            messagebox.showinfo(title, "No cycles to export.")
            return None
        fp = filedialog.asksaveasfilename(
            title=title,
            defaultextension=ext,
            initialdir=self.settings.get("export_dir") or os.getcwd(),
            filetypes=filetypes,
        )
        return fp or None

    def export_csv_dialog(self):
        """Export cycle history to CSV file"""
        fp = self._ask_export_path("Export CSV", ".csv", [("CSV files", "*.csv")])
        if not fp:
            return
        try:
            n = export_cycles_to_csv(self.ledger, fp)
            messagebox.showinfo("Export CSV", f"Exported {n} cycles to:\n{fp}")
        except OSError as ex:
            logger.exception("CSV export failed")
            messagebox.showerror("Export failed", str(ex))

    def export_excel_dialog(self):
        """Export cycle history to Excel file"""
        fp = self._ask_export_path("Export Excel", ".xlsx", [("Excel Workbook", "*.xlsx")])
        if not fp:
            return
        try:
            export_excel(self.ledger, fp)
            messagebox.showinfo("Export", f"Exported: {fp}")
        except OSError as ex:
            logger.exception("Excel export failed")
            messagebox.showerror("Export failed", str(ex))

    # ---------- Refresh ----------
    def refresh_all(self):
        """Refresh all UI elements"""
        self.refresh_header()
        self.refresh_cycles()
        self.refresh_expense_detail()

    def refresh_header(self):
        if self.ledger is None:
            self.debt_var.set("Current Debt: N/A")
            self.summary_var.set("")
            self.add_btn.configure(text="Enter Current Debt")
            return
        self.add_btn.configure(text="Add Payment Cycle")
        self.debt_var.set(f"Current Debt: {format_money(self.ledger.debt)}")
        s = summarize(self.ledger)
        self.summary_var.set(
            f"Initial debt: {format_money(s.initial_debt)}\n"
            f"Total paid: {format_money(s.total_paid)} over {s.cycle_count} cycles\n"
            f"Average payment: {format_money(s.average_payment)}"
        )

    def refresh_cycles(self):
        """Refresh cycle history tree view"""
        for iid in self.cycle_tree.get_children():
            self.cycle_tree.delete(iid)
        cycles = self.ledger.cycles if self.ledger else ()
        self.empty_var.set("" if cycles else "No cycles added yet.")
        for i, (c, debt_after) in enumerate(zip(cycles, debt_history(self.ledger) if self.ledger else [])):
            values = (
                c.date_range,
                format_money(c.received_money),
                format_money(c.total_expenses),
                format_money(c.free_money),
                format_money(c.debt_payment),
                format_money(c.remaining_free_money),
                format_money(debt_after),
            )
            self.cycle_tree.insert("", "end", iid=str(i), values=values)

    def refresh_expense_detail(self):
        """Show itemized expenses of the selected cycle"""
        self.exp_list.delete(0, tk.END)
        sel = self.cycle_tree.selection()
        if not sel or self.ledger is None:
            return
        cycle = self.ledger.cycles[int(sel[0])]
        if not cycle.expenses:
            self.exp_list.insert(tk.END, "(no expenses)")
        for e in cycle.expenses:
            self.exp_list.insert(tk.END, f"{e.description}: {format_money(e.amount)}")
