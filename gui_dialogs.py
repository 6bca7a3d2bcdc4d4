"""
Dialog windows for the debt tracker GUI
"""
from __future__ import annotations
from typing import List, Optional, Tuple

try:
    import tkinter as tk
    from tkinter import ttk, messagebox
except ModuleNotFoundError:
    tk = None
    ttk = None
    messagebox = None

from computations import initialize, preview_cycle, record_cycle
from errors import LedgerError
from models import Cycle, LedgerState
from utils import format_money


class DebtDialog(tk.Toplevel):
    """Dialog asking for the current debt; result is the new LedgerState"""

    def __init__(self, master):
        super().__init__(master)
        self.title("Enter Current Debt")
        self.resizable(False, False)
        self.result: Optional[LedgerState] = None

        frm = ttk.Frame(self, padding=10)
        frm.grid(row=0, column=0, sticky="nsew")

        ttk.Label(frm, text="Current debt").grid(row=0, column=0, sticky="w")
        self.v_debt = tk.StringVar(value="")
        entry = ttk.Entry(frm, textvariable=self.v_debt, width=18)
        entry.grid(row=0, column=1, sticky="w", padx=(6, 0))
        entry.focus_set()

        btns = ttk.Frame(frm)
        btns.grid(row=1, column=0, columnspan=2, sticky="e", pady=(10, 0))
        ttk.Button(btns, text="Submit Debt", command=self._ok).grid(row=0, column=0, padx=4)
        ttk.Button(btns, text="Cancel", command=self._cancel).grid(row=0, column=1, padx=4)

        self.bind("<Return>", lambda e: self._ok())
        self.bind("<KP_Enter>", lambda e: self._ok())

        self.grab_set()
        self.transient(master)

    def _ok(self):
        """Validate and close"""
        try:
            self.result = initialize(self.v_debt.get())
        except LedgerError as ex:
            messagebox.showerror(ex.title, str(ex), parent=self)
            return
        self.destroy()

    def _cancel(self):
        self.result = None
        self.destroy()


class CycleDialog(tk.Toplevel):
    """
    Dialog for entering a payment cycle.
    On OK, ``result`` holds (new_state, cycle) from record_cycle.
    """

    def __init__(self, master, state: LedgerState):
        super().__init__(master)
        self.title("Enter Payment Cycle Details")
        self.resizable(False, False)
        self.state_value = state
        self.result: Optional[Tuple[LedgerState, Cycle]] = None
        self.rows: List[Tuple[tk.StringVar, tk.StringVar, ttk.Frame]] = []

        frm = ttk.Frame(self, padding=10)
        frm.grid(row=0, column=0, sticky="nsew")

        self.range_var = tk.StringVar(value="")
        ttk.Label(frm, textvariable=self.range_var, font=("TkDefaultFont", 10, "bold")).grid(
            row=0, column=0, columnspan=2, sticky="w", pady=(0, 8)
        )

        ttk.Label(frm, text="Received money").grid(row=1, column=0, sticky="w")
        self.v_received = tk.StringVar(value="")
        ttk.Entry(frm, textvariable=self.v_received, width=18).grid(row=1, column=1, sticky="w")

        ttk.Label(frm, text="Expenses").grid(row=2, column=0, sticky="w", pady=(8, 2))
        self.exp_frame = ttk.Frame(frm)
        self.exp_frame.grid(row=3, column=0, columnspan=2, sticky="ew")
        ttk.Button(frm, text="Add Expense", command=self._add_row).grid(
            row=4, column=0, sticky="w", pady=(4, 0)
        )

        self.free_var = tk.StringVar(value="")
        ttk.Label(frm, textvariable=self.free_var).grid(
            row=5, column=0, columnspan=2, sticky="w", pady=(8, 0)
        )

        ttk.Label(frm, text="Debt payment").grid(row=6, column=0, sticky="w", pady=(8, 0))
        self.v_payment = tk.StringVar(value="")
        ttk.Entry(frm, textvariable=self.v_payment, width=18).grid(
            row=6, column=1, sticky="w", pady=(8, 0)
        )

        btns = ttk.Frame(frm)
        btns.grid(row=7, column=0, columnspan=2, sticky="e", pady=(10, 0))
        ttk.Button(btns, text="Submit Cycle", command=self._ok).grid(row=0, column=0, padx=4)
        ttk.Button(btns, text="Cancel", command=self._cancel).grid(row=0, column=1, padx=4)

        self.v_received.trace_add("write", lambda *_: self._update_preview())
        self._add_row()
        self._update_preview()

        self.bind("<Return>", lambda e: self._ok())
        self.bind("<KP_Enter>", lambda e: self._ok())

        self.grab_set()
        self.transient(master)

    def _add_row(self):
        """Append an expense row; every row but the first can be removed"""
        first = not self.rows
        row = ttk.Frame(self.exp_frame)
        row.pack(fill="x", pady=2)
        v_desc = tk.StringVar(value="")
        v_amt = tk.StringVar(value="")
        ttk.Entry(row, textvariable=v_desc, width=24).pack(side="left")
        ttk.Entry(row, textvariable=v_amt, width=12).pack(side="left", padx=4)
        entry = (v_desc, v_amt, row)
        if not first:
            ttk.Button(row, text="Remove", command=lambda: self._remove_row(entry)).pack(side="left")
        v_amt.trace_add("write", lambda *_: self._update_preview())
        self.rows.append(entry)
        self._update_preview()

    def _remove_row(self, entry):
        self.rows.remove(entry)
        entry[2].destroy()
        self._update_preview()

    def _expenses(self) -> List[Tuple[str, str]]:
        """Expense rows as typed; rows left completely blank are skipped"""
        out = []
        for v_desc, v_amt, _ in self.rows:
            desc, amt = v_desc.get().strip(), v_amt.get().strip()
            if not desc and not amt:
                continue
            out.append((desc, amt or "0"))
        return out

    def _update_preview(self):
        """Refresh period label and free money"""
        label, free = preview_cycle(self.state_value, self.v_received.get(), self._expenses())
        self.range_var.set(f"Cycle Date Range: {label}")
        self.free_var.set(f"Free Money Available: {format_money(free)}")

    def _ok(self):
        """Validate and record the cycle"""
        for desc, _amt in self._expenses():
            if not desc:
                messagebox.showerror("Missing description", "Every expense needs a description.",
                                     parent=self)
                return
        try:
            self.result = record_cycle(
                self.state_value,
                self.v_received.get(),
                self._expenses(),
                self.v_payment.get() or "0",
            )
        except LedgerError as ex:
            messagebox.showerror(ex.title, str(ex), parent=self)
            return
        self.destroy()

    def _cancel(self):
        """Cancel and close"""
        self.result = None
        self.destroy()
