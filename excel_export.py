"""
Excel export functionality for the debt tracker
"""
from __future__ import annotations
import logging

from openpyxl import Workbook
from openpyxl.styles import Font, Alignment, PatternFill, Border, Side
from openpyxl.utils import get_column_letter

from computations import debt_history, summarize
from models import LedgerState

logger = logging.getLogger(__name__)

MONEY_FORMAT = "#,##0.00"


def _style_header(ws, row=1):
    """Apply header styling to worksheet row"""
    header_font = Font(bold=True, color="FFFFFF")
    fill = PatternFill("solid", fgColor="4F81BD")
    align = Alignment(horizontal="center", vertical="center")
    thin = Side(style="thin", color="A0A0A0")
    border = Border(left=thin, right=thin, top=thin, bottom=thin)
    for cell in ws[row]:
        cell.font = header_font
        cell.fill = fill
        cell.alignment = align
        cell.border = border


def _autosize_columns(ws, min_width=10, max_width=45):
    """Auto-size columns based on content"""
    for col in range(1, ws.max_column + 1):
        letter = get_column_letter(col)
        max_len = 0
        for cell in ws[letter]:
            if cell.value is None:
                continue
            max_len = max(max_len, len(str(cell.value)))
        ws.column_dimensions[letter].width = max(min_width, min(max_width, max_len + 2))


def export_excel(state: LedgerState, filepath: str) -> None:
    """
    Export ledger to Excel file with three sheets:
    - Cycles: one row per cycle with the running debt
    - Expenses: every itemized expense, grouped by cycle
    - Summary: totals over the whole history
    """
    wb = Workbook()
    wb.remove(wb.active)

    # Cycles
    ws = wb.create_sheet("Cycles")
    ws.append(["Period", "Received", "Expenses", "Free Money", "Debt Payment",
               "Remaining Free Money", "Debt After"])
    _style_header(ws, 1)
    ws.freeze_panes = "A2"
    for c, debt_after in zip(state.cycles, debt_history(state)):
        ws.append([c.date_range, c.received_money, c.total_expenses, c.free_money,
                   c.debt_payment, c.remaining_free_money, debt_after])
    if state.cycles:
        last = ws.max_row
        ws.append(["TOTALS"])
        trow = ws.max_row
        ws.cell(trow, 1).font = Font(bold=True)
        for col in range(2, 7):
            letter = get_column_letter(col)
            ws.cell(trow, col).value = f"=SUM({letter}2:{letter}{last})"
    for r in range(2, ws.max_row + 1):
        for col in range(2, 8):
            ws.cell(r, col).number_format = MONEY_FORMAT
    _autosize_columns(ws)

    # Expenses
    ws = wb.create_sheet("Expenses")
    ws.append(["Period", "Description", "Amount"])
    _style_header(ws, 1)
    ws.freeze_panes = "A2"
    for c in state.cycles:
        for e in c.expenses:
            ws.append([c.date_range, e.description, e.amount])
    for r in range(2, ws.max_row + 1):
        ws.cell(r, 3).number_format = MONEY_FORMAT
    _autosize_columns(ws)

    # Summary
    ws = wb.create_sheet("Summary")
    s = summarize(state)
    ws.append(["Metric", "Value"])
    _style_header(ws, 1)
    rows = [
        ("Initial Debt", s.initial_debt),
        ("Current Debt", s.current_debt),
        ("Total Paid", s.total_paid),
        ("Total Received", s.total_received),
        ("Total Expenses", s.total_expenses),
        ("Average Payment", s.average_payment),
    ]
    for label, value in rows:
        ws.append([label, value])
        ws.cell(ws.max_row, 2).number_format = MONEY_FORMAT
    ws.append(["Cycles", s.cycle_count])
    ws.append(["Next Period Start", state.next_period_start.isoformat()])
    _autosize_columns(ws)

    wb.save(filepath)
    logger.info("Exported workbook with %d cycles to %s", s.cycle_count, filepath)
