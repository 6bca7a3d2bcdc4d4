"""
Ledger arithmetic for the debt tracker.

The ledger state is an immutable value: ``initialize`` creates it and
``record_cycle`` returns a new one, leaving its input untouched.
"""
from __future__ import annotations
import logging
from dataclasses import replace
from datetime import date
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from errors import (
    DebtPaymentExceedsFreeMoney,
    ExpensesExceedIncome,
    InvalidAmount,
    InvalidDebtAmount,
    LedgerNotInitialized,
)
from models import Cycle, Expense, LedgerState, LedgerSummary
from periods import Period, compute_period, initial_period_start
from utils import safe_float, today

logger = logging.getLogger(__name__)

ExpenseInput = Union[Expense, Tuple[str, float]]


def initialize(debt_amount, start: Optional[date] = None) -> LedgerState:
    """
    Create an active ledger holding ``debt_amount``.
    The first cycle will cover the period containing ``start`` (default today).
    """
    debt = safe_float(debt_amount, None)
    if debt is None or debt <= 0:
        logger.debug("Rejected initial debt %r", debt_amount)
        raise InvalidDebtAmount(debt_amount)
    next_start = initial_period_start(start or today())
    logger.info("Ledger initialized with debt %.2f, first period starts %s", debt, next_start)
    return LedgerState(debt=debt, cycles=(), next_period_start=next_start, initial_debt=debt)


def _amount(value, field: str) -> float:
    """Parse a non-negative amount or raise InvalidAmount"""
    v = safe_float(value, None)
    if v is None or v < 0:
        raise InvalidAmount(field, value)
    return v


def normalize_expenses(expenses: Iterable[ExpenseInput]) -> Tuple[Expense, ...]:
    """Turn Expense objects or (description, amount) pairs into validated Expenses"""
    out = []
    for e in expenses:
        if isinstance(e, Expense):
            desc, amt = e.description, e.amount
        else:
            desc, amt = e
        out.append(Expense(description=str(desc).strip(), amount=_amount(amt, "Expense amount")))
    return tuple(out)


def total_expenses(expenses: Iterable[Expense]) -> float:
    return sum(e.amount for e in expenses)


def next_period(state: LedgerState) -> Period:
    """Period the next recorded cycle will represent"""
    return compute_period(state.next_period_start)


def preview_cycle(
    state: LedgerState,
    received_money,
    expenses: Sequence[ExpenseInput],
) -> Tuple[str, float]:
    """
    Label and free money for a cycle being typed in.
    Unparseable values count as zero so the preview never fails.
    """
    received = safe_float(received_money, 0.0)
    amounts = []
    for e in expenses:
        amt = e.amount if isinstance(e, Expense) else e[1]
        amounts.append(safe_float(amt, 0.0))
    return next_period(state).label, received - sum(amounts)


def record_cycle(
    state: LedgerState,
    received_money,
    expenses: Sequence[ExpenseInput],
    debt_payment,
) -> Tuple[LedgerState, Cycle]:
    """
    Validate and append a cycle.
    Returns (new_state, cycle); raises a LedgerError and leaves ``state`` as it was
    when the cycle is rejected.
    """
    if not state.is_initialized:
        raise LedgerNotInitialized()

    received = _amount(received_money, "Received money")
    items = normalize_expenses(expenses)
    payment = _amount(debt_payment, "Debt payment")

    spent = total_expenses(items)
    free = received - spent
    if free < 0:
        logger.debug("Rejected cycle: expenses %.2f exceed received %.2f", spent, received)
        raise ExpensesExceedIncome(received, spent)
    if payment > free:
        logger.debug("Rejected cycle: payment %.2f exceeds free money %.2f", payment, free)
        raise DebtPaymentExceedsFreeMoney(payment, free)

    period = next_period(state)
    cycle = Cycle(
        received_money=received,
        expenses=items,
        debt_payment=payment,
        free_money=free,
        date_range=period.label,
    )
    new_state = replace(
        state,
        debt=state.debt - payment,
        cycles=state.cycles + (cycle,),
        next_period_start=period.next_period_start,
    )
    logger.debug(
        "Recorded cycle %s: free %.2f, payment %.2f, debt now %.2f",
        cycle.date_range, free, payment, new_state.debt,
    )
    return new_state, cycle


def _initial_debt(state: LedgerState) -> float:
    if state.initial_debt is not None:
        return state.initial_debt
    return state.debt + sum(c.debt_payment for c in state.cycles)


def summarize(state: LedgerState) -> LedgerSummary:
    """Compute totals over the cycle history"""
    if not state.is_initialized:
        raise LedgerNotInitialized()
    paid = sum(c.debt_payment for c in state.cycles)
    return LedgerSummary(
        initial_debt=_initial_debt(state),
        current_debt=state.debt,
        total_paid=paid,
        total_received=sum(c.received_money for c in state.cycles),
        total_expenses=sum(c.total_expenses for c in state.cycles),
        cycle_count=len(state.cycles),
    )


def debt_history(state: LedgerState) -> List[float]:
    """Debt balance after each recorded cycle, in entry order"""
    if not state.is_initialized:
        return []
    running = _initial_debt(state)
    out = []
    for c in state.cycles:
        running -= c.debt_payment
        out.append(running)
    return out
