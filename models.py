"""
Data models for the debt tracker
"""
from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Optional, Tuple


@dataclass(frozen=True)
class Expense:
    """Single itemized expense inside a cycle"""
    description: str
    amount: float


@dataclass(frozen=True)
class Cycle:
    """One recorded half-month settlement"""
    received_money: float
    expenses: Tuple[Expense, ...]
    debt_payment: float
    free_money: float  # received_money - total_expenses, frozen at creation
    date_range: str  # e.g. "1-15 Jan"

    @property
    def total_expenses(self) -> float:
        return sum(e.amount for e in self.expenses)

    @property
    def remaining_free_money(self) -> float:
        return self.free_money - self.debt_payment


@dataclass(frozen=True)
class LedgerState:
    """Debt balance, cycle history and the start of the next period"""
    debt: Optional[float]
    cycles: Tuple[Cycle, ...]
    next_period_start: date
    initial_debt: Optional[float] = None

    @property
    def is_initialized(self) -> bool:
        return self.debt is not None


@dataclass(frozen=True)
class LedgerSummary:
    """Aggregate figures over the whole cycle history"""
    initial_debt: float
    current_debt: float
    total_paid: float
    total_received: float
    total_expenses: float
    cycle_count: int

    @property
    def average_payment(self) -> float:
        return self.total_paid / self.cycle_count if self.cycle_count else 0.0
