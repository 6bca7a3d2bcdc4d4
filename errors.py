"""
Validation errors raised by the ledger before any state change
"""
from __future__ import annotations


class LedgerError(ValueError):
    """Base class for rejected ledger input"""
    title = "Invalid input"


class InvalidDebtAmount(LedgerError):
    title = "Invalid debt"

    def __init__(self, value=None):
        self.value = value
        super().__init__("Please enter a valid debt amount.")


class InvalidAmount(LedgerError):
    title = "Invalid amount"

    def __init__(self, field: str, value=None):
        self.field = field
        self.value = value
        super().__init__(f"{field} must be a non-negative number.")


class ExpensesExceedIncome(LedgerError):
    title = "Expenses too high"

    def __init__(self, received: float, total_expenses: float):
        self.received = received
        self.total_expenses = total_expenses
        super().__init__("Expenses exceed received money!")


class DebtPaymentExceedsFreeMoney(LedgerError):
    title = "Payment too high"

    def __init__(self, debt_payment: float, free_money: float):
        self.debt_payment = debt_payment
        self.free_money = free_money
        super().__init__("Debt payment cannot exceed free money available!")


class LedgerNotInitialized(LedgerError):
    title = "No debt entered"

    def __init__(self):
        super().__init__("Enter the current debt before adding payment cycles.")
