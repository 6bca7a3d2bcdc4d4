from datetime import date

import pytest

from computations import (
    debt_history,
    initialize,
    preview_cycle,
    record_cycle,
    summarize,
)
from errors import (
    DebtPaymentExceedsFreeMoney,
    ExpensesExceedIncome,
    InvalidAmount,
    InvalidDebtAmount,
    LedgerError,
    LedgerNotInitialized,
)
from models import Expense, LedgerState


def new_ledger(debt=1000, start=date(2024, 1, 1)):
    return initialize(debt, start)


def test_initialize_sets_debt_and_first_period():
    state = initialize(1000, date(2024, 1, 10))
    assert state.debt == 1000
    assert state.initial_debt == 1000
    assert state.cycles == ()
    assert state.next_period_start == date(2024, 1, 1)
    assert initialize(1000, date(2024, 1, 20)).next_period_start == date(2024, 1, 16)


def test_initialize_parses_form_text():
    assert initialize(" 1,250.50 ", date(2024, 1, 1)).debt == 1250.5


@pytest.mark.parametrize("value", [0, -5, "abc", "", None, float("nan"), float("inf")])
def test_initialize_rejects_invalid_debt(value):
    with pytest.raises(InvalidDebtAmount):
        initialize(value, date(2024, 1, 1))


def test_worked_example_two_cycles():
    state = new_ledger()
    state, cycle = record_cycle(state, 500, [("rent", 200)], 100)
    assert cycle.free_money == 300
    assert cycle.date_range == "1-15 Jan"
    assert cycle.expenses == (Expense("rent", 200),)
    assert cycle.remaining_free_money == 200
    assert state.debt == 900
    assert state.next_period_start == date(2024, 1, 16)

    state, cycle = record_cycle(state, 400, [], 50)
    assert cycle.date_range == "16-31 Jan"
    assert cycle.free_money == 400
    assert state.debt == 850
    assert state.next_period_start == date(2024, 2, 1)


def test_expenses_exceeding_income_rejected_without_change():
    state = new_ledger()
    with pytest.raises(ExpensesExceedIncome) as exc:
        record_cycle(state, 100, [("x", 150)], 0)
    assert exc.value.total_expenses == 150
    assert state == new_ledger()


def test_payment_exceeding_free_money_rejected_without_change():
    state = new_ledger()
    with pytest.raises(DebtPaymentExceedsFreeMoney):
        record_cycle(state, 500, [("rent", 200)], 301)
    assert state.debt == 1000
    assert state.cycles == ()
    assert state.next_period_start == date(2024, 1, 1)


def test_payment_equal_to_free_money_accepted():
    state, cycle = record_cycle(new_ledger(), 500, [("rent", 200)], 300)
    assert cycle.remaining_free_money == 0
    assert state.debt == 700


def test_expenses_equal_to_income_accepted():
    state, cycle = record_cycle(new_ledger(), 200, [("a", 120), ("b", 80)], 0)
    assert cycle.free_money == 0
    assert state.debt == 1000


def test_debt_can_go_negative():
    state, _ = record_cycle(new_ledger(debt=100), 500, [], 250)
    assert state.debt == -150


@pytest.mark.parametrize(
    "received,expenses,payment",
    [
        (-1, [], 0),
        (100, [("x", -5)], 0),
        (100, [], -1),
        ("lots", [], 0),
        (100, [("x", "ten")], 0),
    ],
)
def test_negative_or_non_numeric_amounts_rejected(received, expenses, payment):
    with pytest.raises(InvalidAmount):
        record_cycle(new_ledger(), received, expenses, payment)


def test_all_rejections_are_ledger_errors():
    with pytest.raises(LedgerError):
        record_cycle(new_ledger(), 100, [("x", 150)], 0)
    with pytest.raises(ValueError):
        record_cycle(new_ledger(), 100, [], 150)


def test_record_before_initialize_rejected():
    state = LedgerState(debt=None, cycles=(), next_period_start=date(2024, 1, 1))
    with pytest.raises(LedgerNotInitialized):
        record_cycle(state, 100, [], 0)


def test_input_state_is_not_mutated():
    before = new_ledger()
    after, _ = record_cycle(before, 500, [("rent", 200)], 100)
    assert before.debt == 1000
    assert before.cycles == ()
    assert after is not before


def test_debt_equals_initial_minus_payments_after_many_cycles():
    state = new_ledger(debt=5000)
    payments = [100, 0, 250.5, 75, 300, 10]
    for p in payments:
        state, _ = record_cycle(state, 400, [("food", 50)], p)
    assert state.debt == pytest.approx(5000 - sum(payments))
    assert [c.debt_payment for c in state.cycles] == payments
    assert len(state.cycles) == len(payments)
    assert state.next_period_start == date(2024, 4, 1)


def test_cycles_keep_call_order_and_alternate_periods():
    state = new_ledger(start=date(2024, 11, 20))
    labels = []
    for _ in range(4):
        state, cycle = record_cycle(state, 100, [], 10)
        labels.append(cycle.date_range)
    assert labels == ["16-30 Nov", "1-15 Dec", "16-31 Dec", "1-15 Jan"]
    assert state.next_period_start == date(2025, 1, 16)


def test_expense_objects_and_pairs_accepted():
    state, cycle = record_cycle(new_ledger(), "300", [Expense(" gas ", 20), ("food", "30.5")], "10")
    assert cycle.expenses == (Expense("gas", 20), Expense("food", 30.5))
    assert cycle.total_expenses == 50.5


def test_preview_matches_recorded_label():
    state = new_ledger()
    label, free = preview_cycle(state, "500", [("rent", "200"), ("", "")])
    _, cycle = record_cycle(state, 500, [("rent", 200)], 0)
    assert label == cycle.date_range
    assert free == 300


def test_preview_tolerates_partial_input():
    label, free = preview_cycle(new_ledger(), "", [("rent", "abc")])
    assert label == "1-15 Jan"
    assert free == 0


def test_summary_and_debt_history():
    state = new_ledger()
    state, _ = record_cycle(state, 500, [("rent", 200)], 100)
    state, _ = record_cycle(state, 400, [], 50)
    s = summarize(state)
    assert s.initial_debt == 1000
    assert s.current_debt == 850
    assert s.total_paid == 150
    assert s.total_received == 900
    assert s.total_expenses == 200
    assert s.cycle_count == 2
    assert s.average_payment == 75
    assert debt_history(state) == [900, 850]


def test_summary_of_empty_ledger():
    s = summarize(new_ledger())
    assert s.total_paid == 0
    assert s.average_payment == 0.0
    assert debt_history(new_ledger()) == []
