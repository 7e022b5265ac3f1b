"""Mini README: Tests for summary totals and the expense breakdown.

Covers the worked dashboard scenario, recomputation after deletes, and the
relationships between balance, totals and per-category sums.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from publifinance.ledger import (
    LedgerState,
    SavingsGoal,
    compute_expense_by_category,
    compute_summary,
    goal_progress,
    transactions_by_date,
)


@pytest.fixture()
def scenario_ledger() -> LedgerState:
    ledger = LedgerState()
    for transaction_type, amount, category in (
        ("income", 4500, "Salário"),
        ("expense", 1200, "Moradia"),
        ("expense", 450, "Alimentação"),
    ):
        ledger.add_transaction(
            {
                "transaction_type": transaction_type,
                "category": category,
                "amount": amount,
                "occurred_on": date(2025, 7, 1),
                "description": category,
            }
        )
    return ledger


def test_summary_matches_worked_scenario(scenario_ledger: LedgerState) -> None:
    summary = compute_summary(scenario_ledger.list_transactions())

    assert summary.total_income == Decimal("4500")
    assert summary.total_expense == Decimal("1650")
    assert summary.balance == Decimal("2850")


def test_breakdown_keeps_first_seen_order(scenario_ledger: LedgerState) -> None:
    breakdown = compute_expense_by_category(scenario_ledger.list_transactions())

    assert [entry.as_dict() for entry in breakdown] == [
        {"name": "Moradia", "value": 1200.0},
        {"name": "Alimentação", "value": 450.0},
    ]


def test_aggregates_recompute_after_delete(scenario_ledger: LedgerState) -> None:
    housing = next(t for t in scenario_ledger.list_transactions() if t.category == "Moradia")

    scenario_ledger.delete_transaction(housing.transaction_id)

    assert [(e.name, e.value) for e in scenario_ledger.expense_by_category()] == [
        ("Alimentação", Decimal("450"))
    ]
    assert scenario_ledger.summary().total_expense == Decimal("450")


def test_repeated_categories_are_summed_once() -> None:
    ledger = LedgerState(seed_demo_data=True)
    ledger.add_transaction(
        {
            "transaction_type": "expense",
            "category": "Moradia",
            "amount": "300.50",
            "occurred_on": "2025-07-30",
            "description": "Condomínio",
        }
    )

    breakdown = ledger.expense_by_category()

    names = [entry.name for entry in breakdown]
    assert names == ["Moradia", "Alimentação", "Transporte", "Lazer", "Contas", "Saúde"]
    assert breakdown[0].value == Decimal("1500.50")


def test_balance_and_breakdown_agree_with_totals() -> None:
    ledger = LedgerState(seed_demo_data=True)
    ledger.add_transaction(
        {
            "transaction_type": "expense",
            "category": "Compras",
            "amount": 0.1,
            "occurred_on": "2025-07-02",
            "description": "Chiclete",
        }
    )
    transactions = ledger.list_transactions()

    summary = compute_summary(transactions)
    breakdown = compute_expense_by_category(transactions)

    assert summary.balance == summary.total_income - summary.total_expense
    assert sum(entry.value for entry in breakdown) == summary.total_expense
    assert summary.total_income == Decimal("5250")
    assert summary.total_expense == Decimal("2060.1")


def test_empty_collection_yields_zero_totals() -> None:
    summary = compute_summary([])

    assert summary.as_dict() == {"total_income": 0.0, "total_expense": 0.0, "balance": 0.0}
    assert compute_expense_by_category([]) == []


def test_income_only_has_no_breakdown_entries() -> None:
    ledger = LedgerState()
    ledger.add_transaction(
        {
            "transaction_type": "income",
            "category": "Bônus",
            "amount": 100,
            "occurred_on": "2025-07-02",
            "description": "Bônus",
        }
    )

    assert ledger.expense_by_category() == []
    assert ledger.summary().balance == Decimal("100")


def test_goal_progress_is_uncapped() -> None:
    goal = SavingsGoal(goal_id="goal_0001", name="Fone", target_amount=Decimal("200"), current_amount=Decimal("300"))

    assert goal_progress(goal) == pytest.approx(150.0)
    assert goal_progress(SavingsGoal(goal_id="g", name="Zero", target_amount=Decimal("0"))) == 0.0


def test_transactions_by_date_does_not_reorder_source() -> None:
    ledger = LedgerState(seed_demo_data=True)
    original_ids = [t.transaction_id for t in ledger.list_transactions()]

    ordered = transactions_by_date(ledger.list_transactions())

    assert ordered[0].occurred_on == date(2025, 7, 22)
    assert ordered[-1].occurred_on == date(2025, 7, 1)
    assert [t.transaction_id for t in ledger.list_transactions()] == original_ids
