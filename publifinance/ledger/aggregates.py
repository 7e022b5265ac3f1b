"""Mini README: Pure aggregate computations over transactions and goals.

Structure:
    * FinancialSummary - income, expense and balance totals.
    * CategoryTotal - one ``{name, value}`` pair of the expense breakdown.
    * compute_summary - totals over any iterable of transactions.
    * compute_expense_by_category - expense sums grouped in first-seen order.
    * goal_progress - percentage saved towards a goal, uncapped.
    * transactions_by_date - newest-first copy for tabular views.

Nothing here keeps state. Callers recompute after every mutation.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Iterable, List

from .models import SavingsGoal, Transaction, TransactionType

ZERO = Decimal("0")


@dataclass(frozen=True)
class FinancialSummary:
    """Totals derived from a transaction collection."""

    total_income: Decimal
    total_expense: Decimal
    balance: Decimal

    def as_dict(self) -> Dict[str, float]:
        return {
            "total_income": float(self.total_income),
            "total_expense": float(self.total_expense),
            "balance": float(self.balance),
        }


@dataclass(frozen=True)
class CategoryTotal:
    """Summed expense amount for a single category."""

    name: str
    value: Decimal

    def as_dict(self) -> Dict[str, object]:
        return {"name": self.name, "value": float(self.value)}


def compute_summary(transactions: Iterable[Transaction]) -> FinancialSummary:
    """Sum income and expense amounts in a single pass."""

    total_income = ZERO
    total_expense = ZERO
    for transaction in transactions:
        if transaction.transaction_type is TransactionType.INCOME:
            total_income += transaction.amount
        else:
            total_expense += transaction.amount
    return FinancialSummary(
        total_income=total_income,
        total_expense=total_expense,
        balance=total_income - total_expense,
    )


def compute_expense_by_category(transactions: Iterable[Transaction]) -> List[CategoryTotal]:
    """Group expense amounts by category, preserving first-occurrence order."""

    totals: Dict[str, Decimal] = {}
    for transaction in transactions:
        if transaction.transaction_type is not TransactionType.EXPENSE:
            continue
        totals[transaction.category] = totals.get(transaction.category, ZERO) + transaction.amount
    return [CategoryTotal(name=name, value=value) for name, value in totals.items()]


def goal_progress(goal: SavingsGoal) -> float:
    """Return the saved percentage of a goal; values above 100 are kept."""

    if goal.target_amount <= ZERO:
        return 0.0
    return float(goal.current_amount / goal.target_amount * 100)


def transactions_by_date(transactions: Iterable[Transaction]) -> List[Transaction]:
    """Return a newest-first copy without touching the source ordering."""

    return sorted(transactions, key=lambda transaction: transaction.occurred_on, reverse=True)
