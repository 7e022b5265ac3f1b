"""Mini README: In-memory ledger for transactions and savings goals.

This package groups the record types, the pure aggregate functions and the
``LedgerState`` manager that the web interface calls into. Nothing is
persisted; a new process starts from the demonstration seed set.
"""

from .aggregates import (
    CategoryTotal,
    FinancialSummary,
    compute_expense_by_category,
    compute_summary,
    goal_progress,
    transactions_by_date,
)
from .models import MutationResult, SavingsGoal, Transaction, TransactionType
from .state import LedgerState

__all__ = [
    "CategoryTotal",
    "FinancialSummary",
    "LedgerState",
    "MutationResult",
    "SavingsGoal",
    "Transaction",
    "TransactionType",
    "compute_expense_by_category",
    "compute_summary",
    "goal_progress",
    "transactions_by_date",
]
