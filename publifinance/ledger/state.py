"""Mini README: Ledger state manager for transactions and savings goals.

Structure:
    * LedgerState - owns both collections, applies add/update/delete and
      recomputes aggregates on demand.

Collections are insertion-ordered dictionaries keyed by identifier, so an
update that rewrites a key keeps the record in its original position.
Identifiers come from per-collection counters that only move forward, which
keeps them unique however quickly records are created and never reuses an
identifier after a delete.

The manager coerces payload values into the record types but does not
validate their content; presence checks belong to the form layer. Updates
and deletes that reference an unknown identifier leave the state untouched
and report ``found=False`` in the returned :class:`MutationResult`.

Update policies differ per entity: transactions are replaced whole, because
the edit form always submits every field, while goals merge the provided
fields so ``current_amount`` survives edits that only touch name or target.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Dict, Iterable, List, Mapping, Optional

from ..logging_utils import get_logger
from .aggregates import (
    CategoryTotal,
    FinancialSummary,
    compute_expense_by_category,
    compute_summary,
)
from .models import (
    MutationResult,
    SavingsGoal,
    Transaction,
    TransactionType,
    to_date,
    to_decimal,
)
from .seed import DEMO_GOALS, DEMO_TRANSACTIONS

LOGGER = get_logger(__name__)

_TRANSACTION_FIELDS = ("transaction_type", "category", "amount", "occurred_on", "description")
_GOAL_FIELDS = ("name", "target_amount", "current_amount")


def _coerce_transaction_fields(payload: Mapping[str, object]) -> Dict[str, object]:
    """Convert a transaction payload into typed constructor arguments."""

    missing = [name for name in _TRANSACTION_FIELDS if name not in payload]
    if missing:
        raise ValueError(f"Transaction payload is missing fields: {', '.join(missing)}")
    return {
        "transaction_type": TransactionType.from_str(payload["transaction_type"]),
        "category": str(payload["category"]),
        "amount": to_decimal(payload["amount"]),
        "occurred_on": to_date(payload["occurred_on"]),
        "description": str(payload["description"]),
    }


def _coerce_goal_fields(payload: Mapping[str, object]) -> Dict[str, object]:
    """Convert the goal fields present in a payload, skipping ``None`` values."""

    coerced: Dict[str, object] = {}
    for key in _GOAL_FIELDS:
        value = payload.get(key)
        if value is None:
            continue
        coerced[key] = str(value) if key == "name" else to_decimal(value)
    return coerced


class LedgerState:
    """Hold transactions and goals for the lifetime of the application."""

    def __init__(
        self,
        transactions: Optional[Iterable[Mapping[str, object]]] = None,
        goals: Optional[Iterable[Mapping[str, object]]] = None,
        *,
        seed_demo_data: bool = False,
    ) -> None:
        self._transactions: Dict[str, Transaction] = {}
        self._goals: Dict[str, SavingsGoal] = {}
        self._transaction_sequence = 0
        self._goal_sequence = 0
        if seed_demo_data:
            transactions = DEMO_TRANSACTIONS if transactions is None else transactions
            goals = DEMO_GOALS if goals is None else goals
        for payload in transactions or ():
            self.add_transaction(payload)
        for payload in goals or ():
            goal = self.add_goal(payload)
            if payload.get("current_amount") is not None:
                self.update_goal({"goal_id": goal.goal_id, "current_amount": payload["current_amount"]})
        LOGGER.debug(
            "Ledger initialised with %s transactions and %s goals",
            len(self._transactions),
            len(self._goals),
        )

    # Identifiers ---------------------------------------------------------

    def _next_transaction_id(self) -> str:
        self._transaction_sequence += 1
        return f"txn_{self._transaction_sequence:04d}"

    def _next_goal_id(self) -> str:
        self._goal_sequence += 1
        return f"goal_{self._goal_sequence:04d}"

    # Read accessors ------------------------------------------------------

    def list_transactions(self) -> List[Transaction]:
        """Return transactions in insertion order."""

        return list(self._transactions.values())

    def list_goals(self) -> List[SavingsGoal]:
        """Return goals in insertion order."""

        return list(self._goals.values())

    def get_transaction(self, transaction_id: str) -> Optional[Transaction]:
        return self._transactions.get(transaction_id)

    def get_goal(self, goal_id: str) -> Optional[SavingsGoal]:
        return self._goals.get(goal_id)

    def summary(self) -> FinancialSummary:
        """Recompute income, expense and balance from the current transactions."""

        return compute_summary(self._transactions.values())

    def expense_by_category(self) -> List[CategoryTotal]:
        """Recompute the per-category expense breakdown."""

        return compute_expense_by_category(self._transactions.values())

    # Transactions --------------------------------------------------------

    def add_transaction(self, payload: Mapping[str, object]) -> Transaction:
        """Append a new transaction built from a payload without identifier."""

        fields = _coerce_transaction_fields(payload)
        transaction = Transaction(transaction_id=self._next_transaction_id(), **fields)
        self._transactions[transaction.transaction_id] = transaction
        LOGGER.info(
            "Added %s transaction %s (%s %s)",
            transaction.transaction_type.value,
            transaction.transaction_id,
            transaction.category,
            transaction.amount,
        )
        return transaction

    def update_transaction(self, payload: Mapping[str, object]) -> MutationResult[Transaction]:
        """Replace the transaction matching ``payload["transaction_id"]`` in place."""

        transaction_id = str(payload.get("transaction_id"))
        if transaction_id not in self._transactions:
            LOGGER.warning("Update ignored: transaction %s not found", transaction_id)
            return MutationResult(found=False)
        updated = Transaction(transaction_id=transaction_id, **_coerce_transaction_fields(payload))
        self._transactions[transaction_id] = updated
        LOGGER.info("Updated transaction %s", transaction_id)
        return MutationResult(found=True, record=updated)

    def delete_transaction(self, transaction_id: str) -> MutationResult[Transaction]:
        """Remove a transaction; unknown identifiers are reported, not raised."""

        removed = self._transactions.pop(transaction_id, None)
        if removed is None:
            LOGGER.warning("Delete ignored: transaction %s not found", transaction_id)
            return MutationResult(found=False)
        LOGGER.info("Deleted transaction %s", transaction_id)
        return MutationResult(found=True, record=removed)

    # Goals ---------------------------------------------------------------

    def add_goal(self, payload: Mapping[str, object]) -> SavingsGoal:
        """Append a goal from ``{name, target_amount}`` with nothing saved yet."""

        goal = SavingsGoal(
            goal_id=self._next_goal_id(),
            name=str(payload["name"]),
            target_amount=to_decimal(payload["target_amount"]),
        )
        self._goals[goal.goal_id] = goal
        LOGGER.info("Added goal %s (%s, target %s)", goal.goal_id, goal.name, goal.target_amount)
        return goal

    def update_goal(self, payload: Mapping[str, object]) -> MutationResult[SavingsGoal]:
        """Merge provided fields onto the goal matching ``payload["goal_id"]``."""

        goal_id = str(payload.get("goal_id"))
        existing = self._goals.get(goal_id)
        if existing is None:
            LOGGER.warning("Update ignored: goal %s not found", goal_id)
            return MutationResult(found=False)
        merged = replace(existing, **_coerce_goal_fields(payload))
        self._goals[goal_id] = merged
        LOGGER.info("Updated goal %s", goal_id)
        return MutationResult(found=True, record=merged)

    def delete_goal(self, goal_id: str) -> MutationResult[SavingsGoal]:
        """Remove a goal; unknown identifiers are reported, not raised."""

        removed = self._goals.pop(goal_id, None)
        if removed is None:
            LOGGER.warning("Delete ignored: goal %s not found", goal_id)
            return MutationResult(found=False)
        LOGGER.info("Deleted goal %s", goal_id)
        return MutationResult(found=True, record=removed)
