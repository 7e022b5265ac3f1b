"""Mini README: Record types held by the in-memory ledger.

Structure:
    * TransactionType - enum separating income from expense entries.
    * Transaction - a single dated income or expense with an unsigned amount.
    * SavingsGoal - named target amount with the progress saved so far.
    * MutationResult - outcome of an update or delete, reporting whether the
      targeted record existed.

Amounts are stored as ``Decimal`` magnitudes. The sign of a transaction is
implied by its type and never stored.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Dict, Generic, Optional, TypeVar

RecordT = TypeVar("RecordT")


class TransactionType(str, Enum):
    """Enumerate the supported transaction kinds."""

    INCOME = "income"
    EXPENSE = "expense"

    @classmethod
    def from_str(cls, value: object) -> "TransactionType":
        """Coerce arbitrary casing into a valid transaction type."""

        if isinstance(value, cls):
            return value
        try:
            normalised = str(value).strip().lower()
            return cls(normalised)
        except ValueError as error:
            raise ValueError(f"Unsupported transaction type: {value}") from error


@dataclass(frozen=True, slots=True)
class Transaction:
    """Represent a recorded income or expense event."""

    transaction_id: str
    transaction_type: TransactionType
    category: str
    amount: Decimal
    occurred_on: date
    description: str

    def as_dict(self) -> Dict[str, object]:
        """Export the transaction with serialisable values."""

        return {
            "transaction_id": self.transaction_id,
            "transaction_type": self.transaction_type.value,
            "category": self.category,
            "amount": float(self.amount),
            "occurred_on": self.occurred_on.isoformat(),
            "description": self.description,
        }


@dataclass(frozen=True, slots=True)
class SavingsGoal:
    """Named savings target; progress may exceed the target."""

    goal_id: str
    name: str
    target_amount: Decimal
    current_amount: Decimal = Decimal("0")

    def as_dict(self) -> Dict[str, object]:
        """Export the goal with serialisable values."""

        return {
            "goal_id": self.goal_id,
            "name": self.name,
            "target_amount": float(self.target_amount),
            "current_amount": float(self.current_amount),
        }


@dataclass(frozen=True)
class MutationResult(Generic[RecordT]):
    """Report whether an update or delete matched an existing record.

    ``record`` holds the updated record after an update, or the removed
    record after a delete. It is ``None`` whenever ``found`` is false.
    """

    found: bool
    record: Optional[RecordT] = None

    def __bool__(self) -> bool:
        return self.found


def to_decimal(value: object) -> Decimal:
    """Convert numbers or numeric strings into ``Decimal`` amounts."""

    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        # repr round-trip keeps 0.1 as Decimal("0.1") rather than its binary expansion
        return Decimal(repr(value))
    try:
        return Decimal(str(value).strip())
    except InvalidOperation as error:
        raise ValueError(f"Amounts must be numeric, got {value!r}") from error


def to_date(value: object) -> date:
    """Parse ISO formatted strings or date objects."""

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return date.fromisoformat(value)
    raise ValueError("Dates must be provided as ISO strings or date/datetime instances.")
