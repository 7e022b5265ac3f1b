"""Mini README: Boundary validation for transaction and goal submissions.

Structure:
    * EXPENSE_CATEGORIES / INCOME_CATEGORIES - vocabulary offered by the forms.
    * TransactionForm - presence checks for the transaction editor.
    * GoalForm - presence checks for creating or renaming a goal.
    * GoalUpdateForm - partial goal edits, including the saved amount.
    * describe_errors - flatten pydantic errors into display strings.

The ledger trusts whatever reaches it, so every HTTP route funnels input
through these models first. The category vocabulary is only a suggestion
list; the ledger stores any category it is given.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from ..ledger import TransactionType

EXPENSE_CATEGORIES: List[str] = [
    "Alimentação",
    "Moradia",
    "Transporte",
    "Contas",
    "Lazer",
    "Saúde",
    "Compras",
    "Outros",
]
INCOME_CATEGORIES: List[str] = ["Salário", "Freelance", "Bônus", "Presente", "Outros"]

CATEGORY_CHOICES: Dict[TransactionType, List[str]] = {
    TransactionType.EXPENSE: EXPENSE_CATEGORIES,
    TransactionType.INCOME: INCOME_CATEGORIES,
}


class TransactionForm(BaseModel):
    """Fields submitted by the transaction editor."""

    model_config = ConfigDict(str_strip_whitespace=True)

    transaction_type: TransactionType = TransactionType.EXPENSE
    description: str = Field(..., min_length=1)
    amount: Decimal = Field(..., ge=0)
    category: Optional[str] = Field(None, min_length=1)
    occurred_on: date = Field(default_factory=date.today)

    @model_validator(mode="after")
    def _default_category(self) -> "TransactionForm":
        """Fall back to the first category offered for the chosen type."""

        if self.category is None:
            self.category = CATEGORY_CHOICES[self.transaction_type][0]
        return self


class GoalForm(BaseModel):
    """Fields submitted by the goal editor."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1)
    target_amount: Decimal = Field(..., gt=0)


class GoalUpdateForm(BaseModel):
    """Partial goal edit; omitted fields keep their current values."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: Optional[str] = Field(None, min_length=1)
    target_amount: Optional[Decimal] = Field(None, gt=0)
    current_amount: Optional[Decimal] = Field(None, ge=0)


def describe_errors(error: ValidationError) -> List[str]:
    """Return ``"field: message"`` strings for rendering next to a form."""

    messages = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail["loc"]) or "form"
        messages.append(f"{location}: {detail['msg']}")
    return messages
