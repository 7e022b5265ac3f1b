"""Mini README: Demonstration data loaded into fresh ledgers.

The payloads mirror what the entry forms submit, so seeding goes through the
same ``add_*`` operations as user input and receives ordinary identifiers.
Goals carry a saved amount, which is applied as an edit after creation.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Dict, List

DEMO_TRANSACTIONS: List[Dict[str, object]] = [
    {
        "transaction_type": "income",
        "category": "Salário",
        "amount": Decimal("4500"),
        "occurred_on": date(2025, 7, 1),
        "description": "Salário Mensal",
    },
    {
        "transaction_type": "expense",
        "category": "Moradia",
        "amount": Decimal("1200"),
        "occurred_on": date(2025, 7, 1),
        "description": "Aluguel",
    },
    {
        "transaction_type": "expense",
        "category": "Alimentação",
        "amount": Decimal("450"),
        "occurred_on": date(2025, 7, 5),
        "description": "Compras de Supermercado",
    },
    {
        "transaction_type": "expense",
        "category": "Transporte",
        "amount": Decimal("150"),
        "occurred_on": date(2025, 7, 7),
        "description": "Gasolina e Transporte Público",
    },
    {
        "transaction_type": "expense",
        "category": "Lazer",
        "amount": Decimal("80"),
        "occurred_on": date(2025, 7, 12),
        "description": "Cinema",
    },
    {
        "transaction_type": "income",
        "category": "Freelance",
        "amount": Decimal("750"),
        "occurred_on": date(2025, 7, 15),
        "description": "Projeto de Web Design",
    },
    {
        "transaction_type": "expense",
        "category": "Contas",
        "amount": Decimal("120"),
        "occurred_on": date(2025, 7, 18),
        "description": "Eletricidade e Internet",
    },
    {
        "transaction_type": "expense",
        "category": "Saúde",
        "amount": Decimal("60"),
        "occurred_on": date(2025, 7, 22),
        "description": "Farmácia",
    },
]

DEMO_GOALS: List[Dict[str, object]] = [
    {
        "name": "Viagem dos Sonhos para Neo-Tokyo",
        "target_amount": Decimal("5000"),
        "current_amount": Decimal("1200"),
    },
    {
        "name": "Upgrade Cibernético",
        "target_amount": Decimal("2500"),
        "current_amount": Decimal("800"),
    },
]
