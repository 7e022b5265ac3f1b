"""Mini README: HTTP tests for the dashboard and JSON API.

Each test builds its own application around a seeded ledger through the
factory, so no state leaks between tests.
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from publifinance.configuration import PubliFinanceSettings
from publifinance.interface import create_application
from publifinance.ledger import LedgerState


@pytest.fixture()
def ledger() -> LedgerState:
    return LedgerState(seed_demo_data=True)


@pytest.fixture()
def client(ledger: LedgerState) -> TestClient:
    settings = PubliFinanceSettings(seed_demo_data=False)
    return TestClient(create_application(settings=settings, ledger=ledger))


def test_dashboard_renders_summary(client: TestClient) -> None:
    response = client.get("/")

    assert response.status_code == 200
    assert "R$ 5.250,00" in response.text
    assert "R$ 2.060,00" in response.text
    assert "R$ 3.190,00" in response.text
    assert "Viagem dos Sonhos para Neo-Tokyo" in response.text


def test_transactions_view_with_edit_modal(client: TestClient, ledger: LedgerState) -> None:
    target = ledger.list_transactions()[1]

    response = client.get(
        "/", params={"view": "transactions", "modal": "transaction", "edit": target.transaction_id}
    )

    assert response.status_code == 200
    assert "Editar Transação" in response.text
    assert f'value="{target.transaction_id}"' in response.text


def test_edit_modal_for_missing_record_falls_back_to_new_form(client: TestClient) -> None:
    response = client.get("/", params={"view": "goals", "modal": "goal", "edit": "goal_9999"})

    assert response.status_code == 200
    assert "Nova Meta de Poupança" in response.text


def test_form_save_creates_transaction_and_redirects(client: TestClient, ledger: LedgerState) -> None:
    response = client.post(
        "/transactions/save",
        data={
            "transaction_type": "expense",
            "description": "Tênis",
            "amount": "250",
            "category": "Compras",
            "occurred_on": "2025-07-25",
        },
        follow_redirects=False,
    )

    assert response.status_code == 303
    assert response.headers["location"] == "/?view=transactions"
    assert ledger.list_transactions()[-1].description == "Tênis"
    assert ledger.summary().total_expense == Decimal("2310")


def test_form_save_rejects_blank_description(client: TestClient, ledger: LedgerState) -> None:
    response = client.post("/transactions/save", data={"description": "", "amount": "10"})

    assert response.status_code == 400
    assert "description" in response.text
    assert len(ledger.list_transactions()) == 8


def test_form_edit_and_delete_goal(client: TestClient, ledger: LedgerState) -> None:
    goal = ledger.list_goals()[1]

    client.post("/goals/save", data={"goal_id": goal.goal_id, "name": "Upgrade", "target_amount": "3000"})
    updated = ledger.get_goal(goal.goal_id)
    assert updated.name == "Upgrade"
    assert updated.current_amount == Decimal("800")

    response = client.post(f"/goals/{goal.goal_id}/delete", follow_redirects=False)
    assert response.status_code == 303
    assert ledger.get_goal(goal.goal_id) is None


def test_api_transaction_lifecycle(client: TestClient) -> None:
    created = client.post(
        "/api/transactions",
        json={
            "transaction_type": "income",
            "description": "Presente de aniversário",
            "amount": 200,
            "category": "Presente",
            "occurred_on": "2025-07-20",
        },
    )
    assert created.status_code == 201
    transaction_id = created.json()["transaction_id"]

    updated = client.put(
        f"/api/transactions/{transaction_id}",
        json={
            "transaction_type": "income",
            "description": "Presente",
            "amount": 250,
            "category": "Presente",
            "occurred_on": "2025-07-20",
        },
    )
    assert updated.status_code == 200
    assert updated.json()["amount"] == 250.0
    assert client.get("/api/summary").json()["total_income"] == 5500.0

    assert client.delete(f"/api/transactions/{transaction_id}").status_code == 200
    assert client.delete(f"/api/transactions/{transaction_id}").status_code == 404


def test_api_update_unknown_transaction_returns_404(client: TestClient) -> None:
    response = client.put(
        "/api/transactions/txn_9999",
        json={"description": "Nada", "amount": 1},
    )

    assert response.status_code == 404


def test_api_rejects_invalid_payload(client: TestClient) -> None:
    response = client.post("/api/transactions", json={"description": "", "amount": "abc"})

    assert response.status_code == 422


def test_api_goal_merge_and_progress(client: TestClient) -> None:
    created = client.post("/api/goals", json={"name": "Test", "target_amount": 100})
    assert created.status_code == 201
    body = created.json()
    assert body["current_amount"] == 0.0

    merged = client.put(f"/api/goals/{body['goal_id']}", json={"current_amount": 150})
    assert merged.json()["name"] == "Test"
    assert merged.json()["progress_percent"] == pytest.approx(150.0)
    assert client.put("/api/goals/goal_9999", json={"name": "X"}).status_code == 404


def test_api_breakdown_and_categories(client: TestClient) -> None:
    categories = client.get("/api/expenses-by-category").json()["categories"]
    assert categories[0] == {"name": "Moradia", "value": 1200.0}
    assert len(categories) == 6

    vocabulary = client.get("/api/categories").json()
    assert "Salário" in vocabulary["income"]
    assert "Alimentação" in vocabulary["expense"]


def test_huge_amount_still_renders_every_view(client: TestClient, ledger: LedgerState) -> None:
    response = client.post(
        "/transactions/save",
        data={"transaction_type": "income", "description": "Prêmio", "amount": "1e26", "category": "Bônus"},
        follow_redirects=False,
    )
    assert response.status_code == 303

    for view in ("dashboard", "transactions", "goals"):
        page = client.get("/", params={"view": view})
        assert page.status_code == 200

    transactions_page = client.get("/", params={"view": "transactions"})
    assert "R$ 100.000.000.000.000.000.000.000.000,00" in transactions_page.text


def test_api_income_without_category_uses_income_vocabulary(client: TestClient) -> None:
    created = client.post(
        "/api/transactions",
        json={"transaction_type": "income", "description": "Pagamento", "amount": 100},
    )

    assert created.status_code == 201
    assert created.json()["category"] == "Salário"
