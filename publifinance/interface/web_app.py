"""Mini README: FastAPI-powered dashboard for PubliFinance.

Structure:
    * create_application - application factory wiring views, forms and API.
    * HTML routes - dashboard, transaction table and goal list with an
      optional editor selected through ``view``/``modal``/``edit`` query
      parameters.
    * Form handlers - save/delete endpoints that redirect back to a view.
    * JSON API - ``/api`` endpoints exposing the same ledger operations.

Each application owns one ``LedgerState``. Form and API input passes through
the pydantic models in :mod:`publifinance.interface.forms` before it reaches
the ledger. API mutations on unknown identifiers answer 404; HTML handlers
redirect regardless since the view simply no longer lists the record.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from pydantic import ValidationError

from ..configuration import PubliFinanceSettings, get_settings
from ..ledger import LedgerState, SavingsGoal, Transaction, goal_progress, transactions_by_date
from ..logging_utils import get_logger
from .formatting import format_currency, format_date, format_percent
from .forms import (
    CATEGORY_CHOICES,
    EXPENSE_CATEGORIES,
    INCOME_CATEGORIES,
    GoalForm,
    GoalUpdateForm,
    TransactionForm,
    describe_errors,
)
from .session import ModalKind, SessionState, ViewName

LOGGER = get_logger(__name__)


def _goal_payload(goal: SavingsGoal) -> Dict[str, Any]:
    payload = goal.as_dict()
    payload["progress_percent"] = goal_progress(goal)
    return payload


def _submitted(values: Dict[str, Optional[str]]) -> Dict[str, str]:
    """Drop blank optional fields so model defaults apply."""

    return {key: value for key, value in values.items() if value not in (None, "")}


def create_application(
    settings: Optional[PubliFinanceSettings] = None,
    ledger: Optional[LedgerState] = None,
) -> FastAPI:
    """Create the FastAPI application with routes and a fresh ledger."""

    settings = settings or get_settings()
    if ledger is None:
        ledger = LedgerState(seed_demo_data=settings.seed_demo_data)

    app = FastAPI(title="PubliFinance Dashboard", version="0.1.0")
    templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))
    templates.env.filters["currency"] = lambda value: format_currency(value, settings.currency_symbol)
    templates.env.filters["br_date"] = format_date
    templates.env.filters["percent"] = format_percent
    static_directory = Path(__file__).parent / "static"
    app.mount("/static", StaticFiles(directory=str(static_directory)), name="static")
    app.state.ledger = ledger

    def render(
        request: Request,
        session: SessionState,
        *,
        errors: Optional[List[str]] = None,
        form_values: Optional[Dict[str, Any]] = None,
        status_code: int = 200,
    ) -> HTMLResponse:
        editing: Optional[Any] = None
        if session.is_editing:
            if session.modal is ModalKind.TRANSACTION:
                editing = ledger.get_transaction(session.editing_id)
            else:
                editing = ledger.get_goal(session.editing_id)
            if editing is None:
                LOGGER.warning("Edit target %s not found; opening a blank form", session.editing_id)
                session.open_modal(session.modal)
        goals = ledger.list_goals()
        context = {
            "session": session,
            "summary": ledger.summary(),
            "expense_data": ledger.expense_by_category(),
            "transactions": transactions_by_date(ledger.list_transactions()),
            "goals": [(goal, goal_progress(goal)) for goal in goals],
            "editing": editing,
            "errors": errors or [],
            "form_values": form_values or {},
            "expense_categories": EXPENSE_CATEGORIES,
            "income_categories": INCOME_CATEGORIES,
        }
        LOGGER.debug(
            "Rendering view=%s modal=%s editing=%s",
            session.active_view.value,
            session.modal.value if session.modal else None,
            session.editing_id,
        )
        return templates.TemplateResponse(
            request, f"{session.active_view.value}.html", context, status_code=status_code
        )

    # HTML views ---------------------------------------------------------

    @app.get("/", response_class=HTMLResponse)
    async def dashboard(
        request: Request,
        view: Optional[str] = None,
        modal: Optional[str] = None,
        edit: Optional[str] = None,
    ) -> HTMLResponse:
        """Render the selected view with an optional editor open."""

        return render(request, SessionState.from_query(view, modal, edit))

    @app.post("/transactions/save")
    async def save_transaction(
        request: Request,
        transaction_id: Optional[str] = Form(None),
        transaction_type: Optional[str] = Form(None),
        description: Optional[str] = Form(None),
        amount: Optional[str] = Form(None),
        category: Optional[str] = Form(None),
        occurred_on: Optional[str] = Form(None),
        view: Optional[str] = Form(None),
    ):
        """Create a transaction, or replace the one named by ``transaction_id``."""

        submitted = _submitted(
            {
                "transaction_type": transaction_type,
                "description": description,
                "amount": amount,
                "category": category,
                "occurred_on": occurred_on,
            }
        )
        try:
            form = TransactionForm.model_validate(submitted)
        except ValidationError as error:
            session = SessionState.from_query(view, ModalKind.TRANSACTION.value, transaction_id)
            return render(
                request,
                session,
                errors=describe_errors(error),
                form_values=submitted,
                status_code=400,
            )
        if transaction_id:
            ledger.update_transaction({"transaction_id": transaction_id, **form.model_dump()})
        else:
            ledger.add_transaction(form.model_dump())
        return RedirectResponse(url=f"/?view={view or ViewName.TRANSACTIONS.value}", status_code=303)

    @app.post("/transactions/{transaction_id}/delete")
    async def remove_transaction(transaction_id: str) -> RedirectResponse:
        ledger.delete_transaction(transaction_id)
        return RedirectResponse(url=f"/?view={ViewName.TRANSACTIONS.value}", status_code=303)

    @app.post("/goals/save")
    async def save_goal(
        request: Request,
        goal_id: Optional[str] = Form(None),
        name: Optional[str] = Form(None),
        target_amount: Optional[str] = Form(None),
        view: Optional[str] = Form(None),
    ):
        """Create a goal, or merge name and target onto an existing one."""

        submitted = _submitted({"name": name, "target_amount": target_amount})
        try:
            form = GoalForm.model_validate(submitted)
        except ValidationError as error:
            session = SessionState.from_query(view, ModalKind.GOAL.value, goal_id)
            return render(
                request,
                session,
                errors=describe_errors(error),
                form_values=submitted,
                status_code=400,
            )
        if goal_id:
            ledger.update_goal({"goal_id": goal_id, **form.model_dump()})
        else:
            ledger.add_goal(form.model_dump())
        return RedirectResponse(url=f"/?view={view or ViewName.GOALS.value}", status_code=303)

    @app.post("/goals/{goal_id}/delete")
    async def remove_goal(goal_id: str) -> RedirectResponse:
        ledger.delete_goal(goal_id)
        return RedirectResponse(url=f"/?view={ViewName.GOALS.value}", status_code=303)

    # JSON API -----------------------------------------------------------

    @app.get("/api/transactions")
    async def api_list_transactions() -> JSONResponse:
        return JSONResponse(
            {"transactions": [transaction.as_dict() for transaction in ledger.list_transactions()]}
        )

    @app.post("/api/transactions", status_code=201)
    async def api_create_transaction(form: TransactionForm) -> JSONResponse:
        transaction = ledger.add_transaction(form.model_dump())
        return JSONResponse(transaction.as_dict(), status_code=201)

    @app.put("/api/transactions/{transaction_id}")
    async def api_update_transaction(transaction_id: str, form: TransactionForm) -> JSONResponse:
        result = ledger.update_transaction({"transaction_id": transaction_id, **form.model_dump()})
        if not result.found:
            raise HTTPException(status_code=404, detail=f"Transaction {transaction_id} not found")
        updated: Transaction = result.record
        return JSONResponse(updated.as_dict())

    @app.delete("/api/transactions/{transaction_id}")
    async def api_delete_transaction(transaction_id: str) -> JSONResponse:
        result = ledger.delete_transaction(transaction_id)
        if not result.found:
            raise HTTPException(status_code=404, detail=f"Transaction {transaction_id} not found")
        return JSONResponse({"deleted": transaction_id})

    @app.get("/api/goals")
    async def api_list_goals() -> JSONResponse:
        return JSONResponse({"goals": [_goal_payload(goal) for goal in ledger.list_goals()]})

    @app.post("/api/goals", status_code=201)
    async def api_create_goal(form: GoalForm) -> JSONResponse:
        goal = ledger.add_goal(form.model_dump())
        return JSONResponse(_goal_payload(goal), status_code=201)

    @app.put("/api/goals/{goal_id}")
    async def api_update_goal(goal_id: str, form: GoalUpdateForm) -> JSONResponse:
        result = ledger.update_goal({"goal_id": goal_id, **form.model_dump(exclude_none=True)})
        if not result.found:
            raise HTTPException(status_code=404, detail=f"Goal {goal_id} not found")
        return JSONResponse(_goal_payload(result.record))

    @app.delete("/api/goals/{goal_id}")
    async def api_delete_goal(goal_id: str) -> JSONResponse:
        result = ledger.delete_goal(goal_id)
        if not result.found:
            raise HTTPException(status_code=404, detail=f"Goal {goal_id} not found")
        return JSONResponse({"deleted": goal_id})

    @app.get("/api/summary")
    async def api_summary() -> JSONResponse:
        return JSONResponse(ledger.summary().as_dict())

    @app.get("/api/expenses-by-category")
    async def api_expenses_by_category() -> JSONResponse:
        return JSONResponse({"categories": [entry.as_dict() for entry in ledger.expense_by_category()]})

    @app.get("/api/categories")
    async def api_categories() -> JSONResponse:
        return JSONResponse(
            {kind.value: list(choices) for kind, choices in CATEGORY_CHOICES.items()}
        )

    return app
