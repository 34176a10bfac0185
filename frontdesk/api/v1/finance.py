"""Finance API router: sales ledger, expense ledger, and period summary."""

from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends, Query, status

from frontdesk.api.deps import FrontDesk, get_current_user, get_front_desk, require_admin
from frontdesk.models.ledger import Expense, Sale
from frontdesk.models.user import User
from frontdesk.schemas.finance import (
    ExpenseCreate,
    ExpenseListResponse,
    ExpenseResponse,
    FinanceSummaryResponse,
    SaleCreate,
    SaleListResponse,
    SaleResponse,
)
from frontdesk.services.ledger import finance_summary

router = APIRouter(prefix="/api/v1/finance", tags=["finance"])


# ---------------------------------------------------------------------------
# Sales
# ---------------------------------------------------------------------------


@router.get("/sales", response_model=SaleListResponse, summary="List sales")
async def list_sales(
    search: str = Query("", description="Guest, bill number, customer, or room number"),
    on_date: date | None = Query(None, description="Sales on this exact day"),
    month: int | None = Query(None, ge=1, le=12),
    year: int | None = Query(None),
    desk: FrontDesk = Depends(get_front_desk),
    current_user: User = Depends(get_current_user),
) -> dict:
    items = desk.sales.filter(search=search, on_date=on_date, month=month, year=year)
    return {"items": items, "total": len(items), "total_amount": desk.sales.total(items)}


@router.post("/sales", response_model=SaleResponse, status_code=status.HTTP_201_CREATED, summary="Record a sale")
async def record_sale(
    body: SaleCreate,
    desk: FrontDesk = Depends(get_front_desk),
    current_user: User = Depends(get_current_user),
) -> Sale:
    data = body.model_dump()
    data["payment_method"] = body.payment_method.value
    return desk.sales.record(Sale(id=desk.sales.next_id(), **data))


@router.get("/sales/export", response_model=list[dict], summary="Sales rows for export")
async def export_sales(
    month: int | None = Query(None, ge=1, le=12),
    year: int | None = Query(None),
    desk: FrontDesk = Depends(get_front_desk),
    current_user: User = Depends(get_current_user),
) -> list[dict]:
    """Plain rows for a CSV or print sink; formatting is left to the consumer."""
    return desk.sales.rows(desk.sales.filter(month=month, year=year))


# ---------------------------------------------------------------------------
# Expenses
# ---------------------------------------------------------------------------


@router.get("/expenses", response_model=ExpenseListResponse, summary="List expenses")
async def list_expenses(
    search: str = Query("", description="Description, paid-by, or reference"),
    category: str | None = Query(None, description="Category, or 'all'"),
    month: int | None = Query(None, ge=1, le=12),
    year: int | None = Query(None),
    desk: FrontDesk = Depends(get_front_desk),
    current_user: User = Depends(get_current_user),
) -> dict:
    items = desk.expenses.filter(search=search, category=category, month=month, year=year)
    return {
        "items": items,
        "total": len(items),
        "total_amount": desk.expenses.total(items),
        "categories": desk.expenses.categories(),
    }


@router.post(
    "/expenses",
    response_model=ExpenseResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Record an expense",
)
async def record_expense(
    body: ExpenseCreate,
    desk: FrontDesk = Depends(get_front_desk),
    current_user: User = Depends(require_admin),
) -> Expense:
    """Only admins may book expenses."""
    data = body.model_dump()
    data["payment_method"] = body.payment_method.value
    return desk.expenses.record(Expense(id=desk.expenses.next_id(), **data))


@router.get("/expenses/export", response_model=list[dict], summary="Expense rows for export")
async def export_expenses(
    month: int | None = Query(None, ge=1, le=12),
    year: int | None = Query(None),
    desk: FrontDesk = Depends(get_front_desk),
    current_user: User = Depends(get_current_user),
) -> list[dict]:
    return desk.expenses.rows(desk.expenses.filter(month=month, year=year))


# ---------------------------------------------------------------------------
# Summary
# ---------------------------------------------------------------------------


@router.get("/summary", response_model=FinanceSummaryResponse, summary="Sales minus expenses")
async def get_summary(
    month: int | None = Query(None, ge=1, le=12),
    year: int | None = Query(None),
    desk: FrontDesk = Depends(get_front_desk),
    current_user: User = Depends(get_current_user),
) -> FinanceSummaryResponse:
    summary = finance_summary(desk.sales, desk.expenses, month=month, year=year)
    return FinanceSummaryResponse(
        month=month,
        year=year,
        total_sales=summary.total_sales,
        total_expenses=summary.total_expenses,
        net_revenue=summary.net_revenue,
    )
