"""Pydantic v2 request/response schemas for the sales and expense ledgers."""

import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from frontdesk.models.payment import PaymentMethod

# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class SaleCreate(BaseModel):
    """Schema for a manually entered sale."""

    date: datetime.date
    bill_number: str = Field(..., min_length=1, max_length=32)
    guest_name: str = Field(..., min_length=1, max_length=255)
    customer_name: str = Field("Self", max_length=255)
    room_number: int
    amount: Decimal = Field(..., ge=0)
    payment_method: PaymentMethod = PaymentMethod.CASH
    status: str = Field("Paid", pattern="^(Paid|Pending|Refund Due)$")


class ExpenseCreate(BaseModel):
    """Schema for recording an expense."""

    date: datetime.date
    category: str = Field(..., min_length=1, max_length=100)
    description: str = Field(..., min_length=1, max_length=500)
    amount: Decimal = Field(..., ge=0)
    paid_by: str = Field(..., min_length=1, max_length=255)
    payment_method: PaymentMethod = PaymentMethod.CASH
    reference: str = Field("", max_length=100)


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class SaleResponse(BaseModel):
    id: str
    date: datetime.date
    bill_number: str
    guest_name: str
    customer_name: str
    room_number: int
    amount: Decimal
    payment_method: str
    status: str

    model_config = ConfigDict(from_attributes=True)


class SaleListResponse(BaseModel):
    items: list[SaleResponse]
    total: int
    total_amount: Decimal


class ExpenseResponse(BaseModel):
    id: str
    date: datetime.date
    category: str
    description: str
    amount: Decimal
    paid_by: str
    payment_method: str
    reference: str

    model_config = ConfigDict(from_attributes=True)


class ExpenseListResponse(BaseModel):
    items: list[ExpenseResponse]
    total: int
    total_amount: Decimal
    categories: list[str]


class FinanceSummaryResponse(BaseModel):
    """Sales, expenses, and net revenue for a period."""

    month: int | None = None
    year: int | None = None
    total_sales: Decimal
    total_expenses: Decimal
    net_revenue: Decimal
