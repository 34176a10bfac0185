"""Pydantic v2 request/response schemas for room and guest-stay endpoints."""

from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from frontdesk.models.payment import PaymentMethod, PaymentStatus
from frontdesk.models.room import RoomStatus, RoomType
from frontdesk.schemas.finance import SaleResponse

# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class GuestCreate(BaseModel):
    """Stay terms submitted on check-in or when editing an occupied room.

    ``daily_rent`` defaults to the room's rate and ``gst_rate`` to the
    configured default when omitted.
    """

    name: str = Field(..., min_length=1, max_length=255)
    phone: str = Field(..., min_length=1, max_length=50)
    address: str = Field("", max_length=500)
    check_in_date: date
    check_out_date: date
    number_of_adults: int = Field(1, ge=1)
    number_of_children: int = Field(0, ge=0)
    daily_rent: Decimal | None = Field(None, ge=0)
    advance_paid: Decimal = Field(Decimal("0"), ge=0)
    payment_method: PaymentMethod = PaymentMethod.CASH
    gst_rate: Decimal | None = Field(None, ge=0, le=100)
    tax_included: bool = True
    bill_number: str | None = Field(None, max_length=32)


class RoomStatusUpdate(BaseModel):
    """Schema for overriding a room's status."""

    status: RoomStatus


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class GuestResponse(BaseModel):
    bill_number: str
    name: str
    phone: str
    address: str
    check_in_date: date
    check_out_date: date
    number_of_adults: int
    number_of_children: int
    daily_rent: Decimal
    advance_paid: Decimal
    payment_method: PaymentMethod
    gst_rate: Decimal
    tax_included: bool

    model_config = ConfigDict(from_attributes=True)


class RoomResponse(BaseModel):
    """A room with its current guest, if any."""

    room_number: int
    room_type: RoomType
    rate: Decimal
    status: RoomStatus
    guest: GuestResponse | None = None

    model_config = ConfigDict(from_attributes=True)


class RoomListResponse(BaseModel):
    """Rooms plus a count per status for the dashboard filter bar."""

    items: list[RoomResponse]
    total: int
    counts: dict[str, int]


class BillSummaryResponse(BaseModel):
    duration: int
    base_amount: Decimal
    cgst: Decimal
    sgst: Decimal
    total_tax: Decimal
    total_amount: Decimal
    advance_paid: Decimal
    net_payable: Decimal
    payment_status: PaymentStatus

    model_config = ConfigDict(from_attributes=True)


class CheckoutRecordResponse(BaseModel):
    """An archived stay with its final bill."""

    room_number: int
    guest: GuestResponse
    summary: BillSummaryResponse
    closed_at: datetime
    reason: str

    model_config = ConfigDict(from_attributes=True)


class CheckoutResponse(BaseModel):
    """Result of checking a guest out: the archived stay and the sale it produced."""

    record: CheckoutRecordResponse
    sale: SaleResponse
