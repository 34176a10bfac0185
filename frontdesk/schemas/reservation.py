"""Pydantic v2 request/response schemas for reservation endpoints."""

from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from frontdesk.models.payment import PaymentMethod, PaymentStatus
from frontdesk.models.reservation import BookingSource, ReservationStatus

# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class ReservationCreate(BaseModel):
    """Schema for creating a reservation.

    Room selection and date ordering are checked by the registry so that
    the client receives the same field-level message the desk UI shows.
    """

    guest_name: str = Field(..., max_length=255)
    guest_email: EmailStr | None = None
    guest_phone: str = Field(..., max_length=50)
    room_numbers: list[int]
    custom_rates: dict[int, Decimal] = Field(default_factory=dict)
    check_in_date: date
    check_out_date: date
    adults: int = Field(1, ge=1)
    children: int = Field(0, ge=0)
    special_requests: str | None = None
    advance_amount: Decimal = Field(Decimal("0"), ge=0)
    payment_method: PaymentMethod = PaymentMethod.CASH
    source: BookingSource = BookingSource.DIRECT


class ReservationUpdate(BaseModel):
    """Schema for partially updating a reservation. All fields optional."""

    guest_name: str | None = Field(None, max_length=255)
    guest_email: EmailStr | None = None
    guest_phone: str | None = Field(None, max_length=50)
    room_numbers: list[int] | None = None
    custom_rates: dict[int, Decimal] | None = None
    check_in_date: date | None = None
    check_out_date: date | None = None
    adults: int | None = Field(None, ge=1)
    children: int | None = Field(None, ge=0)
    special_requests: str | None = None
    status: ReservationStatus | None = None
    advance_amount: Decimal | None = Field(None, ge=0)
    payment_method: PaymentMethod | None = None
    source: BookingSource | None = None


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class ReservationResponse(BaseModel):
    """Standard reservation response."""

    id: str
    guest_name: str
    guest_email: str | None = None
    guest_phone: str
    room_numbers: list[int]
    room_rates: dict[int, Decimal]
    check_in_date: date
    check_out_date: date
    adults: int
    children: int
    special_requests: str | None = None
    status: ReservationStatus
    created_at: datetime
    updated_at: datetime
    total_amount: Decimal
    advance_amount: Decimal
    payment_status: PaymentStatus
    payment_method: PaymentMethod
    source: BookingSource

    model_config = ConfigDict(from_attributes=True)


class ReservationListResponse(BaseModel):
    """List of reservations."""

    items: list[ReservationResponse]
    total: int


class CalendarResponse(BaseModel):
    """Days to highlight on the calendar, plus the stays covering the selected day."""

    booked_days: list[date]
    check_in_days: list[date]
    check_out_days: list[date]
    selected_day: date
    reservations: list[ReservationResponse]
