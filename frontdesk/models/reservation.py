"""Reservation model: an advance booking of one or more rooms."""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from enum import Enum

from frontdesk.models.payment import PaymentMethod, PaymentStatus


class ReservationStatus(str, Enum):
    PENDING = "Pending"
    CONFIRMED = "Confirmed"
    CHECKED_IN = "Checked-in"
    CHECKED_OUT = "Checked-out"
    CANCELLED = "Cancelled"


class BookingSource(str, Enum):
    DIRECT = "Direct"
    WEBSITE = "Website"
    OTA = "OTA"
    PHONE = "Phone"
    WALK_IN = "Walk-in"


# Status changes reachable through the list actions (cancel, check in, check
# out). Terminal states map to an empty set. A full edit may set any status
# on a reservation that is not terminal.
RESERVATION_TRANSITIONS: dict[ReservationStatus, frozenset[ReservationStatus]] = {
    ReservationStatus.PENDING: frozenset(
        {ReservationStatus.CONFIRMED, ReservationStatus.CHECKED_IN, ReservationStatus.CANCELLED}
    ),
    ReservationStatus.CONFIRMED: frozenset(
        {ReservationStatus.PENDING, ReservationStatus.CHECKED_IN, ReservationStatus.CANCELLED}
    ),
    ReservationStatus.CHECKED_IN: frozenset({ReservationStatus.CHECKED_OUT, ReservationStatus.CANCELLED}),
    ReservationStatus.CHECKED_OUT: frozenset(),
    ReservationStatus.CANCELLED: frozenset(),
}


@dataclass
class Reservation:
    """A reservation linking a guest to rooms for specific dates."""

    id: str
    guest_name: str
    guest_phone: str
    room_numbers: list[int]
    room_rates: dict[int, Decimal]  # nightly rate actually charged per room
    check_in_date: date
    check_out_date: date
    total_amount: Decimal
    advance_amount: Decimal
    payment_status: PaymentStatus
    created_at: datetime
    updated_at: datetime
    guest_email: str | None = None
    adults: int = 1
    children: int = 0
    special_requests: str | None = None
    status: ReservationStatus = ReservationStatus.CONFIRMED
    payment_method: PaymentMethod = PaymentMethod.CASH
    source: BookingSource = BookingSource.DIRECT

    @property
    def is_terminal(self) -> bool:
        return not RESERVATION_TRANSITIONS[self.status]

    def __repr__(self) -> str:
        return f"<Reservation(id={self.id!r}, guest={self.guest_name!r}, status={self.status.value!r})>"


@dataclass
class ReservationSpec:
    """Input for creating a reservation.

    ``custom_rates`` overrides the default nightly rate of selected rooms.
    """

    guest_name: str
    guest_phone: str
    room_numbers: list[int]
    check_in_date: date
    check_out_date: date
    guest_email: str | None = None
    adults: int = 1
    children: int = 0
    special_requests: str | None = None
    advance_amount: Decimal = Decimal("0")
    payment_method: PaymentMethod = PaymentMethod.CASH
    source: BookingSource = BookingSource.DIRECT
    custom_rates: dict[int, Decimal] = field(default_factory=dict)
