"""Domain models for FrontDesk.

Plain in-memory records; the registries in ``frontdesk.services`` own them.
"""

from frontdesk.models.guest import Guest
from frontdesk.models.ledger import Expense, Sale
from frontdesk.models.payment import PaymentMethod, PaymentStatus
from frontdesk.models.reservation import (
    BookingSource,
    Reservation,
    ReservationSpec,
    ReservationStatus,
)
from frontdesk.models.room import Room, RoomStatus, RoomType
from frontdesk.models.user import User

__all__ = [
    "BookingSource",
    "Expense",
    "Guest",
    "PaymentMethod",
    "PaymentStatus",
    "Reservation",
    "ReservationSpec",
    "ReservationStatus",
    "Room",
    "RoomStatus",
    "RoomType",
    "Sale",
    "User",
]
