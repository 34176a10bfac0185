"""Room model: a physical room, its housekeeping status, and current guest."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from frontdesk.models.guest import Guest


class RoomType(str, Enum):
    PREMIUM = "Premium"
    DELUXE = "Deluxe"


class RoomStatus(str, Enum):
    AVAILABLE = "Available"
    OCCUPIED = "Occupied"
    MAINTENANCE = "Maintenance"
    CLEANING = "Cleaning"


@dataclass
class Room:
    """A room in the property. Holds at most one guest at a time."""

    room_number: int
    room_type: RoomType
    rate: Decimal  # default nightly rate for the room type
    status: RoomStatus = RoomStatus.AVAILABLE
    guest: Guest | None = None

    def __repr__(self) -> str:
        return f"<Room(room_number={self.room_number}, type={self.room_type.value!r}, status={self.status.value!r})>"
