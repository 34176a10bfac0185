"""Room registry: the fleet of rooms and their check-in/check-out lifecycle.

Room state machine::

    Available --check_in--> Occupied --check_out--> Cleaning
    any --set_status--> any   (guest detached unless the target is Occupied)

Every operation validates before it mutates, so a rejected call leaves the
registry exactly as it was.
"""

import copy
import logging
from collections.abc import Iterable
from dataclasses import dataclass, replace
from datetime import datetime
from decimal import Decimal

from frontdesk.billing.bill_number import generate_bill_number
from frontdesk.billing.engine import BillSummary, compute_bill, count_nights, to_decimal
from frontdesk.config import Settings
from frontdesk.errors import InvalidTransition, NotFoundError, ValidationError
from frontdesk.models.guest import Guest
from frontdesk.models.room import Room, RoomStatus, RoomType
from frontdesk.services.reporting import occupancy_counts

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CheckoutRecord:
    """A guest detached from a room, with the bill as it stood at that moment."""

    room_number: int
    guest: Guest
    summary: BillSummary
    closed_at: datetime
    reason: str  # checkout, status_change


def validate_guest(guest: Guest) -> None:
    """Raise ``ValidationError`` for missing fields or out-of-range terms."""
    if not guest.name or not guest.name.strip():
        raise ValidationError("Guest name is required", field="name")
    if not guest.phone or not guest.phone.strip():
        raise ValidationError("Guest phone is required", field="phone")
    if guest.check_in_date is None:
        raise ValidationError("Check-in date is required", field="check_in_date")
    if guest.check_out_date is None:
        raise ValidationError("Check-out date is required", field="check_out_date")
    if count_nights(guest.check_in_date, guest.check_out_date) < 0:
        raise ValidationError("Check-out cannot be before check-in", field="check_out_date")
    if to_decimal(guest.daily_rent) < 0:
        raise ValidationError("Daily rent cannot be negative", field="daily_rent")
    if to_decimal(guest.advance_paid) < 0:
        raise ValidationError("Advance paid cannot be negative", field="advance_paid")
    if not 0 <= to_decimal(guest.gst_rate) <= 100:
        raise ValidationError("GST rate must be between 0 and 100", field="gst_rate")
    if guest.number_of_adults < 1:
        raise ValidationError("At least one adult is required", field="number_of_adults")
    if guest.number_of_children < 0:
        raise ValidationError("Children cannot be negative", field="number_of_children")


class RoomRegistry:
    """Owns every room exclusively. Hand out snapshots, never live rooms."""

    def __init__(self, rooms: Iterable[Room]) -> None:
        self._rooms: dict[int, Room] = {}
        for room in rooms:
            if room.room_number in self._rooms:
                raise ValueError(f"Duplicate room number {room.room_number}")
            self._rooms[room.room_number] = room
        self._history: list[CheckoutRecord] = []

    @classmethod
    def from_settings(cls, settings: Settings) -> "RoomRegistry":
        """Build the configured inventory with every room Available."""
        rooms = [Room(number, RoomType.PREMIUM, settings.premium_rate) for number in settings.premium_rooms]
        rooms += [Room(number, RoomType.DELUXE, settings.deluxe_rate) for number in settings.deluxe_rooms]
        return cls(sorted(rooms, key=lambda r: r.room_number))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def _room(self, room_number: int) -> Room:
        room = self._rooms.get(room_number)
        if room is None:
            raise NotFoundError(f"Room {room_number} not found")
        return room

    def get(self, room_number: int) -> Room:
        return copy.deepcopy(self._room(room_number))

    def list_rooms(self, status: RoomStatus | None = None) -> list[Room]:
        rooms = [r for r in self._rooms.values() if status is None or r.status == status]
        return copy.deepcopy(rooms)

    def snapshot(self) -> list[Room]:
        """Deep copy of every room, safe to hand to read-only consumers."""
        return self.list_rooms()

    def status_counts(self) -> dict[str, int]:
        return occupancy_counts(self._rooms.values())

    def rates(self) -> dict[int, Decimal]:
        """Default nightly rate per room number."""
        return {number: room.rate for number, room in self._rooms.items()}

    @property
    def history(self) -> list[CheckoutRecord]:
        return list(self._history)

    def bill_summary(self, room_number: int) -> BillSummary:
        """Current bill for the guest in an occupied room."""
        room = self._room(room_number)
        if room.guest is None:
            raise InvalidTransition(
                f"Room {room_number} has no guest to bill",
                current=room.status.value,
                requested="bill",
            )
        return compute_bill(room.guest)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def check_in(self, room_number: int, guest: Guest) -> Room:
        """Attach a guest to an Available room and mark it Occupied."""
        room = self._room(room_number)
        if room.status != RoomStatus.AVAILABLE:
            raise InvalidTransition(
                f"Room {room_number} is {room.status.value}, only Available rooms can be checked into",
                current=room.status.value,
                requested=RoomStatus.OCCUPIED.value,
            )
        validate_guest(guest)

        if not guest.bill_number:
            guest = replace(guest, bill_number=generate_bill_number())

        room.guest = copy.deepcopy(guest)
        room.status = RoomStatus.OCCUPIED
        logger.info("Checked in %s to room %s (bill %s)", guest.name, room_number, guest.bill_number)
        return copy.deepcopy(room)

    def check_out(self, room_number: int) -> CheckoutRecord:
        """Close the stay: final bill, archive the guest, send the room to Cleaning."""
        room = self._room(room_number)
        if room.status != RoomStatus.OCCUPIED or room.guest is None:
            raise InvalidTransition(
                f"Room {room_number} is {room.status.value}, only Occupied rooms can be checked out",
                current=room.status.value,
                requested=RoomStatus.CLEANING.value,
            )

        record = self._archive(room, room.guest, reason="checkout")
        room.status = RoomStatus.CLEANING
        logger.info(
            "Checked out room %s (bill %s, total %s)",
            room_number,
            record.guest.bill_number,
            record.summary.total_amount,
        )
        return record

    def set_status(self, room_number: int, new_status: RoomStatus) -> Room:
        """Overwrite the status. Leaving Occupied archives and detaches the guest."""
        room = self._room(room_number)
        try:
            new_status = RoomStatus(new_status)
        except ValueError:
            raise ValidationError(f"Unknown room status {new_status!r}", field="status") from None
        if new_status != RoomStatus.OCCUPIED and room.guest is not None:
            self._archive(room, room.guest, reason="status_change")
            logger.warning(
                "Room %s moved from %s to %s with a guest attached; stay archived",
                room_number,
                room.status.value,
                new_status.value,
            )
        old_status = room.status
        room.status = new_status
        logger.info("Room %s status %s -> %s", room_number, old_status.value, new_status.value)
        return copy.deepcopy(room)

    def update_guest(self, room_number: int, guest: Guest) -> Room:
        """Replace the stay terms of the guest in an Occupied room."""
        room = self._room(room_number)
        if room.status != RoomStatus.OCCUPIED:
            raise InvalidTransition(
                f"Room {room_number} is {room.status.value}, guest details can only change while Occupied",
                current=room.status.value,
                requested="update_guest",
            )
        validate_guest(guest)
        if not guest.bill_number and room.guest is not None:
            guest = replace(guest, bill_number=room.guest.bill_number)

        room.guest = copy.deepcopy(guest)
        logger.info("Updated guest details for room %s", room_number)
        return copy.deepcopy(room)

    def _archive(self, room: Room, guest: Guest, reason: str) -> CheckoutRecord:
        record = CheckoutRecord(
            room_number=room.room_number,
            guest=guest,
            summary=compute_bill(guest),
            closed_at=datetime.now(),
            reason=reason,
        )
        self._history.append(record)
        room.guest = None
        return record
