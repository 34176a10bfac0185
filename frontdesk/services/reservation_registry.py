"""Reservation registry: advance bookings and their status lifecycle.

Reservations are independent of room occupancy. Cancelling or checking out
a reservation never touches the room registry; the front desk does that
explicitly through the room endpoints.
"""

import copy
import logging
from collections.abc import Callable, Mapping
from dataclasses import replace
from datetime import date, datetime
from decimal import Decimal
from typing import Any

from frontdesk.billing.engine import count_nights, derive_payment_status, to_cents, to_decimal
from frontdesk.errors import InvalidTransition, NotFoundError, ValidationError
from frontdesk.models.payment import PaymentStatus
from frontdesk.models.reservation import (
    RESERVATION_TRANSITIONS,
    Reservation,
    ReservationSpec,
    ReservationStatus,
)

logger = logging.getLogger(__name__)

# Fields that ``update`` accepts. Derived fields (totals, payment status,
# timestamps) are always recomputed and cannot be set directly.
EDITABLE_FIELDS = frozenset(
    {
        "guest_name",
        "guest_email",
        "guest_phone",
        "room_numbers",
        "check_in_date",
        "check_out_date",
        "adults",
        "children",
        "special_requests",
        "status",
        "advance_amount",
        "payment_method",
        "source",
        "custom_rates",
    }
)
NULLABLE_FIELDS = frozenset({"guest_email", "special_requests", "custom_rates"})


class ReservationRegistry:
    """Owns every reservation exclusively.

    ``default_rates`` maps room number to the nightly rate used when a
    reservation does not override it.
    """

    def __init__(
        self,
        default_rates: Mapping[int, Decimal],
        id_prefix: str = "RES",
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._default_rates = dict(default_rates)
        self._id_prefix = id_prefix
        self._clock = clock
        self._reservations: dict[str, Reservation] = {}
        self._sequence = 0

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _next_id(self) -> str:
        self._sequence += 1
        return f"{self._id_prefix}{self._sequence:03d}"

    def _reservation(self, reservation_id: str) -> Reservation:
        reservation = self._reservations.get(reservation_id)
        if reservation is None:
            raise NotFoundError(f"Reservation {reservation_id} not found")
        return reservation

    def _resolve_rates(
        self,
        room_numbers: list[int],
        custom_rates: Mapping[int, Decimal],
    ) -> dict[int, Decimal]:
        """Nightly rate per selected room: custom override, else the room's default."""
        if not room_numbers:
            raise ValidationError("Please select at least one room", field="room_numbers")
        if len(set(room_numbers)) != len(room_numbers):
            raise ValidationError("A room can only be selected once", field="room_numbers")

        rates: dict[int, Decimal] = {}
        for number in room_numbers:
            if number in custom_rates:
                rate = to_decimal(custom_rates[number])
                if rate < 0:
                    raise ValidationError(f"Rate for room {number} cannot be negative", field="custom_rates")
            elif number in self._default_rates:
                rate = self._default_rates[number]
            else:
                raise ValidationError(f"Room {number} does not exist", field="room_numbers")
            rates[number] = rate
        return rates

    @staticmethod
    def _validate_terms(fields: Mapping[str, Any]) -> int:
        """Check guest and date fields, returning the number of nights.

        The night count is returned as-is: a same-day booking has zero nights
        and reversed dates a negative count. Neither is an error.
        """
        if not (fields.get("guest_name") or "").strip():
            raise ValidationError("Guest name is required", field="guest_name")
        if not (fields.get("guest_phone") or "").strip():
            raise ValidationError("Guest phone is required", field="guest_phone")
        check_in: date | None = fields.get("check_in_date")
        check_out: date | None = fields.get("check_out_date")
        if check_in is None:
            raise ValidationError("Check-in date is required", field="check_in_date")
        if check_out is None:
            raise ValidationError("Check-out date is required", field="check_out_date")
        nights = count_nights(check_in, check_out)
        if nights < 1:
            logger.warning("Reservation for %s spans %s nights", fields.get("guest_name"), nights)
        if fields.get("adults", 1) < 1:
            raise ValidationError("At least one adult is required", field="adults")
        if fields.get("children", 0) < 0:
            raise ValidationError("Children cannot be negative", field="children")
        if to_decimal(fields.get("advance_amount", 0)) < 0:
            raise ValidationError("Advance amount cannot be negative", field="advance_amount")
        return nights

    @staticmethod
    def _total(rates: Mapping[int, Decimal], nights: int) -> Decimal:
        return to_cents(sum(rates.values(), Decimal("0")) * nights)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get(self, reservation_id: str) -> Reservation:
        return copy.deepcopy(self._reservation(reservation_id))

    def list_reservations(self, status: ReservationStatus | None = None) -> list[Reservation]:
        items = [r for r in self._reservations.values() if status is None or r.status == status]
        return copy.deepcopy(items)

    def needs_attention(self, today: date | None = None) -> list[Reservation]:
        """Open reservations with money outstanding, or Confirmed arrivals due today."""
        today = today or self._clock().date()
        items = []
        for r in self._reservations.values():
            if r.status == ReservationStatus.CANCELLED:
                continue
            arriving = r.status == ReservationStatus.CONFIRMED and count_nights(r.check_in_date, today) == 0
            if r.payment_status != PaymentStatus.PAID or arriving:
                items.append(r)
        return copy.deepcopy(items)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def create(self, spec: ReservationSpec) -> Reservation:
        """Validate and store a new Confirmed reservation."""
        fields = vars(spec)
        nights = self._validate_terms(fields)
        rates = self._resolve_rates(list(spec.room_numbers), spec.custom_rates)

        total = self._total(rates, nights)
        advance = to_decimal(spec.advance_amount)
        now = self._clock()
        reservation = Reservation(
            id=self._next_id(),
            guest_name=spec.guest_name,
            guest_email=spec.guest_email,
            guest_phone=spec.guest_phone,
            room_numbers=list(spec.room_numbers),
            room_rates=rates,
            check_in_date=spec.check_in_date,
            check_out_date=spec.check_out_date,
            adults=spec.adults,
            children=spec.children,
            special_requests=spec.special_requests,
            status=ReservationStatus.CONFIRMED,
            created_at=now,
            updated_at=now,
            total_amount=total,
            advance_amount=advance,
            payment_status=derive_payment_status(advance, total),
            payment_method=spec.payment_method,
            source=spec.source,
        )
        self._reservations[reservation.id] = reservation
        logger.info(
            "Created reservation %s for %s: rooms=%s nights=%s total=%s",
            reservation.id,
            reservation.guest_name,
            reservation.room_numbers,
            nights,
            total,
        )
        return copy.deepcopy(reservation)

    def update(self, reservation_id: str, changes: Mapping[str, Any]) -> Reservation:
        """Apply a partial edit and recompute the total and payment status."""
        current = self._reservation(reservation_id)
        if current.is_terminal:
            raise InvalidTransition(
                f"Reservation {reservation_id} is {current.status.value} and can no longer be edited",
                current=current.status.value,
                requested="update",
            )

        unknown = set(changes) - EDITABLE_FIELDS
        if unknown:
            raise ValidationError(f"Fields cannot be edited: {', '.join(sorted(unknown))}")
        for name, value in changes.items():
            if value is None and name not in NULLABLE_FIELDS:
                raise ValidationError(f"{name} cannot be empty", field=name)

        # Any status may be chosen on the edit form while the reservation is open.
        try:
            new_status = ReservationStatus(changes.get("status", current.status))
        except ValueError:
            raise ValidationError(f"Unknown reservation status {changes['status']!r}", field="status") from None

        merged = {**vars(current), **changes, "status": new_status}
        nights = self._validate_terms(merged)

        room_numbers = list(merged["room_numbers"])
        # Rooms that stay selected keep their agreed rate unless overridden.
        kept_rates = {n: r for n, r in current.room_rates.items() if n in room_numbers}
        rates = self._resolve_rates(room_numbers, {**kept_rates, **(changes.get("custom_rates") or {})})

        total = self._total(rates, nights)
        advance = to_decimal(merged["advance_amount"])
        fields = {k: v for k, v in merged.items() if k in EDITABLE_FIELDS and k != "custom_rates"}
        fields.update(
            room_numbers=room_numbers,
            room_rates=rates,
            total_amount=total,
            advance_amount=advance,
            payment_status=derive_payment_status(advance, total),
            updated_at=self._clock(),
        )
        updated = replace(current, **fields)
        self._reservations[reservation_id] = updated
        logger.info("Updated reservation %s: total=%s status=%s", reservation_id, total, new_status.value)
        return copy.deepcopy(updated)

    def _move(self, reservation_id: str, target: ReservationStatus) -> Reservation:
        reservation = self._reservation(reservation_id)
        if target not in RESERVATION_TRANSITIONS[reservation.status]:
            raise InvalidTransition(
                f"Reservation {reservation_id} cannot move from {reservation.status.value} to {target.value}",
                current=reservation.status.value,
                requested=target.value,
            )
        reservation.status = target
        reservation.updated_at = self._clock()
        logger.info("Reservation %s -> %s", reservation_id, target.value)
        return copy.deepcopy(reservation)

    def cancel(self, reservation_id: str) -> Reservation:
        """Cancel a reservation. Room occupancy is left untouched."""
        return self._move(reservation_id, ReservationStatus.CANCELLED)

    def check_in(self, reservation_id: str) -> Reservation:
        return self._move(reservation_id, ReservationStatus.CHECKED_IN)

    def check_out(self, reservation_id: str) -> Reservation:
        return self._move(reservation_id, ReservationStatus.CHECKED_OUT)
