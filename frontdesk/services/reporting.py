"""Reporting aggregator: monthly revenue and occupancy derived from room snapshots.

Read-only. Every figure is recomputed from the billing engine over the rooms
passed in; nothing here mutates or caches.
"""

import calendar
from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal

from frontdesk.billing.engine import BillSummary, compute_bill, to_cents
from frontdesk.errors import ValidationError
from frontdesk.models.room import Room, RoomStatus, RoomType

ZERO = Decimal("0.00")


@dataclass(frozen=True)
class DailyRevenue:
    day: int
    revenue: Decimal
    bookings: int


@dataclass(frozen=True)
class RoomTypeOccupancy:
    room_type: RoomType
    count: int
    occupied: int


@dataclass(frozen=True)
class MonthlyReport:
    """Revenue and tax totals for stays checked in during one calendar month."""

    month: int
    year: int
    total_revenue: Decimal
    total_tax: Decimal
    total_cgst: Decimal
    total_sgst: Decimal
    total_bookings: int
    average_sale_per_booking: Decimal
    daily: list[DailyRevenue]
    room_types: list[RoomTypeOccupancy]


def _bookings_in_month(rooms: Iterable[Room], month: int, year: int) -> list[tuple[Room, BillSummary]]:
    """Rooms holding a guest who checked in during the month, with their bills."""
    bookings = []
    for room in rooms:
        if room.guest is None:
            continue
        check_in = room.guest.check_in_date
        if check_in.month == month and check_in.year == year:
            bookings.append((room, compute_bill(room.guest)))
    return bookings


def compute_monthly_report(rooms: Iterable[Room], month: int, year: int) -> MonthlyReport:
    """Aggregate revenue, GST, and daily buckets for ``month``/``year``.

    Every calendar day of the month gets a bucket, zero-filled when nothing
    was checked in. The average is zero, not undefined, for an empty month.
    """
    if not 1 <= month <= 12:
        raise ValidationError(f"Month must be between 1 and 12, got {month}", field="month")

    rooms = list(rooms)
    bookings = _bookings_in_month(rooms, month, year)

    total_revenue = sum((bill.total_amount for _, bill in bookings), ZERO)
    total_tax = sum((bill.total_tax for _, bill in bookings), ZERO)
    total_cgst = sum((bill.cgst for _, bill in bookings), ZERO)
    total_sgst = sum((bill.sgst for _, bill in bookings), ZERO)
    total_bookings = len(bookings)

    if total_bookings > 0:
        average = to_cents(total_revenue / total_bookings)
    else:
        average = ZERO

    days_in_month = calendar.monthrange(year, month)[1]
    revenue_by_day: dict[int, Decimal] = {day: ZERO for day in range(1, days_in_month + 1)}
    count_by_day: dict[int, int] = {day: 0 for day in range(1, days_in_month + 1)}
    for room, bill in bookings:
        day = room.guest.check_in_date.day
        revenue_by_day[day] += bill.total_amount
        count_by_day[day] += 1

    daily = [DailyRevenue(day=d, revenue=revenue_by_day[d], bookings=count_by_day[d]) for d in revenue_by_day]

    room_types = [
        RoomTypeOccupancy(
            room_type=room_type,
            count=sum(1 for r in rooms if r.room_type == room_type),
            occupied=sum(1 for r in rooms if r.room_type == room_type and r.status == RoomStatus.OCCUPIED),
        )
        for room_type in RoomType
    ]

    return MonthlyReport(
        month=month,
        year=year,
        total_revenue=total_revenue,
        total_tax=total_tax,
        total_cgst=total_cgst,
        total_sgst=total_sgst,
        total_bookings=total_bookings,
        average_sale_per_booking=average,
        daily=daily,
        room_types=room_types,
    )


def occupancy_counts(rooms: Iterable[Room]) -> dict[str, int]:
    """Room count per status, plus ``all``."""
    rooms = list(rooms)
    counts = {"all": len(rooms)}
    for status in RoomStatus:
        counts[status.value] = sum(1 for r in rooms if r.status == status)
    return counts
