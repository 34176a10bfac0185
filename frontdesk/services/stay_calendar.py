"""Date-range helpers for the reservation calendar."""

from collections.abc import Iterable
from datetime import date, datetime, timedelta

from frontdesk.models.reservation import Reservation


def _as_date(value: date) -> date:
    return value.date() if isinstance(value, datetime) else value


def stay_days(check_in: date, check_out: date) -> list[date]:
    """Every calendar day from check-in to check-out, both inclusive."""
    start, end = _as_date(check_in), _as_date(check_out)
    days = []
    day = start
    while day <= end:
        days.append(day)
        day += timedelta(days=1)
    return days


def days_with_reservations(reservations: Iterable[Reservation]) -> list[date]:
    """Sorted, de-duplicated days covered by any of the reservations."""
    booked: set[date] = set()
    for reservation in reservations:
        booked.update(stay_days(reservation.check_in_date, reservation.check_out_date))
    return sorted(booked)


def reservations_on(reservations: Iterable[Reservation], day: date) -> list[Reservation]:
    """Reservations whose stay covers ``day``, arrival and departure days included."""
    return [
        r
        for r in reservations
        if _as_date(r.check_in_date) <= day <= _as_date(r.check_out_date)
    ]
