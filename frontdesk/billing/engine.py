"""Billing engine: derives a tax-inclusive invoice from a guest's stay terms.

Everything here is pure. No function validates its input; callers (the
registries) reject bad rent, rates, or dates before a stay reaches the
engine. Outputs over the documented domain are always well defined:

* the stay duration is floored at one night,
* GST is split evenly into CGST and SGST,
* net payable may be negative when the guest has overpaid.
"""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal

from frontdesk.models.guest import Guest
from frontdesk.models.payment import PaymentStatus

CENT = Decimal("0.01")
ZERO = Decimal("0")


@dataclass(frozen=True)
class BillSummary:
    """Invoice figures for one stay. Recomputed on every request, never stored."""

    duration: int
    base_amount: Decimal
    cgst: Decimal
    sgst: Decimal
    total_tax: Decimal
    total_amount: Decimal
    advance_paid: Decimal
    net_payable: Decimal
    payment_status: PaymentStatus


def to_decimal(value: Decimal | int | float | str) -> Decimal:
    """Convert a number to Decimal without inheriting binary float noise."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def to_cents(value: Decimal) -> Decimal:
    """Round half-up at the cent boundary."""
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def _as_date(value: date) -> date:
    return value.date() if isinstance(value, datetime) else value


def stay_duration(check_in: date, check_out: date) -> int:
    """Billable days between check-in and check-out, never less than one.

    Two datetimes are compared by elapsed time and any part-day rounds up.
    Plain dates (or a mix) are compared as whole calendar days.
    """
    if isinstance(check_in, datetime) and isinstance(check_out, datetime):
        delta = check_out - check_in
        days = delta.days + (1 if delta.seconds or delta.microseconds else 0)
    else:
        days = (_as_date(check_out) - _as_date(check_in)).days
    return max(1, days)


def count_nights(check_in: date, check_out: date) -> int:
    """Nights between two dates by calendar-day subtraction.

    Times of day are dropped first, so a daylight-saving shift between the
    two instants cannot change the count. Not floored.
    """
    return (_as_date(check_out) - _as_date(check_in)).days


def derive_payment_status(advance_amount: Decimal, total_amount: Decimal) -> PaymentStatus:
    """Classify an advance against the amount due.

    Shared by guest bills and reservations so both agree at the boundary
    ``advance_amount == total_amount`` (Paid).
    """
    advance = to_decimal(advance_amount)
    total = to_decimal(total_amount)
    if advance <= ZERO:
        return PaymentStatus.PENDING
    if advance < total:
        return PaymentStatus.PARTIALLY_PAID
    return PaymentStatus.PAID


def compute_bill(stay: Guest) -> BillSummary:
    """Compute the bill for a stay.

    With ``tax_included`` the daily rent already contains GST and the base
    is back-calculated; otherwise GST is added on top of the rent.
    """
    duration = stay_duration(stay.check_in_date, stay.check_out_date)
    rent = to_decimal(stay.daily_rent)
    rate = to_decimal(stay.gst_rate) / 100
    advance = to_decimal(stay.advance_paid)

    if stay.tax_included:
        total = rent * duration
        base = total / (1 + rate)
        tax = total - base
    else:
        base = rent * duration
        tax = base * rate
        total = base + tax

    half_tax = tax / 2
    total_amount = to_cents(total)

    return BillSummary(
        duration=duration,
        base_amount=to_cents(base),
        cgst=to_cents(half_tax),
        sgst=to_cents(half_tax),
        total_tax=to_cents(tax),
        total_amount=total_amount,
        advance_paid=advance,
        net_payable=to_cents(total - advance),
        payment_status=derive_payment_status(advance, total_amount),
    )
