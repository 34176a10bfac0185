"""Guest stay record: the terms a walk-in guest checks into a room under."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from frontdesk.models.payment import PaymentMethod


@dataclass
class Guest:
    """A guest currently (or formerly) occupying a room.

    ``check_in_date`` and ``check_out_date`` may be plain dates or datetimes;
    the billing engine handles both.
    """

    name: str
    phone: str
    check_in_date: date
    check_out_date: date
    daily_rent: Decimal
    bill_number: str = ""
    address: str = ""
    number_of_adults: int = 1
    number_of_children: int = 0
    advance_paid: Decimal = Decimal("0")
    payment_method: PaymentMethod = PaymentMethod.CASH
    gst_rate: Decimal = Decimal("12")
    tax_included: bool = True

    def __repr__(self) -> str:
        return f"<Guest(bill_number={self.bill_number!r}, name={self.name!r})>"
