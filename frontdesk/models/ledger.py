"""Sales and expense ledger entries."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

# Sale status for a stay whose advance exceeded the final bill.
REFUND_DUE = "Refund Due"


@dataclass(frozen=True)
class Sale:
    """Revenue recorded against a guest bill."""

    id: str
    date: date
    bill_number: str
    guest_name: str
    room_number: int
    amount: Decimal
    payment_method: str
    status: str  # Paid, Pending, Refund Due
    customer_name: str = "Self"


@dataclass(frozen=True)
class Expense:
    """Money paid out by the property."""

    id: str
    date: date
    category: str
    description: str
    amount: Decimal
    paid_by: str
    payment_method: str
    reference: str = ""
