"""Payment enumerations shared by guest stays and reservations."""

from enum import Enum


class PaymentMethod(str, Enum):
    CASH = "Cash"
    CARD = "Card"
    UPI = "UPI"
    BANK_TRANSFER = "Bank Transfer"


class PaymentStatus(str, Enum):
    """Derived from the advance collected against the amount due."""

    PENDING = "Pending"
    PARTIALLY_PAID = "Partially Paid"
    PAID = "Paid"
