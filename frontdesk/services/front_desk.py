"""FrontDesk: the single owner of every registry, ledger, and the session provider."""

import logging
from dataclasses import dataclass
from datetime import date

from fastapi import Request

from frontdesk.auth.session import SessionProvider
from frontdesk.config import Settings
from frontdesk.models.ledger import REFUND_DUE, Sale
from frontdesk.models.payment import PaymentStatus
from frontdesk.services.ledger import ExpenseLedger, SalesLedger
from frontdesk.services.reservation_registry import ReservationRegistry
from frontdesk.services.room_registry import CheckoutRecord, RoomRegistry

logger = logging.getLogger(__name__)


@dataclass
class FrontDesk:
    rooms: RoomRegistry
    reservations: ReservationRegistry
    sales: SalesLedger
    expenses: ExpenseLedger
    sessions: SessionProvider

    @classmethod
    def from_settings(cls, settings: Settings) -> "FrontDesk":
        rooms = RoomRegistry.from_settings(settings)
        return cls(
            rooms=rooms,
            reservations=ReservationRegistry(rooms.rates(), id_prefix=settings.reservation_id_prefix),
            sales=SalesLedger(),
            expenses=ExpenseLedger(),
            sessions=SessionProvider.from_settings(settings),
        )

    def check_out_room(self, room_number: int) -> tuple[CheckoutRecord, Sale]:
        """Check a guest out and book the settled bill into the sales ledger.

        The sale is Paid once the balance is collected. An overpaid advance
        (negative net payable) books it as Refund Due instead.
        """
        record = self.rooms.check_out(room_number)
        if record.summary.net_payable < 0:
            sale_status = REFUND_DUE
            logger.info("Bill %s overpaid by %s", record.guest.bill_number, -record.summary.net_payable)
        else:
            sale_status = PaymentStatus.PAID.value
        sale = self.sales.record(
            Sale(
                id=self.sales.next_id(),
                date=date.today(),
                bill_number=record.guest.bill_number,
                guest_name=record.guest.name,
                room_number=record.room_number,
                amount=record.summary.total_amount,
                payment_method=record.guest.payment_method.value,
                status=sale_status,
            )
        )
        return record, sale


def get_front_desk(request: Request) -> FrontDesk:
    """FastAPI dependency returning the application's FrontDesk.

    Usage::

        @router.get("/rooms")
        async def list_rooms(desk: FrontDesk = Depends(get_front_desk)):
            ...
    """
    return request.app.state.front_desk
