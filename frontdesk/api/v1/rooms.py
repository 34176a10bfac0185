"""Rooms API router: dashboard, check-in, check-out, status overrides, bills.

Domain errors raised by the room registry are turned into HTTP responses by
the exception handlers registered in ``frontdesk.main``.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status

from frontdesk.api.deps import FrontDesk, get_current_user, get_front_desk
from frontdesk.billing.engine import BillSummary, compute_bill
from frontdesk.config import settings
from frontdesk.models.guest import Guest
from frontdesk.models.room import Room, RoomStatus
from frontdesk.models.user import User
from frontdesk.schemas.room import (
    BillSummaryResponse,
    CheckoutRecordResponse,
    CheckoutResponse,
    GuestCreate,
    RoomListResponse,
    RoomResponse,
    RoomStatusUpdate,
)
from frontdesk.services.room_registry import CheckoutRecord

router = APIRouter(prefix="/api/v1/rooms", tags=["rooms"])


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _guest_from_body(body: GuestCreate, room: Room) -> Guest:
    """Build a stay record, filling rent and GST defaults from the room and settings."""
    return Guest(
        bill_number=body.bill_number or "",
        name=body.name,
        phone=body.phone,
        address=body.address,
        check_in_date=body.check_in_date,
        check_out_date=body.check_out_date,
        number_of_adults=body.number_of_adults,
        number_of_children=body.number_of_children,
        daily_rent=body.daily_rent if body.daily_rent is not None else room.rate,
        advance_paid=body.advance_paid,
        payment_method=body.payment_method,
        gst_rate=body.gst_rate if body.gst_rate is not None else settings.default_gst_rate,
        tax_included=body.tax_included,
    )


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


@router.get("", response_model=RoomListResponse, summary="List rooms")
async def list_rooms(
    status_filter: RoomStatus | None = Query(None, alias="status", description="Filter by room status"),
    desk: FrontDesk = Depends(get_front_desk),
    current_user: User = Depends(get_current_user),
) -> dict:
    """Return rooms (optionally filtered by status) and a count per status."""
    items = desk.rooms.list_rooms(status_filter)
    return {"items": items, "total": len(items), "counts": desk.rooms.status_counts()}


@router.get("/history", response_model=list[CheckoutRecordResponse], summary="Archived stays")
async def checkout_history(
    desk: FrontDesk = Depends(get_front_desk),
    current_user: User = Depends(get_current_user),
) -> list[CheckoutRecord]:
    """Stays closed by check-out or by a status override, oldest first."""
    return desk.rooms.history


@router.post("/{room_number}/bill-preview", response_model=BillSummaryResponse, summary="Preview a bill")
async def preview_bill(
    room_number: int,
    body: GuestCreate,
    desk: FrontDesk = Depends(get_front_desk),
    current_user: User = Depends(get_current_user),
) -> BillSummary:
    """Compute the bill for proposed stay terms without checking anyone in."""
    room = desk.rooms.get(room_number)
    return compute_bill(_guest_from_body(body, room))


@router.get("/{room_number}", response_model=RoomResponse, summary="Get a room")
async def get_room(
    room_number: int,
    desk: FrontDesk = Depends(get_front_desk),
    current_user: User = Depends(get_current_user),
) -> Room:
    return desk.rooms.get(room_number)


@router.get("/{room_number}/bill", response_model=BillSummaryResponse, summary="Current bill")
async def get_bill(
    room_number: int,
    desk: FrontDesk = Depends(get_front_desk),
    current_user: User = Depends(get_current_user),
) -> BillSummary:
    """Bill for the guest currently in the room. 409 if the room has no guest."""
    return desk.rooms.bill_summary(room_number)


@router.post(
    "/{room_number}/check-in",
    response_model=RoomResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Check a guest in",
)
async def check_in(
    room_number: int,
    body: GuestCreate,
    desk: FrontDesk = Depends(get_front_desk),
    current_user: User = Depends(get_current_user),
) -> Room:
    """Attach a guest to an Available room. 409 if the room is not Available."""
    room = desk.rooms.get(room_number)
    return desk.rooms.check_in(room_number, _guest_from_body(body, room))


@router.post("/{room_number}/check-out", response_model=CheckoutResponse, summary="Check a guest out")
async def check_out(
    room_number: int,
    desk: FrontDesk = Depends(get_front_desk),
    current_user: User = Depends(get_current_user),
) -> dict:
    """Settle the bill, record the sale, and send the room to Cleaning."""
    record, sale = desk.check_out_room(room_number)
    return {"record": record, "sale": sale}


@router.put("/{room_number}/status", response_model=RoomResponse, summary="Override room status")
async def set_status(
    room_number: int,
    body: RoomStatusUpdate,
    desk: FrontDesk = Depends(get_front_desk),
    current_user: User = Depends(get_current_user),
) -> Room:
    """Set any status. A guest attached to the room is archived unless the new status is Occupied."""
    return desk.rooms.set_status(room_number, body.status)


@router.put("/{room_number}/guest", response_model=RoomResponse, summary="Edit the current stay")
async def update_guest(
    room_number: int,
    body: GuestCreate,
    desk: FrontDesk = Depends(get_front_desk),
    current_user: User = Depends(get_current_user),
) -> Room:
    """Replace the stay terms of an Occupied room's guest."""
    room = desk.rooms.get(room_number)
    return desk.rooms.update_guest(room_number, _guest_from_body(body, room))
