"""Reservations API router.

Reservations are tracked separately from room occupancy: cancelling or
checking out a reservation does not change any room's status.
"""

from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends, Query, status

from frontdesk.api.deps import FrontDesk, get_current_user, get_front_desk
from frontdesk.models.reservation import Reservation, ReservationSpec, ReservationStatus
from frontdesk.models.user import User
from frontdesk.schemas.reservation import (
    CalendarResponse,
    ReservationCreate,
    ReservationListResponse,
    ReservationResponse,
    ReservationUpdate,
)
from frontdesk.services.stay_calendar import days_with_reservations, reservations_on

router = APIRouter(prefix="/api/v1/reservations", tags=["reservations"])


@router.post(
    "",
    response_model=ReservationResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a reservation",
)
async def create_reservation(
    body: ReservationCreate,
    desk: FrontDesk = Depends(get_front_desk),
    current_user: User = Depends(get_current_user),
) -> Reservation:
    """Create a Confirmed reservation.

    The total is the sum of the selected rooms' nightly rates (custom or
    default) times the number of nights. Payment status follows from the
    advance against that total.
    """
    spec = ReservationSpec(**body.model_dump())
    return desk.reservations.create(spec)


@router.get("", response_model=ReservationListResponse, summary="List reservations")
async def list_reservations(
    status_filter: ReservationStatus | None = Query(None, alias="status", description="Filter by status"),
    desk: FrontDesk = Depends(get_front_desk),
    current_user: User = Depends(get_current_user),
) -> dict:
    items = desk.reservations.list_reservations(status_filter)
    items.sort(key=lambda r: r.created_at, reverse=True)
    return {"items": items, "total": len(items)}


@router.get(
    "/attention",
    response_model=ReservationListResponse,
    summary="Reservations needing attention",
)
async def needs_attention(
    today: date | None = Query(None, description="Reference day, defaults to today"),
    desk: FrontDesk = Depends(get_front_desk),
    current_user: User = Depends(get_current_user),
) -> dict:
    """Reservations with payment outstanding or a Confirmed arrival today."""
    items = desk.reservations.needs_attention(today)
    return {"items": items, "total": len(items)}


@router.get("/calendar", response_model=CalendarResponse, summary="Calendar view")
async def calendar_view(
    day: date | None = Query(None, description="Selected day, defaults to today"),
    include_cancelled: bool = Query(False, description="Show cancelled reservations"),
    desk: FrontDesk = Depends(get_front_desk),
    current_user: User = Depends(get_current_user),
) -> dict:
    """Days covered by reservations and the reservations active on ``day``."""
    selected = day or date.today()
    reservations = [
        r
        for r in desk.reservations.list_reservations()
        if include_cancelled or r.status != ReservationStatus.CANCELLED
    ]
    return {
        "booked_days": days_with_reservations(reservations),
        "check_in_days": sorted({r.check_in_date for r in reservations}),
        "check_out_days": sorted({r.check_out_date for r in reservations}),
        "selected_day": selected,
        "reservations": reservations_on(reservations, selected),
    }


@router.get("/{reservation_id}", response_model=ReservationResponse, summary="Get a reservation")
async def get_reservation(
    reservation_id: str,
    desk: FrontDesk = Depends(get_front_desk),
    current_user: User = Depends(get_current_user),
) -> Reservation:
    return desk.reservations.get(reservation_id)


@router.put("/{reservation_id}", response_model=ReservationResponse, summary="Update a reservation")
async def update_reservation(
    reservation_id: str,
    body: ReservationUpdate,
    desk: FrontDesk = Depends(get_front_desk),
    current_user: User = Depends(get_current_user),
) -> Reservation:
    """Partially update a reservation; the total and payment status are recomputed."""
    return desk.reservations.update(reservation_id, body.model_dump(exclude_unset=True))


@router.post("/{reservation_id}/cancel", response_model=ReservationResponse, summary="Cancel a reservation")
async def cancel_reservation(
    reservation_id: str,
    desk: FrontDesk = Depends(get_front_desk),
    current_user: User = Depends(get_current_user),
) -> Reservation:
    return desk.reservations.cancel(reservation_id)


@router.post("/{reservation_id}/check-in", response_model=ReservationResponse, summary="Mark arrived")
async def check_in_reservation(
    reservation_id: str,
    desk: FrontDesk = Depends(get_front_desk),
    current_user: User = Depends(get_current_user),
) -> Reservation:
    return desk.reservations.check_in(reservation_id)


@router.post("/{reservation_id}/check-out", response_model=ReservationResponse, summary="Mark departed")
async def check_out_reservation(
    reservation_id: str,
    desk: FrontDesk = Depends(get_front_desk),
    current_user: User = Depends(get_current_user),
) -> Reservation:
    return desk.reservations.check_out(reservation_id)
