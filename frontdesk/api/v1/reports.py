"""Reports API router: monthly revenue/GST and current occupancy."""

from __future__ import annotations

from datetime import date
from decimal import ROUND_HALF_UP, Decimal

from fastapi import APIRouter, Depends, HTTPException, Query, status

from frontdesk.api.deps import FrontDesk, get_current_user, get_front_desk
from frontdesk.models.room import RoomStatus
from frontdesk.models.user import User
from frontdesk.schemas.report import MonthlyReportResponse, OccupancyResponse
from frontdesk.services.reporting import MonthlyReport, compute_monthly_report, occupancy_counts

router = APIRouter(prefix="/api/v1/reports", tags=["reports"])


@router.get("/monthly", response_model=MonthlyReportResponse)
async def get_monthly_report(
    month: int | None = Query(None, ge=1, le=12, description="Month number, defaults to the current month"),
    year: int | None = Query(None, ge=2000, le=2100, description="Year, defaults to the current year"),
    desk: FrontDesk = Depends(get_front_desk),
    current_user: User = Depends(get_current_user),
) -> MonthlyReport:
    """Revenue, GST split, and daily buckets for guests checked in during the month.

    Derived from a snapshot of the rooms each time it is requested.
    """
    today = date.today()
    if (month is None) != (year is None):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="month and year must be given together",
        )
    return compute_monthly_report(desk.rooms.snapshot(), month or today.month, year or today.year)


@router.get("/occupancy", response_model=OccupancyResponse)
async def get_occupancy(
    desk: FrontDesk = Depends(get_front_desk),
    current_user: User = Depends(get_current_user),
) -> OccupancyResponse:
    """Room count per status and the share of rooms currently Occupied."""
    counts = occupancy_counts(desk.rooms.snapshot())

    if counts["all"] > 0:
        rate = Decimal(counts[RoomStatus.OCCUPIED.value] * 100) / Decimal(counts["all"])
        rate = rate.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    else:
        rate = Decimal("0.00")

    return OccupancyResponse(counts=counts, occupancy_rate=rate)
