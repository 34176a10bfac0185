"""Pydantic v2 schemas for reporting endpoints."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict

from frontdesk.models.room import RoomType


class DailyRevenueResponse(BaseModel):
    day: int
    revenue: Decimal
    bookings: int

    model_config = ConfigDict(from_attributes=True)


class RoomTypeOccupancyResponse(BaseModel):
    room_type: RoomType
    count: int
    occupied: int

    model_config = ConfigDict(from_attributes=True)


class MonthlyReportResponse(BaseModel):
    """Revenue and GST totals for stays checked in during one month."""

    month: int
    year: int
    total_revenue: Decimal
    total_tax: Decimal
    total_cgst: Decimal
    total_sgst: Decimal
    total_bookings: int
    average_sale_per_booking: Decimal
    daily: list[DailyRevenueResponse]
    room_types: list[RoomTypeOccupancyResponse]

    model_config = ConfigDict(from_attributes=True)


class OccupancyResponse(BaseModel):
    """Room count per status."""

    counts: dict[str, int]
    occupancy_rate: Decimal  # percentage 0.00-100.00
