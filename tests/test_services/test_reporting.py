"""Unit tests for the monthly report and occupancy counts."""

import copy
from datetime import date
from decimal import Decimal

import pytest

from frontdesk.errors import ValidationError
from frontdesk.models.room import Room, RoomStatus, RoomType
from frontdesk.services.reporting import compute_monthly_report, occupancy_counts


@pytest.fixture
def rooms(make_guest) -> list[Room]:
    """Two May check-ins, one April check-in, and an empty room."""
    return [
        # 3000 tax-included for one night -> 3000.00 total, 321.43 tax
        Room(101, RoomType.PREMIUM, Decimal("3000"), RoomStatus.OCCUPIED, make_guest()),
        Room(102, RoomType.PREMIUM, Decimal("3000")),
        # 2000 plus 12% for three nights -> 6720.00 total, 720.00 tax
        Room(
            201,
            RoomType.DELUXE,
            Decimal("2000"),
            RoomStatus.OCCUPIED,
            make_guest(
                name="Ravi Kumar",
                daily_rent=Decimal("2000"),
                check_in_date=date(2025, 5, 15),
                check_out_date=date(2025, 5, 18),
                tax_included=False,
            ),
        ),
        Room(
            202,
            RoomType.DELUXE,
            Decimal("2000"),
            RoomStatus.OCCUPIED,
            make_guest(check_in_date=date(2025, 4, 30), check_out_date=date(2025, 5, 2)),
        ),
    ]


class TestMonthlyReport:
    def test_totals(self, rooms):
        report = compute_monthly_report(rooms, 5, 2025)

        assert report.total_bookings == 2
        assert report.total_revenue == Decimal("9720.00")
        assert report.total_tax == Decimal("1041.43")
        assert report.total_cgst == Decimal("520.71")
        assert report.total_sgst == Decimal("520.71")
        assert report.average_sale_per_booking == Decimal("4860.00")

    def test_daily_buckets(self, rooms):
        report = compute_monthly_report(rooms, 5, 2025)

        assert [d.day for d in report.daily] == list(range(1, 32))
        by_day = {d.day: d for d in report.daily}
        assert by_day[1].revenue == Decimal("3000.00")
        assert by_day[1].bookings == 1
        assert by_day[15].revenue == Decimal("6720.00")
        assert by_day[2].revenue == Decimal("0.00")
        assert by_day[2].bookings == 0

    def test_room_type_breakdown(self, rooms):
        report = compute_monthly_report(rooms, 5, 2025)
        breakdown = {r.room_type: (r.count, r.occupied) for r in report.room_types}
        assert breakdown == {RoomType.PREMIUM: (2, 1), RoomType.DELUXE: (2, 2)}

    def test_empty_month(self, rooms):
        report = compute_monthly_report(rooms, 6, 2025)

        assert report.total_revenue == Decimal("0")
        assert report.total_bookings == 0
        assert report.average_sale_per_booking == Decimal("0")
        assert len(report.daily) == 30
        assert all(d.revenue == 0 and d.bookings == 0 for d in report.daily)

    def test_leap_february(self):
        report = compute_monthly_report([], 2, 2024)
        assert len(report.daily) == 29

    def test_year_must_match(self, rooms):
        assert compute_monthly_report(rooms, 5, 2024).total_bookings == 0

    @pytest.mark.parametrize("month", [0, 13])
    def test_invalid_month(self, rooms, month):
        with pytest.raises(ValidationError) as exc_info:
            compute_monthly_report(rooms, month, 2025)
        assert exc_info.value.field == "month"

    def test_does_not_mutate_rooms(self, rooms):
        before = copy.deepcopy(rooms)
        compute_monthly_report(rooms, 5, 2025)
        assert rooms == before


class TestOccupancyCounts:
    def test_counts(self, rooms):
        assert occupancy_counts(rooms) == {
            "all": 4,
            "Available": 1,
            "Occupied": 3,
            "Maintenance": 0,
            "Cleaning": 0,
        }

    def test_empty(self):
        assert occupancy_counts([])["all"] == 0
