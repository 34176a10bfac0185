"""Unit tests for the billing engine: duration, GST split, and payment status."""

from datetime import date, datetime
from decimal import Decimal

import pytest

from frontdesk.billing.engine import (
    compute_bill,
    count_nights,
    derive_payment_status,
    stay_duration,
    to_cents,
    to_decimal,
)
from frontdesk.models.payment import PaymentStatus


class TestComputeBillExamples:
    """Worked invoices for both rent modes."""

    def test_tax_included_single_night(self, make_guest):
        bill = compute_bill(make_guest())

        assert bill.duration == 1
        assert bill.total_amount == Decimal("3000.00")
        assert bill.base_amount == Decimal("2678.57")
        assert bill.total_tax == Decimal("321.43")
        assert bill.cgst == Decimal("160.71")
        assert bill.sgst == Decimal("160.71")
        assert bill.advance_paid == Decimal("1000")
        assert bill.net_payable == Decimal("2000.00")
        assert bill.payment_status == PaymentStatus.PARTIALLY_PAID

    def test_tax_excluded_three_nights(self, make_guest):
        guest = make_guest(
            daily_rent=Decimal("2000"),
            check_in_date=date(2025, 5, 1),
            check_out_date=date(2025, 5, 4),
            tax_included=False,
            advance_paid=Decimal("500"),
        )
        bill = compute_bill(guest)

        assert bill.duration == 3
        assert bill.base_amount == Decimal("6000.00")
        assert bill.total_tax == Decimal("720.00")
        assert bill.total_amount == Decimal("6720.00")
        assert bill.cgst == Decimal("360.00")
        assert bill.sgst == Decimal("360.00")
        assert bill.net_payable == Decimal("6220.00")

    def test_zero_gst(self, make_guest):
        bill = compute_bill(make_guest(gst_rate=Decimal("0")))
        assert bill.base_amount == Decimal("3000.00")
        assert bill.total_tax == Decimal("0.00")
        assert bill.cgst == Decimal("0.00")

    def test_overpaid_guest_has_negative_net_payable(self, make_guest):
        bill = compute_bill(make_guest(advance_paid=Decimal("3500")))
        assert bill.net_payable == Decimal("-500.00")
        assert bill.payment_status == PaymentStatus.PAID

    def test_no_advance_is_pending(self, make_guest):
        bill = compute_bill(make_guest(advance_paid=Decimal("0")))
        assert bill.net_payable == bill.total_amount
        assert bill.payment_status == PaymentStatus.PENDING


class TestComputeBillInvariants:
    """Properties that must hold for any valid stay."""

    @pytest.mark.parametrize(
        "rent, gst, included",
        [
            (Decimal("3000"), Decimal("12"), True),
            (Decimal("1999.99"), Decimal("18"), True),
            (Decimal("2000"), Decimal("12"), False),
            (Decimal("1234.57"), Decimal("5"), False),
            (Decimal("0"), Decimal("28"), True),
        ],
    )
    def test_halves_and_total_agree(self, make_guest, rent, gst, included):
        guest = make_guest(
            daily_rent=rent,
            gst_rate=gst,
            tax_included=included,
            check_out_date=date(2025, 5, 4),
        )
        bill = compute_bill(guest)

        assert bill.cgst == bill.sgst
        assert abs(bill.total_amount - (bill.base_amount + bill.total_tax)) <= Decimal("0.01")
        assert abs(bill.total_tax - (bill.cgst + bill.sgst)) <= Decimal("0.01")
        assert bill.duration >= 1

    def test_same_inputs_same_bill(self, make_guest):
        guest = make_guest(daily_rent=Decimal("2750.50"), tax_included=False)
        assert compute_bill(guest) == compute_bill(guest)

    def test_guest_is_not_mutated(self, make_guest):
        guest = make_guest()
        before = (guest.daily_rent, guest.advance_paid, guest.gst_rate)
        compute_bill(guest)
        assert (guest.daily_rent, guest.advance_paid, guest.gst_rate) == before


class TestStayDuration:
    """Billable days, floored at one."""

    def test_same_day_bills_one_night(self):
        assert stay_duration(date(2025, 5, 1), date(2025, 5, 1)) == 1

    def test_checkout_before_checkin_is_floored(self):
        assert stay_duration(date(2025, 5, 3), date(2025, 5, 1)) == 1

    def test_whole_dates(self):
        assert stay_duration(date(2025, 5, 1), date(2025, 5, 8)) == 7

    def test_partial_day_rounds_up(self):
        check_in = datetime(2025, 5, 1, 14, 0)
        check_out = datetime(2025, 5, 3, 11, 0)
        assert stay_duration(check_in, check_out) == 2

    def test_late_checkout_adds_a_day(self):
        check_in = datetime(2025, 5, 1, 12, 0)
        check_out = datetime(2025, 5, 3, 12, 1)
        assert stay_duration(check_in, check_out) == 3

    def test_exact_multiple_of_days(self):
        check_in = datetime(2025, 5, 1, 12, 0)
        check_out = datetime(2025, 5, 3, 12, 0)
        assert stay_duration(check_in, check_out) == 2


class TestCountNights:
    """Calendar-day subtraction for reservations."""

    def test_plain_dates(self):
        assert count_nights(date(2025, 6, 10), date(2025, 6, 13)) == 3

    def test_time_of_day_is_ignored(self):
        # 2025-03-09 is a daylight-saving change in many zones.
        check_in = datetime(2025, 3, 8, 23, 30)
        check_out = datetime(2025, 3, 10, 0, 15)
        assert count_nights(check_in, check_out) == 2

    def test_not_floored(self):
        assert count_nights(date(2025, 6, 10), date(2025, 6, 10)) == 0
        assert count_nights(date(2025, 6, 10), date(2025, 6, 9)) == -1


class TestDerivePaymentStatus:
    """Boundaries of the advance-versus-total classification."""

    @pytest.mark.parametrize(
        "advance, total, expected",
        [
            ("0", "1000", PaymentStatus.PENDING),
            ("-5", "1000", PaymentStatus.PENDING),
            ("0.01", "1000", PaymentStatus.PARTIALLY_PAID),
            ("999.99", "1000", PaymentStatus.PARTIALLY_PAID),
            ("1000", "1000", PaymentStatus.PAID),
            ("1000.00", "1000", PaymentStatus.PAID),
            ("1500", "1000", PaymentStatus.PAID),
        ],
    )
    def test_classification(self, advance, total, expected):
        assert derive_payment_status(Decimal(advance), Decimal(total)) == expected

    def test_guest_bill_paid_at_exact_total(self, make_guest):
        # 1000 rent, 12% added on top -> 1120.00 due.
        exact = make_guest(daily_rent=Decimal("1000"), tax_included=False, advance_paid=Decimal("1120"))
        short = make_guest(daily_rent=Decimal("1000"), tax_included=False, advance_paid=Decimal("1119.99"))

        assert compute_bill(exact).total_amount == Decimal("1120.00")
        assert compute_bill(exact).payment_status == PaymentStatus.PAID
        assert compute_bill(short).payment_status == PaymentStatus.PARTIALLY_PAID


class TestDecimalHelpers:
    def test_to_decimal_avoids_float_noise(self):
        assert to_decimal(0.1) == Decimal("0.1")
        assert to_decimal(3) == Decimal("3")
        assert to_decimal("12.50") == Decimal("12.50")

    def test_to_cents_rounds_half_up(self):
        assert to_cents(Decimal("0.005")) == Decimal("0.01")
        assert to_cents(Decimal("2.675")) == Decimal("2.68")
        assert to_cents(Decimal("160.714")) == Decimal("160.71")
