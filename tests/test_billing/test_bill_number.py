"""Unit tests for bill number generation."""

import re
from datetime import datetime

from frontdesk.billing.bill_number import generate_bill_number


class TestGenerateBillNumber:
    def test_format(self):
        number = generate_bill_number(prefix="MH", now=datetime(2025, 5, 1, 10, 30))
        assert re.fullmatch(r"MH250501\d{3}", number)

    def test_defaults_to_configured_prefix(self):
        assert generate_bill_number().startswith("MH")

    def test_custom_prefix(self):
        number = generate_bill_number(prefix="INV-", now=datetime(2024, 12, 31))
        assert number.startswith("INV-241231")
        assert len(number) == len("INV-241231") + 3

    def test_suffix_is_zero_padded(self, monkeypatch):
        monkeypatch.setattr("frontdesk.billing.bill_number.random.randint", lambda a, b: 7)
        assert generate_bill_number(prefix="MH", now=datetime(2025, 1, 2)) == "MH250102007"
