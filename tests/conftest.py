"""Shared test configuration and fixtures.

Every test gets a brand-new in-memory FrontDesk built from a small,
deterministic inventory, so tests never see each other's rooms,
reservations, or ledger entries.
"""

from collections.abc import AsyncGenerator
from datetime import date
from decimal import Decimal

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from frontdesk.config import Settings
from frontdesk.main import app
from frontdesk.models.guest import Guest
from frontdesk.models.payment import PaymentMethod
from frontdesk.services.front_desk import FrontDesk, get_front_desk

# ---------------------------------------------------------------------------
# Settings and domain fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def test_settings() -> Settings:
    """Three rooms: two Premium at 3000, one Deluxe at 2000."""
    return Settings(
        jwt_secret_key="test-secret-key-not-for-production",
        admin_password="adminpass",
        staff_password="staffpass",
        premium_rooms=[101, 102],
        deluxe_rooms=[201],
        premium_rate=Decimal("3000"),
        deluxe_rate=Decimal("2000"),
        default_gst_rate=Decimal("12"),
    )


@pytest.fixture
def desk(test_settings: Settings) -> FrontDesk:
    return FrontDesk.from_settings(test_settings)


@pytest.fixture
def make_guest():
    """Factory for stay records; keyword arguments override the defaults."""

    def _make(**overrides) -> Guest:
        fields = {
            "name": "John Doe",
            "phone": "9876543210",
            "address": "123 Main St, City",
            "check_in_date": date(2025, 5, 1),
            "check_out_date": date(2025, 5, 2),
            "number_of_adults": 2,
            "number_of_children": 1,
            "daily_rent": Decimal("3000"),
            "advance_paid": Decimal("1000"),
            "payment_method": PaymentMethod.CASH,
            "gst_rate": Decimal("12"),
            "tax_included": True,
        }
        fields.update(overrides)
        return Guest(**fields)

    return _make


# ---------------------------------------------------------------------------
# HTTP client wired to the per-test desk
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture
async def client(desk: FrontDesk) -> AsyncGenerator[AsyncClient, None]:
    """Provide an httpx AsyncClient whose requests hit the per-test desk."""
    app.dependency_overrides[get_front_desk] = lambda: desk

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers(desk: FrontDesk) -> dict[str, str]:
    """Authorization headers for the admin account."""
    session = desk.sessions.login("admin", "adminpass")
    assert session is not None
    return {"Authorization": f"Bearer {session[1]}"}


@pytest.fixture
def staff_headers(desk: FrontDesk) -> dict[str, str]:
    """Authorization headers for the non-admin staff account."""
    session = desk.sessions.login("staff", "staffpass")
    assert session is not None
    return {"Authorization": f"Bearer {session[1]}"}


@pytest.fixture
def guest_payload() -> dict:
    """Check-in form body for a two-night tax-excluded stay."""
    return {
        "name": "Jane Smith",
        "phone": "8765432109",
        "address": "456 Park Ave, Town",
        "check_in_date": "2025-05-10",
        "check_out_date": "2025-05-12",
        "number_of_adults": 1,
        "number_of_children": 0,
        "advance_paid": 500,
        "payment_method": "Card",
        "tax_included": False,
    }
