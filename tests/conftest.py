"""
Shared pytest fixtures for LabourPay tests.

Business time is Asia/Dubai (UTC+4). The fixed instants below are given in
UTC; their local equivalents are noted next to them.
"""
from datetime import datetime, timezone

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from labourpay.api.deps import get_now
from labourpay.main import app
from labourpay.schemas.attendance import Labour

# Wed 2025-01-08 12:00 Dubai – before the 16:30 cutoff
MORNING = datetime(2025, 1, 8, 8, 0, tzinfo=timezone.utc)
# Wed 2025-01-08 17:00 Dubai – after the 16:30 cutoff
EVENING = datetime(2025, 1, 8, 13, 0, tzinfo=timezone.utc)

DEFAULT_CONFIG = {
    "regular_hours": "10",
    "helper_ot_rate": "3",
    "non_helper_ot_rate": "4",
    "sunday_ot_multiplier": "1.5",
}


# ── HTTP client fixture ───────────────────────────────────────────────────────

@pytest.fixture
def now() -> datetime:
    return MORNING


@pytest_asyncio.fixture
async def client(now) -> AsyncClient:
    """FastAPI test client with the business clock pinned to the `now` fixture."""
    app.dependency_overrides[get_now] = lambda: now

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


# ── Labour fixtures ───────────────────────────────────────────────────────────

@pytest.fixture
def helper() -> Labour:
    return Labour(id=1001, name="Ravi Kumar", monthly_wage=1200, designation="Helper")


@pytest.fixture
def carpenter() -> Labour:
    return Labour(id=1002, name="Abdul Rahman", monthly_wage=1200, designation="Carpenter")
