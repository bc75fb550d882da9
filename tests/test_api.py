"""
HTTP tests for the estimate and check-in preview endpoints.
"""
from datetime import datetime, timezone

import pytest

# Wed 2025-01-08 17:00 Dubai – after the 16:30 cutoff
EVENING = datetime(2025, 1, 8, 13, 0, tzinfo=timezone.utc)

LABOUR = {"id": 1001, "name": "Ravi Kumar", "monthly_wage": 1200, "designation": "Helper"}


def estimate_body(**overrides) -> dict:
    body = {
        "monthlyWage": 1200,
        "startTime": "08:00",
        "endTime": "18:00",
        "workDate": "2025-01-08",
        "holidays": [],
        "config": {"regular_hours": {"value": "10"}},
        "designation": "Helper",
    }
    body.update(overrides)
    return body


@pytest.mark.asyncio
async def test_health(client):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


@pytest.mark.asyncio
async def test_estimate_regular_day(client):
    resp = await client.post("/api/v1/payments/estimate", json=estimate_body())
    assert resp.status_code == 200
    data = resp.json()
    assert data == {
        "hoursWorked": 10.0,
        "regularPay": 38.71,
        "otPay": 0.0,
        "totalPay": 38.71,
        "isSunday": False,
        "isHoliday": False,
    }


@pytest.mark.asyncio
async def test_estimate_holiday(client):
    body = estimate_body(
        endTime="12:00",
        designation="Carpenter",
        holidays=[{"date": "2025-01-08", "name": "Company day"}],
    )
    resp = await client.post("/api/v1/payments/estimate", json=body)
    data = resp.json()
    assert data["isHoliday"] is True
    assert data["otPay"] == 24.0
    assert data["totalPay"] == 62.71


@pytest.mark.asyncio
async def test_estimate_incomplete_form_is_zero(client):
    resp = await client.post("/api/v1/payments/estimate", json={"monthlyWage": 1200})
    assert resp.status_code == 200
    assert resp.json()["totalPay"] == 0.0


@pytest.mark.asyncio
async def test_estimate_bad_time(client):
    resp = await client.post("/api/v1/payments/estimate", json=estimate_body(startTime="8am"))
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_preview_checkin(client):
    body = {
        "labour": LABOUR,
        "checkin": {"client_id": 1, "site_id": 10, "start_time": "08:00", "end_time": "20:00"},
    }
    resp = await client.post("/api/v1/attendance/preview", json=body)
    assert resp.status_code == 200
    data = resp.json()
    assert data["date"] == "2025-01-08"
    assert data["hours_worked"] == 12.0
    assert data["ot_pay"] == 6.0
    assert data["total_pay"] == 44.71
    assert data["admin_verified"] is False


@pytest.mark.asyncio
async def test_preview_duplicate(client):
    body = {
        "labour": LABOUR,
        "checkin": {"client_id": 1, "site_id": 10, "start_time": "08:00", "end_time": "18:00"},
        "existing_dates": ["2025-01-08"],
    }
    resp = await client.post("/api/v1/attendance/preview", json=body)
    assert resp.status_code == 400
    assert "already exists" in resp.json()["detail"]


@pytest.mark.asyncio
@pytest.mark.parametrize("now", [EVENING])
async def test_preview_after_cutoff(client):
    body = {
        "labour": LABOUR,
        "checkin": {
            "client_id": 1, "site_id": 10, "start_time": "08:00", "end_time": "18:00",
            "date": "2025-01-07",
        },
    }
    resp = await client.post("/api/v1/attendance/preview", json=body)
    assert resp.status_code == 400
    assert "cutoff" in resp.json()["detail"]
