"""
Attendance API – check-in preview against the business clock.
"""
import logging

from fastapi import APIRouter, HTTPException

from labourpay.api.deps import Now
from labourpay.core.exceptions import AttendanceError
from labourpay.schemas.attendance import AttendanceRecord, CheckinPreviewRequest
from labourpay.services.attendance_service import prepare_checkin

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/attendance", tags=["attendance"])


@router.post("/preview", response_model=AttendanceRecord)
async def preview_checkin(payload: CheckinPreviewRequest, now: Now):
    """
    Runs every check-in rule (window, cutoff, duplicate, times, wage) and
    returns the record that would be stored, pay included.
    """
    try:
        return prepare_checkin(
            payload.labour,
            payload.checkin,
            payload.holidays,
            payload.config,
            now=now,
            existing_dates=payload.existing_dates,
        )
    except AttendanceError as e:
        logger.info("Check-in rejected for labour %s: %s", payload.labour.id, e)
        raise HTTPException(status_code=400, detail=str(e))
