"""
Payments API – live pay estimate for the check-in and edit forms.
"""
from fastapi import APIRouter, HTTPException

from labourpay.core.exceptions import AttendanceError
from labourpay.schemas.payment import PayResult, PaymentEstimateRequest
from labourpay.services.payment_service import calculate_payment

router = APIRouter(prefix="/payments", tags=["payments"])


@router.post("/estimate", response_model=PayResult)
async def estimate_payment(payload: PaymentEstimateRequest):
    """Pay breakdown for the form as filled so far. Blank fields give a zero estimate."""
    try:
        return calculate_payment(
            payload.monthly_wage,
            payload.start_time,
            payload.end_time,
            payload.work_date,
            payload.holidays,
            payload.config,
            payload.designation,
        )
    except AttendanceError as e:
        raise HTTPException(status_code=422, detail=str(e))
