from labourpay.schemas.payment import PayResult, Rates, HolidayIn, PaymentEstimateRequest
from labourpay.schemas.pay_config import RateConfig, CheckinPolicy
from labourpay.schemas.attendance import (
    Labour, CheckinRequest, MarkPresentRequest, AttendanceUpdate, AttendanceRecord,
    LabourDayStatus, BoardSummary, PresentAbsentBoard, CheckinPreviewRequest,
)
from labourpay.schemas.payroll import IncentiveRule, IncentiveDetail, MonthSummary, PayrollRow

__all__ = [
    "PayResult", "Rates", "HolidayIn", "PaymentEstimateRequest",
    "RateConfig", "CheckinPolicy",
    "Labour", "CheckinRequest", "MarkPresentRequest", "AttendanceUpdate", "AttendanceRecord",
    "LabourDayStatus", "BoardSummary", "PresentAbsentBoard", "CheckinPreviewRequest",
    "IncentiveRule", "IncentiveDetail", "MonthSummary", "PayrollRow",
]
