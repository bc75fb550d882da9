from pydantic import BaseModel
from datetime import date as Date, datetime as DateTime
from typing import Any, Optional

from labourpay.schemas.payment import HolidayIn


class Labour(BaseModel):
    id: int
    name: str
    monthly_wage: float
    designation: Optional[str] = None
    status: str = "active"  # active | inactive

    model_config = {"from_attributes": True}


class CheckinRequest(BaseModel):
    client_id: Optional[int] = None
    site_id: Optional[int] = None
    start_time: Optional[str] = None  # HH:MM
    end_time: Optional[str] = None    # HH:MM
    date: Optional[Date] = None       # defaults to business "today"
    notes: Optional[str] = None


class MarkPresentRequest(BaseModel):
    """Admin/manager marks a labour present; missing times use the configured defaults."""
    labour_id: int
    date: Date
    client_id: Optional[int] = None
    site_id: Optional[int] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None


class AttendanceUpdate(BaseModel):
    client_id: Optional[int] = None
    site_id: Optional[int] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    date: Optional[Date] = None
    notes: Optional[str] = None


class AttendanceRecord(BaseModel):
    id: Optional[int] = None
    labour_id: int
    date: Date
    client_id: int
    site_id: int
    start_time: str
    end_time: str
    hours_worked: float
    regular_pay: float
    ot_pay: float
    total_pay: float
    is_sunday: bool
    is_holiday: bool
    notes: Optional[str] = None
    admin_verified: bool = False
    verified_by: Optional[int] = None
    verified_at: Optional[DateTime] = None

    model_config = {"from_attributes": True}


class LabourDayStatus(BaseModel):
    labour_id: int
    name: str
    designation: Optional[str]
    monthly_wage: float
    status: str  # present | absent | pending
    attendance: Optional[AttendanceRecord] = None


class BoardSummary(BaseModel):
    total: int
    present: int
    absent: int
    pending: int


class PresentAbsentBoard(BaseModel):
    date: Date
    is_auto_absent: bool
    cutoff_note: Optional[str]
    summary: BoardSummary
    labours: list[LabourDayStatus]


class CheckinPreviewRequest(BaseModel):
    """Everything a check-in needs besides the clock; supplied by the persistence layer."""
    labour: Labour
    checkin: CheckinRequest
    holidays: list[HolidayIn] = []
    config: dict[str, Any] = {}
    existing_dates: list[Date] = []
