from typing import Any, Optional

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class PayResult(BaseModel):
    hours_worked: float
    regular_pay: float
    ot_pay: float
    total_pay: float
    is_sunday: bool
    is_holiday: bool

    model_config = {"frozen": True, "alias_generator": to_camel, "populate_by_name": True}

    @classmethod
    def zero(cls) -> "PayResult":
        return cls(
            hours_worked=0.0,
            regular_pay=0.0,
            ot_pay=0.0,
            total_pay=0.0,
            is_sunday=False,
            is_holiday=False,
        )


class Rates(BaseModel):
    days_in_month: int
    standard_rate: float
    overtime_rate: float
    sunday_holiday_rate: float
    is_helper: bool


class HolidayIn(BaseModel):
    date: str  # YYYY-MM-DD
    name: Optional[str] = None


class PaymentEstimateRequest(BaseModel):
    """Live estimate while a form is being filled; every field may still be blank."""
    monthly_wage: Optional[float] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    work_date: Optional[str] = None
    holidays: list[HolidayIn] = []
    config: dict[str, Any] = {}
    designation: Optional[str] = None

    model_config = {"alias_generator": to_camel, "populate_by_name": True}
