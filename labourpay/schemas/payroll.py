from pydantic import BaseModel
from typing import Optional


RULE_SUNDAY_COUNT = "sunday_count"
RULE_DAYS_WORKED = "days_worked"
RULE_FIXED = "fixed"


class IncentiveRule(BaseModel):
    id: Optional[int] = None
    client_id: int
    name: str
    description: Optional[str] = None
    rule_type: str        # sunday_count | days_worked | fixed
    threshold: float
    amount: float
    per_occurrence: bool = False  # pay for every occurrence from the threshold on
    active: bool = True

    model_config = {"from_attributes": True}


class IncentiveDetail(BaseModel):
    rule_name: str
    client_id: int
    earned: float


class MonthSummary(BaseModel):
    days_worked: int
    total_earnings: float
    regular_pay: float
    ot_pay: float
    sunday_days: int
    holiday_days: int


class PayrollRow(BaseModel):
    labour_id: int
    labour_name: str
    monthly_wage: float
    days_worked: int
    total_hours: float
    total_regular: float
    total_ot: float
    total_pay: float
    sunday_days: int
    holiday_days: int
    incentive: float = 0.0
    incentive_details: list[IncentiveDetail] = []
    grand_total: float
