"""
Daily wage calculation for one attendance entry.

Standard rate  = monthly wage / days in month / regular hours
OT rate        = fixed per designation (helper vs. everyone else)
Sunday rate    = OT rate * Sunday multiplier

Regular day:
    up to regular hours  -> hours * standard rate, no OT
    beyond               -> regular hours * standard rate + extra hours * OT rate
Sunday / holiday:
    regular hours * standard rate is always paid, plus every worked hour
    at the Sunday rate.

This is the only implementation; check-in, edits, mark-present, the live
estimate and the reports all call calculate_payment.
"""
import logging
from datetime import date, timedelta
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Iterable, Mapping

from labourpay.core.exceptions import InvalidDate
from labourpay.schemas.pay_config import RateConfig
from labourpay.schemas.payment import PayResult, Rates
from labourpay.utils.business_time import next_month_start, parse_date
from labourpay.utils.shift_time import shift_hours

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")
HELPER_DESIGNATION = "helper"


def round_half_up(value: float) -> Decimal:
    return Decimal(str(value)).quantize(CENT, rounding=ROUND_HALF_UP)


def days_in_month(work_date: str | date) -> int:
    d = parse_date(work_date)
    return (next_month_start(d) - timedelta(days=1)).day


def is_helper(designation: str | None) -> bool:
    return (designation or "").strip().lower() == HELPER_DESIGNATION


def as_rate_config(config: RateConfig | Mapping[str, Any] | None) -> RateConfig:
    if isinstance(config, RateConfig):
        return config
    return RateConfig.from_store(config)


def resolve_rates(
    monthly_wage: float,
    work_date: str | date,
    config: RateConfig | Mapping[str, Any] | None,
    designation: str | None = None,
) -> Rates:
    cfg = as_rate_config(config)
    days = days_in_month(work_date)
    helper = is_helper(designation)
    overtime_rate = cfg.helper_ot_rate if helper else cfg.non_helper_ot_rate
    return Rates(
        days_in_month=days,
        standard_rate=float(monthly_wage) / days / cfg.regular_hours,
        overtime_rate=overtime_rate,
        sunday_holiday_rate=overtime_rate * cfg.sunday_ot_multiplier,
        is_helper=helper,
    )


def _holiday_key(entry: Any) -> str | None:
    if isinstance(entry, Mapping):
        value = entry.get("date")
    elif isinstance(entry, (str, date)):
        value = entry
    else:
        value = getattr(entry, "date", None)
    if not value:
        return None
    try:
        return parse_date(value).isoformat()
    except InvalidDate:
        return str(value).strip()


def holiday_dates(holidays: Iterable[Any] | None) -> set[str]:
    """ISO date strings from holiday rows, dicts, strings or dates."""
    keys = (_holiday_key(h) for h in (holidays or []))
    return {k for k in keys if k}


def classify_day(work_date: str | date, holidays: Iterable[Any] | None) -> tuple[bool, bool]:
    """(is_sunday, is_holiday) for a calendar date."""
    d = parse_date(work_date)
    is_sunday = d.weekday() == 6
    is_holiday = d.isoformat() in holiday_dates(holidays)
    return is_sunday, is_holiday


def calculate_payment(
    monthly_wage: float | None,
    start_time: str | None,
    end_time: str | None,
    work_date: str | date | None,
    holidays: Iterable[Any] | None,
    config: RateConfig | Mapping[str, Any] | None,
    designation: str | None = None,
) -> PayResult:
    # Incomplete input (e.g. a half-filled form) is "no estimate yet", not an error
    if not monthly_wage or not start_time or not end_time or not work_date:
        return PayResult.zero()

    cfg = as_rate_config(config)
    hours_worked = shift_hours(start_time, end_time)
    rates = resolve_rates(monthly_wage, work_date, cfg, designation)
    is_sunday, is_holiday = classify_day(work_date, holidays)

    if is_sunday or is_holiday:
        regular_pay = cfg.regular_hours * rates.standard_rate
        ot_pay = hours_worked * rates.sunday_holiday_rate
    elif hours_worked <= cfg.regular_hours:
        regular_pay = hours_worked * rates.standard_rate
        ot_pay = 0.0
    else:
        regular_pay = cfg.regular_hours * rates.standard_rate
        ot_pay = (hours_worked - cfg.regular_hours) * rates.overtime_rate

    regular = round_half_up(regular_pay)
    ot = round_half_up(ot_pay)
    result = PayResult(
        hours_worked=float(round_half_up(hours_worked)),
        regular_pay=float(regular),
        ot_pay=float(ot),
        total_pay=float(regular + ot),
        is_sunday=is_sunday,
        is_holiday=is_holiday,
    )
    logger.debug(
        "Pay for %s %s-%s (%s): %s",
        work_date, start_time, end_time, designation or "-", result,
    )
    return result
