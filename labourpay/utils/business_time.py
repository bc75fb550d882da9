"""
Business calendar helpers.

Check-in cutoffs, "today"/"yesterday" and month boundaries are business
rules evaluated in one fixed zone (settings.BUSINESS_TIMEZONE, Asia/Dubai by
default), independent of where the server runs. Work dates themselves are
calendar dates and are built from their YYYY-MM-DD components, never by
converting through a timezone.
"""
from datetime import date, datetime, timedelta, timezone
from zoneinfo import ZoneInfo

from dateutil.relativedelta import relativedelta

from labourpay.core.config import settings
from labourpay.core.exceptions import InvalidDate
from labourpay.schemas.pay_config import CheckinPolicy


def business_tz() -> ZoneInfo:
    return ZoneInfo(settings.BUSINESS_TIMEZONE)


def business_now(now: datetime | None = None) -> datetime:
    """Aware datetime in the business zone. Naive input is taken as UTC."""
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now.astimezone(business_tz())


def business_today(now: datetime | None = None) -> date:
    return business_now(now).date()


def business_yesterday(now: datetime | None = None) -> date:
    return business_today(now) - timedelta(days=1)


def to_business_date(dt: datetime) -> date:
    return business_now(dt).date()


def parse_date(value: str | date) -> date:
    """Calendar date from "YYYY-MM-DD" (or a date), without any tz conversion."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    parts = str(value).strip().split("-")
    if len(parts) != 3:
        raise InvalidDate(f"Invalid date: {value!r}")
    try:
        return date(int(parts[0]), int(parts[1]), int(parts[2]))
    except ValueError:
        raise InvalidDate(f"Invalid date: {value!r}")


def iso_date(value: str | date) -> str:
    return parse_date(value).isoformat()


def month_start(d: date) -> date:
    return d.replace(day=1)


def next_month_start(d: date) -> date:
    return month_start(d) + relativedelta(months=1)


def parse_month(value: str) -> date:
    """First day of the month for "YYYY-MM"."""
    parts = str(value).strip().split("-")
    if len(parts) != 2:
        raise InvalidDate(f"Invalid month: {value!r}")
    try:
        return date(int(parts[0]), int(parts[1]), 1)
    except ValueError:
        raise InvalidDate(f"Invalid month: {value!r}")


def cutoff_passed(now: datetime | None, policy: CheckinPolicy) -> bool:
    local = business_now(now)
    return (local.hour, local.minute) >= (policy.cutoff_hour, policy.cutoff_minute)
