"""
Monthly payroll: sums the stored per-day pay of each labour and adds the
client incentive rules on top.

Per-day amounts are never recalculated here. Records keep the pay computed
when they were entered, so config changes only affect later entries.
"""
import logging
from collections import defaultdict
from datetime import date
from typing import Iterable

from labourpay.schemas.attendance import AttendanceRecord, Labour
from labourpay.schemas.payroll import (
    RULE_DAYS_WORKED,
    RULE_FIXED,
    RULE_SUNDAY_COUNT,
    IncentiveDetail,
    IncentiveRule,
    MonthSummary,
    PayrollRow,
)
from labourpay.utils.business_time import next_month_start, parse_month

logger = logging.getLogger(__name__)


def month_range(month: str | date) -> tuple[date, date]:
    """Half-open [first day, first day of next month)."""
    start = parse_month(month) if isinstance(month, str) else month.replace(day=1)
    return start, next_month_start(start)


def records_in_month(records: Iterable[AttendanceRecord], month: str | date) -> list[AttendanceRecord]:
    start, end = month_range(month)
    return [r for r in records if start <= r.date < end]


def summarize_month(records: Iterable[AttendanceRecord]) -> MonthSummary:
    records = list(records)
    return MonthSummary(
        days_worked=len(records),
        total_earnings=round(sum(r.total_pay for r in records), 2),
        regular_pay=round(sum(r.regular_pay for r in records), 2),
        ot_pay=round(sum(r.ot_pay for r in records), 2),
        sunday_days=sum(1 for r in records if r.is_sunday),
        holiday_days=sum(1 for r in records if r.is_holiday),
    )


def _rule_earning(rule: IncentiveRule, client_records: list[AttendanceRecord]) -> float:
    if rule.rule_type == RULE_SUNDAY_COUNT:
        count = sum(1 for r in client_records if r.is_sunday)
    elif rule.rule_type == RULE_DAYS_WORKED:
        count = len(client_records)
    elif rule.rule_type == RULE_FIXED:
        return rule.amount
    else:
        logger.warning("Unknown incentive rule type %r (rule %s)", rule.rule_type, rule.name)
        return 0.0

    if count < rule.threshold:
        return 0.0
    if rule.per_occurrence:
        return rule.amount * (count - rule.threshold + 1)
    return rule.amount


def evaluate_incentives(
    records: Iterable[AttendanceRecord],
    rules: Iterable[IncentiveRule],
) -> tuple[float, list[IncentiveDetail]]:
    """Incentives earned by one labour's records. Every rule applies per client."""
    by_client: dict[int, list[AttendanceRecord]] = defaultdict(list)
    for r in records:
        by_client[r.client_id].append(r)

    total = 0.0
    details: list[IncentiveDetail] = []
    for rule in rules:
        if not rule.active:
            continue
        client_records = by_client.get(rule.client_id, [])
        if not client_records:
            continue
        earned = _rule_earning(rule, client_records)
        if earned > 0:
            total += earned
            details.append(IncentiveDetail(
                rule_name=rule.name, client_id=rule.client_id, earned=round(earned, 2),
            ))
    return round(total, 2), details


def build_payroll(
    labours: Iterable[Labour],
    records: Iterable[AttendanceRecord],
    month: str | date,
    rules: Iterable[IncentiveRule] | None = None,
) -> list[PayrollRow]:
    rules = list(rules or [])
    by_labour: dict[int, list[AttendanceRecord]] = defaultdict(list)
    for r in records_in_month(records, month):
        by_labour[r.labour_id].append(r)

    rows = []
    for labour in sorted(labours, key=lambda l: l.id):
        if labour.status != "active":
            continue
        recs = by_labour.get(labour.id, [])
        incentive, details = evaluate_incentives(recs, rules)
        total_pay = round(sum(r.total_pay for r in recs), 2)
        rows.append(PayrollRow(
            labour_id=labour.id,
            labour_name=labour.name,
            monthly_wage=labour.monthly_wage,
            days_worked=len(recs),
            total_hours=round(sum(r.hours_worked for r in recs), 2),
            total_regular=round(sum(r.regular_pay for r in recs), 2),
            total_ot=round(sum(r.ot_pay for r in recs), 2),
            total_pay=total_pay,
            sunday_days=sum(1 for r in recs if r.is_sunday),
            holiday_days=sum(1 for r in recs if r.is_holiday),
            incentive=incentive,
            incentive_details=details,
            grand_total=round(total_pay + incentive, 2),
        ))

    logger.info("Payroll for %s: %d labours", month, len(rows))
    return rows
