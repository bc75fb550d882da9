"""
Attendance rules around the wage calculation: what a labour may submit,
how admins/managers edit or mark entries, and who counts as present.

Nothing here persists anything. Callers pass in what they loaded (labour,
config store, holidays, dates already recorded) and store the returned
AttendanceRecord themselves.
"""
import logging
from datetime import date, datetime, timedelta
from typing import Any, Iterable, Mapping

from labourpay.core.exceptions import (
    AttendanceError,
    CutoffPassed,
    DegenerateShift,
    DuplicateEntry,
    ExcessiveDuration,
    FutureDate,
    InvalidWage,
    MissingField,
    SubmissionWindowClosed,
)
from labourpay.schemas.attendance import (
    AttendanceRecord,
    AttendanceUpdate,
    BoardSummary,
    CheckinRequest,
    Labour,
    LabourDayStatus,
    MarkPresentRequest,
    PresentAbsentBoard,
)
from labourpay.schemas.pay_config import CheckinPolicy, RateConfig
from labourpay.services.payment_service import calculate_payment
from labourpay.utils.business_time import business_now, business_today, cutoff_passed
from labourpay.utils.shift_time import parse_time_to_minutes, shift_hours

logger = logging.getLogger(__name__)

STATUS_PRESENT = "present"
STATUS_ABSENT = "absent"
STATUS_PENDING = "pending"


def validate_shift_times(start_time: str, end_time: str, max_hours: float = 18.0) -> float:
    """Returns the shift length in hours or raises for an unusable shift."""
    start = parse_time_to_minutes(start_time)
    end = parse_time_to_minutes(end_time)
    # Must be checked before the midnight wrap turns it into a 24h shift
    if start == end:
        raise DegenerateShift("Start and end time cannot be the same")

    hours = shift_hours(start_time, end_time)
    if hours > max_hours:
        raise ExcessiveDuration(f"Working hours cannot exceed {max_hours:g} hours")
    return hours


def check_submission_date(work_date: date, now: datetime | None, policy: CheckinPolicy) -> None:
    """A labour may only submit for today, or for yesterday until the cutoff."""
    today = business_today(now)
    yesterday = today - timedelta(days=1)

    if work_date > today:
        raise FutureDate("Cannot submit future dates")
    if work_date < yesterday:
        raise SubmissionWindowClosed("Can only submit for today or yesterday")
    if work_date == yesterday and cutoff_passed(now, policy):
        raise CutoffPassed(
            f"Yesterday's cutoff time ({policy.cutoff_label}) has passed. "
            "Contact admin to mark your attendance."
        )


def _pay_fields(
    labour: Labour,
    start_time: str,
    end_time: str,
    work_date: date,
    holidays: Iterable[Any] | None,
    config: Mapping[str, Any] | None,
) -> dict:
    pay = calculate_payment(
        labour.monthly_wage,
        start_time,
        end_time,
        work_date,
        holidays,
        RateConfig.from_store(config),
        labour.designation,
    )
    return pay.model_dump()


def prepare_checkin(
    labour: Labour,
    request: CheckinRequest,
    holidays: Iterable[Any] | None,
    config: Mapping[str, Any] | None,
    now: datetime | None = None,
    existing_dates: Iterable[date] = (),
) -> AttendanceRecord:
    """Validates a labour's own check-in and returns the record to store."""
    if not (request.client_id and request.site_id and request.start_time and request.end_time):
        raise MissingField("Client, site, start time and end time are required")

    policy = CheckinPolicy.from_store(config)
    work_date = request.date or business_today(now)
    check_submission_date(work_date, now, policy)

    if work_date in set(existing_dates):
        raise DuplicateEntry(f"Attendance for {work_date.isoformat()} already exists")

    validate_shift_times(request.start_time, request.end_time, policy.max_shift_hours)

    if not labour.monthly_wage or labour.monthly_wage <= 0:
        raise InvalidWage("Labour wage must be a positive number")

    record = AttendanceRecord(
        labour_id=labour.id,
        date=work_date,
        client_id=request.client_id,
        site_id=request.site_id,
        start_time=request.start_time,
        end_time=request.end_time,
        notes=request.notes or None,
        **_pay_fields(labour, request.start_time, request.end_time, work_date, holidays, config),
    )
    logger.info("Check-in for labour %s on %s: %.2f", labour.id, work_date, record.total_pay)
    return record


def recalculate_attendance(
    record: AttendanceRecord,
    labour: Labour,
    changes: AttendanceUpdate,
    holidays: Iterable[Any] | None,
    config: Mapping[str, Any] | None,
) -> AttendanceRecord:
    """Applies an admin/manager edit and recomputes pay from scratch."""
    policy = CheckinPolicy.from_store(config)
    start_time = changes.start_time or record.start_time
    end_time = changes.end_time or record.end_time
    work_date = changes.date or record.date

    validate_shift_times(start_time, end_time, policy.max_shift_hours)

    return record.model_copy(update={
        "client_id": changes.client_id or record.client_id,
        "site_id": changes.site_id or record.site_id,
        "start_time": start_time,
        "end_time": end_time,
        "date": work_date,
        "notes": changes.notes if changes.notes is not None else record.notes,
        **_pay_fields(labour, start_time, end_time, work_date, holidays, config),
    })


def prepare_mark_present(
    labour: Labour,
    request: MarkPresentRequest,
    holidays: Iterable[Any] | None,
    config: Mapping[str, Any] | None,
    existing_dates: Iterable[date] = (),
    verified_by: int | None = None,
    now: datetime | None = None,
) -> AttendanceRecord:
    """Admin/manager marks a labour present. The entry counts as verified."""
    if request.labour_id != labour.id:
        raise AttendanceError("Labour does not match the request")
    if not (request.client_id and request.site_id):
        raise MissingField("labour_id, date, client_id, site_id required")
    if request.date in set(existing_dates):
        raise DuplicateEntry("Already has attendance for this date")

    policy = CheckinPolicy.from_store(config)
    start_time = request.start_time or policy.default_start
    end_time = request.end_time or policy.default_end
    validate_shift_times(start_time, end_time, policy.max_shift_hours)

    return AttendanceRecord(
        labour_id=labour.id,
        date=request.date,
        client_id=request.client_id,
        site_id=request.site_id,
        start_time=start_time,
        end_time=end_time,
        admin_verified=True,
        verified_by=verified_by,
        verified_at=business_now(now),
        **_pay_fields(labour, start_time, end_time, request.date, holidays, config),
    )


def attendance_status(
    work_date: date,
    has_record: bool,
    now: datetime | None,
    policy: CheckinPolicy,
) -> str:
    if has_record:
        return STATUS_PRESENT
    yesterday = business_today(now) - timedelta(days=1)
    if work_date < yesterday or (work_date == yesterday and cutoff_passed(now, policy)):
        return STATUS_ABSENT
    return STATUS_PENDING


def present_absent_board(
    work_date: date,
    labours: Iterable[Labour],
    records: Iterable[AttendanceRecord],
    now: datetime | None,
    policy: CheckinPolicy,
) -> PresentAbsentBoard:
    by_labour = {r.labour_id: r for r in records if r.date == work_date}
    yesterday = business_today(now) - timedelta(days=1)
    auto_absent = work_date == yesterday and cutoff_passed(now, policy)

    rows = []
    for labour in sorted(labours, key=lambda l: l.id):
        if labour.status != "active":
            continue
        att = by_labour.get(labour.id)
        rows.append(LabourDayStatus(
            labour_id=labour.id,
            name=labour.name,
            designation=labour.designation,
            monthly_wage=labour.monthly_wage,
            status=attendance_status(work_date, att is not None, now, policy),
            attendance=att,
        ))

    return PresentAbsentBoard(
        date=work_date,
        is_auto_absent=auto_absent,
        cutoff_note=(
            f"Past {policy.cutoff_label}, unlisted labours marked absent" if auto_absent else None
        ),
        summary=BoardSummary(
            total=len(rows),
            present=sum(1 for r in rows if r.status == STATUS_PRESENT),
            absent=sum(1 for r in rows if r.status == STATUS_ABSENT),
            pending=sum(1 for r in rows if r.status == STATUS_PENDING),
        ),
        labours=rows,
    )
