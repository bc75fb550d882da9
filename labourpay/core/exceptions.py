"""
Domain errors for attendance submissions.

All of them are ValueErrors so callers that only care about "bad input"
can catch one type; the API layer turns them into 4xx responses.
"""


class AttendanceError(ValueError):
    """Base class for rejected attendance submissions."""


class MissingField(AttendanceError):
    pass


class InvalidTimeFormat(AttendanceError):
    pass


class DegenerateShift(AttendanceError):
    pass


class ExcessiveDuration(AttendanceError):
    pass


class FutureDate(AttendanceError):
    pass


class SubmissionWindowClosed(AttendanceError):
    pass


class CutoffPassed(AttendanceError):
    pass


class DuplicateEntry(AttendanceError):
    pass


class InvalidWage(AttendanceError):
    pass


class InvalidDate(AttendanceError):
    pass
