"""
Typed views over the flat key/value config store.

The store keeps every value as free text typed in by an admin, so each field
is parsed on read and falls back to its default when it is missing or
unusable. Values may arrive bare ("10") or wrapped the way the config
listing returns them ({"value": "10", "description": "..."}).
"""
import logging
import math
from typing import Any, Mapping

from pydantic import BaseModel

from labourpay.core.exceptions import InvalidTimeFormat
from labourpay.utils.shift_time import parse_time_to_minutes

logger = logging.getLogger(__name__)


def _raw(store: Mapping[str, Any] | None, key: str) -> Any:
    if not store:
        return None
    value = store.get(key)
    if isinstance(value, Mapping):
        value = value.get("value")
    return value


def parse_float(store: Mapping[str, Any] | None, key: str, default: float, positive: bool = False) -> float:
    raw = _raw(store, key)
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return default
    try:
        value = float(raw)
    except (TypeError, ValueError):
        logger.warning("Config %s=%r is not a number, using default %s", key, raw, default)
        return default
    if not math.isfinite(value) or (positive and value <= 0):
        logger.warning("Config %s=%r is out of range, using default %s", key, raw, default)
        return default
    return value


def parse_int(store: Mapping[str, Any] | None, key: str, default: int) -> int:
    raw = _raw(store, key)
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return default
    try:
        return int(str(raw).strip())
    except ValueError:
        logger.warning("Config %s=%r is not an integer, using default %s", key, raw, default)
        return default


def parse_clock(store: Mapping[str, Any] | None, key: str, default: str) -> str:
    raw = _raw(store, key)
    if not raw:
        return default
    try:
        parse_time_to_minutes(str(raw))
    except InvalidTimeFormat:
        logger.warning("Config %s=%r is not HH:MM, using default %s", key, raw, default)
        return default
    return str(raw).strip()


class RateConfig(BaseModel):
    regular_hours: float = 10.0
    helper_ot_rate: float = 3.0
    non_helper_ot_rate: float = 4.0
    sunday_ot_multiplier: float = 1.5

    model_config = {"frozen": True}

    @classmethod
    def from_store(cls, store: Mapping[str, Any] | None) -> "RateConfig":
        d = cls()
        return cls(
            # regular_hours divides the standard rate, so zero is as bad as garbage
            regular_hours=parse_float(store, "regular_hours", d.regular_hours, positive=True),
            helper_ot_rate=parse_float(store, "helper_ot_rate", d.helper_ot_rate),
            non_helper_ot_rate=parse_float(store, "non_helper_ot_rate", d.non_helper_ot_rate),
            sunday_ot_multiplier=parse_float(store, "sunday_ot_multiplier", d.sunday_ot_multiplier),
        )


class CheckinPolicy(BaseModel):
    """Submission rules for labour check-ins and admin/manager marking."""
    cutoff_hour: int = 16
    cutoff_minute: int = 30
    default_start: str = "10:00"
    default_end: str = "20:00"
    max_shift_hours: float = 18.0

    model_config = {"frozen": True}

    @classmethod
    def from_store(cls, store: Mapping[str, Any] | None) -> "CheckinPolicy":
        d = cls()
        hour = parse_int(store, "cutoff_hour", d.cutoff_hour)
        minute = parse_int(store, "cutoff_minute", d.cutoff_minute)
        if not (0 <= hour <= 23 and 0 <= minute <= 59):
            logger.warning("Cutoff %s:%s out of range, using default", hour, minute)
            hour, minute = d.cutoff_hour, d.cutoff_minute
        return cls(
            cutoff_hour=hour,
            cutoff_minute=minute,
            default_start=parse_clock(store, "default_start", d.default_start),
            default_end=parse_clock(store, "default_end", d.default_end),
            max_shift_hours=parse_float(store, "max_shift_hours", d.max_shift_hours, positive=True),
        )

    @property
    def cutoff_label(self) -> str:
        return f"{self.cutoff_hour:02d}:{self.cutoff_minute:02d}"
