import logging
import re
from datetime import date, datetime, timezone
from typing import NamedTuple, Optional

logger = logging.getLogger(__name__)

# --- Loose input: day, month, optional year (5.3.2024, 5-3, 5 3 2024) ---
DATE_PATTERN = re.compile(
    r'^(?P<day>\d{1,2})[. -] *(?P<month>\d{1,2})([. -] *(?P<year>\d{4})?)?$'
)


class NormalizedDate(NamedTuple):
    value: Optional[date]
    raw: object


def format_date(value):
    """Format a date as D. M. YYYY (no zero padding on day and month)"""
    return f"{value.day}. {value.month}. {value.year:04d}"


def is_valid_calendar_date(year, month, day):
    try:
        date(year, month, day)
    except ValueError:
        return False
    return True


# ------------------------
# Per-kind handlers
# ------------------------

def _from_structured(value):
    # Fresh copy, time part dropped
    return date(value.year, value.month, value.day)


def _from_timestamp(value):
    try:
        return datetime.fromtimestamp(value, tz=timezone.utc).date()
    except (OverflowError, OSError, ValueError):
        logger.debug("Timestamp %r is out of range", value)
        return None


def _from_text(value, today):
    match = DATE_PATTERN.match(value)
    if not match:
        # Left for strict coercion (ISO 8601 only)
        return value

    day = int(match.group('day'))
    month = int(match.group('month'))
    year = int(match.group('year')) if match.group('year') else today.year

    if not is_valid_calendar_date(year, month, day):
        logger.debug("%r is not a calendar date", value)
        return None
    return date(year, month, day)


def _coerce(value):
    if value is None or isinstance(value, date):
        return value
    try:
        return date.fromisoformat(value)
    except (TypeError, ValueError):
        logger.debug("Unable to coerce %r to a date", value)
        return None


def is_empty(value):
    """Blank input: falsy values and the lone string "0"."""
    return not value or value == "0"


def input_kind(value):
    """Classify raw input as 'date', 'timestamp', 'empty' or 'text'."""
    if isinstance(value, date):
        return 'date'
    if isinstance(value, int) and not isinstance(value, bool):
        return 'timestamp'
    if is_empty(value):
        return 'empty'
    if isinstance(value, str):
        return 'text'
    raise TypeError(f"Unable to use {type(value).__name__} as a date value.")


def normalize_date(value, today=None):
    """
    Normalize user input into a (date or None, raw value) pair.

    Malformed text resolves to None but keeps the raw string, so "filled"
    checks still see what the user typed. Unsupported input types raise
    TypeError.
    """
    kind = input_kind(value)
    raw = None
    raw_set = False

    if kind == 'date':
        result = _from_structured(value)
    elif kind == 'timestamp':
        result = _from_timestamp(value)
    elif kind == 'empty':
        raw, raw_set = value, True
        result = None
    else:
        raw, raw_set = value, True
        result = _from_text(value, today or date.today())

    result = _coerce(result)

    if not raw_set and result is not None:
        raw = format_date(result)

    return NormalizedDate(result, raw)


def is_in_range(value, range_):
    """Is value within (min, max)? Open ends are None; absent value never is."""
    low, high = range_
    if value is None or (low is None and high is None):
        return False
    return (low is None or value >= low) and (high is None or value <= high)
