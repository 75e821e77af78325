"""Pure derivations from a picker selection."""

import math
import re
from typing import Optional

from app.constants import NO_RECURRENCE_TEXT
from app.date_format import DatePattern, format_date
from app.models.rule import WEEKDAY_CODES, Frequency, RecurrenceRule
from app.models.selection import RecurrenceType, Selection, SelectionSummary

# Leading integer of a numeric input, e.g. " 12 days" -> "12"
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_interval(raw: str | int | float | None) -> int:
    """Parse a custom interval, coercing anything invalid to 1.

    Args:
        raw: Text from a numeric input, or a number.

    Returns:
        Interval in days, always >= 1.
    """
    value: Optional[int] = None
    if isinstance(raw, bool):
        value = None
    elif isinstance(raw, int):
        value = raw
    elif isinstance(raw, float):
        if math.isfinite(raw):
            value = int(raw)
    elif raw is not None:
        match = _LEADING_INT.match(str(raw))
        if match:
            value = int(match.group(1))

    if value is None or value < 1:
        return 1
    return value


def describe_selection(selection: Selection) -> str:
    """Human-readable recurrence description.

    Each pattern keeps its own leading words ("Repeats every day" but
    "every 2 weeks on Friday"); a missing date leaves a placeholder.
    """
    if not selection.recurring:
        return NO_RECURRENCE_TEXT

    anchor = selection.anchor_date
    recurrence_type = selection.recurrence_type

    if recurrence_type is RecurrenceType.DAILY:
        return "Repeats every day"
    if recurrence_type is RecurrenceType.WEEKLY:
        weekday = format_date(anchor, DatePattern.WEEKDAY) if anchor else "week"
        return f"Repeats every {weekday}"
    if recurrence_type is RecurrenceType.BIWEEKLY:
        weekday = format_date(anchor, DatePattern.WEEKDAY) if anchor else ""
        return f"every 2 weeks on {weekday}"
    if recurrence_type is RecurrenceType.MONTHLY:
        day = format_date(anchor, DatePattern.ORDINAL_DAY) if anchor else ""
        return f"Repeats monthly on the {day}"
    if recurrence_type is RecurrenceType.YEARLY:
        month_day = format_date(anchor, DatePattern.MONTH_DAY) if anchor else ""
        return f"Repeats yearly on {month_day}"
    if recurrence_type is RecurrenceType.CUSTOM:
        days = selection.custom_interval_days
        plural = "s" if days != 1 else ""
        return f"Repeats every {days} day{plural}"
    return NO_RECURRENCE_TEXT


def summarize_selection(selection: Selection) -> SelectionSummary:
    """Values for the "Selected Date" panel; empty when no date is selected."""
    anchor = selection.anchor_date
    if anchor is None:
        return SelectionSummary()

    return SelectionSummary(
        date=format_date(anchor, DatePattern.LONG_DATE),
        weekday=format_date(anchor, DatePattern.WEEKDAY),
        recurrence=describe_selection(selection) if selection.recurring else None,
    )


def build_rule(selection: Selection) -> Optional[RecurrenceRule]:
    """Recurrence rule for a selection, or None when recurrence is off.

    Weekday, month day and month parts come from the anchor date and are
    left out when no date is selected.
    """
    recurrence_type = selection.recurrence_type
    if not selection.recurring or recurrence_type is RecurrenceType.NONE:
        return None

    anchor = selection.anchor_date
    weekday = WEEKDAY_CODES[anchor.weekday()] if anchor else None
    month_day = anchor.day if anchor else None
    month = anchor.month if anchor else None

    if recurrence_type is RecurrenceType.DAILY:
        fields = {"frequency": Frequency.DAILY}
    elif recurrence_type is RecurrenceType.WEEKLY:
        fields = {"frequency": Frequency.WEEKLY, "by_weekday": weekday}
    elif recurrence_type is RecurrenceType.BIWEEKLY:
        fields = {"frequency": Frequency.WEEKLY, "interval": 2, "by_weekday": weekday}
    elif recurrence_type is RecurrenceType.MONTHLY:
        fields = {"frequency": Frequency.MONTHLY, "by_month_day": month_day}
    elif recurrence_type is RecurrenceType.YEARLY:
        fields = {
            "frequency": Frequency.YEARLY,
            "by_month": month,
            "by_month_day": month_day,
        }
    else:
        fields = {
            "frequency": Frequency.DAILY,
            "interval": selection.custom_interval_days,
        }

    return RecurrenceRule(dtstart=anchor, **fields)
