"""Pure date formatting functions for picker output.

Patterns use the date-fns token names the picker was designed around.
Names are always English regardless of the process locale.
"""

from datetime import date
from enum import Enum

WEEKDAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


class DatePattern(str, Enum):
    """Supported format patterns."""

    WEEKDAY = "EEEE"
    ORDINAL_DAY = "do"
    MONTH = "MMMM"
    MONTH_DAY = "MMMM d"
    LONG_DATE = "MMMM d, yyyy"
    LOCALIZED_LONG = "PPP"


def ordinal(number: int) -> str:
    """Format a number with its English ordinal suffix.

    Args:
        number: Positive integer (e.g. a day of month).

    Returns:
        Ordinal string (e.g., "1st", "12th", "22nd").
    """
    if 10 <= number % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(number % 10, "th")
    return f"{number}{suffix}"


def weekday_name(value: date) -> str:
    return WEEKDAY_NAMES[value.weekday()]


def month_name(value: date) -> str:
    return MONTH_NAMES[value.month - 1]


def format_date(value: date, pattern: DatePattern | str) -> str:
    """Format a date with one of the supported patterns.

    Args:
        value: Date to format.
        pattern: A DatePattern or its token string (e.g. "EEEE").

    Returns:
        Formatted date string.

    Raises:
        ValueError: If the pattern is not supported.
    """
    pattern = DatePattern(pattern)

    if pattern is DatePattern.WEEKDAY:
        return weekday_name(value)
    if pattern is DatePattern.ORDINAL_DAY:
        return ordinal(value.day)
    if pattern is DatePattern.MONTH:
        return month_name(value)
    if pattern is DatePattern.MONTH_DAY:
        return f"{month_name(value)} {value.day}"
    if pattern is DatePattern.LONG_DATE:
        return f"{month_name(value)} {value.day}, {value.year}"
    # PPP: long localized date with ordinal day
    return f"{month_name(value)} {ordinal(value.day)}, {value.year}"
