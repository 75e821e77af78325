"""Recurrence rule model with iCalendar RRULE serialization."""

import logging
from datetime import date
from enum import Enum
from typing import Optional

from icalendar import vRecur
from pydantic import BaseModel, Field, ValidationError, field_validator

from app.exceptions import InvalidRecurrenceRuleError, UnsupportedRecurrenceError
from app.models.selection import RecurrenceType

logger = logging.getLogger(__name__)

# iCalendar weekday codes, indexed by date.weekday()
WEEKDAY_CODES = ("MO", "TU", "WE", "TH", "FR", "SA", "SU")

# RRULE parts the picker can express
SUPPORTED_PARTS = {"FREQ", "INTERVAL", "BYDAY", "BYMONTHDAY", "BYMONTH"}

# Day and month parts each frequency's pattern derives from the anchor date
PATTERN_PARTS = {
    "DAILY": (),
    "WEEKLY": ("BYDAY",),
    "MONTHLY": ("BYMONTHDAY",),
    "YEARLY": ("BYMONTH", "BYMONTHDAY"),
}


class Frequency(str, Enum):
    """Rule frequencies the picker can produce."""

    DAILY = "DAILY"
    WEEKLY = "WEEKLY"
    MONTHLY = "MONTHLY"
    YEARLY = "YEARLY"


class RecurrenceRule(BaseModel):
    """Validated recurrence rule derived from a selection."""

    frequency: Frequency
    interval: int = Field(default=1, ge=1)
    by_weekday: Optional[str] = None
    by_month_day: Optional[int] = Field(default=None, ge=1, le=31)
    by_month: Optional[int] = Field(default=None, ge=1, le=12)
    dtstart: Optional[date] = None

    @field_validator("by_weekday", mode="before")
    @classmethod
    def normalize_weekday(cls, v):
        """Accept weekday codes in any case."""
        if v is None:
            return None
        code = str(v).upper()
        if code not in WEEKDAY_CODES:
            raise ValueError(f"Invalid weekday code: {v}")
        return code

    @property
    def recurrence_type(self) -> RecurrenceType:
        """Map the rule back to a picker recurrence pattern.

        Raises:
            UnsupportedRecurrenceError: If no pattern matches the interval.
        """
        if self.frequency is Frequency.DAILY:
            if self.interval == 1:
                return RecurrenceType.DAILY
            return RecurrenceType.CUSTOM
        if self.frequency is Frequency.WEEKLY:
            if self.interval == 1:
                return RecurrenceType.WEEKLY
            if self.interval == 2:
                return RecurrenceType.BIWEEKLY
        elif self.interval == 1:
            if self.frequency is Frequency.MONTHLY:
                return RecurrenceType.MONTHLY
            return RecurrenceType.YEARLY
        raise UnsupportedRecurrenceError(
            f"No recurrence pattern repeats {self.frequency.value.lower()} "
            f"with interval {self.interval}"
        )

    @property
    def custom_interval_days(self) -> Optional[int]:
        """Day interval for custom rules, None for every other pattern."""
        if self.recurrence_type is RecurrenceType.CUSTOM:
            return self.interval
        return None

    def by_parts(self) -> dict:
        """Day and month parts that are set, keyed by RRULE name."""
        parts = {
            "BYDAY": self.by_weekday,
            "BYMONTHDAY": self.by_month_day,
            "BYMONTH": self.by_month,
        }
        return {key: value for key, value in parts.items() if value is not None}

    def check_pattern_parts(self) -> None:
        """Ensure the rule only sets parts its frequency's pattern produces.

        Raises:
            UnsupportedRecurrenceError: For parts such as BYDAY on a monthly rule.
        """
        allowed = PATTERN_PARTS[self.frequency.value]
        extra = sorted(set(self.by_parts()) - set(allowed))
        if extra:
            raise UnsupportedRecurrenceError(
                f"{', '.join(extra)} is not supported for "
                f"{self.frequency.value} rules"
            )

    def check_anchor(self, anchor: Optional[date]) -> None:
        """Ensure the day and month parts are the ones derived from anchor.

        The picker stores only an anchor date, so a part that disagrees with
        it cannot be represented.

        Args:
            anchor: Date the selection would be anchored on.

        Raises:
            UnsupportedRecurrenceError: If a part disagrees with the anchor,
                or parts are set and there is no anchor.
        """
        self.check_pattern_parts()
        parts = self.by_parts()
        if not parts:
            return
        if anchor is None:
            raise UnsupportedRecurrenceError(
                f"Recurrence rule parts {', '.join(parts)} need a selected date"
            )

        derived = {
            "BYDAY": WEEKDAY_CODES[anchor.weekday()],
            "BYMONTHDAY": anchor.day,
            "BYMONTH": anchor.month,
        }
        mismatched = [
            f"{key}={value}" for key, value in parts.items() if derived[key] != value
        ]
        if mismatched:
            raise UnsupportedRecurrenceError(
                f"Recurrence rule parts {';'.join(mismatched)} "
                f"do not match {anchor.isoformat()}"
            )

    def to_rrule(self) -> str:
        """Serialize as an iCalendar RRULE value (without the "RRULE:" prefix)."""
        recur = vRecur(freq=self.frequency.value)
        if self.interval != 1:
            recur["INTERVAL"] = self.interval
        if self.by_weekday is not None:
            recur["BYDAY"] = self.by_weekday
        if self.by_month_day is not None:
            recur["BYMONTHDAY"] = self.by_month_day
        if self.by_month is not None:
            recur["BYMONTH"] = self.by_month
        return recur.to_ical().decode("utf-8")

    @classmethod
    def from_rrule(
        cls, text: str, dtstart: Optional[date] = None
    ) -> "RecurrenceRule":
        """Parse an iCalendar RRULE value.

        Args:
            text: RRULE value, with or without the "RRULE:" prefix.
            dtstart: Optional anchor date to attach to the rule.

        Returns:
            Parsed rule.

        Raises:
            InvalidRecurrenceRuleError: If the text is malformed or a value is
                out of range.
            UnsupportedRecurrenceError: If the rule is valid iCalendar but uses
                parts or intervals the picker cannot express.
        """
        value = text.strip()
        if value.upper().startswith("RRULE:"):
            value = value[len("RRULE:") :]

        try:
            recur = vRecur.from_ical(value)
        except ValueError as e:
            raise InvalidRecurrenceRuleError(
                f"Invalid recurrence rule '{text}': {e}"
            ) from e

        parts = {key.upper(): list(values) for key, values in recur.items()}

        if "FREQ" not in parts:
            raise InvalidRecurrenceRuleError(
                f"Invalid recurrence rule '{text}': missing FREQ"
            )

        unsupported = sorted(set(parts) - SUPPORTED_PARTS)
        if unsupported:
            raise UnsupportedRecurrenceError(
                f"Unsupported recurrence rule parts: {', '.join(unsupported)}"
            )

        for key, values in parts.items():
            if len(values) != 1:
                raise UnsupportedRecurrenceError(
                    f"Only one {key} value is supported, got {len(values)}"
                )

        frequency = str(parts["FREQ"][0]).upper()
        if frequency not in Frequency.__members__:
            raise UnsupportedRecurrenceError(
                f"Unsupported recurrence frequency: {frequency}"
            )

        fields: dict = {"frequency": frequency, "dtstart": dtstart}
        if "INTERVAL" in parts:
            fields["interval"] = int(parts["INTERVAL"][0])
        if "BYDAY" in parts:
            weekday = str(parts["BYDAY"][0]).upper()
            # Relative weekdays such as "1FR" or "-1SU"
            if len(weekday) > 2 and weekday[-2:] in WEEKDAY_CODES:
                raise UnsupportedRecurrenceError(
                    f"Relative weekday '{weekday}' is not supported"
                )
            fields["by_weekday"] = weekday
        if "BYMONTHDAY" in parts:
            month_day = int(parts["BYMONTHDAY"][0])
            # Days counted from the end of the month, e.g. -1 for the last day
            if -31 <= month_day <= -1:
                raise UnsupportedRecurrenceError(
                    f"Negative month day {month_day} is not supported"
                )
            fields["by_month_day"] = month_day
        if "BYMONTH" in parts:
            fields["by_month"] = int(parts["BYMONTH"][0])

        try:
            rule = cls(**fields)
        except ValidationError as e:
            raise InvalidRecurrenceRuleError(
                f"Invalid recurrence rule '{text}': {e.errors()[0]['msg']}"
            ) from e

        # Fails for intervals with no matching pattern
        rule.recurrence_type
        rule.check_pattern_parts()
        logger.debug(f"Parsed recurrence rule {rule.to_rrule()}")
        return rule
