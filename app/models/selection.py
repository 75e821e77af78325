"""Selection state models with Pydantic v2 validation."""

from datetime import date
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from app.constants import DEFAULT_CUSTOM_INTERVAL_DAYS


class RecurrenceType(str, Enum):
    """Recurrence pattern enumeration."""

    NONE = "none"
    DAILY = "daily"
    WEEKLY = "weekly"
    BIWEEKLY = "biWeekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"
    CUSTOM = "custom"

    @property
    def label(self) -> str:
        """Display label used by the pattern selector."""
        if self is RecurrenceType.BIWEEKLY:
            return "BiWeekly"
        return self.value.title()

    @classmethod
    def parse(cls, value: str) -> Optional["RecurrenceType"]:
        """Resolve a user supplied pattern name, or None if unknown.

        Matching ignores case, dashes and underscores, so "bi-weekly",
        "BIWEEKLY" and "biWeekly" all resolve to BIWEEKLY.
        """
        normalized = value.strip().lower().replace("-", "").replace("_", "")
        for member in cls:
            if member.value.lower() == normalized:
                return member
        return None


class Selection(BaseModel):
    """Current state of the picker.

    A new selection starts on today's date with recurrence off.
    """

    anchor_date: Optional[date] = Field(default_factory=date.today)
    recurring: bool = False
    recurrence_type: RecurrenceType = RecurrenceType.NONE
    custom_interval_days: int = Field(default=DEFAULT_CUSTOM_INTERVAL_DAYS, ge=1)

    @model_validator(mode="after")
    def pair_recurrence(self):
        """Keep the recurring flag and pattern consistent.

        A recurring selection always carries a pattern (weekly by default)
        and a non-recurring one never does.
        """
        if not self.recurring:
            self.recurrence_type = RecurrenceType.NONE
        elif self.recurrence_type is RecurrenceType.NONE:
            self.recurrence_type = RecurrenceType.WEEKLY
        return self


class SelectionSummary(BaseModel):
    """Display values for the "Selected Date" panel."""

    date: Optional[str] = None
    weekday: Optional[str] = None
    recurrence: Optional[str] = None
