"""Date picker with recurrence selection."""

from app.models import RecurrenceRule, RecurrenceType, Selection, SelectionSummary
from app.recurrence import build_rule, describe_selection, summarize_selection
from app.recurrence_model import RecurrenceModel

__all__ = [
    "RecurrenceModel",
    "RecurrenceRule",
    "RecurrenceType",
    "Selection",
    "SelectionSummary",
    "build_rule",
    "describe_selection",
    "summarize_selection",
]
