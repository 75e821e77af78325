"""Pydantic models for the date picker."""

from app.models.rule import Frequency, RecurrenceRule
from app.models.selection import RecurrenceType, Selection, SelectionSummary

__all__ = [
    "Frequency",
    "RecurrenceRule",
    "RecurrenceType",
    "Selection",
    "SelectionSummary",
]
