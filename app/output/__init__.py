"""Output layer for recurrence rules."""

from app.output.base import RuleWriter
from app.output.json_writer import JSONWriter
from app.output.rrule_writer import RRuleWriter

__all__ = [
    "RuleWriter",
    "JSONWriter",
    "RRuleWriter",
]
