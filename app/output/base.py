"""Base classes for recurrence rule writers."""

from typing import Protocol

from app.models.rule import RecurrenceRule


class RuleWriter(Protocol):
    """Protocol for recurrence rule writers."""

    def render(self, rule: RecurrenceRule) -> str:
        """Render rule as text."""
        ...

    def get_extension(self) -> str:
        """Returns format name (e.g., 'rrule', 'json')."""
        ...
