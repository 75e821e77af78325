"""iCalendar RRULE writer for recurrence rules."""

from app.models.rule import RecurrenceRule


class RRuleWriter:
    """Writer for iCalendar RRULE lines."""

    def __init__(self, include_prefix: bool = True):
        """Initialize writer.

        Args:
            include_prefix: Prefix the value with "RRULE:" as in an ICS file.
        """
        self.include_prefix = include_prefix

    def render(self, rule: RecurrenceRule) -> str:
        """Render rule as an RRULE line."""
        value = rule.to_rrule()
        if self.include_prefix:
            return f"RRULE:{value}"
        return value

    def get_extension(self) -> str:
        """Returns format name."""
        return "rrule"
