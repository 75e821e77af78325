"""JSON writer for recurrence rules."""

import json

from app.models.rule import RecurrenceRule


class JSONWriter:
    """Writer for JSON recurrence rules."""

    def render(self, rule: RecurrenceRule) -> str:
        """Render rule as JSON, including its RRULE value."""
        # Use Pydantic's JSON serialization, then add the derived RRULE
        data = json.loads(rule.model_dump_json(exclude_none=True))
        data["rrule"] = rule.to_rrule()
        return json.dumps(data, indent=2)

    def get_extension(self) -> str:
        """Returns format name."""
        return "json"
