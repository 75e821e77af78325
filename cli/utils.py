"""CLI helpers for parsing options into a recurrence model."""

import logging
from datetime import date

import typer

from app.config import PickerConfig
from app.models.rule import RecurrenceRule
from app.models.selection import RecurrenceType
from app.recurrence_model import RecurrenceModel

logger = logging.getLogger(__name__)

NO_DATE_VALUES = ("", "none", "clear")


def parse_date_option(value: str) -> date | None:
    """Parse a date option.

    Args:
        value: YYYY-MM-DD, "today", or "none" to clear the date

    Returns:
        Parsed date, or None for no date

    Raises:
        typer.BadParameter: If the value is not a valid date
    """
    text = value.strip().lower()
    if text in NO_DATE_VALUES:
        return None
    if text == "today":
        return date.today()
    try:
        return date.fromisoformat(text)
    except ValueError:
        raise typer.BadParameter(
            f"Invalid date '{value}'. Use YYYY-MM-DD, today or none"
        )


def build_model(
    config: PickerConfig,
    date_text: str | None = None,
    rrule: str | None = None,
    recurring: bool = False,
    recurrence_type: str | None = None,
    every: str | None = None,
) -> RecurrenceModel:
    """Build a model by replaying CLI options as picker interactions.

    Options are applied in the order a user would: date, rule, recurring
    toggle, pattern, custom interval. A pattern turns recurrence on.

    Raises:
        typer.BadParameter: If the date or pattern is invalid
        InvalidRecurrenceRuleError: If the rule cannot be parsed
        UnsupportedRecurrenceError: If the rule has no matching pattern or
            its day and month parts disagree with the date
    """
    model = RecurrenceModel(custom_interval_days=config.default_custom_interval_days)

    if date_text is not None:
        model.select_date(parse_date_option(date_text))
    if rrule is not None:
        model.apply_rule(RecurrenceRule.from_rrule(rrule))
    if recurring or recurrence_type is not None:
        model.set_recurring(True)
    if recurrence_type is not None:
        if RecurrenceType.parse(recurrence_type) is None:
            patterns = [t.value for t in RecurrenceType if t is not RecurrenceType.NONE]
            raise typer.BadParameter(
                f"Unknown recurrence pattern '{recurrence_type}'. "
                f"Use one of: {', '.join(patterns)}"
            )
        model.set_recurrence_type(recurrence_type)
    if every is not None:
        model.set_custom_interval_days(every)

    logger.debug(f"Built selection: {model.selection.model_dump_json()}")
    return model
