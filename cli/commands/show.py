"""Render the picker card for a selection."""

import logging

import typer

from app.exceptions import PickerError
from cli.commands.options import (
    DateOption,
    EveryOption,
    RecurringOption,
    RRuleOption,
    TypeOption,
)
from cli.context import get_context
from cli.display import SelectionRenderer
from cli.utils import build_model

logger = logging.getLogger(__name__)


def show(
    date: DateOption = None,
    recurring: RecurringOption = False,
    recurrence_type: TypeOption = None,
    every: EveryOption = None,
    rrule: RRuleOption = None,
) -> None:
    """Show the date picker card for a selection.

    Without options the card shows today with recurrence off.
    """
    ctx = get_context()
    renderer = SelectionRenderer()

    try:
        model = build_model(
            ctx.config,
            date_text=date,
            rrule=rrule,
            recurring=recurring,
            recurrence_type=recurrence_type,
            every=every,
        )
    except PickerError as e:
        logger.debug(f"Could not build selection: {e}")
        renderer.render_error(str(e))
        raise typer.Exit(1)

    renderer.render(model)
