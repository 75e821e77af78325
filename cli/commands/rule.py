"""Print the recurrence rule for a selection."""

import logging

import typer
from typing_extensions import Annotated

from app.constants import NO_RECURRENCE_TEXT
from app.exceptions import PickerError
from cli.commands.options import (
    DateOption,
    EveryOption,
    RecurringOption,
    RRuleOption,
    TypeOption,
)
from cli.context import get_context
from cli.display import console
from cli.setup import setup_writer
from cli.utils import build_model

logger = logging.getLogger(__name__)


def rule(
    date: DateOption = None,
    recurring: RecurringOption = False,
    recurrence_type: TypeOption = None,
    every: EveryOption = None,
    rrule: RRuleOption = None,
    format: Annotated[
        str | None,
        typer.Option(
            "--format",
            "-f",
            help="Output format: rrule or json (default: from RULE_FORMAT config)",
        ),
    ] = None,
) -> None:
    """Print the recurrence rule for a selection.

    Prints "No recurrence" when recurrence is off.
    """
    ctx = get_context()

    try:
        writer = setup_writer(format or ctx.config.rule_format)
        model = build_model(
            ctx.config,
            date_text=date,
            rrule=rrule,
            recurring=recurring,
            recurrence_type=recurrence_type,
            every=every,
        )
    except PickerError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    recurrence_rule = model.to_rule()
    if recurrence_rule is None:
        typer.echo(NO_RECURRENCE_TEXT)
        return

    logger.info(f"Rendering rule as {writer.get_extension()}")
    typer.echo(writer.render(recurrence_rule))
