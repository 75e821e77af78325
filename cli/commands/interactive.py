"""Interactive picker session."""

import logging

import typer
from rich.prompt import Prompt

from app.constants import NO_RECURRENCE_TEXT
from app.exceptions import PickerError
from app.models.rule import RecurrenceRule
from app.models.selection import RecurrenceType
from app.recurrence_model import RecurrenceModel
from cli.context import get_context
from cli.display import SelectionRenderer, console
from cli.setup import setup_writer
from cli.utils import parse_date_option

logger = logging.getLogger(__name__)

HELP_TEXT = (
    "Commands: date <YYYY-MM-DD|today|none>, today, clear, recurring on|off, "
    "type <pattern>, every <days>, rrule <RRULE>, rule, help, quit"
)

ON_VALUES = ("on", "yes", "true", "1")
OFF_VALUES = ("off", "no", "false", "0")


def interactive() -> None:
    """Edit a selection interactively; the card redraws after every change."""
    ctx = get_context()
    model = ctx.model
    renderer = SelectionRenderer()

    try:
        writer = setup_writer(ctx.config.rule_format)
    except PickerError as e:
        renderer.render_error(str(e))
        raise typer.Exit(1)

    renderer.attach(model)
    renderer.render(model)
    console.print(f"[dim]{HELP_TEXT}[/dim]")

    while True:
        try:
            line = Prompt.ask(
                "[bold]picker[/bold]", console=console, default="", show_default=False
            )
        except EOFError:
            break

        command, _, argument = line.strip().partition(" ")
        command = command.lower()
        argument = argument.strip()

        if command in ("quit", "exit", "q"):
            break
        if not command:
            continue

        logger.debug(f"Interactive command: {command} {argument}")
        _handle_command(model, renderer, writer, command, argument)


def _handle_command(
    model: RecurrenceModel,
    renderer: SelectionRenderer,
    writer,
    command: str,
    argument: str,
) -> None:
    """Apply one interactive command to the model."""
    if command == "date":
        try:
            model.select_date(parse_date_option(argument))
        except typer.BadParameter as e:
            renderer.render_error(str(e))
    elif command == "today":
        model.select_today()
    elif command == "clear":
        model.clear_date()
    elif command == "recurring":
        value = argument.lower()
        if value in ON_VALUES:
            model.set_recurring(True)
        elif value in OFF_VALUES:
            model.set_recurring(False)
        else:
            renderer.render_error("Use: recurring on|off")
    elif command == "type":
        if not model.selection.recurring:
            console.print("[yellow]Turn recurring on before choosing a pattern[/yellow]")
        elif RecurrenceType.parse(argument) is None:
            renderer.render_error(f"Unknown recurrence pattern: {argument}")
        else:
            model.set_recurrence_type(argument)
    elif command == "every":
        model.set_custom_interval_days(argument)
    elif command == "rrule":
        try:
            model.apply_rule(RecurrenceRule.from_rrule(argument))
        except PickerError as e:
            renderer.render_error(str(e))
    elif command == "rule":
        recurrence_rule = model.to_rule()
        if recurrence_rule is None:
            console.print(NO_RECURRENCE_TEXT)
        else:
            console.print(writer.render(recurrence_rule), markup=False, highlight=False)
    elif command == "help":
        console.print(f"[dim]{HELP_TEXT}[/dim]")
    else:
        console.print(f"[yellow]Unknown command: {command}[/yellow]")
