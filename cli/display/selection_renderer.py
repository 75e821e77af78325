"""Rich renderer for the date picker card."""

from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table

from app.models.selection import RecurrenceType
from app.recurrence_model import RecurrenceModel
from cli.display.console import console as shared_console
from cli.display.formatters import format_date_button, format_interval, format_toggle


class SelectionRenderer:
    """Render the picker selection as a card.

    Layout mirrors the picker page:
    - Date button (long date or "Pick a date")
    - Recurring switch
    - Pattern, custom interval and description (only while recurring)
    - "Selected Date" panel (only when a date is selected)
    """

    def __init__(self, console: Console | None = None):
        """Initialize the renderer.

        Args:
            console: Rich Console instance (uses shared console if not provided).
        """
        self.console = console or shared_console

    def attach(self, model: RecurrenceModel) -> None:
        """Re-render the card whenever the model's selection changes."""
        model.subscribe(lambda _selection: self.render(model))

    def render(self, model: RecurrenceModel) -> None:
        """Render the full picker card for the model's current state."""
        selection = model.selection

        controls = Table(show_header=False, box=None, padding=(0, 1))
        controls.add_column("Label", style="dim", width=20)
        controls.add_column("Value")

        controls.add_row("Select Date", format_date_button(selection.anchor_date))
        controls.add_row("Recurring Event", format_toggle(selection.recurring))

        if selection.recurring:
            controls.add_row("Recurrence Pattern", selection.recurrence_type.label)
            if selection.recurrence_type is RecurrenceType.CUSTOM:
                controls.add_row("", format_interval(selection.custom_interval_days))
            controls.add_row("", f"[italic]{model.describe()}[/italic]")

        parts = [controls]

        summary = model.summary()
        if summary.date is not None:
            details = Table(show_header=False, box=None, padding=(0, 1))
            details.add_column("Label", style="bold")
            details.add_column("Value")
            details.add_row("Date:", summary.date)
            details.add_row("Day of week:", summary.weekday)
            if summary.recurrence is not None:
                details.add_row("Recurrence:", summary.recurrence)
            parts.append(Panel(details, title="Selected Date", title_align="left"))

        self.console.print(
            Panel(
                Group(*parts),
                title="[bold]Date Picker for events[/bold]",
                subtitle="Select a date for your event",
                width=64,
            )
        )

    def render_error(self, message: str) -> None:
        """Render an error message."""
        self.console.print(f"[red]{message}[/red]")
