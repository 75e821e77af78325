"""Pure formatting functions for display output."""

from datetime import date

from app.constants import NO_DATE_TEXT
from app.date_format import DatePattern, format_date


def format_date_button(value: date | None) -> str:
    """Format the date button label.

    Args:
        value: Selected date, or None.

    Returns:
        Long date (e.g., "March 15th, 2024"), or the placeholder if no date.
    """
    if value is None:
        return f"[dim]{NO_DATE_TEXT}[/dim]"
    return format_date(value, DatePattern.LOCALIZED_LONG)


def format_toggle(enabled: bool) -> str:
    """Format a switch state."""
    return "[green]✓ On[/green]" if enabled else "[dim]✗ Off[/dim]"


def format_interval(days: int) -> str:
    """Format a custom interval (e.g., "Every 3 days")."""
    return f"Every {days} day{'s' if days != 1 else ''}"
