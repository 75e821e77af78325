"""Display module for rendering picker output.

This module provides:
- console: Shared Rich console instance
- SelectionRenderer: Picker card display
- Formatting functions for the date button, switches and intervals
"""

from cli.display.console import console
from cli.display.formatters import format_date_button, format_interval, format_toggle
from cli.display.selection_renderer import SelectionRenderer

__all__ = [
    # Console
    "console",
    # Renderers
    "SelectionRenderer",
    # Formatters
    "format_date_button",
    "format_interval",
    "format_toggle",
]
