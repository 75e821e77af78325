"""Shared Rich console instance for picker output."""

from rich.console import Console

# Shared console used by the selection renderer and commands
console = Console()
