"""CLI commands package."""

from cli.commands.config import config
from cli.commands.interactive import interactive
from cli.commands.rule import rule
from cli.commands.show import show

__all__ = [
    "config",
    "interactive",
    "rule",
    "show",
]
