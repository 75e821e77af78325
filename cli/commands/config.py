"""Display configuration file path and settings."""

import os
from pathlib import Path

from rich.table import Table

from app.config import PickerConfig
from cli.display import console


def _find_env_file() -> Path | None:
    """Find .env file by searching current directory and parent directories."""
    current = Path.cwd()

    for path in [current] + list(current.parents):
        env_file = path / ".env"
        if env_file.exists():
            return env_file.resolve()

    return None


def _get_source(env_key: str, value, default_value) -> str:
    """Determine the source of a config value."""
    if env_key in os.environ or value != default_value:
        return "env"
    return "default"


def config() -> None:
    """Display configuration file path and settings."""
    env_file = _find_env_file()

    # Get default config for comparison
    default_config = PickerConfig()

    # Load config (from .env and environment)
    cfg = PickerConfig.from_env()

    rows = [
        (
            "log_dir",
            str(cfg.log_dir.resolve()),
            _get_source("LOG_DIR", str(cfg.log_dir), str(default_config.log_dir)),
        ),
        (
            "log_filename",
            cfg.log_filename,
            _get_source("LOG_FILENAME", cfg.log_filename, default_config.log_filename),
        ),
        (
            "default_custom_interval_days",
            str(cfg.default_custom_interval_days),
            _get_source(
                "DEFAULT_CUSTOM_INTERVAL_DAYS",
                cfg.default_custom_interval_days,
                default_config.default_custom_interval_days,
            ),
        ),
        (
            "rule_format",
            cfg.rule_format,
            _get_source("RULE_FORMAT", cfg.rule_format, default_config.rule_format),
        ),
    ]

    # Header
    console.print()
    console.print("━" * 50)
    console.print("[bold]  Configuration[/bold]")
    console.print("━" * 50)

    console.print("\n[bold]Config File:[/bold]")
    if env_file:
        console.print(f"  [cyan]{env_file}[/cyan]")
    else:
        console.print("  [dim]Not found (using defaults and environment variables)[/dim]")

    console.print("\n[bold]Settings:[/bold]")
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("SETTING", style="cyan", no_wrap=True)
    table.add_column("SOURCE", style="dim", no_wrap=True)
    table.add_column("VALUE")
    for setting, value, source in rows:
        table.add_row(setting, source, value)
    console.print(table)

    console.print()
