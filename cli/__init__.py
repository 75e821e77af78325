"""CLI package for the date picker."""

import logging
import sys

from app.config import PickerConfig

# File lines carry the logger name so model and CLI messages can be told apart
FILE_FORMAT = "%(asctime)s %(name)s %(levelname)s: %(message)s"
CONSOLE_FORMAT = "%(levelname)s: %(message)s"

# Handlers added by setup_logging, replaced on the next call
_picker_handlers: list[logging.Handler] = []


def console_level(verbose: bool = False, quiet: bool = False) -> int:
    """Console log level for the global flags; quiet wins over verbose."""
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.INFO
    return logging.WARNING


def reset_logging() -> None:
    """Remove and close the handlers installed by setup_logging."""
    root_logger = logging.getLogger()
    while _picker_handlers:
        handler = _picker_handlers.pop()
        root_logger.removeHandler(handler)
        handler.close()


def setup_logging(
    verbose: bool = False, quiet: bool = False, config: PickerConfig | None = None
) -> None:
    """Send picker logs to the log file and to stderr.

    The file receives everything at DEBUG; the console shows warnings, or
    INFO with --verbose and only errors with --quiet. Calling this again
    replaces the handlers from the previous call and leaves any other
    root handlers in place.

    Args:
        verbose: Show INFO messages on the console
        quiet: Show only errors on the console
        config: Settings for the log location; read from the environment if omitted
    """
    if config is None:
        config = PickerConfig.from_env()

    reset_logging()

    log_path = config.log_dir / config.log_filename
    log_path.parent.mkdir(parents=True, exist_ok=True)

    file_handler = logging.FileHandler(log_path, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT))

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level(verbose, quiet))
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    for handler in (file_handler, console_handler):
        root_logger.addHandler(handler)
        _picker_handlers.append(handler)

    logging.getLogger(__name__).debug(f"Logging to {log_path}")


def main() -> None:
    """Main entry point for the CLI."""
    from cli.parser import app

    app()


__all__ = ["console_level", "main", "reset_logging", "setup_logging"]
