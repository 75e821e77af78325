"""Shared CLI context with lazy-initialized dependencies."""

from app.config import PickerConfig
from app.recurrence_model import RecurrenceModel


class CLIContext:
    """Shared context with lazy-initialized dependencies for CLI commands.

    Usage:
        ctx = CLIContext()
        ctx.model.set_recurring(True)
    """

    def __init__(self, verbose: bool = False, quiet: bool = False):
        """Initialize CLI context.

        Args:
            verbose: If True, enable info logging on the console
            quiet: If True, suppress non-error output
        """
        self.verbose = verbose
        self.quiet = quiet

        # Lazy-loaded dependencies
        self._config: PickerConfig | None = None
        self._model: RecurrenceModel | None = None

    @property
    def config(self) -> PickerConfig:
        """Get configuration (lazy-loaded)."""
        if self._config is None:
            self._config = PickerConfig.from_env()
        return self._config

    @property
    def model(self) -> RecurrenceModel:
        """Get the session's recurrence model (lazy-loaded)."""
        if self._model is None:
            self._model = RecurrenceModel(
                custom_interval_days=self.config.default_custom_interval_days
            )
        return self._model


# Global context instance (set by Typer callback)
_ctx: CLIContext | None = None


def get_context() -> CLIContext:
    """Get the current CLI context.

    Returns:
        The global CLI context instance

    Raises:
        RuntimeError: If context not initialized
    """
    if _ctx is None:
        raise RuntimeError("CLI context not initialized. This should not happen.")
    return _ctx


def set_context(ctx: CLIContext) -> None:
    """Set the global CLI context.

    Args:
        ctx: The CLI context instance to set
    """
    global _ctx
    _ctx = ctx
