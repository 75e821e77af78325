"""Typer application and command routing."""

import logging

import typer
from typing_extensions import Annotated

from cli import setup_logging
from cli.commands import config, interactive, rule, show
from cli.context import CLIContext, set_context

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Date picker with recurrence selection.",
    no_args_is_help=True,
    add_completion=False,
)


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show info messages on the console"),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Only show errors on the console"),
    ] = False,
) -> None:
    """Date picker with recurrence selection.

    Global options that apply to all commands.
    """
    ctx = CLIContext(verbose=verbose, quiet=quiet)
    set_context(ctx)
    setup_logging(verbose=verbose, quiet=quiet, config=ctx.config)
    logger.debug("CLI context initialized")


app.command("show")(show)
app.command("rule")(rule)
app.command("interactive")(interactive)
app.command("config")(config)


def main() -> None:
    """Main CLI entry point."""
    app()


if __name__ == "__main__":
    main()
