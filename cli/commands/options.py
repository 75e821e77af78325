"""Selection options shared by the show and rule commands."""

import typer
from typing_extensions import Annotated

DateOption = Annotated[
    str | None,
    typer.Option(
        "--date",
        "-d",
        help="Anchor date: YYYY-MM-DD, today, or none (default: today)",
    ),
]
RecurringOption = Annotated[
    bool,
    typer.Option(
        "--recurring",
        "-r",
        help="Turn recurrence on (implied by --type)",
    ),
]
TypeOption = Annotated[
    str | None,
    typer.Option(
        "--type",
        "-t",
        help="Recurrence pattern: daily, weekly, biWeekly, monthly, yearly, custom",
    ),
]
EveryOption = Annotated[
    str | None,
    typer.Option(
        "--every",
        "-e",
        help="Custom interval in days (invalid values become 1)",
    ),
]
RRuleOption = Annotated[
    str | None,
    typer.Option(
        "--rrule",
        help="Load recurrence from an iCalendar RRULE (e.g. FREQ=WEEKLY;INTERVAL=2)",
    ),
]
