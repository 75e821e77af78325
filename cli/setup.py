"""CLI setup functions for rule writers."""

from app.exceptions import UnsupportedFormatError
from app.output.json_writer import JSONWriter
from app.output.rrule_writer import RRuleWriter


def setup_writer(format: str):
    """Get writer for format."""
    if format == "rrule":
        return RRuleWriter()
    elif format == "json":
        return JSONWriter()
    else:
        raise UnsupportedFormatError(f"Unsupported output format: {format}")
