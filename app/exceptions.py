"""Exception hierarchy for date picker operations."""


class PickerError(Exception):
    """Base exception for date picker operations."""

    pass


class InvalidRecurrenceRuleError(PickerError):
    """Recurrence rule text could not be parsed or has invalid values."""

    pass


class UnsupportedRecurrenceError(PickerError):
    """Well-formed recurrence rule the picker cannot express."""

    pass


class UnsupportedFormatError(PickerError):
    """Output format not supported."""

    pass
