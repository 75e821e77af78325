"""Shared constants for the date picker."""

# Custom interval shown when a session starts
DEFAULT_CUSTOM_INTERVAL_DAYS = 4

# Description used whenever recurrence is off
NO_RECURRENCE_TEXT = "No recurrence"

# Placeholder on the date button when no date is selected
NO_DATE_TEXT = "Pick a date"

# Default rule output format
DEFAULT_RULE_FORMAT = "rrule"
