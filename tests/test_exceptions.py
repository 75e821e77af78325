"""Tests for exception classes."""

import pytest

from app.exceptions import (
    InvalidRecurrenceRuleError,
    PickerError,
    UnsupportedFormatError,
    UnsupportedRecurrenceError,
)


def test_picker_error():
    """Test PickerError base exception."""
    error = PickerError("Test error")
    assert str(error) == "Test error"
    assert isinstance(error, Exception)


@pytest.mark.parametrize(
    "error_class",
    [InvalidRecurrenceRuleError, UnsupportedRecurrenceError, UnsupportedFormatError],
)
def test_picker_error_subclasses(error_class):
    """Test every picker error derives from PickerError."""
    error = error_class("Something failed")
    assert str(error) == "Something failed"
    assert isinstance(error, PickerError)
