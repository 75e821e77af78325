"""Tests for the stateful recurrence model."""

import logging
from datetime import date

import pytest

from app.exceptions import UnsupportedRecurrenceError
from app.models.rule import RecurrenceRule
from app.models.selection import RecurrenceType, Selection
from app.recurrence_model import RecurrenceModel


def test_default_model():
    """Test a fresh model starts today with recurrence off."""
    model = RecurrenceModel()
    selection = model.selection
    assert selection.anchor_date == date.today()
    assert selection.recurring is False
    assert selection.recurrence_type == RecurrenceType.NONE
    assert selection.custom_interval_days == 4


def test_default_model_custom_interval():
    """Test the initial custom interval can be configured and is coerced."""
    assert RecurrenceModel(custom_interval_days=7).selection.custom_interval_days == 7
    assert RecurrenceModel(custom_interval_days=0).selection.custom_interval_days == 1


def test_selection_is_a_copy(model):
    """Test mutating the returned selection does not touch the model."""
    selection = model.selection
    selection.recurring = True
    assert model.selection.recurring is False


def test_scenario_no_recurrence(model):
    """Test a fresh selection describes no recurrence."""
    assert model.describe() == "No recurrence"


def test_scenario_enable_recurrence(model):
    """Test enabling recurrence defaults to weekly on the anchor weekday."""
    model.set_recurring(True)
    assert model.selection.recurrence_type == RecurrenceType.WEEKLY
    assert model.describe() == "Repeats every Friday"


def test_scenario_custom_interval(model):
    """Test switching to a custom interval."""
    model.set_recurring(True)
    model.set_recurrence_type(RecurrenceType.CUSTOM)
    model.set_custom_interval_days("10")
    assert model.describe() == "Repeats every 10 days"


def test_scenario_monthly_without_date(model):
    """Test clearing the date leaves an empty placeholder."""
    model.set_recurring(True)
    model.set_recurrence_type(RecurrenceType.MONTHLY)
    model.select_date(None)
    assert model.describe() == "Repeats monthly on the "


def test_set_recurring_false_resets_type(model):
    """Test turning recurrence off resets the pattern."""
    model.set_recurring(True)
    model.set_recurrence_type(RecurrenceType.YEARLY)
    model.set_recurring(False)
    assert model.selection.recurring is False
    assert model.selection.recurrence_type == RecurrenceType.NONE
    assert model.describe() == "No recurrence"


def test_recurring_selection_without_pattern_gets_weekly(friday):
    """Test a recurring starting selection is given the weekly pattern."""
    model = RecurrenceModel(selection=Selection(anchor_date=friday, recurring=True))
    assert model.selection.recurrence_type == RecurrenceType.WEEKLY
    assert model.describe() == "Repeats every Friday"
    assert model.to_rule().to_rrule() == "FREQ=WEEKLY;BYDAY=FR"


def test_non_recurring_selection_drops_pattern(friday):
    """Test a non-recurring starting selection carries no pattern."""
    model = RecurrenceModel(
        selection=Selection(
            anchor_date=friday, recurring=False, recurrence_type=RecurrenceType.DAILY
        )
    )
    assert model.selection.recurrence_type == RecurrenceType.NONE
    model.set_recurring(True)
    assert model.selection.recurrence_type == RecurrenceType.WEEKLY


def test_set_recurring_true_twice(model):
    """Test enabling twice keeps the chosen pattern."""
    model.set_recurring(True)
    model.set_recurrence_type(RecurrenceType.MONTHLY)
    model.set_recurring(True)
    assert model.selection.recurrence_type == RecurrenceType.MONTHLY


def test_set_recurrence_type_ignored_when_not_recurring(model, caplog):
    """Test choosing a pattern while recurrence is off is a no-op."""
    with caplog.at_level(logging.DEBUG, logger="app.recurrence_model"):
        model.set_recurrence_type(RecurrenceType.DAILY)
    assert model.selection.recurrence_type == RecurrenceType.NONE
    assert "recurrence is off" in caplog.text


def test_set_recurrence_type_accepts_strings(model):
    """Test pattern names are accepted."""
    model.set_recurring(True)
    model.set_recurrence_type("bi-weekly")
    assert model.selection.recurrence_type == RecurrenceType.BIWEEKLY
    assert model.describe() == "every 2 weeks on Friday"


def test_set_recurrence_type_unknown_string(model, caplog):
    """Test unknown pattern names are ignored with a warning."""
    model.set_recurring(True)
    with caplog.at_level(logging.WARNING, logger="app.recurrence_model"):
        model.set_recurrence_type("fortnightly")
    assert model.selection.recurrence_type == RecurrenceType.WEEKLY
    assert "Unknown recurrence type" in caplog.text


def test_set_recurrence_type_none_while_recurring(model):
    """Test a recurring selection never rests without a pattern."""
    model.set_recurring(True)
    model.set_recurrence_type(RecurrenceType.DAILY)
    model.set_recurrence_type(RecurrenceType.NONE)
    assert model.selection.recurring is True
    assert model.selection.recurrence_type == RecurrenceType.WEEKLY


def test_set_recurrence_type_keeps_interval(model):
    """Test changing pattern does not touch the custom interval."""
    model.set_recurring(True)
    model.set_custom_interval_days("9")
    model.set_recurrence_type(RecurrenceType.DAILY)
    model.set_recurrence_type(RecurrenceType.CUSTOM)
    assert model.selection.custom_interval_days == 9


@pytest.mark.parametrize("raw", ["0", "", "-5", "abc"])
def test_set_custom_interval_days_coerces(model, raw):
    """Test invalid intervals become one."""
    model.set_custom_interval_days(raw)
    assert model.selection.custom_interval_days == 1


def test_set_custom_interval_days_valid(model):
    """Test a valid interval is stored."""
    model.set_custom_interval_days("7")
    assert model.selection.custom_interval_days == 7


def test_custom_pluralization_boundary(model):
    """Test singular and plural day descriptions."""
    model.set_recurring(True)
    model.set_recurrence_type(RecurrenceType.CUSTOM)
    model.set_custom_interval_days(1)
    assert model.describe().endswith("1 day")
    model.set_custom_interval_days(2)
    assert model.describe().endswith("2 days")


def test_select_date_idempotent(model):
    """Test selecting the same date twice gives the same description."""
    model.set_recurring(True)
    model.select_date(date(2024, 7, 4))
    first = model.describe()
    model.select_date(date(2024, 7, 4))
    assert model.describe() == first == "Repeats every Thursday"


def test_select_date_keeps_recurrence(model):
    """Test changing the date leaves recurrence fields alone."""
    model.set_recurring(True)
    model.set_recurrence_type(RecurrenceType.YEARLY)
    model.select_date(date(2024, 12, 25))
    assert model.selection.recurrence_type == RecurrenceType.YEARLY
    assert model.describe() == "Repeats yearly on December 25"


def test_select_today_and_clear(model):
    """Test the Today and Clear shortcuts."""
    model.clear_date()
    assert model.selection.anchor_date is None
    model.select_today()
    assert model.selection.anchor_date == date.today()


def test_summary(model):
    """Test summary follows the selection."""
    summary = model.summary()
    assert summary.date == "March 15, 2024"
    assert summary.weekday == "Friday"
    assert summary.recurrence is None

    model.set_recurring(True)
    assert model.summary().recurrence == "Repeats every Friday"

    model.clear_date()
    assert model.summary().date is None


def test_to_rule(model):
    """Test the rule follows the selection."""
    assert model.to_rule() is None
    model.set_recurring(True)
    assert model.to_rule().to_rrule() == "FREQ=WEEKLY;BYDAY=FR"


def test_apply_rule(model):
    """Test loading a custom rule."""
    model.apply_rule(RecurrenceRule.from_rrule("FREQ=DAILY;INTERVAL=10"))
    selection = model.selection
    assert selection.recurring is True
    assert selection.recurrence_type == RecurrenceType.CUSTOM
    assert selection.custom_interval_days == 10
    assert selection.anchor_date == date(2024, 3, 15)
    assert model.describe() == "Repeats every 10 days"


def test_apply_rule_with_dtstart(model):
    """Test a rule's start date becomes the anchor date."""
    rule = RecurrenceRule.from_rrule("FREQ=MONTHLY", dtstart=date(2024, 5, 22))
    model.apply_rule(rule)
    assert model.selection.anchor_date == date(2024, 5, 22)
    assert model.describe() == "Repeats monthly on the 22nd"


def test_apply_rule_unsupported(model):
    """Test rules without a matching pattern leave the selection unchanged."""
    before = model.selection
    with pytest.raises(UnsupportedRecurrenceError):
        model.apply_rule(RecurrenceRule(frequency="WEEKLY", interval=4))
    assert model.selection == before


def test_apply_rule_matching_parts(model):
    """Test day parts that match the selected date are accepted."""
    model.apply_rule(RecurrenceRule.from_rrule("FREQ=WEEKLY;BYDAY=FR"))
    assert model.describe() == "Repeats every Friday"
    assert model.to_rule().to_rrule() == "FREQ=WEEKLY;BYDAY=FR"


def test_apply_rule_weekday_mismatch(model):
    """Test a weekday that differs from the selected date is rejected."""
    before = model.selection
    with pytest.raises(UnsupportedRecurrenceError, match="BYDAY=MO"):
        model.apply_rule(RecurrenceRule.from_rrule("FREQ=WEEKLY;BYDAY=MO"))
    assert model.selection == before


def test_apply_rule_month_day_mismatch(model):
    """Test a month day that differs from the selected date is rejected."""
    received = []
    model.subscribe(received.append)
    with pytest.raises(UnsupportedRecurrenceError, match="BYMONTHDAY=3"):
        model.apply_rule(RecurrenceRule.from_rrule("FREQ=MONTHLY;BYMONTHDAY=3"))
    assert model.selection.recurring is False
    assert received == []


def test_apply_rule_parts_checked_against_dtstart(model):
    """Test the rule's own start date is the anchor for its parts."""
    rule = RecurrenceRule.from_rrule(
        "FREQ=YEARLY;BYMONTH=9;BYMONTHDAY=30", dtstart=date(2024, 9, 30)
    )
    model.apply_rule(rule)
    assert model.selection.anchor_date == date(2024, 9, 30)
    assert model.describe() == "Repeats yearly on September 30"

    with pytest.raises(UnsupportedRecurrenceError):
        model.apply_rule(
            RecurrenceRule.from_rrule("FREQ=WEEKLY;BYDAY=FR", dtstart=date(2024, 3, 18))
        )


def test_apply_rule_parts_without_date(model):
    """Test day parts cannot be loaded when no date is selected."""
    model.clear_date()
    with pytest.raises(UnsupportedRecurrenceError, match="need a selected date"):
        model.apply_rule(RecurrenceRule.from_rrule("FREQ=WEEKLY;BYDAY=FR"))
    model.apply_rule(RecurrenceRule.from_rrule("FREQ=DAILY"))
    assert model.describe() == "Repeats every day"


def test_apply_rule_parts_outside_pattern(model):
    """Test constructed rules with parts their pattern cannot hold are rejected."""
    with pytest.raises(UnsupportedRecurrenceError):
        model.apply_rule(RecurrenceRule(frequency="MONTHLY", by_weekday="FR"))


def test_subscribe_notifies_on_change(model):
    """Test listeners receive the new selection after each change."""
    received = []
    model.subscribe(received.append)

    model.set_recurring(True)
    model.set_recurrence_type(RecurrenceType.DAILY)

    assert len(received) == 2
    assert received[0].recurrence_type == RecurrenceType.WEEKLY
    assert received[1].recurrence_type == RecurrenceType.DAILY


def test_subscribe_skips_no_ops(model):
    """Test listeners are not called when nothing changed."""
    received = []
    model.subscribe(received.append)

    model.select_date(date(2024, 3, 15))
    model.set_recurring(False)
    model.set_recurrence_type(RecurrenceType.DAILY)

    assert received == []


def test_apply_rule_notifies_once(model):
    """Test loading a rule is a single change."""
    received = []
    model.subscribe(received.append)
    model.apply_rule(RecurrenceRule.from_rrule("FREQ=DAILY;INTERVAL=3"))
    assert len(received) == 1


def test_unsubscribe(model):
    """Test unsubscribed listeners are no longer called."""
    received = []
    model.subscribe(received.append)
    model.unsubscribe(received.append)
    model.set_recurring(True)
    assert received == []

    # Unknown listeners are ignored
    model.unsubscribe(print)
