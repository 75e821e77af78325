"""Stateful recurrence model backing the date picker."""

import logging
from datetime import date
from typing import Callable, List, Optional

from app.constants import DEFAULT_CUSTOM_INTERVAL_DAYS
from app.models.rule import RecurrenceRule
from app.models.selection import RecurrenceType, Selection, SelectionSummary
from app.recurrence import (
    build_rule,
    describe_selection,
    parse_interval,
    summarize_selection,
)

logger = logging.getLogger(__name__)

SelectionListener = Callable[[Selection], None]


class RecurrenceModel:
    """Owns the picker selection and derives descriptions and rules from it.

    Picker operations are total: invalid input is coerced or ignored, never
    raised. Only apply_rule can fail, and it does so before any change.
    Subscribed listeners are called with the new selection after each
    operation that changed it.

    Usage:
        model = RecurrenceModel()
        model.set_recurring(True)
        model.describe()  # "Repeats every Friday"
    """

    def __init__(
        self,
        selection: Optional[Selection] = None,
        custom_interval_days: int = DEFAULT_CUSTOM_INTERVAL_DAYS,
    ):
        """Initialize the model.

        Args:
            selection: Starting selection; defaults to today with recurrence off.
            custom_interval_days: Initial custom interval when no selection is given.
        """
        if selection is None:
            selection = Selection(
                custom_interval_days=parse_interval(custom_interval_days)
            )
        self._selection = selection
        self._listeners: List[SelectionListener] = []

    @property
    def selection(self) -> Selection:
        """Copy of the current selection."""
        return self._selection.model_copy()

    # ─────────────────────────────────────────────────────────────────────
    # Subscriptions
    # ─────────────────────────────────────────────────────────────────────

    def subscribe(self, listener: SelectionListener) -> None:
        """Call listener with the new selection after every change."""
        self._listeners.append(listener)

    def unsubscribe(self, listener: SelectionListener) -> None:
        """Stop notifying listener; unknown listeners are ignored."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _update(self, **changes) -> None:
        """Apply field changes and notify listeners if anything changed."""
        updated = self._selection.model_copy(update=changes)
        if updated.model_dump() == self._selection.model_dump():
            return
        self._selection = updated
        for listener in list(self._listeners):
            listener(self.selection)

    # ─────────────────────────────────────────────────────────────────────
    # Operations
    # ─────────────────────────────────────────────────────────────────────

    def select_date(self, new_date: Optional[date]) -> None:
        """Replace the anchor date; None clears it."""
        self._update(anchor_date=new_date)

    def select_today(self) -> None:
        self.select_date(date.today())

    def clear_date(self) -> None:
        self.select_date(None)

    def set_recurring(self, flag: bool) -> None:
        """Toggle recurrence.

        Turning it off resets the pattern to none. Turning it on keeps a
        previously chosen pattern, or picks weekly if there is none.
        """
        if not flag:
            self._update(recurring=False, recurrence_type=RecurrenceType.NONE)
            return

        recurrence_type = self._selection.recurrence_type
        if recurrence_type is RecurrenceType.NONE:
            recurrence_type = RecurrenceType.WEEKLY
        self._update(recurring=True, recurrence_type=recurrence_type)

    def set_recurrence_type(self, recurrence_type: RecurrenceType | str) -> None:
        """Choose the recurrence pattern.

        Ignored while recurrence is off or for unknown pattern names.
        """
        if not self._selection.recurring:
            logger.debug(
                f"Ignoring recurrence type {recurrence_type!s}: recurrence is off"
            )
            return

        if not isinstance(recurrence_type, RecurrenceType):
            parsed = RecurrenceType.parse(str(recurrence_type))
            if parsed is None:
                logger.warning(f"Unknown recurrence type: {recurrence_type}")
                return
            recurrence_type = parsed

        # Recurring selections always carry a pattern
        if recurrence_type is RecurrenceType.NONE:
            recurrence_type = RecurrenceType.WEEKLY

        self._update(recurrence_type=recurrence_type)

    def set_custom_interval_days(self, raw: str | int | float) -> None:
        """Set the custom interval; unparseable or < 1 values become 1."""
        days = parse_interval(raw)
        if str(days) != str(raw).strip():
            logger.info(f"Custom interval {raw!r} coerced to {days}")
        self._update(custom_interval_days=days)

    def apply_rule(self, rule: RecurrenceRule) -> None:
        """Load a recurrence rule into the selection as a single change.

        The rule's day and month parts must match its start date, or the
        selected date when the rule has none.

        Raises:
            UnsupportedRecurrenceError: If the rule has no matching pattern
                or its day and month parts disagree with the anchor date.
        """
        anchor = rule.dtstart
        if anchor is None:
            anchor = self._selection.anchor_date
        changes = {
            "recurring": True,
            "recurrence_type": rule.recurrence_type,
        }
        rule.check_anchor(anchor)

        if rule.custom_interval_days is not None:
            changes["custom_interval_days"] = rule.custom_interval_days
        if rule.dtstart is not None:
            changes["anchor_date"] = rule.dtstart
        self._update(**changes)

    # ─────────────────────────────────────────────────────────────────────
    # Derivations
    # ─────────────────────────────────────────────────────────────────────

    def describe(self) -> str:
        return describe_selection(self._selection)

    def summary(self) -> SelectionSummary:
        return summarize_selection(self._selection)

    def to_rule(self) -> Optional[RecurrenceRule]:
        return build_rule(self._selection)
