"""Tests for mylife.services.recurrence: occurrence resolution."""

from datetime import date, timedelta
from types import SimpleNamespace

import pytest

from mylife.models.todo import Todo
from mylife.services.recurrence import (
    EventNotCompletableError,
    NoOccurrenceError,
    exclude_occurrence,
    is_completed_on,
    occurrences_between,
    occurs_on,
    toggle_completion,
)


def make_task(**overrides):
    fields = {
        "date": date(2024, 1, 10),  # a Wednesday
        "recurrence": "none",
        "completed": False,
        "completed_dates": [],
        "excluded_dates": [],
        "is_event": False,
    }
    fields.update(overrides)
    return SimpleNamespace(**fields)


class TestOccursOnSingle:
    def test_visible_only_on_anchor(self):
        task = make_task()
        assert occurs_on(task, date(2024, 1, 10)) is True
        assert occurs_on(task, date(2024, 1, 9)) is False
        assert occurs_on(task, date(2024, 1, 11)) is False

    def test_excluded_anchor_hides_task(self):
        task = make_task(excluded_dates=["2024-01-10"])
        assert occurs_on(task, date(2024, 1, 10)) is False

    def test_accepts_iso_string_anchor(self):
        task = make_task(date="2024-01-10")
        assert occurs_on(task, date(2024, 1, 10)) is True


class TestOccursOnRecurring:
    def test_daily_every_day_from_anchor(self):
        task = make_task(recurrence="daily")
        for offset in range(0, 400, 7):
            assert occurs_on(task, date(2024, 1, 10) + timedelta(days=offset))

    def test_daily_never_before_anchor(self):
        task = make_task(recurrence="daily")
        assert occurs_on(task, date(2024, 1, 9)) is False
        assert occurs_on(task, date(2023, 12, 31)) is False

    def test_weekly_only_on_anchor_weekday(self):
        task = make_task(recurrence="weekly")
        start = date(2024, 1, 1)
        visible = [start + timedelta(days=i) for i in range(60) if occurs_on(task, start + timedelta(days=i))]
        assert visible[0] == date(2024, 1, 10)
        assert all(d.weekday() == 2 for d in visible)  # Wednesday
        assert len(visible) == 8  # Jan 10 .. Feb 28

    def test_monthly_matches_day_of_month(self):
        task = make_task(recurrence="monthly")
        assert occurs_on(task, date(2024, 2, 10))
        assert occurs_on(task, date(2025, 7, 10))
        assert not occurs_on(task, date(2024, 2, 11))

    def test_monthly_on_31st_skips_short_months(self):
        task = make_task(date=date(2024, 1, 31), recurrence="monthly")
        assert not occurs_on(task, date(2024, 2, 29))
        assert not occurs_on(task, date(2024, 4, 30))
        assert occurs_on(task, date(2024, 3, 31))

    def test_yearly_matches_day_and_month(self):
        task = make_task(date=date(2020, 6, 15), recurrence="yearly", is_event=True)
        assert occurs_on(task, date(2024, 6, 15))
        assert not occurs_on(task, date(2024, 7, 15))
        assert not occurs_on(task, date(2019, 6, 15))

    def test_excluded_date_hides_only_that_occurrence(self):
        task = make_task(recurrence="daily", excluded_dates=["2024-01-12"])
        assert occurs_on(task, date(2024, 1, 11))
        assert not occurs_on(task, date(2024, 1, 12))
        assert occurs_on(task, date(2024, 1, 13))

    def test_unknown_recurrence_raises(self):
        task = make_task(recurrence="hourly")
        with pytest.raises(ValueError):
            occurs_on(task, date(2024, 1, 10))


class TestCompletion:
    def test_single_uses_stored_flag(self):
        assert is_completed_on(make_task(completed=True), date(2024, 5, 5)) is True
        assert is_completed_on(make_task(completed=False), date(2024, 1, 10)) is False

    def test_recurring_uses_completed_dates(self):
        task = make_task(recurrence="daily", completed=True, completed_dates=["2024-01-11"])
        assert is_completed_on(task, date(2024, 1, 11)) is True
        assert is_completed_on(task, date(2024, 1, 10)) is False

    def test_toggle_single_flips_flag(self):
        task = make_task()
        assert toggle_completion(task, date(2024, 1, 10)) is True
        assert task.completed is True
        assert toggle_completion(task, date(2024, 1, 10)) is False

    def test_toggle_recurring_twice_restores_state(self):
        task = make_task(recurrence="daily", completed_dates=["2024-01-10"])
        assert toggle_completion(task, date(2024, 1, 12)) is True
        assert task.completed_dates == ["2024-01-10", "2024-01-12"]
        assert toggle_completion(task, date(2024, 1, 12)) is False
        assert task.completed_dates == ["2024-01-10"]

    def test_toggle_recurring_leaves_other_dates(self):
        task = make_task(recurrence="weekly", completed_dates=["2024-01-17"])
        toggle_completion(task, date(2024, 1, 24))
        assert is_completed_on(task, date(2024, 1, 17))
        assert is_completed_on(task, date(2024, 1, 24))
        assert not is_completed_on(task, date(2024, 1, 31))

    def test_toggle_event_rejected_without_mutation(self):
        task = make_task(recurrence="yearly", is_event=True)
        with pytest.raises(EventNotCompletableError):
            toggle_completion(task, date(2024, 1, 10))
        assert task.completed_dates == []

    @pytest.mark.parametrize("day", [date(2024, 1, 11), date(2024, 1, 3), date(2024, 1, 17)])
    def test_toggle_recurring_off_occurrence_rejected(self, day):
        task = make_task(recurrence="weekly", excluded_dates=["2024-01-17"])
        with pytest.raises(NoOccurrenceError):
            toggle_completion(task, day)
        assert task.completed_dates == []

    def test_works_on_orm_rows(self):
        todo = Todo(
            title="Water plants",
            date=date(2024, 1, 10),
            recurrence="daily",
            completed=False,
            completed_dates=[],
            excluded_dates=[],
            is_event=False,
        )
        toggle_completion(todo, date(2024, 1, 11))
        assert todo.completed_dates == ["2024-01-11"]


class TestExcludeAndExpand:
    def test_exclude_is_idempotent(self):
        task = make_task(recurrence="daily")
        exclude_occurrence(task, date(2024, 1, 15))
        exclude_occurrence(task, date(2024, 1, 15))
        assert task.excluded_dates == ["2024-01-15"]
        assert task.date == date(2024, 1, 10)

    def test_occurrences_between_weekly(self):
        task = make_task(recurrence="weekly", excluded_dates=["2024-01-24"])
        days = list(occurrences_between(task, date(2024, 1, 1), date(2024, 1, 31)))
        assert days == [date(2024, 1, 10), date(2024, 1, 17), date(2024, 1, 31)]

    def test_occurrences_between_single_outside_range(self):
        task = make_task()
        assert list(occurrences_between(task, date(2024, 2, 1), date(2024, 2, 28))) == []
        assert list(occurrences_between(task, date(2024, 1, 1), date(2024, 1, 31))) == [date(2024, 1, 10)]

    def test_occurrences_between_inverted_range_is_empty(self):
        task = make_task(recurrence="daily")
        assert list(occurrences_between(task, date(2024, 3, 1), date(2024, 2, 1))) == []
