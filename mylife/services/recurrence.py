"""Occurrence resolution for tasks: visibility, completion and exceptions.

A task is stored once with an anchor date and a recurrence rule. Per-day
occurrences are computed on demand; the only per-day state kept on the row
is the set of completed dates and the set of excluded (skipped) dates.

All functions take any object exposing the Todo attributes (`date`,
`recurrence`, `completed`, `completed_dates`, `excluded_dates`,
`is_event`), so they work on ORM rows and plain test doubles alike.
"""
from collections.abc import Iterator
from datetime import date, timedelta

from mylife.models.common import Recurrence


class EventNotCompletableError(ValueError):
    """Raised when completion is toggled on an event-type task."""


class NoOccurrenceError(ValueError):
    """Raised when a recurring task has no occurrence on the requested date."""


def _key(day: date) -> str:
    return day.isoformat()


def _anchor(task) -> date:
    anchor = task.date
    if isinstance(anchor, str):
        anchor = date.fromisoformat(anchor)
    return anchor


def _recurrence(task) -> Recurrence:
    return Recurrence(task.recurrence or Recurrence.NONE.value)


def is_recurring(task) -> bool:
    return _recurrence(task) is not Recurrence.NONE


def occurs_on(task, day: date) -> bool:
    """Return True if the task has a visible occurrence on `day`."""
    if _key(day) in (task.excluded_dates or []):
        return False

    anchor = _anchor(task)
    recurrence = _recurrence(task)
    if recurrence is Recurrence.NONE:
        return day == anchor
    # recurrence never projects backward
    if day < anchor:
        return False

    if recurrence is Recurrence.DAILY:
        return True
    if recurrence is Recurrence.WEEKLY:
        return day.weekday() == anchor.weekday()
    if recurrence is Recurrence.MONTHLY:
        # no month-end clamping: an anchor on the 31st skips shorter months
        return day.day == anchor.day
    if recurrence is Recurrence.YEARLY:
        return day.day == anchor.day and day.month == anchor.month
    raise ValueError(f"Unhandled recurrence: {recurrence!r}")


def is_completed_on(task, day: date) -> bool:
    if not is_recurring(task):
        return bool(task.completed)
    return _key(day) in (task.completed_dates or [])


def toggle_completion(task, day: date) -> bool:
    """Flip completion for the occurrence on `day`; return the new state.

    Recurring tasks gain or lose `day` in completed_dates and no other date
    is touched; `day` must be one of their occurrences. Event tasks are
    never completable.
    """
    if task.is_event:
        raise EventNotCompletableError("Events cannot be completed")

    if not is_recurring(task):
        task.completed = not task.completed
        return task.completed

    if not occurs_on(task, day):
        raise NoOccurrenceError(f"No occurrence on {_key(day)}")

    done = set(task.completed_dates or [])
    key = _key(day)
    if key in done:
        done.discard(key)
    else:
        done.add(key)
    # assign a new list so the JSON column is flagged dirty
    task.completed_dates = sorted(done)
    return key in done


def exclude_occurrence(task, day: date) -> None:
    """Skip the occurrence on `day`, keeping the anchor and every other date."""
    excluded = set(task.excluded_dates or [])
    excluded.add(_key(day))
    task.excluded_dates = sorted(excluded)


def occurrences_between(task, start: date, end: date) -> Iterator[date]:
    """Yield each date in [start, end] on which the task occurs."""
    if end < start:
        return
    anchor = _anchor(task)
    if not is_recurring(task):
        if start <= anchor <= end and occurs_on(task, anchor):
            yield anchor
        return

    day = max(start, anchor)
    while day <= end:
        if occurs_on(task, day):
            yield day
        day += timedelta(days=1)
