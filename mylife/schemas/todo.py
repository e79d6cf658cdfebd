"""Pydantic schemas for tasks and their per-date occurrence views."""
import datetime as dt

from pydantic import Field

from mylife.models.common import Priority, Recurrence
from mylife.schemas.base import CamelSchema

TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"


class TodoCreateSchema(CamelSchema):
    id: str | None = Field(default=None, max_length=64)
    title: str = Field(min_length=1, max_length=255)
    description: str | None = None
    completed: bool = False
    date: dt.date
    time: str | None = Field(default=None, pattern=TIME_PATTERN)
    priority: Priority = Priority.MEDIUM
    recurrence: Recurrence = Recurrence.NONE
    completed_dates: list[dt.date] = []
    excluded_dates: list[dt.date] = []
    is_event: bool = False


class TodoUpdateSchema(CamelSchema):
    """Only the fields present in the request body are written."""

    id: str
    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    completed: bool | None = None
    date: dt.date | None = None
    time: str | None = Field(default=None, pattern=TIME_PATTERN)
    priority: Priority | None = None
    recurrence: Recurrence | None = None
    completed_dates: list[dt.date] | None = None
    excluded_dates: list[dt.date] | None = None
    is_event: bool | None = None


class TodoOutSchema(CamelSchema):
    id: str
    title: str
    description: str | None = None
    completed: bool
    date: dt.date
    time: str | None = None
    priority: Priority
    recurrence: Recurrence
    completed_dates: list[dt.date] = []
    excluded_dates: list[dt.date] = []
    is_event: bool = False
    created_at: dt.datetime | None = None


class TodoOccurrenceOutSchema(TodoOutSchema):
    occurrence_date: dt.date
    completed_on_date: bool


class TodoToggleSchema(CamelSchema):
    # required for recurring tasks; ignored otherwise
    date: dt.date | None = None


class TodoToggleOutSchema(CamelSchema):
    id: str
    date: dt.date | None = None
    completed: bool
