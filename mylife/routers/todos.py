"""Task routes: CRUD plus per-date occurrence views, toggles and skips."""
import datetime as dt
import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from mylife.db.session import get_db
from mylife.models.todo import Todo
from mylife.routers.deps import CurrentUserId
from mylife.schemas.base import SuccessSchema
from mylife.schemas.todo import (
    TodoCreateSchema,
    TodoOccurrenceOutSchema,
    TodoOutSchema,
    TodoToggleOutSchema,
    TodoToggleSchema,
    TodoUpdateSchema,
)
from mylife.services.recurrence import (
    EventNotCompletableError,
    NoOccurrenceError,
    exclude_occurrence,
    is_completed_on,
    is_recurring,
    occurrences_between,
    toggle_completion,
)

router = APIRouter(prefix="/api/todos", tags=["todos"])
logger = logging.getLogger(__name__)

MAX_RANGE_DAYS = 366
DATE_LIST_FIELDS = ("completed_dates", "excluded_dates")
NULLABLE_FIELDS = ("description", "time")


def _iso_list(days) -> list[str]:
    return sorted({d.isoformat() for d in days})


def _occurrence_view(todo: Todo, day: dt.date) -> TodoOccurrenceOutSchema:
    base = TodoOutSchema.model_validate(todo).model_dump()
    return TodoOccurrenceOutSchema(
        **base,
        occurrence_date=day,
        completed_on_date=is_completed_on(todo, day),
    )


def _time_sort_key(view: TodoOccurrenceOutSchema):
    # untimed tasks after timed ones
    return (view.occurrence_date, view.time is None, view.time or "")


async def _get_owned(db: AsyncSession, user_id: str, todo_id: str) -> Todo:
    result = await db.execute(select(Todo).where(Todo.id == todo_id, Todo.user_id == user_id))
    todo = result.scalar_one_or_none()
    if todo is None:
        raise HTTPException(status_code=404, detail="Todo not found")
    return todo


@router.get("", response_model=list[TodoOccurrenceOutSchema] | list[TodoOutSchema])
async def list_todos(
    user_id: CurrentUserId,
    db: Annotated[AsyncSession, Depends(get_db)],
    date: dt.date | None = None,
    start: dt.date | None = None,
    end: dt.date | None = None,
):
    """List stored tasks, or expand them into occurrences for a date or date range."""
    result = await db.execute(
        select(Todo).where(Todo.user_id == user_id).order_by(Todo.date.asc(), Todo.time.asc())
    )
    todos = list(result.scalars().all())

    if date is None and start is None and end is None:
        return [TodoOutSchema.model_validate(t) for t in todos]

    if date is not None:
        start = end = date
    elif start is None or end is None:
        raise HTTPException(status_code=400, detail="Both start and end are required")
    if end < start:
        raise HTTPException(status_code=400, detail="end must not be before start")
    if (end - start).days >= MAX_RANGE_DAYS:
        raise HTTPException(status_code=400, detail=f"Range is limited to {MAX_RANGE_DAYS} days")

    views = [_occurrence_view(t, day) for t in todos for day in occurrences_between(t, start, end)]
    views.sort(key=_time_sort_key)
    logger.debug("Expanded %d todos into %d occurrences for %s..%s", len(todos), len(views), start, end)
    return views


@router.post("", response_model=SuccessSchema, status_code=201)
async def create_todo(
    body: TodoCreateSchema,
    user_id: CurrentUserId,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    data = body.model_dump(exclude_none=True)
    for field in DATE_LIST_FIELDS:
        data[field] = _iso_list(data.get(field, []))
    if body.id is not None and await db.get(Todo, body.id) is not None:
        raise HTTPException(status_code=400, detail="Todo id already exists")

    todo = Todo(user_id=user_id, **data)
    db.add(todo)
    await db.commit()
    logger.info("Todo created: %s (recurrence=%s)", todo.id, todo.recurrence)
    return SuccessSchema(id=todo.id)


@router.put("", response_model=SuccessSchema)
async def update_todo(
    body: TodoUpdateSchema,
    user_id: CurrentUserId,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    todo = await _get_owned(db, user_id, body.id)
    changes = body.model_dump(exclude_unset=True, exclude={"id"})
    for field, value in changes.items():
        if value is None and field not in NULLABLE_FIELDS:
            continue
        if field in DATE_LIST_FIELDS:
            value = _iso_list(value)
        setattr(todo, field, value)
    await db.commit()
    return SuccessSchema(id=todo.id)


@router.delete("", response_model=SuccessSchema)
async def delete_todo(
    user_id: CurrentUserId,
    db: Annotated[AsyncSession, Depends(get_db)],
    todo_id: Annotated[str | None, Query(alias="id")] = None,
    date: dt.date | None = None,
):
    """Delete a task, or with `date` skip only that occurrence of a recurring task."""
    if not todo_id:
        raise HTTPException(status_code=400, detail="id is required")
    todo = await _get_owned(db, user_id, todo_id)

    if date is not None and is_recurring(todo):
        exclude_occurrence(todo, date)
        logger.info("Todo %s: occurrence %s excluded", todo.id, date)
    else:
        await db.delete(todo)
        logger.info("Todo deleted: %s", todo_id)
    await db.commit()
    return SuccessSchema(id=todo_id)


@router.post("/{todo_id}/toggle", response_model=TodoToggleOutSchema)
async def toggle_todo(
    todo_id: str,
    body: TodoToggleSchema,
    user_id: CurrentUserId,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """Flip completion of a task, or of one occurrence of a recurring task."""
    todo = await _get_owned(db, user_id, todo_id)
    if is_recurring(todo) and body.date is None:
        raise HTTPException(status_code=400, detail="date is required for recurring tasks")

    try:
        completed = toggle_completion(todo, body.date or todo.date)
    except (EventNotCompletableError, NoOccurrenceError) as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    await db.commit()
    return TodoToggleOutSchema(id=todo.id, date=body.date, completed=completed)
