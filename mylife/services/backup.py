"""Export and wholesale import of a user's own data."""
import logging
from datetime import datetime, timezone

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from mylife.models.shopping import ShoppingItem
from mylife.models.todo import Todo
from mylife.models.user import User
from mylife.models.workout import Exercise, WorkoutSession
from mylife.schemas.backup import (
    BACKUP_VERSION,
    BackupDataSchema,
    BackupExportDataSchema,
    BackupExportSchema,
    BackupImportResultSchema,
)
from mylife.schemas.shopping import ShoppingItemOutSchema
from mylife.schemas.todo import TodoOutSchema
from mylife.schemas.workout import ExerciseOutSchema, WorkoutOutSchema
from mylife.services.sharing import describe_item

logger = logging.getLogger(__name__)


async def _owned(db: AsyncSession, model, user_id: str, *order_by) -> list:
    result = await db.execute(select(model).where(model.user_id == user_id).order_by(*order_by))
    return list(result.scalars().all())


async def export_backup(db: AsyncSession, user: User) -> BackupExportSchema:
    """Snapshot the user's todos, own shopping items, exercises and workouts."""
    todos = await _owned(db, Todo, user.id, Todo.date.asc(), Todo.time.asc())
    items = await _owned(db, ShoppingItem, user.id, ShoppingItem.created_at.asc())
    exercises = await _owned(db, Exercise, user.id, Exercise.name.asc())
    workouts = await _owned(db, WorkoutSession, user.id, WorkoutSession.date.asc())

    return BackupExportSchema(
        version=BACKUP_VERSION,
        timestamp=datetime.now(timezone.utc),
        data=BackupExportDataSchema(
            todos=[TodoOutSchema.model_validate(t) for t in todos],
            shopping=[ShoppingItemOutSchema(**describe_item(i, user.name, user.id)) for i in items],
            exercises=[ExerciseOutSchema.model_validate(e) for e in exercises],
            workouts=[WorkoutOutSchema.model_validate(w) for w in workouts],
        ),
    )


def _iso_list(days) -> list[str]:
    return sorted({d.isoformat() for d in days})


async def import_backup(db: AsyncSession, user_id: str, data: BackupDataSchema) -> BackupImportResultSchema:
    """Replace the user's data with the backup contents in one transaction.

    Ids from the backup are kept so re-importing an export is stable.
    """
    for model in (Todo, ShoppingItem, Exercise, WorkoutSession):
        await db.execute(delete(model).where(model.user_id == user_id))

    for todo in data.todos:
        values = todo.model_dump(exclude_none=True)
        values["completed_dates"] = _iso_list(todo.completed_dates)
        values["excluded_dates"] = _iso_list(todo.excluded_dates)
        db.add(Todo(user_id=user_id, **values))
    for item in data.shopping:
        db.add(ShoppingItem(user_id=user_id, **item.model_dump(exclude_none=True)))
    for exercise in data.exercises:
        db.add(Exercise(user_id=user_id, **exercise.model_dump(exclude_none=True)))
    for workout in data.workouts:
        values = workout.model_dump(exclude_none=True, exclude={"exercises"})
        exercises = [e.model_dump(by_alias=True) for e in workout.exercises]
        db.add(WorkoutSession(user_id=user_id, exercises=exercises, **values))

    await db.commit()
    logger.info(
        "Backup imported for %s: %d todos, %d shopping, %d exercises, %d workouts",
        user_id,
        len(data.todos),
        len(data.shopping),
        len(data.exercises),
        len(data.workouts),
    )
    return BackupImportResultSchema(
        todos=len(data.todos),
        shopping=len(data.shopping),
        exercises=len(data.exercises),
        workouts=len(data.workouts),
    )
