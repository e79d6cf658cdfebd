"""Workout tracker routes: body parts, exercises and workout sessions."""
import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from mylife.db.session import get_db
from mylife.models.workout import DEFAULT_BODY_PARTS, BodyPart, Exercise, WorkoutSession
from mylife.routers.deps import CurrentUserId
from mylife.schemas.base import SuccessSchema
from mylife.schemas.workout import (
    BodyPartCreateSchema,
    BodyPartOutSchema,
    BodyPartUpdateSchema,
    ExerciseCreateSchema,
    ExerciseOutSchema,
    ExerciseUpdateSchema,
    WorkoutCreateSchema,
    WorkoutOutSchema,
    WorkoutUpdateSchema,
)

router = APIRouter(prefix="/api", tags=["workouts"])
logger = logging.getLogger(__name__)


async def _get_owned(db: AsyncSession, model, user_id: str, row_id: str | None, label: str):
    if not row_id:
        raise HTTPException(status_code=400, detail="id is required")
    result = await db.execute(select(model).where(model.id == row_id, model.user_id == user_id))
    row = result.scalar_one_or_none()
    if row is None:
        raise HTTPException(status_code=404, detail=f"{label} not found")
    return row


async def _ensure_new_id(db: AsyncSession, model, row_id: str | None, label: str) -> None:
    if row_id is not None and await db.get(model, row_id) is not None:
        raise HTTPException(status_code=400, detail=f"{label} id already exists")


def _apply_changes(row, changes: dict) -> None:
    for field, value in changes.items():
        if value is not None:
            setattr(row, field, value)


# ---------- body parts ----------

async def seed_default_body_parts(db: AsyncSession, user_id: str) -> list[BodyPart]:
    """Create the default taxonomy for a user who has none."""
    parts = [
        BodyPart(user_id=user_id, name=name, color=color, sort_order=i)
        for i, (name, color) in enumerate(DEFAULT_BODY_PARTS)
    ]
    db.add_all(parts)
    await db.commit()
    logger.info("Seeded %d default body parts for %s", len(parts), user_id)
    return parts


@router.get("/bodyparts", response_model=list[BodyPartOutSchema])
async def list_body_parts(
    user_id: CurrentUserId,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    query = (
        select(BodyPart)
        .where(BodyPart.user_id == user_id)
        .order_by(BodyPart.sort_order.asc(), BodyPart.created_at.asc())
    )
    parts = list((await db.execute(query)).scalars().all())
    if not parts:
        await seed_default_body_parts(db, user_id)
        parts = list((await db.execute(query)).scalars().all())
    return parts


@router.post("/bodyparts", response_model=SuccessSchema, status_code=201)
async def create_body_part(
    body: BodyPartCreateSchema,
    user_id: CurrentUserId,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    await _ensure_new_id(db, BodyPart, body.id, "Body part")
    part = BodyPart(user_id=user_id, **body.model_dump(exclude_none=True))
    db.add(part)
    await db.commit()
    return SuccessSchema(id=part.id)


@router.put("/bodyparts", response_model=SuccessSchema)
async def update_body_part(
    body: BodyPartUpdateSchema,
    user_id: CurrentUserId,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    part = await _get_owned(db, BodyPart, user_id, body.id, "Body part")
    _apply_changes(part, body.model_dump(exclude_unset=True, exclude={"id"}))
    await db.commit()
    return SuccessSchema(id=part.id)


@router.delete("/bodyparts", response_model=SuccessSchema)
async def delete_body_part(
    user_id: CurrentUserId,
    db: Annotated[AsyncSession, Depends(get_db)],
    part_id: Annotated[str | None, Query(alias="id")] = None,
):
    part = await _get_owned(db, BodyPart, user_id, part_id, "Body part")
    await db.delete(part)
    await db.commit()
    return SuccessSchema(id=part_id)


# ---------- exercises ----------

@router.get("/exercises", response_model=list[ExerciseOutSchema])
async def list_exercises(
    user_id: CurrentUserId,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    result = await db.execute(
        select(Exercise)
        .where(Exercise.user_id == user_id)
        .order_by(Exercise.body_part.asc(), Exercise.name.asc())
    )
    return result.scalars().all()


@router.post("/exercises", response_model=SuccessSchema, status_code=201)
async def create_exercise(
    body: ExerciseCreateSchema,
    user_id: CurrentUserId,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    await _ensure_new_id(db, Exercise, body.id, "Exercise")
    exercise = Exercise(user_id=user_id, **body.model_dump(exclude_none=True))
    db.add(exercise)
    await db.commit()
    return SuccessSchema(id=exercise.id)


@router.put("/exercises", response_model=SuccessSchema)
async def update_exercise(
    body: ExerciseUpdateSchema,
    user_id: CurrentUserId,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    exercise = await _get_owned(db, Exercise, user_id, body.id, "Exercise")
    changes = body.model_dump(exclude_unset=True, exclude={"id"})
    # a new personal record may be cleared explicitly
    if "personal_record_weight" in changes and changes["personal_record_weight"] is None:
        exercise.personal_record_weight = None
    _apply_changes(exercise, changes)
    await db.commit()
    return SuccessSchema(id=exercise.id)


@router.delete("/exercises", response_model=SuccessSchema)
async def delete_exercise(
    user_id: CurrentUserId,
    db: Annotated[AsyncSession, Depends(get_db)],
    exercise_id: Annotated[str | None, Query(alias="id")] = None,
):
    exercise = await _get_owned(db, Exercise, user_id, exercise_id, "Exercise")
    await db.delete(exercise)
    await db.commit()
    return SuccessSchema(id=exercise_id)


# ---------- workout sessions ----------

def _dump_exercises(exercises) -> list[dict]:
    return [e.model_dump(by_alias=True) for e in exercises]


@router.get("/workouts", response_model=list[WorkoutOutSchema])
async def list_workouts(
    user_id: CurrentUserId,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    result = await db.execute(
        select(WorkoutSession)
        .where(WorkoutSession.user_id == user_id)
        .order_by(WorkoutSession.date.desc())
    )
    return result.scalars().all()


@router.post("/workouts", response_model=SuccessSchema, status_code=201)
async def upsert_workout(
    body: WorkoutCreateSchema,
    user_id: CurrentUserId,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """Insert a session, or replace the exercises of an existing one with the same id."""
    session = await db.get(WorkoutSession, body.id) if body.id is not None else None
    if session is not None:
        if session.user_id != user_id:
            raise HTTPException(status_code=400, detail="Workout id already exists")
        session.exercises = _dump_exercises(body.exercises)
    else:
        session = WorkoutSession(user_id=user_id, date=body.date, exercises=_dump_exercises(body.exercises))
        if body.id is not None:
            session.id = body.id
        db.add(session)
    await db.commit()
    return SuccessSchema(id=session.id)


@router.put("/workouts", response_model=SuccessSchema)
async def update_workout(
    body: WorkoutUpdateSchema,
    user_id: CurrentUserId,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    session = await _get_owned(db, WorkoutSession, user_id, body.id, "Workout")
    if body.date is not None:
        session.date = body.date
    if body.exercises is not None:
        session.exercises = _dump_exercises(body.exercises)
    await db.commit()
    return SuccessSchema(id=session.id)


@router.delete("/workouts", response_model=SuccessSchema)
async def delete_workout(
    user_id: CurrentUserId,
    db: Annotated[AsyncSession, Depends(get_db)],
    workout_id: Annotated[str | None, Query(alias="id")] = None,
):
    session = await _get_owned(db, WorkoutSession, user_id, workout_id, "Workout")
    await db.delete(session)
    await db.commit()
    return SuccessSchema(id=workout_id)
