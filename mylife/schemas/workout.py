"""Pydantic schemas for body parts, exercises and workout sessions."""
import datetime as dt

from pydantic import Field

from mylife.schemas.base import CamelSchema


class BodyPartCreateSchema(CamelSchema):
    id: str | None = Field(default=None, max_length=64)
    name: str = Field(min_length=1, max_length=64)
    color: str = Field(min_length=1, max_length=16)
    sort_order: int = 0


class BodyPartUpdateSchema(CamelSchema):
    id: str
    name: str | None = Field(default=None, min_length=1, max_length=64)
    color: str | None = Field(default=None, min_length=1, max_length=16)
    sort_order: int | None = None


class BodyPartOutSchema(CamelSchema):
    id: str
    name: str
    color: str
    sort_order: int


class ExerciseCreateSchema(CamelSchema):
    id: str | None = Field(default=None, max_length=64)
    name: str = Field(min_length=1, max_length=255)
    body_part: str = Field(min_length=1, max_length=64)
    sets: int = Field(default=3, ge=1)
    reps: int = Field(default=10, ge=1)
    personal_record_weight: float | None = Field(default=None, ge=0)


class ExerciseUpdateSchema(CamelSchema):
    id: str
    name: str | None = Field(default=None, min_length=1, max_length=255)
    body_part: str | None = Field(default=None, min_length=1, max_length=64)
    sets: int | None = Field(default=None, ge=1)
    reps: int | None = Field(default=None, ge=1)
    personal_record_weight: float | None = Field(default=None, ge=0)


class ExerciseOutSchema(CamelSchema):
    id: str
    name: str
    body_part: str
    sets: int
    reps: int
    personal_record_weight: float | None = None


class SetSchema(CamelSchema):
    reps: int = Field(ge=0)
    weight: float = Field(default=0, ge=0)


class WorkoutExerciseSchema(CamelSchema):
    exercise_id: str
    sets: list[SetSchema] = []


class WorkoutCreateSchema(CamelSchema):
    id: str | None = Field(default=None, max_length=64)
    date: dt.date
    exercises: list[WorkoutExerciseSchema] = []


class WorkoutUpdateSchema(CamelSchema):
    id: str
    date: dt.date | None = None
    exercises: list[WorkoutExerciseSchema] | None = None


class WorkoutOutSchema(CamelSchema):
    id: str
    date: dt.date
    exercises: list[WorkoutExerciseSchema]
    created_at: dt.datetime | None = None
