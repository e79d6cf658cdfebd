"""Pydantic schemas for the wholesale backup document."""
import datetime as dt

from mylife.schemas.base import CamelSchema
from mylife.schemas.shopping import ShoppingItemCreateSchema, ShoppingItemOutSchema
from mylife.schemas.todo import TodoCreateSchema, TodoOutSchema
from mylife.schemas.workout import (
    ExerciseCreateSchema,
    ExerciseOutSchema,
    WorkoutCreateSchema,
    WorkoutOutSchema,
)

BACKUP_VERSION = "1.0.0"


class BackupDataSchema(CamelSchema):
    todos: list[TodoCreateSchema] = []
    shopping: list[ShoppingItemCreateSchema] = []
    exercises: list[ExerciseCreateSchema] = []
    workouts: list[WorkoutCreateSchema] = []


class BackupImportSchema(CamelSchema):
    version: str
    timestamp: dt.datetime | None = None
    data: BackupDataSchema


class BackupExportDataSchema(CamelSchema):
    todos: list[TodoOutSchema]
    shopping: list[ShoppingItemOutSchema]
    exercises: list[ExerciseOutSchema]
    workouts: list[WorkoutOutSchema]


class BackupExportSchema(CamelSchema):
    version: str = BACKUP_VERSION
    timestamp: dt.datetime
    data: BackupExportDataSchema


class BackupImportResultSchema(CamelSchema):
    success: bool = True
    todos: int
    shopping: int
    exercises: int
    workouts: int
