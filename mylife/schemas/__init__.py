from mylife.schemas.auth import AuthOutSchema, LoginSchema, MeOutSchema, SignupSchema, UserOutSchema
from mylife.schemas.backup import BackupExportSchema, BackupImportResultSchema, BackupImportSchema
from mylife.schemas.shopping import (
    AuditEntryOutSchema,
    ShareCreateSchema,
    ShareStatusSchema,
    ShoppingItemCreateSchema,
    ShoppingItemOutSchema,
    ShoppingItemUpdateSchema,
)
from mylife.schemas.todo import TodoCreateSchema, TodoOccurrenceOutSchema, TodoOutSchema, TodoUpdateSchema
from mylife.schemas.workout import (
    BodyPartOutSchema,
    ExerciseOutSchema,
    WorkoutOutSchema,
)

__all__ = [
    "AuthOutSchema",
    "LoginSchema",
    "MeOutSchema",
    "SignupSchema",
    "UserOutSchema",
    "BackupExportSchema",
    "BackupImportResultSchema",
    "BackupImportSchema",
    "AuditEntryOutSchema",
    "ShareCreateSchema",
    "ShareStatusSchema",
    "ShoppingItemCreateSchema",
    "ShoppingItemOutSchema",
    "ShoppingItemUpdateSchema",
    "TodoCreateSchema",
    "TodoOccurrenceOutSchema",
    "TodoOutSchema",
    "TodoUpdateSchema",
    "BodyPartOutSchema",
    "ExerciseOutSchema",
    "WorkoutOutSchema",
]
