"""SQLAlchemy declarative base and model imports for Alembic."""
from mylife.db.session import Base

# Import all models so Alembic can see them
from mylife.models.user import User  # noqa: F401
from mylife.models.todo import Todo  # noqa: F401
from mylife.models.shopping import ShoppingAudit, ShoppingItem, ShoppingShare  # noqa: F401
from mylife.models.workout import BodyPart, Exercise, WorkoutSession  # noqa: F401

__all__ = [
    "Base",
    "User",
    "Todo",
    "ShoppingItem",
    "ShoppingShare",
    "ShoppingAudit",
    "BodyPart",
    "Exercise",
    "WorkoutSession",
]
