from mylife.models.user import User
from mylife.models.todo import Todo
from mylife.models.shopping import ShoppingAudit, ShoppingItem, ShoppingShare
from mylife.models.workout import BodyPart, Exercise, WorkoutSession

__all__ = [
    "User",
    "Todo",
    "ShoppingItem",
    "ShoppingShare",
    "ShoppingAudit",
    "BodyPart",
    "Exercise",
    "WorkoutSession",
]
