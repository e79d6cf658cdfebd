"""Column defaults and closed value sets shared by the models."""
import uuid
from datetime import datetime, timezone
from enum import Enum


def new_id() -> str:
    return uuid.uuid4().hex


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Priority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Recurrence(str, Enum):
    NONE = "none"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


class ShoppingCategory(str, Enum):
    FRESHCO = "freshco"
    COSTCO = "costco"
    AMAZON = "amazon"
    OTHER = "other"


class AuditAction(str, Enum):
    ADDED = "added"
    COMPLETED = "completed"
    UNCOMPLETED = "uncompleted"
    DELETED = "deleted"
    CLEARED = "cleared"
