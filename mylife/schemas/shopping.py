"""Pydantic schemas for the shared shopping list, share edges and audit log."""
import datetime as dt

from pydantic import Field

from mylife.models.common import AuditAction, ShoppingCategory
from mylife.schemas.base import CamelSchema


class ShoppingItemCreateSchema(CamelSchema):
    id: str | None = Field(default=None, max_length=64)
    name: str = Field(min_length=1, max_length=255)
    quantity: int = Field(default=1, ge=1)
    category: ShoppingCategory = ShoppingCategory.FRESHCO
    completed: bool = False


class ShoppingItemUpdateSchema(CamelSchema):
    id: str
    name: str | None = Field(default=None, min_length=1, max_length=255)
    quantity: int | None = Field(default=None, ge=1)
    category: ShoppingCategory | None = None
    completed: bool | None = None


class ShoppingItemOutSchema(CamelSchema):
    id: str
    name: str
    quantity: int
    category: ShoppingCategory
    completed: bool
    created_at: dt.datetime | None = None
    owner_id: str
    owner_name: str | None = None  # set only for items shared in by someone else
    is_own: bool


class ShareCreateSchema(CamelSchema):
    email: str | None = None


class ShareUserSchema(CamelSchema):
    id: str
    email: str
    name: str
    shared_at: dt.datetime | None = None


class ShareStatusSchema(CamelSchema):
    shared_with: list[ShareUserSchema]
    shared_by: list[ShareUserSchema]


class ShareCreatedSchema(CamelSchema):
    success: bool = True
    shared_with: ShareUserSchema


class AuditEntryOutSchema(CamelSchema):
    id: int
    action: AuditAction
    item_name: str
    details: str | None = None
    user_name: str
    created_at: dt.datetime
