"""Shopping list visibility: who may read and write whose items and audit entries.

A share edge (owner -> shared_with) grants shared_with access to the owner's
entire list. Edges are directional and never transitive.
"""
from sqlalchemy import ColumnElement, Select, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from mylife.models.shopping import ShoppingAudit, ShoppingItem, ShoppingShare
from mylife.models.user import User

AUDIT_HISTORY_LIMIT = 50


def owners_shared_with(user_id: str) -> Select:
    """Owners whose lists have been shared with `user_id`."""
    return select(ShoppingShare.owner_id).where(ShoppingShare.shared_with_id == user_id)


def users_shared_by(user_id: str) -> Select:
    """Users `user_id` has shared their own list with."""
    return select(ShoppingShare.shared_with_id).where(ShoppingShare.owner_id == user_id)


def accessible_items_clause(user_id: str) -> ColumnElement[bool]:
    """Own items plus items of owners who share with the user.

    The same set is both readable and writable.
    """
    return or_(
        ShoppingItem.user_id == user_id,
        ShoppingItem.user_id.in_(owners_shared_with(user_id)),
    )


def audit_visibility_clause(user_id: str) -> ColumnElement[bool]:
    """Entries by the user and by anyone on either side of a share edge with them."""
    return or_(
        ShoppingAudit.user_id == user_id,
        ShoppingAudit.user_id.in_(owners_shared_with(user_id)),
        ShoppingAudit.user_id.in_(users_shared_by(user_id)),
    )


def visible_items_query(user_id: str) -> Select:
    """Items with their owner's name: incomplete first, newest first within each group."""
    return (
        select(ShoppingItem, User.name)
        .join(User, ShoppingItem.user_id == User.id)
        .where(accessible_items_clause(user_id))
        .order_by(ShoppingItem.completed.asc(), ShoppingItem.created_at.desc())
    )


def audit_history_query(user_id: str, limit: int = AUDIT_HISTORY_LIMIT) -> Select:
    return (
        select(ShoppingAudit, User.name)
        .join(User, ShoppingAudit.user_id == User.id)
        .where(audit_visibility_clause(user_id))
        .order_by(ShoppingAudit.created_at.desc(), ShoppingAudit.id.desc())
        .limit(limit)
    )


async def get_accessible_item(db: AsyncSession, user_id: str, item_id: str) -> ShoppingItem | None:
    """Return the item if the user may mutate it, else None."""
    result = await db.execute(
        select(ShoppingItem).where(ShoppingItem.id == item_id, accessible_items_clause(user_id))
    )
    return result.scalar_one_or_none()


def describe_item(item: ShoppingItem, owner_name: str, user_id: str) -> dict:
    """Attach ownership fields for the requesting user."""
    is_own = item.user_id == user_id
    return {
        "id": item.id,
        "name": item.name,
        "quantity": item.quantity,
        "category": item.category,
        "completed": item.completed,
        "created_at": item.created_at,
        "owner_id": item.user_id,
        "owner_name": None if is_own else owner_name,
        "is_own": is_own,
    }
