"""Shopping list routes: shared items, share edges and the audit history."""
import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from mylife.core.security import normalize_email
from mylife.db.session import get_db
from mylife.models.common import AuditAction
from mylife.models.shopping import ShoppingItem, ShoppingShare
from mylife.models.user import User
from mylife.routers.deps import CurrentUserId
from mylife.schemas.base import SuccessSchema
from mylife.schemas.shopping import (
    AuditEntryOutSchema,
    ShareCreatedSchema,
    ShareCreateSchema,
    ShareStatusSchema,
    ShareUserSchema,
    ShoppingItemCreateSchema,
    ShoppingItemOutSchema,
    ShoppingItemUpdateSchema,
)
from mylife.services.audit import record_action
from mylife.services.sharing import (
    accessible_items_clause,
    audit_history_query,
    describe_item,
    get_accessible_item,
    visible_items_query,
)

router = APIRouter(prefix="/api", tags=["shopping"])
logger = logging.getLogger(__name__)


# ---------- items ----------

@router.get("/shopping", response_model=list[ShoppingItemOutSchema])
async def list_items(
    user_id: CurrentUserId,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """My items plus the items of everyone who shares their list with me."""
    result = await db.execute(visible_items_query(user_id))
    return [ShoppingItemOutSchema(**describe_item(item, owner_name, user_id)) for item, owner_name in result.all()]


@router.post("/shopping", response_model=SuccessSchema, status_code=201)
async def create_item(
    body: ShoppingItemCreateSchema,
    user_id: CurrentUserId,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    if body.id is not None and await db.get(ShoppingItem, body.id) is not None:
        raise HTTPException(status_code=400, detail="Item id already exists")

    item = ShoppingItem(user_id=user_id, **body.model_dump(exclude_none=True))
    db.add(item)
    record_action(db, user_id, AuditAction.ADDED, item.name, details=f"x{item.quantity}")
    await db.commit()
    return SuccessSchema(id=item.id)


@router.put("/shopping", response_model=SuccessSchema)
async def update_item(
    body: ShoppingItemUpdateSchema,
    user_id: CurrentUserId,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """Update an own item or an item on a list shared with me."""
    item = await get_accessible_item(db, user_id, body.id)
    if item is None:
        raise HTTPException(status_code=404, detail="Item not found")

    was_completed = item.completed
    for field, value in body.model_dump(exclude_unset=True, exclude={"id"}).items():
        if value is not None:
            setattr(item, field, value)

    if item.completed != was_completed:
        action = AuditAction.COMPLETED if item.completed else AuditAction.UNCOMPLETED
        record_action(db, user_id, action, item.name)
    await db.commit()
    return SuccessSchema(id=item.id)


@router.delete("/shopping", response_model=SuccessSchema)
async def delete_items(
    user_id: CurrentUserId,
    db: Annotated[AsyncSession, Depends(get_db)],
    item_id: Annotated[str | None, Query(alias="id")] = None,
    clear_completed: Annotated[bool, Query(alias="clearCompleted")] = False,
):
    """Delete one accessible item, or every completed item I can see."""
    if clear_completed:
        result = await db.execute(
            delete(ShoppingItem)
            .where(ShoppingItem.completed.is_(True), accessible_items_clause(user_id))
            .execution_options(synchronize_session=False)
        )
        cleared = result.rowcount or 0
        if cleared:
            record_action(db, user_id, AuditAction.CLEARED, "completed items", details=f"{cleared} items")
        await db.commit()
        logger.info("User %s cleared %d completed shopping items", user_id, cleared)
        return SuccessSchema()

    if not item_id:
        raise HTTPException(status_code=400, detail="id or clearCompleted is required")
    item = await get_accessible_item(db, user_id, item_id)
    if item is None:
        raise HTTPException(status_code=404, detail="Item not found")
    record_action(db, user_id, AuditAction.DELETED, item.name)
    await db.delete(item)
    await db.commit()
    return SuccessSchema(id=item_id)


# ---------- sharing ----------

@router.get("/shopping-share", response_model=ShareStatusSchema)
async def share_status(
    user_id: CurrentUserId,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """Who I share my list with, and who shares theirs with me."""
    shared_with = await db.execute(
        select(User, ShoppingShare.created_at)
        .join(ShoppingShare, ShoppingShare.shared_with_id == User.id)
        .where(ShoppingShare.owner_id == user_id)
        .order_by(ShoppingShare.created_at.asc())
    )
    shared_by = await db.execute(
        select(User, ShoppingShare.created_at)
        .join(ShoppingShare, ShoppingShare.owner_id == User.id)
        .where(ShoppingShare.shared_with_id == user_id)
        .order_by(ShoppingShare.created_at.asc())
    )

    def _users(rows) -> list[ShareUserSchema]:
        return [ShareUserSchema(id=u.id, email=u.email, name=u.name, shared_at=at) for u, at in rows]

    return ShareStatusSchema(shared_with=_users(shared_with.all()), shared_by=_users(shared_by.all()))


@router.post("/shopping-share", response_model=ShareCreatedSchema, status_code=201)
async def create_share(
    body: ShareCreateSchema,
    user_id: CurrentUserId,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """Share my whole list with another user, found by email."""
    email = normalize_email(body.email)
    if not email:
        raise HTTPException(status_code=400, detail="Email is required")

    result = await db.execute(select(User).where(User.email == email))
    target = result.scalar_one_or_none()
    if target is None:
        raise HTTPException(status_code=404, detail="User not found")
    if target.id == user_id:
        raise HTTPException(status_code=400, detail="Cannot share with yourself")

    existing = await db.execute(
        select(ShoppingShare.id).where(
            ShoppingShare.owner_id == user_id,
            ShoppingShare.shared_with_id == target.id,
        )
    )
    if existing.scalar_one_or_none() is not None:
        raise HTTPException(status_code=400, detail="Already shared with this user")

    share = ShoppingShare(owner_id=user_id, shared_with_id=target.id)
    db.add(share)
    await db.commit()
    logger.info("Shopping list of %s shared with %s", user_id, target.id)
    return ShareCreatedSchema(
        shared_with=ShareUserSchema(id=target.id, email=target.email, name=target.name, shared_at=share.created_at)
    )


@router.delete("/shopping-share", response_model=SuccessSchema)
async def delete_share(
    user_id: CurrentUserId,
    db: Annotated[AsyncSession, Depends(get_db)],
    target_id: Annotated[str | None, Query(alias="userId")] = None,
):
    """Remove my share edge to one user; a reverse edge is left alone."""
    if not target_id:
        raise HTTPException(status_code=400, detail="User ID is required")

    await db.execute(
        delete(ShoppingShare).where(
            ShoppingShare.owner_id == user_id,
            ShoppingShare.shared_with_id == target_id,
        )
    )
    await db.commit()
    logger.info("Shopping list of %s unshared from %s", user_id, target_id)
    return SuccessSchema()


# ---------- audit ----------

@router.get("/shopping-audit", response_model=list[AuditEntryOutSchema])
async def audit_history(
    user_id: CurrentUserId,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """Most recent entries by me and my share partners, newest first."""
    result = await db.execute(audit_history_query(user_id))
    return [
        AuditEntryOutSchema(
            id=entry.id,
            action=entry.action,
            item_name=entry.item_name,
            details=entry.details,
            user_name=user_name,
            created_at=entry.created_at,
        )
        for entry, user_name in result.all()
    ]
