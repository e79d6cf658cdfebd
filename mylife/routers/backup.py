"""Backup routes: export and wholesale import of the caller's data."""
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from mylife.db.session import get_db
from mylife.models.user import User
from mylife.routers.deps import CurrentUserId
from mylife.schemas.backup import BackupExportSchema, BackupImportResultSchema, BackupImportSchema
from mylife.services.backup import export_backup, import_backup

router = APIRouter(prefix="/api/backup", tags=["backup"])


@router.get("", response_model=BackupExportSchema)
async def get_backup(
    user_id: CurrentUserId,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    user = await db.get(User, user_id)
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    return await export_backup(db, user)


@router.post("", response_model=BackupImportResultSchema)
async def post_backup(
    body: BackupImportSchema,
    user_id: CurrentUserId,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """Replace my todos, own shopping items, exercises and workouts."""
    try:
        return await import_backup(db, user_id, body.data)
    except IntegrityError:
        # duplicate ids inside the document, or ids owned by another user
        await db.rollback()
        raise HTTPException(status_code=400, detail="Backup contains conflicting ids")
