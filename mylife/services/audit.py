"""Append-only shopping audit log."""
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from mylife.models.common import AuditAction
from mylife.models.shopping import ShoppingAudit

logger = logging.getLogger(__name__)


def record_action(
    db: AsyncSession,
    user_id: str,
    action: AuditAction,
    item_name: str,
    details: str | None = None,
) -> ShoppingAudit:
    """Stage an audit entry in the caller's transaction."""
    entry = ShoppingAudit(user_id=user_id, action=action.value, item_name=item_name, details=details)
    db.add(entry)
    logger.debug("Shopping audit: user=%s action=%s item=%r", user_id, action.value, item_name)
    return entry
