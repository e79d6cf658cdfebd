"""Shopping list models: items, directed share edges and the audit log."""
from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import relationship

from mylife.db.session import Base
from mylife.models.common import ShoppingCategory, new_id, utcnow


class ShoppingItem(Base):
    __tablename__ = "shopping_items"

    id = Column(String(64), primary_key=True, default=new_id)
    user_id = Column(String(64), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    quantity = Column(Integer, nullable=False, default=1)
    category = Column(String(32), nullable=False, default=ShoppingCategory.FRESHCO.value)
    completed = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    user = relationship("User", back_populates="shopping_items")


class ShoppingShare(Base):
    """owner_id grants shared_with_id access to the owner's whole list."""

    __tablename__ = "shopping_shares"
    __table_args__ = (UniqueConstraint("owner_id", "shared_with_id", name="uq_shopping_shares_pair"),)

    id = Column(String(64), primary_key=True, default=new_id)
    owner_id = Column(String(64), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    shared_with_id = Column(String(64), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)


class ShoppingAudit(Base):
    __tablename__ = "shopping_audit"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(64), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    action = Column(String(16), nullable=False)  # AuditAction
    item_name = Column(String(255), nullable=False)
    details = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, index=True)
