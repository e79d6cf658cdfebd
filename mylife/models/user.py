"""User model: one account, owner of every other row."""
from sqlalchemy import Column, DateTime, String
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from mylife.db.session import Base
from mylife.models.common import new_id


class User(Base):
    __tablename__ = "users"

    id = Column(String(64), primary_key=True, default=new_id)
    email = Column(String(255), unique=True, nullable=False, index=True)  # stored lower-cased
    name = Column(String(255), nullable=False)
    hashed_password = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=True)

    todos = relationship("Todo", back_populates="user", cascade="all, delete-orphan", passive_deletes=True)
    shopping_items = relationship(
        "ShoppingItem", back_populates="user", cascade="all, delete-orphan", passive_deletes=True
    )
