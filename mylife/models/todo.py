"""Task model: an anchor date plus a recurrence rule and exception sets."""
from sqlalchemy import JSON, Boolean, Column, Date, DateTime, ForeignKey, String, Text
from sqlalchemy.orm import relationship

from mylife.db.session import Base
from mylife.models.common import Priority, Recurrence, new_id, utcnow


class Todo(Base):
    __tablename__ = "todos"

    id = Column(String(64), primary_key=True, default=new_id)
    user_id = Column(String(64), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    completed = Column(Boolean, nullable=False, default=False)  # only meaningful when recurrence == none
    date = Column(Date, nullable=False)  # anchor date
    time = Column(String(5), nullable=True)  # HH:MM
    priority = Column(String(16), nullable=False, default=Priority.MEDIUM.value)
    recurrence = Column(String(16), nullable=False, default=Recurrence.NONE.value)
    # sorted lists of ISO dates
    completed_dates = Column(JSON, nullable=False, default=list)
    excluded_dates = Column(JSON, nullable=False, default=list)
    is_event = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    user = relationship("User", back_populates="todos")
