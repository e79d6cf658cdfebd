"""Workout tracker models: body parts, exercises and sessions."""
from sqlalchemy import JSON, Column, Date, DateTime, Float, ForeignKey, Integer, String

from mylife.db.session import Base
from mylife.models.common import new_id, utcnow

# Seeded for a user on first listing when they have none
DEFAULT_BODY_PARTS = [
    ("Chest/Tri", "#EF4444"),
    ("Back/Bi", "#6366F1"),
    ("Shoulders", "#F59E0B"),
    ("Legs/Core", "#EC4899"),
]


class BodyPart(Base):
    __tablename__ = "body_parts"

    id = Column(String(64), primary_key=True, default=new_id)
    user_id = Column(String(64), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(64), nullable=False)
    color = Column(String(16), nullable=False)
    sort_order = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)


class Exercise(Base):
    __tablename__ = "exercises"

    id = Column(String(64), primary_key=True, default=new_id)
    user_id = Column(String(64), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    body_part = Column(String(64), nullable=False)  # BodyPart.id of the same user
    sets = Column(Integer, nullable=False, default=3)
    reps = Column(Integer, nullable=False, default=10)
    personal_record_weight = Column(Float, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)


class WorkoutSession(Base):
    __tablename__ = "workout_sessions"

    id = Column(String(64), primary_key=True, default=new_id)
    user_id = Column(String(64), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    date = Column(Date, nullable=False, index=True)
    # [{"exerciseId": str, "sets": [{"reps": int, "weight": float}]}]
    exercises = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
