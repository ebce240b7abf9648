from datetime import datetime
from typing import Any
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Integer, ForeignKey, String, DateTime, JSON
from liftlog.db import Base, new_id, utcnow

class Superset(Base):
    __tablename__ = "supersets"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    session_id: Mapped[str] = mapped_column(ForeignKey("workout_sessions.id", ondelete="CASCADE"), index=True)
    exercise_ids: Mapped[list[str]] = mapped_column(JSON, nullable=False)
    rest_time: Mapped[int | None] = mapped_column(Integer, nullable=True)  # seconds, shared by all sets
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)

    session = relationship("WorkoutSession", back_populates="supersets")
    sets = relationship(
        "SupersetSet",
        back_populates="superset",
        order_by="SupersetSet.set_number",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    # the session rows generated for each member exercise
    members = relationship("WorkoutExercise", back_populates="superset", passive_deletes=True)

class SupersetSet(Base):
    __tablename__ = "superset_sets"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    superset_id: Mapped[str] = mapped_column(ForeignKey("supersets.id", ondelete="CASCADE"), index=True)
    set_number: Mapped[int] = mapped_column(Integer, nullable=False)
    # one {exercise_id, weight, reps, rpe} entry per superset exercise
    exercises: Mapped[list[dict[str, Any]]] = mapped_column(JSON, nullable=False)

    superset = relationship("Superset", back_populates="sets")
