from datetime import datetime
from typing import Any
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Integer, ForeignKey, String, DateTime, Text, Boolean, JSON, Index
from liftlog.db import Base, new_id, utcnow

class WorkoutSession(Base):
    __tablename__ = "workout_sessions"
    __table_args__ = (Index("ix_workout_sessions_user_logged_at", "user_id", "logged_at"),)

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    user_id: Mapped[str] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    logged_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    duration: Mapped[int | None] = mapped_column(Integer, nullable=True)  # minutes
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    user = relationship("User", back_populates="sessions")
    exercises = relationship(
        "WorkoutExercise",
        back_populates="session",
        order_by="WorkoutExercise.order_index",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    supersets = relationship("Superset", back_populates="session", cascade="all, delete-orphan", passive_deletes=True)

class WorkoutExercise(Base):
    __tablename__ = "workout_exercises"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    session_id: Mapped[str] = mapped_column(ForeignKey("workout_sessions.id", ondelete="CASCADE"), index=True)
    # no FK: a vanished catalog entry must not break the session, the name is cached below
    exercise_id: Mapped[str] = mapped_column(String(36), nullable=False)
    exercise_name: Mapped[str] = mapped_column(String(100), nullable=False)
    order_index: Mapped[int] = mapped_column(Integer, nullable=False)
    is_superset: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    superset_id: Mapped[str | None] = mapped_column(
        ForeignKey("supersets.id", ondelete="CASCADE"), nullable=True, index=True
    )
    machine_settings: Mapped[dict[str, Any] | None] = mapped_column(JSON, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    session = relationship("WorkoutSession", back_populates="exercises")
    superset = relationship("Superset", back_populates="members")
    sets = relationship(
        "ExerciseSet",
        back_populates="workout_exercise",
        order_by="ExerciseSet.set_number",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    @property
    def working_sets(self):
        return [s for s in self.sets if not s.is_warmup]

    @property
    def warmup_sets(self):
        # None rather than [] so "no warmups logged" stays distinguishable in responses
        return [s for s in self.sets if s.is_warmup] or None
