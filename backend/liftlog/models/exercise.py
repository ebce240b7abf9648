from datetime import datetime
from enum import Enum
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import String, DateTime, ForeignKey, JSON, Enum as SAEnum
from liftlog.db import Base, new_id, utcnow

class ExerciseStatus(str, Enum):
    pending = "pending"
    approved = "approved"
    # representable, but nothing transitions an exercise here yet
    rejected = "rejected"

class Exercise(Base):
    __tablename__ = "exercises"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    name: Mapped[str] = mapped_column(String(100), index=True, nullable=False)
    category: Mapped[str] = mapped_column(String(50), nullable=False)
    muscle_groups: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    created_by: Mapped[str | None] = mapped_column(ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    status: Mapped[ExerciseStatus] = mapped_column(
        SAEnum(ExerciseStatus, name="exercise_status"),
        nullable=False,
        default=ExerciseStatus.pending,
        server_default=ExerciseStatus.pending.value,
    )
    approved_by: Mapped[str | None] = mapped_column(ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    approved_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
