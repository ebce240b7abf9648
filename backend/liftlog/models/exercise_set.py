from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Integer, ForeignKey, String, Float, Boolean, CheckConstraint
from liftlog.db import Base, new_id

class ExerciseSet(Base):
    """Working and warmup sets share this table; numbering is per kind."""
    __tablename__ = "exercise_sets"
    __table_args__ = (
        CheckConstraint("weight > 0", name="ck_exercise_sets_weight"),
        CheckConstraint("reps >= 1 AND reps <= 100", name="ck_exercise_sets_reps"),
    )

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    workout_exercise_id: Mapped[str] = mapped_column(
        ForeignKey("workout_exercises.id", ondelete="CASCADE"), index=True
    )
    set_number: Mapped[int] = mapped_column(Integer, nullable=False)
    weight: Mapped[float] = mapped_column(Float, nullable=False)
    reps: Mapped[int] = mapped_column(Integer, nullable=False)
    rpe: Mapped[float | None] = mapped_column(Float, nullable=True)
    rest_time: Mapped[int | None] = mapped_column(Integer, nullable=True)    # seconds
    percentage: Mapped[float | None] = mapped_column(Float, nullable=True)   # warmups: % of working weight
    is_warmup: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    workout_exercise = relationship("WorkoutExercise", back_populates="sets")
