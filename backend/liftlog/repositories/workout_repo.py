# liftlog/repositories/workout_repo.py
from __future__ import annotations
from datetime import datetime
from typing import Any, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from liftlog.db import utcnow
from liftlog.errors import NotFoundError
from liftlog.models import WorkoutLog
from liftlog.repositories.base import OwnedRepository, Page
from liftlog.schemas.workout import WorkoutCreate

DEFAULT_PAGE_SIZE = 100
MAX_PAGE_SIZE = 1000
UPDATABLE_FIELDS = ("weight", "reps", "sets", "notes", "logged_at")
NULLABLE_FIELDS = ("notes",)

NOT_FOUND = "Workout not found"
ACCESS_DENIED = "You do not have access to this workout"

class WorkoutLogRepository(OwnedRepository[WorkoutLog]):
    """
    Flat single-exercise entries.

    Unlike sessions, a log owned by someone else is reported as
    AccessDeniedError rather than being hidden behind NotFoundError.
    """
    model = WorkoutLog

    def create(self, user_id: str, data: WorkoutCreate) -> WorkoutLog:
        now = utcnow()
        workout = WorkoutLog(
            user_id=user_id,
            exercise_id=data.exercise_id,
            weight=data.weight,
            reps=data.reps,
            sets=data.sets,
            notes=data.notes,
            logged_at=data.logged_at or now,
            created_at=now,
            updated_at=now,
        )
        try:
            self.db.add(workout)
            self.db.commit()
        except IntegrityError:
            # the only foreign key a caller controls is the exercise
            self.db.rollback()
            raise NotFoundError("Exercise not found")
        self.db.refresh(workout)
        return workout

    def find_by_id(self, workout_id: str) -> Optional[WorkoutLog]:
        return self.db.get(WorkoutLog, workout_id)

    def find_all(
        self,
        user_id: str,
        *,
        exercise_id: str | None = None,
        date_from: datetime | None = None,
        date_to: datetime | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> Page[WorkoutLog]:
        limit = min(limit or DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE)
        stmt = select(WorkoutLog).where(WorkoutLog.user_id == user_id)
        if exercise_id:
            stmt = stmt.where(WorkoutLog.exercise_id == exercise_id)
        if date_from is not None:
            stmt = stmt.where(WorkoutLog.logged_at >= date_from)
        if date_to is not None:
            stmt = stmt.where(WorkoutLog.logged_at <= date_to)
        stmt = stmt.order_by(WorkoutLog.logged_at.desc(), WorkoutLog.created_at.desc())
        return self.page(stmt, limit=limit, offset=offset)

    def get_for_user(self, workout_id: str, user_id: str) -> WorkoutLog:
        return self.get_for_owner(workout_id, user_id, not_found=NOT_FOUND, denied=ACCESS_DENIED)

    def update(self, workout_id: str, user_id: str, fields: dict[str, Any]) -> WorkoutLog:
        workout = self.get_for_user(workout_id, user_id)
        values = {
            k: v for k, v in fields.items()
            if k in UPDATABLE_FIELDS and (v is not None or k in NULLABLE_FIELDS)
        }
        if not values:
            return workout
        self.update_owned(workout_id, user_id, values)
        self.db.refresh(workout)
        return workout

    def delete(self, workout_id: str, user_id: str) -> None:
        self.get_for_user(workout_id, user_id)
        self.delete_owned(workout_id, user_id)
