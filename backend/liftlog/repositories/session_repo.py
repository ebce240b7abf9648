# liftlog/repositories/session_repo.py
from __future__ import annotations
import logging
from datetime import datetime
from typing import Any, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import selectinload

from liftlog.db import new_id
from liftlog.models import ExerciseSet, WorkoutExercise, WorkoutSession
from liftlog.repositories.base import OwnedRepository, Page
from liftlog.repositories.exercise_repo import ExerciseRepository
from liftlog.schemas.workout_session import SessionCreate

log = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("logged_at", "duration", "notes")
NULLABLE_FIELDS = ("duration", "notes")

class WorkoutSessionRepository(OwnedRepository[WorkoutSession]):
    """
    Stores a session together with its exercises and sets as one unit.

    A session owned by someone else is reported exactly like a missing one
    (None / False), so callers never learn that it exists.
    """
    model = WorkoutSession

    def _with_children(self, stmt):
        return stmt.options(
            selectinload(WorkoutSession.exercises).selectinload(WorkoutExercise.sets)
        )

    def create(self, user_id: str, data: SessionCreate) -> WorkoutSession:
        names = ExerciseRepository(self.db).names_for(e.exercise_id for e in data.exercises)
        session = WorkoutSession(
            id=new_id(),
            user_id=user_id,
            logged_at=data.logged_at,
            duration=data.duration,
            notes=data.notes,
        )
        for order, ex in enumerate(data.exercises):
            wex = WorkoutExercise(
                exercise_id=ex.exercise_id,
                exercise_name=names[ex.exercise_id],
                order_index=order,
                is_superset=False,
                machine_settings=ex.machine_settings,
                notes=ex.notes,
            )
            # numbering comes from position; any caller-supplied set_number is ignored
            for number, s in enumerate(ex.sets, start=1):
                wex.sets.append(ExerciseSet(
                    set_number=number, weight=s.weight, reps=s.reps,
                    rpe=s.rpe, rest_time=s.rest_time, is_warmup=False,
                ))
            for number, w in enumerate(ex.warmup_sets or [], start=1):
                wex.sets.append(ExerciseSet(
                    set_number=number, weight=w.weight, reps=w.reps,
                    percentage=w.percentage, is_warmup=True,
                ))
            session.exercises.append(wex)

        try:
            self.db.add(session)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise

        log.info("workout session %s created with %d exercises", session.id, len(data.exercises))
        created = self.find_by_id(session.id, user_id)
        if created is None:
            raise RuntimeError("Failed to create workout session")
        return created

    def find_by_id(self, session_id: str, user_id: str) -> Optional[WorkoutSession]:
        stmt = self._with_children(self.owned_stmt(session_id, user_id))
        return self.db.execute(stmt).scalar_one_or_none()

    def find_all(
        self,
        user_id: str,
        *,
        date_from: datetime | None = None,
        date_to: datetime | None = None,
        limit: int = 100,
        offset: int = 0,
    ) -> Page[WorkoutSession]:
        stmt = self._with_children(select(WorkoutSession).where(WorkoutSession.user_id == user_id))
        if date_from is not None:
            stmt = stmt.where(WorkoutSession.logged_at >= date_from)
        if date_to is not None:
            stmt = stmt.where(WorkoutSession.logged_at <= date_to)
        stmt = stmt.order_by(WorkoutSession.logged_at.desc())
        return self.page(stmt, limit=limit, offset=offset)

    def update(self, session_id: str, user_id: str, fields: dict[str, Any]) -> Optional[WorkoutSession]:
        values = {
            k: v for k, v in fields.items()
            if k in UPDATABLE_FIELDS and (v is not None or k in NULLABLE_FIELDS)
        }
        if not values:
            return self.find_by_id(session_id, user_id)
        if not self.update_owned(session_id, user_id, values):
            return None
        return self.find_by_id(session_id, user_id)

    def delete(self, session_id: str, user_id: str) -> bool:
        # exercises, sets and supersets go with it via ON DELETE CASCADE
        return self.delete_owned(session_id, user_id)
