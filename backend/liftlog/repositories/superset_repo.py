# liftlog/repositories/superset_repo.py
from __future__ import annotations
import logging
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import selectinload

from liftlog.errors import NotFoundError
from liftlog.models import Superset, SupersetSet, WorkoutExercise, WorkoutSession
from liftlog.repositories.base import BaseRepository
from liftlog.repositories.exercise_repo import ExerciseRepository
from liftlog.schemas.superset import SupersetCreate

log = logging.getLogger(__name__)

class SupersetRepository(BaseRepository[Superset]):
    """
    Supersets hang off an existing session. Ownership of that session is
    checked by the caller before create(); nothing here re-verifies it.
    """
    model = Superset

    def create(self, session_id: str, data: SupersetCreate) -> Superset:
        session = self.db.get(WorkoutSession, session_id)
        if session is None:
            raise NotFoundError("Workout session not found")

        names = ExerciseRepository(self.db).names_for(data.exercise_ids)
        # superset members are listed after whatever the session already holds
        next_order = self.db.execute(
            select(func.coalesce(func.max(WorkoutExercise.order_index) + 1, 0))
            .where(WorkoutExercise.session_id == session_id)
        ).scalar_one()

        superset = Superset(exercise_ids=list(data.exercise_ids), rest_time=data.rest_time)
        for number, s in enumerate(data.sets, start=1):
            superset.sets.append(SupersetSet(
                set_number=number,
                exercises=[e.model_dump() for e in s.exercises],
            ))

        # one session row per member exercise so the session listing shows the superset
        for i, exercise_id in enumerate(data.exercise_ids):
            member = WorkoutExercise(
                exercise_id=exercise_id,
                exercise_name=names[exercise_id],
                order_index=next_order + i,
                is_superset=True,
            )
            superset.members.append(member)
            session.exercises.append(member)

        try:
            session.supersets.append(superset)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise

        log.info("superset %s created in session %s (%d exercises, %d sets)",
                 superset.id, session_id, len(data.exercise_ids), len(data.sets))
        created = self.find_by_id(superset.id)
        if created is None:
            raise RuntimeError("Failed to create superset")
        return created

    def find_by_id(self, superset_id: str) -> Optional[Superset]:
        stmt = select(Superset).options(selectinload(Superset.sets)).where(Superset.id == superset_id)
        return self.db.execute(stmt).scalar_one_or_none()
