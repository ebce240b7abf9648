# liftlog/repositories/exercise_repo.py
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from sqlalchemy import and_, or_, select, update

from liftlog.db import utcnow
from liftlog.models import Exercise, ExerciseStatus
from liftlog.repositories.base import BaseRepository

log = logging.getLogger(__name__)

# Cached on session rows when the referenced catalog entry cannot be found
UNKNOWN_EXERCISE = "Unknown Exercise"

@dataclass(slots=True)
class ExerciseFilters:
    search: str | None = None
    muscle_group: str | None = None
    status: ExerciseStatus | None = None

class ExerciseRepository(BaseRepository[Exercise]):
    model = Exercise

    def find_all(self, filters: ExerciseFilters | None = None, user_id: str | None = None) -> list[Exercise]:
        filters = filters or ExerciseFilters()
        stmt = select(Exercise)

        if filters.search:
            stmt = stmt.where(Exercise.name.icontains(filters.search, autoescape=True))

        if filters.status:
            stmt = stmt.where(Exercise.status == filters.status)
        elif user_id:
            # approved for everyone, plus the caller's own submissions awaiting review
            stmt = stmt.where(or_(
                Exercise.status == ExerciseStatus.approved,
                and_(Exercise.status == ExerciseStatus.pending, Exercise.created_by == user_id),
            ))
        else:
            stmt = stmt.where(Exercise.status == ExerciseStatus.approved)

        exercises = list(self.db.execute(stmt.order_by(Exercise.name.asc())).scalars().all())

        # JSON containment differs per backend, so muscle groups are matched here
        if filters.muscle_group:
            target = filters.muscle_group.lower()
            exercises = [
                e for e in exercises
                if any(mg.lower() == target for mg in (e.muscle_groups or []))
            ]
        return exercises

    def find_by_id(self, exercise_id: str) -> Optional[Exercise]:
        return self.db.get(Exercise, exercise_id)

    def names_for(self, exercise_ids: Iterable[str]) -> dict[str, str]:
        """Display names for the given ids; unknown ids map to UNKNOWN_EXERCISE."""
        ids = set(exercise_ids)
        rows = self.db.execute(select(Exercise.id, Exercise.name).where(Exercise.id.in_(ids))).all()
        found = {row.id: row.name for row in rows}
        return {i: found.get(i, UNKNOWN_EXERCISE) for i in ids}

    def create(self, user_id: str, *, name: str, category: str, muscle_groups: list[str]) -> Exercise:
        exercise = Exercise(
            name=name,
            category=category,
            muscle_groups=list(muscle_groups),
            created_by=user_id,
            status=ExerciseStatus.pending,
        )
        self.db.add(exercise)
        self.db.commit()
        self.db.refresh(exercise)
        return exercise

    def approve(self, exercise_id: str, approver_id: str) -> Optional[Exercise]:
        # No prior-state check: approving twice (or a missing id) is a no-op update
        self.db.execute(
            update(Exercise)
            .where(Exercise.id == exercise_id)
            .values(status=ExerciseStatus.approved, approved_by=approver_id, approved_at=utcnow())
        )
        self.db.commit()
        exercise = self.find_by_id(exercise_id)
        if exercise is not None:
            log.info("exercise %s approved by %s", exercise_id, approver_id)
        return exercise
