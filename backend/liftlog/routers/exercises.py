from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from liftlog.db import get_db
from liftlog.deps.auth import get_current_user, get_optional_user, require_role
from liftlog.errors import NotFoundError
from liftlog.models import ExerciseStatus, User
from liftlog.repositories.exercise_repo import ExerciseFilters, ExerciseRepository
from liftlog.schemas.exercise import ExerciseCreate, ExerciseRead

router = APIRouter(prefix="/exercises", tags=["exercises"])

@router.get("", response_model=list[ExerciseRead])
def list_exercises(
    db: Session = Depends(get_db),
    current: Optional[User] = Depends(get_optional_user),
    search: Optional[str] = Query(None, max_length=100),
    muscle_group: Optional[str] = Query(None, max_length=50),
    status_: Optional[ExerciseStatus] = Query(None, alias="status"),
):
    filters = ExerciseFilters(search=search, muscle_group=muscle_group, status=status_)
    return ExerciseRepository(db).find_all(filters, user_id=current.id if current else None)

@router.post("", response_model=ExerciseRead, status_code=status.HTTP_201_CREATED)
def create_exercise(
    payload: ExerciseCreate,
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
):
    return ExerciseRepository(db).create(
        current.id,
        name=payload.name,
        category=payload.category,
        muscle_groups=payload.muscle_groups,
    )

@router.get("/{exercise_id}", response_model=ExerciseRead)
def get_exercise(exercise_id: str, db: Session = Depends(get_db)):
    exercise = ExerciseRepository(db).find_by_id(exercise_id)
    if not exercise:
        raise NotFoundError("Exercise not found")
    return exercise

@router.post("/{exercise_id}/approve", response_model=ExerciseRead)
def approve_exercise(
    exercise_id: str,
    db: Session = Depends(get_db),
    admin: User = Depends(require_role("admin")),
):
    exercise = ExerciseRepository(db).approve(exercise_id, admin.id)
    if not exercise:
        raise NotFoundError("Exercise not found")
    return exercise
