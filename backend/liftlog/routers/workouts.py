from datetime import datetime
from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from liftlog.db import get_db
from liftlog.deps.auth import get_current_user
from liftlog.models import User
from liftlog.repositories.workout_repo import WorkoutLogRepository, DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from liftlog.schemas.common import PageRead, as_utc, page_body
from liftlog.schemas.workout import WorkoutCreate, WorkoutRead, WorkoutUpdate

router = APIRouter(prefix="/workouts", tags=["workouts"])

@router.post("", response_model=WorkoutRead, status_code=status.HTTP_201_CREATED)
def create_workout(payload: WorkoutCreate, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    return WorkoutLogRepository(db).create(current.id, payload)

@router.get("", response_model=PageRead[WorkoutRead])
def list_my_workouts(
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
    exercise_id: Optional[str] = Query(None),
    date_from: Optional[datetime] = Query(None, alias="from"),
    date_to: Optional[datetime] = Query(None, alias="to"),
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    offset: int = Query(0, ge=0),
):
    page = WorkoutLogRepository(db).find_all(
        current.id,
        exercise_id=exercise_id,
        date_from=as_utc(date_from) if date_from else None,
        date_to=as_utc(date_to) if date_to else None,
        limit=limit,
        offset=offset,
    )
    return page_body(page)

@router.get("/{workout_id}", response_model=WorkoutRead)
def get_workout(workout_id: str, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    return WorkoutLogRepository(db).get_for_user(workout_id, current.id)

@router.patch("/{workout_id}", response_model=WorkoutRead)
def update_workout(
    workout_id: str,
    payload: WorkoutUpdate,
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
):
    return WorkoutLogRepository(db).update(workout_id, current.id, payload.model_dump(exclude_unset=True))

@router.delete("/{workout_id}")
def delete_workout(workout_id: str, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    WorkoutLogRepository(db).delete(workout_id, current.id)
    return {"success": True}
