from datetime import datetime
from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from liftlog.db import get_db
from liftlog.deps.auth import get_current_user
from liftlog.errors import NotFoundError
from liftlog.models import User
from liftlog.repositories.session_repo import WorkoutSessionRepository
from liftlog.schemas.common import PageRead, as_utc, page_body
from liftlog.schemas.workout_session import SessionCreate, SessionRead, SessionUpdate

router = APIRouter(prefix="/workout-sessions", tags=["workout-sessions"])

# Missing and foreign sessions look the same from the outside
NOT_FOUND = "Workout session not found"

@router.post("", response_model=SessionRead, status_code=status.HTTP_201_CREATED)
def create_session(payload: SessionCreate, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    return WorkoutSessionRepository(db).create(current.id, payload)

@router.get("", response_model=PageRead[SessionRead])
def list_my_sessions(
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
    date_from: Optional[datetime] = Query(None, alias="from"),
    date_to: Optional[datetime] = Query(None, alias="to"),
    limit: int = Query(100, ge=1, le=1000),
    offset: int = Query(0, ge=0),
):
    page = WorkoutSessionRepository(db).find_all(
        current.id,
        date_from=as_utc(date_from) if date_from else None,
        date_to=as_utc(date_to) if date_to else None,
        limit=limit,
        offset=offset,
    )
    return page_body(page)

@router.get("/{session_id}", response_model=SessionRead)
def get_session(session_id: str, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    sess = WorkoutSessionRepository(db).find_by_id(session_id, current.id)
    if not sess:
        raise NotFoundError(NOT_FOUND)
    return sess

@router.patch("/{session_id}", response_model=SessionRead)
def update_session(
    session_id: str,
    payload: SessionUpdate,
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
):
    sess = WorkoutSessionRepository(db).update(session_id, current.id, payload.model_dump(exclude_unset=True))
    if not sess:
        raise NotFoundError(NOT_FOUND)
    return sess

@router.delete("/{session_id}")
def delete_session(session_id: str, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    if not WorkoutSessionRepository(db).delete(session_id, current.id):
        raise NotFoundError(NOT_FOUND)
    return {"success": True}
