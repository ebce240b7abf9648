from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from liftlog.db import get_db
from liftlog.deps.auth import get_current_user
from liftlog.errors import NotFoundError
from liftlog.models import User
from liftlog.repositories.session_repo import WorkoutSessionRepository
from liftlog.repositories.superset_repo import SupersetRepository
from liftlog.schemas.superset import SupersetCreate, SupersetRead

router = APIRouter(prefix="/workout-sessions", tags=["supersets"])

def _owned_session_or_404(db: Session, session_id: str, user: User):
    # SupersetRepository trusts its caller, so ownership is settled here
    sess = WorkoutSessionRepository(db).find_by_id(session_id, user.id)
    if not sess:
        raise NotFoundError("Workout session not found")
    return sess

@router.post("/{session_id}/supersets", response_model=SupersetRead, status_code=status.HTTP_201_CREATED)
def create_superset(
    session_id: str,
    payload: SupersetCreate,
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
):
    _owned_session_or_404(db, session_id, current)
    return SupersetRepository(db).create(session_id, payload)

@router.get("/{session_id}/supersets/{superset_id}", response_model=SupersetRead)
def get_superset(
    session_id: str,
    superset_id: str,
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
):
    _owned_session_or_404(db, session_id, current)
    superset = SupersetRepository(db).find_by_id(superset_id)
    if not superset or superset.session_id != session_id:
        raise NotFoundError("Superset not found")
    return superset
