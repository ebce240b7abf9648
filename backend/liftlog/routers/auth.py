from fastapi import APIRouter, Depends, HTTPException, status
from jose.exceptions import JWTError
from sqlalchemy.orm import Session
from liftlog.db import get_db
from liftlog.errors import AlreadyExistsError
from liftlog.models import User
from liftlog.schemas.user import RefreshRequest, TokenResponse, UserRegister, UserLogin, UserRead
from liftlog.security import hash_password, verify_password, create_access_token, decode_token
from liftlog.deps.auth import get_current_user
from liftlog.repositories.user_repo import UserRepository

router = APIRouter(prefix="/auth", tags=["auth"])

def _token_response(user: User) -> dict:
    token = create_access_token(sub=user.id, extra={"email": user.email})
    return {"access_token": token, "token_type": "bearer", "user": user}

@router.post("/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
def register(payload: UserRegister, db: Session = Depends(get_db)):
    repo = UserRepository(db)
    if repo.get_by_email(payload.email):
        raise AlreadyExistsError("Email already exists")
    # a concurrent registration can still win the race; the repo maps that to AlreadyExistsError too
    user = repo.create(email=payload.email, password_hash=hash_password(payload.password))
    return _token_response(user)

@router.post("/login", response_model=TokenResponse)
def login(payload: UserLogin, db: Session = Depends(get_db)):
    user = UserRepository(db).get_by_email(payload.email)
    if not user or not verify_password(payload.password, user.password_hash):
        raise HTTPException(status_code=401, detail="invalid credentials")
    return _token_response(user)

@router.post("/refresh")
def refresh(payload: RefreshRequest, db: Session = Depends(get_db)):
    invalid = HTTPException(status_code=401, detail="invalid token")
    try:
        sub = decode_token(payload.refresh_token).get("sub")
    except JWTError:
        raise invalid
    user = UserRepository(db).get(str(sub)) if sub else None
    if not user:
        raise invalid
    token = create_access_token(sub=user.id, extra={"email": user.email})
    return {"access_token": token, "token_type": "bearer"}

@router.get("/me", response_model=UserRead)
def me(current_user: User = Depends(get_current_user)):
    return current_user
