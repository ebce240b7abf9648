# liftlog/repositories/user_repo.py
from __future__ import annotations
from typing import Optional

from sqlalchemy import select, func
from sqlalchemy.exc import IntegrityError

from liftlog.errors import AlreadyExistsError
from liftlog.models import User, UserRole
from liftlog.repositories.base import BaseRepository

def normalize_email(email: str) -> str:
    return email.strip().lower()

class UserRepository(BaseRepository[User]):
    model = User

    # READS
    def get(self, user_id: str) -> Optional[User]:
        return self.db.get(User, user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        stmt = select(User).where(func.lower(User.email) == normalize_email(email))
        return self.db.execute(stmt).scalar_one_or_none()

    # WRITES
    def create(self, *, email: str, password_hash: str, role: UserRole = UserRole.user) -> User:
        user = User(email=normalize_email(email), password_hash=password_hash, role=role)
        try:
            self.db.add(user)
            self.db.commit()
        except IntegrityError:
            # The unique index decides races between concurrent registrations
            self.db.rollback()
            raise AlreadyExistsError("Email already exists")
        self.db.refresh(user)
        return user

    def set_role(self, user_id: str, *, role: UserRole) -> Optional[User]:
        """Use from admin tooling only; the DB enum validates role values."""
        user = self.get(user_id)
        if not user:
            return None
        user.role = role
        self.db.commit()
        self.db.refresh(user)
        return user
