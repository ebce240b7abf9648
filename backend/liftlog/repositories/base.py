# liftlog/repositories/base.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from sqlalchemy.orm import Session
from sqlalchemy import Select, delete, func, select, update

from liftlog.db import utcnow
from liftlog.errors import AccessDeniedError, NotFoundError

T = TypeVar("T")  # SQLAlchemy model type

@dataclass(slots=True)
class Page(Generic[T]):
    items: list[T]
    total: int
    limit: int
    offset: int

    @property
    def has_more(self) -> bool:
        return self.offset + len(self.items) < self.total

class BaseRepository(Generic[T]):
    """Lightweight base for repositories using SQLAlchemy 2.0 style."""
    model: type[T]

    def __init__(self, db: Session):
        self.db = db

    def page(self, stmt: Select, *, limit: int = 50, offset: int = 0) -> Page[T]:
        # Count over the filtered statement, independent of the page window
        total = self.db.execute(
            select(func.count()).select_from(stmt.order_by(None).subquery())
        ).scalar_one()
        items = list(self.db.execute(stmt.limit(limit).offset(offset)).scalars().all())
        return Page(items=items, total=total, limit=limit, offset=offset)

class OwnedRepository(BaseRepository[T]):
    """
    Rows that belong to a user through a `user_id` column.

    Every scoped read/write goes through the same compound
    `id = :id AND user_id = :owner` filter. Subclasses decide how a miss is
    reported: collapse to "not found" (return None/False), or split it with
    get_for_owner() into NotFoundError vs AccessDeniedError.
    """

    def owned_stmt(self, id: str, user_id: str) -> Select:
        return select(self.model).where(self.model.id == id, self.model.user_id == user_id)

    def get_for_owner(self, id: str, user_id: str, *, not_found: str, denied: str) -> T:
        row = self.db.get(self.model, id)
        if row is None:
            raise NotFoundError(not_found)
        if row.user_id != user_id:
            raise AccessDeniedError(denied)
        return row

    def update_owned(self, id: str, user_id: str, values: dict[str, Any]) -> bool:
        stmt = (
            update(self.model)
            .where(self.model.id == id, self.model.user_id == user_id)
            .values(**values, updated_at=utcnow())
        )
        result = self.db.execute(stmt)
        self.db.commit()
        return result.rowcount > 0

    def delete_owned(self, id: str, user_id: str) -> bool:
        stmt = delete(self.model).where(self.model.id == id, self.model.user_id == user_id)
        result = self.db.execute(stmt)
        self.db.commit()
        return result.rowcount > 0
