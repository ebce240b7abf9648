from datetime import datetime, timezone
from typing import Annotated, Generic, TypeVar
from pydantic import AfterValidator, BaseModel, Field

T = TypeVar("T")

def as_utc(v: datetime) -> datetime:
    # naive timestamps are taken to be UTC already
    if v.tzinfo is None:
        return v.replace(tzinfo=timezone.utc)
    return v.astimezone(timezone.utc)

UtcDatetime = Annotated[datetime, AfterValidator(as_utc)]

# Shared business limits for anything that records a lift
Weight = Annotated[float, Field(gt=0)]
Reps = Annotated[int, Field(ge=1, le=100)]
Rpe = Annotated[float, Field(ge=1, le=10)]
PosInt = Annotated[int, Field(ge=1)]
Seconds = Annotated[int, Field(ge=0)]

class PageRead(BaseModel, Generic[T]):
    data: list[T]
    total: int
    has_more: bool

def page_body(page) -> dict:
    """Response body for a repositories.base.Page; items are validated by the response_model."""
    return {"data": page.items, "total": page.total, "has_more": page.has_more}
