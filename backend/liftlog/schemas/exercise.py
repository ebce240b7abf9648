from typing import Annotated
from datetime import datetime
from pydantic import BaseModel, Field, StringConstraints, field_validator

from liftlog.models.exercise import ExerciseStatus

NameStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)]
CategoryStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=50)]

class ExerciseCreate(BaseModel):
    name: NameStr
    category: CategoryStr
    muscle_groups: Annotated[list[str], Field(min_length=1)]

    @field_validator("muscle_groups")
    @classmethod
    def muscle_groups_non_blank(cls, v: list[str]) -> list[str]:
        cleaned = [mg.strip() for mg in v]
        if any(not mg for mg in cleaned):
            raise ValueError("muscle groups cannot be blank")
        return cleaned

class ExerciseRead(BaseModel):
    id: str
    name: str
    category: str
    muscle_groups: list[str]
    status: ExerciseStatus
    created_by: str | None = None
    approved_by: str | None = None
    approved_at: datetime | None = None
    created_at: datetime

    model_config = {"from_attributes": True}
