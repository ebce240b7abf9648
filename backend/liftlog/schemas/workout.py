from typing import Annotated
from datetime import datetime
from pydantic import BaseModel, Field

from liftlog.schemas.common import PosInt, Reps, UtcDatetime, Weight

NotesStr = Annotated[str, Field(max_length=500)]

class WorkoutCreate(BaseModel):
    exercise_id: Annotated[str, Field(min_length=1, max_length=36)]
    weight: Weight
    reps: Reps
    sets: PosInt = 1
    notes: NotesStr | None = None
    # defaults to the creation time when omitted
    logged_at: UtcDatetime | None = None

class WorkoutUpdate(BaseModel):
    weight: Weight | None = None
    reps: Reps | None = None
    sets: PosInt | None = None
    notes: NotesStr | None = None
    logged_at: UtcDatetime | None = None

class WorkoutRead(BaseModel):
    id: str
    user_id: str
    exercise_id: str
    weight: float
    reps: int
    sets: int
    notes: str | None = None
    logged_at: datetime
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
