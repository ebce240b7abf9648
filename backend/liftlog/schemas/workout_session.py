from typing import Annotated, Any
from datetime import datetime
from pydantic import BaseModel, Field

from liftlog.schemas.common import PosInt, Reps, Rpe, Seconds, UtcDatetime, Weight

NotesStr = Annotated[str, Field(max_length=1000)]
ExerciseId = Annotated[str, Field(min_length=1, max_length=36)]

class ExerciseSetIn(BaseModel):
    # Accepted for client convenience but ignored: sets are numbered by position
    set_number: int | None = None
    weight: Weight
    reps: Reps
    rpe: Rpe | None = None
    rest_time: Seconds | None = None

class WarmupSetIn(BaseModel):
    weight: Weight
    reps: Reps
    percentage: Annotated[float, Field(gt=0, le=100)] | None = None

class WorkoutExerciseIn(BaseModel):
    exercise_id: ExerciseId
    sets: Annotated[list[ExerciseSetIn], Field(min_length=1)]
    warmup_sets: list[WarmupSetIn] | None = None
    machine_settings: dict[str, Any] | None = None
    notes: NotesStr | None = None

class SessionCreate(BaseModel):
    logged_at: UtcDatetime
    duration: PosInt | None = None
    notes: NotesStr | None = None
    exercises: Annotated[list[WorkoutExerciseIn], Field(min_length=1)]

class SessionUpdate(BaseModel):
    logged_at: UtcDatetime | None = None
    duration: PosInt | None = None
    notes: NotesStr | None = None

class ExerciseSetRead(BaseModel):
    set_number: int
    weight: float
    reps: int
    rpe: float | None = None
    rest_time: int | None = None

    model_config = {"from_attributes": True}

class WarmupSetRead(BaseModel):
    set_number: int
    weight: float
    reps: int
    percentage: float | None = None

    model_config = {"from_attributes": True}

class WorkoutExerciseRead(BaseModel):
    id: str
    exercise_id: str
    exercise_name: str
    order_index: int
    is_superset: bool
    superset_id: str | None = None
    sets: list[ExerciseSetRead] = Field(validation_alias="working_sets")
    warmup_sets: list[WarmupSetRead] | None = None
    machine_settings: dict[str, Any] | None = None
    notes: str | None = None

    model_config = {"from_attributes": True}

class SessionRead(BaseModel):
    id: str
    user_id: str
    logged_at: datetime
    duration: int | None = None
    notes: str | None = None
    exercises: list[WorkoutExerciseRead]
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
