from typing import Annotated
from datetime import datetime
from pydantic import BaseModel, Field, model_validator

from liftlog.schemas.common import Reps, Rpe, Seconds, Weight

ExerciseId = Annotated[str, Field(min_length=1, max_length=36)]

class SupersetExerciseData(BaseModel):
    exercise_id: ExerciseId
    weight: Weight
    reps: Reps
    rpe: Rpe | None = None

class SupersetSetIn(BaseModel):
    exercises: list[SupersetExerciseData]

class SupersetCreate(BaseModel):
    exercise_ids: Annotated[list[ExerciseId], Field(min_length=2, max_length=4)]
    sets: Annotated[list[SupersetSetIn], Field(min_length=1)]
    rest_time: Seconds | None = None

    @model_validator(mode="after")
    def sets_cover_every_exercise(self) -> "SupersetCreate":
        members = set(self.exercise_ids)
        for s in self.sets:
            if len(s.exercises) != len(self.exercise_ids):
                raise ValueError("Each set must have data for all exercises")
            if any(e.exercise_id not in members for e in s.exercises):
                raise ValueError("Exercise ID in set does not match superset exercise IDs")
        return self

class SupersetSetRead(BaseModel):
    set_number: int
    exercises: list[SupersetExerciseData]

    model_config = {"from_attributes": True}

class SupersetRead(BaseModel):
    id: str
    session_id: str
    exercise_ids: list[str]
    sets: list[SupersetSetRead]
    rest_time: int | None = None
    created_at: datetime

    model_config = {"from_attributes": True}
