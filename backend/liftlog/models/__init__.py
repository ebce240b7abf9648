from liftlog.models.user import User, UserRole
from liftlog.models.exercise import Exercise, ExerciseStatus
from liftlog.models.workout_log import WorkoutLog
from liftlog.models.workout_session import WorkoutSession, WorkoutExercise
from liftlog.models.exercise_set import ExerciseSet
from liftlog.models.superset import Superset, SupersetSet

__all__ = [
    "User",
    "UserRole",
    "Exercise",
    "ExerciseStatus",
    "WorkoutLog",
    "WorkoutSession",
    "WorkoutExercise",
    "ExerciseSet",
    "Superset",
    "SupersetSet",
]
