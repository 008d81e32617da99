"""Training and TrainedExercise schemas.

Request models only parse the wire format; range checks live in the services
so direct callers get the same InvalidArgumentError as HTTP clients.
"""

from datetime import timedelta
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from trainings.core.enums import TrainingState
from trainings.schemas.types import Duration, Timestamp, Weight


# ── Trained exercises ────────────────────────────────────────────────────

class TrainedExerciseFields(BaseModel):
    weight: Decimal | None = None
    approaches: int | None = None
    reps: int | None = None
    time: Duration | None = None
    doing: Duration | None = None
    rest: Duration | None = None


class TrainedExerciseCreate(TrainedExerciseFields):
    exercise_id: int
    notes: str | None = None


class TrainedExerciseUpdate(TrainedExerciseFields):
    """Merge-patch: omitted (or null) fields keep their stored value."""

    notes: str | None = None


class TrainedExerciseTimeUpdate(TrainedExerciseFields):
    """Mid-training update of the numbers and timers of one entry."""


class RestTimeUpdate(BaseModel):
    rest_time: Duration


class DoingTimeUpdate(BaseModel):
    doing_time: Duration


class TrainedExerciseRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    training_id: int
    exercise_id: int
    weight: Weight | None = None
    approaches: int | None = None
    reps: int | None = None
    time: Duration | None = None
    doing: Duration | None = None
    rest: Duration | None = None
    notes: str | None = None


# ── Trainings ────────────────────────────────────────────────────────────

class TrainingCreate(BaseModel):
    title: str = Field("", max_length=255)
    user_id: UUID | None = None  # ignored by the API; the owner comes from the access token
    planned_date: Timestamp | None = None
    total_duration: Duration | None = None
    total_rest_time: Duration | None = None
    total_exercise_time: Duration | None = None
    rating: int | None = None


class TrainingUpdate(BaseModel):
    """Merge-patch of a training; is_done is an explicit nullable flag."""

    title: str | None = Field(None, max_length=255)
    is_done: bool | None = None
    planned_date: Timestamp | None = None
    actual_date: Timestamp | None = None
    started_at: Timestamp | None = None
    finished_at: Timestamp | None = None
    total_duration: Duration | None = None
    total_rest_time: Duration | None = None
    total_exercise_time: Duration | None = None
    rating: int | None = None


class TrainingTimersUpdate(BaseModel):
    total_duration: Duration | None = None
    total_rest_time: Duration | None = None
    total_exercise_time: Duration | None = None


class TrainingComplete(BaseModel):
    rating: int | None = None


class TrainingSummaryRead(BaseModel):
    """Training without its exercise entries (list views)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    user_id: UUID
    is_done: bool
    state: TrainingState
    planned_date: Timestamp
    actual_date: Timestamp | None = None
    started_at: Timestamp | None = None
    finished_at: Timestamp | None = None
    total_duration: Duration | None = None
    total_rest_time: Duration | None = None
    total_exercise_time: Duration | None = None
    rating: int | None = None
    is_paused: bool = False
    paused_at: Timestamp | None = None
    paused_duration: Duration | None = None


class TrainingRead(TrainingSummaryRead):
    """Training with nested exercise entries (detail view)."""

    exercises: list[TrainedExerciseRead] = []


# ── Computed aggregates ──────────────────────────────────────────────────

class TrainingStats(BaseModel):
    total_trainings: int = 0
    completed_trainings: int = 0
    average_rating: float = 0.0
    total_duration: Duration = Field(default_factory=timedelta)


class TrainingTime(BaseModel):
    total_seconds: int = 0
    total_rest_seconds: int = 0
    total_exercise_seconds: int = 0
