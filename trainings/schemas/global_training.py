"""Global training template schemas."""

from pydantic import BaseModel, ConfigDict

from trainings.schemas.types import Timestamp


class GlobalTrainingExerciseRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    exercise_id: int
    position: int = 0


class GlobalTrainingRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str = ""
    level: str
    exercises: list[GlobalTrainingExerciseRead] = []


class AssignGlobalTraining(BaseModel):
    """Copy a template into a new training planned for planned_date."""

    planned_date: Timestamp | None = None
