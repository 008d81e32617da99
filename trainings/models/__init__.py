"""ORM models - import all so Base.metadata is complete for migrations."""

from trainings.models.global_training import GlobalTraining, GlobalTrainingExercise
from trainings.models.training import TrainedExercise, Training

__all__ = [
    "GlobalTraining",
    "GlobalTrainingExercise",
    "TrainedExercise",
    "Training",
]
