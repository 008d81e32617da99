"""Time totals and rating statistics.

The arithmetic lives in plain functions so it can be checked without a
database; the service only loads rows and hands them over.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Iterable
from datetime import timedelta

from trainings.core.durations import to_seconds
from trainings.core.errors import TRAINING_NOT_FOUND, NotFoundError
from trainings.models.training import TrainedExercise, Training
from trainings.repositories.trainings import TrainingRepository
from trainings.schemas.training import TrainingStats, TrainingTime
from trainings.services.validation import require_id, require_owner


def summarize_exercise_time(exercises: Iterable[TrainedExercise]) -> TrainingTime:
    """Sum time/rest/doing over entries; an absent value counts as zero."""
    totals = TrainingTime()
    for entry in exercises:
        totals.total_seconds += to_seconds(entry.time)
        totals.total_rest_seconds += to_seconds(entry.rest)
        totals.total_exercise_seconds += to_seconds(entry.doing)
    return totals


def summarize_user_trainings(trainings: Iterable[Training]) -> TrainingStats:
    """Per-user aggregate.

    average_rating is the sum of ratings of completed trainings divided by
    the number of completed trainings, rated or not.
    """
    total = completed = rating_sum = 0
    duration = timedelta(0)
    for training in trainings:
        total += 1
        duration += training.total_duration or timedelta(0)
        if training.is_done:
            completed += 1
            rating_sum += training.rating or 0
    return TrainingStats(
        total_trainings=total,
        completed_trainings=completed,
        average_rating=rating_sum / completed if completed else 0.0,
        total_duration=duration,
    )


def training_stats(training: Training) -> TrainingStats:
    return TrainingStats(
        total_trainings=1,
        completed_trainings=1 if training.is_done else 0,
        average_rating=float(training.rating or 0),
        total_duration=training.total_duration or timedelta(0),
    )


class TimeAccountingService:
    def __init__(self, repo: TrainingRepository, logger: logging.Logger | None = None):
        self.repo = repo
        self.logger = logger or logging.getLogger(__name__)

    async def calculate_training_total_time(self, training_id: int) -> TrainingTime:
        require_id(training_id, "training id")
        training = await self.repo.get_training(training_id, with_exercises=True)
        if training is None:
            raise NotFoundError(TRAINING_NOT_FOUND)
        totals = summarize_exercise_time(training.exercises)
        self.logger.debug(
            "training time calculated",
            extra={"training_id": training_id, "entries": len(training.exercises)},
        )
        return totals

    async def get_training_stats(self, training_id: int) -> TrainingStats:
        require_id(training_id, "training id")
        training = await self.repo.get_training(training_id, with_exercises=False)
        if training is None:
            raise NotFoundError(TRAINING_NOT_FOUND)
        return training_stats(training)

    async def get_user_training_stats(self, owner_id: uuid.UUID) -> TrainingStats:
        require_owner(owner_id)
        trainings = await self.repo.list_trainings_by_owner(owner_id)
        return summarize_user_trainings(trainings)
