"""Exercise entries inside a training."""

from __future__ import annotations

import logging
from datetime import timedelta

from trainings.core.errors import EXERCISE_NOT_FOUND, TRAINING_NOT_FOUND, NotFoundError
from trainings.models.training import TrainedExercise
from trainings.repositories.trainings import TrainingRepository
from trainings.schemas.training import TrainedExerciseCreate, TrainedExerciseTimeUpdate, TrainedExerciseUpdate
from trainings.services.validation import check_durations, check_exercise_fields, require_id


class TrainedExerciseService:
    def __init__(self, repo: TrainingRepository, logger: logging.Logger | None = None):
        self.repo = repo
        self.logger = logger or logging.getLogger(__name__)

    async def _load(self, entry_id: int) -> TrainedExercise:
        require_id(entry_id, "trained exercise id")
        entry = await self.repo.get_exercise_entry(entry_id)
        if entry is None:
            raise NotFoundError(EXERCISE_NOT_FOUND)
        return entry

    async def _patch(self, entry_id: int, data: dict) -> TrainedExercise:
        """Merge-patch: only non-null values overwrite."""
        data = {k: v for k, v in data.items() if v is not None}
        check_exercise_fields(data)
        entry = await self._load(entry_id)
        for key, value in data.items():
            setattr(entry, key, value)
        return entry

    async def add(self, training_id: int, payload: TrainedExerciseCreate) -> TrainedExercise:
        require_id(training_id, "training id")
        require_id(payload.exercise_id, "exercise id")
        data = payload.model_dump(exclude_none=True)
        check_exercise_fields(data)

        if await self.repo.get_training(training_id, with_exercises=False) is None:
            raise NotFoundError(TRAINING_NOT_FOUND)
        entry = await self.repo.add_exercise_entry(TrainedExercise(training_id=training_id, **data))
        self.logger.info(
            "exercise added to training",
            extra={"training_id": training_id, "trained_exercise_id": entry.id, "exercise_id": entry.exercise_id},
        )
        return entry

    async def update_entry(self, entry_id: int, patch: TrainedExerciseUpdate) -> TrainedExercise:
        entry = await self._patch(entry_id, patch.model_dump(exclude_unset=True))
        return await self.repo.update_exercise_entry(entry)

    async def update_time(self, entry_id: int, patch: TrainedExerciseTimeUpdate) -> TrainedExercise:
        """Mid-training update of numbers and timers; notes are not touched."""
        entry = await self._patch(entry_id, patch.model_dump(exclude_unset=True))
        return await self.repo.update_exercise_timers(entry)

    async def update_rest_time(self, entry_id: int, rest: timedelta) -> TrainedExercise:
        check_durations(rest=rest)
        entry = await self._load(entry_id)
        entry.rest = rest
        return await self.repo.update_exercise_timers(entry)

    async def update_doing_time(self, entry_id: int, doing: timedelta) -> TrainedExercise:
        check_durations(doing=doing)
        entry = await self._load(entry_id)
        entry.doing = doing
        return await self.repo.update_exercise_timers(entry)

    async def remove(self, training_id: int, entry_id: int) -> None:
        """Delete the entry only when it belongs to training_id."""
        require_id(training_id, "training id")
        require_id(entry_id, "trained exercise id")
        if not await self.repo.delete_exercise_entry(training_id, entry_id):
            raise NotFoundError(EXERCISE_NOT_FOUND)
        self.logger.info(
            "exercise removed from training",
            extra={"training_id": training_id, "trained_exercise_id": entry_id},
        )
