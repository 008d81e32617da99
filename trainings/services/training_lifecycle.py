"""Training lifecycle: Planned -> Started (<-> Paused) -> Done.

Every operation validates its input before the first repository call. Fields
sent as null in a patch are treated as not supplied.
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timedelta

from trainings.core.clock import as_utc, utcnow
from trainings.core.errors import (
    NOT_TRAINING_OWNER,
    TRAINING_ALREADY_DONE,
    TRAINING_NOT_ACTIVE,
    TRAINING_NOT_FOUND,
    ConflictError,
    ForbiddenError,
    InvalidArgumentError,
    NotFoundError,
)
from trainings.models.training import Training
from trainings.repositories.trainings import TrainingRepository
from trainings.schemas.training import TrainingCreate, TrainingUpdate
from trainings.services.validation import check_durations, check_rating, require_id, require_owner

_TIMESTAMP_FIELDS = ("planned_date", "actual_date", "started_at", "finished_at")
_DURATION_FIELDS = ("total_duration", "total_rest_time", "total_exercise_time")


def _supplied(data: dict) -> dict:
    """Drop explicit nulls and normalize timestamps to UTC."""
    out = {k: v for k, v in data.items() if v is not None}
    for key in _TIMESTAMP_FIELDS:
        if key in out:
            out[key] = as_utc(out[key])
    return out


def _fold_pause(training: Training, now: datetime) -> None:
    """Close an open pause, adding its length to paused_duration."""
    if training.is_paused and training.paused_at is not None:
        elapsed = now - as_utc(training.paused_at)
        training.paused_duration = (training.paused_duration or timedelta(0)) + elapsed
    training.is_paused = False
    training.paused_at = None


def _finish(training: Training, now: datetime) -> None:
    _fold_pause(training, now)
    if training.started_at is None:
        training.started_at = now - training.total_duration if training.total_duration else now
    training.is_done = True
    training.actual_date = now
    training.finished_at = now


class TrainingLifecycleService:
    def __init__(self, repo: TrainingRepository, logger: logging.Logger | None = None):
        self.repo = repo
        self.logger = logger or logging.getLogger(__name__)

    async def _load(self, training_id: int, with_exercises: bool = True) -> Training:
        require_id(training_id, "training id")
        training = await self.repo.get_training(training_id, with_exercises=with_exercises)
        if training is None:
            raise NotFoundError(TRAINING_NOT_FOUND)
        return training

    async def _load_owned(self, training_id: int, caller_id: uuid.UUID) -> Training:
        require_id(training_id, "training id")
        require_owner(caller_id)
        training = await self._load(training_id)
        if training.user_id != caller_id:
            self.logger.warning(
                "training access denied",
                extra={"training_id": training_id, "user_id": str(caller_id)},
            )
            raise ForbiddenError(NOT_TRAINING_OWNER)
        return training

    # ── Queries ──────────────────────────────────────────────────────────

    async def get(self, training_id: int) -> Training:
        return await self._load(training_id)

    async def list_for_owner(self, owner_id: uuid.UUID) -> list[Training]:
        require_owner(owner_id)
        return await self.repo.list_trainings_by_owner(owner_id)

    async def get_current(self, owner_id: uuid.UUID) -> Training | None:
        require_owner(owner_id)
        return await self.repo.get_current_training(owner_id)

    async def get_todays(self, owner_id: uuid.UUID) -> list[Training]:
        """Trainings planned on the current UTC calendar day."""
        require_owner(owner_id)
        start = utcnow().replace(hour=0, minute=0, second=0, microsecond=0)
        return await self.repo.list_trainings_planned_between(owner_id, start, start + timedelta(days=1))

    # ── Commands ─────────────────────────────────────────────────────────

    async def create(self, owner_id: uuid.UUID, payload: TrainingCreate) -> Training:
        require_owner(owner_id)
        if payload.planned_date is None:
            raise InvalidArgumentError("planned date is required")
        check_rating(payload.rating)
        check_durations(**{k: getattr(payload, k) for k in _DURATION_FIELDS})

        data = _supplied(payload.model_dump(exclude={"user_id"}))
        training = Training(user_id=owner_id, exercises=[], **data)
        await self.repo.create_training(training)
        self.logger.info(
            "training created",
            extra={"training_id": training.id, "user_id": str(owner_id)},
        )
        return training

    async def update(self, training_id: int, patch: TrainingUpdate) -> Training:
        require_id(training_id, "training id")
        data = _supplied(patch.model_dump(exclude_unset=True))
        check_rating(data.get("rating"))
        check_durations(**{k: data.get(k) for k in _DURATION_FIELDS})

        training = await self._load(training_id)
        if training.is_done and data.get("is_done") is False:
            raise ConflictError(TRAINING_ALREADY_DONE)
        for key, value in data.items():
            setattr(training, key, value)
        await self.repo.update_training(training)
        self.logger.info("training updated", extra={"training_id": training_id, "fields": sorted(data)})
        return training

    async def start(self, training_id: int, caller_id: uuid.UUID) -> Training:
        training = await self._load_owned(training_id, caller_id)
        if training.started_at is not None:
            return training
        training.started_at = utcnow()
        await self.repo.update_training(training)
        self.logger.info("training started", extra={"training_id": training_id, "user_id": str(caller_id)})
        return training

    async def _load_active(self, training_id: int) -> Training:
        training = await self._load(training_id)
        if training.started_at is None:
            raise ConflictError(TRAINING_NOT_ACTIVE)
        if training.is_done:
            raise ConflictError(TRAINING_ALREADY_DONE)
        return training

    async def pause(self, training_id: int) -> Training:
        training = await self._load_active(training_id)
        if training.is_paused:
            return training
        training.is_paused = True
        training.paused_at = utcnow()
        await self.repo.update_training(training)
        self.logger.info("training paused", extra={"training_id": training_id})
        return training

    async def resume(self, training_id: int) -> Training:
        training = await self._load_active(training_id)
        if not training.is_paused:
            return training
        _fold_pause(training, utcnow())
        await self.repo.update_training(training)
        self.logger.info("training resumed", extra={"training_id": training_id})
        return training

    async def update_timers(
        self,
        training_id: int,
        total_duration: timedelta | None = None,
        total_rest_time: timedelta | None = None,
        total_exercise_time: timedelta | None = None,
    ) -> Training:
        require_id(training_id, "training id")
        timers = _supplied(
            {
                "total_duration": total_duration,
                "total_rest_time": total_rest_time,
                "total_exercise_time": total_exercise_time,
            }
        )
        check_durations(**timers)

        training = await self._load(training_id)
        for key, value in timers.items():
            setattr(training, key, value)
        await self.repo.update_training_timers(training)
        return training

    async def complete(self, training_id: int, rating: int | None = None) -> Training:
        """Finish the training unconditionally; rating is overwritten, None clears it."""
        require_id(training_id, "training id")
        check_rating(rating)

        training = await self._load(training_id)
        _finish(training, utcnow())
        training.rating = rating
        await self.repo.update_training(training)
        self.logger.info("training completed", extra={"training_id": training_id, "rating": rating})
        return training

    async def mark_done(self, training_id: int, caller_id: uuid.UUID) -> Training:
        """Owner-checked completion that keeps the stored rating; no-op when already done."""
        training = await self._load_owned(training_id, caller_id)
        if training.is_done:
            return training
        _finish(training, utcnow())
        await self.repo.update_training(training)
        self.logger.info("training marked done", extra={"training_id": training_id, "user_id": str(caller_id)})
        return training

    async def delete(self, training_id: int) -> None:
        require_id(training_id, "training id")
        if not await self.repo.delete_training_cascade(training_id):
            raise NotFoundError(TRAINING_NOT_FOUND)
        self.logger.info("training deleted", extra={"training_id": training_id})
