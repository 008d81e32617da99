"""Persistence adapter for trainings, their exercise entries and global templates.

Every method runs inside the caller's AsyncSession and only flushes; the
session owner (``get_db`` for HTTP requests) commits. Storage failures are
logged with the operation name and re-raised as InternalError.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import AsyncIterator, Iterator
from contextlib import asynccontextmanager, contextmanager
from datetime import datetime

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from trainings.core.errors import InternalError
from trainings.models.global_training import GlobalTraining, GlobalTrainingExercise
from trainings.models.training import TrainedExercise, Training


class TrainingRepository:
    def __init__(self, session: AsyncSession, logger: logging.Logger | None = None):
        self.session = session
        self.logger = logger or logging.getLogger(__name__)

    @contextmanager
    def _guard(self, operation: str, **context) -> Iterator[None]:
        try:
            yield
        except SQLAlchemyError as exc:
            self.logger.error(
                "%s failed: %s", operation, exc, exc_info=True, extra={"operation": operation, **context}
            )
            raise InternalError(f"{operation} failed") from exc

    def _done(self, operation: str, message: str, **context) -> None:
        self.logger.debug("%s: %s", operation, message, extra={"operation": operation, **context})

    @asynccontextmanager
    async def transaction(self, operation: str, **context) -> AsyncIterator[None]:
        """Atomic block (SAVEPOINT): everything inside is kept or rolled back together."""
        with self._guard(operation, **context):
            async with self.session.begin_nested():
                yield

    # ── Trainings ────────────────────────────────────────────────────────

    async def create_training(self, training: Training) -> Training:
        with self._guard("create_training", user_id=str(training.user_id)):
            self.session.add(training)
            await self.session.flush()
        self._done("create_training", "training created", training_id=training.id)
        return training

    async def get_training(self, training_id: int, with_exercises: bool = True) -> Training | None:
        stmt = select(Training).where(Training.id == training_id)
        if with_exercises:
            stmt = stmt.options(selectinload(Training.exercises))
        with self._guard("get_training", training_id=training_id):
            # populate_existing: entries may have been added/removed since the
            # training entered the identity map
            result = await self.session.execute(stmt.execution_options(populate_existing=True))
            training = result.scalar_one_or_none()
        return training

    async def update_training(self, training: Training) -> Training:
        with self._guard("update_training", training_id=training.id):
            await self.session.flush()
        self._done("update_training", "training updated", training_id=training.id)
        return training

    async def update_training_timers(self, training: Training) -> Training:
        with self._guard("update_training_timers", training_id=training.id):
            await self.session.flush()
        self._done("update_training_timers", "training timers updated", training_id=training.id)
        return training

    async def delete_training_cascade(self, training_id: int) -> bool:
        """Delete a training and all its entries. Returns False when it does not exist."""
        training = await self.get_training(training_id, with_exercises=True)
        if training is None:
            return False
        with self._guard("delete_training_cascade", training_id=training_id):
            await self.session.delete(training)
            await self.session.flush()
        self._done("delete_training_cascade", "training deleted", training_id=training_id)
        return True

    async def list_trainings_by_owner(self, user_id: uuid.UUID) -> list[Training]:
        stmt = (
            select(Training)
            .where(Training.user_id == user_id)
            .order_by(Training.planned_date.desc(), Training.id.desc())
        )
        with self._guard("list_trainings_by_owner", user_id=str(user_id)):
            result = await self.session.execute(stmt)
            trainings = list(result.scalars().all())
        self._done("list_trainings_by_owner", "trainings listed", user_id=str(user_id), count=len(trainings))
        return trainings

    async def get_current_training(self, user_id: uuid.UUID) -> Training | None:
        """Most recently started training of the user that is not done yet."""
        stmt = (
            select(Training)
            .where(
                Training.user_id == user_id,
                Training.started_at.isnot(None),
                Training.is_done.is_(False),
            )
            .options(selectinload(Training.exercises))
            .order_by(Training.started_at.desc(), Training.id.desc())
            .limit(1)
        )
        with self._guard("get_current_training", user_id=str(user_id)):
            result = await self.session.execute(stmt.execution_options(populate_existing=True))
            return result.scalar_one_or_none()

    async def list_trainings_planned_between(
        self, user_id: uuid.UUID, start: datetime, end: datetime
    ) -> list[Training]:
        """Trainings with start <= planned_date < end, earliest first."""
        stmt = (
            select(Training)
            .where(
                Training.user_id == user_id,
                Training.planned_date >= start,
                Training.planned_date < end,
            )
            .order_by(Training.planned_date, Training.id)
        )
        with self._guard("list_trainings_planned_between", user_id=str(user_id)):
            result = await self.session.execute(stmt)
            return list(result.scalars().all())

    # ── Trained exercises ────────────────────────────────────────────────

    async def add_exercise_entry(self, entry: TrainedExercise) -> TrainedExercise:
        with self._guard("add_exercise_entry", training_id=entry.training_id, exercise_id=entry.exercise_id):
            self.session.add(entry)
            await self.session.flush()
        self._done(
            "add_exercise_entry",
            "exercise added to training",
            trained_exercise_id=entry.id,
            training_id=entry.training_id,
        )
        return entry

    async def get_exercise_entry(self, entry_id: int) -> TrainedExercise | None:
        with self._guard("get_exercise_entry", trained_exercise_id=entry_id):
            result = await self.session.execute(select(TrainedExercise).where(TrainedExercise.id == entry_id))
            return result.scalar_one_or_none()

    async def update_exercise_entry(self, entry: TrainedExercise) -> TrainedExercise:
        with self._guard("update_exercise_entry", trained_exercise_id=entry.id):
            await self.session.flush()
        self._done("update_exercise_entry", "trained exercise updated", trained_exercise_id=entry.id)
        return entry

    async def update_exercise_timers(self, entry: TrainedExercise) -> TrainedExercise:
        with self._guard("update_exercise_timers", trained_exercise_id=entry.id):
            await self.session.flush()
        self._done(
            "update_exercise_timers",
            "exercise time updated",
            trained_exercise_id=entry.id,
            training_id=entry.training_id,
        )
        return entry

    async def delete_exercise_entry(self, training_id: int, entry_id: int) -> bool:
        """Delete an entry only if it belongs to training_id. Returns False when nothing matched."""
        with self._guard("delete_exercise_entry", training_id=training_id, trained_exercise_id=entry_id):
            result = await self.session.execute(
                select(TrainedExercise).where(
                    TrainedExercise.id == entry_id,
                    TrainedExercise.training_id == training_id,
                )
            )
            entry = result.scalar_one_or_none()
            if entry is None:
                return False
            await self.session.delete(entry)
            await self.session.flush()
        self._done(
            "delete_exercise_entry",
            "exercise removed from training",
            training_id=training_id,
            trained_exercise_id=entry_id,
        )
        return True

    # ── Global templates (read-only) ─────────────────────────────────────

    async def get_global_template(self, template_id: int) -> GlobalTraining | None:
        stmt = (
            select(GlobalTraining)
            .where(GlobalTraining.id == template_id)
            .options(selectinload(GlobalTraining.exercises))
        )
        with self._guard("get_global_template", global_training_id=template_id):
            result = await self.session.execute(stmt)
            return result.scalar_one_or_none()

    async def get_global_template_exercises(self, template_id: int) -> list[GlobalTrainingExercise]:
        stmt = (
            select(GlobalTrainingExercise)
            .where(GlobalTrainingExercise.global_training_id == template_id)
            .order_by(GlobalTrainingExercise.position, GlobalTrainingExercise.id)
        )
        with self._guard("get_global_template_exercises", global_training_id=template_id):
            result = await self.session.execute(stmt)
            return list(result.scalars().all())

    async def list_global_templates(self, level: str | None = None) -> list[GlobalTraining]:
        stmt = select(GlobalTraining).options(selectinload(GlobalTraining.exercises)).order_by(GlobalTraining.id)
        if level is not None:
            stmt = stmt.where(GlobalTraining.level == level)
        with self._guard("list_global_templates", training_level=level):
            result = await self.session.execute(stmt)
            templates = list(result.scalars().all())
        self._done("list_global_templates", "global trainings listed", count=len(templates))
        return templates
