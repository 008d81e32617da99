"""Global training templates and copying them into a user's trainings."""

from __future__ import annotations

import logging
import uuid
from datetime import datetime

from trainings.core.clock import as_utc, is_same_utc_day, utcnow
from trainings.core.errors import (
    GLOBAL_TRAINING_NOT_FOUND,
    TRAINING_NOT_FOUND,
    InternalError,
    InvalidArgumentError,
    NotFoundError,
)
from trainings.models.global_training import GlobalTraining
from trainings.models.training import TrainedExercise, Training
from trainings.repositories.trainings import TrainingRepository
from trainings.services.validation import require_id, require_owner


class TemplateInstantiationService:
    def __init__(self, repo: TrainingRepository, logger: logging.Logger | None = None):
        self.repo = repo
        self.logger = logger or logging.getLogger(__name__)

    async def list_global_trainings(self, level: str | None = None) -> list[GlobalTraining]:
        if level is not None and not level.strip():
            raise InvalidArgumentError("level must not be empty")
        return await self.repo.list_global_templates(level.strip() if level else None)

    async def get_global_training(self, template_id: int) -> GlobalTraining:
        require_id(template_id, "global training id")
        template = await self.repo.get_global_template(template_id)
        if template is None:
            raise NotFoundError(GLOBAL_TRAINING_NOT_FOUND)
        return template

    async def assign_global_training(
        self, owner_id: uuid.UUID, template_id: int, planned_date: datetime | None
    ) -> Training:
        """Create a training from a template with one empty entry per template exercise.

        The training and its entries are written in one SAVEPOINT; if any
        insert fails nothing is kept.
        """
        require_owner(owner_id)
        require_id(template_id, "global training id")
        if planned_date is None:
            raise InvalidArgumentError("planned date is required")
        planned_date = as_utc(planned_date)

        template = await self.get_global_training(template_id)
        slots = await self.repo.get_global_template_exercises(template_id)

        now = utcnow()
        async with self.repo.transaction(
            "assign_global_training", user_id=str(owner_id), global_training_id=template_id
        ):
            training = await self.repo.create_training(
                Training(
                    user_id=owner_id,
                    title=template.title,
                    is_done=False,
                    planned_date=planned_date,
                    actual_date=now if is_same_utc_day(planned_date, now) else None,
                    exercises=[],
                )
            )
            for slot in slots:
                await self.repo.add_exercise_entry(
                    TrainedExercise(training_id=training.id, exercise_id=slot.exercise_id)
                )

        assigned = await self.repo.get_training(training.id, with_exercises=True)
        if assigned is None:
            # Just written in this session; missing means the store lost it
            raise InternalError(TRAINING_NOT_FOUND)
        self.logger.info(
            "global training assigned",
            extra={
                "training_id": assigned.id,
                "global_training_id": template_id,
                "user_id": str(owner_id),
                "entries": len(assigned.exercises),
            },
        )
        return assigned
