"""Request-scoped dependencies: caller identity and services around the request session."""

import uuid
from functools import lru_cache

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from trainings.core.config import get_settings
from trainings.core.security import AuthClient
from trainings.db.session import get_db
from trainings.repositories.trainings import TrainingRepository
from trainings.services.template_instantiation import TemplateInstantiationService
from trainings.services.time_accounting import TimeAccountingService
from trainings.services.trained_exercises import TrainedExerciseService
from trainings.services.training_lifecycle import TrainingLifecycleService


@lru_cache
def get_auth_client() -> AuthClient:
    settings = get_settings()
    return AuthClient(settings.auth_base_url, timeout=settings.auth_timeout_seconds)


async def get_current_user_id(
    authorization: str | None = Header(default=None),
    auth: AuthClient = Depends(get_auth_client),
) -> uuid.UUID:
    """Validate the bearer token with the auth service; 401 on any failure."""
    return await auth.validate(authorization)


def get_repository(db: AsyncSession = Depends(get_db)) -> TrainingRepository:
    return TrainingRepository(db)


def get_lifecycle_service(repo: TrainingRepository = Depends(get_repository)) -> TrainingLifecycleService:
    return TrainingLifecycleService(repo)


def get_exercise_service(repo: TrainingRepository = Depends(get_repository)) -> TrainedExerciseService:
    return TrainedExerciseService(repo)


def get_time_service(repo: TrainingRepository = Depends(get_repository)) -> TimeAccountingService:
    return TimeAccountingService(repo)


def get_template_service(repo: TrainingRepository = Depends(get_repository)) -> TemplateInstantiationService:
    return TemplateInstantiationService(repo)
