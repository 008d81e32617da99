"""Global training templates: browse and assign to the caller."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends

from trainings.api.deps import get_current_user_id, get_template_service
from trainings.schemas.global_training import AssignGlobalTraining, GlobalTrainingRead
from trainings.schemas.training import TrainingRead
from trainings.services.template_instantiation import TemplateInstantiationService

router = APIRouter()


@router.get("", response_model=list[GlobalTrainingRead])
async def list_global_trainings(
    level: str | None = None,
    service: TemplateInstantiationService = Depends(get_template_service),
):
    """All templates, optionally only those of one level."""
    return await service.list_global_trainings(level)


@router.get("/{template_id}", response_model=GlobalTrainingRead)
async def get_global_training(
    template_id: int,
    service: TemplateInstantiationService = Depends(get_template_service),
):
    return await service.get_global_training(template_id)


@router.post("/{template_id}/assign", response_model=TrainingRead, status_code=201)
async def assign_global_training(
    template_id: int,
    payload: AssignGlobalTraining,
    user_id: uuid.UUID = Depends(get_current_user_id),
    service: TemplateInstantiationService = Depends(get_template_service),
):
    """Copy the template into a new training planned for planned_date."""
    return await service.assign_global_training(user_id, template_id, payload.planned_date)
