"""Training endpoints: CRUD, lifecycle transitions, timers and statistics."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends

from trainings.api.deps import (
    get_current_user_id,
    get_exercise_service,
    get_lifecycle_service,
    get_time_service,
)
from trainings.core.errors import NotFoundError
from trainings.schemas.training import (
    TrainedExerciseCreate,
    TrainedExerciseRead,
    TrainingComplete,
    TrainingCreate,
    TrainingRead,
    TrainingStats,
    TrainingSummaryRead,
    TrainingTime,
    TrainingTimersUpdate,
    TrainingUpdate,
)
from trainings.services.time_accounting import TimeAccountingService
from trainings.services.trained_exercises import TrainedExerciseService
from trainings.services.training_lifecycle import TrainingLifecycleService

router = APIRouter()


@router.get("", response_model=list[TrainingSummaryRead])
async def list_trainings(
    user_id: uuid.UUID = Depends(get_current_user_id),
    service: TrainingLifecycleService = Depends(get_lifecycle_service),
):
    """All trainings of the caller, newest planned first (without exercises)."""
    return await service.list_for_owner(user_id)


@router.post("", response_model=TrainingRead, status_code=201)
async def create_training(
    payload: TrainingCreate,
    user_id: uuid.UUID = Depends(get_current_user_id),
    service: TrainingLifecycleService = Depends(get_lifecycle_service),
):
    """Plan a training for the caller. user_id in the body is ignored."""
    return await service.create(user_id, payload)


@router.get("/today", response_model=list[TrainingSummaryRead])
async def todays_trainings(
    user_id: uuid.UUID = Depends(get_current_user_id),
    service: TrainingLifecycleService = Depends(get_lifecycle_service),
):
    return await service.get_todays(user_id)


@router.get("/current", response_model=TrainingRead)
async def current_training(
    user_id: uuid.UUID = Depends(get_current_user_id),
    service: TrainingLifecycleService = Depends(get_lifecycle_service),
):
    """The started, not yet finished training of the caller."""
    training = await service.get_current(user_id)
    if training is None:
        raise NotFoundError("no active training")
    return training


@router.get("/stats", response_model=TrainingStats)
async def user_training_stats(
    user_id: uuid.UUID = Depends(get_current_user_id),
    service: TimeAccountingService = Depends(get_time_service),
):
    return await service.get_user_training_stats(user_id)


@router.get("/{training_id}", response_model=TrainingRead)
async def get_training(
    training_id: int,
    service: TrainingLifecycleService = Depends(get_lifecycle_service),
):
    return await service.get(training_id)


@router.put("/{training_id}", response_model=TrainingRead)
async def update_training(
    training_id: int,
    payload: TrainingUpdate,
    service: TrainingLifecycleService = Depends(get_lifecycle_service),
):
    """Merge-patch: omitted or null fields keep their stored value."""
    return await service.update(training_id, payload)


@router.delete("/{training_id}", status_code=204)
async def delete_training(
    training_id: int,
    service: TrainingLifecycleService = Depends(get_lifecycle_service),
):
    """Delete a training and its exercise entries."""
    await service.delete(training_id)


@router.post("/{training_id}/start", response_model=TrainingRead)
async def start_training(
    training_id: int,
    user_id: uuid.UUID = Depends(get_current_user_id),
    service: TrainingLifecycleService = Depends(get_lifecycle_service),
):
    return await service.start(training_id, user_id)


@router.post("/{training_id}/pause", response_model=TrainingRead)
async def pause_training(
    training_id: int,
    service: TrainingLifecycleService = Depends(get_lifecycle_service),
):
    return await service.pause(training_id)


@router.post("/{training_id}/resume", response_model=TrainingRead)
async def resume_training(
    training_id: int,
    service: TrainingLifecycleService = Depends(get_lifecycle_service),
):
    return await service.resume(training_id)


@router.post("/{training_id}/done", response_model=TrainingRead)
async def mark_training_done(
    training_id: int,
    user_id: uuid.UUID = Depends(get_current_user_id),
    service: TrainingLifecycleService = Depends(get_lifecycle_service),
):
    """Finish an owned training without touching its rating."""
    return await service.mark_done(training_id, user_id)


@router.patch("/{training_id}/complete", response_model=TrainingRead)
async def complete_training(
    training_id: int,
    payload: TrainingComplete,
    service: TrainingLifecycleService = Depends(get_lifecycle_service),
):
    """Finish the training and set its rating (null clears it)."""
    return await service.complete(training_id, payload.rating)


@router.patch("/{training_id}/timers", response_model=TrainingRead)
async def update_training_timers(
    training_id: int,
    payload: TrainingTimersUpdate,
    service: TrainingLifecycleService = Depends(get_lifecycle_service),
):
    return await service.update_timers(
        training_id,
        total_duration=payload.total_duration,
        total_rest_time=payload.total_rest_time,
        total_exercise_time=payload.total_exercise_time,
    )


@router.get("/{training_id}/stats", response_model=TrainingStats)
async def training_stats(
    training_id: int,
    service: TimeAccountingService = Depends(get_time_service),
):
    return await service.get_training_stats(training_id)


@router.get("/{training_id}/total-time", response_model=TrainingTime)
async def training_total_time(
    training_id: int,
    service: TimeAccountingService = Depends(get_time_service),
):
    """Seconds of work, rest and whole-exercise time summed over the entries."""
    return await service.calculate_training_total_time(training_id)


# ── Exercise entries scoped to a training ────────────────────────────────

@router.post("/{training_id}/exercises", response_model=TrainedExerciseRead, status_code=201)
async def add_exercise(
    training_id: int,
    payload: TrainedExerciseCreate,
    service: TrainedExerciseService = Depends(get_exercise_service),
):
    return await service.add(training_id, payload)


@router.delete("/{training_id}/exercises/{entry_id}", status_code=204)
async def remove_exercise(
    training_id: int,
    entry_id: int,
    service: TrainedExerciseService = Depends(get_exercise_service),
):
    await service.remove(training_id, entry_id)
