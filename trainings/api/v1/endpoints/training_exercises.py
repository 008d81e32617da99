"""Updates of single exercise entries, addressed by entry id."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from trainings.api.deps import get_exercise_service
from trainings.schemas.training import (
    DoingTimeUpdate,
    RestTimeUpdate,
    TrainedExerciseRead,
    TrainedExerciseTimeUpdate,
    TrainedExerciseUpdate,
)
from trainings.services.trained_exercises import TrainedExerciseService

router = APIRouter()


@router.put("/{entry_id}", response_model=TrainedExerciseRead)
async def update_trained_exercise(
    entry_id: int,
    payload: TrainedExerciseUpdate,
    service: TrainedExerciseService = Depends(get_exercise_service),
):
    """Merge-patch of weight, approaches, reps, timers and notes."""
    return await service.update_entry(entry_id, payload)


@router.patch("/{entry_id}/time", response_model=TrainedExerciseRead)
async def update_exercise_time(
    entry_id: int,
    payload: TrainedExerciseTimeUpdate,
    service: TrainedExerciseService = Depends(get_exercise_service),
):
    return await service.update_time(entry_id, payload)


@router.patch("/{entry_id}/rest", response_model=TrainedExerciseRead)
async def update_rest_time(
    entry_id: int,
    payload: RestTimeUpdate,
    service: TrainedExerciseService = Depends(get_exercise_service),
):
    return await service.update_rest_time(entry_id, payload.rest_time)


@router.patch("/{entry_id}/doing", response_model=TrainedExerciseRead)
async def update_doing_time(
    entry_id: int,
    payload: DoingTimeUpdate,
    service: TrainedExerciseService = Depends(get_exercise_service),
):
    return await service.update_doing_time(entry_id, payload.doing_time)
