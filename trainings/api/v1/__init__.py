"""API v1 router aggregation."""

from fastapi import APIRouter, Depends

from trainings.api.deps import get_current_user_id
from trainings.api.v1.endpoints import global_trainings, health, training_exercises, trainings

api_router = APIRouter()

# Every route except health requires a validated bearer token
authenticated = [Depends(get_current_user_id)]

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(
    trainings.router, prefix="/trainings", tags=["trainings"], dependencies=authenticated
)
api_router.include_router(
    training_exercises.router,
    prefix="/training-exercises",
    tags=["training-exercises"],
    dependencies=authenticated,
)
api_router.include_router(
    global_trainings.router,
    prefix="/global-trainings",
    tags=["global-trainings"],
    dependencies=authenticated,
)
