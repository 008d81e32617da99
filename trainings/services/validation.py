"""Input checks shared by the services. All raise InvalidArgumentError."""

from __future__ import annotations

import uuid
from datetime import timedelta
from decimal import Decimal

from trainings.core.constants import MAX_APPROACHES, MAX_REPS, MAX_WEIGHT_KG, RATING_MAX, RATING_MIN
from trainings.core.errors import InvalidArgumentError


def require_id(value: int | None, name: str) -> int:
    if value is None or value <= 0:
        raise InvalidArgumentError(f"invalid {name}")
    return value


def require_owner(owner_id: uuid.UUID | None) -> uuid.UUID:
    if owner_id is None or owner_id.int == 0:
        raise InvalidArgumentError("user id is required")
    return owner_id


def check_rating(rating: int | None) -> None:
    if rating is not None and not RATING_MIN <= rating <= RATING_MAX:
        raise InvalidArgumentError(f"rating must be between {RATING_MIN} and {RATING_MAX}")


def check_durations(**durations: timedelta | None) -> None:
    for name, value in durations.items():
        if value is not None and value < timedelta(0):
            raise InvalidArgumentError(f"{name} must not be negative")


def check_exercise_numbers(
    weight: Decimal | float | None = None,
    approaches: int | None = None,
    reps: int | None = None,
) -> None:
    if weight is not None and not 0 <= weight <= MAX_WEIGHT_KG:
        raise InvalidArgumentError(f"weight must be between 0 and {MAX_WEIGHT_KG}")
    if approaches is not None and not 1 <= approaches <= MAX_APPROACHES:
        raise InvalidArgumentError(f"approaches must be between 1 and {MAX_APPROACHES}")
    if reps is not None and not 1 <= reps <= MAX_REPS:
        raise InvalidArgumentError(f"reps must be between 1 and {MAX_REPS}")


def check_exercise_fields(fields: dict) -> None:
    """Validate a dumped TrainedExerciseFields payload (only the keys present)."""
    check_exercise_numbers(fields.get("weight"), fields.get("approaches"), fields.get("reps"))
    check_durations(time=fields.get("time"), doing=fields.get("doing"), rest=fields.get("rest"))
