"""Shared enums for models and API."""

from enum import Enum


class TrainingState(str, Enum):
    """Lifecycle position of a training, derived from its stored fields."""

    PLANNED = "planned"  # no started_at
    STARTED = "started"
    PAUSED = "paused"  # started, currently on a pause
    DONE = "done"
