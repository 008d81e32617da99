"""Training and TrainedExercise models."""

from __future__ import annotations

import uuid
from datetime import datetime, timedelta
from decimal import Decimal

from sqlalchemy import Boolean, DateTime, ForeignKey, Index, Integer, Interval, Numeric, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from trainings.core.enums import TrainingState
from trainings.db.base import Base


class Training(Base):
    """A workout session owned by a user; aggregate root for its exercise entries.

    Optional timer fields are NULL until something computes them (NULL is not zero).
    """

    __tablename__ = "trainings"
    __table_args__ = (
        Index("ix_trainings_user_planned", "user_id", "planned_date"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False)
    title: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    is_done: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    planned_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    actual_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    started_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    finished_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    total_duration: Mapped[timedelta | None] = mapped_column(Interval, nullable=True)
    total_rest_time: Mapped[timedelta | None] = mapped_column(Interval, nullable=True)
    total_exercise_time: Mapped[timedelta | None] = mapped_column(Interval, nullable=True)

    rating: Mapped[int | None] = mapped_column(Integer, nullable=True)  # 1..5

    # Pause sub-state of a started training
    is_paused: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    paused_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    paused_duration: Mapped[timedelta | None] = mapped_column(Interval, nullable=True)

    exercises: Mapped[list["TrainedExercise"]] = relationship(
        "TrainedExercise",
        back_populates="training",
        cascade="all, delete-orphan",
        order_by="TrainedExercise.id",
    )

    @property
    def state(self) -> TrainingState:
        if self.is_done:
            return TrainingState.DONE
        if self.is_paused:
            return TrainingState.PAUSED
        if self.started_at is not None:
            return TrainingState.STARTED
        return TrainingState.PLANNED


class TrainedExercise(Base):
    """One performed-exercise entry (a set). exercise_id points into the external catalog."""

    __tablename__ = "trained_exercises"
    __table_args__ = (Index("ix_trained_exercises_training_id", "training_id"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    training_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("trainings.id", ondelete="CASCADE"), nullable=False
    )
    exercise_id: Mapped[int] = mapped_column(Integer, nullable=False)

    weight: Mapped[Decimal | None] = mapped_column(Numeric(8, 2), nullable=True)  # kg
    approaches: Mapped[int | None] = mapped_column(Integer, nullable=True)
    reps: Mapped[int | None] = mapped_column(Integer, nullable=True)
    time: Mapped[timedelta | None] = mapped_column(Interval, nullable=True)  # whole exercise
    doing: Mapped[timedelta | None] = mapped_column(Interval, nullable=True)  # under load
    rest: Mapped[timedelta | None] = mapped_column(Interval, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    training: Mapped["Training"] = relationship("Training", back_populates="exercises")
