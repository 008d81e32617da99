"""Global training templates - read-only workouts shared by all users."""

from __future__ import annotations

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from trainings.db.base import Base


class GlobalTraining(Base):
    """Shared workout definition (title + ordered exercise references)."""

    __tablename__ = "global_trainings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    level: Mapped[str] = mapped_column(String(50), nullable=False, index=True)

    exercises: Mapped[list["GlobalTrainingExercise"]] = relationship(
        "GlobalTrainingExercise",
        back_populates="global_training",
        cascade="all, delete-orphan",
        order_by="GlobalTrainingExercise.position",
    )


class GlobalTrainingExercise(Base):
    """Exercise slot in a template (order only; sets are filled in during the training)."""

    __tablename__ = "global_training_exercises"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    global_training_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("global_trainings.id", ondelete="CASCADE"), nullable=False, index=True
    )
    exercise_id: Mapped[int] = mapped_column(Integer, nullable=False)
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    global_training: Mapped["GlobalTraining"] = relationship("GlobalTraining", back_populates="exercises")
