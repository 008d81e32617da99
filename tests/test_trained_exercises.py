from datetime import timedelta
from decimal import Decimal

import pytest

from trainings.core.errors import EXERCISE_NOT_FOUND, InvalidArgumentError, NotFoundError
from trainings.schemas.training import TrainedExerciseCreate, TrainedExerciseTimeUpdate, TrainedExerciseUpdate


async def test_add_appends_entry(make_training, exercises, lifecycle):
    training = await make_training()

    entry = await exercises.add(
        training.id,
        TrainedExerciseCreate(exercise_id=7, weight="62.5", approaches=3, reps=10, rest="90s", notes="easy"),
    )

    assert entry.id > 0
    assert entry.training_id == training.id
    assert entry.weight == Decimal("62.5")
    assert (entry.approaches, entry.reps) == (3, 10)
    assert entry.rest == timedelta(seconds=90)
    assert entry.time is None
    assert len((await lifecycle.get(training.id)).exercises) == 1


async def test_add_allows_duplicate_exercise(make_training, exercises, lifecycle):
    training = await make_training()

    await exercises.add(training.id, TrainedExerciseCreate(exercise_id=7))
    await exercises.add(training.id, TrainedExerciseCreate(exercise_id=7))

    assert [e.exercise_id for e in (await lifecycle.get(training.id)).exercises] == [7, 7]


@pytest.mark.parametrize(
    "training_id, fields",
    [
        (0, {"exercise_id": 7}),
        (1, {"exercise_id": 0}),
        (1, {"exercise_id": 7, "weight": -1}),
        (1, {"exercise_id": 7, "approaches": 21}),
        (1, {"exercise_id": 7, "reps": 0}),
        (1, {"exercise_id": 7, "doing": "-10s"}),
    ],
)
async def test_add_rejects_invalid_input(make_training, exercises, training_id, fields):
    await make_training()

    with pytest.raises(InvalidArgumentError):
        await exercises.add(training_id, TrainedExerciseCreate(**fields))


async def test_add_to_missing_training(exercises):
    with pytest.raises(NotFoundError):
        await exercises.add(42, TrainedExerciseCreate(exercise_id=7))


async def test_update_entry_merges_fields(make_training, exercises):
    training = await make_training()
    entry = await exercises.add(training.id, TrainedExerciseCreate(exercise_id=7, reps=8, notes="warmup"))

    updated = await exercises.update_entry(entry.id, TrainedExerciseUpdate(reps=12, time="3m", notes=None))

    assert updated.reps == 12
    assert updated.time == timedelta(minutes=3)
    assert updated.notes == "warmup"


async def test_update_entry_missing(exercises):
    with pytest.raises(InvalidArgumentError):
        await exercises.update_entry(0, TrainedExerciseUpdate())
    with pytest.raises(NotFoundError) as exc:
        await exercises.update_entry(77, TrainedExerciseUpdate(reps=1))
    assert exc.value.message == EXERCISE_NOT_FOUND


async def test_update_time_sets_timers(make_training, exercises):
    training = await make_training()
    entry = await exercises.add(training.id, TrainedExerciseCreate(exercise_id=7, notes="keep"))

    updated = await exercises.update_time(
        entry.id, TrainedExerciseTimeUpdate(approaches=4, doing="40s", rest="2m", time="4m")
    )

    assert updated.approaches == 4
    assert (updated.doing, updated.rest, updated.time) == (
        timedelta(seconds=40),
        timedelta(minutes=2),
        timedelta(minutes=4),
    )
    assert updated.notes == "keep"


async def test_single_timer_overwrites(make_training, exercises):
    training = await make_training()
    entry = await exercises.add(training.id, TrainedExerciseCreate(exercise_id=7, rest="1m", doing="20s"))

    await exercises.update_rest_time(entry.id, timedelta(seconds=75))
    updated = await exercises.update_doing_time(entry.id, timedelta(seconds=35))

    assert updated.rest == timedelta(seconds=75)
    assert updated.doing == timedelta(seconds=35)


async def test_remove_is_scoped_to_training(make_training, exercises, repo):
    first = await make_training()
    second = await make_training()
    entry = await exercises.add(first.id, TrainedExerciseCreate(exercise_id=7))

    with pytest.raises(NotFoundError):
        await exercises.remove(second.id, entry.id)
    assert await repo.get_exercise_entry(entry.id) is not None

    await exercises.remove(first.id, entry.id)
    assert await repo.get_exercise_entry(entry.id) is None
