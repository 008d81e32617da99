"""Insert the starter global training templates (skips titles that already exist).

Run from the repository root after ``alembic upgrade head``:

    python scripts/seed_global_trainings.py
"""

import asyncio
import os
import sys

# Add parent directory to path so we can import the trainings package
sys.path.append(os.path.join(os.path.dirname(__file__), ".."))

from sqlalchemy import select

from trainings.db.session import async_session_maker, engine
from trainings.models import GlobalTraining, GlobalTrainingExercise

# (title, level, description, exercise ids from the exercise catalog in order)
TEMPLATES = [
    ("Full Body Basics", "beginner", "Three compound lifts for the first weeks.", [1, 4, 7]),
    ("Upper / Lower: Upper", "intermediate", "Press and pull volume day.", [1, 2, 3, 5]),
    ("Upper / Lower: Lower", "intermediate", "Squat and hinge day.", [4, 6, 8]),
    ("Strength Block", "advanced", "Heavy triples on the big lifts.", [1, 4, 6, 9, 10]),
]


async def main():
    async with async_session_maker() as session:
        result = await session.execute(select(GlobalTraining.title))
        existing = set(result.scalars().all())
        created = 0
        for title, level, description, exercise_ids in TEMPLATES:
            if title in existing:
                print(f"Skipping '{title}' (already exists)")
                continue
            session.add(
                GlobalTraining(
                    title=title,
                    level=level,
                    description=description,
                    exercises=[
                        GlobalTrainingExercise(exercise_id=exercise_id, position=position)
                        for position, exercise_id in enumerate(exercise_ids)
                    ],
                )
            )
            created += 1
        await session.commit()
    print(f"Created {created} global training(s).")
    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())
