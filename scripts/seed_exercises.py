"""Seed a starter exercise catalog for a user (creates the user if needed).

Usage: python scripts/seed_exercises.py you@example.com password123
"""

import asyncio
import os
import sys

# Add parent directory to path so we can import fitmaster modules
sys.path.append(os.path.join(os.path.dirname(__file__), ".."))

from fitmaster.core.enums import ExerciseType, LoadType, MuscleGroup
from fitmaster.core.security import hash_password
from fitmaster.db.session import async_session_maker, engine
from fitmaster.repositories import SqlExerciseRepository, SqlUserRepository
from fitmaster.schemas.exercise import ExerciseCreate

M, A, I = ExerciseType.MAIN, ExerciseType.AUXILIARY, ExerciseType.ISOLATION
BW, W, BAND, MACHINE = (
    LoadType.BODYWEIGHT,
    LoadType.ADDITIONAL_WEIGHT,
    LoadType.RESISTANCE_BAND,
    LoadType.MACHINE,
)

SAMPLE = [
    ("Push-ups", MuscleGroup.CHEST, BW, M, 4, 15),
    ("Weighted dips", MuscleGroup.CHEST, W, M, 4, 8),
    ("Chest press", MuscleGroup.CHEST, MACHINE, A, 3, 10),
    ("Cable fly", MuscleGroup.CHEST, MACHINE, I, 3, 12),
    ("Pull-ups", MuscleGroup.BACK, BW, M, 4, 8),
    ("Lat pulldown", MuscleGroup.BACK, MACHINE, A, 3, 10),
    ("Band pull-apart", MuscleGroup.BACK, BAND, I, 3, 15),
    ("Squat", MuscleGroup.LEGS, W, M, 4, 8),
    ("Leg press", MuscleGroup.LEGS, MACHINE, A, 3, 10),
    ("Leg extension", MuscleGroup.LEGS, MACHINE, I, 3, 12),
    ("Pike push-ups", MuscleGroup.SHOULDERS, BW, M, 3, 10),
    ("Band lateral raise", MuscleGroup.SHOULDERS, BAND, I, 3, 15),
    ("Chin-ups", MuscleGroup.ARMS, BW, M, 3, 8),
    ("Band curl", MuscleGroup.ARMS, BAND, I, 3, 12),
    ("Hanging leg raise", MuscleGroup.ABS, BW, M, 3, 12),
    ("Plank", MuscleGroup.ABS, BW, I, 3, 1),
    ("Rowing machine", MuscleGroup.CARDIO, MACHINE, M, 1, 1),
]


async def main(email: str, password: str) -> None:
    async with async_session_maker() as db:
        users = SqlUserRepository(db)
        found = await users.get_by_email(email)
        if found:
            user_id = found[0]
        else:
            user_id = (await users.create(email, hash_password(password))).id
            print(f"Created user {email}")

        exercises = SqlExerciseRepository(db)
        existing = {e.name for e in await exercises.list(user_id)}
        added = 0
        for name, group, load, kind, sets, reps in SAMPLE:
            if name in existing:
                continue
            await exercises.create(
                user_id,
                ExerciseCreate(
                    name=name, muscle_group=group, load_type=load, exercise_type=kind,
                    sets=sets, reps=reps,
                ),
            )
            added += 1
        await db.commit()
        print(f"Added {added} exercises for {email}")
    await engine.dispose()


if __name__ == "__main__":
    if len(sys.argv) != 3:
        print(__doc__)
        sys.exit(1)
    asyncio.run(main(sys.argv[1], sys.argv[2]))
