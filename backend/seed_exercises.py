import argparse
from sqlalchemy import select

from liftlog import models  # noqa: F401  # registers every table on Base.metadata
from liftlog.db import Base, build_engine, build_session_factory, utcnow
from liftlog.models import Exercise, ExerciseStatus, UserRole
from liftlog.repositories.user_repo import UserRepository
from liftlog.settings import get_settings

#starter catalog, approved from the start
STARTER_EXERCISES = [
    {"name": "Squat", "category": "Legs", "muscle_groups": ["Quadriceps", "Glutes", "Hamstrings"]},
    {"name": "Bench Press", "category": "Chest", "muscle_groups": ["Chest", "Triceps", "Shoulders"]},
    {"name": "Deadlift", "category": "Back", "muscle_groups": ["Back", "Glutes", "Hamstrings"]},
    {"name": "Overhead Press", "category": "Shoulders", "muscle_groups": ["Shoulders", "Triceps"]},
    {"name": "Pull-ups", "category": "Back", "muscle_groups": ["Back", "Biceps"]},
]

def seed_catalog(db) -> int:
    """Insert the starter exercises that are not in the catalog yet. Returns how many were added."""
    existing = set(db.execute(select(Exercise.name)).scalars().all())
    added = 0
    for item in STARTER_EXERCISES:
        if item["name"] in existing:
            continue
        db.add(Exercise(
            name=item["name"],
            category=item["category"],
            muscle_groups=list(item["muscle_groups"]),
            status=ExerciseStatus.approved,
            approved_at=utcnow(),
        ))
        added += 1
    db.commit()
    return added

def main(argv=None):
    parser = argparse.ArgumentParser(description="Seed the exercise catalog")
    parser.add_argument("--reset", action="store_true", help="drop and recreate all tables first")
    parser.add_argument("--admin", metavar="EMAIL", help="promote an existing user to admin")
    args = parser.parse_args(argv)

    engine = build_engine(get_settings())
    if args.reset:
        Base.metadata.drop_all(engine)
    Base.metadata.create_all(engine)

    SessionLocal = build_session_factory(engine)
    with SessionLocal() as db:
        added = seed_catalog(db)
        print(f"Seeded {added} exercises")

        if args.admin:
            repo = UserRepository(db)
            user = repo.get_by_email(args.admin)
            if not user:
                raise SystemExit(f"No user with email {args.admin}")
            repo.set_role(user.id, role=UserRole.admin)
            print(f"{user.email} is now an admin")


if __name__ == "__main__":
    main()
