from sqlalchemy import select

import seed_exercises
from liftlog.models import Exercise, ExerciseStatus

def test_seed_catalog_is_idempotent(db):
    assert seed_exercises.seed_catalog(db) == len(seed_exercises.STARTER_EXERCISES)
    assert seed_exercises.seed_catalog(db) == 0
    rows = db.execute(select(Exercise)).scalars().all()
    assert sorted(e.name for e in rows) == sorted(i["name"] for i in seed_exercises.STARTER_EXERCISES)
    assert all(e.status == ExerciseStatus.approved for e in rows)

def test_seed_skips_existing_names(db, make_exercise):
    make_exercise("Squat", status=ExerciseStatus.pending)
    assert seed_exercises.seed_catalog(db) == len(seed_exercises.STARTER_EXERCISES) - 1

def test_seeded_catalog_is_public(client, db):
    seed_exercises.seed_catalog(db)
    r = client.get("/exercises?search=press")
    assert [e["name"] for e in r.json()] == ["Bench Press", "Overhead Press"]

def test_main_promotes_admin(tmp_path, monkeypatch, capsys):
    from liftlog.db import build_engine, build_session_factory
    from liftlog.models import UserRole
    from liftlog.repositories.user_repo import UserRepository
    from liftlog.security import hash_password
    from liftlog.settings import Settings

    settings = Settings(DATABASE_URL=f"sqlite:///{tmp_path / 'seed.db'}")
    monkeypatch.setattr(seed_exercises, "get_settings", lambda: settings)

    seed_exercises.main([])
    engine = build_engine(settings)
    with build_session_factory(engine)() as s:
        UserRepository(s).create(email="coach@example.com", password_hash=hash_password("StrongPassw0rd!"))

    seed_exercises.main(["--admin", "Coach@Example.com"])
    assert "coach@example.com is now an admin" in capsys.readouterr().out
    with build_session_factory(engine)() as s:
        assert UserRepository(s).get_by_email("coach@example.com").role == UserRole.admin
        assert len(s.execute(select(Exercise)).scalars().all()) == len(seed_exercises.STARTER_EXERCISES)
    engine.dispose()
