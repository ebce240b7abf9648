"""
Every test gets its own app wired to a throwaway SQLite file.
DATABASE_URL is pinned before liftlog is imported so the module-level
app in liftlog.main never touches a real database.
"""
import os
import uuid

os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient

from liftlog.main import create_app
from liftlog.models import Exercise, ExerciseStatus, UserRole
from liftlog.repositories.user_repo import UserRepository
from liftlog.settings import Settings

PWD = "StrongPassw0rd!"

def unique_email():
    return f"u_{uuid.uuid4().hex[:10]}@example.com"

@pytest.fixture
def app(tmp_path):
    application = create_app(Settings(DATABASE_URL=f"sqlite:///{tmp_path / 'test.db'}"))
    yield application
    application.state.engine.dispose()

@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c

@pytest.fixture
def db(app):
    with app.state.session_factory() as session:
        yield session

@pytest.fixture
def register(client):
    """Register a fresh user; returns (auth headers, user dict)."""
    def _register(email=None, password=PWD):
        email = email or unique_email()
        r = client.post("/auth/register", json={
            "email": email, "password": password, "password_confirm": password,
        })
        assert r.status_code == 201, r.text
        body = r.json()
        return {"Authorization": f"Bearer {body['access_token']}"}, body["user"]
    return _register

@pytest.fixture
def headers(register):
    return register()[0]

@pytest.fixture
def admin_headers(register, db):
    h, user = register()
    UserRepository(db).set_role(user["id"], role=UserRole.admin)
    return h

@pytest.fixture
def make_exercise(db):
    def _make(name="Squat", muscle_groups=("Legs",), status=ExerciseStatus.approved, created_by=None):
        e = Exercise(
            name=name,
            category="Strength",
            muscle_groups=list(muscle_groups),
            status=status,
            created_by=created_by,
        )
        db.add(e)
        db.commit()
        db.refresh(e)
        return e
    return _make
