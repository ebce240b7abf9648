from sqlalchemy.exc import OperationalError

def test_healthz_degraded(app, client, monkeypatch):
    # force the session factory to throw
    class Boom:
        def __enter__(self): raise RuntimeError("db down")
        def __exit__(self, *a): return False
    monkeypatch.setattr(app.state, "session_factory", lambda: Boom())
    r = client.get("/healthz")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "degraded"
    assert "db down" not in r.text

def test_storage_failure_is_a_generic_500(app, headers, monkeypatch):
    from fastapi.testclient import TestClient
    from liftlog.repositories.exercise_repo import ExerciseRepository

    def broken(*a, **kw):
        raise OperationalError("SELECT 1", {}, Exception("disk I/O error"))
    monkeypatch.setattr(ExerciseRepository, "find_all", broken)

    with TestClient(app, raise_server_exceptions=False) as c:
        r = c.get("/exercises", headers=headers)
    assert r.status_code == 500
    assert r.json() == {"detail": "Internal server error"}
    assert "disk I/O" not in r.text
