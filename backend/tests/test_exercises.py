from liftlog.models import ExerciseStatus

def names(r):
    assert r.status_code == 200, r.text
    return [e["name"] for e in r.json()]

def test_create_exercise_starts_pending(client, register):
    h, user = register()
    r = client.post("/exercises", headers=h, json={
        "name": "  Zercher Squat ", "category": "Legs", "muscle_groups": ["Quadriceps", "Core"],
    })
    assert r.status_code == 201
    body = r.json()
    assert body["status"] == "pending"
    assert body["name"] == "Zercher Squat"
    assert body["created_by"] == user["id"]
    assert body["approved_by"] is None

def test_create_exercise_requires_auth(client):
    r = client.post("/exercises", json={"name": "X", "category": "Y", "muscle_groups": ["Z"]})
    assert r.status_code == 401

def test_create_exercise_validation(client, headers):
    base = {"name": "Row", "category": "Back", "muscle_groups": ["Back"]}
    assert client.post("/exercises", headers=headers, json={**base, "muscle_groups": []}).status_code == 422
    assert client.post("/exercises", headers=headers, json={**base, "muscle_groups": ["  "]}).status_code == 422
    assert client.post("/exercises", headers=headers, json={**base, "name": ""}).status_code == 422
    assert client.post("/exercises", headers=headers, json={**base, "name": "x" * 101}).status_code == 422
    assert client.post("/exercises", headers=headers, json={**base, "category": "c" * 51}).status_code == 422

def test_listing_visibility_per_caller(client, register, make_exercise):
    hx, x = register()
    hy, y = register()
    make_exercise("Bench Press", status=ExerciseStatus.approved)
    make_exercise("Deadlift", status=ExerciseStatus.approved)
    make_exercise("X Pending", status=ExerciseStatus.pending, created_by=x["id"])
    make_exercise("Y Pending", status=ExerciseStatus.pending, created_by=y["id"])
    make_exercise("X Rejected", status=ExerciseStatus.rejected, created_by=x["id"])

    assert names(client.get("/exercises", headers=hx)) == ["Bench Press", "Deadlift", "X Pending"]
    assert names(client.get("/exercises", headers=hy)) == ["Bench Press", "Deadlift", "Y Pending"]
    # anonymous callers only see the approved catalog
    assert names(client.get("/exercises")) == ["Bench Press", "Deadlift"]

def test_explicit_status_filter(client, headers, make_exercise):
    make_exercise("Approved One")
    make_exercise("Someone Pending", status=ExerciseStatus.pending)
    make_exercise("Old Rejected", status=ExerciseStatus.rejected)
    assert names(client.get("/exercises?status=pending", headers=headers)) == ["Someone Pending"]
    assert names(client.get("/exercises?status=rejected")) == ["Old Rejected"]
    assert client.get("/exercises?status=bogus").status_code == 422

def test_search_and_muscle_group_filters(client, make_exercise):
    make_exercise("Bench Press", muscle_groups=["Chest", "Triceps"])
    make_exercise("Incline Bench", muscle_groups=["Chest", "Shoulders"])
    make_exercise("Squat", muscle_groups=["Quadriceps"])
    assert names(client.get("/exercises?search=BENCH")) == ["Bench Press", "Incline Bench"]
    assert names(client.get("/exercises?muscle_group=shoulders")) == ["Incline Bench"]
    assert names(client.get("/exercises?search=bench&muscle_group=triceps")) == ["Bench Press"]
    # wildcard characters are matched literally
    assert names(client.get("/exercises?search=%25")) == []

def test_get_exercise_by_id(client, make_exercise):
    e = make_exercise("Squat")
    r = client.get(f"/exercises/{e.id}")
    assert r.status_code == 200
    assert r.json()["name"] == "Squat"
    assert client.get("/exercises/does-not-exist").status_code == 404

def test_approve_requires_admin(client, register, make_exercise):
    h, user = register()
    e = make_exercise("Pending Thing", status=ExerciseStatus.pending, created_by=user["id"])
    r = client.post(f"/exercises/{e.id}/approve", headers=h)
    assert r.status_code == 403
    assert r.json()["detail"] == "Insufficient role"
    assert client.post(f"/exercises/{e.id}/approve").status_code == 401

def test_admin_approves_exercise(client, register, admin_headers):
    h, _ = register()
    created = client.post("/exercises", headers=h, json={
        "name": "Landmine Press", "category": "Shoulders", "muscle_groups": ["Shoulders"],
    }).json()
    assert "Landmine Press" not in names(client.get("/exercises"))

    r = client.post(f"/exercises/{created['id']}/approve", headers=admin_headers)
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "approved"
    assert body["approved_by"] is not None
    assert body["approved_at"] is not None
    assert "Landmine Press" in names(client.get("/exercises"))

    # approving again is accepted
    assert client.post(f"/exercises/{created['id']}/approve", headers=admin_headers).status_code == 200

def test_approve_missing_exercise_is_404(client, admin_headers):
    r = client.post("/exercises/nope/approve", headers=admin_headers)
    assert r.status_code == 404
