from conftest import PWD, unique_email

def reg(client, email, password=PWD, confirm=None):
    return client.post("/auth/register", json={
        "email": email, "password": password, "password_confirm": confirm or password,
    })

def test_register_weak_password_rejected(client):
    r = reg(client, unique_email(), password="short")
    assert r.status_code == 422

def test_register_password_mismatch_rejected(client):
    r = reg(client, unique_email(), confirm="SomethingElse1!")
    assert r.status_code == 422

def test_register_login_and_me(client):
    email = unique_email()
    r = reg(client, email)
    assert r.status_code == 201
    body = r.json()
    assert body["token_type"] == "bearer"
    assert body["user"]["email"] == email

    r = client.post("/auth/login", json={"email": email, "password": PWD})
    assert r.status_code == 200
    token = r.json()["access_token"]

    r = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 200
    me = r.json()
    assert me["email"] == email
    assert me["role"] == "user"
    assert "password_hash" not in me

def test_duplicate_email_is_conflict_case_insensitive(client):
    email = unique_email()
    assert reg(client, email).status_code == 201
    r = reg(client, email.upper())
    assert r.status_code == 409
    assert r.json()["detail"] == "Email already exists"

def test_login_is_case_insensitive_on_email(client):
    email = unique_email()
    reg(client, email)
    r = client.post("/auth/login", json={"email": email.upper(), "password": PWD})
    assert r.status_code == 200

def test_login_wrong_password_and_unknown_email(client):
    email = unique_email()
    reg(client, email)
    r = client.post("/auth/login", json={"email": email, "password": "WrongPassw0rd!"})
    assert r.status_code == 401
    assert r.json()["detail"] == "invalid credentials"
    r = client.post("/auth/login", json={"email": unique_email(), "password": PWD})
    assert r.status_code == 401

def test_refresh_issues_new_token(client, register):
    email = unique_email()
    token = reg(client, email).json()["access_token"]
    r = client.post("/auth/refresh", json={"refresh_token": token})
    assert r.status_code == 200
    new = r.json()["access_token"]
    r = client.get("/auth/me", headers={"Authorization": f"Bearer {new}"})
    assert r.json()["email"] == email

def test_refresh_rejects_garbage(client):
    r = client.post("/auth/refresh", json={"refresh_token": "not-a-jwt"})
    assert r.status_code == 401
    assert r.json()["detail"] == "invalid token"
