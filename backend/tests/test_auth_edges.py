from liftlog.security import create_access_token

def test_me_requires_token(client):
    r = client.get("/auth/me")
    assert r.status_code == 401

def test_token_expired(client, register):
    h, user = register()
    # craft an already-expired token for the same user id
    expired = create_access_token(user["id"], expires_minutes=-1)
    r = client.get("/auth/me", headers={"Authorization": f"Bearer {expired}"})
    assert r.status_code == 401
    assert r.json()["detail"] == "Token expired"

def test_token_for_unknown_user(client):
    tok = create_access_token("no-such-user")
    r = client.get("/auth/me", headers={"Authorization": f"Bearer {tok}"})
    assert r.status_code == 401
    assert r.json()["detail"] == "Not authenticated"

def test_tampered_token(client, register):
    h, _ = register()
    bad = {"Authorization": h["Authorization"][:-2] + "xx"}
    assert client.get("/auth/me", headers=bad).status_code == 401

def test_bad_token_on_public_listing_is_still_rejected(client):
    r = client.get("/exercises", headers={"Authorization": "Bearer garbage"})
    assert r.status_code == 401
