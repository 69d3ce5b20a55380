from app.models.staff import Staff
from tests.conftest import ADMIN_EMAIL, ADMIN_PASSWORD, auth_headers


def test_login_success(client, db, seed_staff):
    resp = client.post("/api/auth/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
    assert resp.status_code == 200
    data = resp.json()
    assert "access_token" in data
    assert data["staff"]["email"] == ADMIN_EMAIL
    assert data["staff"]["login_count"] == 1
    assert data["staff"]["date_seen"] is not None


def test_login_wrong_password_counts_failure(client, db, seed_staff):
    resp = client.post("/api/auth/login", json={"email": ADMIN_EMAIL, "password": "nope"})
    assert resp.status_code == 401

    db.expire_all()
    admin = db.query(Staff).filter(Staff.email == ADMIN_EMAIL).one()
    assert admin.login_fail_count == 1
    assert admin.date_fail is not None
    assert admin.login_count == 0


def test_login_unknown_email(client, seed_staff):
    resp = client.post("/api/auth/login", json={"email": "ghost@kado.org", "password": "x"})
    assert resp.status_code == 401


def test_login_inactive_staff(client, seed_staff):
    resp = client.post("/api/auth/login", json={"email": "disabled@kado.org", "password": "disabled-pass"})
    assert resp.status_code == 401


def test_me_authenticated(client, seed_staff):
    headers = auth_headers(client)
    resp = client.get("/api/auth/me", headers=headers)
    assert resp.status_code == 200
    assert resp.json()["email"] == ADMIN_EMAIL


def test_me_unauthenticated(client):
    resp = client.get("/api/auth/me")
    assert resp.status_code in (401, 403)  # HTTPBearer raises 401 or 403 depending on version


def test_me_invalid_token(client):
    resp = client.get("/api/auth/me", headers={"Authorization": "Bearer not-a-token"})
    assert resp.status_code == 401


def test_health(client):
    resp = client.get("/api/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_logout(client, seed_staff):
    headers = auth_headers(client)
    resp = client.post("/api/auth/logout", headers=headers)
    assert resp.status_code == 200
