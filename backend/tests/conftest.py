import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from app.config import settings
from app.database import Base, get_db
from app.main import app
from app.models.staff import Staff
from app.services.staff_service import hash_password

TEST_DB_URL = "sqlite:///./test_kado.db"

# 테스트에서는 bcrypt 비용을 최소로 낮춘다.
settings.BCRYPT_ROUNDS = 4

engine = create_engine(TEST_DB_URL, connect_args={"check_same_thread": False})
TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)

ADMIN_EMAIL = "admin@kado.org"
ADMIN_PASSWORD = "kado-admin"


def override_get_db():
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def seed_staff(db):
    staff = {
        "admin": Staff(email=ADMIN_EMAIL, password=hash_password(ADMIN_PASSWORD), name="Kado Admin"),
        "editor": Staff(email="editor@kado.org", password=hash_password("editor-pass"), name="Editor"),
        "disabled": Staff(email="disabled@kado.org", password=hash_password("disabled-pass"), active=False),
    }
    for s in staff.values():
        db.add(s)
    db.commit()
    for s in staff.values():
        db.refresh(s)
    return staff


def get_token(client, email: str = ADMIN_EMAIL, password: str = ADMIN_PASSWORD) -> str:
    resp = client.post("/api/auth/login", json={"email": email, "password": password})
    assert resp.status_code == 200, resp.text
    return resp.json()["access_token"]


def auth_headers(client, email: str = ADMIN_EMAIL, password: str = ADMIN_PASSWORD) -> dict:
    return {"Authorization": f"Bearer {get_token(client, email, password)}"}
