import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from app.database import Base, get_db, json_serializer
from app.main import app
from app.models.admin_user import AdminUser
from app.services.auth_service import hash_password
from app.utils.cache import cache

TEST_DB_URL = "sqlite:///./test_sonaverse.db"

engine = create_engine(TEST_DB_URL, connect_args={"check_same_thread": False}, json_serializer=json_serializer)
TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)

ADMIN_PASSWORD = "admin-pass-1234"
EDITOR_PASSWORD = "editor-pass-1234"


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
    cache.clear()
    yield
    cache.clear()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def sqlite_foreign_keys():
    """이 테스트 동안 SQLite 외래 키 제약을 켠다."""

    def enable(dbapi_connection, connection_record, connection_proxy):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    engine.dispose()
    event.listen(engine, "checkout", enable)
    yield
    event.remove(engine, "checkout", enable)
    engine.dispose()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def seed_users(db):
    users = {
        "admin": AdminUser(
            username="admin", email="admin@sonaverse.kr", role="admin",
            password_hash=hash_password(ADMIN_PASSWORD), is_active=True,
        ),
        "editor": AdminUser(
            username="editor", email="editor@sonaverse.kr", role="editor",
            password_hash=hash_password(EDITOR_PASSWORD), is_active=True,
        ),
    }
    for u in users.values():
        db.add(u)
    db.commit()
    for u in users.values():
        db.refresh(u)
    return users


def get_token(client, username: str, password: str | None = None) -> str:
    password = password or (ADMIN_PASSWORD if username == "admin" else EDITOR_PASSWORD)
    resp = client.post("/api/auth/login", json={"username": username, "password": password})
    assert resp.status_code == 200, resp.text
    return resp.json()["access_token"]


def auth_headers(client, username: str = "admin", password: str | None = None) -> dict:
    return {"Authorization": f"Bearer {get_token(client, username, password)}"}


def localized(title: str, body: str, en_title: str = "", en_body: str = "", **extra) -> dict:
    return {
        "ko": {"title": title, "body": body, **extra},
        "en": {"title": en_title, "body": en_body},
    }


def press_payload(slug: str, **overrides) -> dict:
    payload = {
        "slug": slug,
        "press_name": {"ko": "한국경제", "en": "Korea Economic Daily"},
        "content": localized("보듬 기저귀 출시", "<p>소나버스가 보듬 기저귀를 출시했다.</p>",
                             "Bodeum diaper launch", "<p>SONAVERSE launched Bodeum.</p>"),
        "external_link": "https://news.example.com/1",
        "tags": ["출시"],
        "is_active": True,
    }
    payload.update(overrides)
    return payload


def story_payload(slug: str, **overrides) -> dict:
    payload = {
        "slug": slug,
        "content": localized("시니어 케어 이야기", "<p>돌봄 현장의 이야기</p>"),
        "tags": ["care"],
        "is_published": True,
        "is_main": False,
    }
    payload.update(overrides)
    return payload


def product_payload(slug: str, **overrides) -> dict:
    payload = {
        "slug": slug,
        "name": {"ko": "보듬 팬티형 기저귀", "en": "Bodeum Pants"},
        "description": {"ko": "편안한 착용감", "en": ""},
        "category": "팬티형",
        "thumbnail_image": "/uploads/blob/product/thumb.png",
        "tags": ["bodeum"],
        "is_active": True,
    }
    payload.update(overrides)
    return payload
