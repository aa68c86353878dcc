"""관리자 계정 관리 API를 검증하는 자동화 테스트입니다."""

from app.models.press_release import PressRelease
from app.models.sonaverse_story import SonaverseStory
from tests.conftest import auth_headers, press_payload, story_payload


def test_list_users_admin_success(client, seed_users):
    headers = auth_headers(client, "admin")
    resp = client.get("/api/admin/users", headers=headers)
    assert resp.status_code == 200
    assert len(resp.json()) == 2


def test_list_users_forbidden_for_editor(client, seed_users):
    headers = auth_headers(client, "editor")
    resp = client.get("/api/admin/users", headers=headers)
    assert resp.status_code == 403


def test_create_user_and_login(client, seed_users):
    headers = auth_headers(client, "admin")
    resp = client.post(
        "/api/admin/users",
        headers=headers,
        json={"username": "writer", "email": "writer@sonaverse.kr", "role": "editor", "password": "writer-pass-1"},
    )
    assert resp.status_code == 200
    assert resp.json()["is_active"] is True

    login = client.post("/api/auth/login", json={"username": "writer", "password": "writer-pass-1"})
    assert login.status_code == 200


def test_create_user_duplicate_username(client, seed_users):
    headers = auth_headers(client, "admin")
    resp = client.post(
        "/api/admin/users",
        headers=headers,
        json={"username": "editor", "email": "other@sonaverse.kr", "password": "long-enough-1"},
    )
    assert resp.status_code == 400


def test_create_user_short_password(client, seed_users):
    headers = auth_headers(client, "admin")
    resp = client.post(
        "/api/admin/users",
        headers=headers,
        json={"username": "short", "email": "short@sonaverse.kr", "password": "1234"},
    )
    assert resp.status_code == 400


def test_create_user_invalid_role(client, seed_users):
    headers = auth_headers(client, "admin")
    resp = client.post(
        "/api/admin/users",
        headers=headers,
        json={"username": "root", "email": "root@sonaverse.kr", "role": "superuser", "password": "long-enough-1"},
    )
    assert resp.status_code == 400


def test_deactivate_user_blocks_login(client, seed_users):
    headers = auth_headers(client, "admin")
    editor_id = seed_users["editor"].id
    resp = client.put(f"/api/admin/users/{editor_id}", headers=headers, json={"is_active": False})
    assert resp.status_code == 200
    assert resp.json()["is_active"] is False

    login = client.post("/api/auth/login", json={"username": "editor", "password": "editor-pass-1234"})
    assert login.status_code == 401


def test_cannot_delete_self(client, seed_users):
    headers = auth_headers(client, "admin")
    resp = client.delete(f"/api/admin/users/{seed_users['admin'].id}", headers=headers)
    assert resp.status_code == 400


def test_delete_user(client, seed_users):
    headers = auth_headers(client, "admin")
    resp = client.delete(f"/api/admin/users/{seed_users['editor'].id}", headers=headers)
    assert resp.status_code == 204
    assert len(client.get("/api/admin/users", headers=headers).json()) == 1


def test_delete_user_who_wrote_content(sqlite_foreign_keys, client, db, seed_users):
    editor_headers = auth_headers(client, "editor")
    resp = client.post("/api/press", headers=editor_headers, json=press_payload("editor-news"))
    assert resp.status_code == 200
    client.post("/api/sonaverse-story", headers=editor_headers, json=story_payload("editor-story"))

    headers = auth_headers(client, "admin")
    resp = client.delete(f"/api/admin/users/{seed_users['editor'].id}", headers=headers)
    assert resp.status_code == 204

    press = db.query(PressRelease).filter(PressRelease.slug == "editor-news").one()
    assert press.updated_by is None
    story = db.query(SonaverseStory).filter(SonaverseStory.slug == "editor-story").one()
    assert story.author_id is None

    versions = client.get("/api/admin/press/editor-news/versions", headers=headers).json()
    assert versions[0]["changed_by"] is None
    assert client.get("/api/press/editor-news").status_code == 200
