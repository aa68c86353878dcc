"""언론보도 등록/조회/수정/삭제와 공개 목록 캐시를 검증하는 자동화 테스트입니다."""

from app.models.press_release import PressRelease
from tests.conftest import auth_headers, localized, press_payload


def test_create_press_requires_auth(client, seed_users):
    resp = client.post("/api/press", json=press_payload("no-auth"))
    assert resp.status_code == 401


def test_create_and_get_press(client, seed_users):
    headers = auth_headers(client)
    resp = client.post("/api/press", headers=headers, json=press_payload("launch-news"))
    assert resp.status_code == 200
    created = resp.json()
    assert created["slug"] == "launch-news"
    assert created["content"]["ko"]["title"] == "보듬 기저귀 출시"

    detail = client.get("/api/press/launch-news?lang=en").json()
    assert detail["title"] == "Bodeum diaper launch"
    assert detail["press_name"] == "Korea Economic Daily"


def test_detail_falls_back_to_korean(client, seed_users):
    headers = auth_headers(client)
    payload = press_payload("ko-only", content=localized("한국어 기사", "<p>내용</p>", "English title", ""))
    client.post("/api/press", headers=headers, json=payload)

    detail = client.get("/api/press/ko-only?lang=en").json()
    assert detail["title"] == "한국어 기사"
    assert detail["body"] == "<p>내용</p>"


def test_duplicate_slug_rejected_and_no_second_row(client, db, seed_users):
    headers = auth_headers(client)
    assert client.post("/api/press", headers=headers, json=press_payload("same-slug")).status_code == 200
    resp = client.post("/api/press", headers=headers, json=press_payload("same-slug"))
    assert resp.status_code == 400
    assert db.query(PressRelease).count() == 1


def test_missing_korean_title_is_bad_request(client, seed_users):
    headers = auth_headers(client)
    payload = press_payload("no-title", content=localized("", "<p>본문</p>"))
    resp = client.post("/api/press", headers=headers, json=payload)
    assert resp.status_code == 400
    assert resp.json()["details"]


def test_inactive_press_hidden_from_public_but_visible_to_admin(client, seed_users):
    headers = auth_headers(client)
    client.post("/api/press", headers=headers, json=press_payload("hidden-news", is_active=False))

    assert client.get("/api/press/hidden-news").status_code == 404
    assert client.get("/api/press").json()["total"] == 0

    admin_view = client.get("/api/press/hidden-news?admin=true", headers=headers)
    assert admin_view.status_code == 200
    assert admin_view.json()["is_active"] is False


def test_admin_detail_requires_auth(client, db, seed_users):
    db.add(PressRelease(
        slug="direct-row",
        press_name={"ko": "언론사", "en": ""},
        content=localized("제목", "<p>본문</p>"),
        tags=[],
        is_active=False,
    ))
    db.commit()
    assert client.get("/api/press/direct-row?admin=true").status_code == 401


def test_public_list_is_paginated_and_searchable(client, seed_users):
    headers = auth_headers(client)
    for i in range(3):
        payload = press_payload(f"news-{i}", content=localized(f"뉴스 {i}", "<p>본문</p>"))
        client.post("/api/press", headers=headers, json=payload)

    page = client.get("/api/press?page=1&pageSize=2").json()
    assert page["total"] == 3
    assert page["totalPages"] == 2
    assert len(page["results"]) == 2

    found = client.get("/api/press", params={"search": "뉴스 1"}).json()
    assert found["total"] == 1
    assert found["results"][0]["slug"] == "news-1"


def test_public_search_ignores_requested_language(client, seed_users):
    headers = auth_headers(client)
    client.post("/api/press", headers=headers, json=press_payload("bilingual"))

    found = client.get("/api/press", params={"lang": "en", "search": "보듬 기저귀"}).json()
    assert found["total"] == 1
    assert found["results"][0]["title"] == "Bodeum diaper launch"

    found = client.get("/api/press", params={"lang": "ko", "search": "Korea Economic"}).json()
    assert found["total"] == 1


def test_public_list_cache_invalidated_on_create(client, seed_users):
    headers = auth_headers(client)
    client.post("/api/press", headers=headers, json=press_payload("first"))
    assert client.get("/api/press").json()["total"] == 1

    client.post("/api/press", headers=headers, json=press_payload("second"))
    assert client.get("/api/press").json()["total"] == 2


def test_update_press_partial_and_slug_change(client, seed_users):
    headers = auth_headers(client)
    client.post("/api/press", headers=headers, json=press_payload("old-slug"))

    resp = client.put("/api/press/old-slug", headers=headers, json={"slug": "new-slug", "tags": ["수상"]})
    assert resp.status_code == 200
    data = resp.json()
    assert data["slug"] == "new-slug"
    assert data["tags"] == ["수상"]
    assert data["press_name"]["ko"] == "한국경제"

    assert client.get("/api/press/old-slug").status_code == 404
    assert client.get("/api/press/new-slug").status_code == 200


def test_update_keeping_same_slug_is_allowed(client, seed_users):
    headers = auth_headers(client)
    client.post("/api/press", headers=headers, json=press_payload("keep-slug"))
    resp = client.patch("/api/press/keep-slug", headers=headers, json={"slug": "keep-slug", "is_active": False})
    assert resp.status_code == 200
    assert resp.json()["is_active"] is False


def test_thumbnail_taken_from_content(client, seed_users):
    headers = auth_headers(client)
    payload = press_payload(
        "with-thumb",
        content=localized("제목", "<p>본문</p>", thumbnail_url="/uploads/blob/press/with-thumb/t.png"),
    )
    data = client.post("/api/press", headers=headers, json=payload).json()
    assert data["thumbnail"] == "/uploads/blob/press/with-thumb/t.png"


def test_delete_press_and_versions(client, seed_users):
    headers = auth_headers(client)
    client.post("/api/press", headers=headers, json=press_payload("to-delete"))
    client.patch("/api/press/to-delete", headers=headers, json={"tags": ["a"]})

    versions = client.get("/api/admin/press/to-delete/versions", headers=headers).json()
    assert [v["change_type"] for v in versions] == ["update", "create"]
    assert versions[0]["snapshot"]["tags"] == ["a"]

    resp = client.delete("/api/press/to-delete", headers=headers)
    assert resp.status_code == 200
    assert client.get("/api/press/to-delete").status_code == 404
    assert client.delete("/api/press/to-delete", headers=headers).status_code == 404

    # 삭제 후에도 이력은 남는다.
    history = client.get("/api/admin/press/to-delete/versions", headers=headers).json()
    assert [v["change_type"] for v in history] == ["delete", "update", "create"]
    assert history[0]["snapshot"]["slug"] == "to-delete"


def test_versions_follow_slug_rename(client, seed_users):
    headers = auth_headers(client)
    client.post("/api/press", headers=headers, json=press_payload("before"))
    client.patch("/api/press/before", headers=headers, json={"slug": "after"})

    history = client.get("/api/admin/press/after/versions", headers=headers).json()
    assert [v["slug"] for v in history] == ["after", "before"]
    assert client.get("/api/admin/press/unknown/versions", headers=headers).status_code == 404


def test_recreated_slug_starts_fresh_history(client, db, seed_users):
    headers = auth_headers(client)
    old_id = client.post("/api/press", headers=headers, json=press_payload("reuse")).json()["id"]
    client.delete("/api/press/reuse", headers=headers)
    new_id = client.post("/api/press", headers=headers, json=press_payload("reuse")).json()["id"]
    assert new_id != old_id

    history = client.get("/api/admin/press/reuse/versions", headers=headers).json()
    assert [(v["entity_id"], v["version_no"], v["change_type"]) for v in history] == [(new_id, 1, "create")]


def test_admin_list_includes_inactive_and_filters(client, seed_users):
    headers = auth_headers(client)
    client.post("/api/press", headers=headers, json=press_payload("active-one"))
    client.post("/api/press", headers=headers, json=press_payload("inactive-one", is_active=False))

    all_rows = client.get("/api/admin/press", headers=headers).json()
    assert all_rows["total"] == 2

    inactive = client.get("/api/admin/press?active=false", headers=headers).json()
    assert [row["slug"] for row in inactive["results"]] == ["inactive-one"]

    searched = client.get("/api/admin/press?search=inactive", headers=headers).json()
    assert searched["total"] == 1


def test_admin_list_requires_auth(client, seed_users):
    assert client.get("/api/admin/press").status_code == 401
