"""이미지 업로드, 본문 임시 src 교체, 고아 blob 정리를 검증하는 자동화 테스트입니다."""

import shutil
from pathlib import Path
from uuid import uuid4

import pytest

from app.config import settings
from app.services import editor_image_service
from app.services.storage_service import LocalStorage, StorageError
from tests.conftest import auth_headers, localized, press_payload

PNG = b"\x89PNG\r\n\x1a\n"


@pytest.fixture
def upload_dir(monkeypatch):
    test_upload_dir = Path("test_uploads_runtime") / uuid4().hex / "uploads"
    test_upload_dir.mkdir(parents=True, exist_ok=True)
    monkeypatch.setattr(settings, "UPLOAD_DIR", str(test_upload_dir))
    yield test_upload_dir
    shutil.rmtree(test_upload_dir.parent, ignore_errors=True)


def test_upload_requires_auth(client, seed_users):
    files = {"file": ("test.png", PNG, "image/png")}
    resp = client.post("/api/upload", files=files)
    assert resp.status_code == 401


def test_upload_image_success(client, seed_users, upload_dir):
    headers = auth_headers(client)
    files = {"file": ("photo.png", PNG, "image/png")}
    resp = client.post("/api/upload", headers=headers, files=files, data={"filename": "hero", "folder": "press"})
    assert resp.status_code == 200
    data = resp.json()
    assert data["url"] == "/uploads/blob/press/hero.png"
    assert data["fileName"] == "hero.png"
    assert data["originalName"] == "photo.png"
    assert data["size"] == len(PNG)
    assert (upload_dir / "blob" / "press" / "hero.png").read_bytes() == PNG


def test_upload_editor_type_name(client, seed_users, upload_dir):
    headers = auth_headers(client)
    files = {"file": ("photo.jpeg", PNG, "image/jpeg")}
    data = client.post("/api/upload", headers=headers, files=files, data={"type": "editor"}).json()
    assert data["fileName"].startswith("content_")
    assert data["fileName"].endswith(".jpeg")


def test_upload_rejects_non_image(client, seed_users, upload_dir):
    headers = auth_headers(client)
    files = {"file": ("notes.txt", b"hello", "text/plain")}
    resp = client.post("/api/upload", headers=headers, files=files)
    assert resp.status_code == 400
    assert resp.json()["error"] == "이미지 파일만 업로드 가능합니다."


def test_upload_rejects_oversized_file(client, seed_users, upload_dir, monkeypatch):
    monkeypatch.setattr(settings, "MAX_UPLOAD_SIZE", 4)
    headers = auth_headers(client)
    files = {"file": ("big.png", PNG, "image/png")}
    assert client.post("/api/upload", headers=headers, files=files).status_code == 400


def test_upload_missing_file(client, seed_users, upload_dir):
    headers = auth_headers(client)
    resp = client.post("/api/upload", headers=headers, data={"folder": "press"})
    assert resp.status_code == 400


def _create_press_with_temp_images(client, headers, slug="launch"):
    body = '<p>a</p><img src="blob:temp-1"><p>b</p><img src=\'blob:temp-2\'><img src="blob:temp-1">'
    content = localized("제목", body)
    content["ko"]["images"] = [{"src": "blob:temp-1", "alt": "one"}, {"src": "blob:temp-2", "alt": "two"}]
    resp = client.post("/api/press", headers=headers, json=press_payload(slug, content=content))
    assert resp.status_code == 200, resp.text


def test_publish_images_rewrites_every_temp_src(client, seed_users, upload_dir):
    headers = auth_headers(client)
    _create_press_with_temp_images(client, headers)

    resp = client.post(
        "/api/press/launch/images",
        headers=headers,
        data={"lang": "ko", "temp_srcs": ["blob:temp-1", "blob:temp-2"]},
        files=[
            ("files", ("one.png", PNG, "image/png")),
            ("files", ("two.jpg", PNG, "image/jpeg")),
            ("thumbnail", ("cover.png", PNG, "image/png")),
        ],
    )
    assert resp.status_code == 200, resp.text
    data = resp.json()
    assert data["failed"] == []
    body = data["content"]["ko"]["body"]
    assert "blob:temp-1" not in body
    assert "blob:temp-2" not in body
    assert body.count('src="/uploads/blob/press/launch/launch_ko_01.png"') == 2
    assert "src='/uploads/blob/press/launch/launch_ko_02.jpg'" in body
    assert [img["src"] for img in data["content"]["ko"]["images"]] == [
        "/uploads/blob/press/launch/launch_ko_01.png",
        "/uploads/blob/press/launch/launch_ko_02.jpg",
    ]
    assert data["thumbnail_url"] == "/uploads/blob/press/launch/launch_thumbnail.png"
    assert (upload_dir / "blob" / "press" / "launch" / "launch_ko_01.png").exists()

    admin_view = client.get("/api/press/launch?admin=true", headers=headers).json()
    assert admin_view["thumbnail"] == "/uploads/blob/press/launch/launch_thumbnail.png"
    assert admin_view["content"]["ko"]["body"] == body


def test_publish_images_continues_numbering(client, seed_users, upload_dir):
    headers = auth_headers(client)
    _create_press_with_temp_images(client, headers)
    client.post(
        "/api/press/launch/images",
        headers=headers,
        data={"temp_srcs": ["blob:temp-1"]},
        files=[("files", ("one.png", PNG, "image/png"))],
    )
    resp = client.post(
        "/api/press/launch/images",
        headers=headers,
        data={"temp_srcs": ["blob:temp-2"]},
        files=[("files", ("two.png", PNG, "image/png"))],
    )
    assert resp.json()["uploaded"] == [
        {"temp_src": "blob:temp-2", "url": "/uploads/blob/press/launch/launch_ko_02.png"}
    ]


class FlakyStorage(LocalStorage):
    def put(self, path, data, *, content_type=None):
        if path.endswith("_02.png"):
            raise StorageError("bucket unavailable")
        return super().put(path, data, content_type=content_type)


def test_failed_upload_keeps_temp_src_and_is_reported(client, seed_users, upload_dir, monkeypatch):
    monkeypatch.setattr(
        editor_image_service,
        "get_storage",
        lambda: FlakyStorage(base_dir=str(upload_dir), public_base="/uploads"),
    )
    headers = auth_headers(client)
    _create_press_with_temp_images(client, headers)

    resp = client.post(
        "/api/press/launch/images",
        headers=headers,
        data={"temp_srcs": ["blob:temp-1", "blob:temp-2"]},
        files=[("files", ("one.png", PNG, "image/png")), ("files", ("two.png", PNG, "image/png"))],
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["failed"] == [{"temp_src": "blob:temp-2", "error": "bucket unavailable"}]
    body = data["content"]["ko"]["body"]
    assert "blob:temp-1" not in body
    assert "src='blob:temp-2'" in body


def test_publish_images_mismatched_lists(client, seed_users, upload_dir):
    headers = auth_headers(client)
    _create_press_with_temp_images(client, headers)
    resp = client.post(
        "/api/press/launch/images",
        headers=headers,
        data={"temp_srcs": ["blob:temp-1", "blob:temp-2"]},
        files=[("files", ("one.png", PNG, "image/png"))],
    )
    assert resp.status_code == 400


def test_publish_images_unknown_collection(client, seed_users, upload_dir):
    headers = auth_headers(client)
    resp = client.post("/api/notices/launch/images", headers=headers, data={"lang": "ko"})
    assert resp.status_code == 404


def _write_file(path: Path):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(PNG)


def test_cleanup_orphan_blobs_dry_run_and_apply(client, seed_users, upload_dir):
    headers = auth_headers(client)
    _create_press_with_temp_images(client, headers)
    client.post(
        "/api/press/launch/images",
        headers=headers,
        data={"temp_srcs": ["blob:temp-1"]},
        files=[("files", ("one.png", PNG, "image/png"))],
    )
    orphan = upload_dir / "blob" / "press" / "old-post" / "old-post_ko_01.png"
    catalog = upload_dir / "blob" / "downloads" / "catalog.pdf"
    _write_file(orphan)
    _write_file(catalog)

    dry = client.post("/api/upload/cleanup?dry_run=true", headers=headers).json()
    assert dry["orphan_count"] == 1
    assert dry["orphan_urls"] == ["/uploads/blob/press/old-post/old-post_ko_01.png"]
    assert orphan.exists()

    applied = client.post("/api/upload/cleanup?dry_run=false", headers=headers).json()
    assert applied["deleted_count"] == 1
    assert not orphan.exists()
    assert not orphan.parent.exists()
    assert catalog.exists()
    assert (upload_dir / "blob" / "press" / "launch" / "launch_ko_01.png").exists()


def test_cleanup_requires_admin_role(client, seed_users, upload_dir):
    headers = auth_headers(client, "editor")
    assert client.post("/api/upload/cleanup", headers=headers).status_code == 403
