"""기업 문의 접수와 관리자 처리 상태 이력을 검증하는 자동화 테스트입니다."""

from tests.conftest import auth_headers

VALID_INQUIRY = {
    "inquiry_type": "제품 문의",
    "name": "홍길동",
    "company_name": "돌봄요양원",
    "phone_number": "010-1234-5678",
    "email": "hong@example.com",
    "message": "대량 구매 견적을 받고 싶습니다.",
    "privacy_consented": True,
}


def test_public_can_submit_inquiry(client, seed_users):
    resp = client.post("/api/inquiries", json=VALID_INQUIRY)
    assert resp.status_code == 201
    data = resp.json()
    assert data["status"] == "new"
    assert data["status_history"] == []


def test_missing_required_field(client, seed_users):
    resp = client.post("/api/inquiries", json={**VALID_INQUIRY, "company_name": "  "})
    assert resp.status_code == 400
    assert "company_name" in resp.json()["error"]


def test_invalid_email(client, seed_users):
    resp = client.post("/api/inquiries", json={**VALID_INQUIRY, "email": "not-an-email"})
    assert resp.status_code == 400


def test_privacy_consent_required(client, seed_users):
    resp = client.post("/api/inquiries", json={**VALID_INQUIRY, "privacy_consented": False})
    assert resp.status_code == 400


def test_list_requires_auth(client, seed_users):
    assert client.get("/api/inquiries").status_code == 401


def test_status_change_appends_history(client, seed_users):
    inquiry_id = client.post("/api/inquiries", json=VALID_INQUIRY).json()["id"]
    headers = auth_headers(client)

    resp = client.put(
        f"/api/inquiries/{inquiry_id}",
        headers=headers,
        json={"status": "inProgress", "status_change_notes": "담당자 배정"},
    )
    assert resp.status_code == 200
    assert resp.json()["responded_at"] is None

    resp = client.put(
        f"/api/inquiries/{inquiry_id}",
        headers=headers,
        json={"status": "completed", "admin_notes": "견적서 발송"},
    )
    data = resp.json()
    assert data["status"] == "completed"
    assert data["admin_notes"] == "견적서 발송"
    assert [h["status"] for h in data["status_history"]] == ["inProgress", "completed"]
    assert data["status_history"][0]["notes"] == "담당자 배정"
    assert data["responded_by"] == seed_users["admin"].id
    assert data["responded_at"] is not None


def test_same_status_does_not_add_history(client, seed_users):
    inquiry_id = client.post("/api/inquiries", json=VALID_INQUIRY).json()["id"]
    headers = auth_headers(client)
    resp = client.put(f"/api/inquiries/{inquiry_id}", headers=headers, json={"status": "new", "admin_notes": "확인"})
    assert resp.json()["status_history"] == []
    assert resp.json()["admin_notes"] == "확인"


def test_invalid_status_rejected(client, seed_users):
    inquiry_id = client.post("/api/inquiries", json=VALID_INQUIRY).json()["id"]
    headers = auth_headers(client)
    resp = client.put(f"/api/inquiries/{inquiry_id}", headers=headers, json={"status": "closed"})
    assert resp.status_code == 400


def test_list_filter_and_delete(client, seed_users):
    first = client.post("/api/inquiries", json=VALID_INQUIRY).json()["id"]
    client.post("/api/inquiries", json=VALID_INQUIRY)
    headers = auth_headers(client)
    client.put(f"/api/inquiries/{first}", headers=headers, json={"status": "completed"})

    assert len(client.get("/api/inquiries", headers=headers).json()) == 2
    completed = client.get("/api/inquiries?status=completed", headers=headers).json()
    assert [item["id"] for item in completed] == [first]

    assert client.delete(f"/api/inquiries/{first}", headers=headers).status_code == 200
    assert client.get(f"/api/inquiries/{first}", headers=headers).status_code == 404
