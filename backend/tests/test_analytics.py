"""방문 기록과 관리자 통계를 검증하는 자동화 테스트입니다."""

from datetime import datetime, timedelta

from app.models.inquiry import Inquiry
from app.models.visitor_log import VisitorLog
from app.services import analytics_service
from tests.conftest import auth_headers, press_payload, story_payload


def test_log_visit_once_per_session_per_day(client, db):
    payload = {"page": "/press", "session_id": "s-1"}
    first = client.post("/api/analytics/log", json=payload, headers={"user-agent": "pytest-agent"})
    assert first.json() == {"success": True, "message": "New visit logged"}

    second = client.post("/api/analytics/log", json={"page": "/products", "session_id": "s-1"})
    assert second.json()["message"] == "Already visited today"

    rows = db.query(VisitorLog).all()
    assert len(rows) == 1
    assert rows[0].user_agent == "pytest-agent"


def test_log_visit_requires_page_and_session(client, db):
    resp = client.post("/api/analytics/log", json={"page": "/press"})
    assert resp.status_code == 400


def test_stats_requires_auth(client, seed_users):
    assert client.get("/api/admin/stats").status_code == 401


def test_stats_counts(client, db, seed_users):
    headers = auth_headers(client)
    client.post("/api/press", headers=headers, json=press_payload("news-1"))
    client.post("/api/sonaverse-story", headers=headers, json=story_payload("story-1"))
    db.add(Inquiry(
        inquiry_type="제품 문의", name="a", company_name="b", phone_number="c",
        email="a@b.cd", message="m", privacy_consented=True, status="new", status_history=[],
    ))
    now = datetime.utcnow()
    db.add(VisitorLog(page="/", session_id="today-1", timestamp=now))
    db.add(VisitorLog(page="/", session_id="today-2", timestamp=now))
    db.add(VisitorLog(page="/", session_id="yesterday-1", timestamp=now - timedelta(days=1)))
    db.commit()

    stats = client.get("/api/admin/stats", headers=headers).json()
    assert stats["total_press"] == 1
    assert stats["total_stories"] == 1
    assert stats["total_products"] == 0
    assert stats["new_inquiries"] == 1
    assert stats["unique_visitors"] == 3
    assert stats["today_visitors"] == 2
    assert stats["yesterday_visitors"] == 1
    assert stats["visitor_change_rate"] == 100.0
    assert {post["type"] for post in stats["recent_posts"]} == {"press", "sonaverse-story"}


def test_change_rate_edges():
    assert analytics_service._change_rate(0, 0) == 0.0
    assert analytics_service._change_rate(5, 0) == 100.0
    assert analytics_service._change_rate(3, 4) == -25.0


def test_analytics_daily_series(db):
    today = datetime(2025, 3, 10, 12, 0)
    for session_id, offset, page in [("a", 0, "/"), ("b", 0, "/press"), ("a", 2, "/press")]:
        db.add(VisitorLog(page=page, session_id=session_id, timestamp=today - timedelta(days=offset)))
    db.add(VisitorLog(page="/old", session_id="z", timestamp=today - timedelta(days=30)))
    db.commit()

    result = analytics_service.get_analytics(db, days=3, today=today.date())
    assert [entry["visits"] for entry in result["daily"]] == [1, 0, 2]
    assert result["daily"][-1]["unique_visitors"] == 2
    assert result["top_pages"][0] == {"page": "/press", "visits": 2}
