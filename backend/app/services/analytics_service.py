"""방문자 로그 기록과 관리자 대시보드 통계를 제공하는 서비스 레이어입니다."""

import logging
from datetime import date, datetime, time, timedelta
from typing import Dict, List

from fastapi import HTTPException
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.config import settings
from app.models.diaper_product import DiaperProduct
from app.models.inquiry import Inquiry
from app.models.press_release import PressRelease
from app.models.referral_keyword import ReferralKeyword
from app.models.sonaverse_story import SonaverseStory
from app.models.visitor_log import VisitorLog
from app.schemas.analytics import VisitLogIn
from app.services.content_service import PRESS, STORY, display_title
from app.utils.referral import engine_display_name, extract_search_keyword, is_valid_keyword

logger = logging.getLogger(__name__)

RECENT_POST_LIMIT = 3
REFERRAL_KEYWORD_LIMIT = 10
PERIODS = ("daily", "weekly", "monthly")


def _day_range(day: date) -> tuple[datetime, datetime]:
    start = datetime.combine(day, time.min)
    return start, start + timedelta(days=1)


def log_visit(db: Session, data: VisitLogIn, ip: str | None = None, now: datetime | None = None) -> Dict[str, object]:
    if not settings.ANALYTICS_ENABLED:
        return {"success": True, "message": "Skipped"}
    if not data.page.strip() or not data.session_id.strip():
        raise HTTPException(status_code=400, detail="page와 session_id는 필수입니다.")

    now = now or datetime.utcnow()
    start, end = _day_range(now.date())
    # 같은 세션은 하루에 한 번만 기록한다.
    existing = (
        db.query(VisitorLog.id)
        .filter(
            VisitorLog.session_id == data.session_id,
            VisitorLog.timestamp >= start,
            VisitorLog.timestamp < end,
        )
        .first()
    )
    if existing:
        return {"success": True, "message": "Already visited today"}

    db.add(
        VisitorLog(
            page=data.page,
            timestamp=now,
            referrer=data.referrer,
            user_agent=data.user_agent,
            ip=ip,
            session_id=data.session_id,
        )
    )
    db.commit()
    logger.debug("visit logged page=%s session=%s", data.page, data.session_id)
    if data.referrer:
        record_referral(db, data.referrer, now=now)
    return {"success": True, "message": "New visit logged"}


def _bump_referral(db: Session, keyword: str, search_engine: str, now: datetime) -> int:
    return (
        db.query(ReferralKeyword)
        .filter(ReferralKeyword.keyword == keyword, ReferralKeyword.search_engine == search_engine)
        .update({"count": ReferralKeyword.count + 1, "last_used": now}, synchronize_session=False)
    )


def record_referral(db: Session, referrer_url: str, now: datetime | None = None) -> bool:
    """검색엔진 유입이면 (검색어, 엔진) 단위로 횟수를 누적한다."""
    referral = extract_search_keyword(referrer_url)
    if referral is None or not is_valid_keyword(referral.keyword):
        return False

    now = now or datetime.utcnow()
    keyword = referral.keyword.strip()
    if not _bump_referral(db, keyword, referral.search_engine, now):
        db.add(
            ReferralKeyword(
                keyword=keyword,
                search_engine=referral.search_engine,
                referrer_url=referral.referrer_url[:1000],
                count=1,
                last_used=now,
            )
        )
        try:
            db.commit()
        except IntegrityError:
            # 같은 키워드가 동시에 먼저 저장된 경우
            db.rollback()
            _bump_referral(db, keyword, referral.search_engine, now)
            db.commit()
    else:
        db.commit()
    logger.info("referral keyword logged keyword=%s engine=%s", keyword, referral.search_engine)
    return True


def _visitors_between(db: Session, start: datetime, end: datetime) -> int:
    return (
        db.query(func.count(func.distinct(VisitorLog.session_id)))
        .filter(VisitorLog.timestamp >= start, VisitorLog.timestamp < end)
        .scalar()
        or 0
    )


def _change_rate(today: int, yesterday: int) -> float:
    if yesterday == 0:
        return 100.0 if today > 0 else 0.0
    return round((today - yesterday) / yesterday * 100, 1)


def _recent_posts(db: Session) -> List[dict]:
    press_rows = db.query(PressRelease).order_by(PressRelease.created_at.desc()).limit(RECENT_POST_LIMIT).all()
    story_rows = db.query(SonaverseStory).order_by(SonaverseStory.created_at.desc()).limit(RECENT_POST_LIMIT).all()
    posts = [
        {"type": "press", "title": display_title(PRESS, row), "slug": row.slug, "created_at": row.created_at}
        for row in press_rows
    ] + [
        {"type": "sonaverse-story", "title": display_title(STORY, row), "slug": row.slug, "created_at": row.created_at}
        for row in story_rows
    ]
    return sorted(posts, key=lambda post: post["created_at"], reverse=True)


def get_stats(db: Session, today: date | None = None) -> dict:
    today = today or datetime.utcnow().date()
    today_start, today_end = _day_range(today)
    yesterday_start, _ = _day_range(today - timedelta(days=1))

    today_visitors = _visitors_between(db, today_start, today_end)
    yesterday_visitors = _visitors_between(db, yesterday_start, today_start)
    return {
        "total_press": db.query(func.count(PressRelease.id)).scalar() or 0,
        "total_stories": db.query(func.count(SonaverseStory.id)).scalar() or 0,
        "total_products": db.query(func.count(DiaperProduct.id)).scalar() or 0,
        "total_inquiries": db.query(func.count(Inquiry.id)).scalar() or 0,
        "new_inquiries": db.query(func.count(Inquiry.id)).filter(Inquiry.status == "new").scalar() or 0,
        "unique_visitors": db.query(func.count(func.distinct(VisitorLog.session_id))).scalar() or 0,
        "today_visitors": today_visitors,
        "yesterday_visitors": yesterday_visitors,
        "visitor_change_rate": _change_rate(today_visitors, yesterday_visitors),
        "recent_posts": _recent_posts(db),
    }


def _check_period(period: str) -> str:
    if period not in PERIODS:
        raise HTTPException(status_code=400, detail=f"허용되지 않는 기간입니다. 허용 값: {', '.join(PERIODS)}")
    return period


def period_buckets(period: str, today: date) -> List[tuple[date, date]]:
    """기간별 집계 구간 [start, end) 목록을 오래된 순으로 돌려준다.

    daily는 최근 7일, weekly는 오늘로 끝나는 7일 단위 4구간, monthly는 이번 달을 포함한 최근 6개월이다.
    """
    _check_period(period)
    if period == "daily":
        days = [today - timedelta(days=offset) for offset in range(6, -1, -1)]
        return [(day, day + timedelta(days=1)) for day in days]
    if period == "weekly":
        last = today + timedelta(days=1)
        return [(last - timedelta(days=7 * (i + 1)), last - timedelta(days=7 * i)) for i in range(3, -1, -1)]

    buckets = []
    year, month = today.year, today.month
    for _ in range(6):
        next_year, next_month = (year + 1, 1) if month == 12 else (year, month + 1)
        buckets.append((date(year, month, 1), date(next_year, next_month, 1)))
        year, month = (year - 1, 12) if month == 1 else (year, month - 1)
    return list(reversed(buckets))


def _bucket_out(start: date, end: date, count: int) -> dict:
    return {"start": start, "end": end - timedelta(days=1), "count": count}


def _visitor_trend(db: Session, period: str, today: date) -> List[dict]:
    trend = []
    for start, end in period_buckets(period, today):
        visitors = _visitors_between(db, datetime.combine(start, time.min), datetime.combine(end, time.min))
        trend.append(_bucket_out(start, end, visitors))
    return trend


def _content_trend(db: Session, period: str, today: date) -> dict:
    press, stories = [], []
    for start, end in period_buckets(period, today):
        lower, upper = datetime.combine(start, time.min), datetime.combine(end, time.min)
        press_count = (
            db.query(func.count(PressRelease.id))
            .filter(PressRelease.is_active == True, PressRelease.created_at >= lower, PressRelease.created_at < upper)  # noqa: E712
            .scalar()
            or 0
        )
        story_count = (
            db.query(func.count(SonaverseStory.id))
            .filter(
                SonaverseStory.is_published == True,  # noqa: E712
                SonaverseStory.created_at >= lower,
                SonaverseStory.created_at < upper,
            )
            .scalar()
            or 0
        )
        press.append(_bucket_out(start, end, press_count))
        stories.append(_bucket_out(start, end, story_count))
    return {"press": press, "sonaverse_story": stories}


def _referral_keywords(db: Session, period: str, now: datetime) -> List[dict]:
    _check_period(period)
    if period == "daily":
        cutoff = datetime.combine(now.date(), time.min)
    elif period == "weekly":
        cutoff = now - timedelta(days=7)
    else:
        cutoff = now - timedelta(days=30)
    rows = (
        db.query(ReferralKeyword)
        .filter(ReferralKeyword.last_used >= cutoff)
        .order_by(ReferralKeyword.count.desc(), ReferralKeyword.last_used.desc())
        .limit(REFERRAL_KEYWORD_LIMIT)
        .all()
    )
    return [
        {
            "keyword": row.keyword,
            "search_engine": row.search_engine,
            "search_engine_display": engine_display_name(row.search_engine),
            "count": row.count,
            "last_used": row.last_used,
        }
        for row in rows
    ]


def get_analytics(
    db: Session,
    days: int = 7,
    today: date | None = None,
    top_n: int = 10,
    visitor_period: str = "daily",
    keyword_period: str = "daily",
    content_period: str = "daily",
    now: datetime | None = None,
) -> dict:
    now = now or datetime.utcnow()
    today = today or now.date()
    first_day = today - timedelta(days=days - 1)
    start, _ = _day_range(first_day)
    _, end = _day_range(today)

    rows = (
        db.query(VisitorLog.timestamp, VisitorLog.session_id, VisitorLog.page)
        .filter(VisitorLog.timestamp >= start, VisitorLog.timestamp < end)
        .all()
    )
    visits: Dict[date, int] = {}
    sessions: Dict[date, set] = {}
    pages: Dict[str, int] = {}
    for timestamp, session_id, page in rows:
        day = timestamp.date()
        visits[day] = visits.get(day, 0) + 1
        sessions.setdefault(day, set()).add(session_id)
        pages[page] = pages.get(page, 0) + 1

    daily = []
    for offset in range(days):
        day = first_day + timedelta(days=offset)
        daily.append({"date": day, "visits": visits.get(day, 0), "unique_visitors": len(sessions.get(day, ()))})
    top_pages = sorted(pages.items(), key=lambda item: (-item[1], item[0]))[:top_n]
    return {
        "days": days,
        "daily": daily,
        "top_pages": [{"page": page, "visits": count} for page, count in top_pages],
        "visitor_period": visitor_period,
        "visitor_trend": _visitor_trend(db, visitor_period, today),
        "keyword_period": keyword_period,
        "referral_keywords": _referral_keywords(db, keyword_period, now),
        "content_period": content_period,
        "content": _content_trend(db, content_period, today),
    }
