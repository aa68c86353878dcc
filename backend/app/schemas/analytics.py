"""방문자 분석 요청/응답 계약을 위한 Pydantic 스키마입니다."""

from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel


class VisitLogIn(BaseModel):
    page: str = ""
    session_id: str = ""
    referrer: Optional[str] = None
    user_agent: Optional[str] = None


class VisitLogResult(BaseModel):
    success: bool
    message: str


class RecentPostOut(BaseModel):
    type: str
    title: str
    slug: str
    created_at: datetime


class StatsOut(BaseModel):
    total_press: int
    total_stories: int
    total_products: int
    total_inquiries: int
    new_inquiries: int
    unique_visitors: int
    today_visitors: int
    yesterday_visitors: int
    visitor_change_rate: float
    recent_posts: List[RecentPostOut]


class DailyVisitOut(BaseModel):
    date: date
    visits: int
    unique_visitors: int


class PageVisitOut(BaseModel):
    page: str
    visits: int


class PeriodCountOut(BaseModel):
    start: date
    end: date  # 구간 마지막 날 포함
    count: int


class ContentTrendOut(BaseModel):
    press: List[PeriodCountOut]
    sonaverse_story: List[PeriodCountOut]


class ReferralKeywordOut(BaseModel):
    keyword: str
    search_engine: str
    search_engine_display: str
    count: int
    last_used: datetime


class AnalyticsOut(BaseModel):
    days: int
    daily: List[DailyVisitOut]
    top_pages: List[PageVisitOut]
    visitor_period: str
    visitor_trend: List[PeriodCountOut]
    keyword_period: str
    referral_keywords: List[ReferralKeywordOut]
    content_period: str
    content: ContentTrendOut
