"""관리자 대시보드 API 라우터입니다. 컬렉션 목록, 변경 이력, 통계를 제공합니다."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.database import get_db
from app.middleware.auth_middleware import get_current_user
from app.models.admin_user import AdminUser
from app.schemas.analytics import AnalyticsOut, StatsOut
from app.schemas.press import PressAdminPage
from app.schemas.product import ProductAdminPage
from app.schemas.story import StoryAdminPage
from app.schemas.version import ContentVersionOut
from app.services import analytics_service, content_service, press_service, product_service, story_service

router = APIRouter(prefix="/api/admin", tags=["admin"])

PERIOD_PATTERN = "^(daily|weekly|monthly)$"


@router.get("/press", response_model=PressAdminPage)
def list_press(
    page: int = Query(1, ge=1),
    page_size: int = Query(10, ge=1, le=100, alias="pageSize"),
    search: Optional[str] = Query(None, max_length=100),
    active: Optional[bool] = None,
    db: Session = Depends(get_db),
    _current_user: AdminUser = Depends(get_current_user),
):
    return press_service.list_admin(db, page=page, page_size=page_size, search=search, active=active)


@router.get("/sonaverse-story", response_model=StoryAdminPage)
def list_stories(
    page: int = Query(1, ge=1),
    page_size: int = Query(10, ge=1, le=100, alias="pageSize"),
    search: Optional[str] = Query(None, max_length=100),
    published: Optional[bool] = None,
    db: Session = Depends(get_db),
    _current_user: AdminUser = Depends(get_current_user),
):
    return story_service.list_admin(db, page=page, page_size=page_size, search=search, published=published)


@router.get("/diaper-products", response_model=ProductAdminPage)
def list_products(
    page: int = Query(1, ge=1),
    page_size: int = Query(10, ge=1, le=100, alias="pageSize"),
    search: Optional[str] = Query(None, max_length=100),
    db: Session = Depends(get_db),
    _current_user: AdminUser = Depends(get_current_user),
):
    return product_service.list_admin(db, page=page, page_size=page_size, search=search)


@router.get("/stats", response_model=StatsOut)
def get_stats(db: Session = Depends(get_db), _current_user: AdminUser = Depends(get_current_user)):
    return analytics_service.get_stats(db)


@router.get("/analytics", response_model=AnalyticsOut)
def get_analytics(
    days: int = Query(7, ge=1, le=90),
    visitor_period: str = Query("daily", alias="visitorPeriod", pattern=PERIOD_PATTERN),
    keyword_period: str = Query("daily", alias="keywordPeriod", pattern=PERIOD_PATTERN),
    content_period: str = Query("daily", alias="contentPeriod", pattern=PERIOD_PATTERN),
    db: Session = Depends(get_db),
    _current_user: AdminUser = Depends(get_current_user),
):
    return analytics_service.get_analytics(
        db,
        days=days,
        visitor_period=visitor_period,
        keyword_period=keyword_period,
        content_period=content_period,
    )


@router.get("/{collection}/{slug}/versions", response_model=List[ContentVersionOut])
def list_versions(
    collection: str,
    slug: str,
    db: Session = Depends(get_db),
    _current_user: AdminUser = Depends(get_current_user),
):
    return content_service.list_versions(db, content_service.resolve_collection(collection), slug)
