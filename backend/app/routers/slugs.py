"""슬러그 중복 확인 API 라우터입니다."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.middleware.auth_middleware import get_current_user
from app.models.admin_user import AdminUser
from app.schemas.slug import SlugCheckRequest, SlugCheckResult
from app.services import slug_service

router = APIRouter(prefix="/api", tags=["slugs"])


@router.post("/check-slug", response_model=SlugCheckResult)
def check_slug(
    request: SlugCheckRequest,
    db: Session = Depends(get_db),
    _current_user: AdminUser = Depends(get_current_user),
):
    return slug_service.check_slug(db, request.slug, original_slug=request.original_slug)
