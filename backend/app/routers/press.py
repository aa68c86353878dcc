"""언론보도 API 라우터입니다. 공개 조회와 관리자 등록/수정/삭제를 제공합니다."""

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.database import get_db
from app.middleware.auth_middleware import get_current_user, get_optional_user
from app.models.admin_user import AdminUser
from app.schemas.press import PressCreate, PressOut, PressPage, PressUpdate
from app.services import content_service, press_service
from app.services.content_service import PRESS

router = APIRouter(prefix="/api/press", tags=["press"])


@router.get("", response_model=PressPage)
def list_press(
    lang: str = "ko",
    page: int = Query(1, ge=1),
    page_size: int = Query(10, ge=1, le=100, alias="pageSize"),
    search: str | None = Query(None, max_length=100),
    db: Session = Depends(get_db),
):
    return press_service.list_public(db, lang=lang, page=page, page_size=page_size, search=search)


@router.get("/{slug}")
def get_press(
    slug: str,
    lang: str = "ko",
    admin: bool = False,
    db: Session = Depends(get_db),
    current_user: AdminUser | None = Depends(get_optional_user),
):
    if admin:
        if current_user is None:
            raise HTTPException(status_code=401, detail="인증이 필요합니다.")
        row = content_service.get_by_slug(db, PRESS, slug)
        return PressOut.model_validate(row)
    return press_service.get_public(db, slug, lang)


@router.post("", response_model=PressOut)
def create_press(
    data: PressCreate,
    db: Session = Depends(get_db),
    current_user: AdminUser = Depends(get_current_user),
):
    return press_service.create_press(db, data, current_user)


@router.put("/{slug}", response_model=PressOut)
@router.patch("/{slug}", response_model=PressOut)
def update_press(
    slug: str,
    data: PressUpdate,
    db: Session = Depends(get_db),
    current_user: AdminUser = Depends(get_current_user),
):
    return press_service.update_press(db, slug, data, current_user)


@router.delete("/{slug}")
def delete_press(slug: str, db: Session = Depends(get_db), current_user: AdminUser = Depends(get_current_user)):
    press_service.delete_press(db, slug, current_user)
    return {"success": True, "message": "삭제되었습니다."}
