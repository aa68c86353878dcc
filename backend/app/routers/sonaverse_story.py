"""소나버스 스토리 API 라우터입니다. 공개 조회와 관리자 등록/수정/삭제를 제공합니다."""

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.database import get_db
from app.middleware.auth_middleware import get_current_user, get_optional_user
from app.models.admin_user import AdminUser
from app.schemas.story import StoryCreate, StoryOut, StoryPage, StoryPublicOut, StoryUpdate
from app.services import content_service, story_service
from app.services.content_service import STORY

router = APIRouter(prefix="/api/sonaverse-story", tags=["sonaverse-story"])


@router.get("", response_model=StoryPage)
def list_stories(
    lang: str = "ko",
    page: int = Query(1, ge=1),
    page_size: int = Query(10, ge=1, le=100, alias="pageSize"),
    search: str | None = Query(None, max_length=100),
    tag: str | None = Query(None, max_length=50),
    db: Session = Depends(get_db),
):
    return story_service.list_public(db, lang=lang, page=page, page_size=page_size, search=search, tag=tag)


@router.get("/main", response_model=StoryPublicOut)
def get_main_story(lang: str = "ko", db: Session = Depends(get_db)):
    return story_service.get_main(db, lang)


@router.get("/{slug}")
def get_story(
    slug: str,
    lang: str = "ko",
    admin: bool = False,
    db: Session = Depends(get_db),
    current_user: AdminUser | None = Depends(get_optional_user),
):
    if admin:
        if current_user is None:
            raise HTTPException(status_code=401, detail="인증이 필요합니다.")
        return StoryOut.model_validate(content_service.get_by_slug(db, STORY, slug))
    return story_service.get_public(db, slug, lang)


@router.post("", response_model=StoryOut)
def create_story(
    data: StoryCreate,
    db: Session = Depends(get_db),
    current_user: AdminUser = Depends(get_current_user),
):
    return story_service.create_story(db, data, current_user)


@router.put("/{slug}", response_model=StoryOut)
@router.patch("/{slug}", response_model=StoryOut)
def update_story(
    slug: str,
    data: StoryUpdate,
    db: Session = Depends(get_db),
    current_user: AdminUser = Depends(get_current_user),
):
    return story_service.update_story(db, slug, data, current_user)


@router.delete("/{slug}")
def delete_story(slug: str, db: Session = Depends(get_db), current_user: AdminUser = Depends(get_current_user)):
    story_service.delete_story(db, slug, current_user)
    return {"success": True, "message": "소나버스 스토리가 삭제되었습니다."}
