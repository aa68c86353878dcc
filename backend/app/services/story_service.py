"""소나버스 스토리 도메인 서비스 레이어입니다. 공개 여부와 대표 게시물 규칙을 포함합니다."""

from typing import Any, Dict

from sqlalchemy.orm import Session

from app.config import settings
from app.models.admin_user import AdminUser
from app.models.sonaverse_story import SonaverseStory
from app.schemas.story import StoryCreate, StoryUpdate
from app.services import content_service, slug_service
from app.services.content_service import STORY
from app.services.localization_service import localized_texts, normalize_lang, resolve_localized
from app.utils.cache import cache, create_cache_key
from app.utils.pagination import filter_by_search, paginate_in_memory

REQUIRED_FIELDS = ("slug", "content", "tags", "is_published", "is_main")


def to_public(row: SonaverseStory, lang: str) -> Dict[str, Any]:
    localized = resolve_localized(row.content, lang)
    return {
        "slug": row.slug,
        "lang": normalize_lang(lang),
        "title": localized.get("title") or "",
        "subtitle": localized.get("subtitle"),
        "body": localized.get("body") or "",
        "thumbnail_url": localized.get("thumbnail_url"),
        "images": localized.get("images") or [],
        "youtube_url": row.youtube_url,
        "tags": row.tags or [],
        "is_main": bool(row.is_main),
        "created_at": row.created_at,
        "updated_at": row.updated_at,
    }


def list_public(
    db: Session,
    lang: str = "ko",
    page: int = 1,
    page_size: int = 10,
    search: str | None = None,
    tag: str | None = None,
) -> dict:
    params = {"lang": normalize_lang(lang), "page": page, "pageSize": page_size, "search": search or "", "tag": tag or ""}
    key = create_cache_key(STORY, params)
    cached = cache.get(key)
    if cached is not None:
        return cached

    rows = (
        db.query(SonaverseStory)
        .filter(SonaverseStory.is_published == True)  # noqa: E712
        .order_by(SonaverseStory.created_at.desc(), SonaverseStory.id.desc())
        .all()
    )
    if tag:
        rows = [row for row in rows if tag in (row.tags or [])]
    rows = filter_by_search(rows, search, lambda row: (*localized_texts(row.content, "title", "subtitle"), *(row.tags or [])))
    items = [to_public(row, lang) for row in rows]
    result = paginate_in_memory(items, page, page_size)
    cache.set(key, result, ttl=settings.CACHE_TTL_SECONDS)
    return result


def list_admin(db: Session, page: int = 1, page_size: int = 10, search: str | None = None, published: bool | None = None) -> dict:
    query = db.query(SonaverseStory)
    if published is not None:
        query = query.filter(SonaverseStory.is_published == published)
    rows = (
        query.order_by(SonaverseStory.created_at.desc(), SonaverseStory.id.desc())
        .limit(settings.ADMIN_LIST_MAX)
        .all()
    )

    def texts(row: SonaverseStory):
        content = row.content or {}
        return (
            row.slug,
            (content.get("ko") or {}).get("title"),
            (content.get("en") or {}).get("title"),
            (content.get("ko") or {}).get("subtitle"),
            *(row.tags or []),
        )

    return paginate_in_memory(filter_by_search(rows, search, texts), page, page_size)


def get_public(db: Session, slug: str, lang: str = "ko") -> Dict[str, Any]:
    row = content_service.get_by_slug(db, STORY, slug)
    if not row.is_published:
        content_service.raise_not_found(STORY)
    return to_public(row, lang)


def get_main(db: Session, lang: str = "ko") -> Dict[str, Any]:
    row = (
        db.query(SonaverseStory)
        .filter(SonaverseStory.is_main == True, SonaverseStory.is_published == True)  # noqa: E712
        .order_by(SonaverseStory.updated_at.desc())
        .first()
    )
    if not row:
        content_service.raise_not_found(STORY)
    return to_public(row, lang)


def create_story(db: Session, data: StoryCreate, current_user: AdminUser) -> SonaverseStory:
    slug = slug_service.ensure_slug_available(db, data.slug)
    row = SonaverseStory(
        slug=slug,
        author_id=current_user.id,
        youtube_url=data.youtube_url,
        content=data.content.model_dump(mode="json"),
        tags=data.tags,
        is_published=data.is_published,
        is_main=False,
        updated_by=current_user.id,
    )
    if data.created_at:
        row.created_at = data.created_at
    if data.is_main:
        content_service.set_main(db, SonaverseStory, row)
    return content_service.created_row(db, STORY, row, current_user.id)


def update_story(db: Session, slug: str, data: StoryUpdate, current_user: AdminUser) -> SonaverseStory:
    row = content_service.get_by_slug(db, STORY, slug)
    fields = data.model_dump(exclude_unset=True, mode="json")
    fields.pop("created_at", None)
    is_main = fields.pop("is_main", None)

    if "slug" in fields:
        fields["slug"] = slug_service.ensure_slug_available(db, fields["slug"], original_slug=row.slug)
    content_service.apply_updates(row, fields, required=REQUIRED_FIELDS)
    if data.created_at:
        row.created_at = data.created_at
    if is_main is True:
        content_service.set_main(db, SonaverseStory, row)
    elif is_main is False:
        row.is_main = False
    return content_service.updated_row(db, STORY, row, current_user.id)


def delete_story(db: Session, slug: str, current_user: AdminUser) -> None:
    content_service.delete_row(db, STORY, slug, current_user.id)
