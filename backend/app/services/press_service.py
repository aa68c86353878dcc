"""언론보도 도메인 서비스 레이어입니다."""

from typing import Any, Dict, List

from sqlalchemy.orm import Session

from app.config import settings
from app.models.admin_user import AdminUser
from app.models.press_release import PressRelease
from app.schemas.press import PressCreate, PressUpdate
from app.services import content_service, slug_service
from app.services.content_service import PRESS
from app.services.localization_service import localized_texts, normalize_lang, resolve_localized, resolve_text
from app.utils.cache import cache, create_cache_key
from app.utils.pagination import filter_by_search, paginate_in_memory

REQUIRED_FIELDS = ("press_name", "content", "tags", "is_active")


def to_public(row: PressRelease, lang: str) -> Dict[str, Any]:
    localized = resolve_localized(row.content, lang)
    return {
        "slug": row.slug,
        "lang": normalize_lang(lang),
        "press_name": resolve_text(row.press_name, lang),
        "title": localized.get("title") or "",
        "subtitle": localized.get("subtitle"),
        "body": localized.get("body") or "",
        "thumbnail_url": localized.get("thumbnail_url") or row.thumbnail,
        "external_link": localized.get("external_link") or row.external_link,
        "tags": row.tags or [],
        "created_at": row.created_at,
    }


def _thumbnail_from_content(content: Dict[str, Any]) -> str | None:
    return (content.get("ko") or {}).get("thumbnail_url") or (content.get("en") or {}).get("thumbnail_url")


def _search_texts(row: PressRelease) -> list:
    names = row.press_name or {}
    return [*localized_texts(row.content, "title", "body"), names.get("ko"), names.get("en")]


def list_public(db: Session, lang: str = "ko", page: int = 1, page_size: int = 10, search: str | None = None) -> dict:
    key = create_cache_key(PRESS, {"lang": normalize_lang(lang), "page": page, "pageSize": page_size, "search": search or ""})
    cached = cache.get(key)
    if cached is not None:
        return cached

    rows = (
        db.query(PressRelease)
        .filter(PressRelease.is_active == True)  # noqa: E712
        .order_by(PressRelease.created_at.desc(), PressRelease.id.desc())
        .all()
    )
    # 요청 언어와 무관하게 저장된 ko/en 원문 모두에서 검색한다.
    rows = filter_by_search(rows, search, _search_texts)
    items = [to_public(row, lang) for row in rows]
    result = paginate_in_memory(items, page, page_size)
    cache.set(key, result, ttl=settings.CACHE_TTL_SECONDS)
    return result


def list_admin(db: Session, page: int = 1, page_size: int = 10, search: str | None = None, active: bool | None = None) -> dict:
    query = db.query(PressRelease)
    if active is not None:
        query = query.filter(PressRelease.is_active == active)
    rows: List[PressRelease] = (
        query.order_by(PressRelease.created_at.desc(), PressRelease.id.desc())
        .limit(settings.ADMIN_LIST_MAX)
        .all()
    )

    def texts(row: PressRelease):
        content = row.content or {}
        names = row.press_name or {}
        return (
            row.slug,
            (content.get("ko") or {}).get("title"),
            (content.get("en") or {}).get("title"),
            names.get("ko"),
            names.get("en"),
        )

    return paginate_in_memory(filter_by_search(rows, search, texts), page, page_size)


def get_public(db: Session, slug: str, lang: str = "ko") -> Dict[str, Any]:
    row = content_service.get_by_slug(db, PRESS, slug)
    if not row.is_active:
        content_service.raise_not_found(PRESS)
    return to_public(row, lang)


def create_press(db: Session, data: PressCreate, current_user: AdminUser) -> PressRelease:
    slug = slug_service.ensure_slug_available(db, data.slug)
    content = data.content.model_dump(mode="json")
    row = PressRelease(
        slug=slug,
        press_name=data.press_name.model_dump(mode="json"),
        content=content,
        external_link=data.external_link,
        thumbnail=data.thumbnail or _thumbnail_from_content(content),
        tags=data.tags,
        is_active=data.is_active,
        updated_by=current_user.id,
    )
    if data.created_at:
        row.created_at = data.created_at
    return content_service.created_row(db, PRESS, row, current_user.id)


def update_press(db: Session, slug: str, data: PressUpdate, current_user: AdminUser) -> PressRelease:
    row = content_service.get_by_slug(db, PRESS, slug)
    fields = data.model_dump(exclude_unset=True, mode="json")
    fields.pop("created_at", None)

    if "slug" in fields:
        fields["slug"] = slug_service.ensure_slug_available(db, fields["slug"], original_slug=row.slug)
    if fields.get("content") and not fields.get("thumbnail"):
        thumbnail = _thumbnail_from_content(fields["content"])
        if thumbnail:
            fields["thumbnail"] = thumbnail

    content_service.apply_updates(row, fields, required=REQUIRED_FIELDS + ("slug",))
    if data.created_at:
        row.created_at = data.created_at
    return content_service.updated_row(db, PRESS, row, current_user.id)


def delete_press(db: Session, slug: str, current_user: AdminUser) -> None:
    content_service.delete_row(db, PRESS, slug, current_user.id)
