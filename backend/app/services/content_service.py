"""세 콘텐츠 컬렉션(언론보도/스토리/제품)이 공유하는 규칙을 모은 서비스 레이어입니다.

슬러그 정규화, 대표 게시물 단일화, 고유 인덱스 충돌 변환, 변경 이력 기록, 공개 목록
캐시 무효화를 담당한다.
"""

import logging
import re
from typing import Any, Dict, Type

from fastapi import HTTPException
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.database import Base
from app.models.diaper_product import DiaperProduct
from app.models.press_release import PressRelease
from app.models.sonaverse_story import SonaverseStory
from app.services import version_service
from app.utils.cache import cache

logger = logging.getLogger(__name__)

PRESS = "press"
STORY = "sonaverseStory"
PRODUCT = "product"

CONTENT_MODELS: Dict[str, Type[Base]] = {
    PRESS: PressRelease,
    STORY: SonaverseStory,
    PRODUCT: DiaperProduct,
}

# URL 경로 표기 -> 컬렉션 키
COLLECTION_ALIASES = {
    "press": PRESS,
    "sonaverse-story": STORY,
    "sonaverseStory": STORY,
    "diaper-products": PRODUCT,
    "product": PRODUCT,
}

COLLECTION_LABELS = {
    PRESS: "언론보도",
    STORY: "소나버스 스토리",
    PRODUCT: "제품",
}

SLUG_RE = re.compile(r"^[a-z0-9-]+$")
UNTITLED = "제목 없음"
UNNAMED_PRODUCT = "제품명 없음"


def resolve_collection(value: str) -> str:
    key = COLLECTION_ALIASES.get(value)
    if not key:
        raise HTTPException(status_code=404, detail="지원하지 않는 콘텐츠 종류입니다.")
    return key


def normalize_slug(value: str | None) -> str:
    return (value or "").strip().lower()


def validate_slug(value: str | None) -> str:
    slug = normalize_slug(value)
    if not slug:
        raise HTTPException(status_code=400, detail="슬러그가 필요합니다.")
    if not SLUG_RE.match(slug):
        raise HTTPException(status_code=400, detail="슬러그는 영문 소문자, 숫자, 하이픈(-)만 사용할 수 있습니다.")
    return slug


def display_title(collection: str, row: Any) -> str:
    if collection == PRODUCT:
        name = row.name or {}
        return name.get("ko") or name.get("en") or UNNAMED_PRODUCT
    content = row.content or {}
    return (content.get("ko") or {}).get("title") or (content.get("en") or {}).get("title") or UNTITLED


def raise_not_found(collection: str):
    raise HTTPException(status_code=404, detail=f"해당 {COLLECTION_LABELS[collection]}을(를) 찾을 수 없습니다.")


def get_by_slug(db: Session, collection: str, slug: str):
    model = CONTENT_MODELS[collection]
    row = db.query(model).filter(model.slug == normalize_slug(slug)).first()
    if not row:
        raise_not_found(collection)
    return row


def set_main(db: Session, model: Type[Base], row) -> None:
    """row를 대표 게시물로 지정하고 같은 컬렉션의 나머지 대표 표시는 모두 해제한다."""
    query = db.query(model).filter(model.is_main == True)  # noqa: E712
    if row.id is not None:
        query = query.filter(model.id != row.id)
    query.update({"is_main": False}, synchronize_session=False)
    row.is_main = True


def commit_or_conflict(db: Session) -> None:
    # 사전 중복 확인은 안내용이며 실제 보장은 slug 고유 인덱스가 한다.
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=400, detail="이미 존재하는 슬러그입니다.")


def record_version(db: Session, collection: str, row, changed_by: int | None, change_type: str) -> None:
    version_service.record_version(
        db,
        entity_type=collection,
        entity_id=row.id,
        slug=row.slug,
        changed_by=changed_by,
        change_type=change_type,
        snapshot=version_service.snapshot_row(row),
    )


def invalidate_cache(collection: str) -> None:
    removed = cache.delete_prefix(f"{collection}:")
    if removed:
        logger.debug("cleared %s cached %s list entries", removed, collection)


def apply_updates(row, fields: Dict[str, Any], required: tuple = ()) -> None:
    """부분 수정 값을 반영한다. 필수 컬럼에 대한 null 값은 무시한다."""
    for key, value in fields.items():
        if value is None and key in required:
            continue
        setattr(row, key, value)


def created_row(db: Session, collection: str, row, changed_by: int | None):
    db.add(row)
    commit_or_conflict(db)
    db.refresh(row)
    record_version(db, collection, row, changed_by, "create")
    invalidate_cache(collection)
    logger.info("%s created slug=%s by=%s", collection, row.slug, changed_by)
    return row


def updated_row(db: Session, collection: str, row, changed_by: int | None):
    row.updated_by = changed_by
    commit_or_conflict(db)
    db.refresh(row)
    record_version(db, collection, row, changed_by, "update")
    invalidate_cache(collection)
    return row


def delete_row(db: Session, collection: str, slug: str, changed_by: int | None) -> None:
    row = get_by_slug(db, collection, slug)
    entity_id, current_slug = row.id, row.slug
    snapshot = version_service.snapshot_row(row)
    db.delete(row)
    db.commit()
    version_service.record_version(
        db,
        entity_type=collection,
        entity_id=entity_id,
        slug=current_slug,
        changed_by=changed_by,
        change_type="delete",
        snapshot=snapshot,
    )
    invalidate_cache(collection)
    logger.info("%s deleted slug=%s by=%s", collection, current_slug, changed_by)


def list_versions(db: Session, collection: str, slug: str) -> list:
    versions = version_service.list_versions(db, entity_type=collection, slug=normalize_slug(slug))
    if not versions:
        raise_not_found(collection)
    return versions
