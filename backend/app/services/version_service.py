"""콘텐츠 변경 스냅샷 기록/조회 서비스입니다.

이력은 원본 행이 삭제된 뒤에도 남으며, 기록 당시 슬러그로 조회한다.
"""

from datetime import datetime
from typing import Any, Dict, List

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.models.content_version import ContentVersion

CHANGE_TYPES = ("create", "update", "delete")


def snapshot_row(row) -> Dict[str, Any]:
    data: Dict[str, Any] = {}
    for column in row.__table__.columns:
        value = getattr(row, column.name)
        data[column.name] = value.isoformat() if isinstance(value, datetime) else value
    return data


def record_version(
    db: Session,
    *,
    entity_type: str,
    entity_id: int,
    slug: str,
    changed_by: int | None,
    change_type: str,
    snapshot: Dict[str, Any],
) -> ContentVersion:
    if change_type not in CHANGE_TYPES:
        raise ValueError(f"unknown change type: {change_type}")
    current_max = (
        db.query(func.max(ContentVersion.version_no))
        .filter(ContentVersion.entity_type == entity_type, ContentVersion.entity_id == entity_id)
        .scalar()
    )
    version = ContentVersion(
        entity_type=entity_type,
        entity_id=entity_id,
        slug=slug,
        version_no=(current_max or 0) + 1,
        change_type=change_type,
        snapshot=snapshot,
        changed_by=changed_by,
    )
    db.add(version)
    db.commit()
    db.refresh(version)
    return version


def list_versions(db: Session, *, entity_type: str, slug: str) -> List[ContentVersion]:
    # 같은 슬러그를 여러 문서가 거쳐 갔다면 가장 최근 문서의 이력만 돌려준다.
    # 슬러그가 바뀐 적이 있어도 그 문서의 이력은 모두 포함한다.
    latest = (
        db.query(ContentVersion.entity_id)
        .filter(ContentVersion.entity_type == entity_type, ContentVersion.slug == slug)
        .order_by(ContentVersion.version_id.desc())
        .first()
    )
    if latest is None:
        return []
    return (
        db.query(ContentVersion)
        .filter(ContentVersion.entity_type == entity_type, ContentVersion.entity_id == latest.entity_id)
        .order_by(ContentVersion.version_id.desc())
        .all()
    )
