"""세 콘텐츠 컬렉션이 공유하는 공개 URL 슬러그 네임스페이스의 중복 확인 서비스입니다."""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, Tuple

from fastapi import HTTPException
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.orm import Session

from app.services.content_service import (
    CONTENT_MODELS,
    COLLECTION_LABELS,
    display_title,
    normalize_slug,
    validate_slug,
)

logger = logging.getLogger(__name__)


def _lookup(bind: Engine | Connection, collection: str, slug: str) -> Tuple[str, Dict]:
    model = CONTENT_MODELS[collection]
    with Session(bind=bind) as session:
        row = session.query(model).filter(model.slug == slug).first()
        if not row:
            return collection, {"exists": False, "title": None}
        return collection, {"exists": True, "title": display_title(collection, row)}


def check_slug(db: Session, slug: str | None, original_slug: str | None = None) -> Dict:
    candidate = normalize_slug(slug)
    if not candidate:
        raise HTTPException(status_code=400, detail="슬러그가 필요합니다.")

    # 수정 화면에서 슬러그를 바꾸지 않았다면 자기 자신과의 충돌로 보지 않는다.
    if original_slug and normalize_slug(original_slug) == candidate:
        return {
            "slug": candidate,
            "hasConflict": False,
            "results": {key: {"exists": False, "title": None} for key in CONTENT_MODELS},
        }

    bind = db.get_bind()
    with ThreadPoolExecutor(max_workers=len(CONTENT_MODELS)) as pool:
        futures = [pool.submit(_lookup, bind, key, candidate) for key in CONTENT_MODELS]
        results = dict(future.result() for future in futures)

    has_conflict = any(entry["exists"] for entry in results.values())
    if has_conflict:
        logger.info("slug '%s' already used in %s", candidate, [k for k, v in results.items() if v["exists"]])
    return {"slug": candidate, "hasConflict": has_conflict, "results": results}


def ensure_slug_available(db: Session, slug: str | None, original_slug: str | None = None) -> str:
    candidate = validate_slug(slug)
    result = check_slug(db, candidate, original_slug=original_slug)
    if result["hasConflict"]:
        conflicts = [
            {"collection": key, "label": COLLECTION_LABELS[key], "title": entry["title"]}
            for key, entry in result["results"].items()
            if entry["exists"]
        ]
        raise HTTPException(
            status_code=400,
            detail={"error": "이미 사용 중인 슬러그입니다.", "details": conflicts},
        )
    return candidate
