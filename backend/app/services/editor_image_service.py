"""에디터 임시 이미지를 blob 스토리지에 올리고 본문 src를 교체하는 서비스 레이어입니다.

업로드된 이미지는 ``{slug}_{lang}_{NN}`` / ``{slug}_thumbnail`` 규칙의 고정 이름을 가진다.
업로드에 실패한 이미지는 본문 교체를 건너뛰고 결과의 ``failed``로 보고한다.
"""

import copy
import logging
import re
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from sqlalchemy.orm import Session

from app.config import settings
from app.services import content_service
from app.services.localization_service import normalize_lang
from app.services.storage_service import BLOB_ROOT, LocalStorage, Storage, build_blob_path, get_storage
from app.utils.helpers import file_extension
from app.utils.html import replace_src_attributes

logger = logging.getLogger(__name__)

BLOB_URL_RE = re.compile(r"/blob/[^\s\"'<>)]*")

# 컬렉션별 썸네일 컬럼
THUMBNAIL_COLUMNS = {
    content_service.PRESS: "thumbnail",
    content_service.PRODUCT: "thumbnail_image",
}


@dataclass
class PendingImage:
    temp_src: str
    filename: str
    data: bytes
    content_type: Optional[str] = None


def build_image_name(slug: str, lang: str, index: int) -> str:
    return f"{slug}_{lang}_{index:02d}"


def build_thumbnail_name(slug: str) -> str:
    return f"{slug}_thumbnail"


def rewrite_body_sources(body: str, replacements: Dict[str, str]) -> str:
    return replace_src_attributes(body or "", replacements)


def next_image_index(slug: str, lang: str, texts: Iterable[Optional[str]]) -> int:
    # 이미 게시된 이미지 번호 다음부터 매겨 기존 blob을 덮어쓰지 않는다.
    pattern = re.compile(rf"{re.escape(slug)}_{re.escape(lang)}_(\d+)")
    found = [int(n) for text in texts if text for n in pattern.findall(text)]
    return (max(found) if found else 0) + 1


def _upload(storage: Storage, folder: str, name: str, image: PendingImage) -> str:
    path = build_blob_path(folder, f"{name}.{file_extension(image.filename)}")
    return storage.put(path, image.data, content_type=image.content_type)


def publish_images(
    db: Session,
    collection: str,
    slug: str,
    lang: str,
    pending: List[PendingImage],
    thumbnail: Optional[PendingImage] = None,
    changed_by: Optional[int] = None,
    storage: Optional[Storage] = None,
) -> dict:
    row = content_service.get_by_slug(db, collection, slug)
    lang = normalize_lang(lang)
    storage = storage or get_storage()
    folder = f"{collection}/{row.slug}"

    content = copy.deepcopy(row.content or {})
    if lang not in content:
        content[lang] = {}
    localized = content[lang]

    existing_texts = [localized.get("body")] + [img.get("src") for img in localized.get("images") or []]
    index = next_image_index(row.slug, lang, existing_texts)

    replacements: Dict[str, str] = {}
    uploaded, failed = [], []
    for image in pending:
        name = build_image_name(row.slug, lang, index)
        index += 1
        try:
            url = _upload(storage, folder, name, image)
        except Exception as exc:
            # 실패한 이미지는 본문에 임시 src가 남는다.
            logger.warning("image upload failed slug=%s lang=%s src=%s: %s", row.slug, lang, image.temp_src, exc)
            failed.append({"temp_src": image.temp_src, "error": str(exc)})
            continue
        replacements[image.temp_src] = url
        uploaded.append({"temp_src": image.temp_src, "url": url})

    localized["body"] = rewrite_body_sources(localized.get("body") or "", replacements)
    images = []
    for meta in localized.get("images") or []:
        meta = dict(meta)
        if meta.get("src") in replacements:
            meta["src"] = replacements[meta["src"]]
        images.append(meta)
    localized["images"] = images

    thumbnail_url = None
    if thumbnail is not None:
        try:
            thumbnail_url = _upload(storage, folder, build_thumbnail_name(row.slug), thumbnail)
        except Exception as exc:
            logger.warning("thumbnail upload failed slug=%s: %s", row.slug, exc)
            failed.append({"temp_src": thumbnail.temp_src, "error": str(exc)})
        else:
            localized["thumbnail_url"] = thumbnail_url
            column = THUMBNAIL_COLUMNS.get(collection)
            if column:
                setattr(row, column, thumbnail_url)

    row.content = content
    row.updated_by = changed_by
    db.commit()
    db.refresh(row)
    content_service.record_version(db, collection, row, changed_by, "update")
    content_service.invalidate_cache(collection)

    return {
        "slug": row.slug,
        "lang": lang,
        "content": row.content,
        "thumbnail_url": thumbnail_url,
        "uploaded": uploaded,
        "failed": failed,
    }


def _extract_blob_urls(text: Optional[str]) -> set[str]:
    if not text:
        return set()
    return {match.split("/blob/", 1)[1] for match in BLOB_URL_RE.findall(text)}


def collect_referenced_blob_paths(db: Session) -> set[str]:
    """콘텐츠 본문/썸네일/이미지 목록에서 참조 중인 blob 경로(blob/ 이후)를 모은다."""
    referenced: set[str] = set()
    for collection, model in content_service.CONTENT_MODELS.items():
        for row in db.query(model).all():
            texts: List[Optional[str]] = []
            for localized in (row.content or {}).values():
                localized = localized or {}
                texts.extend([localized.get("body"), localized.get("thumbnail_url")])
                texts.extend(img.get("src") for img in localized.get("images") or [])
            column = THUMBNAIL_COLUMNS.get(collection)
            if column:
                texts.append(getattr(row, column))
            if collection == content_service.PRODUCT:
                texts.extend(row.product_images or [])
                texts.extend(row.detail_images or [])
            for text in texts:
                referenced.update(_extract_blob_urls(text))
    return referenced


def cleanup_orphan_blobs(db: Session, dry_run: bool = True, storage: Optional[Storage] = None) -> dict:
    storage = storage or get_storage()
    referenced = collect_referenced_blob_paths(db)
    download_prefix = f"{settings.DOWNLOAD_FOLDER}/"
    existing = {
        path.split(f"{BLOB_ROOT}/", 1)[1]
        for path in storage.list_paths(BLOB_ROOT)
        if not path.split(f"{BLOB_ROOT}/", 1)[1].startswith(download_prefix)
    }
    orphans = sorted(existing - referenced)

    deleted_count = 0
    if not dry_run:
        for rel_path in orphans:
            if storage.delete(f"{BLOB_ROOT}/{rel_path}"):
                deleted_count += 1
        if isinstance(storage, LocalStorage):
            storage.remove_empty_dirs(BLOB_ROOT)
        logger.info("removed %s orphan blobs", deleted_count)

    return {
        "dry_run": dry_run,
        "referenced_count": len(referenced),
        "existing_count": len(existing),
        "orphan_count": len(orphans),
        "deleted_count": deleted_count,
        "orphan_urls": [storage.url_for(f"{BLOB_ROOT}/{rel_path}") for rel_path in orphans],
    }
