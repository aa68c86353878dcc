"""공개 상세 페이지의 OpenGraph/Twitter/JSON-LD 메타데이터를 만드는 서비스 레이어입니다."""

from typing import Any, Dict, List

from sqlalchemy.orm import Session

from app.config import settings
from app.services import content_service
from app.services.content_service import PRESS, PRODUCT, STORY
from app.services.localization_service import normalize_lang, resolve_localized, resolve_text
from app.utils.html import first_image_src, strip_tags

DESCRIPTION_LIMIT = 160
OG_IMAGE_WIDTH = 1200
OG_IMAGE_HEIGHT = 630

BASE_KEYWORDS = {
    PRESS: ["소나버스 언론보도", "SONAVERSE Press"],
    STORY: ["소나버스 스토리", "시니어 라이프", "헬스케어", "SONAVERSE Story"],
    PRODUCT: ["보듬 기저귀", "성인용 기저귀", "SONAVERSE"],
}


def absolute_url(path: str) -> str:
    if path.startswith("http://") or path.startswith("https://"):
        return path
    return f"{settings.SITE_URL.rstrip('/')}/{path.lstrip('/')}"


def pick_image(body: str | None, thumbnail: str | None) -> str:
    # 본문 첫 이미지 -> 썸네일 -> 기본 로고 순으로 선택한다.
    return first_image_src(body) or thumbnail or settings.DEFAULT_OG_IMAGE


def _is_public(collection: str, row) -> bool:
    if collection == STORY:
        return bool(row.is_published)
    return bool(row.is_active)


def _summary(text: str | None) -> str:
    plain = strip_tags(text)
    if len(plain) <= DESCRIPTION_LIMIT:
        return plain
    return plain[:DESCRIPTION_LIMIT - 1].rstrip() + "…"


def build_metadata(db: Session, collection: str, slug: str, lang: str = "ko") -> Dict[str, Any]:
    row = content_service.get_by_slug(db, collection, slug)
    if not _is_public(collection, row):
        content_service.raise_not_found(collection)
    lang = normalize_lang(lang)

    if collection == PRODUCT:
        title = resolve_text(row.name, lang)
        description = _summary(resolve_text(row.description, lang)) or title
        localized = resolve_localized(row.content or {}, lang)
        image = pick_image(localized.get("body"), row.thumbnail_image)
    else:
        localized = resolve_localized(row.content, lang)
        title = localized.get("title") or "Story"
        description = localized.get("subtitle") or _summary(localized.get("body")) or title
        thumbnail = localized.get("thumbnail_url") or getattr(row, "thumbnail", None)
        image = pick_image(localized.get("body"), thumbnail)

    canonical = absolute_url(f"{settings.public_paths()[collection]}/{row.slug}")
    image_url = absolute_url(image)
    keywords: List[str] = [*BASE_KEYWORDS[collection], title, *(row.tags or [])]
    page_title = f"{title} - {settings.SITE_NAME}"
    published = row.created_at.isoformat() if row.created_at else None
    modified = row.updated_at.isoformat() if row.updated_at else published

    open_graph = {
        "title": title,
        "description": description,
        "url": canonical,
        "siteName": settings.SITE_NAME,
        "locale": "en_US" if lang == "en" else "ko_KR",
        "type": "product" if collection == PRODUCT else "article",
        "images": [{"url": image_url, "width": OG_IMAGE_WIDTH, "height": OG_IMAGE_HEIGHT, "alt": title}],
    }
    if collection != PRODUCT:
        open_graph["publishedTime"] = published
        open_graph["modifiedTime"] = modified

    if collection == PRODUCT:
        json_ld = {
            "@context": "https://schema.org",
            "@type": "Product",
            "name": title,
            "description": description,
            "image": [image_url],
            "category": row.category,
            "brand": {"@type": "Brand", "name": settings.SITE_NAME},
            "url": canonical,
        }
    else:
        json_ld = {
            "@context": "https://schema.org",
            "@type": "NewsArticle" if collection == PRESS else "BlogPosting",
            "headline": title,
            "description": description,
            "image": [image_url],
            "datePublished": published,
            "dateModified": modified,
            "inLanguage": lang,
            "author": {"@type": "Organization", "name": settings.SITE_NAME},
            "publisher": {
                "@type": "Organization",
                "name": settings.SITE_NAME,
                "logo": {"@type": "ImageObject", "url": absolute_url(settings.DEFAULT_OG_IMAGE)},
            },
            "mainEntityOfPage": canonical,
        }

    return {
        "title": page_title,
        "description": description,
        "keywords": [keyword for keyword in keywords if keyword],
        "canonical": canonical,
        "image": image_url,
        "openGraph": open_graph,
        "twitter": {
            "card": "summary_large_image",
            "title": title,
            "description": description,
            "images": [image_url],
        },
        "jsonLd": json_ld,
    }


def build_sitemap(db: Session) -> List[Dict[str, Any]]:
    entries = [{"url": absolute_url(""), "lastModified": None}]
    for collection, model in content_service.CONTENT_MODELS.items():
        flag = model.is_published if collection == STORY else model.is_active
        rows = db.query(model).filter(flag == True).order_by(model.created_at.desc()).all()  # noqa: E712
        base = settings.public_paths()[collection]
        entries.append({"url": absolute_url(base), "lastModified": None})
        for row in rows:
            modified = row.updated_at or row.created_at
            entries.append({
                "url": absolute_url(f"{base}/{row.slug}"),
                "lastModified": modified.isoformat() if modified else None,
            })
    return entries
