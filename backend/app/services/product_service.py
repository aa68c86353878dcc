"""보듬 기저귀 제품 도메인 서비스 레이어입니다."""

from typing import Any, Dict

from sqlalchemy.orm import Session

from app.config import settings
from app.models.admin_user import AdminUser
from app.models.diaper_product import DiaperProduct
from app.schemas.product import ProductCreate, ProductUpdate
from app.services import content_service, slug_service
from app.services.content_service import PRODUCT
from app.services.localization_service import normalize_lang, resolve_localized, resolve_text
from app.utils.cache import cache, create_cache_key
from app.utils.pagination import filter_by_search, paginate_in_memory

REQUIRED_FIELDS = (
    "slug", "name", "description", "category", "thumbnail_image",
    "product_images", "detail_images", "tags", "is_active", "is_main",
)


def _default_content(name: Dict[str, str], description: Dict[str, str]) -> Dict[str, Any]:
    # 상세 본문이 없으면 제품명/설명으로 다국어 본문을 구성한다.
    return {
        lang: {"title": name.get(lang) or "", "body": description.get(lang) or "", "images": []}
        for lang in ("ko", "en")
    }


def to_public(row: DiaperProduct, lang: str) -> Dict[str, Any]:
    content = row.content or _default_content(row.name or {}, row.description or {})
    localized = resolve_localized(content, lang)
    return {
        "slug": row.slug,
        "lang": normalize_lang(lang),
        "name": resolve_text(row.name, lang),
        "description": resolve_text(row.description, lang),
        "category": row.category,
        "title": localized.get("title") or "",
        "body": localized.get("body") or "",
        "thumbnail_image": row.thumbnail_image,
        "product_images": row.product_images or [],
        "detail_images": row.detail_images or [],
        "tags": row.tags or [],
        "is_main": bool(row.is_main),
        "created_at": row.created_at,
    }


def list_public(db: Session, lang: str = "ko", category: str | None = None) -> dict:
    key = create_cache_key(PRODUCT, {"lang": normalize_lang(lang), "category": category or ""})
    cached = cache.get(key)
    if cached is not None:
        return cached

    query = db.query(DiaperProduct).filter(DiaperProduct.is_active == True)  # noqa: E712
    if category:
        query = query.filter(DiaperProduct.category == category)
    rows = query.order_by(DiaperProduct.created_at.desc(), DiaperProduct.id.desc()).all()
    products = [to_public(row, lang) for row in rows]
    result = {"success": True, "total": len(products), "products": products}
    cache.set(key, result, ttl=settings.CACHE_TTL_SECONDS)
    return result


def list_admin(db: Session, page: int = 1, page_size: int = 10, search: str | None = None) -> dict:
    rows = (
        db.query(DiaperProduct)
        .order_by(DiaperProduct.created_at.desc(), DiaperProduct.id.desc())
        .limit(settings.ADMIN_LIST_MAX)
        .all()
    )

    def texts(row: DiaperProduct):
        name = row.name or {}
        return (row.slug, name.get("ko"), name.get("en"), row.category)

    return paginate_in_memory(filter_by_search(rows, search, texts), page, page_size)


def get_public(db: Session, slug: str, lang: str = "ko") -> Dict[str, Any]:
    row = content_service.get_by_slug(db, PRODUCT, slug)
    if not row.is_active:
        content_service.raise_not_found(PRODUCT)
    return to_public(row, lang)


def create_product(db: Session, data: ProductCreate, current_user: AdminUser) -> DiaperProduct:
    slug = slug_service.ensure_slug_available(db, data.slug)
    name = data.name.model_dump(mode="json")
    description = data.description.model_dump(mode="json")
    content = data.content.model_dump(mode="json") if data.content else _default_content(name, description)
    row = DiaperProduct(
        slug=slug,
        name=name,
        description=description,
        content=content,
        category=data.category,
        thumbnail_image=data.thumbnail_image,
        product_images=data.product_images,
        detail_images=data.detail_images,
        tags=data.tags,
        is_active=data.is_active,
        is_main=False,
        updated_by=current_user.id,
    )
    if data.is_main:
        content_service.set_main(db, DiaperProduct, row)
    return content_service.created_row(db, PRODUCT, row, current_user.id)


def update_product(db: Session, slug: str, data: ProductUpdate, current_user: AdminUser) -> DiaperProduct:
    row = content_service.get_by_slug(db, PRODUCT, slug)
    fields = data.model_dump(exclude_unset=True, mode="json")
    is_main = fields.pop("is_main", None)

    if "slug" in fields:
        fields["slug"] = slug_service.ensure_slug_available(db, fields["slug"], original_slug=row.slug)
    content_service.apply_updates(row, fields, required=REQUIRED_FIELDS)
    if is_main is True:
        content_service.set_main(db, DiaperProduct, row)
    elif is_main is False:
        row.is_main = False
    return content_service.updated_row(db, PRODUCT, row, current_user.id)


def delete_product(db: Session, slug: str, current_user: AdminUser) -> None:
    content_service.delete_row(db, PRODUCT, slug, current_user.id)
