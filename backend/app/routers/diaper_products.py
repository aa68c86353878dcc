"""기저귀 제품 API 라우터입니다."""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.database import get_db
from app.middleware.auth_middleware import get_current_user, get_optional_user
from app.models.admin_user import AdminUser
from app.schemas.product import ProductCreate, ProductList, ProductOut, ProductUpdate
from app.services import content_service, product_service
from app.services.content_service import PRODUCT

router = APIRouter(prefix="/api/diaper-products", tags=["diaper-products"])


@router.get("", response_model=ProductList)
def list_products(lang: str = "ko", category: str | None = None, db: Session = Depends(get_db)):
    return product_service.list_public(db, lang=lang, category=category)


@router.get("/{slug}")
def get_product(
    slug: str,
    lang: str = "ko",
    admin: bool = False,
    db: Session = Depends(get_db),
    current_user: AdminUser | None = Depends(get_optional_user),
):
    if admin:
        if current_user is None:
            raise HTTPException(status_code=401, detail="인증이 필요합니다.")
        return ProductOut.model_validate(content_service.get_by_slug(db, PRODUCT, slug))
    return product_service.get_public(db, slug, lang)


@router.post("", response_model=ProductOut)
def create_product(
    data: ProductCreate,
    db: Session = Depends(get_db),
    current_user: AdminUser = Depends(get_current_user),
):
    return product_service.create_product(db, data, current_user)


@router.put("/{slug}", response_model=ProductOut)
@router.patch("/{slug}", response_model=ProductOut)
def update_product(
    slug: str,
    data: ProductUpdate,
    db: Session = Depends(get_db),
    current_user: AdminUser = Depends(get_current_user),
):
    return product_service.update_product(db, slug, data, current_user)


@router.delete("/{slug}")
def delete_product(slug: str, db: Session = Depends(get_db), current_user: AdminUser = Depends(get_current_user)):
    product_service.delete_product(db, slug, current_user)
    return {"success": True, "message": "제품이 삭제되었습니다."}
