"""기저귀 제품 요청/응답 계약을 위한 Pydantic 스키마입니다."""

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel

from app.schemas.content import LocalizedContent, LocalizedText

ProductCategory = Literal["팬티형", "속기저귀", "깔개매트"]


class ProductCreate(BaseModel):
    slug: str
    name: LocalizedText
    description: LocalizedText
    category: ProductCategory
    thumbnail_image: str
    content: Optional[LocalizedContent] = None
    product_images: List[str] = []
    detail_images: List[str] = []
    tags: List[str] = []
    is_active: bool = True
    is_main: bool = False


class ProductUpdate(BaseModel):
    slug: Optional[str] = None
    name: Optional[LocalizedText] = None
    description: Optional[LocalizedText] = None
    category: Optional[ProductCategory] = None
    thumbnail_image: Optional[str] = None
    content: Optional[LocalizedContent] = None
    product_images: Optional[List[str]] = None
    detail_images: Optional[List[str]] = None
    tags: Optional[List[str]] = None
    is_active: Optional[bool] = None
    is_main: Optional[bool] = None


class ProductOut(BaseModel):
    id: int
    slug: str
    name: dict
    description: dict
    content: Optional[dict] = None
    category: str
    thumbnail_image: str
    product_images: List[str] = []
    detail_images: List[str] = []
    tags: List[str] = []
    is_active: bool
    is_main: bool
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class ProductPublicOut(BaseModel):
    slug: str
    lang: str
    name: str
    description: str
    category: str
    title: str
    body: str
    thumbnail_image: str
    product_images: List[str] = []
    detail_images: List[str] = []
    tags: List[str] = []
    is_main: bool = False
    created_at: datetime


class ProductList(BaseModel):
    success: bool = True
    total: int
    products: List[ProductPublicOut]


class ProductAdminPage(BaseModel):
    total: int
    page: int
    pageSize: int
    totalPages: int
    results: List[ProductOut]
