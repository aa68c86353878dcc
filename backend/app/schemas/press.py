"""언론보도 요청/응답 계약을 위한 Pydantic 스키마입니다."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from app.schemas.content import LocalizedContent, LocalizedText


class PressCreate(BaseModel):
    slug: str
    press_name: LocalizedText
    content: LocalizedContent
    external_link: Optional[str] = None
    thumbnail: Optional[str] = None
    tags: List[str] = []
    is_active: bool = True
    created_at: Optional[datetime] = None


class PressUpdate(BaseModel):
    slug: Optional[str] = None
    press_name: Optional[LocalizedText] = None
    content: Optional[LocalizedContent] = None
    external_link: Optional[str] = None
    thumbnail: Optional[str] = None
    tags: Optional[List[str]] = None
    is_active: Optional[bool] = None
    created_at: Optional[datetime] = None


class PressOut(BaseModel):
    id: int
    slug: str
    press_name: dict
    content: dict
    thumbnail: Optional[str] = None
    external_link: Optional[str] = None
    tags: List[str] = []
    is_active: bool
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class PressPublicOut(BaseModel):
    slug: str
    lang: str
    press_name: str
    title: str
    subtitle: Optional[str] = None
    body: str
    thumbnail_url: Optional[str] = None
    external_link: Optional[str] = None
    tags: List[str] = []
    created_at: datetime


class PressPage(BaseModel):
    total: int
    page: int
    pageSize: int
    totalPages: int
    results: List[PressPublicOut]


class PressAdminPage(BaseModel):
    total: int
    page: int
    pageSize: int
    totalPages: int
    results: List[PressOut]
