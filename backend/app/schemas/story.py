"""소나버스 스토리 요청/응답 계약을 위한 Pydantic 스키마입니다."""

import re
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, field_validator

from app.schemas.content import ImageMeta, LocalizedContent

YOUTUBE_URL_RE = re.compile(
    r"^(https?://)?(www\.)?(youtube\.com/(watch\?v=|embed/)|youtu\.be/)[a-zA-Z0-9_-]{11}(.*)?$"
)


def _validate_youtube_url(value: Optional[str]) -> Optional[str]:
    if not value:
        return value
    if not YOUTUBE_URL_RE.match(value):
        raise ValueError("유효하지 않은 YouTube URL 형식입니다.")
    return value


class StoryCreate(BaseModel):
    slug: str
    content: LocalizedContent
    youtube_url: Optional[str] = None
    tags: List[str] = []
    is_published: bool = False
    is_main: bool = False
    created_at: Optional[datetime] = None

    @field_validator("youtube_url")
    @classmethod
    def check_youtube_url(cls, value: Optional[str]) -> Optional[str]:
        return _validate_youtube_url(value)


class StoryUpdate(BaseModel):
    slug: Optional[str] = None
    content: Optional[LocalizedContent] = None
    youtube_url: Optional[str] = None
    tags: Optional[List[str]] = None
    is_published: Optional[bool] = None
    is_main: Optional[bool] = None
    created_at: Optional[datetime] = None

    @field_validator("youtube_url")
    @classmethod
    def check_youtube_url(cls, value: Optional[str]) -> Optional[str]:
        return _validate_youtube_url(value)


class StoryOut(BaseModel):
    id: int
    slug: str
    content: dict
    youtube_url: Optional[str] = None
    tags: List[str] = []
    is_published: bool
    is_main: bool
    author_id: Optional[int] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class StoryPublicOut(BaseModel):
    slug: str
    lang: str
    title: str
    subtitle: Optional[str] = None
    body: str
    thumbnail_url: Optional[str] = None
    images: List[ImageMeta] = []
    youtube_url: Optional[str] = None
    tags: List[str] = []
    is_main: bool = False
    created_at: datetime
    updated_at: Optional[datetime] = None


class StoryPage(BaseModel):
    total: int
    page: int
    pageSize: int
    totalPages: int
    results: List[StoryPublicOut]


class StoryAdminPage(BaseModel):
    total: int
    page: int
    pageSize: int
    totalPages: int
    results: List[StoryOut]
