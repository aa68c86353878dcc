"""다국어(ko/en) 콘텐츠 공통 요청/응답 계약을 위한 Pydantic 스키마입니다."""

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, Field, model_validator


class ImageMeta(BaseModel):
    src: str
    alt: str = ""
    alignment: Literal["left", "center", "right", "full"] = "center"
    displaysize: int = Field(50, ge=0, le=100)
    originalWidth: int = 0
    originalHeight: int = 0
    uploadAt: datetime = Field(default_factory=datetime.utcnow)


class LocalizedBody(BaseModel):
    title: str = ""
    subtitle: Optional[str] = None
    body: str = ""
    thumbnail_url: Optional[str] = None
    images: List[ImageMeta] = []


class LocalizedContent(BaseModel):
    ko: LocalizedBody
    en: LocalizedBody = Field(default_factory=LocalizedBody)

    @model_validator(mode="after")
    def require_korean(self):
        # 한국어 본문은 항상 완전해야 한다. 영어는 비어 있어도 된다.
        if not self.ko.title.strip():
            raise ValueError("한국어 제목은 필수입니다.")
        if not self.ko.body.strip():
            raise ValueError("한국어 본문은 필수입니다.")
        return self


class LocalizedText(BaseModel):
    ko: str
    en: str = ""

    @model_validator(mode="after")
    def require_korean(self):
        if not self.ko.strip():
            raise ValueError("한국어 값은 필수입니다.")
        return self
