"""슬러그 중복 확인 요청/응답 계약을 위한 Pydantic 스키마입니다."""

from typing import Dict, Optional

from pydantic import BaseModel


class SlugCheckRequest(BaseModel):
    slug: Optional[str] = None
    original_slug: Optional[str] = None


class SlugMatch(BaseModel):
    exists: bool
    title: Optional[str] = None


class SlugCheckResult(BaseModel):
    slug: str
    hasConflict: bool
    results: Dict[str, SlugMatch]
