"""공개 페이지 SEO 메타데이터 응답 계약을 위한 Pydantic 스키마입니다."""

from typing import Any, Dict, List

from pydantic import BaseModel


class SeoMetadataOut(BaseModel):
    title: str
    description: str
    keywords: List[str]
    canonical: str
    image: str
    openGraph: Dict[str, Any]
    twitter: Dict[str, Any]
    jsonLd: Dict[str, Any]


class SitemapEntry(BaseModel):
    url: str
    lastModified: str | None = None
