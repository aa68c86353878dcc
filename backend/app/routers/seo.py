"""공개 페이지 SEO 메타데이터와 사이트맵 API 라우터입니다."""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.schemas.seo import SeoMetadataOut, SitemapEntry
from app.services import content_service, seo_service

router = APIRouter(prefix="/api", tags=["seo"])


@router.get("/seo/{collection}/{slug}", response_model=SeoMetadataOut)
def get_metadata(collection: str, slug: str, lang: str = "ko", db: Session = Depends(get_db)):
    return seo_service.build_metadata(db, content_service.resolve_collection(collection), slug, lang)


@router.get("/sitemap", response_model=List[SitemapEntry])
def get_sitemap(db: Session = Depends(get_db)):
    return seo_service.build_sitemap(db)
