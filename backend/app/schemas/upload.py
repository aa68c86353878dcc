"""Upload 요청/응답 계약을 위한 Pydantic 스키마입니다."""

from typing import List

from pydantic import BaseModel


class UploadedFileOut(BaseModel):
    url: str
    fileName: str
    originalName: str
    size: int
    type: str
    success: bool = True


class ImageReplacement(BaseModel):
    temp_src: str
    url: str


class ImageFailure(BaseModel):
    temp_src: str
    error: str


class PublishImagesOut(BaseModel):
    slug: str
    lang: str
    content: dict
    thumbnail_url: str | None = None
    uploaded: List[ImageReplacement] = []
    failed: List[ImageFailure] = []


class BlobCleanupOut(BaseModel):
    dry_run: bool
    referenced_count: int
    existing_count: int
    orphan_count: int
    deleted_count: int
    orphan_urls: list[str]
