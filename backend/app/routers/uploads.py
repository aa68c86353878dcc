"""Uploads 기능 API 라우터입니다. 요청을 검증하고 서비스 레이어로 비즈니스 로직을 위임합니다."""

from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from sqlalchemy.orm import Session

from app.database import get_db
from app.middleware.auth_middleware import get_current_user, require_roles
from app.models.admin_user import AdminUser
from app.schemas.upload import BlobCleanupOut, PublishImagesOut, UploadedFileOut
from app.services import content_service, editor_image_service
from app.services.storage_service import StorageError, build_blob_path, get_storage
from app.utils.helpers import build_upload_filename, read_image_upload

router = APIRouter(prefix="/api", tags=["uploads"])

ALLOWED_FOLDERS = {"press", "sonaverseStory", "product", "editor", "general"}


@router.post("/upload", response_model=UploadedFileOut)
async def upload_image(
    file: Optional[UploadFile] = File(None),
    filename: Optional[str] = Form(None),
    type: Optional[str] = Form(None),
    folder: Optional[str] = Form(None),
    _current_user: AdminUser = Depends(get_current_user),
):
    data = await read_image_upload(file)
    folder = folder or "general"
    if folder not in ALLOWED_FOLDERS:
        raise HTTPException(status_code=400, detail="유효하지 않은 업로드 폴더입니다.")

    name = build_upload_filename(file.filename, custom_filename=filename, upload_type=type)
    try:
        url = get_storage().put(build_blob_path(folder, name), data, content_type=file.content_type)
    except StorageError as exc:
        raise HTTPException(status_code=500, detail=f"파일 업로드에 실패했습니다: {exc}")
    return UploadedFileOut(
        url=url,
        fileName=name,
        originalName=file.filename,
        size=len(data),
        type=file.content_type,
    )


@router.post("/upload/cleanup", response_model=BlobCleanupOut)
def cleanup_blobs(
    dry_run: bool = True,
    db: Session = Depends(get_db),
    _current_user: AdminUser = Depends(require_roles("admin")),
):
    return editor_image_service.cleanup_orphan_blobs(db, dry_run=dry_run)


@router.post("/{collection}/{slug}/images", response_model=PublishImagesOut)
async def publish_content_images(
    collection: str,
    slug: str,
    lang: str = Form("ko"),
    files: List[UploadFile] = File([]),
    temp_srcs: List[str] = Form([]),
    thumbnail: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    current_user: AdminUser = Depends(get_current_user),
):
    collection = content_service.resolve_collection(collection)
    if len(files) != len(temp_srcs):
        raise HTTPException(status_code=400, detail="files와 temp_srcs의 개수가 일치하지 않습니다.")

    pending = []
    for upload, temp_src in zip(files, temp_srcs):
        data = await read_image_upload(upload)
        pending.append(editor_image_service.PendingImage(temp_src, upload.filename, data, upload.content_type))

    thumbnail_image = None
    if thumbnail is not None and thumbnail.filename:
        data = await read_image_upload(thumbnail)
        thumbnail_image = editor_image_service.PendingImage("thumbnail", thumbnail.filename, data, thumbnail.content_type)

    return editor_image_service.publish_images(
        db,
        collection,
        slug,
        lang,
        pending,
        thumbnail=thumbnail_image,
        changed_by=current_user.id,
    )
