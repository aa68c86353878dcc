"""공개 다운로드 파일(카탈로그 등)을 blob 스토리지에서 내려주는 라우터입니다."""

import mimetypes
from urllib.parse import quote

from fastapi import APIRouter, HTTPException
from fastapi.responses import Response

from app.config import settings
from app.services.storage_service import build_blob_path, get_storage

router = APIRouter(prefix="/api/download", tags=["downloads"])


@router.get("/{filename}")
def download_file(filename: str):
    if not filename or "/" in filename or "\\" in filename or ".." in filename:
        raise HTTPException(status_code=400, detail="잘못된 파일명입니다.")

    found = get_storage().get(build_blob_path(settings.DOWNLOAD_FOLDER, filename))
    if found is None:
        raise HTTPException(status_code=404, detail="파일을 찾을 수 없습니다.")

    data, content_type = found
    media_type = content_type or mimetypes.guess_type(filename)[0] or "application/octet-stream"
    return Response(
        content=data,
        media_type=media_type,
        headers={
            "Content-Disposition": f"attachment; filename*=UTF-8''{quote(filename)}",
            "Cache-Control": "public, max-age=86400",
        },
    )
