import time

from fastapi import HTTPException, UploadFile

from app.config import settings


def file_extension(filename: str | None, default: str = "jpg") -> str:
    if filename and "." in filename:
        ext = filename.rsplit(".", 1)[-1].lower()
        if ext:
            return ext
    return default


async def read_image_upload(file: UploadFile | None) -> bytes:
    if file is None or not file.filename:
        raise HTTPException(status_code=400, detail="파일이 없습니다.")
    if not (file.content_type or "").startswith("image/"):
        raise HTTPException(status_code=400, detail="이미지 파일만 업로드 가능합니다.")
    content = await file.read()
    if len(content) > settings.MAX_UPLOAD_SIZE:
        limit_mb = settings.MAX_UPLOAD_SIZE // (1024 * 1024)
        raise HTTPException(status_code=400, detail=f"파일 크기는 {limit_mb}MB 이하여야 합니다.")
    return content


def build_upload_filename(original_name: str, custom_filename: str | None = None, upload_type: str | None = None) -> str:
    ext = file_extension(original_name)
    if custom_filename:
        return f"{custom_filename}.{ext}"
    timestamp = int(time.time() * 1000)
    if upload_type == "editor":
        return f"content_{timestamp}.{ext}"
    return f"upload_{timestamp}_{original_name}"
