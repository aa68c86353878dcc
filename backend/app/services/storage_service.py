"""업로드 이미지/다운로드 파일을 보관하는 blob 스토리지 추상화입니다.

경로는 항상 ``blob/{folder}/{filename}`` 형태이며 같은 경로로 다시 올리면 덮어쓴다.
"""

import logging
import os
from typing import Iterator, Optional, Tuple

from app.config import settings

logger = logging.getLogger(__name__)

BLOB_ROOT = "blob"


class StorageError(Exception):
    pass


def build_blob_path(folder: str | None, filename: str) -> str:
    folder = (folder or "").strip("/")
    if folder:
        return f"{BLOB_ROOT}/{folder}/{filename}"
    return f"{BLOB_ROOT}/{filename}"


class Storage:
    def put(self, path: str, data: bytes, *, content_type: Optional[str] = None) -> str:
        raise NotImplementedError

    def get(self, path: str) -> Optional[Tuple[bytes, Optional[str]]]:
        raise NotImplementedError

    def delete(self, path: str) -> bool:
        raise NotImplementedError

    def list_paths(self, prefix: str = BLOB_ROOT) -> Iterator[str]:
        raise NotImplementedError

    def url_for(self, path: str) -> str:
        raise NotImplementedError


class LocalStorage(Storage):
    def __init__(self, base_dir: str, public_base: str = "/uploads") -> None:
        self.base_dir = base_dir
        self.public_base = public_base.rstrip("/")

    def _abs_path(self, path: str) -> str:
        base = os.path.abspath(self.base_dir)
        abs_path = os.path.abspath(os.path.join(base, path))
        if os.path.commonpath([abs_path, base]) != base:
            raise StorageError(f"invalid blob path: {path}")
        return abs_path

    def put(self, path: str, data: bytes, *, content_type: Optional[str] = None) -> str:
        abs_path = self._abs_path(path)
        os.makedirs(os.path.dirname(abs_path), exist_ok=True)
        with open(abs_path, "wb") as f:
            f.write(data)
        logger.debug("stored %s (%s bytes)", path, len(data))
        return self.url_for(path)

    def get(self, path: str) -> Optional[Tuple[bytes, Optional[str]]]:
        abs_path = self._abs_path(path)
        if not os.path.isfile(abs_path):
            return None
        with open(abs_path, "rb") as f:
            return f.read(), None

    def delete(self, path: str) -> bool:
        abs_path = self._abs_path(path)
        if not os.path.exists(abs_path):
            return False
        os.remove(abs_path)
        logger.info("deleted blob %s", path)
        return True

    def list_paths(self, prefix: str = BLOB_ROOT) -> Iterator[str]:
        root = self._abs_path(prefix)
        if not os.path.exists(root):
            return
        for dirpath, _, filenames in os.walk(root):
            for filename in filenames:
                rel_path = os.path.relpath(os.path.join(dirpath, filename), self.base_dir)
                yield rel_path.replace("\\", "/")

    def url_for(self, path: str) -> str:
        return f"{self.public_base}/{path}"

    def remove_empty_dirs(self, prefix: str = BLOB_ROOT) -> None:
        root = self._abs_path(prefix)
        if not os.path.exists(root):
            return
        for dirpath, dirnames, filenames in os.walk(root, topdown=False):
            if dirnames or filenames:
                continue
            try:
                os.rmdir(dirpath)
            except OSError:
                pass


class S3Storage(Storage):
    def __init__(
        self,
        *,
        endpoint_url: str,
        access_key: str,
        secret_key: str,
        bucket: str,
        region: Optional[str] = None,
        public_base_url: Optional[str] = None,
    ) -> None:
        import boto3
        from botocore.config import Config

        self.client = boto3.client(
            "s3",
            endpoint_url=endpoint_url,
            aws_access_key_id=access_key,
            aws_secret_access_key=secret_key,
            region_name=region or None,
            config=Config(signature_version="s3v4", s3={"addressing_style": "path"}),
        )
        self.bucket = bucket
        self.public_base_url = public_base_url.rstrip("/") if public_base_url else None

    def put(self, path: str, data: bytes, *, content_type: Optional[str] = None) -> str:
        extra_args = {"ContentType": content_type} if content_type else {}
        try:
            self.client.put_object(Bucket=self.bucket, Key=path, Body=data, **extra_args)
        except Exception as exc:
            raise StorageError(f"upload failed for {path}: {exc}") from exc
        return self.url_for(path)

    def get(self, path: str) -> Optional[Tuple[bytes, Optional[str]]]:
        from botocore.exceptions import ClientError

        try:
            obj = self.client.get_object(Bucket=self.bucket, Key=path)
        except ClientError as exc:
            if exc.response.get("Error", {}).get("Code") in ("NoSuchKey", "404"):
                return None
            raise StorageError(f"download failed for {path}: {exc}") from exc
        return obj["Body"].read(), obj.get("ContentType")

    def delete(self, path: str) -> bool:
        self.client.delete_object(Bucket=self.bucket, Key=path)
        return True

    def list_paths(self, prefix: str = BLOB_ROOT) -> Iterator[str]:
        paginator = self.client.get_paginator("list_objects_v2")
        for page in paginator.paginate(Bucket=self.bucket, Prefix=prefix):
            for item in page.get("Contents", []):
                yield item["Key"]

    def url_for(self, path: str) -> str:
        if self.public_base_url:
            return f"{self.public_base_url}/{path}"
        endpoint = self.client.meta.endpoint_url.rstrip("/")
        return f"{endpoint}/{self.bucket}/{path}"


def get_storage() -> Storage:
    backend = (settings.STORAGE_BACKEND or "local").lower()
    if backend == "s3":
        if not (settings.S3_ENDPOINT_URL and settings.S3_ACCESS_KEY_ID and settings.S3_SECRET_ACCESS_KEY and settings.S3_BUCKET):
            raise StorageError("S3 storage is not fully configured")
        return S3Storage(
            endpoint_url=settings.S3_ENDPOINT_URL,
            access_key=settings.S3_ACCESS_KEY_ID,
            secret_key=settings.S3_SECRET_ACCESS_KEY,
            bucket=settings.S3_BUCKET,
            region=settings.S3_REGION,
            public_base_url=settings.S3_PUBLIC_BASE_URL,
        )
    return LocalStorage(base_dir=settings.UPLOAD_DIR, public_base=settings.PUBLIC_UPLOAD_BASE)
