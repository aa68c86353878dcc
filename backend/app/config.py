"""환경 변수 기반 애플리케이션 설정을 중앙에서 관리합니다."""

from pydantic_settings import BaseSettings
from typing import Dict, List
from pathlib import Path


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./sonaverse.db"
    SECRET_KEY: str = "change-me-to-a-random-secret-key"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"
    ALLOWED_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:8000"]

    # JWT / cookie
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 480
    JWT_ISSUER: str = "sonaverse-admin"
    JWT_AUDIENCE: str = "admin-users"
    COOKIE_NAME: str = "admin_token"
    COOKIE_SECURE: bool = False

    # File upload
    MAX_UPLOAD_SIZE: int = 10 * 1024 * 1024  # 10 MB
    UPLOAD_DIR: str = "uploads"

    # Blob storage (local | s3)
    STORAGE_BACKEND: str = "local"
    PUBLIC_UPLOAD_BASE: str = "/uploads"
    S3_ENDPOINT_URL: str = ""
    S3_ACCESS_KEY_ID: str = ""
    S3_SECRET_ACCESS_KEY: str = ""
    S3_BUCKET: str = ""
    S3_REGION: str = ""
    S3_PUBLIC_BASE_URL: str = ""
    DOWNLOAD_FOLDER: str = "downloads"

    # Public site / SEO
    SITE_URL: str = "https://sonaverse.kr"
    SITE_NAME: str = "SONAVERSE"
    DEFAULT_OG_IMAGE: str = "/logo/symbol_logo.png"

    # 공개 목록 캐시 (초)
    CACHE_TTL_SECONDS: int = 300
    # 관리자 목록은 한 번에 가져와 메모리에서 검색/페이징한다.
    ADMIN_LIST_MAX: int = 1000

    ANALYTICS_ENABLED: bool = True

    def public_paths(self) -> Dict[str, str]:
        return {
            "press": "press",
            "sonaverseStory": "sonaverse-story",
            "product": "products/bodeum-diaper",
        }

    class Config:
        # 실행 cwd와 무관하게 backend/.env를 로드한다.
        env_file = str(Path(__file__).resolve().parents[1] / ".env")


settings = Settings()
