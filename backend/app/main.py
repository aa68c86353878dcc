"""FastAPI 애플리케이션 진입점. 로깅, 미들웨어, 예외 처리, API 라우터, 업로드 정적 서빙을 등록합니다."""

import logging
import os
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from app.config import settings
from app.database import Base, engine
from app.middleware.request_logger import RequestLoggerMiddleware
import app.models  # noqa: F401 - 모델 import로 metadata 등록
from app.routers import (
    admin, analytics, auth, diaper_products, downloads, inquiries,
    press, seo, slugs, sonaverse_story, uploads, users,
)

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="SONAVERSE CMS",
    description="소나버스 기업 사이트 콘텐츠(언론보도, 스토리, 제품, 문의) 관리 API",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestLoggerMiddleware)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # dict detail({"error", "details"})은 그대로, 문자열은 {"error": ...}로 감싼다.
    body = exc.detail if isinstance(exc.detail, dict) else {"error": exc.detail}
    return JSONResponse(status_code=exc.status_code, content=body, headers=getattr(exc, "headers", None))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    details = [
        {"loc": [str(part) for part in error.get("loc", ())], "msg": error.get("msg", "")}
        for error in exc.errors()
    ]
    return JSONResponse(status_code=400, content={"error": "입력값이 올바르지 않습니다.", "details": details})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": "서버 오류가 발생했습니다."})


# Register all routers
app.include_router(auth.router)
app.include_router(users.router)
app.include_router(slugs.router)
app.include_router(press.router)
app.include_router(sonaverse_story.router)
app.include_router(diaper_products.router)
app.include_router(admin.router)
app.include_router(inquiries.router)
app.include_router(analytics.router)
app.include_router(downloads.router)
app.include_router(seo.router)
app.include_router(uploads.router)


@app.on_event("startup")
def ensure_schema():
    # 누락된 테이블을 자동 생성합니다.
    Base.metadata.create_all(bind=engine)


@app.get("/api/health")
def health_check():
    return {"status": "ok", "service": settings.SITE_NAME}


# Static file serving for uploads
os.makedirs(settings.UPLOAD_DIR, exist_ok=True)
app.mount("/uploads", StaticFiles(directory=settings.UPLOAD_DIR), name="uploads")
