"""방문자 기록 API 라우터입니다."""

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from app.database import get_db
from app.schemas.analytics import VisitLogIn, VisitLogResult
from app.services import analytics_service

router = APIRouter(prefix="/api/analytics", tags=["analytics"])


def _client_ip(request: Request) -> str | None:
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else None


@router.post("/log", response_model=VisitLogResult)
def log_visit(data: VisitLogIn, request: Request, db: Session = Depends(get_db)):
    if not data.user_agent:
        data.user_agent = request.headers.get("user-agent")
    return analytics_service.log_visit(db, data, ip=_client_ip(request))
