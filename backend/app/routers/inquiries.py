"""기업 문의 API 라우터입니다. 접수는 공개, 조회/처리는 관리자 전용입니다."""

from typing import List, Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.middleware.auth_middleware import get_current_user
from app.models.admin_user import AdminUser
from app.schemas.inquiry import InquiryCreate, InquiryOut, InquiryUpdate
from app.services import inquiry_service

router = APIRouter(prefix="/api/inquiries", tags=["inquiries"])


@router.post("", response_model=InquiryOut, status_code=status.HTTP_201_CREATED)
def create_inquiry(data: InquiryCreate, db: Session = Depends(get_db)):
    return inquiry_service.create_inquiry(db, data)


@router.get("", response_model=List[InquiryOut])
def list_inquiries(
    status: Optional[str] = None,
    db: Session = Depends(get_db),
    _current_user: AdminUser = Depends(get_current_user),
):
    return inquiry_service.list_inquiries(db, status=status)


@router.get("/{inquiry_id}", response_model=InquiryOut)
def get_inquiry(inquiry_id: int, db: Session = Depends(get_db), _current_user: AdminUser = Depends(get_current_user)):
    return inquiry_service.get_inquiry(db, inquiry_id)


@router.put("/{inquiry_id}", response_model=InquiryOut)
def update_inquiry(
    inquiry_id: int,
    data: InquiryUpdate,
    db: Session = Depends(get_db),
    current_user: AdminUser = Depends(get_current_user),
):
    return inquiry_service.update_inquiry(db, inquiry_id, data, current_user)


@router.delete("/{inquiry_id}")
def delete_inquiry(inquiry_id: int, db: Session = Depends(get_db), current_user: AdminUser = Depends(get_current_user)):
    inquiry_service.delete_inquiry(db, inquiry_id, current_user)
    return {"success": True, "message": "문의가 삭제되었습니다."}
