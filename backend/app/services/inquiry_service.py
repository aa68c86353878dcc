"""기업 문의 접수/처리 상태 관리 서비스 레이어입니다."""

import logging
import re
from datetime import datetime
from typing import List

from fastapi import HTTPException
from sqlalchemy.orm import Session

from app.models.admin_user import AdminUser
from app.models.inquiry import INQUIRY_STATUSES, Inquiry
from app.schemas.inquiry import InquiryCreate, InquiryUpdate

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("inquiry_type", "name", "company_name", "phone_number", "email", "message")
EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def create_inquiry(db: Session, data: InquiryCreate) -> Inquiry:
    for field in REQUIRED_FIELDS:
        if not str(getattr(data, field) or "").strip():
            raise HTTPException(status_code=400, detail=f"필수 필드가 누락되었습니다: {field}")
    if not EMAIL_RE.match(data.email.strip()):
        raise HTTPException(status_code=400, detail="이메일 형식이 올바르지 않습니다.")
    if not data.privacy_consented:
        raise HTTPException(status_code=400, detail="개인정보 수집 및 이용에 동의해야 합니다.")

    row = Inquiry(
        inquiry_type=data.inquiry_type.strip(),
        name=data.name.strip(),
        company_name=data.company_name.strip(),
        phone_number=data.phone_number.strip(),
        email=data.email.strip(),
        message=data.message,
        attached_files=data.attached_files,
        privacy_consented=True,
        status="new",
        status_history=[],
    )
    db.add(row)
    db.commit()
    db.refresh(row)
    logger.info("inquiry received id=%s type=%s", row.id, row.inquiry_type)
    return row


def list_inquiries(db: Session, status: str | None = None) -> List[Inquiry]:
    query = db.query(Inquiry)
    if status:
        query = query.filter(Inquiry.status == status)
    return query.order_by(Inquiry.submitted_at.desc(), Inquiry.id.desc()).all()


def get_inquiry(db: Session, inquiry_id: int) -> Inquiry:
    row = db.query(Inquiry).filter(Inquiry.id == inquiry_id).first()
    if not row:
        raise HTTPException(status_code=404, detail="문의를 찾을 수 없습니다.")
    return row


def update_inquiry(db: Session, inquiry_id: int, data: InquiryUpdate, current_user: AdminUser) -> Inquiry:
    row = get_inquiry(db, inquiry_id)
    if data.admin_notes is not None:
        row.admin_notes = data.admin_notes

    if data.status is not None and data.status != row.status:
        if data.status not in INQUIRY_STATUSES:
            raise HTTPException(
                status_code=400,
                detail=f"허용되지 않는 상태입니다. 허용 값: {', '.join(INQUIRY_STATUSES)}",
            )
        now = datetime.utcnow()
        # JSON 컬럼은 새 리스트를 대입해야 변경이 감지된다.
        row.status_history = list(row.status_history or []) + [
            {
                "status": data.status,
                "changed_by": current_user.id,
                "changed_at": now.isoformat(),
                "notes": data.status_change_notes or "",
            }
        ]
        row.status = data.status
        if data.status == "completed":
            row.responded_at = now
            row.responded_by = current_user.id

    db.commit()
    db.refresh(row)
    return row


def delete_inquiry(db: Session, inquiry_id: int, current_user: AdminUser) -> None:
    row = get_inquiry(db, inquiry_id)
    db.delete(row)
    db.commit()
    logger.info("inquiry deleted id=%s by=%s", inquiry_id, current_user.username)
