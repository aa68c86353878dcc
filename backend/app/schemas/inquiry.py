"""기업 문의 요청/응답 계약을 위한 Pydantic 스키마입니다."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel


class InquiryCreate(BaseModel):
    inquiry_type: str = ""
    name: str = ""
    company_name: str = ""
    phone_number: str = ""
    email: str = ""
    message: str = ""
    attached_files: List[str] = []
    privacy_consented: bool = False


class InquiryUpdate(BaseModel):
    status: Optional[str] = None
    admin_notes: Optional[str] = None
    status_change_notes: Optional[str] = None


class StatusHistoryOut(BaseModel):
    status: str
    changed_by: int
    changed_at: datetime
    notes: Optional[str] = None


class InquiryOut(BaseModel):
    id: int
    inquiry_type: str
    name: str
    company_name: str
    phone_number: str
    email: str
    message: str
    attached_files: List[str] = []
    privacy_consented: bool
    submitted_at: datetime
    status: str
    admin_notes: Optional[str] = None
    responded_at: Optional[datetime] = None
    responded_by: Optional[int] = None
    status_history: List[StatusHistoryOut] = []

    model_config = {"from_attributes": True}
