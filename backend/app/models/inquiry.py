"""기업 문의 폼 모델 정의입니다."""

from sqlalchemy import JSON, Boolean, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.sql import func

from app.database import Base

INQUIRY_STATUSES = ("new", "inProgress", "completed")


class Inquiry(Base):
    __tablename__ = "inquiry"

    id = Column(Integer, primary_key=True, autoincrement=True)
    inquiry_type = Column(String(50), nullable=False)
    name = Column(String(100), nullable=False)
    company_name = Column(String(200), nullable=False)
    phone_number = Column(String(50), nullable=False)
    email = Column(String(200), nullable=False)
    message = Column(Text, nullable=False)
    attached_files = Column(JSON, nullable=False, default=list)
    privacy_consented = Column(Boolean, nullable=False, default=False)
    submitted_at = Column(DateTime, server_default=func.now(), nullable=False)
    status = Column(String(20), nullable=False, default="new")
    admin_notes = Column(Text)
    responded_at = Column(DateTime)
    responded_by = Column(Integer, ForeignKey("admin_users.id"), nullable=True)
    status_history = Column(JSON, nullable=False, default=list)  # append-only
