"""언론보도(press) 컬렉션 모델 정의입니다."""

from sqlalchemy import JSON, Boolean, Column, DateTime, ForeignKey, Index, Integer, String
from sqlalchemy.sql import func

from app.database import Base


class PressRelease(Base):
    __tablename__ = "press_release"

    id = Column(Integer, primary_key=True, autoincrement=True)
    slug = Column(String(200), unique=True, nullable=False)
    press_name = Column(JSON, nullable=False)  # {"ko": ..., "en": ...}
    thumbnail = Column(String(500))
    external_link = Column(String(500))
    content = Column(JSON, nullable=False)  # {"ko": LocalizedBody, "en": LocalizedBody}
    tags = Column(JSON, nullable=False, default=list)
    is_active = Column(Boolean, nullable=False, default=True)
    updated_by = Column(Integer, ForeignKey("admin_users.id"), nullable=True)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    __table_args__ = (
        Index("idx_press_active_created", "is_active", "created_at"),
        {"sqlite_autoincrement": True},
    )
