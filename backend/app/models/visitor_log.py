"""방문자 로그 모델 정의입니다."""

from sqlalchemy import Column, DateTime, Index, Integer, String
from sqlalchemy.sql import func

from app.database import Base


class VisitorLog(Base):
    __tablename__ = "visitor_log"

    id = Column(Integer, primary_key=True, autoincrement=True)
    page = Column(String(500), nullable=False, index=True)
    timestamp = Column(DateTime, server_default=func.now(), nullable=False)
    referrer = Column(String(1000))
    user_agent = Column(String(500))
    ip = Column(String(64))
    session_id = Column(String(100), nullable=False, index=True)

    __table_args__ = (
        Index("idx_visitor_log_timestamp_page", "timestamp", "page"),
    )
