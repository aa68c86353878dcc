"""검색엔진 유입 키워드 집계 모델 정의입니다."""

from sqlalchemy import Column, DateTime, Index, Integer, String, UniqueConstraint
from sqlalchemy.sql import func

from app.database import Base


class ReferralKeyword(Base):
    __tablename__ = "referral_keyword"

    id = Column(Integer, primary_key=True, autoincrement=True)
    keyword = Column(String(100), nullable=False, index=True)
    search_engine = Column(String(20), nullable=False, index=True)  # naver/google/daum/bing/yahoo/zum
    referrer_url = Column(String(1000), nullable=False)  # 최초 유입 URL
    count = Column(Integer, nullable=False, default=1)
    last_used = Column(DateTime, nullable=False, server_default=func.now())
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    __table_args__ = (
        UniqueConstraint("keyword", "search_engine", name="uq_referral_keyword_engine"),
        Index("idx_referral_keyword_last_used", "last_used", "count"),
    )
