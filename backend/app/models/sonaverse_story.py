"""소나버스 스토리(블로그 + 브랜드 스토리) 컬렉션 모델 정의입니다."""

from sqlalchemy import JSON, Boolean, Column, DateTime, ForeignKey, Index, Integer, String
from sqlalchemy.sql import func

from app.database import Base


class SonaverseStory(Base):
    __tablename__ = "sonaverse_story"

    id = Column(Integer, primary_key=True, autoincrement=True)
    slug = Column(String(200), unique=True, nullable=False)
    author_id = Column(Integer, ForeignKey("admin_users.id"), nullable=True)
    youtube_url = Column(String(500))
    content = Column(JSON, nullable=False)
    tags = Column(JSON, nullable=False, default=list)
    is_published = Column(Boolean, nullable=False, default=False)
    is_main = Column(Boolean, nullable=False, default=False)  # 컬렉션 내 대표 게시물은 1건
    updated_by = Column(Integer, ForeignKey("admin_users.id"), nullable=True)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    __table_args__ = (
        Index("idx_story_published_created", "is_published", "created_at"),
        {"sqlite_autoincrement": True},
    )
