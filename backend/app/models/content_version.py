"""언론보도/스토리/제품의 변경 스냅샷을 저장하는 SQLAlchemy 모델 정의입니다."""

from sqlalchemy import JSON, Column, DateTime, ForeignKey, Index, Integer, String
from sqlalchemy.sql import func

from app.database import Base


class ContentVersion(Base):
    __tablename__ = "content_version"

    version_id = Column(Integer, primary_key=True, autoincrement=True)
    entity_type = Column(String(30), nullable=False)  # press/sonaverseStory/product
    entity_id = Column(Integer, nullable=False)
    slug = Column(String(200), nullable=False)  # 기록 당시 슬러그, 삭제 후 조회용
    version_no = Column(Integer, nullable=False)
    change_type = Column(String(20), nullable=False)  # create/update/delete
    snapshot = Column(JSON, nullable=False)
    changed_by = Column(Integer, ForeignKey("admin_users.id"), nullable=True)
    created_at = Column(DateTime, server_default=func.now())

    __table_args__ = (
        Index("idx_content_version_entity", "entity_type", "entity_id", "version_no"),
        Index("idx_content_version_slug", "entity_type", "slug"),
    )
