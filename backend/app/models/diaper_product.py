"""보듬 기저귀 제품 카탈로그 모델 정의입니다."""

from sqlalchemy import JSON, Boolean, Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.sql import func

from app.database import Base

PRODUCT_CATEGORIES = ("팬티형", "속기저귀", "깔개매트")


class DiaperProduct(Base):
    __tablename__ = "diaper_product"

    id = Column(Integer, primary_key=True, autoincrement=True)
    slug = Column(String(200), unique=True, nullable=False)
    name = Column(JSON, nullable=False)  # {"ko": ..., "en": ...}
    description = Column(JSON, nullable=False)
    content = Column(JSON, nullable=True)
    category = Column(String(20), nullable=False)
    thumbnail_image = Column(String(500), nullable=False)
    product_images = Column(JSON, nullable=False, default=list)
    detail_images = Column(JSON, nullable=False, default=list)
    tags = Column(JSON, nullable=False, default=list)
    is_active = Column(Boolean, nullable=False, default=True)
    is_main = Column(Boolean, nullable=False, default=False)
    updated_by = Column(Integer, ForeignKey("admin_users.id"), nullable=True)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    # 삭제된 id는 재사용하지 않는다 (변경 이력 키).
    __table_args__ = {"sqlite_autoincrement": True}
