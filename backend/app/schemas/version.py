"""콘텐츠 변경 이력 응답 계약을 위한 Pydantic 스키마입니다."""

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel


class ContentVersionOut(BaseModel):
    version_id: int
    entity_type: str
    entity_id: int
    slug: str
    version_no: int
    change_type: str
    snapshot: Dict[str, Any]
    changed_by: Optional[int] = None
    created_at: datetime

    model_config = {"from_attributes": True}
