"""관리자 계정 관리 서비스 레이어입니다."""

import logging
from typing import List

from fastapi import HTTPException
from sqlalchemy.orm import Session

from app.models.admin_user import AdminUser
from app.models.content_version import ContentVersion
from app.models.diaper_product import DiaperProduct
from app.models.inquiry import Inquiry
from app.models.press_release import PressRelease
from app.models.sonaverse_story import SonaverseStory
from app.schemas.user import AdminUserCreate, AdminUserUpdate
from app.services.auth_service import hash_password

logger = logging.getLogger(__name__)

ADMIN_ROLES = ("admin", "editor")

# admin_users.id를 참조하는 (모델, 컬럼) 목록
USER_REFERENCES = (
    (PressRelease, "updated_by"),
    (SonaverseStory, "author_id"),
    (SonaverseStory, "updated_by"),
    (DiaperProduct, "updated_by"),
    (Inquiry, "responded_by"),
    (ContentVersion, "changed_by"),
)


def _validate_role(role: str) -> str:
    if role not in ADMIN_ROLES:
        raise HTTPException(status_code=400, detail=f"허용되지 않는 역할입니다. 허용 값: {', '.join(ADMIN_ROLES)}")
    return role


def list_users(db: Session, include_inactive: bool = True) -> List[AdminUser]:
    query = db.query(AdminUser)
    if not include_inactive:
        query = query.filter(AdminUser.is_active == True)  # noqa: E712
    return query.order_by(AdminUser.created_at.desc(), AdminUser.id.desc()).all()


def get_user(db: Session, user_id: int) -> AdminUser:
    user = db.query(AdminUser).filter(AdminUser.id == user_id).first()
    if not user:
        raise HTTPException(status_code=404, detail="사용자를 찾을 수 없습니다.")
    return user


def create_user(db: Session, data: AdminUserCreate) -> AdminUser:
    if db.query(AdminUser).filter(AdminUser.username == data.username).first():
        raise HTTPException(status_code=400, detail="이미 존재하는 사용자명입니다.")
    if db.query(AdminUser).filter(AdminUser.email == data.email).first():
        raise HTTPException(status_code=400, detail="이미 존재하는 이메일입니다.")
    user = AdminUser(
        username=data.username,
        email=data.email,
        role=_validate_role(data.role),
        password_hash=hash_password(data.password),
        is_active=True,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def update_user(db: Session, user_id: int, data: AdminUserUpdate) -> AdminUser:
    user = get_user(db, user_id)
    if data.email is not None and data.email != user.email:
        if db.query(AdminUser).filter(AdminUser.email == data.email, AdminUser.id != user_id).first():
            raise HTTPException(status_code=400, detail="이미 존재하는 이메일입니다.")
        user.email = data.email
    if data.role is not None:
        user.role = _validate_role(data.role)
    if data.password:
        user.password_hash = hash_password(data.password)
    if data.is_active is not None:
        user.is_active = data.is_active
    db.commit()
    db.refresh(user)
    return user


def delete_user(db: Session, user_id: int, current_user: AdminUser) -> None:
    if user_id == current_user.id:
        raise HTTPException(status_code=400, detail="본인 계정은 삭제할 수 없습니다.")
    user = get_user(db, user_id)
    username = user.username
    # 작성/수정 기록은 남기고 계정 참조만 비운다. updated_at은 그대로 둔다.
    for model, column_name in USER_REFERENCES:
        values = {column_name: None}
        if hasattr(model, "updated_at"):
            values["updated_at"] = model.updated_at
        db.query(model).filter(getattr(model, column_name) == user_id).update(values, synchronize_session=False)
    db.delete(user)
    db.commit()
    logger.info("admin user deleted id=%s username=%s by=%s", user_id, username, current_user.id)
