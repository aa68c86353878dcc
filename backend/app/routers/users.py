"""관리자 계정 API 라우터입니다. 요청을 검증하고 서비스 레이어로 비즈니스 로직을 위임합니다."""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from typing import List

from app.database import get_db
from app.middleware.auth_middleware import require_roles
from app.models.admin_user import AdminUser
from app.schemas.user import AdminUserCreate, AdminUserOut, AdminUserUpdate
from app.services import user_service

router = APIRouter(prefix="/api/admin/users", tags=["users"])


@router.get("", response_model=List[AdminUserOut])
def list_users(
    include_inactive: bool = True,
    db: Session = Depends(get_db),
    _current_user: AdminUser = Depends(require_roles("admin")),
):
    return user_service.list_users(db, include_inactive=include_inactive)


@router.post("", response_model=AdminUserOut)
def create_user(
    data: AdminUserCreate,
    db: Session = Depends(get_db),
    _current_user: AdminUser = Depends(require_roles("admin")),
):
    return user_service.create_user(db, data)


@router.put("/{user_id}", response_model=AdminUserOut)
def update_user(
    user_id: int,
    data: AdminUserUpdate,
    db: Session = Depends(get_db),
    _current_user: AdminUser = Depends(require_roles("admin")),
):
    return user_service.update_user(db, user_id, data)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(
    user_id: int,
    db: Session = Depends(get_db),
    current_user: AdminUser = Depends(require_roles("admin")),
):
    user_service.delete_user(db, user_id, current_user)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
