from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
from jose import JWTError, jwt
from app.database import get_db
from app.models.admin_user import AdminUser
from app.config import settings

security = HTTPBearer(auto_error=False)

ALGORITHM = "HS256"


def decode_token(token: str) -> dict:
    try:
        payload = jwt.decode(
            token,
            settings.SECRET_KEY,
            algorithms=[ALGORITHM],
            audience=settings.JWT_AUDIENCE,
            issuer=settings.JWT_ISSUER,
        )
        return payload
    except JWTError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )


def _extract_token(request: Request, credentials: HTTPAuthorizationCredentials | None) -> str | None:
    # Authorization 헤더 우선, 없으면 관리자 쿠키를 사용한다.
    if credentials is not None and credentials.credentials:
        return credentials.credentials
    return request.cookies.get(settings.COOKIE_NAME)


def _load_user(db: Session, payload: dict) -> AdminUser | None:
    user_id = payload.get("sub")
    if user_id is None:
        return None
    return db.query(AdminUser).filter(AdminUser.id == int(user_id), AdminUser.is_active == True).first()  # noqa: E712


def get_current_user(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    db: Session = Depends(get_db),
) -> AdminUser:
    token = _extract_token(request, credentials)
    if not token:
        raise HTTPException(status_code=401, detail="인증이 필요합니다.")
    payload = decode_token(token)
    if payload.get("sub") is None:
        raise HTTPException(status_code=401, detail="Invalid token payload")
    user = _load_user(db, payload)
    if not user:
        raise HTTPException(status_code=401, detail="User not found or inactive")
    return user


def require_roles(*roles: str):
    def checker(current_user: AdminUser = Depends(get_current_user)) -> AdminUser:
        if current_user.role not in roles:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Requires role: {', '.join(roles)}",
            )
        return current_user
    return checker


def get_optional_user(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    db: Session = Depends(get_db),
):
    token = _extract_token(request, credentials)
    if not token:
        return None
    try:
        payload = decode_token(token)
    except HTTPException:
        return None
    return _load_user(db, payload)
