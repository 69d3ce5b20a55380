"""Auth Service 도메인 서비스 레이어입니다. 관리자 로그인 검증과 토큰 발급을 담당합니다."""

import logging
from datetime import datetime, timedelta

from jose import jwt
from sqlalchemy.orm import Session
from fastapi import HTTPException, status

from app.config import settings
from app.models.staff import Staff
from app.services.staff_service import verify_password

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"


def create_access_token(staff_id: int) -> str:
    expire = datetime.utcnow() + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    payload = {"sub": str(staff_id), "exp": expire}
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=ALGORITHM)


def authenticate(db: Session, email: str, password: str) -> Staff:
    staff = db.query(Staff).filter(Staff.email == email.lower()).first()
    if staff and staff.active and verify_password(password, staff.password):
        staff.login_count = (staff.login_count or 0) + 1
        staff.date_seen = datetime.utcnow()
        db.commit()
        db.refresh(staff)
        return staff

    if staff:
        staff.login_fail_count = (staff.login_fail_count or 0) + 1
        staff.date_fail = datetime.utcnow()
        db.commit()
    logger.warning("[auth] failed login for %s", email)
    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid login",
    )
