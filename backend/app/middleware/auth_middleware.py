"""Bearer 토큰을 검증해 현재 로그인한 관리자(Staff)를 주입하는 인증 의존성입니다."""

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
from jose import JWTError, jwt
from app.database import get_db
from app.models.staff import Staff
from app.config import settings

security = HTTPBearer()

ALGORITHM = "HS256"


def decode_token(token: str) -> dict:
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[ALGORITHM])
        return payload
    except JWTError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )


def get_current_staff(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    db: Session = Depends(get_db),
) -> Staff:
    payload = decode_token(credentials.credentials)
    staff_id = payload.get("sub")
    if staff_id is None:
        raise HTTPException(status_code=401, detail="Invalid token payload")

    staff = db.query(Staff).filter(Staff.id == int(staff_id), Staff.active == True).first()  # noqa: E712
    if not staff:
        raise HTTPException(status_code=401, detail="Staff not found or inactive")
    return staff
