"""Auth 기능 API 라우터입니다. 요청을 검증하고 서비스 레이어로 비즈니스 로직을 위임합니다."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.database import get_db
from app.schemas.staff import LoginRequest, TokenResponse, StaffOut
from app.services.auth_service import authenticate, create_access_token
from app.middleware.auth_middleware import get_current_staff
from app.models.staff import Staff

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/login", response_model=TokenResponse)
def login(request: LoginRequest, db: Session = Depends(get_db)):
    staff = authenticate(db, request.email, request.password)
    token = create_access_token(staff.id)
    return TokenResponse(access_token=token, staff=StaffOut.model_validate(staff))


@router.post("/logout")
def logout(current_staff: Staff = Depends(get_current_staff)):
    return {"message": "Logged out"}


@router.get("/me", response_model=StaffOut)
def me(current_staff: Staff = Depends(get_current_staff)):
    return current_staff
