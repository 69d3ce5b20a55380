"""Staff/인증 요청/응답 계약을 위한 Pydantic 스키마입니다."""

from pydantic import BaseModel, EmailStr
from typing import Any, Optional
from datetime import datetime


class StaffBase(BaseModel):
    email: EmailStr
    name: Optional[str] = None
    active: bool = True


class StaffSave(BaseModel):
    id: Optional[int] = None
    email: Optional[EmailStr] = None
    name: Optional[str] = None
    password: Optional[str] = None
    active: Optional[bool] = None


class StaffOut(StaffBase):
    id: int
    login_count: int
    login_fail_count: int
    date_seen: Optional[datetime] = None
    date_fail: Optional[datetime] = None
    date_password: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class StaffSaveResult(BaseModel):
    message: str
    is_new: bool
    staff: StaffOut


class StaffRemoveRequest(BaseModel):
    remove: Any = None  # 단일 ID 또는 ID 목록


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    staff: StaffOut
