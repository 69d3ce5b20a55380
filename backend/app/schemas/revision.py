"""리비전 관리 대상(Blog/Content) 공용 요청/응답 계약을 위한 Pydantic 스키마입니다."""

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel


class RevisionedSave(BaseModel):
    id: Optional[int] = None
    title: Optional[str] = None
    uri: Optional[str] = None
    active: Optional[bool] = None
    content: Optional[str] = None
    html: Optional[str] = None


class RevisionedRevert(BaseModel):
    id: int
    revision_id: int


class RemoveRequest(BaseModel):
    remove: Any = None  # 단일 ID 또는 ID 목록


class RemoveResult(BaseModel):
    message: str
    removed: int


class RevisionOut(BaseModel):
    id: int
    hash: str
    content: str
    html: str
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class RevisionedOut(BaseModel):
    id: int
    title: str
    uri: Optional[str] = None
    content: Optional[str] = ""
    html: Optional[str] = ""
    active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class RevisionedDetail(RevisionedOut):
    revisions: List[RevisionOut] = []


class RevisionedSaveResult(BaseModel):
    message: str
    is_new: bool
    is_new_revision: bool
    revision_id: int
    record: RevisionedOut


class RevisionedRevertResult(BaseModel):
    status: str = "ok"
    message: str
    record: RevisionedOut


class RevisionedPage(BaseModel):
    total: int
    filtered: int
    rows: List[RevisionedOut]
