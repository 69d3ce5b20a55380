"""리비전 관리 대상(Blog/Content) 공용 API 라우터 팩토리입니다. 요청을 검증하고 RevisionService로 위임합니다."""

from typing import Callable, List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.config import settings
from app.database import get_db
from app.middleware.auth_middleware import get_current_staff
from app.models.staff import Staff
from app.schemas.revision import (
    RemoveRequest,
    RemoveResult,
    RevisionedDetail,
    RevisionedOut,
    RevisionedPage,
    RevisionedRevert,
    RevisionedRevertResult,
    RevisionedSave,
    RevisionedSaveResult,
    RevisionOut,
)
from app.services.errors import NotFoundError
from app.services.revision_service import RevisionService
from app.utils.helpers import split_ids


def build_admin_router(
    *,
    prefix: str,
    tag: str,
    entry_label: str,
    build_service: Callable[[Session], RevisionService],
) -> APIRouter:
    router = APIRouter(prefix=prefix, tags=[tag])

    def get_service(db: Session = Depends(get_db)) -> RevisionService:
        return build_service(db)

    @router.get("", response_model=RevisionedPage)
    def list_entries(
        search: Optional[str] = None,
        start: int = Query(0, ge=0),
        length: int = Query(settings.DATATABLE_DEFAULT_LENGTH, ge=1, le=settings.DATATABLE_MAX_LENGTH),
        order_by: str = "id",
        direction: str = Query("desc", pattern="^(asc|desc)$"),
        service: RevisionService = Depends(get_service),
        current_staff: Staff = Depends(get_current_staff),
    ):
        return service.datatable(
            search=search,
            start=start,
            length=length,
            order_by=order_by,
            direction=direction,
        )

    @router.get("/{record_id}", response_model=RevisionedDetail)
    def get_entry(
        record_id: int,
        service: RevisionService = Depends(get_service),
        current_staff: Staff = Depends(get_current_staff),
    ):
        record = service.get(record_id)
        if not record:
            raise NotFoundError(f"{entry_label} Not Found")
        return record

    @router.get("/{record_id}/revisions", response_model=List[RevisionOut])
    def list_entry_revisions(
        record_id: int,
        service: RevisionService = Depends(get_service),
        current_staff: Staff = Depends(get_current_staff),
    ):
        if not service.get(record_id):
            raise NotFoundError(f"{entry_label} Not Found")
        return service.list_revisions(record_id)

    @router.post("/save", response_model=RevisionedSaveResult)
    def save_entry(
        data: RevisionedSave,
        service: RevisionService = Depends(get_service),
        current_staff: Staff = Depends(get_current_staff),
    ):
        fields = data.model_dump(exclude={"id"})
        result = service.save(data.id, fields)
        return {
            "message": f"{entry_label} {'created' if result.is_new else 'saved'}",
            "is_new": result.is_new,
            "is_new_revision": result.is_new_revision,
            "revision_id": result.revision.id,
            "record": result.record,
        }

    @router.post("/revert", response_model=RevisionedRevertResult)
    def revert_entry(
        data: RevisionedRevert,
        service: RevisionService = Depends(get_service),
        current_staff: Staff = Depends(get_current_staff),
    ):
        record = service.revert(data.id, data.revision_id)
        return {"status": "ok", "message": f"{service.label} Reverted", "record": record}

    @router.delete("", response_model=RemoveResult)
    def remove_entries(
        id: str = Query(""),
        service: RevisionService = Depends(get_service),
        current_staff: Staff = Depends(get_current_staff),
    ):
        removed = service.remove(split_ids(id))
        return {"message": f"{entry_label} removed", "removed": removed}

    @router.post("/remove", response_model=RemoveResult)
    def remove_entries_form(
        data: RemoveRequest,
        service: RevisionService = Depends(get_service),
        current_staff: Staff = Depends(get_current_staff),
    ):
        removed = service.remove(data.remove)
        return {"message": f"{entry_label} removed", "removed": removed}

    return router


def build_public_router(
    *,
    prefix: str,
    tag: str,
    entry_label: str,
    build_service: Callable[[Session], RevisionService],
) -> APIRouter:
    router = APIRouter(prefix=prefix, tags=[tag])

    @router.get("/{uri:path}", response_model=RevisionedOut)
    def get_published_entry(uri: str, db: Session = Depends(get_db)):
        record = build_service(db).get_by_uri(uri, active_only=True)
        if not record:
            raise NotFoundError(f"{entry_label} Not Found")
        return record

    return router
