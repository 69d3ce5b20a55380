"""Staff 관리 API 라우터입니다. 요청을 검증하고 staff_service로 비즈니스 로직을 위임합니다."""

from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.database import get_db
from app.middleware.auth_middleware import get_current_staff
from app.models.staff import Staff
from app.schemas.revision import RemoveResult
from app.schemas.staff import StaffOut, StaffRemoveRequest, StaffSave, StaffSaveResult
from app.services import staff_service
from app.utils.helpers import split_ids

router = APIRouter(prefix="/api/staff", tags=["staff"])


@router.get("", response_model=List[StaffOut])
def list_staff(db: Session = Depends(get_db), current_staff: Staff = Depends(get_current_staff)):
    return staff_service.list_staff(db)


@router.get("/{staff_id}", response_model=StaffOut)
def get_staff(staff_id: int, db: Session = Depends(get_db), current_staff: Staff = Depends(get_current_staff)):
    return staff_service.get_staff(db, staff_id)


@router.post("/save", response_model=StaffSaveResult)
def save_staff(
    data: StaffSave,
    db: Session = Depends(get_db),
    current_staff: Staff = Depends(get_current_staff),
):
    staff, is_new = staff_service.save_staff(db, data.id, data.model_dump(exclude={"id"}))
    return {
        "message": f"Staff member {'created' if is_new else 'saved'}",
        "is_new": is_new,
        "staff": staff,
    }


@router.delete("", response_model=RemoveResult)
def remove_staff(
    id: str = Query(""),
    db: Session = Depends(get_db),
    current_staff: Staff = Depends(get_current_staff),
):
    removed = staff_service.remove_staff(db, split_ids(id))
    return {"message": "Staff member(s) removed", "removed": removed}


@router.post("/remove", response_model=RemoveResult)
def remove_staff_form(
    data: StaffRemoveRequest,
    db: Session = Depends(get_db),
    current_staff: Staff = Depends(get_current_staff),
):
    removed = staff_service.remove_staff(db, data.remove)
    return {"message": "Staff member(s) removed", "removed": removed}
