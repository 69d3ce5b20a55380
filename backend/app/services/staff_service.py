"""Staff Service 도메인 서비스 레이어입니다. 관리자 계정 생성/수정/삭제와 비밀번호 해싱을 담당합니다."""

import logging
import re
from datetime import datetime
from typing import Any, Dict, List, Tuple

import bcrypt
from sqlalchemy.orm import Session

from app.config import settings
from app.models.staff import Staff
from app.services.errors import ConflictError, NotFoundError, ValidationError
from app.services.record_store import RecordStore
from app.utils.helpers import positive_ids

logger = logging.getLogger(__name__)

BCRYPT_HASH_RE = re.compile(r"^\$2[abxy]\$\d{2}\$")
STAFF_NAME_RE = re.compile(r"^[a-z0-9\s]+$", re.IGNORECASE)


def hash_password(plain: str) -> str:
    # 이미 bcrypt 해시인 값은 다시 암호화하지 않는다.
    if BCRYPT_HASH_RE.match(plain):
        return plain
    salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(plain.encode("utf-8"), salt).decode("utf-8")


def verify_password(plain: str, hashed: str) -> bool:
    try:
        return bcrypt.checkpw(plain.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        return False


def _store(db: Session) -> RecordStore:
    return RecordStore(db, Staff)


def list_staff(db: Session) -> List[Staff]:
    return _store(db).find_all(order=[("id", "asc")])


def get_staff(db: Session, staff_id: int) -> Staff:
    staff = _store(db).find_by_id(staff_id)
    if not staff:
        raise NotFoundError("Staff Not Found")
    return staff


def save_staff(db: Session, staff_id: int | None, data: Dict[str, Any]) -> Tuple[Staff, bool]:
    store = _store(db)
    staff = store.find_by_id(staff_id) if staff_id else None
    is_new = staff is None
    if is_new:
        if not data.get("email"):
            raise ValidationError("Staff email is required")
        if not data.get("password"):
            raise ValidationError("Staff password is required")
        staff = Staff(active=True, login_count=0, login_fail_count=0)

    name = data.get("name")
    if name is not None and name != "" and not STAFF_NAME_RE.match(name):
        raise ValidationError("Staff name may only contain letters, numbers and spaces")

    if data.get("email"):
        staff.email = str(data["email"]).lower()
    if name:
        staff.name = name
    if data.get("active") is not None:
        staff.active = bool(data["active"])
    if data.get("password"):
        staff.password = hash_password(data["password"])
        staff.date_password = datetime.utcnow()

    try:
        staff = store.save(staff)
    except ConflictError as exc:
        raise ValidationError("Staff email already exists") from exc
    logger.info("[staff] %s staff #%s", "created" if is_new else "saved", staff.id)
    return staff, is_new


def remove_staff(db: Session, ids) -> int:
    store = _store(db)
    removed = 0
    for staff_id in positive_ids(ids):
        if store.destroy(staff_id):
            removed += 1
    if removed:
        logger.info("[staff] removed %d staff account(s)", removed)
    return removed
