"""SQLAlchemy 세션 위에서 단일 모델의 조회/생성/저장/삭제를 담당하는 저장소 어댑터입니다."""

import logging
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from sqlalchemy import inspect
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.services.errors import ConflictError, StorageError, ValidationError

logger = logging.getLogger(__name__)

OrderSpec = Sequence[Tuple[str, str]]


class RecordStore:
    """Persistence collaborator for one mapped model.

    Every write commits immediately. Database failures are rolled back and
    re-raised as :class:`StorageError` (or :class:`ConflictError` for
    uniqueness violations) so the service layer never sees driver errors.
    """

    def __init__(self, db: Session, model):
        self.db = db
        self.model = model
        self.columns = {c.key for c in inspect(model).column_attrs}

    def _column(self, name: str):
        if name not in self.columns:
            raise ValidationError(f"Unknown field '{name}'")
        return getattr(self.model, name)

    def _query(self, where: Optional[Dict[str, Any]] = None, criteria: Iterable = ()):
        q = self.db.query(self.model)
        for key, value in (where or {}).items():
            q = q.filter(self._column(key) == value)
        for expr in criteria:
            q = q.filter(expr)
        return q

    def find_by_id(self, record_id, *options):
        if record_id is None:
            return None
        q = self.db.query(self.model)
        if options:
            q = q.options(*options)
        return q.filter(self.model.id == record_id).first()

    def find_one(self, **where):
        return self._query(where).first()

    def find_all(
        self,
        where: Optional[Dict[str, Any]] = None,
        order: Optional[OrderSpec] = None,
        offset: Optional[int] = None,
        limit: Optional[int] = None,
        criteria: Iterable = (),
    ) -> List[Any]:
        q = self._query(where, criteria)
        for name, direction in order or ():
            column = self._column(name)
            q = q.order_by(column.desc() if str(direction).lower() == "desc" else column.asc())
        if offset:
            q = q.offset(offset)
        if limit is not None:
            q = q.limit(limit)
        return q.all()

    def count(self, where: Optional[Dict[str, Any]] = None, criteria: Iterable = ()) -> int:
        return self._query(where, criteria).count()

    def create(self, **fields):
        record = self.model(**fields)
        return self.save(record)

    def save(self, record):
        self.db.add(record)
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            logger.warning("[store] %s integrity error: %s", self.model.__name__, exc.orig)
            raise ConflictError(f"{self.model.__name__} violates an integrity constraint") from exc
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.warning("[store] %s save failed: %s", self.model.__name__, exc)
            raise StorageError(f"Failed to save {self.model.__name__}") from exc
        self.db.refresh(record)
        return record

    def destroy(self, record_id) -> bool:
        record = self.find_by_id(record_id)
        if record is None:
            return False
        self.db.delete(record)
        try:
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.warning("[store] %s delete failed: %s", self.model.__name__, exc)
            raise StorageError(f"Failed to remove {self.model.__name__}") from exc
        return True
