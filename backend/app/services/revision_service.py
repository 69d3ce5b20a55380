"""콘텐츠 해시 기반 리비전 저장/복원 공용 서비스입니다.

Blog, Content 처럼 "라이브 레코드 + 본문 리비전" 구조를 가진 모든 타입이
이 서비스를 공유한다. 타입별 차이는 생성자에 넘기는 저장소와 FK 이름뿐이다.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple

from sqlalchemy import or_
from sqlalchemy.orm import selectinload

from app.services.errors import ConflictError, NotFoundError, ValidationError
from app.services.record_store import OrderSpec, RecordStore
from app.utils.hashing import fingerprint
from app.utils.helpers import positive_ids
from app.utils.locks import KeyedLock

logger = logging.getLogger(__name__)

# 같은 부모에 대한 save/revert는 프로세스 내에서 순서대로 처리한다.
_parent_locks = KeyedLock()


@dataclass
class SaveResult:
    record: Any
    revision: Any
    is_new: bool
    is_new_revision: bool


class RevisionService:
    """Save and revert the live body of a record through deduplicated revisions.

    :param parents: store bound to the live record model
        (columns ``id, title, uri, content, html, active``).
    :param revisions: store bound to the revision model
        (columns ``id, <parent_key>, content, html, hash``).
    :param parent_key: name of the revision column referencing the parent.
    :param label: human readable type name used in messages ("Blog").
    :param hasher: ``(content, html) -> str`` fingerprint function.
    """

    def __init__(
        self,
        parents: RecordStore,
        revisions: RecordStore,
        *,
        parent_key: str,
        label: str,
        hasher: Callable[[str, str], str] = fingerprint,
    ):
        self.parents = parents
        self.revisions = revisions
        self.parent_key = parent_key
        self.label = label
        self.hasher = hasher

    def _lock_key(self, record_id: int) -> Tuple[str, int]:
        return (self.parents.model.__tablename__, int(record_id))

    # ------------------------------------------------------------------ reads

    def get(self, record_id):
        return self.parents.find_by_id(record_id, selectinload(self.parents.model.revisions))

    def get_by_uri(self, uri: str, active_only: bool = False):
        where: Dict[str, Any] = {"uri": uri}
        if active_only:
            where["active"] = True
        return self.parents.find_one(**where)

    def get_revision(self, revision_id):
        return self.revisions.find_by_id(revision_id)

    def list_revisions(self, record_id) -> List[Any]:
        return self.revisions.find_all(where={self.parent_key: record_id}, order=[("id", "desc")])

    def list(self, where: Optional[Dict[str, Any]] = None, order: Optional[OrderSpec] = None) -> List[Any]:
        return self.parents.find_all(where=where, order=order)

    def datatable(
        self,
        search: Optional[str] = None,
        start: int = 0,
        length: int = 10,
        order_by: str = "id",
        direction: str = "desc",
    ) -> Dict[str, Any]:
        model = self.parents.model
        criteria = []
        if search:
            pattern = f"%{search.strip()}%"
            criteria.append(or_(model.title.ilike(pattern), model.uri.ilike(pattern)))
        return {
            "total": self.parents.count(),
            "filtered": self.parents.count(criteria=criteria),
            "rows": self.parents.find_all(
                order=[(order_by, direction)],
                offset=start,
                limit=length,
                criteria=criteria,
            ),
        }

    # ----------------------------------------------------------------- writes

    def _apply_fields(self, record, fields: Dict[str, Any]) -> None:
        if fields.get("title"):
            record.title = fields["title"]
        if fields.get("uri"):
            record.uri = fields["uri"]
        # active가 빠진 요청은 비공개로 저장한다(체크박스 폼과 동일한 의미).
        active = fields.get("active")
        record.active = False if active is None else bool(active)

    def _resolve_revision(self, record_id: int, content: str, html: str, digest: str):
        lookup = {self.parent_key: record_id, "hash": digest}
        existing = self.revisions.find_one(**lookup)
        if existing is not None:
            return existing, False
        try:
            created = self.revisions.create(content=content, html=html, **lookup)
        except ConflictError:
            # 다른 프로세스가 같은 해시를 먼저 저장했다면 그 리비전을 재사용한다.
            existing = self.revisions.find_one(**lookup)
            if existing is None:
                raise
            logger.warning(
                "[revision] %s #%s hash %s inserted concurrently, reusing revision #%s",
                self.label, record_id, digest[:12], existing.id,
            )
            return existing, False
        return created, True

    def save(self, record_id, fields: Optional[Dict[str, Any]] = None) -> SaveResult:
        fields = dict(fields or {})
        record = self.parents.find_by_id(record_id) if record_id else None
        is_new = record is None
        if is_new and not fields.get("title"):
            raise ValidationError(f"{self.label} Title is required")

        content = fields.get("content") or ""
        html = fields.get("html") or ""
        digest = self.hasher(content, html)

        if is_new:
            # 리비전이 부모 ID를 참조하므로 새 레코드를 먼저 저장해 ID를 확보한다.
            record = self.parents.model(content="", html="", active=False)
            self._apply_fields(record, fields)
            record = self.parents.save(record)
            logger.info("[revision] %s #%s created", self.label, record.id)

        with _parent_locks.hold(self._lock_key(record.id)):
            revision, is_new_revision = self._resolve_revision(record.id, content, html, digest)
            if not is_new:
                self._apply_fields(record, fields)
            record.content = content
            record.html = html
            record = self.parents.save(record)

        if is_new_revision:
            logger.info("[revision] %s #%s new revision #%s", self.label, record.id, revision.id)
        return SaveResult(
            record=record,
            revision=revision,
            is_new=is_new,
            is_new_revision=is_new_revision,
        )

    def revert(self, record_id, revision_id):
        revision = self.revisions.find_by_id(revision_id)
        if revision is None:
            raise NotFoundError("Revision Not Found")
        record = self.parents.find_by_id(record_id)
        if record is None:
            raise NotFoundError(f"{self.label} Not Found")
        if getattr(revision, self.parent_key) != record.id:
            raise NotFoundError("Revision Not Found")

        with _parent_locks.hold(self._lock_key(record.id)):
            record.content = revision.content
            record.html = revision.html
            record = self.parents.save(record)
        logger.info("[revision] %s #%s reverted to revision #%s", self.label, record.id, revision.id)
        return record

    def remove(self, ids) -> int:
        removed = 0
        for record_id in positive_ids(ids):
            if self.parents.destroy(record_id):
                removed += 1
        if removed:
            logger.info("[revision] %s removed %d record(s)", self.label, removed)
        return removed
