"""Content 페이지 서비스 구성 모듈입니다. 공용 리비전 서비스를 Content 모델에 바인딩합니다."""

from sqlalchemy.orm import Session

from app.models.content import Content, ContentRevision
from app.services.record_store import RecordStore
from app.services.revision_service import RevisionService

LABEL = "Content"
ENTRY_LABEL = "Content Entry"


def build_content_service(db: Session) -> RevisionService:
    return RevisionService(
        RecordStore(db, Content),
        RecordStore(db, ContentRevision),
        parent_key="content_id",
        label=LABEL,
    )
