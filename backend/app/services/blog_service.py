"""Blog 게시글 서비스 구성 모듈입니다. 공용 리비전 서비스를 Blog 모델에 바인딩합니다."""

from sqlalchemy.orm import Session

from app.models.blog import Blog, BlogRevision
from app.services.record_store import RecordStore
from app.services.revision_service import RevisionService

LABEL = "Blog"
ENTRY_LABEL = "Blog Entry"


def build_blog_service(db: Session) -> RevisionService:
    return RevisionService(
        RecordStore(db, Blog),
        RecordStore(db, BlogRevision),
        parent_key="blog_id",
        label=LABEL,
    )
