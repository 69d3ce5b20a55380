"""Content 기능 API 라우터입니다. 관리자용 CRUD/리비전 API와 공개 조회 API를 등록합니다."""

from app.routers.revisioned import build_admin_router, build_public_router
from app.services.content_service import ENTRY_LABEL, build_content_service

router = build_admin_router(
    prefix="/api/content",
    tag="content",
    entry_label=ENTRY_LABEL,
    build_service=build_content_service,
)

public_router = build_public_router(
    prefix="/api/public/content",
    tag="public",
    entry_label=ENTRY_LABEL,
    build_service=build_content_service,
)
