"""Blog 기능 API 라우터입니다. 관리자용 CRUD/리비전 API와 공개 조회 API를 등록합니다."""

from app.routers.revisioned import build_admin_router, build_public_router
from app.services.blog_service import ENTRY_LABEL, build_blog_service

router = build_admin_router(
    prefix="/api/blog",
    tag="blog",
    entry_label=ENTRY_LABEL,
    build_service=build_blog_service,
)

public_router = build_public_router(
    prefix="/api/public/blog",
    tag="public",
    entry_label=ENTRY_LABEL,
    build_service=build_blog_service,
)
