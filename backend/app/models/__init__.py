"""SQLAlchemy 모델 패키지 초기화 모듈입니다."""

from app.models.staff import Staff
from app.models.blog import Blog, BlogRevision
from app.models.content import Content, ContentRevision

__all__ = [
    "Staff",
    "Blog", "BlogRevision",
    "Content", "ContentRevision",
]
