"""Content 페이지와 본문 리비전을 저장하는 SQLAlchemy 모델 정의입니다."""

from sqlalchemy import Column, Integer, String, Text, DateTime, Boolean, ForeignKey, Index, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.database import Base


class Content(Base):
    __tablename__ = "content"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    uri = Column(String(255))
    content = Column(Text, default="")
    html = Column(Text, default="")
    active = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    revisions = relationship(
        "ContentRevision",
        back_populates="page",
        cascade="all, delete-orphan",
        order_by="ContentRevision.id.desc()",
    )

    __table_args__ = (
        Index("idx_content_title", "title"),
        Index("idx_content_uri", "uri"),
        Index("idx_content_active", "active"),
        Index("idx_content_created_at", "created_at"),
        Index("idx_content_updated_at", "updated_at"),
    )


class ContentRevision(Base):
    __tablename__ = "content_revision"

    id = Column(Integer, primary_key=True, autoincrement=True)
    content_id = Column(Integer, ForeignKey("content.id", ondelete="CASCADE"), nullable=False)
    content = Column(Text, nullable=False, default="")
    html = Column(Text, nullable=False, default="")
    hash = Column(String(64), nullable=False)
    created_at = Column(DateTime, server_default=func.now())

    page = relationship("Content", back_populates="revisions")

    __table_args__ = (
        UniqueConstraint("content_id", "hash", name="uq_content_revision_content_hash"),
        Index("idx_content_revision_content", "content_id"),
    )
