"""Blog 도메인(게시글 + 본문 리비전)의 SQLAlchemy 모델 정의입니다."""

from sqlalchemy import Column, Integer, String, Text, DateTime, Boolean, ForeignKey, Index, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.database import Base


class Blog(Base):
    __tablename__ = "blog"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    uri = Column(String(255))
    content = Column(Text, default="")
    html = Column(Text, default="")
    active = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    revisions = relationship(
        "BlogRevision",
        back_populates="blog",
        cascade="all, delete-orphan",
        order_by="BlogRevision.id.desc()",
    )

    __table_args__ = (
        Index("idx_blog_title", "title"),
        Index("idx_blog_uri", "uri"),
        Index("idx_blog_active", "active"),
        Index("idx_blog_created_at", "created_at"),
        Index("idx_blog_updated_at", "updated_at"),
    )


class BlogRevision(Base):
    __tablename__ = "blog_revision"

    id = Column(Integer, primary_key=True, autoincrement=True)
    blog_id = Column(Integer, ForeignKey("blog.id", ondelete="CASCADE"), nullable=False)
    content = Column(Text, nullable=False, default="")
    html = Column(Text, nullable=False, default="")
    hash = Column(String(64), nullable=False)  # sha256(content + html)
    created_at = Column(DateTime, server_default=func.now())

    blog = relationship("Blog", back_populates="revisions")

    __table_args__ = (
        UniqueConstraint("blog_id", "hash", name="uq_blog_revision_blog_hash"),
        Index("idx_blog_revision_blog", "blog_id"),
    )
