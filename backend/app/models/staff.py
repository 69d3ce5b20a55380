"""관리자(Staff) 계정의 SQLAlchemy 모델 정의입니다."""

from sqlalchemy import Column, Integer, String, Boolean, DateTime, Index
from sqlalchemy.sql import func
from app.database import Base


class Staff(Base):
    __tablename__ = "staff"

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(191), unique=True, nullable=False)
    password = Column(String(255), nullable=False)  # bcrypt hash
    name = Column(String(255), default="Kado Admin")
    active = Column(Boolean, nullable=False, default=True)
    login_count = Column(Integer, nullable=False, default=0)
    login_fail_count = Column(Integer, nullable=False, default=0)
    date_seen = Column(DateTime)
    date_fail = Column(DateTime)
    date_password = Column(DateTime)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    __table_args__ = (
        Index("idx_staff_name", "name"),
        Index("idx_staff_active", "active"),
        Index("idx_staff_date_seen", "date_seen"),
    )
