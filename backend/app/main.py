"""FastAPI 애플리케이션 진입점. 미들웨어, API 라우터, 도메인 예외 핸들러를 등록합니다."""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from app.config import settings
from app.database import Base, engine
import app.models  # noqa: F401 - 모델 import로 metadata 등록
from app.routers import auth, blog, content, staff
from app.services.errors import KadoError

logger = logging.getLogger(__name__)

app = FastAPI(
    title=f"{settings.SITE_NAME} CMS",
    description="Blog/Content 리비전 관리와 관리자 계정을 제공하는 CMS 백엔드",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register all routers
app.include_router(auth.router)
app.include_router(staff.router)
app.include_router(blog.router)
app.include_router(blog.public_router)
app.include_router(content.router)
app.include_router(content.public_router)


@app.exception_handler(KadoError)
async def handle_domain_error(request: Request, exc: KadoError):
    if exc.status_code >= 500:
        logger.error("[api] %s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.on_event("startup")
def ensure_schema():
    # 누락된 테이블을 자동 생성합니다.
    Base.metadata.create_all(bind=engine)


@app.get("/api/health")
def health_check():
    return {"status": "ok", "service": f"{settings.SITE_NAME} CMS"}
