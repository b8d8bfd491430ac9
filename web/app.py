"""
FastAPI 애플리케이션

라우터 등록 및 앱 설정.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core.config.loader import get_settings
from core.logging import setup_logging

# 로깅 설정 (콘솔 + 파일, settings.yaml의 log_level 적용)
_log_level = get_settings().log_level
setup_logging("web", console_level=_log_level, file_level=_log_level)

from web.routes import accounts, assets, entries, health, reports

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """앱 생명주기 관리"""
    from adapters.db.sqlite_adapter import SQLiteAdapter, init_schema

    settings = get_settings()

    # 시작 시 - DB 스키마 자동 초기화
    async with SQLiteAdapter(settings.db_path) as db:
        await init_schema(db)
    logger.info(f"Web: DB 준비 완료 ({settings.db_path})")

    yield


app = FastAPI(
    title="EduFinance API",
    description="학교 재무 원장 집계 API",
    version=health.API_VERSION,
    lifespan=lifespan,
)

# CORS 설정 (로컬 개발용)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:8000", "http://127.0.0.1:8000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 라우터 등록
app.include_router(health.router)
app.include_router(entries.router)
app.include_router(accounts.router)
app.include_router(assets.router)
app.include_router(reports.router)
