"""
의존성 주입

FastAPI의 Depends를 사용한 의존성 관리.
"""

from typing import AsyncGenerator

from fastapi import Depends, Header

from adapters.db.sqlite_adapter import SQLiteAdapter
from adapters.interfaces import IRecordStore
from core.config.context import RequestContext
from core.config.loader import Settings, get_settings
from core.constants import Defaults
from core.storage.record_store import RecordStore
from web.services.finance_service import FinanceService


def get_app_settings() -> Settings:
    """애플리케이션 설정 반환"""
    return get_settings()


async def get_db() -> AsyncGenerator[SQLiteAdapter, None]:
    """DB 세션 반환 (요청 단위 연결)"""
    settings = get_settings()
    async with SQLiteAdapter(settings.db_path) as db:
        yield db


async def get_record_store(
    db: SQLiteAdapter = Depends(get_db),
) -> IRecordStore:
    """레코드 저장소 반환 (테스트에서 InMemoryRecordStore로 교체)"""
    return RecordStore(db)


def get_request_context(
    x_user_role: str | None = Header(default=None),
    settings: Settings = Depends(get_app_settings),
) -> RequestContext:
    """요청 컨텍스트 생성

    X-User-Role 헤더가 없으면 관리자로 간주.
    """
    role = (x_user_role or Defaults.ROLE).strip().lower()
    return RequestContext(
        role=role,
        default_account_type=settings.default_account_type,
        finance_roles=settings.finance_roles,
    )


def get_finance_service(
    records: IRecordStore = Depends(get_record_store),
    context: RequestContext = Depends(get_request_context),
) -> FinanceService:
    return FinanceService(records, context)
