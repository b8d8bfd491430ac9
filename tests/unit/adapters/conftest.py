"""
어댑터 테스트 픽스처

공통 테스트 설정 및 픽스처 제공.
"""

from pathlib import Path
from typing import AsyncGenerator

import pytest_asyncio

from adapters.db.sqlite_adapter import SQLiteAdapter, init_schema


@pytest_asyncio.fixture
async def schema_db(tmp_path: Path) -> AsyncGenerator[SQLiteAdapter, None]:
    """스키마가 생성된 임시 DB"""
    async with SQLiteAdapter(tmp_path / "adapter_test.db") as db:
        await init_schema(db)
        yield db
