"""
SQLite 어댑터

WAL 모드로 SQLite 연결 관리.
Web과 CLI 스크립트가 같은 DB 파일을 동시에 열 수 있도록 설정.

주의: SQLite alias로 time, count 사용 금지 (예약어)
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any, AsyncIterator

import aiosqlite

from core.constants import Paths

logger = logging.getLogger(__name__)


def get_db_path(override: Path | str | None = None) -> Path:
    """DB 경로 반환

    Args:
        override: 지정 경로 (None이면 기본 경로)

    Returns:
        DB 파일 경로 (Path 타입)
    """
    if override is None:
        return Paths.DB_FILE
    return Path(override)


async def create_connection(db_path: Path | str) -> aiosqlite.Connection:
    """SQLite 연결 생성 (WAL 모드)

    Args:
        db_path: DB 파일 경로

    Returns:
        aiosqlite 연결 객체
    """
    db_path = Path(db_path)
    db_path.parent.mkdir(parents=True, exist_ok=True)

    conn = await aiosqlite.connect(str(db_path))

    await conn.execute("PRAGMA journal_mode=WAL")
    await conn.execute("PRAGMA busy_timeout=30000")  # 30초 대기

    logger.info("SQLite 연결 생성", extra={"db_path": str(db_path)})

    return conn


class SQLiteAdapter:
    """SQLite 어댑터

    연결 수명 관리와 트랜잭션 컨텍스트 매니저 제공.

    Args:
        db_path: DB 파일 경로

    사용 예시:
    ```python
    async with SQLiteAdapter(db_path) as db:
        await init_schema(db)
        async with db.transaction():
            await db.execute("INSERT INTO ...")
    ```
    """

    def __init__(self, db_path: Path | str):
        self.db_path = Path(db_path)
        self._conn: aiosqlite.Connection | None = None

    @property
    def is_connected(self) -> bool:
        """연결 상태 확인"""
        return self._conn is not None

    async def connect(self) -> None:
        if self._conn is not None:
            return
        self._conn = await create_connection(self.db_path)

    async def close(self) -> None:
        if self._conn is not None:
            await self._conn.close()
            self._conn = None
            logger.info("SQLite 연결 종료")

    def _require_conn(self) -> aiosqlite.Connection:
        if self._conn is None:
            raise RuntimeError("Not connected to database")
        return self._conn

    async def execute(
        self,
        sql: str,
        parameters: tuple[Any, ...] | None = None,
    ) -> aiosqlite.Cursor:
        """SQL 실행"""
        conn = self._require_conn()
        if parameters:
            return await conn.execute(sql, parameters)
        return await conn.execute(sql)

    async def fetchone(
        self,
        sql: str,
        parameters: tuple[Any, ...] | None = None,
    ) -> tuple[Any, ...] | None:
        """단일 행 조회"""
        cursor = await self.execute(sql, parameters)
        return await cursor.fetchone()

    async def fetchall(
        self,
        sql: str,
        parameters: tuple[Any, ...] | None = None,
    ) -> list[tuple[Any, ...]]:
        """전체 행 조회"""
        cursor = await self.execute(sql, parameters)
        return list(await cursor.fetchall())

    async def commit(self) -> None:
        if self._conn is not None:
            await self._conn.commit()

    async def rollback(self) -> None:
        if self._conn is not None:
            await self._conn.rollback()

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[aiosqlite.Connection]:
        """트랜잭션 컨텍스트 매니저

        성공 시 자동 커밋, 예외 시 자동 롤백.
        """
        conn = self._require_conn()
        try:
            yield conn
            await conn.commit()
        except Exception:
            await conn.rollback()
            raise

    async def table_exists(self, table_name: str) -> bool:
        """테이블 존재 여부 확인"""
        result = await self.fetchone(
            "SELECT name FROM sqlite_master WHERE type='table' AND name=?",
            (table_name,),
        )
        return result is not None

    async def __aenter__(self) -> "SQLiteAdapter":
        await self.connect()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()


async def init_schema(adapter: SQLiteAdapter) -> None:
    """스키마 초기화 (테이블 생성)

    컬렉션 이름별 JSON 레코드를 저장하는 단일 테이블.
    seq는 컬렉션 내 삽입 순서를 보존.

    Args:
        adapter: 연결된 SQLiteAdapter
    """
    await adapter.execute("""
        CREATE TABLE IF NOT EXISTS records (
            seq              INTEGER PRIMARY KEY AUTOINCREMENT,
            collection       TEXT NOT NULL,
            record_id        TEXT NOT NULL,
            data_json        TEXT NOT NULL,

            created_at       TEXT NOT NULL DEFAULT (datetime('now')),
            updated_at       TEXT NOT NULL DEFAULT (datetime('now')),

            UNIQUE(collection, record_id)
        )
    """)

    await adapter.execute("""
        CREATE INDEX IF NOT EXISTS ix_records_collection
        ON records(collection, seq)
    """)

    await adapter.commit()

    logger.info("스키마 초기화 완료")
