"""
SQLite 어댑터 테스트

SQLiteAdapter 및 관련 함수 테스트.
"""

from pathlib import Path

import pytest

from adapters.db.sqlite_adapter import (
    SQLiteAdapter,
    create_connection,
    get_db_path,
    init_schema,
)
from core.constants import Paths


class TestGetDbPath:
    """get_db_path 테스트"""

    def test_default(self) -> None:
        """기본 경로"""
        path = get_db_path()

        assert path == Paths.DB_FILE
        assert isinstance(path, Path)

    def test_override(self, tmp_path: Path) -> None:
        """지정 경로 (문자열 허용)"""
        assert get_db_path(str(tmp_path / "a.db")) == tmp_path / "a.db"


class TestCreateConnection:
    """create_connection 테스트"""

    @pytest.mark.asyncio
    async def test_wal_mode(self, tmp_path: Path) -> None:
        """WAL 모드로 연결"""
        conn = await create_connection(tmp_path / "nested" / "test.db")
        try:
            cursor = await conn.execute("PRAGMA journal_mode")
            row = await cursor.fetchone()
            assert row[0].lower() == "wal"
        finally:
            await conn.close()

        assert (tmp_path / "nested" / "test.db").exists()


class TestSQLiteAdapter:
    """SQLiteAdapter 테스트"""

    @pytest.mark.asyncio
    async def test_context_manager(self, tmp_path: Path) -> None:
        """async with로 연결/종료"""
        adapter = SQLiteAdapter(tmp_path / "test.db")

        async with adapter as db:
            assert db.is_connected

        assert not adapter.is_connected

    @pytest.mark.asyncio
    async def test_not_connected(self, tmp_path: Path) -> None:
        """연결 전 실행은 RuntimeError"""
        adapter = SQLiteAdapter(tmp_path / "test.db")

        with pytest.raises(RuntimeError, match="Not connected"):
            await adapter.execute("SELECT 1")

    @pytest.mark.asyncio
    async def test_init_schema(self, schema_db: SQLiteAdapter) -> None:
        """records 테이블 생성"""
        assert await schema_db.table_exists("records")

    @pytest.mark.asyncio
    async def test_init_schema_idempotent(self, schema_db: SQLiteAdapter) -> None:
        """두 번 실행해도 오류 없음"""
        await init_schema(schema_db)

        assert await schema_db.table_exists("records")

    @pytest.mark.asyncio
    async def test_transaction_commit(self, schema_db: SQLiteAdapter) -> None:
        """정상 종료 시 커밋"""
        async with schema_db.transaction():
            await schema_db.execute(
                "INSERT INTO records (collection, record_id, data_json) VALUES (?, ?, ?)",
                ("c", "1", "{}"),
            )

        row = await schema_db.fetchone("SELECT COUNT(*) FROM records")
        assert row[0] == 1

    @pytest.mark.asyncio
    async def test_transaction_rollback(self, schema_db: SQLiteAdapter) -> None:
        """예외 시 롤백"""
        with pytest.raises(ValueError):
            async with schema_db.transaction():
                await schema_db.execute(
                    "INSERT INTO records (collection, record_id, data_json) VALUES (?, ?, ?)",
                    ("c", "1", "{}"),
                )
                raise ValueError("boom")

        rows = await schema_db.fetchall("SELECT * FROM records")
        assert rows == []
