"""
RecordStore - 컬렉션 기반 레코드 저장소

records 테이블을 통해 컬렉션 이름별 JSON 레코드를 관리.
재무 분개, 계정과목, 고정자산 등이 모두 이 저장소를 공유.

레코드 구조:
- "id": 레코드 ID (생성 시 지정하지 않으면 자동 생성)
- "createdAt" / "updatedAt": ISO 8601 UTC 시각
- 나머지 키: 컬렉션별 페이로드
"""

import json
import logging
import random
import string
import time
from datetime import datetime, timezone
from typing import Any, Callable

from adapters.db.sqlite_adapter import SQLiteAdapter

logger = logging.getLogger(__name__)

Record = dict[str, Any]

_ID_ALPHABET = string.ascii_lowercase + string.digits


class RecordNotFoundError(LookupError):
    """레코드 없음 예외"""

    def __init__(self, collection: str, record_id: str):
        self.collection = collection
        self.record_id = record_id
        super().__init__(f"{collection} with ID {record_id} not found")


class DuplicateRecordError(ValueError):
    """이미 존재하는 ID로 생성 시도"""

    def __init__(self, collection: str, record_id: str):
        self.collection = collection
        self.record_id = record_id
        super().__init__(f"{collection} with ID {record_id} already exists")


def generate_record_id() -> str:
    """레코드 ID 생성

    형식: <epoch ms>_<base36 9자리>
    """
    suffix = "".join(random.choices(_ID_ALPHABET, k=9))
    return f"{int(time.time() * 1000)}_{suffix}"


def now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def stamp_new_record(data: Record) -> Record:
    """생성용 레코드에 id/생성 시각 채우기"""
    now = now_iso()
    record = dict(data)
    record["id"] = str(data.get("id") or generate_record_id())
    record["createdAt"] = now
    record["updatedAt"] = now
    return record


def merge_patch(existing: Record, record_id: str, patch: Record) -> Record:
    """기존 레코드에 patch 병합 (id 변경 불가)"""
    merged = {**existing, **patch}
    merged["id"] = record_id
    merged["updatedAt"] = now_iso()
    return merged


class RecordStore:
    """레코드 저장소

    IRecordStore Protocol의 SQLite 구현.
    get_all은 단일 SELECT로 컬렉션 스냅샷을 삽입 순서대로 반환.

    Args:
        db: SQLiteAdapter 인스턴스 (init_schema 완료 상태)

    사용 예시:
    ```python
    async with SQLiteAdapter(db_path) as db:
        await init_schema(db)
        store = RecordStore(db)

        entry = await store.create("incomeEntries", {"amount": "200", "account": "4000"})
        entries = await store.get_all("incomeEntries")
    ```
    """

    def __init__(self, db: SQLiteAdapter):
        self.db = db

    async def get_all(self, collection: str) -> list[Record]:
        rows = await self.db.fetchall(
            """
            SELECT data_json
            FROM records
            WHERE collection = ?
            ORDER BY seq
            """,
            (collection,),
        )
        return [json.loads(row[0]) for row in rows]

    async def get_by_id(self, collection: str, record_id: str) -> Record:
        row = await self.db.fetchone(
            """
            SELECT data_json
            FROM records
            WHERE collection = ? AND record_id = ?
            """,
            (collection, record_id),
        )
        if row is None:
            raise RecordNotFoundError(collection, record_id)
        return json.loads(row[0])

    async def create(self, collection: str, data: Record) -> Record:
        record = stamp_new_record(data)

        async with self.db.transaction():
            # UNIQUE(collection, record_id) 충돌 시 무시되고 rowcount = 0
            cursor = await self.db.execute(
                """
                INSERT OR IGNORE INTO records (collection, record_id, data_json, created_at, updated_at)
                VALUES (?, ?, ?, ?, ?)
                """,
                (
                    collection,
                    record["id"],
                    json.dumps(record, ensure_ascii=False),
                    record["createdAt"],
                    record["updatedAt"],
                ),
            )
            if cursor.rowcount == 0:
                raise DuplicateRecordError(collection, record["id"])

        logger.debug(f"Record created: {collection}/{record['id']}")
        return record

    async def update(self, collection: str, record_id: str, patch: Record) -> Record:
        existing = await self.get_by_id(collection, record_id)
        merged = merge_patch(existing, record_id, patch)

        async with self.db.transaction():
            await self.db.execute(
                """
                UPDATE records
                SET data_json = ?, updated_at = ?
                WHERE collection = ? AND record_id = ?
                """,
                (
                    json.dumps(merged, ensure_ascii=False),
                    merged["updatedAt"],
                    collection,
                    record_id,
                ),
            )

        logger.debug(f"Record updated: {collection}/{record_id}")
        return merged

    async def delete(self, collection: str, record_id: str) -> None:
        async with self.db.transaction():
            cursor = await self.db.execute(
                "DELETE FROM records WHERE collection = ? AND record_id = ?",
                (collection, record_id),
            )
            if cursor.rowcount == 0:
                raise RecordNotFoundError(collection, record_id)

        logger.debug(f"Record deleted: {collection}/{record_id}")

    async def delete_many(self, collection: str, record_ids: list[str]) -> int:
        if not record_ids:
            return 0

        placeholders = ", ".join("?" for _ in record_ids)
        async with self.db.transaction():
            cursor = await self.db.execute(
                f"DELETE FROM records WHERE collection = ? AND record_id IN ({placeholders})",
                (collection, *record_ids),
            )
            deleted = cursor.rowcount

        logger.debug(f"Records deleted: {collection} x{deleted}")
        return deleted

    async def query(
        self,
        collection: str,
        predicate: Callable[[Record], bool],
    ) -> list[Record]:
        return [r for r in await self.get_all(collection) if predicate(r)]

    async def find_one(
        self,
        collection: str,
        predicate: Callable[[Record], bool],
    ) -> Record | None:
        for record in await self.get_all(collection):
            if predicate(record):
                return record
        return None

    async def count(
        self,
        collection: str,
        predicate: Callable[[Record], bool] | None = None,
    ) -> int:
        if predicate is not None:
            return len(await self.query(collection, predicate))

        row = await self.db.fetchone(
            "SELECT COUNT(*) FROM records WHERE collection = ?",
            (collection,),
        )
        return int(row[0]) if row else 0

    async def has_data(self, collection: str) -> bool:
        return await self.count(collection) > 0

    async def clear(self, collection: str) -> int:
        async with self.db.transaction():
            cursor = await self.db.execute(
                "DELETE FROM records WHERE collection = ?",
                (collection,),
            )
            cleared = cursor.rowcount

        logger.info(f"Collection cleared: {collection} ({cleared} records)")
        return cleared

    async def init_default_data(self, collection: str, defaults: list[Record]) -> bool:
        """비어 있는 컬렉션에 기본 데이터 저장

        Args:
            collection: 컬렉션 이름
            defaults: 기본 레코드 목록

        Returns:
            기본 데이터를 저장했으면 True, 이미 데이터가 있으면 False
        """
        if await self.has_data(collection):
            return False

        for data in defaults:
            await self.create(collection, data)

        logger.info(f"Default data initialized: {collection} ({len(defaults)} records)")
        return True
