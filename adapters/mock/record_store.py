"""
Mock 레코드 저장소

테스트/데모용 인메모리 저장소.
IRecordStore Protocol 준수.
"""

import copy
from typing import Callable

from core.storage.record_store import (
    DuplicateRecordError,
    Record,
    RecordNotFoundError,
    merge_patch,
    stamp_new_record,
)


class InMemoryRecordStore:
    """인메모리 레코드 저장소

    IRecordStore Protocol 구현.
    반환값은 항상 복사본이라 호출자가 수정해도 저장 상태에 영향 없음.

    사용 예시:
    ```python
    store = InMemoryRecordStore()
    await store.create("incomeEntries", {"amount": "200", "account": "4000"})

    # 특정 컬렉션 조회 실패 시나리오
    store.fail_collection("expenseEntries")
    ```
    """

    def __init__(self, initial: dict[str, list[Record]] | None = None):
        """
        Args:
            initial: 컬렉션별 초기 레코드 (그대로 저장, id 필수)
        """
        self._collections: dict[str, list[Record]] = {
            name: [dict(r) for r in records]
            for name, records in (initial or {}).items()
        }
        self._failing: set[str] = set()
        self.calls: list[tuple[str, str]] = []

    def fail_collection(self, collection: str) -> None:
        """해당 컬렉션 접근 시 ConnectionError 발생 (에러 시나리오 테스트용)"""
        self._failing.add(collection)

    def _records(self, collection: str) -> list[Record]:
        if collection in self._failing:
            raise ConnectionError(f"Storage unavailable: {collection}")
        return self._collections.setdefault(collection, [])

    def _index_of(self, collection: str, record_id: str) -> int:
        for i, record in enumerate(self._records(collection)):
            if record.get("id") == record_id:
                return i
        raise RecordNotFoundError(collection, record_id)

    async def get_all(self, collection: str) -> list[Record]:
        self.calls.append(("get_all", collection))
        return copy.deepcopy(self._records(collection))

    async def get_by_id(self, collection: str, record_id: str) -> Record:
        self.calls.append(("get_by_id", collection))
        records = self._records(collection)
        return copy.deepcopy(records[self._index_of(collection, record_id)])

    async def create(self, collection: str, data: Record) -> Record:
        self.calls.append(("create", collection))
        records = self._records(collection)
        record = stamp_new_record(data)
        if any(r.get("id") == record["id"] for r in records):
            raise DuplicateRecordError(collection, record["id"])
        records.append(record)
        return copy.deepcopy(record)

    async def update(self, collection: str, record_id: str, patch: Record) -> Record:
        self.calls.append(("update", collection))
        records = self._records(collection)
        index = self._index_of(collection, record_id)
        records[index] = merge_patch(records[index], record_id, patch)
        return copy.deepcopy(records[index])

    async def delete(self, collection: str, record_id: str) -> None:
        self.calls.append(("delete", collection))
        records = self._records(collection)
        del records[self._index_of(collection, record_id)]

    async def delete_many(self, collection: str, record_ids: list[str]) -> int:
        self.calls.append(("delete_many", collection))
        records = self._records(collection)
        ids = set(record_ids)
        kept = [r for r in records if r.get("id") not in ids]
        deleted = len(records) - len(kept)
        self._collections[collection] = kept
        return deleted

    async def query(
        self,
        collection: str,
        predicate: Callable[[Record], bool],
    ) -> list[Record]:
        return [r for r in await self.get_all(collection) if predicate(r)]

    async def count(
        self,
        collection: str,
        predicate: Callable[[Record], bool] | None = None,
    ) -> int:
        if predicate is None:
            return len(self._records(collection))
        return len(await self.query(collection, predicate))

    async def clear(self, collection: str) -> int:
        self.calls.append(("clear", collection))
        cleared = len(self._records(collection))
        self._collections[collection] = []
        return cleared
