"""
InMemoryRecordStore 테스트

Mock 레코드 저장소 동작 확인.
"""

import pytest

from adapters.mock import InMemoryRecordStore
from core.storage.record_store import DuplicateRecordError, RecordNotFoundError


class TestInMemoryRecordStore:
    """인메모리 저장소 테스트"""

    @pytest.mark.asyncio
    async def test_create_assigns_id_and_timestamps(self) -> None:
        """생성 시 id/createdAt/updatedAt 부여"""
        store = InMemoryRecordStore()

        record = await store.create("incomeEntries", {"amount": "200"})

        assert record["id"]
        assert record["createdAt"] == record["updatedAt"]
        assert await store.get_by_id("incomeEntries", record["id"]) == record

    @pytest.mark.asyncio
    async def test_insertion_order(self) -> None:
        """get_all은 저장 순서"""
        store = InMemoryRecordStore()
        for n in range(3):
            await store.create("c", {"id": f"r{n}"})

        assert [r["id"] for r in await store.get_all("c")] == ["r0", "r1", "r2"]

    @pytest.mark.asyncio
    async def test_returns_copies(self) -> None:
        """반환값 수정이 저장 상태에 영향 없음"""
        store = InMemoryRecordStore({"c": [{"id": "a", "value": 1}]})

        rows = await store.get_all("c")
        rows[0]["value"] = 999

        assert (await store.get_by_id("c", "a"))["value"] == 1

    @pytest.mark.asyncio
    async def test_duplicate_id(self) -> None:
        store = InMemoryRecordStore({"c": [{"id": "a"}]})

        with pytest.raises(DuplicateRecordError):
            await store.create("c", {"id": "a"})

    @pytest.mark.asyncio
    async def test_update_merges(self) -> None:
        """부분 수정은 기존 필드 유지, id 변경 불가"""
        store = InMemoryRecordStore({"c": [{"id": "a", "x": 1, "y": 2}]})

        updated = await store.update("c", "a", {"y": 3, "id": "other"})

        assert updated["id"] == "a"
        assert updated["x"] == 1
        assert updated["y"] == 3

    @pytest.mark.asyncio
    async def test_missing_record(self) -> None:
        """없는 레코드는 RecordNotFoundError"""
        store = InMemoryRecordStore()

        with pytest.raises(RecordNotFoundError, match="c with ID nope not found"):
            await store.get_by_id("c", "nope")
        with pytest.raises(RecordNotFoundError):
            await store.delete("c", "nope")

    @pytest.mark.asyncio
    async def test_delete_many_and_count(self) -> None:
        store = InMemoryRecordStore({"c": [{"id": "a"}, {"id": "b"}, {"id": "c"}]})

        assert await store.delete_many("c", ["a", "c", "zzz"]) == 2
        assert await store.count("c") == 1

    @pytest.mark.asyncio
    async def test_query_and_clear(self) -> None:
        store = InMemoryRecordStore({"c": [{"id": "a", "k": 1}, {"id": "b", "k": 2}]})

        assert [r["id"] for r in await store.query("c", lambda r: r["k"] > 1)] == ["b"]
        assert await store.count("c", lambda r: r["k"] == 1) == 1
        assert await store.clear("c") == 2
        assert await store.get_all("c") == []

    @pytest.mark.asyncio
    async def test_fail_collection(self) -> None:
        """실패 지정 컬렉션은 ConnectionError"""
        store = InMemoryRecordStore()
        store.fail_collection("expenseEntries")

        with pytest.raises(ConnectionError):
            await store.get_all("expenseEntries")
        assert await store.get_all("incomeEntries") == []

    @pytest.mark.asyncio
    async def test_records_calls(self) -> None:
        """호출 기록"""
        store = InMemoryRecordStore()
        await store.get_all("c")
        await store.create("c", {})

        assert store.calls == [("get_all", "c"), ("create", "c")]
