"""
어댑터 인터페이스 정의

Protocol 기반으로 정의하여 의존성 주입 및 Mock 교체 가능.
모든 구현체는 이 Protocol을 준수해야 함.
"""

from typing import Any, Callable, Protocol, runtime_checkable


Record = dict[str, Any]


@runtime_checkable
class IRecordStore(Protocol):
    """컬렉션 기반 레코드 저장소 인터페이스

    컬렉션 이름(예: debtorEntries)별로 JSON 레코드를 CRUD.
    모든 레코드는 문자열 "id" 키를 가짐.
    """

    async def get_all(self, collection: str) -> list[Record]:
        """컬렉션 전체 조회

        한 시점의 스냅샷을 삽입 순서대로 반환.

        Args:
            collection: 컬렉션 이름

        Returns:
            레코드 목록 (없으면 빈 리스트)
        """
        ...

    async def get_by_id(self, collection: str, record_id: str) -> Record:
        """단건 조회

        Raises:
            RecordNotFoundError: 레코드가 없는 경우
        """
        ...

    async def create(self, collection: str, data: Record) -> Record:
        """레코드 생성

        Returns:
            id, createdAt, updatedAt이 채워진 레코드
        """
        ...

    async def update(self, collection: str, record_id: str, patch: Record) -> Record:
        """레코드 부분 수정

        Raises:
            RecordNotFoundError: 레코드가 없는 경우
        """
        ...

    async def delete(self, collection: str, record_id: str) -> None:
        """레코드 삭제

        Raises:
            RecordNotFoundError: 레코드가 없는 경우
        """
        ...

    async def delete_many(self, collection: str, record_ids: list[str]) -> int:
        """여러 레코드 삭제

        Returns:
            삭제된 레코드 수
        """
        ...

    async def query(
        self,
        collection: str,
        predicate: Callable[[Record], bool],
    ) -> list[Record]:
        """조건에 맞는 레코드 조회"""
        ...

    async def count(
        self,
        collection: str,
        predicate: Callable[[Record], bool] | None = None,
    ) -> int:
        """레코드 수 조회"""
        ...

    async def clear(self, collection: str) -> int:
        """컬렉션 비우기

        Returns:
            삭제된 레코드 수
        """
        ...
