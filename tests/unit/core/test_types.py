"""
core/types.py 테스트

Enum 문자열 직렬화와 컬렉션 매핑 확인
"""

from core.types import (
    ENTRY_COLLECTIONS,
    LEDGER_SOURCE_ORDER,
    ONE_SIDED_KINDS,
    TWO_SIDED_KINDS,
    AccountType,
    Collections,
    EntryKind,
    UserRole,
)


class TestEnums:
    """Enum 테스트"""

    def test_entry_kind_values(self) -> None:
        assert [k.value for k in EntryKind] == ["debtor", "creditor", "journal", "income", "expense"]

    def test_str_enum(self) -> None:
        """문자열과 비교 가능"""
        assert EntryKind.INCOME == "income"
        assert AccountType("revenue") is AccountType.REVENUE
        assert UserRole.ADMINISTRATOR == "administrator"


class TestEntryCollections:
    """EntryKind ↔ 컬렉션 매핑 테스트"""

    def test_every_kind_mapped(self) -> None:
        assert set(ENTRY_COLLECTIONS) == set(EntryKind)

    def test_collection_names(self) -> None:
        assert ENTRY_COLLECTIONS[EntryKind.DEBTOR] == "debtorEntries"
        assert ENTRY_COLLECTIONS[EntryKind.JOURNAL] == Collections.GENERAL_JOURNAL == "generalJournal"
        assert ENTRY_COLLECTIONS[EntryKind.EXPENSE] == "expenseEntries"

    def test_source_order(self) -> None:
        """원장 방문 순서는 모든 유형을 한 번씩 포함"""
        assert LEDGER_SOURCE_ORDER[0] == EntryKind.DEBTOR
        assert sorted(LEDGER_SOURCE_ORDER) == sorted(EntryKind)
        assert len(set(LEDGER_SOURCE_ORDER)) == len(LEDGER_SOURCE_ORDER)

    def test_sides_partition_kinds(self) -> None:
        assert TWO_SIDED_KINDS | ONE_SIDED_KINDS == set(EntryKind)
        assert not TWO_SIDED_KINDS & ONE_SIDED_KINDS
