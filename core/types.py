"""
타입 정의 모듈

Enum 등 공통 타입 정의
모든 Enum은 str을 상속하여 문자열 직렬화 가능
"""

from enum import Enum


class UserRole(str, Enum):
    """사용자 역할"""

    ADMINISTRATOR = "administrator"
    STAFF = "staff"
    STUDENT = "student"


class EntryKind(str, Enum):
    """분개 출처 유형

    다섯 개의 독립 컬렉션 각각에 대응.
    """

    DEBTOR = "debtor"
    CREDITOR = "creditor"
    JOURNAL = "journal"
    INCOME = "income"
    EXPENSE = "expense"


class AccountType(str, Enum):
    """계정과목 유형"""

    ASSET = "asset"
    LIABILITY = "liability"
    EQUITY = "equity"
    REVENUE = "revenue"
    EXPENSE = "expense"


class Collections:
    """레코드 저장소 컬렉션 이름"""

    DEBTOR_ENTRIES: str = "debtorEntries"
    CREDITOR_ENTRIES: str = "creditorEntries"
    INCOME_ENTRIES: str = "incomeEntries"
    EXPENSE_ENTRIES: str = "expenseEntries"
    GENERAL_JOURNAL: str = "generalJournal"
    CHART_OF_ACCOUNTS: str = "chartOfAccounts"
    FIXED_ASSETS: str = "fixedAssets"


# EntryKind → 컬렉션 이름
ENTRY_COLLECTIONS: dict[EntryKind, str] = {
    EntryKind.DEBTOR: Collections.DEBTOR_ENTRIES,
    EntryKind.CREDITOR: Collections.CREDITOR_ENTRIES,
    EntryKind.JOURNAL: Collections.GENERAL_JOURNAL,
    EntryKind.INCOME: Collections.INCOME_ENTRIES,
    EntryKind.EXPENSE: Collections.EXPENSE_ENTRIES,
}

# 원장 병합 시 컬렉션 방문 순서 (같은 날짜의 정렬 순서를 결정)
LEDGER_SOURCE_ORDER: tuple[EntryKind, ...] = (
    EntryKind.DEBTOR,
    EntryKind.CREDITOR,
    EntryKind.JOURNAL,
    EntryKind.INCOME,
    EntryKind.EXPENSE,
)

TWO_SIDED_KINDS: frozenset[EntryKind] = frozenset({
    EntryKind.DEBTOR,
    EntryKind.CREDITOR,
    EntryKind.JOURNAL,
})

ONE_SIDED_KINDS: frozenset[EntryKind] = frozenset({
    EntryKind.INCOME,
    EntryKind.EXPENSE,
})
