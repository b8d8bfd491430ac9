"""
재무 분개 타입

다섯 개 컬렉션의 분개를 태그드 유니온으로 표현.
각 변형은 kind 클래스 속성으로 구분되며 원장 병합 시 kind로 분기.

저장 레코드 키는 camelCase (debitAmount, paymentMethod 등),
메모리 내 금액은 Decimal, 날짜는 date.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, ClassVar, Union

from core.finance.errors import EntryDecodeError
from core.types import EntryKind, ONE_SIDED_KINDS

ZERO = Decimal("0")


# -------------------------------------------------------------------------
# 값 변환
# -------------------------------------------------------------------------

def parse_date(value: Any) -> date:
    """날짜 변환

    date, datetime, ISO 문자열("2024-01-05", "2024-01-05T10:00:00Z") 허용.
    시각은 버리고 날짜만 사용.

    Raises:
        EntryDecodeError: 비어 있거나 형식이 잘못된 경우
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not value or not isinstance(value, str):
        raise EntryDecodeError(f"Invalid date: {value!r}")

    text = value.strip()
    try:
        if len(text) == 10:
            return date.fromisoformat(text)
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError as e:
        raise EntryDecodeError(f"Invalid date: {value!r}") from e


def coerce_date(value: date | str | None) -> date | None:
    """조회 기간 경계값 변환 (None은 그대로)"""
    if value is None or value == "":
        return None
    return parse_date(value)


def parse_amount(value: Any) -> Decimal:
    """금액 변환

    None/빈 문자열은 0. float는 문자열을 거쳐 변환해 이진 오차를 피함.

    Raises:
        EntryDecodeError: 숫자로 해석할 수 없는 경우
    """
    if value is None or value == "":
        return ZERO
    if isinstance(value, bool):
        raise EntryDecodeError(f"Invalid amount: {value!r}")
    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            amount = Decimal(str(value).strip())
        except InvalidOperation as e:
            raise EntryDecodeError(f"Invalid amount: {value!r}") from e
    if not amount.is_finite():
        raise EntryDecodeError(f"Invalid amount: {value!r}")
    return amount


def format_amount(value: Decimal) -> str:
    return str(value)


def _optional_str(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)


# -------------------------------------------------------------------------
# 분개 (태그드 유니온)
# -------------------------------------------------------------------------

@dataclass(frozen=True)
class TwoSidedEntry:
    """양변 분개 (채무자/채권자/일반분개장)

    debit_amount, credit_amount 중 정확히 하나만 양수여야 함.
    """

    kind: ClassVar[EntryKind]

    date: date
    description: str = ""
    account: str | None = None
    debit_amount: Decimal = ZERO
    credit_amount: Decimal = ZERO
    reference: str | None = None
    notes: str | None = None
    entry_id: str = ""


@dataclass(frozen=True)
class OneSidedEntry:
    """단변 분개 (수입/지출)

    amount > 0, account 필수.
    """

    kind: ClassVar[EntryKind]

    date: date
    account: str = ""
    description: str = ""
    amount: Decimal = ZERO
    payment_method: str | None = None
    notes: str | None = None
    entry_id: str = ""


class DebtorEntry(TwoSidedEntry):
    kind = EntryKind.DEBTOR


class CreditorEntry(TwoSidedEntry):
    kind = EntryKind.CREDITOR


class GeneralJournalEntry(TwoSidedEntry):
    kind = EntryKind.JOURNAL


class IncomeEntry(OneSidedEntry):
    kind = EntryKind.INCOME


class ExpenseEntry(OneSidedEntry):
    kind = EntryKind.EXPENSE


JournalEntry = Union[DebtorEntry, CreditorEntry, GeneralJournalEntry, IncomeEntry, ExpenseEntry]

ENTRY_TYPES: dict[EntryKind, type] = {
    EntryKind.DEBTOR: DebtorEntry,
    EntryKind.CREDITOR: CreditorEntry,
    EntryKind.JOURNAL: GeneralJournalEntry,
    EntryKind.INCOME: IncomeEntry,
    EntryKind.EXPENSE: ExpenseEntry,
}


def entry_from_record(kind: EntryKind | str, record: dict[str, Any]) -> JournalEntry:
    """저장 레코드 → 분개 변환

    Args:
        kind: 분개 유형
        record: 저장소 레코드 (camelCase 키)

    Raises:
        EntryDecodeError: 날짜/금액 형식 오류
    """
    kind = EntryKind(kind)
    entry_type = ENTRY_TYPES[kind]
    common = {
        "entry_id": str(record.get("id") or ""),
        "date": parse_date(record.get("date")),
        "description": str(record.get("description") or ""),
        "notes": _optional_str(record.get("notes")),
    }

    if kind in ONE_SIDED_KINDS:
        return entry_type(
            account=str(record.get("account") or ""),
            amount=parse_amount(record.get("amount")),
            payment_method=_optional_str(record.get("paymentMethod")),
            **common,
        )

    return entry_type(
        account=_optional_str(record.get("account")) or None,
        debit_amount=parse_amount(record.get("debitAmount")),
        credit_amount=parse_amount(record.get("creditAmount")),
        reference=_optional_str(record.get("reference")),
        **common,
    )


def entry_to_record(entry: JournalEntry) -> dict[str, Any]:
    """분개 → 저장 레코드 변환 (id 제외)"""
    record: dict[str, Any] = {
        "date": entry.date.isoformat(),
        "description": entry.description,
        "account": entry.account,
        "notes": entry.notes,
    }
    if isinstance(entry, OneSidedEntry):
        record["amount"] = format_amount(entry.amount)
        record["paymentMethod"] = entry.payment_method
    else:
        record["debitAmount"] = format_amount(entry.debit_amount)
        record["creditAmount"] = format_amount(entry.credit_amount)
        record["reference"] = entry.reference
    return record


# -------------------------------------------------------------------------
# 계정과목
# -------------------------------------------------------------------------

@dataclass(frozen=True)
class Account:
    """계정과목 (식별자 = code)"""

    code: str
    name: str
    type: str | None = None
    account_id: str = ""


def account_from_record(record: dict[str, Any]) -> Account:
    account_type = record.get("type")
    return Account(
        code=str(record.get("code") or ""),
        name=str(record.get("name") or ""),
        type=str(account_type).lower() if account_type else None,
        account_id=str(record.get("id") or ""),
    )


# -------------------------------------------------------------------------
# 파생 뷰 (조회마다 새로 생성, 저장하지 않음)
# -------------------------------------------------------------------------

@dataclass(frozen=True)
class LedgerLine:
    """총계정원장 라인"""

    date: date
    account: str | None
    debit: Decimal
    credit: Decimal
    source_type: EntryKind
    balance: Decimal = ZERO
    entry_id: str = ""
    description: str = ""
    reference: str | None = None


@dataclass(frozen=True)
class TrialBalanceRow:
    """시산표 행"""

    code: str
    name: str
    type: str
    debit: Decimal
    credit: Decimal


@dataclass(frozen=True)
class ReportPeriod:
    start_date: date | None = None
    end_date: date | None = None

    def contains(self, day: date) -> bool:
        """경계 포함 기간 판정 (경계가 없으면 무제한)"""
        if self.start_date is not None and day < self.start_date:
            return False
        if self.end_date is not None and day > self.end_date:
            return False
        return True


@dataclass(frozen=True)
class IncomeStatement:
    """손익계산서"""

    income: Decimal
    expenses: Decimal
    net_income: Decimal
    period: ReportPeriod = field(default_factory=ReportPeriod)
