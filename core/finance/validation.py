"""
분개 검증기

저장소에 쓰기 전에 분개 유형별 불변식을 검사.
부수 효과 없는 순수 함수이며 실패 시 ValidationError 계열 예외 발생.
"""

from decimal import Decimal
from typing import Any, Callable

from core.finance.entries import (
    ZERO,
    JournalEntry,
    OneSidedEntry,
    TwoSidedEntry,
    parse_amount,
)
from core.finance.errors import (
    BothAmountsSet,
    EntryDecodeError,
    InvalidAmount,
    NoAmountSet,
    ValidationError,
)
from core.types import AccountType, EntryKind


def validate_two_sided(entry: TwoSidedEntry) -> None:
    """양변 분개 검증

    Raises:
        InvalidAmount: 음수 금액
        BothAmountsSet: 차변/대변 모두 양수
        NoAmountSet: 차변/대변 모두 0
    """
    if entry.debit_amount < ZERO or entry.credit_amount < ZERO:
        raise InvalidAmount("Amounts cannot be negative")

    has_debit = entry.debit_amount > ZERO
    has_credit = entry.credit_amount > ZERO

    if has_debit and has_credit:
        raise BothAmountsSet("Cannot have both debit and credit amounts")
    if not has_debit and not has_credit:
        raise NoAmountSet("Either debit or credit amount is required")


def validate_one_sided(entry: OneSidedEntry) -> None:
    """단변 분개 검증

    Raises:
        InvalidAmount: 금액이 0 이하이거나 계정이 비어 있음
    """
    if entry.amount <= ZERO:
        raise InvalidAmount("Amount must be greater than zero")
    if not entry.account or not entry.account.strip():
        raise InvalidAmount("Account is required")


_VALIDATORS: dict[EntryKind, Callable[[Any], None]] = {
    EntryKind.DEBTOR: validate_two_sided,
    EntryKind.CREDITOR: validate_two_sided,
    EntryKind.JOURNAL: validate_two_sided,
    EntryKind.INCOME: validate_one_sided,
    EntryKind.EXPENSE: validate_one_sided,
}


def validate_entry(entry: JournalEntry) -> None:
    """분개 유형에 맞는 검증기 호출"""
    _VALIDATORS[entry.kind](entry)


# -------------------------------------------------------------------------
# 계정과목 / 고정자산
# -------------------------------------------------------------------------

def validate_account(data: dict[str, Any]) -> None:
    """계정과목 검증

    code, name 필수. type은 지정된 경우 알려진 유형이어야 함.
    """
    code = str(data.get("code") or "").strip()
    name = str(data.get("name") or "").strip()
    if not code or not name:
        raise ValidationError("Account name and code are required")

    account_type = data.get("type")
    if account_type:
        valid_types = {t.value for t in AccountType}
        if str(account_type).lower() not in valid_types:
            raise ValidationError(
                f"Unknown account type: {account_type!r} (expected one of {sorted(valid_types)})"
            )


def validate_fixed_asset(data: dict[str, Any]) -> Decimal:
    """고정자산 검증

    Returns:
        검증된 자산 가액

    Raises:
        ValidationError: 이름이 없는 경우
        InvalidAmount: 가액이 0 이하이거나 숫자가 아닌 경우
    """
    if not str(data.get("name") or "").strip():
        raise ValidationError("Asset name is required")

    try:
        value = parse_amount(data.get("value"))
    except EntryDecodeError as e:
        raise InvalidAmount("Asset value must be greater than zero") from e

    if value <= ZERO:
        raise InvalidAmount("Asset value must be greater than zero")
    return value
