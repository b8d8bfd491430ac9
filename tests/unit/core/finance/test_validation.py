"""
core/finance/validation.py 테스트

양변/단변 분개, 계정과목, 고정자산 검증
"""

from datetime import date
from decimal import Decimal

import pytest

from core.finance.entries import (
    CreditorEntry,
    DebtorEntry,
    ExpenseEntry,
    GeneralJournalEntry,
    IncomeEntry,
)
from core.finance.errors import (
    BothAmountsSet,
    InvalidAmount,
    NoAmountSet,
    ValidationError,
)
from core.finance.validation import (
    _VALIDATORS,
    validate_account,
    validate_entry,
    validate_fixed_asset,
    validate_one_sided,
    validate_two_sided,
)
from core.types import EntryKind

DAY = date(2024, 1, 5)


class TestValidateTwoSided:
    """양변 분개 검증 테스트"""

    def test_debit_only_accepted(self) -> None:
        """차변만 있으면 통과"""
        validate_two_sided(DebtorEntry(date=DAY, debit_amount=Decimal("100")))

    def test_credit_only_accepted(self) -> None:
        """대변만 있으면 통과"""
        validate_two_sided(CreditorEntry(date=DAY, credit_amount=Decimal("100")))

    def test_both_amounts_rejected(self) -> None:
        """차변/대변 모두 양수면 BothAmountsSet"""
        entry = GeneralJournalEntry(
            date=DAY, debit_amount=Decimal("100"), credit_amount=Decimal("50")
        )

        with pytest.raises(BothAmountsSet) as exc_info:
            validate_two_sided(entry)

        assert exc_info.value.code == "BothAmountsSet"

    def test_no_amount_rejected(self) -> None:
        """차변/대변 모두 0이면 NoAmountSet"""
        with pytest.raises(NoAmountSet, match="Either debit or credit"):
            validate_two_sided(GeneralJournalEntry(date=DAY))

    def test_negative_debit_rejected(self) -> None:
        """음수 금액은 InvalidAmount"""
        entry = DebtorEntry(date=DAY, debit_amount=Decimal("-10"))

        with pytest.raises(InvalidAmount, match="negative"):
            validate_two_sided(entry)

    def test_negative_credit_with_positive_debit_rejected(self) -> None:
        """한쪽이 음수면 다른 쪽이 양수여도 InvalidAmount"""
        entry = DebtorEntry(
            date=DAY, debit_amount=Decimal("10"), credit_amount=Decimal("-5")
        )

        with pytest.raises(InvalidAmount):
            validate_two_sided(entry)

    def test_account_not_required(self) -> None:
        """양변 분개는 계정 없이도 통과"""
        validate_two_sided(GeneralJournalEntry(date=DAY, account=None, debit_amount=Decimal("1")))


class TestValidateOneSided:
    """단변 분개 검증 테스트"""

    def test_valid_income(self) -> None:
        """양수 금액 + 계정"""
        validate_one_sided(IncomeEntry(date=DAY, account="4000", amount=Decimal("200")))

    def test_zero_amount_rejected(self) -> None:
        """금액 0은 InvalidAmount"""
        with pytest.raises(InvalidAmount, match="greater than zero"):
            validate_one_sided(ExpenseEntry(date=DAY, account="5000", amount=Decimal("0")))

    def test_negative_amount_rejected(self) -> None:
        """음수 금액은 InvalidAmount"""
        with pytest.raises(InvalidAmount):
            validate_one_sided(IncomeEntry(date=DAY, account="4000", amount=Decimal("-1")))

    def test_blank_account_rejected(self) -> None:
        """계정이 공백이면 InvalidAmount"""
        with pytest.raises(InvalidAmount, match="Account is required"):
            validate_one_sided(IncomeEntry(date=DAY, account="   ", amount=Decimal("10")))


class TestValidateEntry:
    """유형별 검증기 분기 테스트"""

    def test_every_kind_has_validator(self) -> None:
        """모든 EntryKind에 검증기가 있음"""
        assert set(_VALIDATORS) == set(EntryKind)

    def test_dispatches_two_sided(self) -> None:
        """채권자 분개는 양변 규칙 적용"""
        with pytest.raises(BothAmountsSet):
            validate_entry(
                CreditorEntry(date=DAY, debit_amount=Decimal("1"), credit_amount=Decimal("1"))
            )

    def test_dispatches_one_sided(self) -> None:
        """지출 분개는 단변 규칙 적용"""
        with pytest.raises(InvalidAmount):
            validate_entry(ExpenseEntry(date=DAY, account="5000"))

    def test_all_errors_are_validation_errors(self) -> None:
        """검증 예외는 모두 ValidationError 계열"""
        assert issubclass(BothAmountsSet, ValidationError)
        assert issubclass(NoAmountSet, ValidationError)
        assert issubclass(InvalidAmount, ValidationError)


class TestValidateAccount:
    """계정과목 검증 테스트"""

    def test_valid(self) -> None:
        """code + name"""
        validate_account({"code": "1000", "name": "Cash", "type": "Asset"})

    def test_type_optional(self) -> None:
        """type 없이도 통과"""
        validate_account({"code": "1000", "name": "Cash"})

    def test_missing_code(self) -> None:
        """code 누락"""
        with pytest.raises(ValidationError, match="name and code are required"):
            validate_account({"name": "Cash"})

    def test_unknown_type(self) -> None:
        """알 수 없는 유형"""
        with pytest.raises(ValidationError, match="Unknown account type"):
            validate_account({"code": "9000", "name": "Other", "type": "contra"})


class TestValidateFixedAsset:
    """고정자산 검증 테스트"""

    def test_returns_value(self) -> None:
        """검증된 가액 반환"""
        assert validate_fixed_asset({"name": "Bus", "value": "25000.50"}) == Decimal("25000.50")

    def test_missing_name(self) -> None:
        """이름 누락"""
        with pytest.raises(ValidationError, match="Asset name is required"):
            validate_fixed_asset({"value": "100"})

    def test_zero_value(self) -> None:
        """가액 0"""
        with pytest.raises(InvalidAmount):
            validate_fixed_asset({"name": "Desk", "value": 0})

    def test_non_numeric_value(self) -> None:
        """숫자가 아닌 가액"""
        with pytest.raises(InvalidAmount):
            validate_fixed_asset({"name": "Desk", "value": "lots"})
