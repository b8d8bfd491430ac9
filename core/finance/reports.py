"""
시산표 / 손익계산서 집계

시산표는 병합된 원장 라인을 계정과목별로 합산.
손익계산서는 원장을 거치지 않고 수입/지출 분개를 직접 합산.

주의: 수입/지출은 상대 계정 없이 원장에 들어가므로
시산표의 차변 합계 = 대변 합계가 보장되지 않음. 집계만 하고 검증하지 않음.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Iterable, Sequence

from core.constants import Defaults
from core.finance.entries import (
    ZERO,
    Account,
    IncomeStatement,
    LedgerLine,
    OneSidedEntry,
    ReportPeriod,
    TrialBalanceRow,
)


def aggregate_trial_balance(
    accounts: Sequence[Account],
    lines: Iterable[LedgerLine],
    default_account_type: str = Defaults.ACCOUNT_TYPE,
) -> list[TrialBalanceRow]:
    """계정과목별 차변/대변 합계

    계정과목표 전체를 후보로 두고, 계정과목표에 없는 계정의 라인은 무시.
    차변/대변 합계가 모두 0인 계정은 결과에서 제외.

    Args:
        accounts: 계정과목표 (결과 순서 = 계정과목표 순서)
        lines: 병합된 원장 라인
        default_account_type: 유형이 없는 계정에 적용할 유형

    Returns:
        활동이 있는 계정의 시산표 행
    """
    # 같은 code가 여러 번 나오면 마지막 레코드가 이기고 위치는 처음 것 유지
    chart: dict[str, Account] = {}
    for account in accounts:
        chart[account.code] = account

    totals: dict[str, list[Decimal]] = {code: [ZERO, ZERO] for code in chart}

    for line in lines:
        if line.account and line.account in totals:
            totals[line.account][0] += line.debit
            totals[line.account][1] += line.credit

    return [
        TrialBalanceRow(
            code=code,
            name=chart[code].name,
            type=chart[code].type or default_account_type,
            debit=debit,
            credit=credit,
        )
        for code, (debit, credit) in totals.items()
        if debit > ZERO or credit > ZERO
    ]


def trial_balance_totals(rows: Iterable[TrialBalanceRow]) -> tuple[Decimal, Decimal]:
    """시산표 차변/대변 총계 (표시용, 균형 검증 아님)"""
    total_debit = ZERO
    total_credit = ZERO
    for row in rows:
        total_debit += row.debit
        total_credit += row.credit
    return total_debit, total_credit


def sum_amounts(entries: Iterable[OneSidedEntry], period: ReportPeriod) -> Decimal:
    return sum(
        (entry.amount for entry in entries if period.contains(entry.date)),
        ZERO,
    )


def aggregate_income_statement(
    income_entries: Iterable[OneSidedEntry],
    expense_entries: Iterable[OneSidedEntry],
    start_date: date | None = None,
    end_date: date | None = None,
) -> IncomeStatement:
    """손익계산서

    income = 기간 내 수입 금액 합계, expenses = 기간 내 지출 금액 합계,
    net_income = income - expenses. 기간 경계 포함.
    """
    period = ReportPeriod(start_date, end_date)
    income = sum_amounts(income_entries, period)
    expenses = sum_amounts(expense_entries, period)
    return IncomeStatement(
        income=income,
        expenses=expenses,
        net_income=income - expenses,
        period=period,
    )
