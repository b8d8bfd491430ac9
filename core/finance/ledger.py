"""
총계정원장 병합 / 잔액 누적

다섯 개 분개 컬렉션을 공통 LedgerLine 형태로 정규화하고
계정/기간 필터 후 날짜 오름차순으로 병합.

같은 날짜의 순서:
    컬렉션 방문 순서(debtor → creditor → journal → income → expense),
    컬렉션 내에서는 저장 순서. 정렬은 안정 정렬.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Callable, Iterable, Mapping, Sequence

from core.finance.entries import (
    ZERO,
    JournalEntry,
    LedgerLine,
    OneSidedEntry,
    ReportPeriod,
    TwoSidedEntry,
    entry_from_record,
)
from core.types import EntryKind, LEDGER_SOURCE_ORDER


@dataclass(frozen=True)
class LedgerSnapshot:
    """한 시점에 조회한 다섯 컬렉션의 분개"""

    entries: Mapping[EntryKind, Sequence[JournalEntry]] = field(default_factory=dict)

    @classmethod
    def from_records(cls, records: Mapping[EntryKind, Iterable[dict[str, Any]]]) -> "LedgerSnapshot":
        """컬렉션별 저장 레코드에서 생성"""
        return cls(
            entries={
                kind: [entry_from_record(kind, r) for r in rows]
                for kind, rows in records.items()
            }
        )

    def iter_entries(self) -> Iterable[JournalEntry]:
        """고정된 컬렉션 순서로 분개 순회"""
        for kind in LEDGER_SOURCE_ORDER:
            yield from self.entries.get(kind, ())


def _two_sided_line(entry: TwoSidedEntry) -> LedgerLine:
    return LedgerLine(
        date=entry.date,
        account=entry.account,
        debit=entry.debit_amount,
        credit=entry.credit_amount,
        source_type=entry.kind,
        entry_id=entry.entry_id,
        description=entry.description,
        reference=entry.reference,
    )


def _income_line(entry: OneSidedEntry) -> LedgerLine:
    # 수입은 대변
    return LedgerLine(
        date=entry.date,
        account=entry.account,
        debit=ZERO,
        credit=entry.amount,
        source_type=entry.kind,
        entry_id=entry.entry_id,
        description=entry.description,
    )


def _expense_line(entry: OneSidedEntry) -> LedgerLine:
    # 지출은 차변
    return LedgerLine(
        date=entry.date,
        account=entry.account,
        debit=entry.amount,
        credit=ZERO,
        source_type=entry.kind,
        entry_id=entry.entry_id,
        description=entry.description,
    )


_LINE_BUILDERS: dict[EntryKind, Callable[[Any], LedgerLine]] = {
    EntryKind.DEBTOR: _two_sided_line,
    EntryKind.CREDITOR: _two_sided_line,
    EntryKind.JOURNAL: _two_sided_line,
    EntryKind.INCOME: _income_line,
    EntryKind.EXPENSE: _expense_line,
}


def to_ledger_line(entry: JournalEntry) -> LedgerLine:
    """분개 → 원장 라인 (잔액 0)"""
    return _LINE_BUILDERS[entry.kind](entry)


def matches_account(entry_account: str | None, account: str | None) -> bool:
    """계정 필터 (정확히 일치, 필터가 비어 있으면 전체)"""
    if not account:
        return True
    return entry_account == account


def merge_ledger(
    snapshot: LedgerSnapshot,
    account: str | None = None,
    start_date: date | None = None,
    end_date: date | None = None,
) -> list[LedgerLine]:
    """분개 병합

    필터(계정, 경계 포함 기간)를 다섯 출처에 동일하게 적용하고
    날짜 오름차순으로 안정 정렬. balance는 0으로 남김.

    Args:
        snapshot: 조회한 분개 스냅샷
        account: 계정 코드 (None이면 전체)
        start_date: 시작일 (포함)
        end_date: 종료일 (포함)

    Returns:
        날짜순 LedgerLine 목록
    """
    period = ReportPeriod(start_date, end_date)

    lines = [
        to_ledger_line(entry)
        for entry in snapshot.iter_entries()
        if matches_account(entry.account, account) and period.contains(entry.date)
    ]
    lines.sort(key=lambda line: line.date)
    return lines


def with_running_balance(lines: Sequence[LedgerLine]) -> list[LedgerLine]:
    """누적 잔액 계산

    balance[i] = balance[i-1] + debit[i] - credit[i], 항상 0에서 시작.
    입력은 변경하지 않고 새 라인 목록 반환.
    """
    balance = ZERO
    result: list[LedgerLine] = []
    for line in lines:
        balance = balance + line.debit - line.credit
        result.append(dataclasses.replace(line, balance=balance))
    return result
