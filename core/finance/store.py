"""
재무 저장소

분개/계정과목/고정자산 CRUD와 보고서 조회.
쓰기 전에 항상 검증하며, 보고서는 조회 시점의 컬렉션 스냅샷으로 매번 새로 계산.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import date
from typing import Any

from adapters.interfaces import IRecordStore, Record
from core.config.context import RequestContext
from core.finance.entries import (
    Account,
    IncomeStatement,
    JournalEntry,
    LedgerLine,
    TrialBalanceRow,
    account_from_record,
    coerce_date,
    entry_from_record,
    entry_to_record,
    format_amount,
)
from core.finance.ledger import LedgerSnapshot, merge_ledger, with_running_balance
from core.finance.reports import aggregate_income_statement, aggregate_trial_balance
from core.finance.validation import validate_account, validate_entry, validate_fixed_asset
from core.types import (
    Collections,
    ENTRY_COLLECTIONS,
    EntryKind,
    LEDGER_SOURCE_ORDER,
)

logger = logging.getLogger(__name__)


class FinanceStore:
    """재무 저장소

    IRecordStore 위에서 동작. 요청마다 RequestContext와 함께 생성.
    저장소 오류(레코드 없음, 연결 실패)는 잡지 않고 그대로 전파.

    Args:
        records: 레코드 저장소
        context: 요청 컨텍스트 (None이면 관리자 기본값)

    사용 예시:
    ```python
    store = FinanceStore(RecordStore(db), RequestContext(role="administrator"))

    await store.create_entry(EntryKind.INCOME, {
        "date": "2024-01-05", "account": "4000", "amount": "200",
    })

    ledger = await store.build_ledger(account="4000")
    trial_balance = await store.trial_balance(start_date=date(2024, 1, 1))
    statement = await store.income_statement("2024-01-01", "2024-01-31")
    ```
    """

    def __init__(self, records: IRecordStore, context: RequestContext | None = None):
        self.records = records
        self.context = context or RequestContext()

    # -------------------------------------------------------------------------
    # 분개 CRUD
    # -------------------------------------------------------------------------

    async def list_entries(self, kind: EntryKind | str) -> list[JournalEntry]:
        self.context.require_finance_access()
        kind = EntryKind(kind)
        rows = await self.records.get_all(ENTRY_COLLECTIONS[kind])
        return [entry_from_record(kind, r) for r in rows]

    async def get_entry(self, kind: EntryKind | str, entry_id: str) -> JournalEntry:
        self.context.require_finance_access()
        kind = EntryKind(kind)
        row = await self.records.get_by_id(ENTRY_COLLECTIONS[kind], entry_id)
        return entry_from_record(kind, row)

    async def create_entry(self, kind: EntryKind | str, data: Record) -> JournalEntry:
        """분개 생성

        Raises:
            ValidationError: 검증 실패 (저장소는 호출되지 않음)
        """
        self.context.require_finance_access()
        kind = EntryKind(kind)

        entry = entry_from_record(kind, data)
        validate_entry(entry)

        record = entry_to_record(entry)
        if data.get("id"):
            record["id"] = data["id"]

        created = await self.records.create(ENTRY_COLLECTIONS[kind], record)
        logger.info(f"Finance entry created: {kind.value}/{created['id']}")
        return entry_from_record(kind, created)

    async def update_entry(
        self,
        kind: EntryKind | str,
        entry_id: str,
        patch: Record,
    ) -> JournalEntry:
        """분개 부분 수정

        저장된 레코드에 patch를 병합한 결과를 검증한 뒤 저장.

        Raises:
            RecordNotFoundError: 분개가 없는 경우
            ValidationError: 병합 결과 검증 실패
        """
        self.context.require_finance_access()
        kind = EntryKind(kind)
        collection = ENTRY_COLLECTIONS[kind]

        existing = await self.records.get_by_id(collection, entry_id)
        entry = entry_from_record(kind, {**existing, **patch, "id": entry_id})
        validate_entry(entry)

        updated = await self.records.update(collection, entry_id, entry_to_record(entry))
        logger.info(f"Finance entry updated: {kind.value}/{entry_id}")
        return entry_from_record(kind, updated)

    async def delete_entry(self, kind: EntryKind | str, entry_id: str) -> None:
        self.context.require_finance_access()
        kind = EntryKind(kind)
        await self.records.delete(ENTRY_COLLECTIONS[kind], entry_id)
        logger.info(f"Finance entry deleted: {kind.value}/{entry_id}")

    # -------------------------------------------------------------------------
    # 계정과목표
    # -------------------------------------------------------------------------

    async def list_accounts(self) -> list[Account]:
        self.context.require_finance_access()
        rows = await self.records.get_all(Collections.CHART_OF_ACCOUNTS)
        return [account_from_record(r) for r in rows]

    async def get_account(self, account_id: str) -> Account:
        self.context.require_finance_access()
        row = await self.records.get_by_id(Collections.CHART_OF_ACCOUNTS, account_id)
        return account_from_record(row)

    async def create_account(self, data: Record) -> Account:
        self.context.require_finance_access()
        validate_account(data)

        record = _account_record(data)
        if data.get("id"):
            record["id"] = data["id"]

        created = await self.records.create(Collections.CHART_OF_ACCOUNTS, record)
        logger.info(f"Account created: {created['code']} {created['name']}")
        return account_from_record(created)

    async def update_account(self, account_id: str, patch: Record) -> Account:
        self.context.require_finance_access()
        existing = await self.records.get_by_id(Collections.CHART_OF_ACCOUNTS, account_id)
        merged = {**existing, **patch}
        validate_account(merged)

        updated = await self.records.update(
            Collections.CHART_OF_ACCOUNTS, account_id, _account_record(merged)
        )
        logger.info(f"Account updated: {updated['code']}")
        return account_from_record(updated)

    async def delete_account(self, account_id: str) -> None:
        self.context.require_finance_access()
        await self.records.delete(Collections.CHART_OF_ACCOUNTS, account_id)
        logger.info(f"Account deleted: {account_id}")

    # -------------------------------------------------------------------------
    # 고정자산
    # -------------------------------------------------------------------------

    async def list_assets(self) -> list[Record]:
        self.context.require_finance_access()
        return await self.records.get_all(Collections.FIXED_ASSETS)

    async def get_asset(self, asset_id: str) -> Record:
        self.context.require_finance_access()
        return await self.records.get_by_id(Collections.FIXED_ASSETS, asset_id)

    async def create_asset(self, data: Record) -> Record:
        self.context.require_finance_access()
        value = validate_fixed_asset(data)
        created = await self.records.create(
            Collections.FIXED_ASSETS, {**data, "value": format_amount(value)}
        )
        logger.info(f"Fixed asset created: {created['id']}")
        return created

    async def update_asset(self, asset_id: str, patch: Record) -> Record:
        self.context.require_finance_access()
        existing = await self.records.get_by_id(Collections.FIXED_ASSETS, asset_id)
        value = validate_fixed_asset({**existing, **patch})
        updated = await self.records.update(
            Collections.FIXED_ASSETS, asset_id, {**patch, "value": format_amount(value)}
        )
        logger.info(f"Fixed asset updated: {asset_id}")
        return updated

    async def delete_asset(self, asset_id: str) -> None:
        self.context.require_finance_access()
        await self.records.delete(Collections.FIXED_ASSETS, asset_id)
        logger.info(f"Fixed asset deleted: {asset_id}")

    # -------------------------------------------------------------------------
    # 보고서
    # -------------------------------------------------------------------------

    async def load_snapshot(self) -> LedgerSnapshot:
        """다섯 분개 컬렉션 동시 조회

        하나라도 실패하면 예외가 그대로 전파되어 보고서 전체가 실패.
        """
        rows = await asyncio.gather(
            *(self.records.get_all(ENTRY_COLLECTIONS[kind]) for kind in LEDGER_SOURCE_ORDER)
        )
        return LedgerSnapshot.from_records(dict(zip(LEDGER_SOURCE_ORDER, rows)))

    async def build_ledger(
        self,
        account: str | None = None,
        start_date: date | str | None = None,
        end_date: date | str | None = None,
    ) -> list[LedgerLine]:
        """총계정원장 (누적 잔액 포함)

        Args:
            account: 계정 코드 (정확히 일치)
            start_date: 시작일 (포함)
            end_date: 종료일 (포함)
        """
        self.context.require_finance_access()
        start, end = coerce_date(start_date), coerce_date(end_date)

        snapshot = await self.load_snapshot()
        lines = with_running_balance(merge_ledger(snapshot, account, start, end))

        logger.debug(
            f"General ledger built: {len(lines)} lines "
            f"(account={account}, start={start}, end={end})"
        )
        return lines

    async def trial_balance(
        self,
        start_date: date | str | None = None,
        end_date: date | str | None = None,
    ) -> list[TrialBalanceRow]:
        """시산표 (활동이 있는 계정만)"""
        self.context.require_finance_access()
        start, end = coerce_date(start_date), coerce_date(end_date)

        account_rows, snapshot = await asyncio.gather(
            self.records.get_all(Collections.CHART_OF_ACCOUNTS),
            self.load_snapshot(),
        )
        accounts = [account_from_record(r) for r in account_rows]
        lines = merge_ledger(snapshot, None, start, end)

        rows = aggregate_trial_balance(
            accounts, lines, default_account_type=self.context.default_account_type
        )
        logger.debug(f"Trial balance built: {len(rows)} accounts (start={start}, end={end})")
        return rows

    async def income_statement(
        self,
        start_date: date | str | None = None,
        end_date: date | str | None = None,
    ) -> IncomeStatement:
        """손익계산서 (수입/지출 컬렉션만 사용)"""
        self.context.require_finance_access()
        start, end = coerce_date(start_date), coerce_date(end_date)

        income_rows, expense_rows = await asyncio.gather(
            self.records.get_all(ENTRY_COLLECTIONS[EntryKind.INCOME]),
            self.records.get_all(ENTRY_COLLECTIONS[EntryKind.EXPENSE]),
        )
        statement = aggregate_income_statement(
            [entry_from_record(EntryKind.INCOME, r) for r in income_rows],
            [entry_from_record(EntryKind.EXPENSE, r) for r in expense_rows],
            start,
            end,
        )
        logger.debug(
            f"Income statement built: income={statement.income}, "
            f"expenses={statement.expenses}, net={statement.net_income}"
        )
        return statement


def _account_record(data: dict[str, Any]) -> Record:
    account_type = data.get("type")
    return {
        "code": str(data["code"]).strip(),
        "name": str(data["name"]).strip(),
        "type": str(account_type).lower() if account_type else None,
    }
