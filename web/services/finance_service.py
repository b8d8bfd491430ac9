"""
재무 서비스

FinanceStore 결과를 API 응답용 dict로 변환.
금액은 문자열, 날짜는 ISO 문자열로 직렬화.
"""

import logging
from typing import Any

from adapters.interfaces import IRecordStore, Record
from core.config.context import RequestContext
from core.finance import (
    Account,
    FinanceStore,
    IncomeStatement,
    JournalEntry,
    LedgerLine,
    ReportPeriod,
    TrialBalanceRow,
    trial_balance_totals,
)
from core.finance.entries import OneSidedEntry, coerce_date, format_amount
from core.types import EntryKind

logger = logging.getLogger(__name__)


def serialize_entry(entry: JournalEntry) -> dict[str, Any]:
    data: dict[str, Any] = {
        "id": entry.entry_id,
        "kind": entry.kind.value,
        "date": entry.date.isoformat(),
        "account": entry.account,
        "description": entry.description,
        "notes": entry.notes,
    }
    if isinstance(entry, OneSidedEntry):
        data["amount"] = format_amount(entry.amount)
        data["payment_method"] = entry.payment_method
    else:
        data["debit_amount"] = format_amount(entry.debit_amount)
        data["credit_amount"] = format_amount(entry.credit_amount)
        data["reference"] = entry.reference
    return data


def serialize_account(account: Account) -> dict[str, Any]:
    return {
        "id": account.account_id,
        "code": account.code,
        "name": account.name,
        "type": account.type,
    }


def serialize_ledger_line(line: LedgerLine) -> dict[str, Any]:
    return {
        "date": line.date.isoformat(),
        "account": line.account,
        "debit": format_amount(line.debit),
        "credit": format_amount(line.credit),
        "balance": format_amount(line.balance),
        "source_type": line.source_type.value,
        "entry_id": line.entry_id,
        "description": line.description,
        "reference": line.reference,
    }


def serialize_trial_balance_row(row: TrialBalanceRow) -> dict[str, Any]:
    return {
        "code": row.code,
        "name": row.name,
        "type": row.type,
        "debit": format_amount(row.debit),
        "credit": format_amount(row.credit),
    }


def serialize_period(period: ReportPeriod) -> dict[str, Any]:
    return {
        "start_date": period.start_date.isoformat() if period.start_date else None,
        "end_date": period.end_date.isoformat() if period.end_date else None,
    }


def serialize_income_statement(statement: IncomeStatement) -> dict[str, Any]:
    return {
        "income": format_amount(statement.income),
        "expenses": format_amount(statement.expenses),
        "net_income": format_amount(statement.net_income),
        "period": serialize_period(statement.period),
    }


class FinanceService:
    """재무 API 서비스

    요청마다 RequestContext와 함께 생성되며 FinanceStore에 위임.
    도메인 예외(ValidationError, RecordNotFoundError, PermissionError)는
    그대로 전파되며 라우트에서 web.errors를 통해 HTTP 상태로 변환됨.
    """

    def __init__(self, records: IRecordStore, context: RequestContext):
        self.store = FinanceStore(records, context)

    # 분개

    async def list_entries(self, kind: EntryKind) -> list[dict[str, Any]]:
        entries = await self.store.list_entries(kind)
        return [serialize_entry(e) for e in entries]

    async def get_entry(self, kind: EntryKind, entry_id: str) -> dict[str, Any]:
        return serialize_entry(await self.store.get_entry(kind, entry_id))

    async def create_entry(self, kind: EntryKind, data: Record) -> dict[str, Any]:
        return serialize_entry(await self.store.create_entry(kind, data))

    async def update_entry(self, kind: EntryKind, entry_id: str, patch: Record) -> dict[str, Any]:
        return serialize_entry(await self.store.update_entry(kind, entry_id, patch))

    async def delete_entry(self, kind: EntryKind, entry_id: str) -> None:
        await self.store.delete_entry(kind, entry_id)

    # 계정과목

    async def list_accounts(self) -> list[dict[str, Any]]:
        return [serialize_account(a) for a in await self.store.list_accounts()]

    async def get_account(self, account_id: str) -> dict[str, Any]:
        return serialize_account(await self.store.get_account(account_id))

    async def create_account(self, data: Record) -> dict[str, Any]:
        return serialize_account(await self.store.create_account(data))

    async def update_account(self, account_id: str, patch: Record) -> dict[str, Any]:
        return serialize_account(await self.store.update_account(account_id, patch))

    async def delete_account(self, account_id: str) -> None:
        await self.store.delete_account(account_id)

    # 고정자산 (저장 레코드를 그대로 반환)

    async def list_assets(self) -> list[Record]:
        return await self.store.list_assets()

    async def get_asset(self, asset_id: str) -> Record:
        return await self.store.get_asset(asset_id)

    async def create_asset(self, data: Record) -> Record:
        return await self.store.create_asset(data)

    async def update_asset(self, asset_id: str, patch: Record) -> Record:
        return await self.store.update_asset(asset_id, patch)

    async def delete_asset(self, asset_id: str) -> None:
        await self.store.delete_asset(asset_id)

    # 보고서

    async def get_general_ledger(
        self,
        account: str | None = None,
        start_date: str | None = None,
        end_date: str | None = None,
    ) -> list[dict[str, Any]]:
        lines = await self.store.build_ledger(account, start_date, end_date)
        return [serialize_ledger_line(line) for line in lines]

    async def get_trial_balance(
        self,
        start_date: str | None = None,
        end_date: str | None = None,
    ) -> dict[str, Any]:
        """시산표 + 차변/대변 총계

        총계 불일치는 보고만 하고 오류로 취급하지 않음.
        """
        rows = await self.store.trial_balance(start_date, end_date)
        total_debit, total_credit = trial_balance_totals(rows)
        if total_debit != total_credit:
            logger.debug(f"Trial balance totals differ: debit={total_debit}, credit={total_credit}")

        period = ReportPeriod(coerce_date(start_date), coerce_date(end_date))
        return {
            "rows": [serialize_trial_balance_row(r) for r in rows],
            "total_debit": format_amount(total_debit),
            "total_credit": format_amount(total_credit),
            "period": serialize_period(period),
        }

    async def get_income_statement(
        self,
        start_date: str | None = None,
        end_date: str | None = None,
    ) -> dict[str, Any]:
        statement = await self.store.income_statement(start_date, end_date)
        return serialize_income_statement(statement)
