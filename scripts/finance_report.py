#!/usr/bin/env python3
"""
재무 보고서 출력 스크립트

총계정원장, 시산표, 손익계산서를 콘솔에 출력.

실행 방법:
    python scripts/finance_report.py
    python scripts/finance_report.py --account 1000 --start 2024-01-01 --end 2024-01-31
"""

import argparse
import asyncio
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.config.context import RequestContext
from core.config.loader import get_settings
from core.finance import FinanceStore, trial_balance_totals
from core.logging import setup_logging
from core.storage.record_store import RecordStore


async def main(db_path: Path, account: str | None, start: str | None, end: str | None) -> None:
    settings = get_settings()
    context = RequestContext(
        default_account_type=settings.default_account_type,
        finance_roles=settings.finance_roles,
    )

    async with SQLiteAdapter(db_path) as db:
        store = FinanceStore(RecordStore(db), context)

        lines = await store.build_ledger(account, start, end)
        rows = await store.trial_balance(start, end)
        statement = await store.income_statement(start, end)

    print(f"DB Path: {db_path}")
    print(f"Period: {start or '-'} ~ {end or '-'}")

    print(f"\n[General Ledger] account={account or 'ALL'} ({len(lines)} lines)")
    print(f"  {'date':<10}  {'account':<8}  {'source':<8}  {'debit':>12}  {'credit':>12}  {'balance':>12}")
    for line in lines:
        print(
            f"  {line.date.isoformat():<10}  {line.account or '-':<8}  {line.source_type.value:<8}  "
            f"{line.debit:>12}  {line.credit:>12}  {line.balance:>12}"
        )

    print(f"\n[Trial Balance] ({len(rows)} accounts)")
    for row in rows:
        print(f"  {row.code:<6}  {row.name:<24}  {row.type:<10}  {row.debit:>12}  {row.credit:>12}")
    total_debit, total_credit = trial_balance_totals(rows)
    print(f"  {'TOTAL':<44}{total_debit:>12}  {total_credit:>12}")

    print("\n[Income Statement]")
    print(f"  Income:     {statement.income}")
    print(f"  Expenses:   {statement.expenses}")
    print(f"  Net income: {statement.net_income}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="재무 보고서 출력")
    parser.add_argument("--db", type=Path, default=None, help="DB 파일 경로")
    parser.add_argument("--account", default=None, help="원장 계정 코드 필터")
    parser.add_argument("--start", default=None, help="시작일 (YYYY-MM-DD, 포함)")
    parser.add_argument("--end", default=None, help="종료일 (YYYY-MM-DD, 포함)")
    args = parser.parse_args()

    setup_logging("cli")
    asyncio.run(main(args.db or get_settings().db_path, args.account, args.start, args.end))
