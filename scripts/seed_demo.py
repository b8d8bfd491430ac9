#!/usr/bin/env python3
"""
데모 데이터 시드 스크립트

기본 계정과목표와 샘플 분개를 DB에 저장.

실행 방법:
    python scripts/seed_demo.py
    python scripts/seed_demo.py --db data/demo.db --reset
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from adapters.db.sqlite_adapter import SQLiteAdapter, init_schema
from core.config.loader import get_settings
from core.finance import FinanceStore
from core.finance.defaults import DEFAULT_CHART_OF_ACCOUNTS
from core.logging import setup_logging
from core.storage.record_store import RecordStore
from core.types import Collections, ENTRY_COLLECTIONS, EntryKind

logger = logging.getLogger(__name__)

# (kind, record) - 2024년 1학기 샘플
DEMO_ENTRIES: list[tuple[EntryKind, dict]] = [
    (EntryKind.INCOME, {
        "date": "2024-01-05", "account": "4000", "description": "Term 1 tuition - Grade 7",
        "amount": "1200.00", "paymentMethod": "Bank Transfer",
    }),
    (EntryKind.INCOME, {
        "date": "2024-01-12", "account": "4000", "description": "Term 1 tuition - Grade 8",
        "amount": "950.00", "paymentMethod": "Mobile Money",
    }),
    (EntryKind.EXPENSE, {
        "date": "2024-01-15", "account": "5001", "description": "Electricity bill",
        "amount": "180.50", "paymentMethod": "Cash",
    }),
    (EntryKind.EXPENSE, {
        "date": "2024-01-31", "account": "5000", "description": "January salaries",
        "amount": "1400.00", "paymentMethod": "Bank Transfer",
    }),
    (EntryKind.JOURNAL, {
        "date": "2024-01-08", "account": "1000", "description": "Petty cash top-up",
        "debitAmount": "150.00", "reference": "JV-001",
    }),
    (EntryKind.JOURNAL, {
        "date": "2024-01-08", "account": "1001", "description": "Petty cash top-up",
        "creditAmount": "150.00", "reference": "JV-001",
    }),
    (EntryKind.DEBTOR, {
        "date": "2024-01-20", "account": "2000", "description": "Outstanding fees - J. Banda",
        "debitAmount": "300.00", "reference": "INV-1042",
    }),
    (EntryKind.CREDITOR, {
        "date": "2024-01-22", "account": "3000", "description": "Textbook supplier invoice",
        "creditAmount": "640.00", "reference": "SUP-778",
    }),
]


async def main(db_path: Path, reset: bool) -> None:
    db_path.parent.mkdir(parents=True, exist_ok=True)

    async with SQLiteAdapter(db_path) as db:
        await init_schema(db)
        records = RecordStore(db)

        if reset:
            for collection in (*ENTRY_COLLECTIONS.values(), Collections.CHART_OF_ACCOUNTS):
                await records.clear(collection)

        seeded = await records.init_default_data(
            Collections.CHART_OF_ACCOUNTS, DEFAULT_CHART_OF_ACCOUNTS
        )
        if not seeded:
            logger.info("계정과목표가 이미 존재하여 건너뜀")

        store = FinanceStore(records)
        for kind, data in DEMO_ENTRIES:
            await store.create_entry(kind, data)

        logger.info(f"데모 데이터 저장 완료: {len(DEMO_ENTRIES)}건 ({db_path})")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="데모 재무 데이터 시드")
    parser.add_argument(
        "--db",
        type=Path,
        default=None,
        help="DB 파일 경로 (기본: settings.yaml의 database.path)",
    )
    parser.add_argument(
        "--reset",
        action="store_true",
        help="분개/계정과목 컬렉션을 비운 뒤 저장",
    )
    args = parser.parse_args()

    setup_logging("cli")
    asyncio.run(main(args.db or get_settings().db_path, args.reset))
