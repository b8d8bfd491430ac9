"""
재무 원장 집계 엔진

채무자/채권자/일반분개장/수입/지출 다섯 분개 컬렉션을
하나의 총계정원장으로 병합하고 시산표와 손익계산서를 산출.

사용 예시:
```python
from core.finance import FinanceStore
from core.storage import RecordStore

store = FinanceStore(RecordStore(db))

ledger = await store.build_ledger(account="1000")
trial_balance = await store.trial_balance("2024-01-01", "2024-01-31")
statement = await store.income_statement("2024-01-01", "2024-01-31")
```
"""

from core.finance.defaults import DEFAULT_CHART_OF_ACCOUNTS
from core.finance.entries import (
    Account,
    CreditorEntry,
    DebtorEntry,
    ExpenseEntry,
    GeneralJournalEntry,
    IncomeEntry,
    IncomeStatement,
    JournalEntry,
    LedgerLine,
    ReportPeriod,
    TrialBalanceRow,
    entry_from_record,
    entry_to_record,
)
from core.finance.errors import (
    BothAmountsSet,
    EntryDecodeError,
    InvalidAmount,
    NoAmountSet,
    ValidationError,
)
from core.finance.ledger import LedgerSnapshot, merge_ledger, with_running_balance
from core.finance.reports import (
    aggregate_income_statement,
    aggregate_trial_balance,
    trial_balance_totals,
)
from core.finance.store import FinanceStore
from core.finance.validation import (
    validate_account,
    validate_entry,
    validate_fixed_asset,
    validate_one_sided,
    validate_two_sided,
)

__all__ = [
    # 핵심 클래스
    "FinanceStore",
    "LedgerSnapshot",
    "DEFAULT_CHART_OF_ACCOUNTS",
    # 분개
    "DebtorEntry",
    "CreditorEntry",
    "GeneralJournalEntry",
    "IncomeEntry",
    "ExpenseEntry",
    "JournalEntry",
    "Account",
    "entry_from_record",
    "entry_to_record",
    # 파생 뷰
    "LedgerLine",
    "TrialBalanceRow",
    "IncomeStatement",
    "ReportPeriod",
    # 검증
    "ValidationError",
    "BothAmountsSet",
    "NoAmountSet",
    "InvalidAmount",
    "EntryDecodeError",
    "validate_two_sided",
    "validate_one_sided",
    "validate_entry",
    "validate_account",
    "validate_fixed_asset",
    # 집계
    "merge_ledger",
    "with_running_balance",
    "aggregate_trial_balance",
    "aggregate_income_statement",
    "trial_balance_totals",
]
