"""
기본 데이터

새 DB에 처음 저장되는 계정과목표.
"""

from core.types import AccountType

DEFAULT_CHART_OF_ACCOUNTS: list[dict[str, str]] = [
    {"code": "1000", "name": "Cash", "type": AccountType.ASSET.value},
    {"code": "1001", "name": "Bank Account", "type": AccountType.ASSET.value},
    {"code": "2000", "name": "Accounts Receivable", "type": AccountType.ASSET.value},
    {"code": "3000", "name": "Accounts Payable", "type": AccountType.LIABILITY.value},
    {"code": "4000", "name": "Tuition Income", "type": AccountType.REVENUE.value},
    {"code": "5000", "name": "Salary Expense", "type": AccountType.EXPENSE.value},
    {"code": "5001", "name": "Utility Expense", "type": AccountType.EXPENSE.value},
    {"code": "5002", "name": "Maintenance Expense", "type": AccountType.EXPENSE.value},
]
