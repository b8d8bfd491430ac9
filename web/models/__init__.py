"""
Web 모델 패키지

Pydantic 스키마 정의
"""

from web.models.requests import (
    AccountRequest,
    AssetRequest,
    EntryRequest,
)
from web.models.responses import (
    AccountResponse,
    AssetResponse,
    EntryResponse,
    HealthResponse,
    IncomeStatementResponse,
    LedgerLineResponse,
    TrialBalanceResponse,
    TrialBalanceRowResponse,
)

__all__ = [
    # Requests
    "EntryRequest",
    "AccountRequest",
    "AssetRequest",
    # Responses
    "HealthResponse",
    "EntryResponse",
    "AccountResponse",
    "AssetResponse",
    "LedgerLineResponse",
    "TrialBalanceRowResponse",
    "TrialBalanceResponse",
    "IncomeStatementResponse",
]
