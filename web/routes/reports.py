"""
재무 보고서 API 라우트

조회 시점의 분개 컬렉션으로 매번 새로 계산 (캐시 없음)
"""

from fastapi import APIRouter, Depends, Query

from web.dependencies import get_finance_service
from web.errors import DOMAIN_ERRORS, to_http_exception
from web.models.responses import (
    IncomeStatementResponse,
    LedgerLineResponse,
    TrialBalanceResponse,
)
from web.services.finance_service import FinanceService

router = APIRouter(prefix="/api/finance/reports", tags=["Reports"])


@router.get("/general-ledger", response_model=list[LedgerLineResponse])
async def get_general_ledger(
    account: str | None = Query(default=None, description="계정 코드 (정확히 일치)"),
    start_date: str | None = Query(default=None, description="시작일 (포함)"),
    end_date: str | None = Query(default=None, description="종료일 (포함)"),
    service: FinanceService = Depends(get_finance_service),
):
    """총계정원장 (날짜순, 누적 잔액 포함)"""
    try:
        return await service.get_general_ledger(account, start_date, end_date)
    except DOMAIN_ERRORS as e:
        raise to_http_exception(e) from e


@router.get("/trial-balance", response_model=TrialBalanceResponse)
async def get_trial_balance(
    start_date: str | None = Query(default=None),
    end_date: str | None = Query(default=None),
    service: FinanceService = Depends(get_finance_service),
):
    """시산표 (활동이 있는 계정만, 계정과목표 순서)"""
    try:
        return await service.get_trial_balance(start_date, end_date)
    except DOMAIN_ERRORS as e:
        raise to_http_exception(e) from e


@router.get("/income-statement", response_model=IncomeStatementResponse)
async def get_income_statement(
    start_date: str | None = Query(default=None),
    end_date: str | None = Query(default=None),
    service: FinanceService = Depends(get_finance_service),
):
    """손익계산서 (수입/지출 컬렉션 기준)"""
    try:
        return await service.get_income_statement(start_date, end_date)
    except DOMAIN_ERRORS as e:
        raise to_http_exception(e) from e
