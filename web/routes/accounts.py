"""
계정과목 API 라우트

/api/finance/accounts - 계정과목표 CRUD
"""

from fastapi import APIRouter, Depends, Response, status

from web.dependencies import get_finance_service
from web.errors import DOMAIN_ERRORS, to_http_exception
from web.models.requests import AccountRequest
from web.models.responses import AccountResponse
from web.services.finance_service import FinanceService

router = APIRouter(prefix="/api/finance/accounts", tags=["Accounts"])


@router.get("", response_model=list[AccountResponse])
async def list_accounts(
    service: FinanceService = Depends(get_finance_service),
):
    """계정과목표 (등록 순서)"""
    try:
        return await service.list_accounts()
    except DOMAIN_ERRORS as e:
        raise to_http_exception(e) from e


@router.post("", response_model=AccountResponse, status_code=status.HTTP_201_CREATED)
async def create_account(
    request: AccountRequest,
    service: FinanceService = Depends(get_finance_service),
):
    try:
        return await service.create_account(request.to_record())
    except DOMAIN_ERRORS as e:
        raise to_http_exception(e) from e


@router.get("/{account_id}", response_model=AccountResponse)
async def get_account(
    account_id: str,
    service: FinanceService = Depends(get_finance_service),
):
    try:
        return await service.get_account(account_id)
    except DOMAIN_ERRORS as e:
        raise to_http_exception(e) from e


@router.put("/{account_id}", response_model=AccountResponse)
async def update_account(
    account_id: str,
    request: AccountRequest,
    service: FinanceService = Depends(get_finance_service),
):
    try:
        return await service.update_account(account_id, request.to_record(partial=True))
    except DOMAIN_ERRORS as e:
        raise to_http_exception(e) from e


@router.delete("/{account_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_account(
    account_id: str,
    service: FinanceService = Depends(get_finance_service),
):
    try:
        await service.delete_account(account_id)
    except DOMAIN_ERRORS as e:
        raise to_http_exception(e) from e
    return Response(status_code=status.HTTP_204_NO_CONTENT)
