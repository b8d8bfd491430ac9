"""
분개 API 라우트

/api/finance/entries/{kind} - 채무자/채권자/일반분개장/수입/지출 분개 CRUD
"""

from fastapi import APIRouter, Depends, Response, status

from core.types import EntryKind
from web.dependencies import get_finance_service
from web.errors import DOMAIN_ERRORS, to_http_exception
from web.models.requests import EntryRequest
from web.models.responses import EntryResponse
from web.services.finance_service import FinanceService

router = APIRouter(prefix="/api/finance/entries", tags=["Entries"])


@router.get("/{kind}", response_model=list[EntryResponse])
async def list_entries(
    kind: EntryKind,
    service: FinanceService = Depends(get_finance_service),
):
    """분개 목록 (저장 순서)"""
    try:
        return await service.list_entries(kind)
    except DOMAIN_ERRORS as e:
        raise to_http_exception(e) from e


@router.post("/{kind}", response_model=EntryResponse, status_code=status.HTTP_201_CREATED)
async def create_entry(
    kind: EntryKind,
    request: EntryRequest,
    service: FinanceService = Depends(get_finance_service),
):
    """분개 생성

    검증 실패 시 422 (code: BothAmountsSet/NoAmountSet/InvalidAmount/InvalidEntry)
    """
    try:
        return await service.create_entry(kind, request.to_record())
    except DOMAIN_ERRORS as e:
        raise to_http_exception(e) from e


@router.get("/{kind}/{entry_id}", response_model=EntryResponse)
async def get_entry(
    kind: EntryKind,
    entry_id: str,
    service: FinanceService = Depends(get_finance_service),
):
    try:
        return await service.get_entry(kind, entry_id)
    except DOMAIN_ERRORS as e:
        raise to_http_exception(e) from e


@router.put("/{kind}/{entry_id}", response_model=EntryResponse)
async def update_entry(
    kind: EntryKind,
    entry_id: str,
    request: EntryRequest,
    service: FinanceService = Depends(get_finance_service),
):
    """분개 부분 수정 (요청에 포함된 필드만 반영)"""
    try:
        return await service.update_entry(kind, entry_id, request.to_record(partial=True))
    except DOMAIN_ERRORS as e:
        raise to_http_exception(e) from e


@router.delete("/{kind}/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_entry(
    kind: EntryKind,
    entry_id: str,
    service: FinanceService = Depends(get_finance_service),
):
    try:
        await service.delete_entry(kind, entry_id)
    except DOMAIN_ERRORS as e:
        raise to_http_exception(e) from e
    return Response(status_code=status.HTTP_204_NO_CONTENT)
