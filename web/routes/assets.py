"""
고정자산 API 라우트

/api/finance/assets - 고정자산 대장 CRUD
"""

from fastapi import APIRouter, Depends, Response, status

from web.dependencies import get_finance_service
from web.errors import DOMAIN_ERRORS, to_http_exception
from web.models.requests import AssetRequest
from web.models.responses import AssetResponse
from web.services.finance_service import FinanceService

router = APIRouter(prefix="/api/finance/assets", tags=["Assets"])


@router.get("", response_model=list[AssetResponse])
async def list_assets(
    service: FinanceService = Depends(get_finance_service),
):
    try:
        return await service.list_assets()
    except DOMAIN_ERRORS as e:
        raise to_http_exception(e) from e


@router.post("", response_model=AssetResponse, status_code=status.HTTP_201_CREATED)
async def create_asset(
    request: AssetRequest,
    service: FinanceService = Depends(get_finance_service),
):
    """고정자산 등록 (name, value > 0 필수)"""
    try:
        return await service.create_asset(request.to_record())
    except DOMAIN_ERRORS as e:
        raise to_http_exception(e) from e


@router.get("/{asset_id}", response_model=AssetResponse)
async def get_asset(
    asset_id: str,
    service: FinanceService = Depends(get_finance_service),
):
    try:
        return await service.get_asset(asset_id)
    except DOMAIN_ERRORS as e:
        raise to_http_exception(e) from e


@router.put("/{asset_id}", response_model=AssetResponse)
async def update_asset(
    asset_id: str,
    request: AssetRequest,
    service: FinanceService = Depends(get_finance_service),
):
    try:
        return await service.update_asset(asset_id, request.to_record(partial=True))
    except DOMAIN_ERRORS as e:
        raise to_http_exception(e) from e


@router.delete("/{asset_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_asset(
    asset_id: str,
    service: FinanceService = Depends(get_finance_service),
):
    try:
        await service.delete_asset(asset_id)
    except DOMAIN_ERRORS as e:
        raise to_http_exception(e) from e
    return Response(status_code=status.HTTP_204_NO_CONTENT)
