"""Proxy API router: transaction append plus the lookup listings.

All endpoints require the client bearer key and return ApiResponse.
request_id is read from request.state (injected by RequestLogMiddleware).
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from config.settings import settings
from src.ps_common.errors import BadRequestError
from src.ps_common.response import ApiResponse, success_response
from src.ps_gateway.api.dependencies import get_transaction_service
from src.ps_gateway.api.schemas import (
    AccountItem,
    ItemsResponse,
    ShortcutEntitiesResponse,
    parse_add_transaction,
)
from src.ps_gateway.auth.dependencies import require_client_key
from src.ps_transaction.application.service import TransactionService

router = APIRouter(tags=["transactions"], dependencies=[Depends(require_client_key)])

ServiceDep = Annotated[TransactionService, Depends(get_transaction_service)]


@router.post("/transactions/append", response_model=ApiResponse)
async def append_transaction(request: Request, service: ServiceDep) -> ApiResponse:
    media_type = request.headers.get("content-type", "").split(";")[0].strip()
    if media_type != "application/json":
        raise BadRequestError()
    tx = parse_add_transaction(
        await request.body(),
        category_required=settings.ROUTING_MODE.requires_category,
    )
    await service.add_transaction(tx)
    return success_response({"result": "ok"}, request)


@router.get("/categories", response_model=ApiResponse)
async def list_categories(request: Request, service: ServiceDep) -> ApiResponse:
    titles = await service.list_categories()
    return success_response(ItemsResponse(items=titles).model_dump(), request)


@router.get("/accounts", response_model=ApiResponse)
async def list_accounts(request: Request, service: ServiceDep) -> ApiResponse:
    accounts = await service.list_accounts()
    items = [AccountItem(name=a.name, currency=a.currency) for a in accounts]
    return success_response(ItemsResponse(items=items).model_dump(), request)


@router.get("/shortcut_entities", response_model=ApiResponse)
async def get_shortcut_entities(request: Request, service: ServiceDep) -> ApiResponse:
    entities = await service.get_shortcut_entities()
    data = ShortcutEntitiesResponse(
        accounts=[AccountItem(name=a.name, currency=a.currency) for a in entities.accounts],
        categories=entities.categories,
    )
    return success_response(data.model_dump(), request)
