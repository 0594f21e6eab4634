"""Order endpoints for REST API."""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query

from core.application.dtos.download_dto import DigitalAssetDTO
from core.application.dtos.order_dto import OrderSummaryDTO, UpdateOrderStatusRequest
from core.application.services import DigitalAssetService, OrderReconciler

from apps.api.deps import get_digital_asset_service, get_order_reconciler

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/orders", tags=["orders"])

ORDER_NOT_FOUND = "Order not found, check your details"


@router.get("/lookup", response_model=OrderSummaryDTO)
async def lookup_order(
    order_number: str = Query(..., min_length=1),
    email: str = Query(..., min_length=3),
    reconciler: OrderReconciler = Depends(get_order_reconciler),
) -> OrderSummaryDTO:
    """Customer order lookup by order number and email.

    Raises:
        HTTPException: 404 if the pair does not match an order
    """
    order = await reconciler.verify_order_access(order_number, email)
    if order is None:
        raise HTTPException(status_code=404, detail=ORDER_NOT_FOUND)
    return OrderSummaryDTO.from_entity(order)


@router.get("/{order_id}/downloads", response_model=List[DigitalAssetDTO])
async def list_order_downloads(
    order_id: str,
    service: DigitalAssetService = Depends(get_digital_asset_service),
) -> List[DigitalAssetDTO]:
    """Digital assets issued for an order, newest first."""
    assets = await service.get_order_downloads(order_id)
    return [DigitalAssetDTO.from_entity(asset) for asset in assets]


@router.post("/{order_id}/status", response_model=OrderSummaryDTO)
async def update_order_status(
    order_id: str,
    request: UpdateOrderStatusRequest,
    reconciler: OrderReconciler = Depends(get_order_reconciler),
) -> OrderSummaryDTO:
    """Manual status change; 404 via OrderNotFoundError handler."""
    order = await reconciler.update_status(order_id, request.status, send_email=request.send_email)
    return OrderSummaryDTO.from_entity(order)
