"""Product sync endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from core.application.dtos.sync_dto import (
    CreateMappingRequest,
    LocalProductEntity,
    ProductMappingDTO,
    ReconcileSummary,
    SyncResult,
)
from core.application.services import ProductSyncService

from apps.api.deps import get_product_sync_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/sync", tags=["sync"])


@router.post("/products", response_model=SyncResult)
async def push_product(
    entity: LocalProductEntity,
    service: ProductSyncService = Depends(get_product_sync_service),
) -> SyncResult:
    """Publish a local entity; failures come back in the result body."""
    try:
        return await service.push_to_commerce_platform(entity)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/reconcile", response_model=ReconcileSummary)
async def reconcile_products(
    service: ProductSyncService = Depends(get_product_sync_service),
) -> ReconcileSummary:
    """Refresh every product mapping from the platform."""
    return await service.reconcile_products()


@router.post("/mappings", response_model=ProductMappingDTO, status_code=201)
async def register_mapping(
    request: CreateMappingRequest,
    service: ProductSyncService = Depends(get_product_sync_service),
) -> ProductMappingDTO:
    """Register an already-published product against a local entity."""
    mapping = await service.create_mapping(request)
    return ProductMappingDTO.from_entity(mapping)
