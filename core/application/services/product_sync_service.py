"""
Product Mapping Sync Engine.

Pushes local entities to the commerce platform and pulls platform
products back into mapping records. Each mapping's sync status goes
pending -> syncing -> {synced | error}; failures stay in `error` until
the next push or reconciliation run.
"""
from typing import Any, Dict, Optional
import logging
import time

from sqlalchemy.ext.asyncio import async_sessionmaker

from core.application.dtos.sync_dto import (
    CreateMappingRequest,
    LocalProductEntity,
    ReconcileSummary,
    SyncResult,
)
from core.application.interfaces import ICommerceGateway
from core.data.uow import UnitOfWork, create_uow
from core.domain.entities import ProductMapping, SyncLogEntry
from core.domain.enums import (
    SyncLogStatus,
    SyncOperationType,
    SyncStatus,
    map_product_type,
)
from core.domain.errors import CommerceGatewayError
from core.domain.value_objects import utcnow
from core.infrastructure.logging import bind_execution
from core.infrastructure.marketplace.shopify.mapper import ShopifyProductMapper


logger = logging.getLogger(__name__)


class ProductSyncService:
    """
    Service for syncing product mappings.

    Usage:
        service = ProductSyncService(session_factory, shopify_client)

        # Publish one local entity
        result = await service.push_to_commerce_platform(entity)

        # Refresh every mapping from the platform
        summary = await service.reconcile_products()
    """

    def __init__(self, session_factory: async_sessionmaker, gateway: ICommerceGateway):
        """
        Initialize service.

        Args:
            session_factory: Session factory for database operations
            gateway: Commerce platform client
        """
        self._session_factory = session_factory
        self._gateway = gateway

    # ------------------------------------------------------------------
    # Push
    # ------------------------------------------------------------------

    async def push_to_commerce_platform(self, entity: LocalProductEntity) -> SyncResult:
        """
        Create or update the platform product for a local entity.

        Args:
            entity: Local entity to publish

        Returns:
            SyncResult; gateway failures are reported, not raised

        Raises:
            ValueError: If entity.mapping_id names an unknown mapping
        """
        async with create_uow(self._session_factory) as uow:
            log = bind_execution(logger, uow.execution_id)

            mapping = await self._find_push_target(uow, entity)
            if mapping is None:
                mapping = ProductMapping(
                    local_type=entity.local_type,
                    local_id=entity.local_id,
                    product_type=map_product_type(entity.product_category),
                    product_category=entity.product_category,
                    source_memoir_id=entity.source_memoir_id,
                )
                await uow.product_mappings.add(mapping)
                log.info(f"Created pending mapping {mapping.id} for {entity.local_type.value}:{entity.local_id}")
            elif entity.product_category is not None:
                mapping.product_category = entity.product_category
                mapping.product_type = map_product_type(entity.product_category)

            mapping.mark_syncing()
            await uow.product_mappings.update(mapping)
            await uow.commit()

            payload = ShopifyProductMapper.to_product_payload(entity)
            operation = SyncOperationType.UPDATE if mapping.platform_product_id else SyncOperationType.CREATE

            try:
                if operation == SyncOperationType.UPDATE:
                    product = await self._gateway.update_product(mapping.platform_product_id, payload)
                else:
                    product = await self._gateway.create_product(payload)
                product_id, variant_id = ShopifyProductMapper.extract_ids(product)
                if operation == SyncOperationType.CREATE and not product_id:
                    raise CommerceGatewayError("Platform returned no product id", status_code=None)
            except CommerceGatewayError as e:
                log.error(f"❌ Push of mapping {mapping.id} failed: {e}")
                mapping.mark_error(str(e), retryable=e.is_retryable)
                await uow.product_mappings.update(mapping)
                await self._append_log(uow, operation, entity.local_type.value, entity.local_id, str(e))
                await uow.commit()
                return SyncResult(
                    success=False,
                    mapping_id=mapping.id,
                    platform_product_id=mapping.platform_product_id,
                    error=str(e),
                )

            mapping.mark_synced(product_id, variant_id)
            mapping.merge_metadata(**ShopifyProductMapper.to_metadata(product))
            await uow.product_mappings.update(mapping)
            await self._append_log(uow, operation, entity.local_type.value, entity.local_id)
            await uow.commit()

            log.info(f"✅ Mapping {mapping.id} synced as product {mapping.platform_product_id}")
            return SyncResult(
                success=True,
                mapping_id=mapping.id,
                platform_product_id=mapping.platform_product_id,
            )

    @staticmethod
    async def _find_push_target(uow: UnitOfWork, entity: LocalProductEntity) -> Optional[ProductMapping]:
        """Mapping to update, or None to create a new one.

        Raises:
            ValueError: If an explicit mapping_id does not exist
        """
        if entity.mapping_id:
            mapping = await uow.product_mappings.get_by_id(entity.mapping_id)
            if mapping is None:
                raise ValueError(f"Product mapping not found: {entity.mapping_id}")
            return mapping
        return await uow.product_mappings.get_by_local(entity.local_type, entity.local_id)

    # ------------------------------------------------------------------
    # Pull
    # ------------------------------------------------------------------

    async def pull_from_commerce_platform(self, product: Dict[str, Any]) -> bool:
        """
        Refresh the mapping for a platform product.

        Only platform-owned fields are touched; local_type, local_id and
        product_category are left alone.

        Returns:
            True if a mapping was refreshed, False if none exists
        """
        product_id, _ = ShopifyProductMapper.extract_ids(product)
        if not product_id:
            logger.warning("Product payload has no id, skipping pull")
            return False

        async with create_uow(self._session_factory) as uow:
            mapping = await uow.product_mappings.get_by_platform_product_id(product_id)
            if mapping is None:
                logger.info(f"No mapping for platform product {product_id}, skipping")
                return False

            await self._apply_platform_product(uow, mapping, product)
            await uow.commit()

        logger.info(f"✅ Mapping {mapping.id} refreshed from product {product_id}")
        return True

    async def _apply_platform_product(
        self,
        uow: UnitOfWork,
        mapping: ProductMapping,
        product: Dict[str, Any],
    ) -> None:
        _, variant_id = ShopifyProductMapper.extract_ids(product)
        mapping.mark_synced(platform_variant_id=None if mapping.platform_variant_id else variant_id)
        mapping.merge_metadata(**ShopifyProductMapper.to_metadata(product))
        await uow.product_mappings.update(mapping)
        await self._append_log(uow, SyncOperationType.SYNC, mapping.local_type.value, mapping.local_id)

    # ------------------------------------------------------------------
    # Batch
    # ------------------------------------------------------------------

    async def reconcile_products(self) -> ReconcileSummary:
        """
        Re-fetch every mapped product from the platform.

        Each mapping runs in its own transaction; one failing mapping is
        marked `error` and counted, the rest continue.

        Returns:
            ReconcileSummary with synced/error counts
        """
        start_time = time.time()

        async with create_uow(self._session_factory) as uow:
            log = bind_execution(logger, uow.execution_id)
            mapping_ids = [mapping.id for mapping in await uow.product_mappings.list_all()]

        log.info(f"Reconciling {len(mapping_ids)} product mappings")
        synced = 0
        errors = 0

        for mapping_id in mapping_ids:
            async with create_uow(self._session_factory) as uow:
                mapping = await uow.product_mappings.get_by_id(mapping_id)
                if mapping is None:
                    continue

                if not mapping.platform_product_id:
                    message = "Mapping has no platform product id"
                    mapping.mark_error(message, retryable=False)
                    await uow.product_mappings.update(mapping)
                    await self._append_log(
                        uow, SyncOperationType.SYNC, mapping.local_type.value, mapping.local_id, message
                    )
                    await uow.commit()
                    errors += 1
                    log.warning(f"⚠️ Mapping {mapping.id}: {message}")
                    continue

                try:
                    product = await self._gateway.get_product(mapping.platform_product_id)
                except CommerceGatewayError as e:
                    mapping.mark_error(str(e), retryable=e.is_retryable)
                    await uow.product_mappings.update(mapping)
                    await self._append_log(
                        uow, SyncOperationType.SYNC, mapping.local_type.value, mapping.local_id, str(e)
                    )
                    await uow.commit()
                    errors += 1
                    log.error(f"❌ Mapping {mapping.id} failed: {e}")
                    continue

                await self._apply_platform_product(uow, mapping, product)
                await uow.commit()
                synced += 1

        elapsed = time.time() - start_time
        log.info(f"📊 Reconciliation done in {elapsed:.2f}s: {synced} synced, {errors} errors")
        return ReconcileSummary(synced=synced, errors=errors)

    # ------------------------------------------------------------------
    # Direct mapping operations
    # ------------------------------------------------------------------

    async def create_mapping(self, request: CreateMappingRequest) -> ProductMapping:
        """
        Register an already-published product.

        An existing mapping for the same local entity is updated in place.
        Standalone products (no local_id) are matched by platform product id
        only, so each one keeps its own mapping.
        """
        async with create_uow(self._session_factory) as uow:
            if request.local_id is None:
                mapping = await uow.product_mappings.get_by_platform_product_id(request.platform_product_id)
            else:
                mapping = await uow.product_mappings.get_by_local(request.local_type, request.local_id)
            is_new = mapping is None
            if is_new:
                mapping = ProductMapping(
                    local_type=request.local_type,
                    local_id=request.local_id,
                    product_type=map_product_type(request.product_category),
                    product_category=request.product_category,
                    source_memoir_id=request.source_memoir_id,
                    metadata=dict(request.metadata),
                )
            else:
                if request.product_category is not None:
                    mapping.product_category = request.product_category
                    mapping.product_type = map_product_type(request.product_category)
                if request.source_memoir_id is not None:
                    mapping.source_memoir_id = request.source_memoir_id
                mapping.merge_metadata(**request.metadata)

            mapping.mark_synced(request.platform_product_id, request.platform_variant_id)

            if is_new:
                await uow.product_mappings.add(mapping)
            else:
                await uow.product_mappings.update(mapping)
            await self._append_log(uow, SyncOperationType.CREATE, request.local_type.value, request.local_id)
            await uow.commit()

        logger.info(f"✅ Mapping {mapping.id} registered for product {mapping.platform_product_id}")
        return mapping

    async def update_sync_status(
        self,
        mapping_id: str,
        status: SyncStatus,
        error: Optional[str] = None,
    ) -> Optional[ProductMapping]:
        """
        Set a mapping's sync status directly.

        Returns:
            Updated mapping, or None if it does not exist
        """
        async with create_uow(self._session_factory) as uow:
            mapping = await uow.product_mappings.get_by_id(mapping_id)
            if mapping is None:
                logger.warning(f"Mapping {mapping_id} not found, status not updated")
                return None

            status = SyncStatus(status)
            if status == SyncStatus.ERROR:
                mapping.mark_error(error or "Unknown error")
            elif status == SyncStatus.SYNCED:
                mapping.mark_synced()
            else:
                mapping.sync_status = status
                mapping.updated_at = utcnow()

            await uow.product_mappings.update(mapping)
            await uow.commit()
            return mapping

    async def log_sync_operation(
        self,
        operation_type: SyncOperationType,
        entity_type: str,
        entity_id: Optional[str],
        status: SyncLogStatus,
        error: Optional[str] = None,
    ) -> SyncLogEntry:
        """Append one audit record in its own transaction."""
        entry = SyncLogEntry(
            operation_type=SyncOperationType(operation_type),
            entity_type=entity_type,
            entity_id=entity_id,
            status=SyncLogStatus(status),
            error_message=error,
        )
        async with create_uow(self._session_factory) as uow:
            await uow.sync_log.append(entry)
            await uow.commit()
        return entry

    async def handle_inventory_update(self, variant_id: Any, quantity: int) -> bool:
        """
        Store platform inventory on the mapping for a variant.

        Returns:
            True if a mapping was updated, False for an unknown variant
        """
        async with create_uow(self._session_factory) as uow:
            mapping = await uow.product_mappings.get_by_variant_id(str(variant_id))
            if mapping is None:
                logger.info(f"No mapping for variant {variant_id}, inventory update ignored")
                return False

            mapping.merge_metadata(
                inventory_quantity=quantity,
                inventory_updated_at=utcnow().isoformat(),
            )
            await uow.product_mappings.update(mapping)
            await uow.commit()

        logger.info(f"Mapping {mapping.id} inventory set to {quantity}")
        return True

    @staticmethod
    async def _append_log(
        uow: UnitOfWork,
        operation: SyncOperationType,
        entity_type: str,
        entity_id: Optional[str],
        error: Optional[str] = None,
    ) -> None:
        await uow.sync_log.append(
            SyncLogEntry(
                operation_type=operation,
                entity_type=entity_type,
                entity_id=entity_id,
                status=SyncLogStatus.ERROR if error else SyncLogStatus.SUCCESS,
                error_message=error,
            )
        )
