"""Static mappers for domain entities ↔ database models."""

from decimal import Decimal

from core.domain.entities import DigitalAsset, OrderRecord, ProductMapping, SyncLogEntry
from core.domain.enums import (
    AssetType,
    LocalType,
    OrderStatus,
    OrderType,
    ProductCategory,
    ProductType,
    SyncLogStatus,
    SyncOperationType,
    SyncStatus,
)
from core.domain.value_objects import LineItem

from .models import DigitalAssetModel, OrderModel, ProductMappingModel, SyncLogModel


class OrderMapper:
    """Static mapper for OrderRecord ↔ OrderModel transformation."""

    @staticmethod
    def to_domain(model: OrderModel) -> OrderRecord:
        """Convert ORM model to domain entity.

        Args:
            model: OrderModel instance

        Returns:
            OrderRecord domain entity
        """
        return OrderRecord(
            id=model.id,
            platform_order_id=model.platform_order_id,
            order_number=model.order_number,
            customer_email=model.customer_email,
            customer_name=model.customer_name,
            status=OrderStatus(model.status),
            order_type=OrderType(model.order_type),
            total_amount=Decimal(str(model.total_amount)),
            line_items=[LineItem.from_dict(item) for item in (model.line_items or [])],
            shipping_address=model.shipping_address,
            raw_platform_snapshot=dict(model.raw_platform_snapshot or {}),
            last_email_sent_at=model.last_email_sent_at,
            last_email_status=model.last_email_status,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    @staticmethod
    def to_persistence(entity: OrderRecord) -> OrderModel:
        model = OrderModel(id=entity.id, platform_order_id=entity.platform_order_id)
        OrderMapper.update_persistence(entity, model)
        model.created_at = entity.created_at
        return model

    @staticmethod
    def update_persistence(entity: OrderRecord, model: OrderModel) -> OrderModel:
        """Update existing ORM model from domain entity.

        platform_order_id is never rewritten once stored.
        """
        model.order_number = entity.order_number
        model.customer_email = entity.customer_email
        model.customer_name = entity.customer_name
        model.status = entity.status.value
        model.order_type = entity.order_type.value
        model.total_amount = entity.total_amount
        model.line_items = [item.to_dict() for item in entity.line_items]
        model.shipping_address = entity.shipping_address
        model.raw_platform_snapshot = dict(entity.raw_platform_snapshot)
        model.last_email_sent_at = entity.last_email_sent_at
        model.last_email_status = entity.last_email_status
        model.updated_at = entity.updated_at
        return model


class ProductMappingMapper:
    """Static mapper for ProductMapping ↔ ProductMappingModel."""

    @staticmethod
    def to_domain(model: ProductMappingModel) -> ProductMapping:
        return ProductMapping(
            id=model.id,
            local_type=LocalType(model.local_type),
            local_id=model.local_id,
            platform_product_id=model.platform_product_id,
            platform_variant_id=model.platform_variant_id,
            product_type=ProductType(model.product_type),
            product_category=(
                ProductCategory(model.product_category) if model.product_category else None
            ),
            source_memoir_id=model.source_memoir_id,
            sync_status=SyncStatus(model.sync_status),
            last_synced_at=model.last_synced_at,
            metadata=dict(model.metadata_ or {}),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    @staticmethod
    def to_persistence(entity: ProductMapping) -> ProductMappingModel:
        model = ProductMappingModel(
            id=entity.id,
            local_type=entity.local_type.value,
            local_id=entity.local_id,
            created_at=entity.created_at,
        )
        return ProductMappingMapper.update_persistence(entity, model)

    @staticmethod
    def update_persistence(entity: ProductMapping, model: ProductMappingModel) -> ProductMappingModel:
        model.platform_product_id = entity.platform_product_id
        model.platform_variant_id = entity.platform_variant_id
        model.product_type = entity.product_type.value
        model.product_category = (
            entity.product_category.value if entity.product_category else None
        )
        model.source_memoir_id = entity.source_memoir_id
        model.sync_status = entity.sync_status.value
        model.last_synced_at = entity.last_synced_at
        # New dict so the JSON column is flagged dirty
        model.metadata_ = dict(entity.metadata)
        model.updated_at = entity.updated_at
        return model


class DigitalAssetMapper:
    """Static mapper for DigitalAsset ↔ DigitalAssetModel."""

    @staticmethod
    def to_domain(model: DigitalAssetModel) -> DigitalAsset:
        return DigitalAsset(
            id=model.id,
            order_id=model.order_id,
            platform_product_id=model.platform_product_id,
            asset_type=AssetType(model.asset_type),
            file_url=model.file_url,
            download_token=model.download_token,
            download_count=model.download_count,
            expires_at=model.expires_at,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    @staticmethod
    def to_persistence(entity: DigitalAsset) -> DigitalAssetModel:
        return DigitalAssetModel(
            id=entity.id,
            order_id=entity.order_id,
            platform_product_id=entity.platform_product_id,
            asset_type=entity.asset_type.value,
            file_url=entity.file_url,
            download_token=entity.download_token,
            download_count=entity.download_count,
            expires_at=entity.expires_at,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )


class SyncLogMapper:
    """Static mapper for SyncLogEntry ↔ SyncLogModel."""

    @staticmethod
    def to_domain(model: SyncLogModel) -> SyncLogEntry:
        return SyncLogEntry(
            id=model.id,
            operation_type=SyncOperationType(model.operation_type),
            entity_type=model.entity_type,
            entity_id=model.entity_id,
            status=SyncLogStatus(model.status),
            error_message=model.error_message,
            created_at=model.created_at,
        )

    @staticmethod
    def to_persistence(entity: SyncLogEntry) -> SyncLogModel:
        return SyncLogModel(
            id=entity.id,
            operation_type=entity.operation_type.value,
            entity_type=entity.entity_type,
            entity_id=entity.entity_id,
            status=entity.status.value,
            error_message=entity.error_message,
            created_at=entity.created_at,
        )
