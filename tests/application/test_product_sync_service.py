"""Tests for ProductSyncService."""
from decimal import Decimal

import pytest

from core.application.dtos.sync_dto import CreateMappingRequest, LocalProductEntity
from core.application.services import ProductSyncService
from core.data.uow import create_uow
from core.domain.entities import ProductMapping
from core.domain.enums import (
    LocalType,
    ProductCategory,
    ProductType,
    SyncLogStatus,
    SyncOperationType,
    SyncStatus,
)
from core.infrastructure.marketplace.shopify import ShopifyApiError


@pytest.fixture
def service(session_factory, gateway):
    return ProductSyncService(session_factory, gateway)


def make_entity(local_id="offering-1", **overrides):
    fields = dict(
        local_type=LocalType.OFFERING,
        local_id=local_id,
        title="Oak Memorial Casket",
        price=Decimal("1499.00"),
        product_category=ProductCategory.COFFIN,
    )
    fields.update(overrides)
    return LocalProductEntity(**fields)


async def load_mapping(session_factory, mapping_id):
    async with create_uow(session_factory) as uow:
        return await uow.product_mappings.get_by_id(mapping_id)


@pytest.mark.asyncio
async def test_push_creates_product(service, session_factory, gateway):
    result = await service.push_to_commerce_platform(make_entity())

    assert result.success is True
    assert result.platform_product_id == "9001"
    mapping = await load_mapping(session_factory, result.mapping_id)
    assert mapping.sync_status == SyncStatus.SYNCED
    assert mapping.platform_variant_id == "90010"
    assert mapping.product_type == ProductType.PHYSICAL
    assert mapping.metadata["title"] == "Oak Memorial Casket"
    assert gateway.calls[0][0] == "create_product"


@pytest.mark.asyncio
async def test_second_push_updates(service, gateway):
    first = await service.push_to_commerce_platform(make_entity())
    second = await service.push_to_commerce_platform(make_entity(title="Walnut Memorial Casket"))

    assert second.mapping_id == first.mapping_id
    assert second.platform_product_id == first.platform_product_id
    assert gateway.calls[-1][0] == "update_product"


@pytest.mark.asyncio
async def test_failed_push_then_success_clears_error(service, session_factory, gateway):
    gateway.fail_next = ShopifyApiError("Shopify API error: 503", status_code=503)

    failed = await service.push_to_commerce_platform(make_entity())

    assert failed.success is False
    assert "503" in failed.error
    mapping = await load_mapping(session_factory, failed.mapping_id)
    assert mapping.sync_status == SyncStatus.ERROR
    assert mapping.metadata["error_retryable"] is True
    assert mapping.last_error

    retried = await service.push_to_commerce_platform(make_entity())

    assert retried.success is True
    mapping = await load_mapping(session_factory, retried.mapping_id)
    assert mapping.sync_status == SyncStatus.SYNCED
    assert mapping.last_error is None

    async with create_uow(session_factory) as uow:
        logs = await uow.sync_log.list_recent(entity_id="offering-1")
    assert [log.status for log in logs].count(SyncLogStatus.ERROR) == 1
    assert [log.status for log in logs].count(SyncLogStatus.SUCCESS) == 1


@pytest.mark.asyncio
async def test_client_error_is_not_retryable(service, session_factory, gateway):
    gateway.fail_next = ShopifyApiError("Shopify API error: 422", status_code=422)

    failed = await service.push_to_commerce_platform(make_entity())

    mapping = await load_mapping(session_factory, failed.mapping_id)
    assert mapping.metadata["error_retryable"] is False


@pytest.mark.asyncio
async def test_digital_category_maps_to_digital(service, session_factory):
    result = await service.push_to_commerce_platform(
        make_entity(local_type=LocalType.MEMOIR, local_id="memoir-1", product_category=ProductCategory.TRIBUTE)
    )
    mapping = await load_mapping(session_factory, result.mapping_id)
    assert mapping.product_type == ProductType.DIGITAL


@pytest.mark.asyncio
async def test_reconcile_isolates_failures(service, session_factory, gateway):
    for n in range(10):
        product_id = str(100 + n)
        gateway.add_product(product_id)
        await service.create_mapping(
            CreateMappingRequest(
                local_type=LocalType.OFFERING,
                local_id=f"offering-{n}",
                platform_product_id=product_id,
            )
        )
    gateway.fail_product_ids = {"102", "105", "108"}

    summary = await service.reconcile_products()

    assert summary.synced == 7
    assert summary.errors == 3
    assert summary.total == 10
    fetched = [call[1] for call in gateway.calls if call[0] == "get_product"]
    assert sorted(fetched) == sorted(str(100 + n) for n in range(10))

    async with create_uow(session_factory) as uow:
        mappings = await uow.product_mappings.list_all()
    errors = {m.platform_product_id for m in mappings if m.sync_status == SyncStatus.ERROR}
    assert errors == {"102", "105", "108"}


@pytest.mark.asyncio
async def test_reconcile_counts_unpublished_mapping_as_error(service, session_factory):
    async with create_uow(session_factory) as uow:
        await uow.product_mappings.add(
            ProductMapping(local_type=LocalType.OFFERING, local_id="draft", product_type=ProductType.PHYSICAL)
        )
        await uow.commit()

    summary = await service.reconcile_products()

    assert summary.errors == 1
    assert summary.synced == 0


@pytest.mark.asyncio
async def test_pull_refreshes_platform_fields_only(service, session_factory, gateway):
    mapping = await service.create_mapping(
        CreateMappingRequest(
            local_type=LocalType.MEMOIR,
            local_id="memoir-7",
            platform_product_id="777",
            product_category=ProductCategory.ARCHIVE,
        )
    )

    refreshed = await service.pull_from_commerce_platform(
        {"id": 777, "title": "Renamed on Shopify", "status": "draft", "variants": [{"id": 7770}]}
    )

    assert refreshed is True
    stored = await load_mapping(session_factory, mapping.id)
    assert stored.local_type == LocalType.MEMOIR
    assert stored.local_id == "memoir-7"
    assert stored.product_category == ProductCategory.ARCHIVE
    assert stored.platform_variant_id == "7770"
    assert stored.metadata["title"] == "Renamed on Shopify"
    assert stored.metadata["status"] == "draft"


@pytest.mark.asyncio
async def test_pull_unknown_product(service):
    assert await service.pull_from_commerce_platform({"id": 404}) is False


@pytest.mark.asyncio
async def test_create_mapping_updates_existing(service, session_factory):
    first = await service.create_mapping(
        CreateMappingRequest(local_type=LocalType.OFFERING, local_id="o-1", platform_product_id="1")
    )
    second = await service.create_mapping(
        CreateMappingRequest(
            local_type=LocalType.OFFERING,
            local_id="o-1",
            platform_product_id="2",
            metadata={"note": "moved"},
        )
    )

    assert second.id == first.id
    stored = await load_mapping(session_factory, first.id)
    assert stored.platform_product_id == "2"
    assert stored.sync_status == SyncStatus.SYNCED
    assert stored.metadata["note"] == "moved"


@pytest.mark.asyncio
async def test_update_sync_status(service, session_factory):
    mapping = await service.create_mapping(
        CreateMappingRequest(local_type=LocalType.OFFERING, local_id="o-2", platform_product_id="3")
    )

    updated = await service.update_sync_status(mapping.id, SyncStatus.ERROR, "manual hold")

    assert updated.sync_status == SyncStatus.ERROR
    assert updated.last_error == "manual hold"
    assert await service.update_sync_status("missing", SyncStatus.SYNCED) is None


@pytest.mark.asyncio
async def test_log_sync_operation(service, session_factory):
    await service.log_sync_operation(
        SyncOperationType.DELETE, "offering", "o-9", SyncLogStatus.ERROR, "gone"
    )

    async with create_uow(session_factory) as uow:
        logs = await uow.sync_log.list_recent(entity_id="o-9")
    assert len(logs) == 1
    assert logs[0].operation_type == SyncOperationType.DELETE
    assert logs[0].error_message == "gone"


@pytest.mark.asyncio
async def test_inventory_update(service, session_factory):
    mapping = await service.create_mapping(
        CreateMappingRequest(
            local_type=LocalType.PHYSICAL_PRODUCT,
            local_id="p-1",
            platform_product_id="55",
            platform_variant_id="550",
        )
    )

    assert await service.handle_inventory_update(550, 12) is True
    assert await service.handle_inventory_update("999", 1) is False

    stored = await load_mapping(session_factory, mapping.id)
    assert stored.metadata["inventory_quantity"] == 12


@pytest.mark.asyncio
async def test_standalone_pushes_create_separate_products(service, session_factory, gateway):
    first = await service.push_to_commerce_platform(
        LocalProductEntity(local_type=LocalType.PHYSICAL_PRODUCT, title="Brass Urn", price=Decimal("89.00"))
    )
    second = await service.push_to_commerce_platform(
        LocalProductEntity(local_type=LocalType.PHYSICAL_PRODUCT, title="Keepsake Box", price=Decimal("35.00"))
    )

    assert first.mapping_id != second.mapping_id
    assert first.platform_product_id != second.platform_product_id
    assert [call[0] for call in gateway.calls] == ["create_product", "create_product"]

    async with create_uow(session_factory) as uow:
        mappings = await uow.product_mappings.list_all()
    assert {m.platform_product_id for m in mappings} == {first.platform_product_id, second.platform_product_id}


@pytest.mark.asyncio
async def test_standalone_repush_by_mapping_id(service, gateway):
    created = await service.push_to_commerce_platform(
        LocalProductEntity(local_type=LocalType.PHYSICAL_PRODUCT, title="Brass Urn")
    )

    updated = await service.push_to_commerce_platform(
        LocalProductEntity(
            local_type=LocalType.PHYSICAL_PRODUCT,
            title="Polished Brass Urn",
            mapping_id=created.mapping_id,
        )
    )

    assert updated.mapping_id == created.mapping_id
    assert gateway.calls[-1][:2] == ("update_product", created.platform_product_id)


@pytest.mark.asyncio
async def test_push_with_unknown_mapping_id(service):
    with pytest.raises(ValueError):
        await service.push_to_commerce_platform(
            LocalProductEntity(local_type=LocalType.PHYSICAL_PRODUCT, title="Urn", mapping_id="missing")
        )


@pytest.mark.asyncio
async def test_standalone_registrations_keep_separate_mappings(service, session_factory):
    first = await service.create_mapping(
        CreateMappingRequest(local_type=LocalType.PHYSICAL_PRODUCT, platform_product_id="111")
    )
    second = await service.create_mapping(
        CreateMappingRequest(local_type=LocalType.PHYSICAL_PRODUCT, platform_product_id="222")
    )
    again = await service.create_mapping(
        CreateMappingRequest(
            local_type=LocalType.PHYSICAL_PRODUCT,
            platform_product_id="111",
            metadata={"note": "re-registered"},
        )
    )

    assert first.id != second.id
    assert again.id == first.id
    async with create_uow(session_factory) as uow:
        mappings = await uow.product_mappings.list_all()
    assert sorted(m.platform_product_id for m in mappings) == ["111", "222"]
