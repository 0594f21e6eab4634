"""
Order State Reconciler.

Mirrors commerce platform orders into local OrderRecords. Replaying the
same webhook is safe: `platform_order_id` is UNIQUE and a concurrent
insert falls back to an update.
"""
from typing import Any, Dict, Optional
import logging

from sqlalchemy.ext.asyncio import async_sessionmaker

from core.application.dtos.order_dto import ReconciliationResult
from core.application.services.notification_trigger import NotificationTrigger
from core.data.uow import create_uow
from core.domain.entities import OrderRecord
from core.domain.enums import OrderStatus
from core.domain.errors import OrderNotFoundError
from core.domain.value_objects import utcnow
from core.infrastructure.logging import bind_execution
from core.infrastructure.marketplace.shopify.mapper import ShopifyOrderMapper


logger = logging.getLogger(__name__)


class OrderReconciler:
    """
    Application service for local order state.

    Usage:
        reconciler = OrderReconciler(session_factory, notification_trigger)
        result = await reconciler.reconcile(webhook_payload["order"])
    """

    def __init__(
        self,
        session_factory: async_sessionmaker,
        notification_trigger: Optional[NotificationTrigger] = None,
    ):
        self._session_factory = session_factory
        self._notifications = notification_trigger

    async def reconcile(self, platform_order: Dict[str, Any]) -> ReconciliationResult:
        """
        Upsert one platform order.

        Args:
            platform_order: Shopify order object

        Returns:
            ReconciliationResult with the stored/derived status pair

        Raises:
            ValueError: If the payload has no order id
        """
        incoming = ShopifyOrderMapper.to_order_record(platform_order)

        async with create_uow(self._session_factory) as uow:
            log = bind_execution(logger, uow.execution_id)

            existing = await uow.orders.get_by_platform_order_id(incoming.platform_order_id)
            created = False

            if existing is None:
                if await uow.orders.insert(incoming):
                    created = True
                else:
                    existing = await uow.orders.get_by_platform_order_id(incoming.platform_order_id)
                    if existing is None:
                        raise RuntimeError(
                            f"Order {incoming.platform_order_id} vanished after a duplicate insert"
                        )

            if created:
                stored = incoming
                previous_status = None
            else:
                stored = existing
                previous_status = existing.status
                if stored.apply(incoming):
                    if stored.status != previous_status and self._will_notify(stored):
                        stored.mark_email_pending()
                    await uow.orders.update(stored)

            await uow.commit()

        result = ReconciliationResult(
            order_id=stored.id,
            previous_status=previous_status,
            new_status=stored.status,
            created=created,
            status_changed=(not created and previous_status != stored.status),
        )

        if created:
            log.info(f"✅ Order {stored.order_number} created with status {stored.status.value}")
        elif result.status_changed:
            log.info(
                f"✅ Order {stored.order_number} moved {previous_status.value} -> {stored.status.value}"
            )
        else:
            log.info(f"Order {stored.order_number} unchanged status {stored.status.value}")

        if result.status_changed and self._notifications is not None:
            await self._notifications.on_status_transition(stored, previous_status, stored.status)

        return result

    def _will_notify(self, order: OrderRecord) -> bool:
        return self._notifications is not None and order.has_email

    async def update_status(
        self,
        order_id: str,
        new_status: OrderStatus,
        send_email: bool = True,
    ) -> OrderRecord:
        """
        Manual status change.

        Args:
            order_id: Local order id
            new_status: Target status (backward moves allowed)
            send_email: Notify the customer through the trigger

        Returns:
            Updated order

        Raises:
            OrderNotFoundError: If the order does not exist
        """
        async with create_uow(self._session_factory) as uow:
            order = await uow.orders.get_by_id(order_id)
            if order is None:
                raise OrderNotFoundError(order_id)

            previous_status = order.status
            order.status = OrderStatus(new_status)
            order.updated_at = utcnow()
            if send_email and self._will_notify(order):
                order.mark_email_pending()
            await uow.orders.update(order)
            await uow.commit()

        logger.info(f"Order {order.order_number} status set {previous_status.value} -> {order.status.value}")

        if send_email and self._notifications is not None:
            await self._notifications.on_status_transition(order, previous_status, order.status)
            async with create_uow(self._session_factory) as uow:
                order = await uow.orders.get_by_id(order_id) or order

        return order

    async def get_order(self, order_id: str) -> Optional[OrderRecord]:
        async with create_uow(self._session_factory) as uow:
            return await uow.orders.get_by_id(order_id)

    async def verify_order_access(self, order_number: str, email: str) -> Optional[OrderRecord]:
        """
        Customer order lookup.

        Returns None unless both the order number and the (case-insensitive)
        email match.
        """
        if not order_number or not email:
            return None
        async with create_uow(self._session_factory) as uow:
            return await uow.orders.get_by_number_and_email(order_number.strip().lstrip("#"), email)
