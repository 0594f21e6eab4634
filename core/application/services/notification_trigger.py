"""
Notification Trigger.

Decides when an order status change reaches the customer and records
the attempt on the order before handing it to the mailer.
"""
from typing import Optional
import logging

from sqlalchemy.ext.asyncio import async_sessionmaker

from core.application.interfaces import IOrderMailer
from core.data.uow import create_uow
from core.domain.entities import OrderRecord
from core.domain.enums import OrderStatus
from core.domain.errors import OrderNotFoundError


logger = logging.getLogger(__name__)


class NotificationTrigger:
    """
    Marks the order email as pending unless the caller already committed
    that with the status change, then delivers.

    A mailer failure is logged and leaves `last_email_status` at
    "pending"; a delivered email moves it to "sent".
    """

    def __init__(self, session_factory: async_sessionmaker, mailer: IOrderMailer):
        self._session_factory = session_factory
        self._mailer = mailer

    async def on_status_transition(
        self,
        order: OrderRecord,
        previous_status: Optional[OrderStatus],
        new_status: OrderStatus,
    ) -> None:
        """
        Notify the customer about a status change.

        Args:
            order: Order as stored after the change
            previous_status: Status before the change
            new_status: Status after the change
        """
        if not order.has_email:
            logger.info(f"Order {order.order_number} has no customer email, skipping notification")
            return

        stored = order
        if order.last_email_status != "pending":
            async with create_uow(self._session_factory) as uow:
                stored = await uow.orders.get_by_id(order.id)
                if stored is None:
                    raise OrderNotFoundError(order.id)
                stored.mark_email_pending()
                await uow.orders.update(stored)
                await uow.commit()

        logger.info(
            f"🔔 Order {stored.order_number}: {previous_status.value if previous_status else None} "
            f"-> {new_status.value}, sending email"
        )

        try:
            await self._mailer.send_status_update(stored, previous_status)
        except Exception as e:
            logger.error(f"❌ Failed to send email for order {stored.order_number}: {e}", exc_info=True)
            return

        async with create_uow(self._session_factory) as uow:
            sent = await uow.orders.get_by_id(order.id)
            if sent is not None:
                sent.last_email_status = "sent"
                await uow.orders.update(sent)
                await uow.commit()
