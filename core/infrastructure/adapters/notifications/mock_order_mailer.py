"""
Mock Order Mailer Implementation.

This simulates customer emails for testing and demos.
"""
from typing import Any, Dict, List, Optional
import logging

from core.application.interfaces import IOrderMailer
from core.domain.entities import OrderRecord
from core.domain.enums import OrderStatus


logger = logging.getLogger(__name__)


class MockOrderMailer(IOrderMailer):
    """
    Mock implementation of the order mailer.

    Logs emails instead of actually sending them.
    Useful for testing and demos.
    """

    def __init__(self):
        """Initialize mock mailer."""
        self.emails_sent: List[Dict[str, Any]] = []
        logger.info("MockOrderMailer initialized (console logging)")

    async def send_status_update(
        self,
        order: OrderRecord,
        previous_status: Optional[OrderStatus],
    ) -> None:
        """
        Simulate a status-update email.

        Args:
            order: Order in its new state
            previous_status: Status before the transition
        """
        email = {
            "type": "status_update",
            "to": order.customer_email,
            "order_id": order.id,
            "order_number": order.order_number,
            "previous_status": previous_status.value if previous_status else None,
            "new_status": order.status.value,
        }

        self.emails_sent.append(email)

        logger.info(
            f"📧 ORDER EMAIL:\n"
            f"   To: {order.customer_email}\n"
            f"   Order: {order.order_number}\n"
            f"   Status: {email['previous_status']} -> {email['new_status']}"
        )

    def clear(self) -> None:
        """Clear recorded emails (for testing)."""
        self.emails_sent.clear()
