"""
Resend Order Mailer Implementation.

Sends customer order emails via the Resend HTTP API.
"""
from html import escape
from typing import Optional
import asyncio
import logging

import aiohttp

from core.application.interfaces import IOrderMailer
from core.domain.entities import OrderRecord
from core.domain.enums import OrderStatus
from core.settings.modules.email_settings import EmailSettings


logger = logging.getLogger(__name__)

RESEND_API_URL = "https://api.resend.com/emails"

STATUS_MESSAGES = {
    OrderStatus.PENDING: "We have received your order.",
    OrderStatus.CONFIRMED: "Your order is confirmed.",
    OrderStatus.PROCESSING: "Your order is being prepared.",
    OrderStatus.SHIPPED: "Your order is on its way.",
    OrderStatus.DELIVERED: "Your order has been delivered.",
    OrderStatus.CANCELLED: "Your order has been cancelled.",
    OrderStatus.REFUNDED: "Your order has been refunded.",
}


class MailDeliveryError(RuntimeError):
    """Resend rejected the message or could not be reached."""


class ResendOrderMailer(IOrderMailer):
    """
    Resend implementation of the order mailer.

    Raises MailDeliveryError on failure; the notification trigger logs it.
    """

    def __init__(
        self,
        settings: EmailSettings,
        session: Optional[aiohttp.ClientSession] = None,
        timeout_seconds: float = 15.0,
    ):
        """
        Initialize Resend mailer.

        Args:
            settings: Email settings with API key and sender address
            session: Pre-built session (tests); created lazily otherwise
        """
        self.settings = settings
        self.from_email = settings.from_email
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)
        self._session = session
        self._owns_session = session is None
        logger.info("ResendOrderMailer initialized")

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self._timeout)
            self._owns_session = True
        return self._session

    async def close(self) -> None:
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()
        self._session = None

    async def send_status_update(
        self,
        order: OrderRecord,
        previous_status: Optional[OrderStatus],
    ) -> None:
        """Send the `Order Update - {number}` email."""
        payload = {
            "from": self.from_email,
            "to": [order.customer_email],
            "subject": f"Order Update - {order.order_number}",
            "html": self._render_status_update(order, previous_status),
        }
        await self._send(payload)

    @staticmethod
    def _render_status_update(order: OrderRecord, previous_status: Optional[OrderStatus]) -> str:
        lines = "".join(
            f"<tr><td>{escape(item.title)}</td><td>{item.quantity}</td><td>{item.price}</td></tr>"
            for item in order.line_items
        )
        greeting = escape(order.customer_name) if order.customer_name else "there"
        previous = f"<p>Previous status: {previous_status.value}</p>" if previous_status else ""
        return (
            f"<p>Hi {greeting},</p>"
            f"<p>{STATUS_MESSAGES.get(order.status, '')}</p>"
            f"<p>Order <strong>{escape(order.order_number)}</strong> is now "
            f"<strong>{order.status.value}</strong>.</p>"
            f"{previous}"
            f"<table>{lines}</table>"
            f"<p>Total: {order.total_amount}</p>"
        )

    async def _send(self, payload: dict) -> None:
        if not self.settings.resend_api_key:
            raise MailDeliveryError("RESEND_API_KEY is not configured")

        headers = {"Authorization": f"Bearer {self.settings.resend_api_key}"}
        try:
            async with self._get_session().post(RESEND_API_URL, json=payload, headers=headers) as response:
                if response.status >= 300:
                    error_text = await response.text()
                    logger.error(f"Resend API error: {response.status} - {error_text}")
                    raise MailDeliveryError(f"Resend API error: {response.status}")
                logger.info(f"Order email sent to {payload['to'][0]}")
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise MailDeliveryError(f"Failed to reach Resend: {e}") from e
