"""
Domain errors.

Every error the service raises on purpose derives from CommerceSyncError.
Storage errors (SQLAlchemy) are not wrapped and propagate as-is.
"""
from typing import Any, Optional


class CommerceSyncError(Exception):
    """Base class for commerce sync errors."""


class WebhookVerificationError(CommerceSyncError):
    """Webhook signature missing, invalid, or no secret configured."""


class WebhookPayloadError(CommerceSyncError):
    """Webhook body is not a JSON object or lacks the topic's required key."""


class OrderNotFoundError(CommerceSyncError):
    """No local order with the given id."""

    def __init__(self, order_id: str, message: Optional[str] = None):
        self.order_id = order_id
        super().__init__(message or f"Order not found: {order_id}")


class CommerceGatewayError(CommerceSyncError):
    """
    Commerce platform rejected a call or could not be reached.

    status_code is None for transport failures and timeouts.
    """

    def __init__(self, message: str, status_code: Optional[int] = None, response: Any = None):
        self.status_code = status_code
        self.response = response
        super().__init__(message)

    @property
    def is_retryable(self) -> bool:
        """Timeouts, 5xx and 429 are worth retrying; other 4xx are not."""
        if self.status_code is None:
            return True
        return self.status_code >= 500 or self.status_code == 429
