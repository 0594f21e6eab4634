"""DTOs for webhook ingestion."""

from typing import Literal, Optional

from pydantic import BaseModel, Field

from .order_dto import ReconciliationResult


class WebhookResult(BaseModel):
    """Outcome of one inbound webhook."""

    topic: str
    status: Literal["processed", "ignored"]
    execution_id: str = Field(..., description="Execution ID for tracing")
    detail: Optional[str] = None
    order: Optional[ReconciliationResult] = None

    model_config = {"frozen": True}
