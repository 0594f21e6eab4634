"""SyncLogEntry entity - append-only audit record."""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import uuid4

from ..enums import SyncLogStatus, SyncOperationType
from ..value_objects import utcnow


@dataclass(frozen=True)
class SyncLogEntry:
    operation_type: SyncOperationType
    entity_type: str
    status: SyncLogStatus
    entity_id: Optional[str] = None
    error_message: Optional[str] = None
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=utcnow)
