"""Repository interface for the append-only sync log."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..entities.sync_log import SyncLogEntry


class SyncLogRepository(ABC):
    """Append and read only. Entries are never updated or deleted."""

    @abstractmethod
    async def append(self, entry: SyncLogEntry) -> None:
        pass

    @abstractmethod
    async def list_recent(self, limit: int = 100, entity_id: Optional[str] = None) -> List[SyncLogEntry]:
        pass
