"""Repository interface for DigitalAsset."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..entities.digital_asset import DigitalAsset


class DigitalAssetRepository(ABC):

    @abstractmethod
    async def add(self, asset: DigitalAsset) -> None:
        pass

    @abstractmethod
    async def get_by_token(self, token: str) -> Optional[DigitalAsset]:
        pass

    @abstractmethod
    async def list_by_order(self, order_id: str) -> List[DigitalAsset]:
        """Assets for an order, newest first."""
        pass

    @abstractmethod
    async def increment_download_count(self, token: str) -> int:
        """Atomically add one to download_count.

        Returns:
            Number of rows updated (0 for an unknown token)
        """
        pass
