"""Repository interface for ProductMapping."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..entities.product_mapping import ProductMapping
from ..enums import LocalType


class ProductMappingRepository(ABC):

    @abstractmethod
    async def get_by_id(self, mapping_id: str) -> Optional[ProductMapping]:
        pass

    @abstractmethod
    async def get_by_local(self, local_type: LocalType, local_id: Optional[str]) -> Optional[ProductMapping]:
        """At most one mapping exists per (local_type, local_id).

        Standalone mappings (local_id None) are never matched; each one is
        its own platform product.
        """
        pass

    @abstractmethod
    async def get_by_platform_product_id(self, platform_product_id: str) -> Optional[ProductMapping]:
        pass

    @abstractmethod
    async def get_by_variant_id(self, platform_variant_id: str) -> Optional[ProductMapping]:
        pass

    @abstractmethod
    async def list_all(self) -> List[ProductMapping]:
        """All mappings, oldest first."""
        pass

    @abstractmethod
    async def add(self, mapping: ProductMapping) -> None:
        pass

    @abstractmethod
    async def update(self, mapping: ProductMapping) -> None:
        pass
