"""Digital asset type enum."""
from enum import Enum


class AssetType(str, Enum):
    """Kinds of downloadable digital goods."""

    TRIBUTE = "tribute"
    ARCHIVE = "archive"
    MEMORY_PAGE = "memory_page"
