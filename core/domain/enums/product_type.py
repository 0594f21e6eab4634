"""Product classification enums."""
from enum import Enum
from typing import Optional, Union


class LocalType(str, Enum):
    """Kind of local entity a product mapping points at."""

    OFFERING = "offering"
    MEMOIR = "memoir"
    PHYSICAL_PRODUCT = "physical_product"


class ProductType(str, Enum):
    PHYSICAL = "physical"
    DIGITAL = "digital"


class ProductCategory(str, Enum):
    COFFIN = "coffin"
    PHOTO_BOOK = "photo_book"
    MEMORABILIA = "memorabilia"
    TRIBUTE = "tribute"
    ARCHIVE = "archive"
    MEMORY_PAGE = "memory_page"


DIGITAL_CATEGORIES = frozenset(
    {ProductCategory.TRIBUTE, ProductCategory.ARCHIVE, ProductCategory.MEMORY_PAGE}
)


def map_product_type(category: Optional[Union[ProductCategory, str]]) -> ProductType:
    """
    Determine whether a product is physical or digital from its category.

    Args:
        category: Product category (enum or raw string), or None

    Returns:
        ProductType.DIGITAL for tribute/archive/memory_page, PHYSICAL otherwise
    """
    if not category:
        return ProductType.PHYSICAL
    try:
        category = ProductCategory(category)
    except ValueError:
        return ProductType.PHYSICAL
    return ProductType.DIGITAL if category in DIGITAL_CATEGORIES else ProductType.PHYSICAL
