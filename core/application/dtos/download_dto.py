"""DTOs for digital asset delivery."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from core.domain.entities import DigitalAsset
from core.domain.enums import AssetType


class IssueDownloadRequest(BaseModel):
    """Request DTO for minting a download token at fulfillment."""

    order_id: str = Field(..., min_length=1, description="Local order id")
    platform_product_id: str = Field(..., min_length=1)
    asset_type: AssetType
    file_url: str = Field(..., min_length=3, description="bucket/path/to/object")
    expires_in_days: Optional[int] = Field(default=None, ge=1, description="Defaults to DOWNLOAD_LINK_TTL_DAYS")

    model_config = {"frozen": True}


class IssueDownloadResponse(BaseModel):
    download_token: str
    expires_at: Optional[datetime] = None

    model_config = {"frozen": True}


class DownloadLink(BaseModel):
    """Short-lived signed URL handed to the customer."""

    download_url: str
    asset_type: AssetType
    expires_at: Optional[datetime] = None

    model_config = {"frozen": True}


class DigitalAssetDTO(BaseModel):
    id: str
    order_id: str
    platform_product_id: str
    asset_type: AssetType
    download_token: str
    download_count: int
    expires_at: Optional[datetime] = None
    created_at: datetime

    model_config = {"frozen": True}

    @classmethod
    def from_entity(cls, asset: DigitalAsset) -> "DigitalAssetDTO":
        return cls(
            id=asset.id,
            order_id=asset.order_id,
            platform_product_id=asset.platform_product_id,
            asset_type=asset.asset_type,
            download_token=asset.download_token,
            download_count=asset.download_count,
            expires_at=asset.expires_at,
            created_at=asset.created_at,
        )
