"""Digital asset issuing endpoint (fulfillment workflow)."""

from fastapi import APIRouter, Depends

from core.application.dtos.download_dto import IssueDownloadRequest, IssueDownloadResponse
from core.application.services import DigitalAssetService

from apps.api.deps import get_digital_asset_service

router = APIRouter(prefix="/digital-assets", tags=["digital-assets"])


@router.post("", response_model=IssueDownloadResponse, status_code=201)
async def issue_digital_asset(
    request: IssueDownloadRequest,
    service: DigitalAssetService = Depends(get_digital_asset_service),
) -> IssueDownloadResponse:
    """Mint a download token for a fulfilled order line."""
    token = await service.issue(
        order_id=request.order_id,
        platform_product_id=request.platform_product_id,
        asset_type=request.asset_type,
        file_url=request.file_url,
        expires_in_days=request.expires_in_days,
    )
    asset = await service.verify(token)
    return IssueDownloadResponse(download_token=token, expires_at=asset.expires_at if asset else None)
