"""Customer download endpoint."""

from fastapi import APIRouter, Depends, HTTPException, Query

from core.application.dtos.download_dto import DownloadLink
from core.application.services import DigitalAssetService

from apps.api.deps import get_digital_asset_service

router = APIRouter(prefix="/downloads", tags=["downloads"])

INVALID_LINK = "Invalid or expired download link"


@router.get("", response_model=DownloadLink)
async def redeem_download(
    token: str = Query(default="", description="Download token from the delivery email"),
    service: DigitalAssetService = Depends(get_digital_asset_service),
) -> DownloadLink:
    """Exchange a download token for a short-lived signed URL.

    Raises:
        HTTPException: 404 for unknown and expired tokens alike
    """
    link = await service.redeem(token)
    if link is None:
        raise HTTPException(status_code=404, detail=INVALID_LINK)
    return link
