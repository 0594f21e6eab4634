"""
Digital Asset Token Service.

Issues opaque download tokens at fulfillment and turns them into
short-lived signed storage URLs on redemption.
"""
from datetime import timedelta
from typing import List, Optional, Tuple
import logging
import secrets

from sqlalchemy.ext.asyncio import async_sessionmaker

from core.application.dtos.download_dto import DownloadLink
from core.application.interfaces import IStorageClient
from core.data.uow import create_uow
from core.domain.entities import DigitalAsset
from core.domain.enums import AssetType
from core.domain.value_objects import utcnow


logger = logging.getLogger(__name__)

TOKEN_BYTES = 32
DEFAULT_LINK_TTL_DAYS = 30
DEFAULT_SIGNED_URL_TTL_SECONDS = 3600


def generate_download_token() -> str:
    """256-bit URL-safe random token."""
    return secrets.token_urlsafe(TOKEN_BYTES)


def split_file_url(file_url: str) -> Tuple[str, str]:
    """
    Split `bucket/path/to/object` into (bucket, path).

    Raises:
        ValueError: If there are fewer than two non-empty segments
    """
    segments = [segment for segment in (file_url or "").split("/") if segment]
    if len(segments) < 2:
        raise ValueError(f"Invalid file URL, expected bucket/path: {file_url!r}")
    return segments[0], "/".join(segments[1:])


class DigitalAssetService:
    """
    Token lifecycle: issue, verify, expire, track.

    Unknown and expired tokens are indistinguishable to callers.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker,
        storage: IStorageClient,
        default_ttl_days: int = DEFAULT_LINK_TTL_DAYS,
        signed_url_ttl_seconds: int = DEFAULT_SIGNED_URL_TTL_SECONDS,
    ):
        self._session_factory = session_factory
        self._storage = storage
        self._default_ttl_days = default_ttl_days
        self._signed_url_ttl_seconds = signed_url_ttl_seconds

    async def issue(
        self,
        order_id: str,
        platform_product_id: str,
        asset_type: AssetType,
        file_url: str,
        expires_in_days: Optional[int] = None,
    ) -> str:
        """
        Create a digital asset with a fresh token.

        Args:
            order_id: Local order id
            platform_product_id: Platform product the asset belongs to
            asset_type: tribute, archive or memory_page
            file_url: `bucket/path` of the stored file
            expires_in_days: Link lifetime (service default if omitted)

        Returns:
            The download token
        """
        split_file_url(file_url)
        days = self._default_ttl_days if expires_in_days is None else expires_in_days
        asset = DigitalAsset(
            order_id=order_id,
            platform_product_id=str(platform_product_id),
            asset_type=AssetType(asset_type),
            file_url=file_url,
            download_token=generate_download_token(),
            expires_at=utcnow() + timedelta(days=days),
        )

        async with create_uow(self._session_factory) as uow:
            await uow.digital_assets.add(asset)
            await uow.commit()

        logger.info(f"✅ Issued {asset.asset_type.value} download for order {order_id} (expires in {days} days)")
        return asset.download_token

    async def verify(self, token: str) -> Optional[DigitalAsset]:
        """
        Look up a token.

        Returns:
            The asset, or None if the token is unknown or expired
        """
        if not token:
            return None
        async with create_uow(self._session_factory) as uow:
            asset = await uow.digital_assets.get_by_token(token)

        if asset is None or asset.is_expired():
            return None
        return asset

    async def resolve_download_url(self, file_url: str, ttl_seconds: Optional[int] = None) -> str:
        """
        Sign a stored file for download.

        Raises:
            ValueError: If file_url is not `bucket/path`
        """
        bucket, path = split_file_url(file_url)
        return await self._storage.create_signed_url(
            bucket, path, ttl_seconds or self._signed_url_ttl_seconds
        )

    async def track_download(self, token: str) -> None:
        """Count one download with a server-side increment."""
        async with create_uow(self._session_factory) as uow:
            updated = await uow.digital_assets.increment_download_count(token)
            await uow.commit()
        if not updated:
            logger.warning("Download tracked for an unknown token")

    async def get_order_downloads(self, order_id: str) -> List[DigitalAsset]:
        """Digital assets for an order, newest first."""
        async with create_uow(self._session_factory) as uow:
            return await uow.digital_assets.list_by_order(order_id)

    async def redeem(self, token: str, ttl_seconds: Optional[int] = None) -> Optional[DownloadLink]:
        """
        Verify, sign and count in one step.

        Returns:
            DownloadLink, or None for an unknown or expired token
        """
        asset = await self.verify(token)
        if asset is None:
            return None

        url = await self.resolve_download_url(asset.file_url, ttl_seconds)
        await self.track_download(token)

        return DownloadLink(
            download_url=url,
            asset_type=asset.asset_type,
            expires_at=asset.expires_at,
        )
