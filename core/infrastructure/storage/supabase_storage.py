"""
Supabase Storage signer.

Creates signed download URLs through the Storage REST API.
"""
import asyncio
import logging
from typing import Optional
from urllib.parse import quote

import aiohttp

from core.application.interfaces import IStorageClient
from core.settings.modules.storage_settings import StorageSettings


logger = logging.getLogger(__name__)


class StorageSigningError(RuntimeError):
    """Storage refused or failed to sign an object URL."""


class SupabaseStorageClient(IStorageClient):
    """
    Supabase implementation of the storage signer.

    POST {url}/storage/v1/object/sign/{bucket}/{path} with the service
    role key; the returned relative `signedURL` is made absolute.
    """

    def __init__(
        self,
        settings: StorageSettings,
        session: Optional[aiohttp.ClientSession] = None,
    ) -> None:
        self.settings = settings
        self.base_url = settings.supabase_url.rstrip("/")
        self._session = session
        self._owns_session = session is None
        logger.info("SupabaseStorageClient initialized")

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.settings.timeout_seconds),
                headers={
                    "Authorization": f"Bearer {self.settings.service_role_key}",
                    "apikey": self.settings.service_role_key,
                },
            )
            self._owns_session = True
        return self._session

    async def close(self) -> None:
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()
        self._session = None

    async def create_signed_url(self, bucket: str, path: str, ttl_seconds: int) -> str:
        """
        Sign one object.

        Raises:
            StorageSigningError: If storage is unconfigured or the call fails
        """
        if not self.base_url or not self.settings.service_role_key:
            raise StorageSigningError("Supabase storage is not configured")

        url = f"{self.base_url}/storage/v1/object/sign/{quote(bucket)}/{quote(path)}"
        try:
            async with self._get_session().post(url, json={"expiresIn": ttl_seconds}) as response:
                if response.status != 200:
                    error_text = await response.text()
                    logger.error(f"Storage sign error: {response.status} - {error_text}")
                    raise StorageSigningError(f"Failed to sign {bucket}/{path}: {response.status}")
                data = await response.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"Failed to reach storage for {bucket}/{path}: {e}", exc_info=True)
            raise StorageSigningError(f"Failed to sign {bucket}/{path}") from e

        signed = data.get("signedURL") or data.get("signedUrl")
        if not signed:
            raise StorageSigningError(f"Storage returned no signed URL for {bucket}/{path}")
        if signed.startswith("http"):
            return signed
        return f"{self.base_url}/storage/v1{signed}"
