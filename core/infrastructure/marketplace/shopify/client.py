"""
Shopify Admin REST API client.

One aiohttp ClientSession per client; the application lifespan owns the
client and closes it on shutdown.
"""
import asyncio
import logging
from typing import Any, Dict, List, Optional

import aiohttp

from core.application.interfaces import ICommerceGateway
from core.domain.errors import CommerceGatewayError
from core.settings.modules.shopify_settings import ShopifySettings


logger = logging.getLogger(__name__)


class ShopifyApiError(CommerceGatewayError):
    """Non-2xx response, timeout or transport failure from the Admin API."""


class ShopifyClient(ICommerceGateway):
    """
    Client for the Shopify Admin REST API.

    Every call goes to `https://{store}/admin/api/{version}` with the
    `X-Shopify-Access-Token` header.
    """

    def __init__(
        self,
        settings: ShopifySettings,
        session: Optional[aiohttp.ClientSession] = None,
    ) -> None:
        """
        Initialize Shopify client.

        Args:
            settings: Store domain, admin token, API version and timeout
            session: Pre-built session (tests); created lazily otherwise
        """
        self.settings = settings
        self.base_url = settings.base_url
        self._session = session
        self._owns_session = session is None
        logger.info(f"ShopifyClient initialized for {settings.store_domain or '<unconfigured>'}")

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.settings.timeout_seconds),
                headers={
                    "X-Shopify-Access-Token": self.settings.admin_api_token,
                    "Content-Type": "application/json",
                    "Accept": "application/json",
                },
            )
            self._owns_session = True
        return self._session

    async def close(self) -> None:
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()
        self._session = None

    async def _request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        payload: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """
        Perform one API call.

        Args:
            method: HTTP method
            path: Path relative to the versioned admin base URL
            params: Query parameters (None values dropped)
            payload: JSON body

        Returns:
            Decoded JSON body ({} for empty responses)

        Raises:
            ShopifyApiError: On non-2xx status, timeout or connection failure
        """
        url = f"{self.base_url}{path}"
        query = {k: v for k, v in (params or {}).items() if v is not None}
        session = self._get_session()

        try:
            async with session.request(method, url, params=query or None, json=payload) as response:
                if response.status < 200 or response.status >= 300:
                    body = await response.text()
                    logger.error(f"Shopify API error: {method} {path} -> {response.status} {body[:500]}")
                    raise ShopifyApiError(
                        f"Shopify API error: {response.status} {response.reason or ''}".strip(),
                        status_code=response.status,
                        response=body,
                    )
                if response.status == 204:
                    return {}
                text = await response.text()
                if not text:
                    return {}
                return await response.json(content_type=None)
        except asyncio.TimeoutError as e:
            logger.error(f"Shopify API timeout: {method} {path}")
            raise ShopifyApiError(f"Shopify API timeout: {method} {path}") from e
        except aiohttp.ClientError as e:
            logger.error(f"Shopify API connection error: {method} {path}: {e}")
            raise ShopifyApiError(f"Shopify API connection error: {e}") from e

    # ------------------------------------------------------------------
    # Products
    # ------------------------------------------------------------------

    async def get_product(self, product_id: str) -> Dict[str, Any]:
        data = await self._request("GET", f"/products/{product_id}.json")
        return data.get("product", {})

    async def list_products(
        self,
        limit: int = 50,
        page: Optional[int] = None,
        product_type: Optional[str] = None,
        tags: Optional[str] = None,
        status: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        data = await self._request(
            "GET",
            "/products.json",
            params={
                "limit": limit,
                "page": page,
                "product_type": product_type,
                "tags": tags,
                "status": status,
            },
        )
        return data.get("products", [])

    async def create_product(self, product: Dict[str, Any]) -> Dict[str, Any]:
        data = await self._request("POST", "/products.json", payload={"product": product})
        return data.get("product", {})

    async def update_product(self, product_id: str, product: Dict[str, Any]) -> Dict[str, Any]:
        data = await self._request(
            "PUT",
            f"/products/{product_id}.json",
            payload={"product": {**product, "id": product_id}},
        )
        return data.get("product", {})

    async def delete_product(self, product_id: str) -> None:
        await self._request("DELETE", f"/products/{product_id}.json")

    async def update_variant(self, variant_id: str, variant: Dict[str, Any]) -> Dict[str, Any]:
        data = await self._request(
            "PUT",
            f"/variants/{variant_id}.json",
            payload={"variant": {**variant, "id": variant_id}},
        )
        return data.get("variant", {})

    # ------------------------------------------------------------------
    # Orders
    # ------------------------------------------------------------------

    async def get_order(self, order_id: str) -> Dict[str, Any]:
        data = await self._request("GET", f"/orders/{order_id}.json")
        return data.get("order", {})

    async def list_orders(
        self,
        limit: int = 50,
        status: Optional[str] = None,
        financial_status: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        data = await self._request(
            "GET",
            "/orders.json",
            params={"limit": limit, "status": status, "financial_status": financial_status},
        )
        return data.get("orders", [])
