"""FastAPI dependencies for dependency injection.

Long-lived collaborators (engine, session factory, HTTP clients, mailer)
are built once by the application lifespan and stored on `app.state`;
services are assembled per request from them.
"""

from dotenv import load_dotenv
from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import async_sessionmaker

from core.application.interfaces import ICommerceGateway, IOrderMailer, IStorageClient
from core.application.services import (
    DigitalAssetService,
    NotificationTrigger,
    OrderReconciler,
    ProductSyncService,
    WebhookIngressService,
    WebhookVerifier,
)
from core.settings import AppSettings

load_dotenv()


def get_settings(request: Request) -> AppSettings:
    return request.app.state.settings


def get_session_factory(request: Request) -> async_sessionmaker:
    """Get SQLAlchemy session factory.

    Returns:
        async_sessionmaker built by the lifespan
    """
    return request.app.state.session_factory


def get_commerce_gateway(request: Request) -> ICommerceGateway:
    return request.app.state.commerce_gateway


def get_storage_client(request: Request) -> IStorageClient:
    return request.app.state.storage_client


def get_order_mailer(request: Request) -> IOrderMailer:
    return request.app.state.order_mailer


def get_notification_trigger(
    session_factory: async_sessionmaker = Depends(get_session_factory),
    mailer: IOrderMailer = Depends(get_order_mailer),
) -> NotificationTrigger:
    return NotificationTrigger(session_factory, mailer)


def get_order_reconciler(
    session_factory: async_sessionmaker = Depends(get_session_factory),
    trigger: NotificationTrigger = Depends(get_notification_trigger),
) -> OrderReconciler:
    return OrderReconciler(session_factory, trigger)


def get_product_sync_service(
    session_factory: async_sessionmaker = Depends(get_session_factory),
    gateway: ICommerceGateway = Depends(get_commerce_gateway),
) -> ProductSyncService:
    return ProductSyncService(session_factory, gateway)


def get_digital_asset_service(
    session_factory: async_sessionmaker = Depends(get_session_factory),
    storage: IStorageClient = Depends(get_storage_client),
    settings: AppSettings = Depends(get_settings),
) -> DigitalAssetService:
    return DigitalAssetService(
        session_factory,
        storage,
        default_ttl_days=settings.runtime.download_link_ttl_days,
        signed_url_ttl_seconds=settings.runtime.signed_url_ttl_seconds,
    )


def get_webhook_verifier(settings: AppSettings = Depends(get_settings)) -> WebhookVerifier:
    return WebhookVerifier.from_settings(settings.shopify, settings.runtime)


def get_webhook_service(
    verifier: WebhookVerifier = Depends(get_webhook_verifier),
    reconciler: OrderReconciler = Depends(get_order_reconciler),
    product_sync: ProductSyncService = Depends(get_product_sync_service),
) -> WebhookIngressService:
    return WebhookIngressService(verifier, reconciler, product_sync)
