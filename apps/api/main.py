"""FastAPI application main entry point."""

from contextlib import asynccontextmanager
import logging
import time

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from apps.api.v1.endpoints import digital_assets, downloads, orders, sync, webhooks
from core.domain.errors import (
    CommerceGatewayError,
    OrderNotFoundError,
    WebhookPayloadError,
    WebhookVerificationError,
)
from core.infrastructure.adapters.notifications.mock_order_mailer import MockOrderMailer
from core.infrastructure.adapters.notifications.resend_order_mailer import ResendOrderMailer
from core.infrastructure.database import (
    close_database,
    create_engine,
    create_session_factory,
    init_database,
)
from core.infrastructure.logging import configure_logging
from core.infrastructure.marketplace.shopify import ShopifyClient
from core.infrastructure.storage import StorageSigningError, SupabaseStorageClient
from core.settings import get_app_settings

configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build process-wide collaborators once and close them on shutdown."""
    settings = get_app_settings()
    engine = create_engine(settings.database)
    await init_database(engine)

    shopify_client = ShopifyClient(settings.shopify)
    storage_client = SupabaseStorageClient(settings.storage)
    if settings.email.enabled:
        mailer = ResendOrderMailer(settings.email)
    else:
        logger.info("EMAIL_ENABLED is off, order emails go to the mock mailer")
        mailer = MockOrderMailer()

    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)
    app.state.commerce_gateway = shopify_client
    app.state.storage_client = storage_client
    app.state.order_mailer = mailer

    logger.info(f"✅ Commerce sync service started (APP_ENV={settings.runtime.app_env})")
    try:
        yield
    finally:
        await shopify_client.close()
        await storage_client.close()
        if isinstance(mailer, ResendOrderMailer):
            await mailer.close()
        await close_database(engine)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Commerce Sync API",
        description="Shopify webhook ingestion, order and product sync, digital delivery",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:3000",
            "http://127.0.0.1:3000",
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log all requests with timing."""
        start_time = time.time()
        response = await call_next(request)
        duration = (time.time() - start_time) * 1000
        logger.info(f"{request.method} {request.url.path} -> {response.status_code} ({duration:.1f}ms)")
        return response

    # Include routers
    for module in (webhooks, downloads, orders, digital_assets, sync):
        app.include_router(module.router, prefix="/api/v1")

    register_exception_handlers(app)

    @app.get("/health")
    @app.get("/api/v1/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


def register_exception_handlers(app: FastAPI) -> None:

    @app.exception_handler(WebhookVerificationError)
    async def webhook_verification_handler(request: Request, exc: WebhookVerificationError) -> JSONResponse:
        logger.warning(f"Rejected webhook: {exc}")
        return JSONResponse(status_code=status.HTTP_401_UNAUTHORIZED, content={"detail": "Unauthorized"})

    @app.exception_handler(WebhookPayloadError)
    async def webhook_payload_handler(request: Request, exc: WebhookPayloadError) -> JSONResponse:
        logger.warning(f"Bad webhook payload: {exc}")
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})

    @app.exception_handler(OrderNotFoundError)
    async def order_not_found_handler(request: Request, exc: OrderNotFoundError) -> JSONResponse:
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})

    @app.exception_handler(CommerceGatewayError)
    async def gateway_error_handler(request: Request, exc: CommerceGatewayError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY,
            content={"detail": str(exc), "retryable": exc.is_retryable},
        )

    @app.exception_handler(StorageSigningError)
    async def storage_error_handler(request: Request, exc: StorageSigningError) -> JSONResponse:
        logger.error(f"Storage signing failed: {exc}")
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY,
            content={"detail": "Download temporarily unavailable"},
        )

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
        """Handle ValueError exceptions."""
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": str(exc)},
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Handle general exceptions."""
        logger.error(f"❌ Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
