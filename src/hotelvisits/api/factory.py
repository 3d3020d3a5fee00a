"""FastAPI application factory.

Builds the three stores once (seeded from the data directory unless a
ready-made bundle is passed in) and keeps them on ``app.state.stores``.
"""

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from hotelvisits.infra.settings import Settings, load_settings
from hotelvisits.infra.stores.bundle import Stores, load_stores
from hotelvisits.observability.correlation import CORRELATION_ID_HEADER, correlation_scope
from hotelvisits.observability.logging import get_logger

from .routers import public

logger = get_logger(__name__)

API_PREFIX = "/api/"


def create_app(settings: Settings | None = None, stores: Stores | None = None) -> FastAPI:
    """Create the FastAPI app.

    Args:
        settings: Explicit settings. If None, read from the environment.
        stores: Pre-built stores. If None, seeded from settings.data_dir.

    Returns:
        Configured FastAPI application.
    """
    if settings is None:
        settings = load_settings()
    if stores is None:
        stores = load_stores(settings.data_dir)

    app = FastAPI(
        title="Hotel Visits API",
        version="1.0.0",
        docs_url="/docs" if settings.docs_enabled else None,
        redoc_url=None,
        openapi_url="/openapi.json" if settings.docs_enabled else None,
    )
    app.state.settings = settings
    app.state.stores = stores

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[CORRELATION_ID_HEADER],
    )

    # Route matching under /api is case-insensitive; the dashboard calls
    # /api/Hotel, /api/Visitation and /api/Customer/loyal. Path params are ints.
    @app.middleware("http")
    async def api_path_case_middleware(request: Request, call_next) -> Response:
        path = request.scope["path"]
        if path.lower().startswith(API_PREFIX):
            request.scope["path"] = path.lower()
        return await call_next(request)

    # Correlation ID middleware
    @app.middleware("http")
    async def correlation_id_middleware(request: Request, call_next) -> Response:
        with correlation_scope(request.headers.get(CORRELATION_ID_HEADER)) as cid:
            response = await call_next(request)
            response.headers[CORRELATION_ID_HEADER] = cid
            return response

    app.include_router(public.router)
    app.include_router(public.api_router)

    logger.info(
        "app created",
        extra={
            "extra_fields": {
                "data_dir": str(settings.data_dir),
                "customers": len(stores.customers),
                "hotels": len(stores.hotels),
                "visitations": len(stores.visitations),
            }
        },
    )
    return app
