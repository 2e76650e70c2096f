# mockstore/main.py
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Iterable, Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import ORJSONResponse

from . import __version__
from .auth.credentials import CredentialStore
from .config import settings
from .errors import register_error_handlers
from .logging import setup_logging
from .middleware.correlation import CorrelationIdMiddleware
from .responses import envelope
from .routers.auth_routes import router as auth_router
from .routers.discovery_routes import build_discovery_router
from .routers.order_routes import router as order_router
from .routers.perf_routes import router as perf_router
from .routers.sorting_routes import orders_router, products_router, tasks_router, users_router
from .routers.store_routes import build_store_router
from .seeds.profiles import ALL_PROFILES, StoreProfile
from .services.store import StoreContext

log = logging.getLogger("mockstore.main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    log.info(
        "%s started (env=%s, stores=%s, auth=%s)",
        settings.SERVICE_NAME,
        settings.ENV,
        ",".join(app.state.stores.keys()),
        "on" if settings.AUTH_ENABLED else "off",
    )
    yield
    log.info("%s shutdown complete", settings.SERVICE_NAME)


def create_app(profiles: Optional[Iterable[StoreProfile]] = None) -> FastAPI:
    """Build the app with fresh in-memory stores (one per profile)."""
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.SERVICE_NAME,
        description="Mock store endpoints for API behavior testing",
        version=__version__,
        default_response_class=ORJSONResponse,
        lifespan=lifespan,
    )

    app.add_middleware(CorrelationIdMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ALLOW_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["x-request-id", "x-correlation-id"],
    )
    register_error_handlers(app)

    app.state.credentials = CredentialStore.from_file(settings.USERS_FILE)
    app.state.stores = {}
    for profile in (profiles if profiles is not None else ALL_PROFILES):
        ctx = StoreContext.from_profile(profile)
        app.state.stores[profile.key] = ctx
        app.include_router(build_discovery_router(ctx))
        app.include_router(build_store_router(ctx))

    if "foodstore" in app.state.stores:
        app.include_router(order_router)
    app.include_router(auth_router)
    for router in (tasks_router, users_router, products_router, orders_router, perf_router):
        app.include_router(router)

    @app.get("/health")
    async def health():
        return envelope({"status": "ok", "service": settings.SERVICE_NAME, "env": settings.ENV})

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run("mockstore.main:app", host="0.0.0.0", port=settings.PORT)
