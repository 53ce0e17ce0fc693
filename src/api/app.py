"""FastAPI application factory"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from src.api.error import ClientError, client_error_handler
from src.api.routes import analytics, customers, exports, profile, transactions
from src.depends import init_db

logger = logging.getLogger(__name__)


def create_app(config) -> FastAPI:
    logging.basicConfig(
        level=getattr(logging, str(config.LOG_LEVEL).upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await init_db()
        logger.info("Collection store ready")
        yield

    app = FastAPI(
        title="CardVault Ledger Service",
        description="Customer contacts, sales ledger, payments and analytics",
        lifespan=lifespan,
    )

    if config.CORS_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.CORS_ORIGINS,
            allow_credentials=config.CORS_ALLOW_CREDENTIALS,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.add_exception_handler(ClientError, client_error_handler)

    for module in (customers, transactions, analytics, profile, exports):
        app.include_router(module.router, prefix=config.API_PREFIX)

    @app.get("/health", tags=["System"])
    async def health():
        return {"status": "ok"}

    return app
