"""FastAPI application factory"""

import logging
from contextlib import asynccontextmanager

import sentry_sdk
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlmodel import SQLModel

import src.domain  # noqa: F401  registers tables on SQLModel.metadata
from src.api.error import register_error_handlers
from src.api.middleware import RequestLoggingMiddleware
from src.api.routes import jobs, invoices, invoices_payments, job_costing

logger = logging.getLogger(__name__)


def create_app(config) -> FastAPI:
    if config.ENABLE_SENTRY and config.DSN_SENTRY:
        sentry_sdk.init(
            dsn=config.DSN_SENTRY,
            environment=config.SENTRY_ENVIRONMENT,
            traces_sample_rate=0.0,
        )
        logger.info("Sentry error reporting enabled")

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if config.CREATE_TABLES_ON_STARTUP:
            from src.depends import engine

            async with engine.begin() as conn:
                await conn.run_sync(SQLModel.metadata.create_all)
            logger.info("Database tables ensured")
        yield
        logger.info("Application shutting down")

    app = FastAPI(
        title="Field Service Billing API",
        description="Invoices, payments and job costing for field service work",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.config = config

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=config.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    if config.ENABLE_LOGGING_MIDDLEWARE:
        app.add_middleware(RequestLoggingMiddleware)

    register_error_handlers(app)

    app.include_router(jobs.router)
    app.include_router(invoices.router)
    app.include_router(invoices_payments.router)
    app.include_router(job_costing.router)

    @app.get("/health", tags=["Health"])
    async def health():
        return {"status": "ok"}

    return app
