"""
FastAPI Application Entry Point.

This is the main application file for the Accounting API.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Depends
from starlette.exceptions import HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from accounting_api.app.core.config import settings
from accounting_api.app.api.router import router as api_router
from accounting_api.app.db.session import get_db, dispose_engine, DATABASE_ERRORS
from accounting_api.app.core.observability import ObservabilityMiddleware, configure_logging
from accounting_api.app.core.exceptions import (
    AppException,
    app_exception_handler,
    http_exception_handler,
    validation_exception_handler,
    generic_exception_handler
)

# Import models to ensure they are registered with Base
from accounting_api.app.models.ledger_entry import LedgerEntry

configure_logging(settings.log_level)
logger = logging.getLogger("accounting_api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for application startup/shutdown.

    The ledger table is owned by the bookkeeping system, so nothing is
    created here. On shutdown the connection pool is drained.
    """
    logger.info("Connecting to database: %s", settings.db_database)
    yield
    await dispose_engine()


# Initialize FastAPI application
app = FastAPI(
    title=settings.app_name,
    version=settings.api_version,
    debug=settings.debug,
    description="Read-only cash-flow and bank-reconciliation reports over the accounting ledger",
    lifespan=lifespan,
)

app.add_middleware(ObservabilityMiddleware)

# Register global exception handlers
app.add_exception_handler(AppException, app_exception_handler)
app.add_exception_handler(HTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, generic_exception_handler)


@app.get("/", tags=["Root"], response_class=PlainTextResponse)
async def root():
    """Welcome message."""
    return "Welcome to the Accounting API!"


@app.get("/test-db", tags=["Health"], response_class=PlainTextResponse)
async def test_db(db: AsyncSession = Depends(get_db)):
    """
    Check that a pooled connection can be acquired and used.

    Returns:
        200 text on success, 500 text if the database is unreachable
    """
    try:
        await db.execute(text("SELECT 1"))
    except DATABASE_ERRORS:
        logger.exception("Database connection error")
        return PlainTextResponse("Database connection failed.", status_code=500)
    return "Database connection successful!"


@app.get("/health", tags=["Health"])
async def health_check():
    """
    Health check endpoint.

    Returns:
        dict: Status and application information
    """
    return {
        "status": "healthy",
        "app_name": settings.app_name,
        "version": settings.api_version,
    }


app.include_router(api_router, prefix="/api")


def run():
    """Serve the app with uvicorn; SIGINT/SIGTERM trigger the lifespan shutdown."""
    import uvicorn
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower()
    )


if __name__ == "__main__":
    run()
