"""Main application file for FastAPI app"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from fpdb.api.v1 import api_router
from fpdb.core import settings
from fpdb.core.exceptions import ConfigurationError, QueryExecutionError
from fpdb.core.field_registry import load_field_registry
from fpdb.core.log_config import configure_logging
from fpdb.db.database import engine, verify_database
from fpdb.middleware import ActivityLogMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan"""
    configure_logging(settings)
    app.state.field_registry = load_field_registry(settings)
    verify_database(engine)
    logger.info("connected to database %s", engine.url)
    yield
    engine.dispose()


app = FastAPI(
    title=settings.APP_NAME,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

app.add_middleware(ActivityLogMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["GET"],
    allow_headers=["Content-Type"],
)

app.include_router(api_router)


# Exception handlers
@app.exception_handler(QueryExecutionError)
async def query_execution_error_handler(request: Request, exc: QueryExecutionError) -> Response:
    """Handle failed database queries."""
    return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


@app.exception_handler(ConfigurationError)
async def configuration_error_handler(request: Request, exc: ConfigurationError) -> JSONResponse:
    """Handle server configuration errors found while serving a request."""
    logger.error("configuration error: %s", exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Server configuration error"},
    )


# Health check endpoints
@app.get("/", tags=["health"], include_in_schema=False)
async def root():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "app_name": settings.APP_NAME,
        "app_version": settings.APP_VERSION,
    }


@app.get("/health", tags=["health"])
async def health_check():
    """Health check endpoint"""
    return {"status": "ok"}
