"""
Voyena FastAPI Application Entry Point.

Run with: uvicorn voyena.main:app --reload
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from voyena.api.routes import brain_maps, events, folders, notes, settings as settings_routes
from voyena.config import get_settings, sanitize_error
from voyena.db.schema import init_schema
from voyena.db.session import store
from voyena.errors import NotFoundError

settings = get_settings()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager for startup/shutdown."""
    # Startup
    logging.basicConfig(level=settings.log_level.upper())
    await init_schema(store.engine, settings.database_path)
    logger.info("Store opened at %s", settings.database_path)
    yield
    # Shutdown
    await store.dispose()


app = FastAPI(
    title=settings.app_name,
    description="Local notes, events and brain maps store",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(notes.router)
app.include_router(folders.router)
app.include_router(events.router)
app.include_router(settings_routes.router)
app.include_router(brain_maps.router)
app.include_router(brain_maps.nodes_router)
app.include_router(brain_maps.connections_router)


# =============================================================================
# ERROR HANDLERS
# =============================================================================


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})


@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    logger.error("Constraint violation on %s %s: %s", request.method, request.url.path, exc.orig)
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"detail": sanitize_error(exc.orig, generic_message="Constraint violation.")},
    )


@app.exception_handler(SQLAlchemyError)
async def store_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("Store failure on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": sanitize_error(exc)},
    )


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}
