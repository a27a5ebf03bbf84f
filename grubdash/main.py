"""
FastAPI Application Entry Point

GrubDash API - in-memory dishes and orders backend.

Endpoints:
    - GET/POST /dishes, GET/PUT /dishes/{dish_id}
    - GET/POST /orders, GET/PUT/DELETE /orders/{order_id}
    - GET /health: System health check

Run with:
    uvicorn grubdash.main:app --port 5000

Version: 1.0.0
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from grubdash.api import dishes, orders
from grubdash.core.config import get_settings, setup_logging
from grubdash.core.exceptions import ResourceError
from grubdash.data import seed_stores
from grubdash.schemas import HealthResponse
from grubdash.store import get_dish_store, get_order_store

# Initialize configuration and logging
settings = get_settings()
setup_logging()
logger = logging.getLogger(__name__)


# =============================================================================
# APPLICATION LIFECYCLE
# =============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application startup and shutdown events.
    """
    logger.info("=" * 60)
    logger.info(f"Starting {settings.app_name}")
    logger.info(f"   Version: {settings.app_version}")
    logger.info(f"   Environment: {settings.env_mode.value}")
    logger.info(f"   Debug: {settings.debug}")
    logger.info("=" * 60)

    if settings.seed_data and not len(get_dish_store()) and not len(get_order_store()):
        seed_stores()

    logger.info(f"Dishes: {len(get_dish_store())}, Orders: {len(get_order_store())}")
    logger.info("Application ready!")

    yield

    logger.info("Shutting down...")


# =============================================================================
# APPLICATION INSTANCE
# =============================================================================

app = FastAPI(
    title=settings.app_name,
    description="Dishes and orders held in memory, with chained request validation.",
    version=settings.app_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(dishes.router, prefix="/dishes", tags=["Dishes"])
app.include_router(orders.router, prefix="/orders", tags=["Orders"])


# =============================================================================
# ROOT & HEALTH ENDPOINTS
# =============================================================================

@app.get("/", tags=["Root"])
async def root() -> dict[str, str]:
    """API root with navigation links."""
    return {
        "message": f"Welcome to {settings.app_name}",
        "version": settings.app_version,
        "environment": settings.env_mode.value,
        "documentation": "/docs",
        "dishes": "/dishes",
        "orders": "/orders",
        "health": "/health",
    }


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["Health"],
    summary="System Health Check",
)
async def health_check() -> HealthResponse:
    """Report the size of each collection."""
    return HealthResponse(
        status="operational",
        version=settings.app_version,
        dishes=len(get_dish_store()),
        orders=len(get_order_store()),
        timestamp=datetime.now(),
    )


# =============================================================================
# ERROR HANDLERS
# =============================================================================

def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"status": status_code, "message": message},
    )


@app.exception_handler(ResourceError)
async def resource_error_handler(request: Request, exc: ResourceError) -> JSONResponse:
    """Render a short-circuited chain."""
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Unknown paths and unsupported methods."""
    if exc.status_code == 404:
        message = f"Path not found: {request.url.path}"
    elif exc.status_code == 405:
        message = f"{request.method} not allowed for {request.url.path}"
    else:
        message = str(exc.detail)
    logger.info(f"{request.method} {request.url.path} -> {exc.status_code}")
    return error_response(exc.status_code, message)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Bodies that cannot be parsed as JSON."""
    if any(error.get("type") == "json_invalid" for error in exc.errors()):
        message = "Request body must be valid JSON"
    else:
        message = "Invalid request"
    logger.info(f"{request.method} {request.url.path} -> 400: {message}")
    return error_response(400, message)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all exception handler."""
    logger.exception(f"Unhandled exception: {exc}")
    message = str(exc) if settings.debug else "An unexpected error occurred"
    return error_response(500, message)


def run() -> None:
    """Serve the application with uvicorn."""
    uvicorn.run(
        "grubdash.main:app",
        host=settings.api_host,
        port=settings.api_port,
        log_level="debug" if settings.debug else "info",
    )


if __name__ == "__main__":
    run()
