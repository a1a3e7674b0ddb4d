"""
Main FastAPI application.

1. Design flow API (/api/v1/design/*): questions, description, pages, wireframe
2. Component vocabulary API (/api/v1/components)
3. Structured logging with correlation tracking
4. Liveness and readiness probes
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
import uuid
import time

from app.config import settings
from app.core.logger import setup_logging
from app.api.errors import register_exception_handlers

# Import new structured logging
from app.utils.logging import get_logger, log_context

# Import routers
from app.api.v1 import health, design, components

logger = get_logger(__name__)


# ============================================================================
# APPLICATION LIFESPAN
# ============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan with structured logging"""

    setup_logging()

    with log_context(correlation_id=str(uuid.uuid4()), operation="startup"):
        logger.info(
            "app.startup.completed",
            extra={
                "service": settings.app_name,
                "version": settings.app_version,
                "debug": settings.debug,
                "generation_backend": settings.generation_backend
            }
        )

    yield

    with log_context(correlation_id=str(uuid.uuid4()), operation="shutdown"):
        logger.info("app.shutdown.completed")


# ============================================================================
# FASTAPI APP
# ============================================================================

app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Generates mobile app wireframes from natural-language descriptions",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================================
# REQUEST/RESPONSE LOGGING MIDDLEWARE
# ============================================================================

@app.middleware("http")
async def logging_middleware(request: Request, call_next):
    """Log all HTTP requests with correlation tracking"""

    correlation_id = request.headers.get("X-Correlation-ID") or str(uuid.uuid4())

    start_time = time.time()

    with log_context(
        correlation_id=correlation_id,
        endpoint=request.url.path,
        method=request.method
    ):
        logger.info(
            "http.request.received",
            extra={
                "path": request.url.path,
                "method": request.method,
                "client_ip": request.client.host if request.client else None
            }
        )

        response = await call_next(request)

        duration_ms = (time.time() - start_time) * 1000

        logger.performance(
            "http.request.completed",
            duration_ms=duration_ms,
            extra={
                "status_code": response.status_code,
                "path": request.url.path,
                "method": request.method
            }
        )

        response.headers["X-Correlation-ID"] = correlation_id

        return response


# ============================================================================
# EXCEPTION HANDLERS
# ============================================================================

register_exception_handlers(app)


# ============================================================================
# ROUTERS
# ============================================================================

app.include_router(
    health.router,
    tags=["Health"]
)

app.include_router(
    design.router,
    prefix="/api/v1/design",
    tags=["Design"]
)

app.include_router(
    components.router,
    prefix="/api/v1",
    tags=["Components"]
)


# ============================================================================
# ROOT ENDPOINT
# ============================================================================

@app.get("/")
async def root():
    """Root endpoint with service info"""
    return {
        "service": settings.app_name,
        "version": settings.app_version,
        "status": "running",
        "docs": "/docs",
        "health": {
            "liveness": "/health/live",
            "readiness": "/health/ready"
        },
        "api": {
            "process": "POST /api/v1/design/process",
            "construct_description": "POST /api/v1/design/construct-description",
            "generate_pages": "POST /api/v1/design/generate-pages",
            "generate_wireframe": "POST /api/v1/design/generate-wireframe",
            "components": "GET /api/v1/components"
        }
    }


# ============================================================================
# DEVELOPMENT SERVER
# ============================================================================

if __name__ == "__main__":
    import uvicorn

    logger.info(
        "app.dev_server.starting",
        extra={
            "host": settings.host,
            "port": settings.port,
            "reload": settings.debug
        }
    )

    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )
