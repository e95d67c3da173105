"""
LabelHub QR Print Service - FastAPI Application Entry Point
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from labelhub import __version__
from labelhub.config import settings
from labelhub.logger import get_logger, configure_logging
from labelhub.models.common import ErrorResponse
from labelhub.storage.print_job_store import PrintJobStore

# Configure logging
configure_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    app.state.print_job_store = PrintJobStore()
    logger.info("LabelHub starting", extra={
        "environment": settings.environment,
        "log_level": settings.log_level,
        "print_job_ttl_seconds": settings.print_job_ttl_seconds
    })

    yield

    # Shutdown
    app.state.print_job_store.shutdown()
    logger.info("LabelHub shutting down")


# Create FastAPI app
app = FastAPI(
    title="LabelHub",
    description="QR code generation and label printing",
    version=__version__,
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.is_development else [settings.public_base_url],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Handle uncaught exceptions."""
    logger.error("Unhandled exception", extra={
        "path": request.url.path,
        "method": request.method,
        "error": str(exc)
    }, exc_info=True)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(
            error_code="INTERNAL_ERROR",
            message="An unexpected error occurred",
            details={"error": str(exc)} if settings.is_development else {}
        ).model_dump(mode="json")
    )


# Health check endpoint
@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {
        "status": "healthy",
        "version": __version__,
        "environment": settings.environment
    }


# Root endpoint
@app.get("/")
async def root():
    """Root endpoint with API information."""
    return {
        "service": "LabelHub",
        "version": __version__,
        "docs": "/docs",
        "health": "/health"
    }


# Import and include routers
from labelhub.routes.qr_routes import router as qr_router
from labelhub.routes.print_routes import router as print_router
from labelhub.routes.page_routes import router as page_router

app.include_router(qr_router, prefix="/api", tags=["qr"])
app.include_router(print_router, prefix="/api", tags=["print-jobs"])
app.include_router(page_router, tags=["pages"])


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "labelhub.main:app",
        host="0.0.0.0",
        port=settings.port,
        reload=settings.is_development,
        log_level=settings.log_level
    )
