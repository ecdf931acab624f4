import logging
from pathlib import Path

from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from ewaste_api.core.config import settings
from ewaste_api.core.logging_config import setup_logging
from ewaste_api.api.v1.api import api_router, auth_router
from ewaste_api.api.v1.endpoints.users import limiter
from ewaste_api.middleware.error_middleware import register_error_handlers
from ewaste_api.services.email_service import EmailDispatcher, build_email_provider

setup_logging(settings.log_level)
logger = logging.getLogger(__name__)


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Listings, requests and approvals for e-waste disposal",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.state.limiter = limiter
# One dispatcher per process, shared by every request handler
app.state.email_dispatcher = EmailDispatcher(
    build_email_provider(settings), max_workers=settings.email_workers
)
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

register_error_handlers(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT"],
    allow_headers=["Content-Type"],
)


@app.on_event("shutdown")
def shutdown_event():
    """Let queued emails finish before the process exits."""
    app.state.email_dispatcher.shutdown(wait=True)
    logger.info("Email dispatcher stopped")


# Include API routes
app.include_router(auth_router)
app.include_router(api_router, prefix="/api")

# Uploaded images
Path(settings.upload_dir).mkdir(parents=True, exist_ok=True)
app.mount(
    settings.upload_url_prefix,
    StaticFiles(directory=settings.upload_dir),
    name="uploads",
)


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return Response(status_code=200)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "ewaste_api.main:app",
        host="0.0.0.0",
        port=5000,
        reload=settings.debug
    )
