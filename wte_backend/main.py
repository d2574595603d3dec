from contextlib import asynccontextmanager
from datetime import datetime, timezone
import logging
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from .core.config import settings

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

from .infrastructure import models
from .infrastructure.database import engine
from .api import auth, sites, waste
from .domain.errors import WasteTrackerError

logger = logging.getLogger(__name__)

MIN_JWT_SECRET_LENGTH = 32

_started_at = time.monotonic()


def validate_config():
    """Validate critical configuration settings on startup."""
    # Always check JWT secret length (minimum 32 chars for security)
    if len(settings.JWT_SECRET_KEY) < MIN_JWT_SECRET_LENGTH:
        raise RuntimeError(
            f"SECURITY ERROR: JWT_SECRET_KEY must be at least {MIN_JWT_SECRET_LENGTH} characters "
            f"(current: {len(settings.JWT_SECRET_KEY)} chars)"
        )

    # Warn about CORS in production
    if settings.is_production:
        localhost_origins = [o for o in settings.BACKEND_CORS_ORIGINS if "localhost" in o]
        if localhost_origins:
            logger.warning(
                f"WARNING: CORS origins contain localhost URLs in production: {localhost_origins}. "
                "Consider removing localhost from BACKEND_CORS_ORIGINS env var."
            )

    logger.info(f"Config validation passed. Production mode: {settings.is_production}")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """FastAPI lifespan events for startup and shutdown."""
    logger.info("Starting WTE Waste Tracker API...")

    validate_config()

    try:
        models.Base.metadata.create_all(bind=engine)
    except SQLAlchemyError as e:
        # Keep serving; requests will fail fast with 503 until the database is reachable
        logger.error(f"Database unavailable at startup: {e}")

    yield

    logger.info("Shutting down WTE Waste Tracker API...")
    engine.dispose()


app = FastAPI(title=settings.PROJECT_NAME, lifespan=lifespan)

# Set all CORS enabled origins
if settings.BACKEND_CORS_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


# =============================================================================
# Exception handlers
# =============================================================================

@app.exception_handler(WasteTrackerError)
async def domain_exception_handler(request: Request, exc: WasteTrackerError):
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message},
        headers=headers,
    )


def _internal_error_content(detail: str, exc: Exception) -> dict:
    content = {"detail": detail}
    if settings.expose_error_details:
        content["message"] = str(exc)
    return content


@app.exception_handler(SQLAlchemyError)
async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    logger.error(f"Database error on {request.method} {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=503,
        content=_internal_error_content("Database unavailable", exc),
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content=_internal_error_content("Internal server error", exc),
    )


app.include_router(auth.router, prefix=f"{settings.API_V1_STR}/auth", tags=["authentication"])
app.include_router(sites.router, prefix=f"{settings.API_V1_STR}/sites", tags=["sites"])
app.include_router(waste.router, prefix=f"{settings.API_V1_STR}/waste", tags=["waste"])


@app.get("/health")
def health_check():
    return {"status": "healthy"}


@app.get(f"{settings.API_V1_STR}/health")
def api_health_check():
    return {
        "ok": True,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "uptime": round(time.monotonic() - _started_at, 3),
    }
