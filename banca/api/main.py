# Banca API - FastAPI Application
# ===============================
"""
Banca API
=========
REST API behind the evaluator portal.

Features:
- Evaluator login against the event spreadsheet
- Per-evaluator view of assigned groups
- Event details and rubrics
- Score submission
"""

import os
import logging
from datetime import datetime
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from banca import __version__
from banca.client import ApiError
from banca.settings import ConfigurationError, get_config
from .routers import auth, evaluations, event, sheets

logging.basicConfig(
    level=get_config().log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    config = get_config()
    logger.info(f"Banca API starting up (data source: {config.data_source.value})")
    yield
    logger.info("Banca API shutting down")


# Create FastAPI app
app = FastAPI(
    title="Banca API",
    description="""
## Banca - Evaluator Portal API

- **Auth**: evaluator login against the event spreadsheet
- **Sheets**: groups assigned to an evaluator, per evaluation sheet
- **Event**: event details and scoring rubrics
- **Evaluations**: score submission
""",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan
)

_cors_origins = os.getenv("CORS_ORIGINS", "http://localhost,http://localhost:5173").split(",")
_cors_origins = [origin.strip() for origin in _cors_origins if origin.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Authorization", "Content-Type", "X-Requested-With"],
)


# ============================================
# Include Routers
# ============================================

app.include_router(
    auth.router,
    prefix="/api/v1/auth",
    tags=["Authentication"]
)

app.include_router(
    sheets.router,
    prefix="/api/v1/sheets",
    tags=["Sheets"]
)

app.include_router(
    event.router,
    prefix="/api/v1/event",
    tags=["Event"]
)

app.include_router(
    evaluations.router,
    prefix="/api/v1/evaluations",
    tags=["Evaluations"]
)


# ============================================
# Root Endpoints
# ============================================

@app.get("/", tags=["Root"])
async def root():
    """Root endpoint with API information."""
    return {
        "service": "Banca API",
        "version": __version__,
        "docs": "/docs",
        "health": "/health",
        "api_base": "/api/v1"
    }


@app.get("/health", tags=["Root"])
async def health():
    """Simple health check endpoint."""
    return {"status": "healthy", "service": "banca-api"}


# ============================================
# Exception Handlers
# ============================================

def _error_response(request: Request, status_code: int, code: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": {
                "code": code,
                "message": message
            },
            "meta": {
                "timestamp": datetime.now().isoformat(),
                "path": str(request.url)
            }
        }
    )


@app.exception_handler(ApiError)
async def data_source_exception_handler(request: Request, exc: ApiError):
    """Data source unreachable or rejecting the request."""
    logger.error(f"Data source error on {request.url.path}: {exc}")
    return _error_response(request, 502, "DATA_SOURCE_ERROR", str(exc))


@app.exception_handler(ConfigurationError)
async def configuration_exception_handler(request: Request, exc: ConfigurationError):
    """Service started without mandatory configuration."""
    logger.error(str(exc))
    return _error_response(request, 503, "NOT_CONFIGURED", str(exc))


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler for unhandled errors."""
    logger.exception(f"Unhandled error on {request.url.path}")
    return _error_response(request, 500, "INTERNAL_ERROR", str(exc))


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "banca.api.main:app",
        host="0.0.0.0",
        port=int(os.getenv("API_PORT", 8000)),
        reload=os.getenv("API_RELOAD", "false").lower() == "true"
    )
