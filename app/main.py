# app/main.py
"""
FastAPI application entry point.
Wires middleware, error translation, and the waste log + health routers.
"""

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from app import constants
from app.routers import health, waste_logs
from app.database import create_tables
from app.config import settings
from app.exceptions import WasteLogError
from app.schemas.common import ErrorResponse
from app.utils.logger import get_logger
import time

logger = get_logger(__name__)

app = FastAPI(
    title="WasteWise Collection Logs API",
    description="Waste collection start/end logging with zone and vehicle reports.",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# ── CORS (admin dashboard calls the API from the browser) ───────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Request Timing Middleware ────────────────────────────────────────────────
@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.time()
    response = await call_next(request)
    duration = round((time.time() - start) * 1000, 2)
    logger.debug(f"{request.method} {request.url.path} → {response.status_code} ({duration}ms)")
    return response


def _error(status_code: int, message: str) -> JSONResponse:
    body = ErrorResponse(status=status_code, message=message)
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body, by_alias=True))


# ── Exception Handlers ───────────────────────────────────────────────────────
@app.exception_handler(WasteLogError)
async def waste_log_exception_handler(request: Request, exc: WasteLogError):
    logger.warning(f"{type(exc).__name__} on {request.url.path}: {exc.message}")
    return _error(exc.http_status, exc.message)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    details = ", ".join(
        f"{'.'.join(str(p) for p in err['loc'] if p not in ('body', 'query', 'path'))}: {err['msg']}"
        for err in exc.errors()
    )
    message = f"Validation failed: {details}" if details else "Validation failed for unknown reasons."
    logger.warning(f"Invalid request on {request.url.path}: {message}")
    return _error(status.HTTP_400_BAD_REQUEST, message)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, constants.UNEXPECTED_ERROR)


# ── Routers ──────────────────────────────────────────────────────────────────
app.include_router(waste_logs.router, tags=["🗑️  Waste Logs"])
app.include_router(health.router, prefix="/api/v1", tags=["💚 Health"])


# ── Startup ───────────────────────────────────────────────────────────────────
@app.on_event("startup")
async def startup():
    logger.info("🚀 WasteWise Backend starting up...")
    create_tables()
    logger.info("✅ Database tables ready")
    logger.info(f"🌐 Listening on http://{settings.BACKEND_IP}:{settings.BACKEND_PORT}")
    logger.info("📖 API docs at /docs")


@app.on_event("shutdown")
async def shutdown():
    logger.info("🛑 WasteWise Backend shutting down...")
