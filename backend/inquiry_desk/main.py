import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Any
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from inquiry_desk.core.config import settings, validate_production_settings
from inquiry_desk.core.errors import ServiceError
from inquiry_desk.api.auth import router as auth_router
from inquiry_desk.api.inquiries import router as inquiries_router
from inquiry_desk.api.clients import router as clients_router
from inquiry_desk.api.bookings import router as bookings_router
from inquiry_desk.api.feed import router as feed_router
from inquiry_desk.services.notify.notifier import get_notifier
from inquiry_desk.services.sessions.sweeper import SessionSweeper

logging.basicConfig(level=getattr(logging, settings.log_level.upper(), logging.INFO))
logger = logging.getLogger(__name__)

sweeper = SessionSweeper()
_sweeper_task = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    global _sweeper_task
    # Startup
    validate_production_settings(settings)
    if settings.session_sweep_enabled:
        _sweeper_task = asyncio.create_task(sweeper.start())
    yield
    # Shutdown - stop and wait
    sweeper.stop()
    if _sweeper_task:
        try:
            await asyncio.wait_for(_sweeper_task, timeout=10)
        except asyncio.TimeoutError:
            logger.warning("Session sweeper did not complete in time")
        _sweeper_task = None
    await get_notifier().aclose()


app = FastAPI(
    title=settings.app_name,
    description="Booking inquiry management API",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError):
    """Return only the public detail; the internal message goes to the log."""
    if exc.status_code >= 500:
        logger.error(f"{type(exc).__name__} on {request.method} {request.url.path}: {exc}")
    else:
        logger.info(f"{type(exc).__name__} on {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


# Include routers
app.include_router(auth_router)
app.include_router(inquiries_router)
app.include_router(clients_router)
app.include_router(bookings_router)
app.include_router(feed_router)


@app.get("/health")
async def health_check() -> dict[str, Any]:
    return {
        "status": "healthy",
        "version": "0.1.0",
        "environment": settings.environment,
    }
