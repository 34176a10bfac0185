"""FrontDesk: FastAPI application entry point."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from frontdesk.api.v1.auth import router as auth_router
from frontdesk.api.v1.finance import router as finance_router
from frontdesk.api.v1.reports import router as reports_router
from frontdesk.api.v1.reservations import router as reservations_router
from frontdesk.api.v1.rooms import router as rooms_router
from frontdesk.config import settings
from frontdesk.errors import InvalidTransition, NotFoundError, ValidationError
from frontdesk.services.front_desk import FrontDesk

# Configure root logger so all frontdesk.* loggers output to stderr.
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan handler for startup and shutdown events."""
    counts = app.state.front_desk.rooms.status_counts()
    logger.info("%s %s ready with %s rooms", settings.app_name, settings.app_version, counts["all"])
    yield


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Hotel front-desk administration: rooms, stays, reservations, billing, and ledgers.",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# One in-memory desk per process. Route handlers are async and never await
# inside a registry call, so mutations are applied one at a time.
app.state.front_desk = FrontDesk.from_settings(settings)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------------------------------------------------------------------------
# Domain error -> HTTP response
# ---------------------------------------------------------------------------


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": exc.message, "field": exc.field},
    )


@app.exception_handler(InvalidTransition)
async def invalid_transition_handler(request: Request, exc: InvalidTransition) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"detail": exc.message, "current": exc.current, "requested": exc.requested},
    )


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": exc.message})


# Routers
app.include_router(auth_router)
app.include_router(rooms_router)
app.include_router(reservations_router)
app.include_router(reports_router)
app.include_router(finance_router)


@app.get("/health", tags=["health"])
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy", "service": settings.app_name}


@app.get("/", tags=["root"])
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {
        "service": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
    }
