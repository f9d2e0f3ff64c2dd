"""FastAPI application entrypoint for the profiles service."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from profiles.api.middleware.logging import LoggingMiddleware
from profiles.api.routes import admin, people, users
from profiles.core.config import settings
from profiles.core.exceptions import ApplicationError
from profiles.utils.monitoring import monitoring

app = FastAPI(
    title=settings.API_TITLE,
    version=settings.API_VERSION,
    debug=settings.DEBUG,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(LoggingMiddleware)

# Routers
app.include_router(people.router, prefix="/api")
app.include_router(users.router, prefix="/api")
app.include_router(admin.router, prefix="/api")


@app.get("/metrics")
async def metrics() -> Response:
    """Prometheus scrape endpoint."""

    return Response(generate_latest(monitoring.collector_registry), media_type=CONTENT_TYPE_LATEST)


@app.exception_handler(ApplicationError)
async def handle_application_error(_: Request, exc: ApplicationError):
    """Return standardized responses for application layer exceptions."""

    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message, "code": exc.code})
