"""Request logging that reports the registry alongside each response."""

from __future__ import annotations

import logging
import time
from typing import Callable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from profiles.api.dependencies import get_registry
from profiles.registry import PersonRegistry

logger = logging.getLogger("profiles.api")

_MUTATING_METHODS = frozenset({"POST", "DELETE"})


def current_registry(request: Request) -> PersonRegistry:
    """Resolve the registry the routes see, honouring dependency overrides."""

    provider = request.app.dependency_overrides.get(get_registry, get_registry)
    return provider()


class LoggingMiddleware(BaseHTTPMiddleware):
    """Log `request.completed` with the registry size after the handler ran.

    Requests that may change the registry also log `registry.changed` when the
    size moved, so adds and clears show up without per-route logging.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        people = current_registry(request)
        size_before = len(people)
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = round((time.perf_counter() - started) * 1000, 2)
        size_after = len(people)

        if request.method in _MUTATING_METHODS and size_after != size_before:
            logger.info(
                "registry.changed",
                extra={"method": request.method, "size_before": size_before, "registry_size": size_after},
            )

        logger.info(
            "request.completed",
            extra={
                "path": request.url.path,
                "method": request.method,
                "status": response.status_code,
                "duration_ms": elapsed_ms,
                "registry_size": size_after,
            },
        )
        return response
