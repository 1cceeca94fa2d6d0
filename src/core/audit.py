"""
Audit Middleware - One log line per request.

Each line records the method, path, status, duration, client and, for
/bfhl, the operation key the route dispatched (`op=-` when the request
failed before an operation was chosen). The route publishes the key on
`request.state.operation`.
"""
import time
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from src.core.logging_config import get_logger

logger = get_logger(__name__)

HEALTH_PATH = "/health"


def format_audit_line(
    method: str,
    path: str,
    status_code: int,
    duration: float,
    client_ip: str,
    operation: str,
) -> str:
    """Build the audit message for a completed request."""
    return (
        f"REQUEST: {method} {path} op={operation} "
        f"status={status_code} duration={duration:.3f}s client={client_ip}"
    )


class AuditMiddleware(BaseHTTPMiddleware):
    """
    Logs every request with its /bfhl operation and adds X-Response-Time.

    4xx responses log at WARNING and 5xx at ERROR. Health probes only
    log at DEBUG.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        started = time.perf_counter()
        client_ip = request.client.host if request.client else "unknown"

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                f"REQUEST FAILED: {request.method} {request.url.path} "
                f"op={self._operation(request)} client={client_ip} error={e}"
            )
            raise

        duration = time.perf_counter() - started
        response.headers["X-Response-Time"] = f"{duration:.3f}s"

        if request.url.path == HEALTH_PATH:
            logger.debug(f"HEALTH: status={response.status_code} duration={duration:.3f}s")
            return response

        if response.status_code >= 500:
            log_fn = logger.error
        elif response.status_code >= 400:
            log_fn = logger.warning
        else:
            log_fn = logger.info

        log_fn(format_audit_line(
            request.method,
            request.url.path,
            response.status_code,
            duration,
            client_ip,
            self._operation(request),
        ))
        return response

    @staticmethod
    def _operation(request: Request) -> str:
        return getattr(request.state, "operation", "-")


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Adds nosniff, frame-deny and referrer-policy headers to every response."""

    HEADERS = {
        "X-Content-Type-Options": "nosniff",
        "X-Frame-Options": "DENY",
        "Referrer-Policy": "strict-origin-when-cross-origin",
    }

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        response = await call_next(request)
        response.headers.update(self.HEADERS)
        return response
