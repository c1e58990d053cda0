"""Request logging middleware."""

import time
import logging
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from typing import Callable, Optional


class LoggingMiddleware(BaseHTTPMiddleware):
    """Logs one line per request with its status and duration.
    
    Client errors are logged at WARNING, server errors at ERROR and
    everything else at INFO.
    """
    
    def __init__(self, app, logger: Optional[logging.Logger] = None):
        super().__init__(app)
        self.logger = logger or logging.getLogger("ito.web")
    
    @staticmethod
    def _level_for(status_code: int) -> int:
        if status_code >= 500:
            return logging.ERROR
        if status_code >= 400:
            return logging.WARNING
        return logging.INFO
    
    async def dispatch(self, request: Request, call_next: Callable):
        started = time.perf_counter()
        client_ip = request.client.host if request.client else "unknown"
        
        try:
            response = await call_next(request)
        except Exception:
            duration_ms = (time.perf_counter() - started) * 1000
            self.logger.error(
                f"{client_ip} {request.method} {request.url.path} -> unhandled error ({duration_ms:.2f}ms)"
            )
            raise
        
        duration_ms = (time.perf_counter() - started) * 1000
        self.logger.log(
            self._level_for(response.status_code),
            f"{client_ip} {request.method} {request.url.path} -> {response.status_code} ({duration_ms:.2f}ms)",
        )
        return response
