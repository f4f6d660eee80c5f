"""Access logging for every request."""
import logging
import time

from flask import Flask, g, request

logger = logging.getLogger(__name__)


def init_request_logging(app: Flask):
    """Log method, path, status and duration once each request completes."""

    @app.before_request
    def _start_timer():
        g.request_started = time.perf_counter()

    @app.after_request
    def _log_request(response):
        started = g.pop('request_started', None)
        elapsed_ms = (time.perf_counter() - started) * 1000 if started is not None else 0.0
        logger.info(f"{request.method} {request.full_path.rstrip('?')} "
                    f"{response.status_code} {elapsed_ms:.2f}ms")
        return response
