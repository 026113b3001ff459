"""API middleware for rechart."""

from rechart.api.middleware.logging import LoggingMiddleware

__all__ = [
    "LoggingMiddleware",
]
