"""Observability module: structured logging, request IDs, metrics, health."""

from .logging_config import configure_logging, get_logger, get_request_id, request_id_var
from .middleware import RequestIDMiddleware
from .metrics import (
    posts_created_total,
    match_requests_total,
    matches_returned,
    match_score_histogram,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "get_request_id",
    "request_id_var",
    "RequestIDMiddleware",
    "posts_created_total",
    "match_requests_total",
    "matches_returned",
    "match_score_histogram",
]
