"""Core utilities and shared components for blob-tools."""

from .config import settings
from .exceptions import (
    BlobToolsError,
    ListingExhaustedError,
    ServiceError,
    ValidationError,
)
from .observability import get_logger, get_tracer

__all__ = [
    "settings",
    "BlobToolsError",
    "ListingExhaustedError",
    "ServiceError",
    "ValidationError",
    "get_logger",
    "get_tracer",
]
