"""Object storage listing for S3-compatible services."""

from .clients import S3ClientConfig, S3ClientManager
from .listing import (
    ListingRequest,
    RemoteObjectLister,
    RemoteObjectSummary,
    S3BucketLister,
    S3ListingClient,
    list_bucket,
)

__all__ = [
    "ListingRequest",
    "RemoteObjectLister",
    "RemoteObjectSummary",
    "S3BucketLister",
    "S3ClientConfig",
    "S3ClientManager",
    "S3ListingClient",
    "list_bucket",
]
