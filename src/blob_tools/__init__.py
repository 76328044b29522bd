"""Lazy, filtered listing of objects in S3-compatible object storage.

The package hides listing pagination behind a single iterator and filters
objects on the client side before they reach the caller.

Key Features:
    - Page-at-a-time lazy iteration over bucket listings
    - Pluggable filter predicates (regex, suffix, size, age)
    - Text and JSON output styles
    - boto3 client configuration with retry policy and custom endpoints
    - CLI interface

Recommended Usage:
    >>> from blob_tools import list_bucket
    >>> objects = list_bucket("s3://my-bucket/data/", suffix=".csv")

Advanced Usage:
    Drive the lister directly to stream very large listings:

    >>> from blob_tools.objectstorage.listing import (
    ...     ListingRequest, RemoteObjectLister, S3ListingClient, regex_filter
    ... )
    >>> client = S3ListingClient.from_config(S3ClientConfig(aws_profile="dev"))
    >>> request = ListingRequest(bucket="my-bucket", max_keys_per_page=500)
    >>> for summary in RemoteObjectLister(client, request, regex_filter(r".*\\.json")):
    ...     print(summary.s3_uri)
"""

__version__ = "0.1.0"

from .objectstorage import (
    ListingRequest,
    RemoteObjectLister,
    RemoteObjectSummary,
    S3BucketLister,
    S3ClientConfig,
    S3ListingClient,
    list_bucket,
)

__all__ = [
    "ListingRequest",
    "RemoteObjectLister",
    "RemoteObjectSummary",
    "S3BucketLister",
    "S3ClientConfig",
    "S3ListingClient",
    "list_bucket",
]
