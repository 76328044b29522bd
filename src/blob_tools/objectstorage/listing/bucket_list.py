"""S3 bucket listing with client-side filtering."""

from datetime import datetime
from typing import Literal, Optional

import pydantic

from blob_tools.core import get_logger
from blob_tools.core.exceptions import ValidationError
from blob_tools.objectstorage.clients import S3ClientConfig, S3ClientManager

from .client import S3ListingClient
from .filters import accept_all, build_filter
from .lister import RemoteObjectLister
from .models import FilterPredicate, ListingRequest, RemoteObjectSummary

logger = get_logger(__name__)


class S3BucketLister:
    """Lists objects under S3 prefixes, filtered on the client side."""

    def __init__(self, config: S3ClientConfig):
        """Initialize S3 bucket lister.

        Args:
            config: S3 client configuration
        """
        self.client_manager = S3ClientManager(config)
        logger.info("S3 bucket lister initialized")

    def iter_objects(
        self,
        s3_path: str,
        predicate: FilterPredicate = accept_all,
        max_keys_per_page: Optional[int] = None,
    ) -> RemoteObjectLister:
        """Return a fresh lazy lister over objects under an S3 prefix.

        No request is sent until iteration starts.

        Args:
            s3_path: S3 path in format s3://bucket/prefix
            predicate: Filter applied to every listed object
            max_keys_per_page: Page size passed on every list request

        Raises:
            ValidationError: If path format is invalid or the page size is out of range
        """
        bucket, prefix = S3ClientManager.parse_s3_path(s3_path)
        try:
            request = ListingRequest(
                bucket=bucket, prefix=prefix, max_keys_per_page=max_keys_per_page
            )
        except pydantic.ValidationError as e:
            raise ValidationError(f"Invalid listing request for '{s3_path}': {e}")
        client = S3ListingClient(self.client_manager.client)
        return RemoteObjectLister(client, request, predicate)

    def list_objects(
        self,
        s3_path: str,
        predicate: FilterPredicate = accept_all,
        max_keys_per_page: Optional[int] = None,
    ) -> list[RemoteObjectSummary]:
        """List every accepted object under an S3 prefix.

        Args:
            s3_path: S3 path in format s3://bucket/prefix
            predicate: Filter applied to every listed object
            max_keys_per_page: Page size passed on every list request

        Returns:
            Accepted objects in listing order

        Raises:
            ServiceError: If a list request fails
            ValidationError: If path format is invalid or the page size is out of range
        """
        logger.info("Listing S3 objects", s3_path=s3_path)

        lister = self.iter_objects(s3_path, predicate, max_keys_per_page)
        objects = list(lister)

        logger.info(
            "S3 objects listed",
            s3_path=s3_path,
            object_count=len(objects),
            pages=lister.pages_fetched,
        )
        return objects


def list_bucket(
    s3_path: str,
    access_key_id: Optional[str] = None,
    secret_access_key: Optional[str] = None,
    session_token: Optional[str] = None,
    region_name: Optional[str] = None,
    endpoint_url: Optional[str] = None,
    aws_profile: Optional[str] = None,
    max_attempts: Optional[int] = None,
    retry_mode: Optional[Literal["legacy", "standard", "adaptive"]] = None,
    max_keys_per_page: Optional[int] = None,
    regex: Optional[str] = None,
    suffix: Optional[str] = None,
    min_size: Optional[int] = None,
    older_than: Optional[datetime] = None,
) -> list[RemoteObjectSummary]:
    """Convenience function to list and filter objects under an S3 prefix.

    Args:
        s3_path: S3 path in format s3://bucket/prefix
        access_key_id: AWS access key ID
        secret_access_key: AWS secret access key
        session_token: AWS session token for temporary credentials
        region_name: AWS region name (defaults to the configured region)
        endpoint_url: Custom S3 endpoint URL
        aws_profile: AWS CLI profile name
        max_attempts: Total attempts per request, including the first
        retry_mode: botocore retry mode
        max_keys_per_page: Page size passed on every list request
        regex: Keep only keys fully matching this expression
        suffix: Keep only keys ending with this suffix
        min_size: Keep only objects of at least this many bytes
        older_than: Keep only objects last modified before this time

    Returns:
        Accepted objects in listing order
    """
    config_kwargs = {}
    if region_name is not None:
        config_kwargs["region_name"] = region_name

    config = S3ClientConfig(
        access_key_id=access_key_id,
        secret_access_key=secret_access_key,
        session_token=session_token,
        endpoint_url=endpoint_url,
        aws_profile=aws_profile,
        max_attempts=max_attempts,
        retry_mode=retry_mode,
        **config_kwargs,
    )
    predicate = build_filter(
        regex=regex, suffix=suffix, min_size=min_size, older_than=older_than
    )

    lister = S3BucketLister(config)
    return lister.list_objects(s3_path, predicate, max_keys_per_page)
