"""Listing clients: one page per call against an object storage service."""

from typing import Any, Dict, Protocol

from botocore.exceptions import BotoCoreError, ClientError

from blob_tools.core import get_logger, get_tracer
from blob_tools.core.exceptions import ServiceError
from blob_tools.objectstorage.clients import S3ClientConfig, S3ClientManager

from .models import ListingRequest, Page, RemoteObjectSummary

logger = get_logger(__name__)
tracer = get_tracer(__name__)


class ListingClient(Protocol):
    """Protocol for fetching a single page of a remote listing."""

    def list(self, request: ListingRequest) -> Page:
        """Fetch the page described by request.

        Raises:
            ServiceError: If the service call fails
        """
        ...


class S3ListingClient:
    """ListingClient backed by a boto3 S3 client's list_objects_v2."""

    def __init__(self, client: Any):
        """Initialize the listing client.

        Args:
            client: boto3 S3 client
        """
        self.client = client

    @classmethod
    def from_config(cls, config: S3ClientConfig) -> "S3ListingClient":
        """Create a listing client from an S3 client configuration."""
        return cls(S3ClientManager(config).client)

    def list(self, request: ListingRequest) -> Page:
        kwargs: Dict[str, Any] = {
            "Bucket": request.bucket,
            "Prefix": request.prefix,
        }
        if request.max_keys_per_page is not None:
            kwargs["MaxKeys"] = request.max_keys_per_page
        if request.continuation_token is not None:
            kwargs["ContinuationToken"] = request.continuation_token

        with tracer.start_as_current_span("s3.list_objects_v2") as span:
            span.set_attribute("s3.bucket", request.bucket)
            span.set_attribute("s3.prefix", request.prefix)
            try:
                response = self.client.list_objects_v2(**kwargs)
            except ClientError as e:
                error_code = e.response.get("Error", {}).get("Code")
                error_msg = (
                    f"Failed to list s3://{request.bucket}/{request.prefix}: {e}"
                )
                logger.error(error_msg, error=str(e), error_code=error_code)
                raise ServiceError(
                    error_msg,
                    bucket=request.bucket,
                    prefix=request.prefix,
                    error_code=error_code,
                )
            except BotoCoreError as e:
                error_msg = (
                    f"Failed to list s3://{request.bucket}/{request.prefix}: {e}"
                )
                logger.error(error_msg, error=str(e))
                raise ServiceError(
                    error_msg, bucket=request.bucket, prefix=request.prefix
                )

        items = tuple(
            RemoteObjectSummary(
                bucket=request.bucket,
                key=obj["Key"],
                size_bytes=obj.get("Size", 0),
                last_modified=obj["LastModified"],
            )
            for obj in response.get("Contents", [])
        )
        return Page(
            items=items,
            is_truncated=response.get("IsTruncated", False),
            next_continuation_token=response.get("NextContinuationToken"),
        )
