"""Exception hierarchy for blob-tools."""

from typing import Optional


class BlobToolsError(Exception):
    """Base exception for all blob-tools errors."""

    pass


class ValidationError(BlobToolsError):
    """Raised when validation fails."""

    pass


class ServiceError(BlobToolsError):
    """Raised when the object storage service rejects or fails a request."""

    def __init__(
        self,
        message: str,
        bucket: Optional[str] = None,
        prefix: Optional[str] = None,
        error_code: Optional[str] = None,
    ):
        super().__init__(message)
        self.bucket = bucket
        self.prefix = prefix
        self.error_code = error_code


class ListingExhaustedError(BlobToolsError):
    """Raised when a lister is pulled after it has ended or failed."""

    pass
