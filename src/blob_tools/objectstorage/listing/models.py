"""Value types shared by the listing client and the lister."""

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ListingRequest(BaseModel):
    """One listing request against a bucket.

    Requests are immutable; the request for the next page is derived with
    with_continuation_token() instead of mutating the current one.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    bucket: str = Field(..., description="Bucket to list")
    prefix: str = Field("", description="Key prefix to list under")
    max_keys_per_page: Optional[int] = Field(
        None, ge=1, le=1000, description="Upper bound on items per page"
    )
    continuation_token: Optional[str] = Field(
        None, description="Cursor returned by the previous page"
    )

    @field_validator("bucket")
    @classmethod
    def _bucket_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("bucket must not be blank")
        return value

    def with_continuation_token(self, token: str) -> "ListingRequest":
        """Return a copy of this request resuming at token."""
        return self.model_copy(update={"continuation_token": token})


@dataclass(frozen=True)
class RemoteObjectSummary:
    """A single object reported by a listing.

    Attributes:
        bucket: Bucket the object lives in
        key: Object key
        size_bytes: Object size in bytes
        last_modified: Last modification time as reported by the service
    """

    bucket: str
    key: str
    size_bytes: int
    last_modified: datetime

    @property
    def s3_uri(self) -> str:
        return f"s3://{self.bucket}/{self.key}"


@dataclass(frozen=True)
class Page:
    """One page of listing results."""

    items: tuple[RemoteObjectSummary, ...]
    is_truncated: bool
    next_continuation_token: Optional[str] = None


FilterPredicate = Callable[[RemoteObjectSummary], bool]
