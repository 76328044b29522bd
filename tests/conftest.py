"""Test configuration and fixtures for blob-tools."""

from datetime import datetime, timezone
from typing import Optional, Sequence

import pytest

from blob_tools.objectstorage.listing.models import (
    ListingRequest,
    Page,
    RemoteObjectSummary,
)

BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


def make_summary(
    key: str,
    size_bytes: int = 10,
    bucket: str = "test-bucket",
    last_modified: Optional[datetime] = None,
) -> RemoteObjectSummary:
    return RemoteObjectSummary(
        bucket=bucket,
        key=key,
        size_bytes=size_bytes,
        last_modified=last_modified or BASE_TIME,
    )


class FakeListingClient:
    """In-memory ListingClient serving fixed pages and recording requests."""

    def __init__(self, pages: Sequence[Page]):
        self.pages = list(pages)
        self.requests: list[ListingRequest] = []

    def list(self, request: ListingRequest) -> Page:
        self.requests.append(request)
        if request.continuation_token is None:
            return self.pages[0]
        for index, page in enumerate(self.pages):
            if page.next_continuation_token == request.continuation_token:
                return self.pages[index + 1]
        raise AssertionError(f"Unknown token: {request.continuation_token}")


def build_pages(
    keys_per_page: Sequence[Sequence[str]], tokens: Optional[Sequence[str]] = None
) -> list[Page]:
    """Build pages from key lists; every page but the last is truncated."""
    if tokens is None:
        tokens = [f"token-{i}" for i in range(1, len(keys_per_page))]
    pages = []
    for index, keys in enumerate(keys_per_page):
        last = index == len(keys_per_page) - 1
        pages.append(
            Page(
                items=tuple(make_summary(key) for key in keys),
                is_truncated=not last,
                next_continuation_token=None if last else tokens[index],
            )
        )
    return pages


@pytest.fixture
def summary_factory():
    """Factory building RemoteObjectSummary values."""
    return make_summary


@pytest.fixture
def listing_request():
    """A first-page request for the test bucket."""
    return ListingRequest(bucket="test-bucket", prefix="data/")


@pytest.fixture
def fake_client():
    """Factory building a FakeListingClient from key lists."""

    def _factory(keys_per_page, tokens=None):
        return FakeListingClient(build_pages(keys_per_page, tokens))

    return _factory


@pytest.fixture
def aws_credentials(monkeypatch):
    """Mocked AWS credentials for moto."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "test_key")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "test_secret")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")
