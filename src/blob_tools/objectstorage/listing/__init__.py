"""Paginated, filtered listing of remote objects."""

from .bucket_list import S3BucketLister, list_bucket
from .client import ListingClient, S3ListingClient
from .filters import (
    accept_all,
    all_of,
    build_filter,
    min_size_filter,
    modified_before_filter,
    regex_filter,
    suffix_filter,
)
from .lister import ListerState, RemoteObjectLister
from .models import FilterPredicate, ListingRequest, Page, RemoteObjectSummary
from .renderers import get_renderer, render_json, render_text

__all__ = [
    "FilterPredicate",
    "ListerState",
    "ListingClient",
    "ListingRequest",
    "Page",
    "RemoteObjectLister",
    "RemoteObjectSummary",
    "S3BucketLister",
    "S3ListingClient",
    "accept_all",
    "all_of",
    "build_filter",
    "get_renderer",
    "list_bucket",
    "min_size_filter",
    "modified_before_filter",
    "regex_filter",
    "render_json",
    "render_text",
    "suffix_filter",
]
