"""Paginated, filtered iteration over a remote object listing.

RemoteObjectLister turns a paginated listing service into one forward-only
sequence of accepted objects. Pages are fetched lazily: the first when
iteration starts, each later one only once the current page is used up.

Example:
    >>> client = S3ListingClient.from_config(S3ClientConfig())
    >>> request = ListingRequest(bucket="my-bucket", prefix="data/")
    >>> for summary in RemoteObjectLister(client, request, suffix_filter(".csv")):
    ...     print(summary.key)
"""

from enum import Enum
from typing import Iterator, Optional

from blob_tools.core import get_logger
from blob_tools.core.exceptions import ListingExhaustedError, ServiceError

from .client import ListingClient
from .filters import accept_all
from .models import FilterPredicate, ListingRequest, Page, RemoteObjectSummary

logger = get_logger(__name__)


class ListerState(str, Enum):
    """Lifecycle of a RemoteObjectLister."""

    NOT_STARTED = "not_started"
    IN_PAGE = "in_page"
    EXHAUSTED = "exhausted"


class RemoteObjectLister(Iterator[RemoteObjectSummary]):
    """Lazy iterator over every accepted object of a paginated listing.

    A lister is single use. Once it has signalled the end of the sequence, or
    a pull has failed, any further pull raises ListingExhaustedError; build a
    new lister to list again.

    Errors raised by the listing client or by the predicate propagate to the
    caller unchanged. Nothing is retried here.
    """

    def __init__(
        self,
        client: ListingClient,
        request: ListingRequest,
        predicate: FilterPredicate = accept_all,
    ):
        """Initialize the lister without contacting the service.

        Args:
            client: Listing client used for every page fetch
            request: Request for the first page
            predicate: Filter applied to every listed object
        """
        self.client = client
        self.predicate = predicate
        self._request = request
        self._page: Optional[Page] = None
        self._position = 0
        self._state = ListerState.NOT_STARTED
        self.pages_fetched = 0

    @property
    def state(self) -> ListerState:
        return self._state

    def __iter__(self) -> "RemoteObjectLister":
        if self._state is ListerState.NOT_STARTED:
            try:
                self._start()
            except Exception:
                self._state = ListerState.EXHAUSTED
                raise
        return self

    def __next__(self) -> RemoteObjectSummary:
        if self._state is ListerState.EXHAUSTED:
            raise ListingExhaustedError(
                f"Listing of s3://{self._request.bucket}/{self._request.prefix} "
                "has already ended"
            )
        try:
            if self._state is ListerState.NOT_STARTED:
                self._start()
            candidate = self._next_accepted()
        except Exception:
            self._state = ListerState.EXHAUSTED
            raise

        if candidate is None:
            logger.debug(
                "Listing complete",
                bucket=self._request.bucket,
                prefix=self._request.prefix,
                pages=self.pages_fetched,
            )
            self._state = ListerState.EXHAUSTED
            raise StopIteration
        return candidate

    def _next_accepted(self) -> Optional[RemoteObjectSummary]:
        """Return the next object the predicate accepts, or None at the end."""
        while True:
            candidate = self._next_candidate()
            if candidate is None:
                return None
            try:
                accepted = self.predicate(candidate)
            except StopIteration as e:
                # Only the end of the listing may stop iteration
                raise RuntimeError(
                    f"Filter raised StopIteration for {candidate.s3_uri}"
                ) from e
            if accepted:
                return candidate

    def _start(self) -> None:
        self._fetch(self._request)
        self._state = ListerState.IN_PAGE

    def _next_candidate(self) -> Optional[RemoteObjectSummary]:
        """Return the next unfiltered object, fetching pages as needed."""
        if self._page is None:
            raise ListingExhaustedError("Listing has not fetched its first page")
        while self._position >= len(self._page.items):
            if not self._page.is_truncated:
                return None
            token = self._page.next_continuation_token
            if not token:
                raise ServiceError(
                    "Truncated page returned without a continuation token",
                    bucket=self._request.bucket,
                    prefix=self._request.prefix,
                )
            self._fetch(self._request.with_continuation_token(token))
        item = self._page.items[self._position]
        self._position += 1
        return item

    def _fetch(self, request: ListingRequest) -> None:
        page = self.client.list(request)
        self.pages_fetched += 1
        self._request = request
        self._page = page
        self._position = 0
        logger.debug(
            "Listing page fetched",
            bucket=request.bucket,
            prefix=request.prefix,
            page=self.pages_fetched,
            item_count=len(page.items),
            truncated=page.is_truncated,
        )
