"""Filter predicates for remote object listings.

Every filter is a plain callable taking a RemoteObjectSummary and returning
True to keep the object. Filters hold no mutable state, so one instance can be
shared between listers.
"""

import re
from datetime import datetime, timezone
from typing import Optional

from blob_tools.core.exceptions import ValidationError

from .models import FilterPredicate, RemoteObjectSummary


def accept_all(summary: RemoteObjectSummary) -> bool:
    """Keep every object."""
    return True


def regex_filter(pattern: str) -> FilterPredicate:
    """Keep objects whose whole key matches pattern.

    Raises:
        ValidationError: If pattern is not a valid regular expression
    """
    try:
        compiled = re.compile(pattern)
    except re.error as e:
        raise ValidationError(f"Invalid filter expression '{pattern}': {e}")

    def _accept(summary: RemoteObjectSummary) -> bool:
        return compiled.fullmatch(summary.key) is not None

    return _accept


def suffix_filter(suffix: str) -> FilterPredicate:
    """Keep objects whose key ends with suffix."""

    def _accept(summary: RemoteObjectSummary) -> bool:
        return summary.key.endswith(suffix)

    return _accept


def min_size_filter(min_bytes: int) -> FilterPredicate:
    """Keep objects of at least min_bytes."""
    if min_bytes < 0:
        raise ValidationError(f"min_bytes must not be negative, got: {min_bytes}")

    def _accept(summary: RemoteObjectSummary) -> bool:
        return summary.size_bytes >= min_bytes

    return _accept


def modified_before_filter(cutoff: datetime) -> FilterPredicate:
    """Keep objects last modified strictly before cutoff.

    Naive datetimes (on either side) are treated as UTC.
    """
    cutoff = _as_utc(cutoff)

    def _accept(summary: RemoteObjectSummary) -> bool:
        return _as_utc(summary.last_modified) < cutoff

    return _accept


def all_of(*predicates: FilterPredicate) -> FilterPredicate:
    """Keep objects accepted by every predicate, evaluated in order."""
    if not predicates:
        return accept_all
    if len(predicates) == 1:
        return predicates[0]

    def _accept(summary: RemoteObjectSummary) -> bool:
        return all(predicate(summary) for predicate in predicates)

    return _accept


def build_filter(
    regex: Optional[str] = None,
    suffix: Optional[str] = None,
    min_size: Optional[int] = None,
    older_than: Optional[datetime] = None,
) -> FilterPredicate:
    """Combine the given filter options into one predicate.

    Args:
        regex: Regular expression the whole key must match
        suffix: Suffix the key must end with
        min_size: Minimum object size in bytes
        older_than: Objects must be last modified before this time

    Returns:
        A predicate accepting objects that satisfy every given option
    """
    predicates = []
    if regex is not None:
        predicates.append(regex_filter(regex))
    if suffix is not None:
        predicates.append(suffix_filter(suffix))
    if min_size is not None:
        predicates.append(min_size_filter(min_size))
    if older_than is not None:
        predicates.append(modified_before_filter(older_than))
    return all_of(*predicates)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
