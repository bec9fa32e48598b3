"""Upload cadence reporting for S3 prefixes.

Lists every object under a prefix, sorts the objects' last-modified
timestamps and reports the total and average gap between consecutive
modifications. Useful as a quick signal of gaps or bursts in a pipeline
that writes into a bucket.

Recommended Usage:
    >>> from s3_cadence import analyze_prefix_cadence
    >>> outcome = analyze_prefix_cadence("ingest-bucket", "daily/", aws_profile="ops")

Testing against a stub:
    Any object with a ``list_page(bucket, prefix, token)`` method can stand
    in for S3:

    >>> from s3_cadence import measure_cadence
    >>> outcome = measure_cadence(stub_service, "bucket", "prefix/")
"""

__version__ = "0.1.0"

from .analysis import (
    AggregateOutcome,
    AggregateResult,
    DurationBreakdown,
    InsufficientData,
    aggregate,
    analyze_prefix_cadence,
    decompose,
    format_breakdown,
    measure_cadence,
)
from .objectstorage import (
    ContinuationToken,
    ListingPage,
    ListingService,
    ObjectRecord,
    S3ClientConfig,
    S3ListingService,
    list_all,
    parse_timestamp,
)

__all__ = [
    # Pipeline
    "analyze_prefix_cadence",
    "measure_cadence",
    # Listing
    "ContinuationToken",
    "ListingPage",
    "ListingService",
    "ObjectRecord",
    "S3ClientConfig",
    "S3ListingService",
    "list_all",
    "parse_timestamp",
    # Aggregation
    "AggregateOutcome",
    "AggregateResult",
    "DurationBreakdown",
    "InsufficientData",
    "aggregate",
    "decompose",
    "format_breakdown",
]
