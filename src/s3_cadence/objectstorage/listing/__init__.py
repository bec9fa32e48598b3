"""Object storage listing operations."""

from .pages import ContinuationToken, ListingPage, ListingService, ObjectRecord
from .paginator import iter_objects, iter_pages, list_all, parse_timestamp
from .s3_listing import S3ListingService

__all__ = [
    "ContinuationToken",
    "ListingPage",
    "ListingService",
    "ObjectRecord",
    "S3ListingService",
    "iter_objects",
    "iter_pages",
    "list_all",
    "parse_timestamp",
]
