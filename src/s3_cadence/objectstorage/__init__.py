"""Object storage access for S3-compatible services."""

from .clients import S3ClientConfig, S3ClientManager
from .listing import (
    ContinuationToken,
    ListingPage,
    ListingService,
    ObjectRecord,
    S3ListingService,
    list_all,
    parse_timestamp,
)

__all__ = [
    "ContinuationToken",
    "ListingPage",
    "ListingService",
    "ObjectRecord",
    "S3ClientConfig",
    "S3ClientManager",
    "S3ListingService",
    "list_all",
    "parse_timestamp",
]
