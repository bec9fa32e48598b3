"""Drives a listing service through every page of a prefix.

Pages are fetched strictly one after another because each request needs the
token from the previous response. The run is all-or-nothing: a service
failure, a malformed timestamp or a broken continuation aborts it and no
partial result is returned.
"""

import re
from datetime import datetime, timezone
from typing import Iterator, Optional

from pydantic import AwareDatetime, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from s3_cadence.core import get_logger, get_tracer
from s3_cadence.core.exceptions import (
    ProtocolViolationError,
    TimestampParseError,
    ValidationError,
)

from .pages import ContinuationToken, ListingPage, ListingService, ObjectRecord

logger = get_logger(__name__)
tracer = get_tracer(__name__)

_aware_datetime = TypeAdapter(AwareDatetime)

# date-time with a mandatory offset, RFC3339 section 5.6
_RFC3339_SHAPE = re.compile(
    r"^\d{4}-\d{2}-\d{2}[Tt ]\d{2}:\d{2}:\d{2}(\.\d+)?([Zz]|[+-]\d{2}:\d{2})$"
)


def parse_timestamp(value: str) -> datetime:
    """Parse an RFC3339 timestamp and normalize it to UTC.

    Args:
        value: Timestamp string with an explicit offset, e.g.
            "2024-01-01T00:00:10.250Z"

    Returns:
        Timezone-aware datetime in UTC

    Raises:
        TimestampParseError: If the value is not a string or lacks an offset
            or is otherwise not a valid timestamp
    """
    if not isinstance(value, str):
        raise TimestampParseError(value, "expected a string")
    if not _RFC3339_SHAPE.match(value):
        raise TimestampParseError(value, "not an RFC3339 date-time with offset")

    try:
        parsed = _aware_datetime.validate_python(value)
    except PydanticValidationError as e:
        reason = e.errors()[0].get("msg", str(e))
        raise TimestampParseError(value, reason) from e

    return parsed.astimezone(timezone.utc)


def iter_pages(
    service: ListingService,
    bucket: str,
    prefix: str = "",
    max_pages: Optional[int] = None,
) -> Iterator[ListingPage]:
    """Yield pages from the listing service until it reports no more.

    Args:
        service: Listing service to query
        bucket: Bucket name, must be non-empty
        prefix: Key prefix, "" for the whole bucket
        max_pages: Optional cap on the number of pages fetched

    Raises:
        ValidationError: If bucket is empty or max_pages is not positive
        ProtocolViolationError: If a truncated page carries no token, or the
            cap is reached while the service still reports more pages
    """
    if not bucket:
        raise ValidationError("Bucket name must not be empty")
    if max_pages is not None and max_pages < 1:
        raise ValidationError(f"max_pages must be positive, got: {max_pages}")

    token: Optional[ContinuationToken] = None
    page_number = 0

    while True:
        if max_pages is not None and page_number >= max_pages:
            raise ProtocolViolationError(
                f"Listing of s3://{bucket}/{prefix} did not finish "
                f"within {max_pages} pages"
            )

        page_number += 1
        with tracer.start_as_current_span("s3_cadence.list_page") as span:
            span.set_attribute("s3.bucket", bucket)
            span.set_attribute("s3.prefix", prefix)
            span.set_attribute("s3_cadence.page_number", page_number)
            page = service.list_page(bucket, prefix, token)
            span.set_attribute("s3_cadence.object_count", len(page.objects))

        logger.debug(
            "Listing page fetched",
            bucket=bucket,
            prefix=prefix,
            page_number=page_number,
            object_count=len(page.objects),
            is_truncated=page.is_truncated,
        )
        yield page

        if not page.is_truncated:
            return
        if page.next_token is None:
            raise ProtocolViolationError(
                f"Page {page_number} of s3://{bucket}/{prefix} is truncated "
                "but has no continuation token"
            )
        token = page.next_token


def iter_objects(
    service: ListingService,
    bucket: str,
    prefix: str = "",
    max_pages: Optional[int] = None,
) -> Iterator[ObjectRecord]:
    """Yield every object record across all pages."""
    for page in iter_pages(service, bucket, prefix, max_pages=max_pages):
        yield from page.objects


def list_all(
    service: ListingService,
    bucket: str,
    prefix: str = "",
    max_pages: Optional[int] = None,
) -> list[datetime]:
    """Collect the last-modified timestamp of every object under a prefix.

    Objects without a last-modified value (folder markers, for example) are
    skipped. Timestamps are returned in arrival order, duplicates included.

    Args:
        service: Listing service to query
        bucket: Bucket name, must be non-empty
        prefix: Key prefix, "" for the whole bucket
        max_pages: Optional cap on the number of pages fetched

    Returns:
        List of UTC datetimes

    Raises:
        ListingServiceError: If a page fetch fails
        TimestampParseError: If any last-modified value is malformed
        ProtocolViolationError: If the continuation protocol is broken
    """
    timestamps: list[datetime] = []
    page_count = 0

    for page in iter_pages(service, bucket, prefix, max_pages=max_pages):
        page_count += 1
        batch = [
            parse_timestamp(record.last_modified)
            for record in page.objects
            if record.last_modified is not None
        ]
        timestamps.extend(batch)

    logger.info(
        "Listing completed",
        bucket=bucket,
        prefix=prefix,
        page_count=page_count,
        timestamp_count=len(timestamps),
    )
    return timestamps
