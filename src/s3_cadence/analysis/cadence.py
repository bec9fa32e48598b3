"""Upload cadence of an S3 prefix: list every object, then aggregate gaps."""

from typing import Optional

from s3_cadence.core import get_logger, settings
from s3_cadence.objectstorage.clients import S3ClientConfig
from s3_cadence.objectstorage.listing import (
    ListingService,
    S3ListingService,
    list_all,
)

from .intervals import AggregateOutcome, DurationBreakdown, aggregate

logger = get_logger(__name__)


def format_breakdown(breakdown: DurationBreakdown) -> str:
    """Render a breakdown as ``"{h}h {m}m {s}s {ms}ms"``."""
    return (
        f"{breakdown.hours}h {breakdown.minutes}m "
        f"{breakdown.seconds}s {breakdown.milliseconds}ms"
    )


def measure_cadence(
    service: ListingService,
    bucket: str,
    prefix: str = "",
    max_pages: Optional[int] = None,
) -> AggregateOutcome:
    """List every object under a prefix and aggregate modification gaps.

    Args:
        service: Listing service to query
        bucket: Bucket name
        prefix: Key prefix, "" for the whole bucket
        max_pages: Optional page cap, defaults to settings.max_pages

    Returns:
        AggregateResult, or InsufficientData for fewer than two timestamps

    Raises:
        ValidationError: If bucket is empty
        ListingServiceError: If a page fetch fails
        TimestampParseError: If any last-modified value is malformed
        ProtocolViolationError: If the continuation protocol is broken
    """
    if max_pages is None:
        max_pages = settings.max_pages

    logger.info("Measuring prefix cadence", bucket=bucket, prefix=prefix)
    timestamps = list_all(service, bucket, prefix, max_pages=max_pages)
    return aggregate(timestamps)


def analyze_prefix_cadence(
    bucket: str,
    prefix: str = "",
    access_key_id: Optional[str] = None,
    secret_access_key: Optional[str] = None,
    session_token: Optional[str] = None,
    region_name: str = "us-east-1",
    endpoint_url: Optional[str] = None,
    aws_profile: Optional[str] = None,
    max_pages: Optional[int] = None,
) -> AggregateOutcome:
    """Convenience function to measure cadence of an S3 prefix.

    Args:
        bucket: S3 bucket name
        prefix: Key prefix, "" for the whole bucket
        access_key_id: AWS access key ID
        secret_access_key: AWS secret access key
        session_token: AWS session token for temporary credentials
        region_name: AWS region name
        endpoint_url: Custom S3 endpoint URL
        aws_profile: AWS CLI profile name
        max_pages: Optional page cap

    Returns:
        AggregateResult, or InsufficientData for fewer than two timestamps
    """
    config = S3ClientConfig(
        access_key_id=access_key_id,
        secret_access_key=secret_access_key,
        session_token=session_token,
        region_name=region_name,
        endpoint_url=endpoint_url,
        aws_profile=aws_profile,
    )

    service = S3ListingService.from_config(config)
    return measure_cadence(service, bucket, prefix, max_pages=max_pages)
