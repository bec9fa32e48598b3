"""Interval statistics over a set of modification timestamps."""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Iterable, Sequence, Union

from s3_cadence.core import get_logger

logger = get_logger(__name__)

_MS_PER_HOUR = 3_600_000
_MS_PER_MINUTE = 60_000
_MS_PER_SECOND = 1_000


@dataclass(frozen=True)
class DurationBreakdown:
    """Whole hours, minutes, seconds and milliseconds of a duration."""

    hours: int
    minutes: int
    seconds: int
    milliseconds: int


@dataclass(frozen=True)
class AggregateResult:
    """Interval statistics for one listing.

    Attributes:
        average: Mean gap between consecutive timestamps, truncated to the
            microsecond
        total: Exact sum of all gaps
        count: Number of intervals (one less than the number of timestamps)
        breakdown: Total decomposed for display
    """

    average: timedelta
    total: timedelta
    count: int
    breakdown: DurationBreakdown


@dataclass(frozen=True)
class InsufficientData:
    """Returned instead of statistics when fewer than two timestamps exist."""

    timestamp_count: int


AggregateOutcome = Union[AggregateResult, InsufficientData]


def decompose(duration: timedelta) -> DurationBreakdown:
    """Split a duration into hours, minutes, seconds and milliseconds.

    Sub-millisecond remainders are dropped. Hours are not wrapped into days.
    """
    total_ms = duration // timedelta(milliseconds=1)

    hours, remaining_ms = divmod(total_ms, _MS_PER_HOUR)
    minutes, remaining_ms = divmod(remaining_ms, _MS_PER_MINUTE)
    seconds, milliseconds = divmod(remaining_ms, _MS_PER_SECOND)

    return DurationBreakdown(
        hours=hours, minutes=minutes, seconds=seconds, milliseconds=milliseconds
    )


def consecutive_intervals(ordered: Sequence[datetime]) -> list[timedelta]:
    """Return the gaps between neighbours of an already sorted sequence."""
    return [later - earlier for earlier, later in zip(ordered, ordered[1:])]


def aggregate(timestamps: Iterable[datetime]) -> AggregateOutcome:
    """Compute total and average gap between consecutive timestamps.

    Timestamps are sorted first, so the result does not depend on input
    order. Equal timestamps are kept and contribute zero-length intervals.

    Args:
        timestamps: Timezone-aware datetimes in any order

    Returns:
        AggregateResult, or InsufficientData when fewer than two timestamps
        are given
    """
    ordered = sorted(timestamps)

    if len(ordered) < 2:
        logger.info(
            "Not enough timestamps to aggregate", timestamp_count=len(ordered)
        )
        return InsufficientData(timestamp_count=len(ordered))

    intervals = consecutive_intervals(ordered)
    total = sum(intervals, timedelta())
    count = len(intervals)
    # intervals are non-negative, so floor division truncates toward zero
    average = total // count

    logger.info(
        "Intervals aggregated",
        interval_count=count,
        total_seconds=total.total_seconds(),
        average_seconds=average.total_seconds(),
    )
    return AggregateResult(
        average=average,
        total=total,
        count=count,
        breakdown=decompose(total),
    )
