"""Interval analysis of object modification times."""

from .cadence import analyze_prefix_cadence, format_breakdown, measure_cadence
from .intervals import (
    AggregateOutcome,
    AggregateResult,
    DurationBreakdown,
    InsufficientData,
    aggregate,
    consecutive_intervals,
    decompose,
)

__all__ = [
    "AggregateOutcome",
    "AggregateResult",
    "DurationBreakdown",
    "InsufficientData",
    "aggregate",
    "analyze_prefix_cadence",
    "consecutive_intervals",
    "decompose",
    "format_breakdown",
    "measure_cadence",
]
