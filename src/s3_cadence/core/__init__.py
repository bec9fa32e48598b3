"""Core utilities and shared components for s3-cadence."""

from .config import settings
from .exceptions import S3CadenceError, ValidationError
from .observability import get_logger, get_tracer

__all__ = [
    "settings",
    "S3CadenceError",
    "ValidationError",
    "get_logger",
    "get_tracer",
]
