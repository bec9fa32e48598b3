"""Exception hierarchy for s3-cadence."""


class S3CadenceError(Exception):
    """Base exception for all s3-cadence errors."""

    pass


class ValidationError(S3CadenceError):
    """Raised when validation fails."""

    pass


class ListingServiceError(S3CadenceError):
    """Raised when a page fetch from the listing service fails."""

    pass


class TimestampParseError(S3CadenceError):
    """Raised when a last-modified value is not a valid RFC3339 timestamp."""

    def __init__(self, value: object, reason: str = ""):
        self.value = value
        message = f"Invalid last-modified timestamp {value!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class ProtocolViolationError(S3CadenceError):
    """Raised when the listing service breaks the pagination protocol."""

    pass
