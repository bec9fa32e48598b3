"""Data shapes exchanged with a listing service."""

from dataclasses import dataclass, field
from typing import Optional, Protocol


class ContinuationToken:
    """Opaque handle for resuming a paginated listing.

    Only a listing service creates or unwraps a token. Everything else just
    hands back the token it was given.
    """

    __slots__ = ("_value",)

    def __init__(self, value: str):
        self._value = value

    def unwrap(self) -> str:
        """Return the raw token for the service that issued it."""
        return self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ContinuationToken):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return "ContinuationToken(<opaque>)"


@dataclass(frozen=True)
class ObjectRecord:
    """One object under the listed prefix.

    Attributes:
        key: Object key, informational only
        last_modified: RFC3339 timestamp string, None when the service omits it
    """

    key: Optional[str] = None
    last_modified: Optional[str] = None


@dataclass(frozen=True)
class ListingPage:
    """One response of the listing service."""

    objects: tuple[ObjectRecord, ...] = field(default_factory=tuple)
    is_truncated: bool = False
    next_token: Optional[ContinuationToken] = None


class ListingService(Protocol):
    """Protocol for a service that lists one page of objects per call."""

    def list_page(
        self,
        bucket: str,
        prefix: str,
        token: Optional[ContinuationToken] = None,
    ) -> ListingPage:
        """Fetch the page that follows ``token`` (the first page if None)."""
        ...
