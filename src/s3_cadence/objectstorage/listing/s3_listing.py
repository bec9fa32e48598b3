"""Listing service backed by S3 ListObjectsV2."""

from datetime import datetime
from typing import Any, Dict, Optional

from botocore.exceptions import BotoCoreError, ClientError

from s3_cadence.core import get_logger
from s3_cadence.core.exceptions import ListingServiceError
from s3_cadence.objectstorage.clients import S3ClientConfig, S3ClientManager

from .pages import ContinuationToken, ListingPage, ObjectRecord

logger = get_logger(__name__)


def _render_last_modified(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.isoformat()
    return str(value)


class S3ListingService:
    """Issues one ``list_objects_v2`` request per page.

    Retries are left to botocore's own retry configuration; a request that
    still fails surfaces as ListingServiceError.
    """

    def __init__(
        self, client_manager: S3ClientManager, max_keys: Optional[int] = None
    ):
        """Initialize S3 listing service.

        Args:
            client_manager: Manager owning the boto3 client
            max_keys: Page size hint, None leaves it to the service (1000)
        """
        self.client_manager = client_manager
        self.max_keys = max_keys

    @classmethod
    def from_config(
        cls, config: S3ClientConfig, max_keys: Optional[int] = None
    ) -> "S3ListingService":
        """Build a listing service from client configuration."""
        return cls(S3ClientManager(config), max_keys=max_keys)

    def list_page(
        self,
        bucket: str,
        prefix: str,
        token: Optional[ContinuationToken] = None,
    ) -> ListingPage:
        """Fetch one page of objects under a prefix.

        Args:
            bucket: S3 bucket name
            prefix: Key prefix, "" for the whole bucket
            token: Token from the previous page, None for the first page

        Returns:
            ListingPage with the page's objects and continuation state

        Raises:
            ListingServiceError: If the request fails
        """
        request: Dict[str, Any] = {"Bucket": bucket, "Prefix": prefix}
        if token is not None:
            request["ContinuationToken"] = token.unwrap()
        if self.max_keys is not None:
            request["MaxKeys"] = self.max_keys

        try:
            response = self.client_manager.client.list_objects_v2(**request)
        except (ClientError, BotoCoreError) as e:
            error_msg = f"Failed to list objects in s3://{bucket}/{prefix}: {e}"
            logger.error(error_msg, error=str(e))
            raise ListingServiceError(error_msg) from e

        objects = tuple(
            ObjectRecord(
                key=obj.get("Key"),
                last_modified=_render_last_modified(obj.get("LastModified")),
            )
            for obj in response.get("Contents", [])
        )

        next_token = response.get("NextContinuationToken")
        return ListingPage(
            objects=objects,
            is_truncated=bool(response.get("IsTruncated", False)),
            next_token=ContinuationToken(next_token) if next_token else None,
        )
