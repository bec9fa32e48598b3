"""Test configuration and fixtures for s3-cadence."""

from typing import Optional

import boto3
import pytest
from moto import mock_aws

from s3_cadence.objectstorage.listing import (
    ContinuationToken,
    ListingPage,
    ObjectRecord,
)


class StubListingService:
    """Listing service that replays canned pages and records each request."""

    def __init__(self, pages, tokens=None):
        self.pages = list(pages)
        self.tokens = tokens
        self.calls = []

    def list_page(
        self, bucket: str, prefix: str, token: Optional[ContinuationToken] = None
    ) -> ListingPage:
        self.calls.append((bucket, prefix, token))
        return self.pages[len(self.calls) - 1]


def make_page(*timestamps, token=None, keys=None) -> ListingPage:
    """Build a page; a non-None token marks the page truncated."""
    keys = keys or [f"obj-{i}" for i in range(len(timestamps))]
    return ListingPage(
        objects=tuple(
            ObjectRecord(key=key, last_modified=ts) for key, ts in zip(keys, timestamps)
        ),
        is_truncated=token is not None,
        next_token=ContinuationToken(token) if token is not None else None,
    )


@pytest.fixture
def stub_service():
    """Factory for stub listing services."""
    return StubListingService


@pytest.fixture
def aws_credentials(monkeypatch):
    """Fake credentials so boto3 never reaches for real ones."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "test_key")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "test_secret")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")


@pytest.fixture
def s3_bucket(aws_credentials):
    """Mocked S3 with a test bucket holding objects under data/."""
    with mock_aws():
        s3_client = boto3.client(
            "s3",
            aws_access_key_id="test_key",
            aws_secret_access_key="test_secret",
            region_name="us-east-1",
        )
        s3_client.create_bucket(Bucket="test-bucket")
        for i in range(5):
            s3_client.put_object(
                Bucket="test-bucket", Key=f"data/file{i}.txt", Body=b"content"
            )
        s3_client.put_object(Bucket="test-bucket", Key="other/file.txt", Body=b"x")
        yield s3_client
