"""Unit tests for S3FileStore using moto."""

from __future__ import annotations

import boto3
import pytest
from moto import mock_aws

from achfile.core.exceptions import StorageError
from achfile.persistence.s3_backend import S3FileStore

BUCKET = "test-ach-outbound"


@pytest.fixture
def s3_client():
    with mock_aws():
        client = boto3.client("s3", region_name="us-east-1")
        client.create_bucket(Bucket=BUCKET)
        yield client


@pytest.fixture
def s3_backend(s3_client):
    return S3FileStore(bucket=BUCKET, region="us-east-1", key_prefix="outbound/")


class TestWrite:
    def test_write_returns_s3_location(self, s3_backend):
        assert s3_backend.write("acme.ach", b"101") == f"s3://{BUCKET}/outbound/acme.ach"

    def test_write_stores_under_prefix(self, s3_backend, s3_client):
        s3_backend.write("2026/acme.ach", b"101")
        body = s3_client.get_object(Bucket=BUCKET, Key="outbound/2026/acme.ach")["Body"].read()
        assert body == b"101"

    def test_leading_slash_does_not_double_up(self, s3_backend, s3_client):
        assert s3_backend.write("/acme.ach", b"101").endswith("/outbound/acme.ach")

    def test_object_is_encrypted_text(self, s3_backend, s3_client):
        s3_backend.write("acme.ach", b"101")
        head = s3_client.head_object(Bucket=BUCKET, Key="outbound/acme.ach")
        assert head["ContentType"] == "text/plain"
        assert head["ServerSideEncryption"] == "AES256"

    def test_write_replaces_existing_object(self, s3_backend, s3_client):
        s3_backend.write("acme.ach", b"old")
        s3_backend.write("acme.ach", b"new")
        body = s3_client.get_object(Bucket=BUCKET, Key="outbound/acme.ach")["Body"].read()
        assert body == b"new"

    def test_no_prefix_writes_path_as_key(self, s3_client):
        store = S3FileStore(bucket=BUCKET, region="us-east-1")
        assert store.write("acme.ach", b"101") == f"s3://{BUCKET}/acme.ach"


class TestErrors:
    def test_missing_bucket_raises_storage_error(self):
        with mock_aws():
            store = S3FileStore(bucket="no-such-bucket", region="us-east-1")
            with pytest.raises(StorageError) as exc_info:
                store.write("x.ach", b"data")
            assert "no-such-bucket" in str(exc_info.value)

    def test_storage_error_is_os_error(self):
        with mock_aws():
            store = S3FileStore(bucket="no-such-bucket", region="us-east-1")
            with pytest.raises(OSError):
                store.write("x.ach", b"data")
