"""S3 outbound drop for generated NACHA files."""

from __future__ import annotations

import boto3
from botocore.exceptions import ClientError

from achfile.core.exceptions import StorageError


class S3FileStore:
    """IFileStore that drops files under ``key_prefix`` in one S3 bucket.

    Objects are encrypted at rest since NACHA files carry account numbers.
    ``put_object`` replaces an existing key in one call.
    """

    def __init__(self, bucket: str, region: str = "us-east-1",
                 endpoint_url: str | None = None, key_prefix: str = "") -> None:
        self._bucket = bucket
        self._key_prefix = key_prefix
        kwargs: dict = {"region_name": region}
        if endpoint_url:
            kwargs["endpoint_url"] = endpoint_url
        self._client = boto3.client("s3", **kwargs)

    def write(self, path: str, data: bytes, content_type: str = "text/plain") -> str:
        key = self._key_prefix + path.lstrip("/")
        try:
            self._client.put_object(
                Bucket=self._bucket,
                Key=key,
                Body=data,
                ContentType=content_type,
                ServerSideEncryption="AES256",
            )
        except ClientError as exc:
            raise StorageError(f"S3 upload of {key!r} to {self._bucket!r} failed: {exc}") from exc
        return f"s3://{self._bucket}/{key}"
