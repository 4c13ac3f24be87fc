import logging
from typing import NamedTuple

import boto3
from botocore.config import Config

logger = logging.getLogger(__name__)


class StoredObject(NamedTuple):
    body: object
    headers: dict

    @property
    def content_type(self):
        return self.headers.get("Content-Type")

    def close(self):
        self.body.close()


class ObjectStore:
    """What the thumbnail handler needs from an object store."""

    def get(self, bucket: str, key: str) -> StoredObject:
        raise NotImplementedError

    def put(self, bucket: str, key: str, body, content_type=None):
        raise NotImplementedError


class S3ObjectStore(ObjectStore):
    def __init__(self, client):
        self.client = client

    @classmethod
    def from_region(cls, region_name):
        conf = Config(region_name=region_name)
        return cls(boto3.client("s3", config=conf))

    def get(self, bucket, key):
        response = self.client.get_object(Bucket=bucket, Key=key)
        headers = dict(response.get("ResponseMetadata", {}).get("HTTPHeaders", {}))
        # botocore lower-cases raw HTTP headers
        headers["Content-Type"] = response.get("ContentType") or headers.get(
            "content-type"
        )
        return StoredObject(response["Body"], headers)

    def put(self, bucket, key, body, content_type=None):
        params = {"Bucket": bucket, "Key": key, "Body": body}
        if content_type:
            params["ContentType"] = content_type
        logger.debug(f"put_object s3://{bucket}/{key}")
        self.client.put_object(**params)
