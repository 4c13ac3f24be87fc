import urllib.parse
from typing import NamedTuple, Optional


class Notification(NamedTuple):
    bucket: str
    key: str


def parse_notification(event) -> Optional[Notification]:
    """Pull (bucket, key) out of the first record of an S3 event.

    Only the first record is looked at. Returns None when the event carries
    no usable record.
    """
    if not event:
        return None

    records = event.get("Records") or []
    if not records:
        return None

    s3 = records[0].get("s3")
    if not s3:
        return None

    bucket = s3["bucket"]["name"]
    # keys are URL-encoded in S3 notifications
    key = urllib.parse.unquote_plus(s3["object"]["key"])
    return Notification(bucket, key)
