import logging

from .config import load_settings, configure_logging
from .events import parse_notification
from .handler import ThumbnailHandler
from .store import S3ObjectStore

settings = load_settings()
configure_logging(settings)
logger = logging.getLogger(__name__)

# created once per container and reused by warm invocations
s3_store = S3ObjectStore.from_region(settings.region)
thumbnail_handler = ThumbnailHandler(s3_store, settings.output_bucket)


def lambda_handler(event, context):
    notification = parse_notification(event)
    outcome = thumbnail_handler.handle(notification)

    if not outcome.ok:
        # let the runtime mark the invocation failed
        raise outcome.error

    return outcome.value
