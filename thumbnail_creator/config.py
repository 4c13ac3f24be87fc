import os
import logging
from dataclasses import dataclass

LOG_FORMAT = "%(asctime)s %(levelname)s (%(lineno)d) :: %(message)s"

THUMBNAIL_WIDTH = 200
IMAGE_SUFFIX = ".jpg"


@dataclass(frozen=True)
class Settings:
    output_bucket: str
    region: str = "us-east-1"
    log_level: str = "INFO"


def load_settings(environ=None) -> Settings:
    """Read settings from the environment once, at cold start."""
    environ = os.environ if environ is None else environ

    output_bucket = environ.get("OUTPUT_BUCKET_NAME")
    if output_bucket == "" or output_bucket is None:
        raise Exception("OUTPUT_BUCKET_NAME environment variable not set")

    return Settings(
        output_bucket=output_bucket,
        region=environ.get("AWS_REGION") or "us-east-1",
        log_level=(environ.get("LOG_LEVEL") or "INFO").upper(),
    )


def configure_logging(settings: Settings):
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
    # the Lambda runtime installs its own handler before our code runs
    logging.getLogger().setLevel(settings.log_level)
