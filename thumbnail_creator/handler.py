import logging
import mimetypes
from contextlib import closing
from dataclasses import dataclass
from typing import Optional

from . import resize_image
from .config import THUMBNAIL_WIDTH, IMAGE_SUFFIX
from .events import Notification
from .store import ObjectStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Outcome:
    """Result of one invocation.

    A skipped outcome has neither value nor error. A success carries the
    value returned to the runtime; a failure carries the exception and the
    stage (fetch, decode, resize or write) it was raised in.
    """

    value: Optional[str] = None
    error: Optional[BaseException] = None
    stage: Optional[str] = None

    @classmethod
    def skipped(cls):
        return cls()

    @classmethod
    def success(cls, value):
        return cls(value=value)

    @classmethod
    def failure(cls, stage, error):
        return cls(error=error, stage=stage)

    @property
    def ok(self):
        return self.error is None


class _Stage:
    """Tracks which step of the pipeline is running."""

    def __init__(self):
        self.name = "fetch"


class ThumbnailHandler:
    def __init__(
        self,
        store: ObjectStore,
        output_bucket: str,
        width: int = THUMBNAIL_WIDTH,
        suffix: str = IMAGE_SUFFIX,
    ):
        self.store = store
        self.output_bucket = output_bucket
        self.width = width
        self.suffix = suffix

    def handle(self, notification: Optional[Notification]) -> Outcome:
        if notification is None:
            logger.debug("No S3 record in event, nothing to do")
            return Outcome.skipped()

        bucket, key = notification
        if bucket == self.output_bucket:
            # our own writes trigger us again
            logger.debug(f"Ignoring {key} from output bucket {bucket}")
            return Outcome.skipped()

        stage = _Stage()
        try:
            return self._process(bucket, key, stage)
        except Exception as e:
            logger.exception(
                f"Error processing object {key} from bucket {bucket} "
                f"during {stage.name}: {e}"
            )
            return Outcome.failure(stage.name, e)

    def _process(self, bucket, key, stage):
        logger.info(f"Trying to get object {key} from bucket {bucket}")
        stored = self.store.get(bucket, key)

        with closing(stored):
            content_type = stored.content_type
            logger.info(f"Content type: {content_type}")
            logger.info(f"Got object {key} from bucket {bucket}")

            if not key.endswith(self.suffix):
                logger.info(f"Skipping {key}, not a {self.suffix} file")
                return Outcome.success("")

            stage.name = "decode"
            with resize_image.decode(stored.body) as image:
                image_format = image.format
                for frame in resize_image.frames(image):
                    stage.name = "resize"
                    thumbnail = resize_image.resize_to_width(frame, self.width)
                    self._write(key, thumbnail, image_format, stage)
                    stage.name = "decode"

        return Outcome.success(content_type)

    def _write(self, key, thumbnail, image_format, stage):
        with closing(resize_image.encode(thumbnail, image_format)) as buffer:
            stage.name = "write"
            out_type, _ = mimetypes.guess_type(key)
            self.store.put(self.output_bucket, key, buffer, out_type)
            logger.info(
                f"Uploaded {key} ({thumbnail.width}x{thumbnail.height}) "
                f"to {self.output_bucket}"
            )
