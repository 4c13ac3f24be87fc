import io
import math
import logging

from PIL import Image, ImageSequence

logger = logging.getLogger(__name__)

DEFAULT_FORMAT = "JPEG"
# modes Pillow can write as JPEG without conversion
JPEG_MODES = ("1", "L", "RGB", "CMYK")


def decode(stream):
    """Open an image from a readable stream.

    The object body is buffered first since Pillow needs a seekable file.
    The returned image is lazy; pixel data is read on first use.
    """
    return Image.open(io.BytesIO(stream.read()))


def frames(image):
    return ImageSequence.Iterator(image)


def scaled_height(size, width):
    """Height for `width` that keeps the aspect ratio of `size`, rounded half up."""
    w, h = size
    return max(1, math.floor(h * width / w + 0.5))


def resize_to_width(image, width):
    size = (width, scaled_height(image.size, width))
    resized = image.resize(size, Image.Resampling.LANCZOS)
    logger.debug(f"Resized {image.size} to {resized.size}")
    return resized


def encode(image, image_format=None):
    image_format = image_format or DEFAULT_FORMAT
    if image_format == "JPEG" and image.mode not in JPEG_MODES:
        image = image.convert("RGB")

    buffer = io.BytesIO()
    image.save(buffer, format=image_format)
    buffer.seek(0)
    return buffer
