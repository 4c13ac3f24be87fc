import io

import pytest
from botocore.exceptions import ClientError
from PIL import Image

from thumbnail_creator.store import ObjectStore, StoredObject


def make_image_bytes(size, image_format="JPEG", color=(200, 30, 30)):
    buffer = io.BytesIO()
    Image.new("RGB", size, color).save(buffer, format=image_format)
    return buffer.getvalue()


def make_gif_bytes(size, colors):
    images = [Image.new("RGB", size, c) for c in colors]
    buffer = io.BytesIO()
    images[0].save(buffer, format="GIF", save_all=True, append_images=images[1:])
    return buffer.getvalue()


class InMemoryStore(ObjectStore):
    """Object store double that keeps objects in a dict and records writes."""

    def __init__(self):
        self.objects = {}
        self.gets = []
        self.puts = []
        self.bodies = []

    def add(self, bucket, key, data, content_type="image/jpeg"):
        self.objects[(bucket, key)] = (data, content_type)

    def get(self, bucket, key):
        self.gets.append((bucket, key))
        if (bucket, key) not in self.objects:
            raise ClientError(
                {"Error": {"Code": "NoSuchKey", "Message": "The specified key does not exist."}},
                "GetObject",
            )
        data, content_type = self.objects[(bucket, key)]
        body = io.BytesIO(data)
        self.bodies.append(body)
        return StoredObject(body, {"Content-Type": content_type})

    def put(self, bucket, key, body, content_type=None):
        data = body.read()
        self.puts.append((bucket, key, data, content_type))
        self.objects[(bucket, key)] = (data, content_type)


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def jpeg_400x300():
    return make_image_bytes((400, 300))
