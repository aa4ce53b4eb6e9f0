import io

import pytest
from PIL import Image


def encode(image: Image.Image, format: str = "PNG") -> bytes:
    buf = io.BytesIO()
    image.save(buf, format=format)
    return buf.getvalue()


class FakeResponse:
    def __init__(self, status_code=200, content=b""):
        self.status_code = status_code
        self.content = content


@pytest.fixture
def gradient():
    """A 256x4 grayscale image whose column x has brightness x."""
    img = Image.new("L", (256, 4))
    pixels = img.load()
    for y in range(4):
        for x in range(256):
            pixels[x, y] = x
    return img


@pytest.fixture
def png_file(tmp_path):
    path = tmp_path / "input.png"
    Image.new("RGB", (160, 80), (255, 255, 255)).save(path)
    return path
