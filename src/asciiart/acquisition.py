"""Turn an input locator (path, ``-`` or URL) into a decoded, resized image."""

import io
import logging
import sys
from typing import BinaryIO

import numpy as np
import requests
from PIL import Image

from asciiart.errors import DecodeError, InputOpenError, ResourceFetchError

log = logging.getLogger(__name__)

DEFAULT_WIDTH = 80
STDIN_LOCATOR = "-"


def is_url(locator: str) -> bool:
    return locator.startswith("http")


def fetch(url: str, timeout: float | None = None) -> bytes:
    """GET ``url`` and return the body. Anything but a 200 response is an error."""
    log.debug("fetching %s", url)
    try:
        response = requests.get(url, timeout=timeout)
    except requests.RequestException as exc:
        raise ResourceFetchError(url, cause=exc) from exc
    if response.status_code != 200:
        raise ResourceFetchError(url, status=response.status_code)
    log.debug("fetched %d bytes from %s", len(response.content), url)
    return response.content


def read_input(locator: str | None, stdin: BinaryIO | None = None, timeout: float | None = None) -> bytes:
    if locator is None or locator == STDIN_LOCATOR:
        log.debug("reading image from standard input")
        stream = stdin if stdin is not None else sys.stdin.buffer
        return stream.read()
    if is_url(locator):
        return fetch(locator, timeout=timeout)
    log.debug("reading image from %s", locator)
    try:
        with open(locator, "rb") as f:
            return f.read()
    except OSError as exc:
        raise InputOpenError(locator, exc) from exc


def decode(data: bytes) -> Image.Image:
    """Decode image bytes in any format Pillow understands. Only the first frame is kept."""
    try:
        image = Image.open(io.BytesIO(data))
        image.load()
    except (OSError, SyntaxError, ValueError, Image.DecompressionBombError) as exc:
        raise DecodeError(exc) from exc
    log.debug("decoded %s image, %dx%d, mode %s", image.format, image.width, image.height, image.mode)
    return image


def flatten(image: Image.Image) -> Image.Image:
    """Reduce ``image`` to L or RGB. Transparent pixels are composited over black."""
    if image.mode in ("RGBA", "LA", "PA") or (image.mode == "P" and "transparency" in image.info):
        rgba = image.convert("RGBA")
        background = Image.new("RGBA", rgba.size, (0, 0, 0, 255))
        return Image.alpha_composite(background, rgba).convert("RGB")
    if image.mode in ("L", "RGB"):
        return image
    if image.mode in ("I", "F") or image.mode.startswith("I;"):
        # 16-bit samples; keep the high byte
        arr = np.asarray(image).astype(np.float64) / 256
        return Image.fromarray(np.clip(arr, 0, 255).astype(np.uint8))
    if image.mode == "1":
        return image.convert("L")
    return image.convert("RGB")


def resize_to_width(image: Image.Image, width: int) -> Image.Image:
    """Bilinear resize to ``width`` columns, keeping the aspect ratio."""
    if width < 1:
        raise ValueError(f"width must be positive, got {width}")
    if image.width == width or image.width == 0:
        return image
    height = max(1, int(0.7 + image.height * width / image.width))
    return image.resize((width, height), Image.BILINEAR)


def load_image(
    locator: str | None,
    width: int = DEFAULT_WIDTH,
    stdin: BinaryIO | None = None,
    timeout: float | None = None,
) -> Image.Image:
    image = flatten(decode(read_input(locator, stdin=stdin, timeout=timeout)))
    resized = resize_to_width(image, width)
    log.debug("resized to %dx%d", resized.width, resized.height)
    return resized
