import io
import logging
from typing import TextIO

import numpy as np
from PIL import Image

from asciiart.acquisition import flatten, resize_to_width
from asciiart.mapping import index_grid

log = logging.getLogger(__name__)


def render(image: Image.Image, alphabet: str, out: TextIO) -> int:
    """Write ``image`` to ``out`` as one line of ``alphabet`` characters per pixel row.

    Lines are written as soon as they are built. Returns the number of lines written.
    """
    if not alphabet:
        raise ValueError("alphabet must contain at least one character")
    width, height = image.size
    log.debug("rendering %dx%d image with %d-character alphabet", width, height, len(alphabet))

    if width == 0 or height == 0:
        out.write("\n" * height)
        return height

    chars = np.array(list(alphabet))
    gray = np.asarray(flatten(image).convert("L"))
    for row in gray:
        out.write("".join(chars[index_grid(row, len(alphabet))]))
        out.write("\n")
    return height


def image_to_ascii(image: Image.Image, alphabet: str, width: int | None = None) -> str:
    image = flatten(image)
    if width is not None:
        image = resize_to_width(image, width)
    buf = io.StringIO()
    render(image, alphabet, buf)
    return buf.getvalue()
