"""Brightness to character mapping.

A sample ``g`` on the scale ``0..max_value`` selects index
``floor(g / (max_value + 1) * len(alphabet))``. Dividing by ``max_value + 1``
splits the scale into ``len(alphabet)`` half-open buckets of equal width, so the
brightest sample lands in the last bucket and never one past it.
"""

import numpy as np

MAX_SAMPLE = 255


def char_index(sample: float, length: int, max_value: int = MAX_SAMPLE) -> int:
    """Bucket index of ``sample`` for an alphabet of ``length`` characters."""
    if length < 1:
        raise ValueError("alphabet must contain at least one character")
    sample = min(max(sample, 0), max_value)
    index = int(sample / (max_value + 1) * length)
    return min(index, length - 1)


def char_for(sample: float, alphabet: str, max_value: int = MAX_SAMPLE) -> str:
    return alphabet[char_index(sample, len(alphabet), max_value)]


def index_grid(samples: np.ndarray, length: int, max_value: int = MAX_SAMPLE) -> np.ndarray:
    """Vectorised ``char_index`` over an array of samples of any shape."""
    if length < 1:
        raise ValueError("alphabet must contain at least one character")
    clipped = np.clip(np.asarray(samples, dtype=np.float64), 0, max_value)
    indices = np.floor(clipped / (max_value + 1) * length).astype(np.intp)
    return np.minimum(indices, length - 1)
