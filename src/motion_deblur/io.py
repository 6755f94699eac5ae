"""Reading and writing grayscale images with Pillow."""

from __future__ import annotations

from pathlib import Path

import numpy as np
from numpy.typing import NDArray
from PIL import Image

from .deconvolution.utils import normalize_to_uint8


def load_grayscale(path: str | Path) -> NDArray[np.float64]:
    """Load an image file as a float64 grayscale array with shape (H, W).

    Raises ``FileNotFoundError`` for a missing file and
    ``PIL.UnidentifiedImageError`` for an undecodable one.
    """
    with Image.open(path) as pil_img:
        img = np.asarray(pil_img.convert("L"), dtype=np.float64)
    if img.size == 0:
        raise ValueError(f"Image {path} is empty.")
    return img


def save_image(image: np.ndarray, path: str | Path) -> None:
    """Min-max rescale *image* to 8 bits and save it; format follows the suffix."""
    Image.fromarray(normalize_to_uint8(image)).save(str(path))
