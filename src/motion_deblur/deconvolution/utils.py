"""Array helpers shared by the deblurring pipeline.

Cropping to the even-sized region the quadrant shift needs and min-max
rescaling for 8-bit output.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


def crop_to_even(image: np.ndarray) -> np.ndarray:
    """Crop an image to even dimensions, keeping the top-left region.

    The last row and/or column is dropped when the corresponding dimension
    is odd.

    Parameters
    ----------
    image : np.ndarray
        2-D image.

    Returns
    -------
    np.ndarray
        View of *image* with shape ``(rows & -2, cols & -2)``.
    """
    if image.ndim != 2:
        raise ValueError(f"Expected a 2-D image, got shape {image.shape}.")
    rows = image.shape[0] & -2
    cols = image.shape[1] & -2
    if rows == 0 or cols == 0:
        raise ValueError(
            f"Image of shape {image.shape} has zero area after cropping to even size."
        )
    return image[:rows, :cols]


def normalize_to_uint8(image: np.ndarray) -> NDArray[np.uint8]:
    """Linearly rescale an array to ``[0, 255]`` and cast to ``uint8``.

    Parameters
    ----------
    image : np.ndarray
        Real-valued array, e.g. the unclamped output of the Wiener filter.

    Returns
    -------
    np.ndarray
        ``uint8`` array with the minimum mapped to 0 and the maximum to 255.
        A constant input maps to all zeros.
    """
    img = np.asarray(image, dtype=np.float64)
    if not np.all(np.isfinite(img)):
        raise ValueError("Cannot normalise an image containing NaN or Inf.")
    imin = img.min()
    imax = img.max()
    if imax - imin == 0:
        return np.zeros(img.shape, dtype=np.uint8)
    scaled = (img - imin) * (255.0 / (imax - imin))
    return np.clip(np.rint(scaled), 0, 255).astype(np.uint8)
