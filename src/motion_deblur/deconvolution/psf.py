"""Point-spread function for linear motion blur."""

from __future__ import annotations

import logging

import cv2
import numpy as np
from numpy.typing import NDArray

LOGGER = logging.getLogger(__name__)


def build_psf(
    size: tuple[int, int],
    length: int,
    angle: float,
) -> NDArray[np.float32]:
    """Build a normalised linear motion-blur PSF.

    A filled degenerate ellipse with axes ``(0, length)`` (i.e. a line
    segment) is rasterised into an all-zero frame, centred at
    ``(width // 2, height // 2)`` and rotated by ``90 - angle`` degrees.  The
    kernel is then divided by its total mass so that it sums to one and
    preserves overall brightness.

    Parameters
    ----------
    size : tuple[int, int]
        Frame size ``(width, height)``.  Both must be positive and even.
    length : int
        Motion extent in pixels.  ``0`` gives a single-point (identity)
        kernel.
    angle : float
        Motion direction in degrees.

    Returns
    -------
    np.ndarray
        ``float32`` PSF of shape ``(height, width)`` summing to one.
    """
    width, height = (int(v) for v in size)
    if width <= 0 or height <= 0:
        raise ValueError(f"PSF size must be positive, got {size}.")
    if width % 2 or height % 2:
        raise ValueError(f"PSF size must be even in both axes, got {size}.")
    if length < 0:
        raise ValueError(f"Blur length must be non-negative, got {length}.")

    h = np.zeros((height, width), dtype=np.float32)
    center = (width // 2, height // 2)
    cv2.ellipse(h, center, (0, int(length)), 90 - angle, 0, 360, 255, -1, cv2.LINE_8)

    total = float(h.sum())
    if total <= 0:
        raise ValueError(
            f"Motion PSF (length={length}, angle={angle}) has zero total mass."
        )
    LOGGER.debug(
        "Motion PSF length=%s angle=%s covers %d pixels.",
        length,
        angle,
        int(np.count_nonzero(h)),
    )
    return h / np.float32(total)
