"""Image quality metrics for judging a restoration against a sharp reference."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray
from skimage.metrics import structural_similarity


def _crop(img: np.ndarray, crop_pad: int) -> np.ndarray:
    if crop_pad > 0:
        return img[crop_pad:-crop_pad, crop_pad:-crop_pad]
    return img


def mse(
    img: NDArray[np.floating],
    ref: NDArray[np.floating],
    crop_pad: int = 0,
) -> float:
    """Mean squared error between two images of equal shape."""
    if img.shape != ref.shape:
        raise ValueError(f"Shapes {img.shape} and {ref.shape} must match.")
    ref_c = _crop(ref, crop_pad).astype(np.float64)
    img_c = _crop(img, crop_pad).astype(np.float64)
    diff = ref_c.ravel() - img_c.ravel()
    return float(np.dot(diff, diff)) / diff.size


def psnr(
    img: NDArray[np.floating],
    ref: NDArray[np.floating],
    data_range: float = 255.0,
    crop_pad: int = 0,
) -> float:
    """Compute Peak Signal-to-Noise Ratio.

    Parameters
    ----------
    img : ndarray
        Restored image.
    ref : ndarray
        Reference (ground-truth) image.
    data_range : float, optional
        Peak value of the image range.  Default 255.
    crop_pad : int, optional
        Number of pixels to crop from each edge first.  Default 0.

    Returns
    -------
    psnr_db : float
        PSNR in decibels.  Returns ``inf`` if MSE is essentially zero.
    """
    err = mse(img, ref, crop_pad=crop_pad)
    if err < np.finfo(float).eps:
        return float("inf")
    return float(10.0 * np.log10(data_range**2 / err))


def ssim(
    img: NDArray[np.floating],
    ref: NDArray[np.floating],
    data_range: float = 255.0,
) -> float:
    """Compute Structural Similarity Index Measure (higher is better)."""
    return float(
        structural_similarity(
            ref.astype(np.float64),
            img.astype(np.float64),
            data_range=data_range,
        )
    )
