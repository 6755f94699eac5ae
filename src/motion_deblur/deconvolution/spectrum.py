"""Frequency-domain primitives: quadrant shift and spectral filtering."""

from __future__ import annotations

import numpy as np
from numpy.fft import fft2, ifft2
from numpy.typing import NDArray


def fftshift(array: np.ndarray) -> np.ndarray:
    """Swap the four quadrants of a 2-D array.

    The element at the geometric centre ``(rows // 2, cols // 2)`` moves to
    the origin and vice versa: the top-left quadrant is exchanged with the
    bottom-right one and the top-right with the bottom-left.  A kernel built
    centred in the frame is thereby anchored at the origin, which is where
    the DFT expects it.

    The shift is a pure permutation, so applying it twice returns the input
    exactly.

    Parameters
    ----------
    array : np.ndarray
        2-D array with even dimensions.

    Returns
    -------
    np.ndarray
        Shifted copy; *array* is left untouched.
    """
    if array.ndim != 2:
        raise ValueError(f"fftshift expects a 2-D array, got shape {array.shape}.")
    rows, cols = array.shape
    if rows % 2 or cols % 2:
        raise ValueError(f"fftshift requires even dimensions, got {array.shape}.")

    cy = rows // 2
    cx = cols // 2
    out = np.empty_like(array)
    # top-left <-> bottom-right
    out[:cy, :cx] = array[cy:, cx:]
    out[cy:, cx:] = array[:cy, :cx]
    # top-right <-> bottom-left
    out[:cy, cx:] = array[cy:, :cx]
    out[cy:, :cx] = array[:cy, cx:]
    return out


def filter_in_frequency_domain(
    image: np.ndarray,
    kernel: np.ndarray,
    spatial: bool = False,
) -> NDArray[np.float64]:
    """Filter an image by pointwise multiplication of spectra.

    The image spectrum is computed with scale normalisation (divided by the
    number of elements), multiplied by the kernel's transfer function without
    conjugation, and brought back with an unscaled inverse DFT.  Only the
    real part of the result is kept.

    Parameters
    ----------
    image : np.ndarray
        2-D real image.
    kernel : np.ndarray
        Same shape as *image*.  By default a frequency-domain transfer
        function (e.g. the Wiener filter) applied as-is.
    spatial : bool, optional
        If True, *kernel* is a spatial kernel centred in the frame (such as a
        PSF).  It is shifted to the origin and transformed with an
        unnormalised DFT first, which makes the operation a circular
        convolution with the kernel.

    Returns
    -------
    np.ndarray
        Filtered image, float64, not clamped.
    """
    if image.ndim != 2:
        raise ValueError(f"Expected a 2-D image, got shape {image.shape}.")
    if image.shape != kernel.shape:
        raise ValueError(
            f"Image shape {image.shape} and kernel shape {kernel.shape} must match."
        )

    complex_img = image.astype(np.complex128)
    spec_img = fft2(complex_img, norm="forward")

    if spatial:
        complex_h = fftshift(kernel).astype(np.complex128)
        spec_h = fft2(complex_h)
    else:
        spec_h = kernel.astype(np.complex128)

    # norm="forward" on the inverse leaves it unscaled
    filtered = ifft2(spec_img * spec_h, norm="forward")
    return np.ascontiguousarray(filtered.real, dtype=np.float64)
