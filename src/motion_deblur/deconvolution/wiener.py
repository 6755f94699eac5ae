"""Wiener deconvolution for linear motion blur.

The Wiener transfer function is derived from the spectrum of the motion PSF
after it has been moved to the origin::

    Hw = Re(H) / (|Re(H)|^2 + nsr)

Only the real part of ``H`` enters the filter.  This approximates the textbook
``conj(H) / (|H|^2 + nsr)``: the rasterised line is not exactly
point-symmetric, so ``Im(H)`` is generally non-zero and is discarded.
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.fft import fft2
from numpy.typing import NDArray

from .psf import build_psf
from .spectrum import fftshift, filter_in_frequency_domain
from .utils import crop_to_even

LOGGER = logging.getLogger(__name__)


def build_wiener_filter(psf: np.ndarray, nsr: float) -> NDArray[np.float64]:
    """Compute the Wiener filter transfer function for a PSF.

    Parameters
    ----------
    psf : np.ndarray
        Centred 2-D PSF with even dimensions, as returned by
        :func:`~motion_deblur.deconvolution.psf.build_psf`.
    nsr : float
        Noise-to-signal ratio (``1 / SNR``).  Regularises frequencies where
        the PSF response vanishes.

    Returns
    -------
    np.ndarray
        Real transfer function with the same shape as *psf*.
    """
    if nsr < 0:
        raise ValueError(f"Noise-to-signal ratio must be non-negative, got {nsr}.")
    if nsr == 0:
        LOGGER.warning(
            "Noise-to-signal ratio is 0; frequencies the PSF suppresses "
            "will not be regularised."
        )

    psf_shifted = fftshift(psf)
    spectrum = fft2(psf_shifted.astype(np.complex128))
    re = spectrum.real.astype(np.float64)
    denom = np.abs(re) ** 2 + nsr

    with np.errstate(divide="ignore", invalid="ignore"):
        hw = re / denom

    if not np.all(np.isfinite(hw)):
        raise ValueError(
            f"Wiener filter is not finite for nsr={nsr}; use a positive ratio."
        )
    LOGGER.debug("Wiener filter range [%.4g, %.4g].", hw.min(), hw.max())
    return hw


def deblur(
    image: np.ndarray,
    length: int,
    angle: float,
    snr: float,
) -> NDArray[np.float64]:
    """Restore a motion-blurred grayscale image.

    The image is cropped to even dimensions, a motion PSF of the given
    *length* and *angle* is built for that size, and the Wiener filter with
    ``nsr = 1 / snr`` is applied in the frequency domain.

    Parameters
    ----------
    image : np.ndarray
        2-D grayscale image.
    length : int
        Blur length in pixels.
    angle : float
        Blur angle in degrees.
    snr : float
        Assumed signal-to-noise ratio, must be positive.

    Returns
    -------
    np.ndarray
        Restored image of the cropped size, float64, not clamped.
    """
    if snr <= 0:
        raise ValueError(f"Signal-to-noise ratio must be positive, got {snr}.")

    cropped = crop_to_even(np.asarray(image, dtype=np.float64))
    rows, cols = cropped.shape

    psf = build_psf((cols, rows), length, angle)
    hw = build_wiener_filter(psf, 1.0 / snr)
    restored = filter_in_frequency_domain(cropped, hw)

    LOGGER.info(
        "Deblurred %d x %d image (LEN=%s, THETA=%s, SNR=%s).",
        cols,
        rows,
        length,
        angle,
        snr,
    )
    return restored
