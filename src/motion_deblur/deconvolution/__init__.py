"""Wiener deconvolution of linear motion blur.

Modules
-------
psf
    Motion-blur point-spread function synthesis.
spectrum
    Quadrant shift (``fftshift``) and frequency-domain filtering.
wiener
    Wiener transfer function and the end-to-end ``deblur`` pipeline.
utils
    Even-size cropping and 8-bit rescaling.
metrics
    Image quality metrics: MSE, PSNR, SSIM.
"""

from motion_deblur.deconvolution.metrics import mse, psnr, ssim
from motion_deblur.deconvolution.psf import build_psf
from motion_deblur.deconvolution.spectrum import fftshift, filter_in_frequency_domain
from motion_deblur.deconvolution.utils import (
    crop_to_even,
    normalize_to_uint8,
)
from motion_deblur.deconvolution.wiener import build_wiener_filter, deblur

__all__ = [
    "build_psf",
    "build_wiener_filter",
    "crop_to_even",
    "deblur",
    "fftshift",
    "filter_in_frequency_domain",
    "mse",
    "normalize_to_uint8",
    "psnr",
    "ssim",
]
