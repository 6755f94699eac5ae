"""Motion-blur restoration with a Wiener deconvolution filter."""

from motion_deblur import deconvolution
from motion_deblur.config import DeblurConfig

__all__ = [
    "DeblurConfig",
    "deconvolution",
]
