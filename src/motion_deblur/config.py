"""Run configuration for the deblurring command."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_IMAGE = "P1030513.JPG"
DEFAULT_LENGTH = 78
DEFAULT_ANGLE = 12
DEFAULT_SNR = 100
DEFAULT_OUTPUT = "result.jpg"


@dataclass
class DeblurConfig:
    """Parameters of a single deblurring run."""

    image: str = DEFAULT_IMAGE
    length: int = DEFAULT_LENGTH
    angle: int = DEFAULT_ANGLE
    snr: int = DEFAULT_SNR
    output: str = DEFAULT_OUTPUT

    def validate(self) -> None:
        if self.length < 0:
            raise ValueError(f"LEN must be non-negative, got {self.length}.")
        if self.snr <= 0:
            raise ValueError(f"SNR must be positive, got {self.snr}.")
