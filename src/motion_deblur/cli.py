"""Command-line entry point for motion-blur restoration.

Workflow:

1. Load the image as grayscale and crop it to even dimensions.
2. Build a linear motion PSF of length ``LEN`` and angle ``THETA``.
3. Build the Wiener filter with noise-to-signal ratio ``1 / SNR``.
4. Filter the image in the frequency domain.
5. Rescale the result to [0, 255] and save it as ``result.jpg``.

Usage::

    motion-deblur --image=P1030513.JPG --LEN=78 --THETA=12 --SNR=100
"""

from __future__ import annotations

import argparse
import sys

from .config import (
    DEFAULT_ANGLE,
    DEFAULT_IMAGE,
    DEFAULT_LENGTH,
    DEFAULT_SNR,
    DeblurConfig,
)
from .deconvolution.wiener import deblur
from .io import load_grayscale, save_image

EXIT_LOAD_FAILURE = -1
EXIT_SAVE_FAILURE = 1


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="motion-deblur",
        description="Recover a motion-blurred image with a Wiener filter.",
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument(
        "-h",
        "--help",
        "-usage",
        "-?",
        action="help",
        help="Print this message and exit.",
    )
    parser.add_argument(
        "--image",
        type=str,
        default=DEFAULT_IMAGE,
        help=f"Input image name. Default: {DEFAULT_IMAGE}.",
    )
    parser.add_argument(
        "--LEN",
        type=int,
        default=DEFAULT_LENGTH,
        help=f"Length of the motion in pixels. Default: {DEFAULT_LENGTH}.",
    )
    parser.add_argument(
        "--THETA",
        type=int,
        default=DEFAULT_ANGLE,
        help=f"Angle of the motion in degrees. Default: {DEFAULT_ANGLE}.",
    )
    parser.add_argument(
        "--SNR",
        type=int,
        default=DEFAULT_SNR,
        help=f"Signal-to-noise ratio. Default: {DEFAULT_SNR}.",
    )
    return parser


def _print_banner() -> None:
    print("Motion_deblur")
    print("Recover a motion blur image by Wiener filter")


def main(argv: list[str] | None = None) -> int:
    """Run the deblurring pipeline from the command line.

    Returns the process exit status: 0 on success, -1 when the input image
    cannot be loaded or processed, 1 when the result cannot be written.
    Help exits with 0 and malformed arguments with argparse's status 2.
    """
    _print_banner()
    parser = _build_parser()
    args = parser.parse_args(argv)

    config = DeblurConfig(
        image=args.image,
        length=args.LEN,
        angle=args.THETA,
        snr=args.SNR,
    )
    try:
        config.validate()
    except ValueError as exc:
        parser.error(str(exc))

    try:
        img = load_grayscale(config.image)
    except (OSError, ValueError) as exc:
        print(f"ERROR : Image cannot be loaded..!! ({exc})", file=sys.stderr)
        return EXIT_LOAD_FAILURE

    print(f"Processing {config.image} with size {img.shape[1]} x {img.shape[0]}")

    try:
        restored = deblur(img, config.length, config.angle, config.snr)
    except ValueError as exc:
        print(f"ERROR : {exc}", file=sys.stderr)
        return EXIT_LOAD_FAILURE

    try:
        save_image(restored, config.output)
    except OSError as exc:
        print(
            f"ERROR : Result cannot be saved to {config.output} ({exc})",
            file=sys.stderr,
        )
        return EXIT_SAVE_FAILURE
    print("Done. Result saved to", config.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
