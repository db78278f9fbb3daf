# main.py
"""
Entry point: paint a spectrogram, hear it.

Flow:
  converter.image_to_spectrogram -> Synthesizer.to_time_domain -> write_wav

Usage:
  python -m audiopaint.main -i picture.png -o out.wav [-l 10] [-s 48000] [-b 32]
"""

from __future__ import annotations

import argparse
import math
import sys
from pathlib import Path
from typing import List, Optional

from audiopaint.config import (
    DEFAULT_BITS_PER_SAMPLE,
    DEFAULT_DURATION_S,
    DEFAULT_SAMPLE_RATE,
    SUPPORTED_BITS,
    ConversionSettings,
)
from audiopaint.converter import image_to_spectrogram
from audiopaint.synth.synthesizer import Synthesizer
from audiopaint.synth.wav import write_wav


def convert_image(image_path, output_path, settings: Optional[ConversionSettings] = None) -> Path:
    """Render one image to a mono WAV file and return the written path."""
    if settings is None:
        settings = ConversionSettings()

    model = image_to_spectrogram(
        image_path,
        duration=settings.duration,
        low_frequency=settings.low_frequency,
        high_frequency=settings.high_frequency,
    )
    samples = Synthesizer(model).to_time_domain(settings.sample_rate, settings.bits_per_sample)
    return write_wav(output_path, samples, settings.sample_rate, settings.bits_per_sample)


def _positive_float(text: str) -> float:
    try:
        value = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"length must be a number: {text!r}")
    if not (math.isfinite(value) and value > 0):
        raise argparse.ArgumentTypeError(f"length must be a positive finite number: {text!r}")
    return value


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"sample rate must be an integer: {text!r}")
    if value <= 0:
        raise argparse.ArgumentTypeError(f"sample rate must be positive: {text!r}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="audiopaint",
        description="Converts a spectrogram over time (in an image) into an audio file.",
    )
    parser.add_argument("-i", "--in", dest="input", required=True, help="The image to read.")
    parser.add_argument("-o", "--out", dest="output", required=True, help="The WAV file to write.")
    parser.add_argument(
        "-l", "--length", type=_positive_float, default=DEFAULT_DURATION_S,
        help=f"Length of the audio to create, in seconds (default {DEFAULT_DURATION_S:g}).",
    )
    parser.add_argument(
        "-s", "--samplerate", type=_positive_int, default=DEFAULT_SAMPLE_RATE,
        help=f"Sample rate to write (default {DEFAULT_SAMPLE_RATE} Hz). "
             "The top row of the image corresponds to half the sample rate.",
    )
    parser.add_argument(
        "-b", "--bits", type=int, choices=SUPPORTED_BITS, default=DEFAULT_BITS_PER_SAMPLE,
        help=f"Bits per sample (default {DEFAULT_BITS_PER_SAMPLE}).",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = ConversionSettings(
        duration=args.length,
        sample_rate=args.samplerate,
        bits_per_sample=args.bits,
    )

    print(f"Reading: {args.input}")
    try:
        out_path = convert_image(args.input, args.output, settings)
    except FileNotFoundError as e:
        print(f"Failed to open image: {e}")
        return 1
    except ValueError as e:
        print(f"Conversion failed: {e}")
        return 1
    except OSError as e:
        print(f"Failed to write output file: {e}")
        return 1

    print(f"Done. Wrote {out_path} ({settings.sample_rate} Hz, {settings.bits_per_sample}-bit mono)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
