from __future__ import annotations

from pathlib import Path
from typing import List, Tuple

from audiopaint.spectrogram import SpectrogramModel

# Pillow modes that already hold a single wide channel; scaled by 16-bit full range.
_WIDE_MODES = {"I", "I;16", "I;16L", "I;16B", "I;16N"}
_WIDE_MAX = 65535.0
_BYTE_MAX = 255.0


def _scale_for_mode(mode: str) -> float:
    if mode == "F":
        return 1.0
    if mode in _WIDE_MODES:
        return _WIDE_MAX
    return _BYTE_MAX


def read_image_luma(path: str | Path) -> Tuple[int, int, List[List[float]]]:
    """
    Read an image and reduce it to luminance, returning:
      (width, height, rows) where rows[y][x] is in 0..1 and row 0 is the top.

    8-bit and colour images go through Pillow's "L" conversion; 16/32-bit
    greyscale keeps its precision (divided by 65535); "F" images pass through.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(str(p))
    try:
        from PIL import Image, ImageOps
    except Exception as e:
        raise ImportError("Pillow is required: pip install pillow") from e
    try:
        with Image.open(p) as im:
            im = ImageOps.exif_transpose(im)
            if im.mode not in _WIDE_MODES and im.mode != "F":
                im = im.convert("L")
            scale = _scale_for_mode(im.mode)
            w, h = im.size
            # getdata() is deprecated from Pillow 12.1 on
            flatten = getattr(im, "get_flattened_data", None) or im.getdata
            pixels = list(flatten())
    except OSError as e:
        raise ValueError(f"Failed to open/read image: {p.name}") from e

    if len(pixels) != w * h:
        raise ValueError("Pixel data length mismatch after luminance conversion")
    rows = [[pixels[y * w + x] / scale for x in range(w)] for y in range(h)]
    return w, h, rows


def image_to_spectrogram(
    path: str | Path,
    duration: float,
    low_frequency: float,
    high_frequency: float,
) -> SpectrogramModel:
    """Image columns become time bins, rows become log-spaced frequency bins (top = high)."""
    _, _, rows = read_image_luma(path)
    return SpectrogramModel.from_grid(rows, duration, low_frequency, high_frequency)
