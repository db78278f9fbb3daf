# wav.py
"""Mono signed PCM WAV writer (16- or 32-bit)."""

import struct
import wave
from pathlib import Path
from typing import Sequence

_PACK_FORMATS = {16: "h", 32: "i"}


def write_wav(path, samples: Sequence[int], sample_rate: int, bits_per_sample: int = 32) -> Path:
    """Write samples to a mono WAV file, creating parent folders. Returns the Path."""
    fmt = _PACK_FORMATS.get(bits_per_sample)
    if fmt is None:
        raise ValueError(f"Unsupported bit depth: {bits_per_sample} (valid: {sorted(_PACK_FORMATS)})")

    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with wave.open(str(p), "wb") as w:
        w.setnchannels(1)
        w.setsampwidth(bits_per_sample // 8)
        w.setframerate(sample_rate)
        w.writeframes(struct.pack(f"<{len(samples)}{fmt}", *samples))
    return p
