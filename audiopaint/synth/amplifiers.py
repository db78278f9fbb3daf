# amplifiers.py
"""
Post-synthesis gain stage:
- normalize(samples)           # peak -> 1.0 (silence stays silence)
- quantize(samples, bits=32)   # [-1, 1] -> signed fixed-width ints

No dithering; quantize truncates toward zero.
"""

from typing import List, Sequence

from audiopaint.audio_types import SignalValue


def max_positive_int(bits_per_sample: int) -> int:
    """Largest value of a signed integer that is bits_per_sample wide."""
    if bits_per_sample < 2:
        raise ValueError(f"bits_per_sample must be >= 2, got {bits_per_sample}")
    return 2 ** (bits_per_sample - 1) - 1


def normalize(samples: Sequence[SignalValue]) -> List[SignalValue]:
    """Scale so the loudest sample has magnitude 1. All-zero input is returned as is."""
    if not samples:
        return []
    peak = max(abs(s) for s in samples).value
    if peak == 0.0:
        return list(samples)
    # divide (not multiply by 1/peak) so |s| / peak can never round above 1
    return [SignalValue(s.value / peak) for s in samples]


def quantize(samples: Sequence[SignalValue], bits_per_sample: int = 32) -> List[int]:
    top = max_positive_int(bits_per_sample)
    out: List[int] = []
    for s in samples:
        assert abs(s.value) <= 1.0, f"sample {s.value!r} exceeds unit magnitude after normalization"
        out.append(int(s.value * top))
    return out
