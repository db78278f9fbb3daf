# audio_types.py
"""
Small immutable value types shared by the model and the synthesizer.

- Amplitude:   weight of one frequency component, always in [0, 1]
- SignalValue: one waveform sample before normalization (any finite real)

Both coerce bad input instead of rejecting it: NaN and +/-inf become 0.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


def _finite_or_zero(x) -> float:
    x = float(x)
    return x if math.isfinite(x) else 0.0


@dataclass(frozen=True)
class Amplitude:
    value: float = 0.0

    def __post_init__(self):
        v = _finite_or_zero(self.value)
        # clamp to [0, 1]
        v = 0.0 if v < 0.0 else 1.0 if v > 1.0 else v
        object.__setattr__(self, "value", v)

    def __float__(self) -> float:
        return self.value


@dataclass(frozen=True, order=True)
class SignalValue:
    value: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, "value", _finite_or_zero(self.value))

    def __abs__(self) -> SignalValue:
        return SignalValue(abs(self.value))

    def __float__(self) -> float:
        return self.value
