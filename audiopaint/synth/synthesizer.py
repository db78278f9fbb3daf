# synthesizer.py
"""
Direct additive synthesis from a SpectrogramModel.

Flow:
  evaluate(t) for every output sample -> normalize -> quantize

Each sample sums amplitude * sin(t * f) over the bins of the column under t.
Phase comes from absolute time, never from the previous sample, so evaluate()
is a pure function of t and the (immutable) model.
"""

from __future__ import annotations

import math
from typing import List

from audiopaint.audio_types import SignalValue
from audiopaint.spectrogram import SpectrogramModel
from audiopaint.synth.amplifiers import normalize, quantize


class Synthesizer:
    def __init__(self, model: SpectrogramModel):
        if model.width == 0 or model.height == 0:
            raise ValueError(
                f"cannot synthesize an empty spectrogram ({model.width}x{model.height})"
            )
        self.model = model
        # per-bin frequencies never change for a given model
        self._frequencies = model.frequencies()
        self._weights = [[a.value for a in col] for col in model.columns]

    def column_index(self, time: float) -> int:
        count = len(self._weights)
        index = int((time / self.model.duration) * count)
        return count - 1 if index >= count else index

    def evaluate(self, time: float) -> SignalValue:
        """Waveform value at `time` seconds (0 <= time <= duration)."""
        assert 0.0 <= time <= self.model.duration, (
            f"time {time!r} outside [0, {self.model.duration!r}]"
        )
        weights = self._weights[self.column_index(time)]

        result = 0.0
        for amplitude, frequency in zip(weights, self._frequencies):
            result += amplitude * math.sin(time * frequency)
        return SignalValue(result)

    def sample_count(self, sample_rate: int) -> int:
        if isinstance(sample_rate, bool) or not isinstance(sample_rate, int) or sample_rate <= 0:
            raise ValueError(f"sample_rate must be a positive integer, got {sample_rate!r}")
        total = self.model.duration * sample_rate
        if not math.isfinite(total):
            raise ValueError(f"too many samples: {self.model.duration!r} s at {sample_rate} Hz")
        return int(total)

    def render(self, sample_rate: int) -> List[SignalValue]:
        """Evaluate every sample and normalize; output is still floating point."""
        n = self.sample_count(sample_rate)
        duration = self.model.duration
        raw = [self.evaluate(duration * k / n) for k in range(n)]
        return normalize(raw)

    def to_time_domain(self, sample_rate: int, bits_per_sample: int = 32) -> List[int]:
        """
        Render the whole clip as signed fixed-width integers.

        Args:
            sample_rate:     samples per second (positive int)
            bits_per_sample: target integer width (32 -> peak 2**31 - 1)

        Returns:
            floor(duration * sample_rate) ints, peak at full scale unless silent.
        """
        return quantize(self.render(sample_rate), bits_per_sample)
