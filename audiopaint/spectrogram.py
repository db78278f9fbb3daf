from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from audiopaint.audio_types import Amplitude

Column = Tuple[Amplitude, ...]


@dataclass(frozen=True)
class SpectrogramModel:
    """
    Amplitude per (time bin, frequency bin), plus what is needed to map bins
    back to seconds and hertz.

    columns[x][y]: x is the time bin (left -> right), y is the frequency bin
    from the HIGHEST frequency (y=0, top row of the image) to the lowest.
    Frequencies are spaced evenly in log10(Hz) between low and high.
    """

    columns: Tuple[Column, ...]
    duration: float
    low_frequency: float
    high_frequency: float

    def __post_init__(self):
        if not (math.isfinite(self.duration) and self.duration > 0):
            raise ValueError(f"duration must be a positive finite number, got {self.duration!r}")
        if not (
            math.isfinite(self.low_frequency)
            and math.isfinite(self.high_frequency)
            and 0 < self.low_frequency <= self.high_frequency
        ):
            raise ValueError(
                "frequencies must be finite and satisfy 0 < low <= high "
                f"(low={self.low_frequency!r}, high={self.high_frequency!r})"
            )
        columns = tuple(
            tuple(a if isinstance(a, Amplitude) else Amplitude(a) for a in col)
            for col in self.columns
        )
        object.__setattr__(self, "columns", columns)
        heights = {len(col) for col in columns}
        if len(heights) > 1:
            raise ValueError(f"all columns must have the same length, got {sorted(heights)}")

    @classmethod
    def from_grid(
        cls,
        grid: Sequence[Sequence[float]],
        duration: float,
        low_frequency: float,
        high_frequency: float,
    ) -> SpectrogramModel:
        """
        Build a model from a row-major grid (grid[y][x], values ~0..1).

        Rows are frequency bins (row 0 = highest), so the grid is transposed
        into time columns. No resampling: one pixel -> one Amplitude.
        """
        rows = [list(r) for r in grid]
        width = len(rows[0]) if rows else 0
        if any(len(r) != width for r in rows):
            raise ValueError("grid must be rectangular (all rows the same length)")

        columns = tuple(
            tuple(Amplitude(rows[y][x]) for y in range(len(rows)))
            for x in range(width)
        )
        return cls(columns, float(duration), float(low_frequency), float(high_frequency))

    @property
    def width(self) -> int:
        return len(self.columns)

    @property
    def height(self) -> int:
        return len(self.columns[0]) if self.columns else 0

    def bin_frequency(self, i: int) -> float:
        """Frequency in Hz of bin i (0 = highest) on the base-10 log axis."""
        n = self.height
        log_low = math.log10(self.low_frequency)
        log_high = math.log10(self.high_frequency)
        ratio = 1.0 - i / n
        log_frequency = ratio * (log_high - log_low) + log_low
        return 10.0 ** log_frequency

    def frequencies(self) -> List[float]:
        return [self.bin_frequency(i) for i in range(self.height)]
