from __future__ import annotations

import math

import pytest

from audiopaint.audio_types import Amplitude
from audiopaint.spectrogram import SpectrogramModel


def test_from_grid_transposes_rows_into_time_columns():
    # 2 rows (freq bins) x 3 cols (time bins)
    grid = [
        [0.1, 0.2, 0.3],
        [0.4, 0.5, 0.6],
    ]
    m = SpectrogramModel.from_grid(grid, 3.0, 100.0, 1000.0)
    assert (m.width, m.height) == (3, 2)
    assert len(m.columns) == 3
    assert all(len(col) == 2 for col in m.columns)
    assert m.columns[0] == (Amplitude(0.1), Amplitude(0.4))
    assert m.columns[2][1].value == pytest.approx(0.6)


def test_from_grid_clamps_values():
    m = SpectrogramModel.from_grid([[2.0, -1.0, math.nan]], 1.0, 100.0, 200.0)
    assert [col[0].value for col in m.columns] == [1.0, 0.0, 0.0]


def test_from_grid_rejects_ragged_grid():
    with pytest.raises(ValueError):
        SpectrogramModel.from_grid([[0.1, 0.2], [0.3]], 1.0, 100.0, 200.0)


@pytest.mark.parametrize("duration", [0.0, -1.0, math.inf, math.nan])
def test_duration_must_be_positive(duration):
    with pytest.raises(ValueError):
        SpectrogramModel.from_grid([[1.0]], duration, 100.0, 200.0)


@pytest.mark.parametrize(
    "low,high",
    [
        (0.0, 100.0),
        (-5.0, 100.0),
        (200.0, 100.0),
        (100.0, math.inf),
        (math.inf, math.inf),
        (math.nan, 100.0),
    ],
)
def test_frequency_range_is_validated(low, high):
    with pytest.raises(ValueError):
        SpectrogramModel.from_grid([[1.0]], 1.0, low, high)


def test_single_frequency_range_is_allowed():
    m = SpectrogramModel.from_grid([[1.0]], 1.0, 100.0, 100.0)
    assert m.bin_frequency(0) == pytest.approx(100.0)


def test_bin_zero_is_the_highest_frequency():
    m = SpectrogramModel.from_grid([[0.0]] * 4, 1.0, 100.0, 10_000.0)
    freqs = m.frequencies()
    assert freqs[0] == pytest.approx(10_000.0)
    # log-spaced: 4 bins over two decades -> half a decade per bin
    assert freqs[1] == pytest.approx(10 ** 3.5)
    assert freqs[2] == pytest.approx(1000.0)
    assert freqs[3] == pytest.approx(10 ** 2.5)
    assert freqs == sorted(freqs, reverse=True)


def test_constructor_coerces_raw_columns_to_amplitudes():
    m = SpectrogramModel([[0.5, 2.0], [-1.0, 0.25]], 1.0, 100.0, 200.0)
    assert isinstance(m.columns, tuple)
    assert all(isinstance(col, tuple) for col in m.columns)
    assert m.columns[0] == (Amplitude(0.5), Amplitude(1.0))
    assert m.columns[1] == (Amplitude(0.0), Amplitude(0.25))
