from __future__ import annotations

import struct
import wave
from pathlib import Path

import pytest

from audiopaint.synth.wav import write_wav


def _read_back(path: Path):
    with wave.open(str(path), "rb") as w:
        params = (w.getnchannels(), w.getsampwidth(), w.getframerate(), w.getnframes())
        frames = w.readframes(w.getnframes())
    return params, frames


def test_write_wav_32_bit_mono(tmp_path: Path):
    samples = [0, 2 ** 31 - 1, -(2 ** 31 - 1), 12345]
    out = write_wav(tmp_path / "out.wav", samples, 48_000)

    (channels, width, rate, n), frames = _read_back(out)
    assert (channels, width, rate, n) == (1, 4, 48_000, 4)
    assert list(struct.unpack("<4i", frames)) == samples


def test_write_wav_16_bit(tmp_path: Path):
    samples = [0, 32767, -32767]
    out = write_wav(tmp_path / "out16.wav", samples, 8_000, bits_per_sample=16)

    (channels, width, rate, n), frames = _read_back(out)
    assert (channels, width, rate, n) == (1, 2, 8_000, 3)
    assert list(struct.unpack("<3h", frames)) == samples


def test_write_wav_creates_missing_directories(tmp_path: Path):
    nested = tmp_path / "deep/nested/dir/out.wav"
    out = write_wav(nested, [], 48_000)
    assert out.exists()
    assert out.parent.is_dir()


def test_write_wav_rejects_unknown_bit_depth(tmp_path: Path):
    with pytest.raises(ValueError):
        write_wav(tmp_path / "x.wav", [0], 48_000, bits_per_sample=24)
