# config.py
from dataclasses import dataclass

# ===== CONVERSION DEFAULTS (EDIT HERE) =====
DEFAULT_DURATION_S = 10.0        # length of the rendered clip (seconds)
DEFAULT_SAMPLE_RATE = 48_000     # Hz; top image row maps to half of this
LOW_FREQUENCY_HZ = 100.0         # bottom image row
DEFAULT_BITS_PER_SAMPLE = 32     # signed PCM width written to the WAV
SUPPORTED_BITS = (16, 32)


@dataclass
class ConversionSettings:
    duration: float = DEFAULT_DURATION_S
    sample_rate: int = DEFAULT_SAMPLE_RATE
    bits_per_sample: int = DEFAULT_BITS_PER_SAMPLE
    low_frequency: float = LOW_FREQUENCY_HZ

    @property
    def high_frequency(self) -> float:
        return self.sample_rate / 2.0
