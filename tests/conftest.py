"""Shared test fixtures for pyES51986 tests."""

from __future__ import annotations

import pytest

from src.es51986.parser import StreamDecoder


@pytest.fixture
def decoder() -> StreamDecoder:
    """Fresh stream decoder in the IDLE state."""
    return StreamDecoder()


@pytest.fixture
def sample_frames() -> dict[str, bytes]:
    """Sample ES51986 frames (payload only, no terminators) captured from a meter."""
    return {
        "voltage_minus_zero": b"00000;<0:",  # Range0, 0.000 V, negative, DC, auto
        "voltage_98_9": b"20989;806",  # Range2, 98.9 V, AC, auto
        "ohm_overflow": b"560003902",  # Range5, 60.00 MOhm, overflow
        "ohm_0_985k": b"109853802",  # Range1, 0.985 kOhm
        "capacitor_overflow": b"660006902",  # Range6, 6.000 mF, overflow
        "capacitor_116_5n": b"211656802",  # Range2, 116.5 nF
        "capacitor_0_022n": b"000226802",  # Range0, 0.022 nF
        "frequency_100_1k": b"210012802",  # Range2, 100.1 kHz
        "lux_136": b"00136>800",  # Adp0 luminance, no unit
        "sound_676": b"00676<800",  # Adp1 sound level, no unit
        "temperature_30": b"000304800",  # Temperature, no unit
        "milli_ampere": b"00002?<0:",  # Range0, 0.02 mA, negative
        "manual_ampere": b"000019808",  # Range0, 0.001 A, DC
    }
