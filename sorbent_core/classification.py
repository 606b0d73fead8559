from __future__ import annotations

import math

BAND_BAD = "bad"
BAND_OKAY = "okay"
BAND_GOOD = "good"
BAND_GREAT = "great"

# Worst to best.
BANDS: tuple[str, ...] = (BAND_BAD, BAND_OKAY, BAND_GOOD, BAND_GREAT)

# Checked top-down; first threshold the value reaches wins.
BAND_THRESHOLDS: tuple[tuple[float, str], ...] = (
    (3.0, BAND_BAD),
    (2.0, BAND_OKAY),
    (1.0, BAND_GOOD),
)


def classify(weekly_cartridge_swaps: float) -> str:
    """
    Severity band of the weekly cartridge swap count (lower is better).

    >= 3 -> bad, >= 2 -> okay, >= 1 -> good, otherwise great.
    """
    if not isinstance(weekly_cartridge_swaps, (int, float)) or isinstance(weekly_cartridge_swaps, bool):
        raise TypeError("weekly_cartridge_swaps must be a number")
    value = float(weekly_cartridge_swaps)
    if math.isnan(value):
        raise ValueError("weekly_cartridge_swaps must not be NaN")
    for threshold, band in BAND_THRESHOLDS:
        if value >= threshold:
            return band
    return BAND_GREAT
