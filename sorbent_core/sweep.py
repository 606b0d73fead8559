from __future__ import annotations

import itertools
from typing import Any, Iterator, Mapping

import pandas as pd

from .classification import BANDS, classify
from .engine import InputParameters, evaluate
from .presets import PRESET_FIELDS, canonical_value, get_field

OUTPUT_COLUMNS = (
    "frontal_area",
    "air_velocity",
    "residence_time",
    "hourly_co2_capture_rate",
    "total_weekly_co2_capture",
    "required_sorbent_mass",
    "total_filter_weight",
    "weekly_cartridge_swaps",
)


def _domains(fixed: Mapping[str, Any] | None) -> list[tuple[str, tuple[float, ...]]]:
    fixed = dict(fixed or {})
    for name in fixed:
        get_field(name)
    domains: list[tuple[str, tuple[float, ...]]] = []
    for f in PRESET_FIELDS:
        if f.name in fixed:
            domains.append((f.name, (canonical_value(f.name, fixed[f.name]),)))
        else:
            domains.append((f.name, f.values))
    return domains


def iter_combinations(fixed: Mapping[str, Any] | None = None) -> Iterator[InputParameters]:
    """Yields every preset combination; fields in `fixed` are pinned to one value."""
    domains = _domains(fixed)
    names = [name for name, _ in domains]
    for combo in itertools.product(*(values for _, values in domains)):
        yield InputParameters(**dict(zip(names, combo)))


def sweep_frame(fixed: Mapping[str, Any] | None = None) -> pd.DataFrame:
    records: list[dict[str, Any]] = []
    for inputs in iter_combinations(fixed):
        outputs = evaluate(inputs)
        record: dict[str, Any] = inputs.as_dict()
        record.update(outputs.as_dict())
        record["band"] = classify(outputs.weekly_cartridge_swaps)
        records.append(record)
    columns = [f.name for f in PRESET_FIELDS] + list(OUTPUT_COLUMNS) + ["band"]
    return pd.DataFrame.from_records(records, columns=columns)


def band_counts(frame: pd.DataFrame) -> dict[str, int]:
    counts = frame["band"].value_counts()
    return {band: int(counts.get(band, 0)) for band in BANDS}


def best_combination(frame: pd.DataFrame) -> pd.Series:
    if frame.empty:
        raise ValueError("sweep frame is empty")
    return frame.loc[frame["weekly_cartridge_swaps"].idxmin()]
