from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class PresetField:
    name: str
    values: tuple[float, ...]
    default: float
    unit: str
    label_key: str
    help_key: str
    selectable: bool = True

    def __post_init__(self) -> None:
        if not self.values:
            raise ValueError(f"{self.name}: preset values must not be empty")
        if not any(_same(self.default, v) for v in self.values):
            raise ValueError(f"{self.name}: default {self.default} is not a preset value")


def _same(a: float, b: float) -> bool:
    return math.isclose(float(a), float(b), rel_tol=1e-9, abs_tol=0.0)


def _field(
    name: str,
    values: tuple[float, ...],
    unit: str,
    *,
    default: float | None = None,
    selectable: bool = True,
) -> PresetField:
    return PresetField(
        name=name,
        values=values,
        default=values[0] if default is None else default,
        unit=unit,
        label_key=f"inputs.{name}",
        help_key=f"inputs.{name}_help",
        selectable=selectable,
    )


# Order matches the controls panel.
PRESET_FIELDS: tuple[PresetField, ...] = (
    _field("filter_width", (20, 24, 25), "in"),
    _field("filter_length", (20, 24, 25), "in"),
    _field("filter_depth", (0.1, 0.12, 0.15), "m"),
    _field("airflow", (0.47, 0.57, 0.66), "m³/s"),
    _field("daily_runtime", (6, 8, 10), "h/day"),
    # Not consumed by any formula; kept as configuration only.
    _field("max_static_pressure", (80,), "Pa", selectable=False),
    _field("sorbent_capture_efficiency", (0.018, 0.022, 0.025), ""),
    _field("sorbent_working_capacity", (0.08, 0.10, 0.12), ""),
    _field("initial_co2_concentration", (0.0007, 0.0008, 0.0009), "kg/m³"),
    _field("sorbent_mass_fraction", (0.7, 0.75, 0.8), ""),
    _field("max_cartridge_weight", (10, 12.5, 15), "kg"),
)

_BY_NAME: dict[str, PresetField] = {f.name: f for f in PRESET_FIELDS}

FIELD_NAMES: tuple[str, ...] = tuple(f.name for f in PRESET_FIELDS)
SELECTABLE_FIELDS: tuple[PresetField, ...] = tuple(f for f in PRESET_FIELDS if f.selectable)


def get_field(name: str) -> PresetField:
    try:
        return _BY_NAME[name]
    except KeyError:
        raise KeyError(f"Unknown input field: {name}") from None


def is_allowed(name: str, value: float) -> bool:
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        return False
    if not math.isfinite(float(value)):
        return False
    return any(_same(value, v) for v in get_field(name).values)


def canonical_value(name: str, value: float) -> float:
    """Returns the preset value matching `value` (raises ValueError if none)."""
    for v in get_field(name).values:
        if isinstance(value, (int, float)) and not isinstance(value, bool) and _same(value, v):
            return v
    raise ValueError(f"{name}={value!r} is not one of the presets {get_field(name).values}")


def default_selection() -> dict[str, float]:
    return {f.name: f.default for f in PRESET_FIELDS}
