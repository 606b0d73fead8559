from __future__ import annotations

import math
from dataclasses import asdict, dataclass, fields
from typing import Any, Mapping

from .classification import classify

INCH_TO_M = 0.0254
SECONDS_PER_HOUR = 3600.0
DAYS_PER_WEEK = 7.0

# Inputs that end up in a denominator; must be > 0.
_DIVISOR_FIELDS = (
    "filter_width",
    "filter_length",
    "airflow",
    "sorbent_working_capacity",
    "sorbent_mass_fraction",
    "max_cartridge_weight",
)


class DegenerateResultError(ValueError):
    """Raised when the inputs would produce an undefined (infinite/NaN) result."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


@dataclass(frozen=True)
class InputParameters:
    filter_width: float = 20  # in
    filter_length: float = 20  # in
    filter_depth: float = 0.1  # m
    airflow: float = 0.47  # m3/s
    daily_runtime: float = 6  # h/day
    max_static_pressure: float = 80  # Pa, unused by the formulas
    sorbent_capture_efficiency: float = 0.018
    sorbent_working_capacity: float = 0.08
    initial_co2_concentration: float = 0.0007  # kg/m3
    sorbent_mass_fraction: float = 0.7
    max_cartridge_weight: float = 10  # kg

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "InputParameters":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise KeyError(f"Unknown input fields: {', '.join(unknown)}")
        values: dict[str, float] = {}
        for name, raw in data.items():
            if not isinstance(raw, (int, float)) or isinstance(raw, bool):
                raise TypeError(f"{name} must be a number")
            values[name] = raw
        return cls(**values)

    def with_value(self, name: str, value: float) -> "InputParameters":
        return InputParameters.from_mapping({**self.as_dict(), name: value})

    def as_dict(self) -> dict[str, float]:
        return asdict(self)


@dataclass(frozen=True)
class DerivedOutputs:
    frontal_area: float  # m2
    air_velocity: float  # m/s
    residence_time: float  # s
    hourly_co2_capture_rate: float  # kg/hr
    total_weekly_co2_capture: float  # kg
    required_sorbent_mass: float  # kg
    total_filter_weight: float  # kg
    weekly_cartridge_swaps: float  # swaps/week

    def as_dict(self) -> dict[str, float]:
        return asdict(self)


@dataclass(frozen=True)
class Evaluation:
    inputs: InputParameters
    outputs: DerivedOutputs
    band: str


def default_inputs() -> InputParameters:
    return InputParameters()


def _check_inputs(inputs: InputParameters) -> None:
    for f in fields(inputs):
        if f.name == "max_static_pressure":
            continue
        value = float(getattr(inputs, f.name))
        if not math.isfinite(value):
            raise DegenerateResultError(f.name, f"{f.name} must be finite")
    for name in _DIVISOR_FIELDS:
        if float(getattr(inputs, name)) <= 0.0:
            raise DegenerateResultError(name, f"{name} must be > 0")


def _positive_divisor(name: str, value: float) -> float:
    # Intermediate divisors can underflow to 0.0 even when every input is > 0.
    if not math.isfinite(value) or value <= 0.0:
        raise DegenerateResultError(name, f"{name} is not a finite positive number")
    return value


def evaluate(inputs: InputParameters) -> DerivedOutputs:
    """
    Computes the derived quantities for one selection.

    No rounding is applied; each quantity feeds the next one at full precision.
    Raises DegenerateResultError instead of returning inf/NaN.
    """
    _check_inputs(inputs)

    frontal_area = _positive_divisor(
        "frontal_area", (inputs.filter_width * INCH_TO_M) * (inputs.filter_length * INCH_TO_M)
    )
    air_velocity = _positive_divisor("air_velocity", inputs.airflow / frontal_area)
    residence_time = inputs.filter_depth / air_velocity
    hourly_co2_capture_rate = (
        inputs.airflow
        * inputs.initial_co2_concentration
        * inputs.sorbent_capture_efficiency
        * SECONDS_PER_HOUR
    )
    total_weekly_co2_capture = hourly_co2_capture_rate * inputs.daily_runtime * DAYS_PER_WEEK
    required_sorbent_mass = total_weekly_co2_capture / inputs.sorbent_working_capacity
    total_filter_weight = required_sorbent_mass / inputs.sorbent_mass_fraction
    weekly_cartridge_swaps = total_filter_weight / inputs.max_cartridge_weight

    outputs = DerivedOutputs(
        frontal_area=frontal_area,
        air_velocity=air_velocity,
        residence_time=residence_time,
        hourly_co2_capture_rate=hourly_co2_capture_rate,
        total_weekly_co2_capture=total_weekly_co2_capture,
        required_sorbent_mass=required_sorbent_mass,
        total_filter_weight=total_filter_weight,
        weekly_cartridge_swaps=weekly_cartridge_swaps,
    )
    # Overflow on extreme inputs.
    for f in fields(outputs):
        if not math.isfinite(getattr(outputs, f.name)):
            raise DegenerateResultError(f.name, f"{f.name} is not a finite number")
    return outputs


def evaluate_selection(selection: Mapping[str, Any]) -> Evaluation:
    inputs = InputParameters.from_mapping(selection)
    outputs = evaluate(inputs)
    return Evaluation(inputs=inputs, outputs=outputs, band=classify(outputs.weekly_cartridge_swaps))
