from __future__ import annotations

from dataclasses import dataclass

GROUP_INTERMEDIATE = "intermediate"
GROUP_FINAL = "final"


@dataclass(frozen=True)
class OutputDisplay:
    name: str
    unit: str
    decimals: int
    group: str
    headline: bool = False

    @property
    def label_key(self) -> str:
        return f"outputs.{self.name}"

    @property
    def help_key(self) -> str:
        return f"outputs.{self.name}_help"


# Display order of the results panel.
OUTPUT_DISPLAYS: tuple[OutputDisplay, ...] = (
    OutputDisplay("frontal_area", "m²", 2, GROUP_INTERMEDIATE),
    OutputDisplay("air_velocity", "m/s", 2, GROUP_INTERMEDIATE),
    OutputDisplay("residence_time", "s", 3, GROUP_INTERMEDIATE),
    OutputDisplay("hourly_co2_capture_rate", "kg/hr", 3, GROUP_INTERMEDIATE),
    OutputDisplay("required_sorbent_mass", "kg", 1, GROUP_INTERMEDIATE),
    OutputDisplay("total_weekly_co2_capture", "kg", 2, GROUP_FINAL),
    OutputDisplay("total_filter_weight", "kg", 1, GROUP_FINAL),
    OutputDisplay("weekly_cartridge_swaps", "swaps/wk", 1, GROUP_FINAL, headline=True),
)


def outputs_in_group(group: str) -> list[OutputDisplay]:
    return [o for o in OUTPUT_DISPLAYS if o.group == group]


def format_value(value: float, decimals: int) -> str:
    """Fixed-point text for display only; never fed back into calculations."""
    if decimals < 0:
        raise ValueError("decimals must be >= 0")
    return f"{float(value):.{decimals}f}"


def format_preset(value: float) -> str:
    """Preset label as the user sees it: 20, 0.1, 12.5."""
    num = float(value)
    if num.is_integer():
        return str(int(num))
    return f"{num:g}"
