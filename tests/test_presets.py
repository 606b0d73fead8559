from __future__ import annotations

import pytest

from sorbent_core.presets import (
    FIELD_NAMES,
    PRESET_FIELDS,
    SELECTABLE_FIELDS,
    PresetField,
    canonical_value,
    default_selection,
    get_field,
    is_allowed,
)


def test_preset_domains() -> None:
    assert get_field("filter_width").values == (20, 24, 25)
    assert get_field("filter_length").values == (20, 24, 25)
    assert get_field("filter_depth").values == (0.1, 0.12, 0.15)
    assert get_field("airflow").values == (0.47, 0.57, 0.66)
    assert get_field("daily_runtime").values == (6, 8, 10)
    assert get_field("sorbent_capture_efficiency").values == (0.018, 0.022, 0.025)
    assert get_field("sorbent_working_capacity").values == (0.08, 0.10, 0.12)
    assert get_field("initial_co2_concentration").values == (0.0007, 0.0008, 0.0009)
    assert get_field("sorbent_mass_fraction").values == (0.7, 0.75, 0.8)
    assert get_field("max_cartridge_weight").values == (10, 12.5, 15)
    assert get_field("max_static_pressure").default == 80


def test_static_pressure_is_not_selectable() -> None:
    assert len(PRESET_FIELDS) == 11
    assert "max_static_pressure" not in {f.name for f in SELECTABLE_FIELDS}
    assert len(SELECTABLE_FIELDS) == 10


def test_defaults_are_first_presets() -> None:
    sel = default_selection()
    assert list(sel) == list(FIELD_NAMES)
    for field in PRESET_FIELDS:
        assert sel[field.name] == field.values[0]


def test_is_allowed_tolerates_float_noise() -> None:
    assert is_allowed("sorbent_working_capacity", 0.1)
    assert is_allowed("filter_depth", 0.1 + 0.02)
    assert not is_allowed("filter_depth", 0.13)
    assert not is_allowed("filter_width", True)
    assert not is_allowed("filter_width", float("nan"))


def test_canonical_value() -> None:
    assert canonical_value("filter_depth", 0.1 + 0.02) == 0.12
    with pytest.raises(ValueError):
        canonical_value("max_cartridge_weight", 11)


def test_unknown_field() -> None:
    with pytest.raises(KeyError):
        get_field("filter_height")


def test_default_must_be_a_preset() -> None:
    with pytest.raises(ValueError):
        PresetField("x", (1, 2), 3, "", "inputs.x", "inputs.x_help")
    with pytest.raises(ValueError):
        PresetField("x", (), 1, "", "inputs.x", "inputs.x_help")
