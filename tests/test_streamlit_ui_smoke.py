from __future__ import annotations

from pathlib import Path

from streamlit.testing.v1 import AppTest

ROOT = Path(__file__).resolve().parents[1]
APP_FILE = ROOT / "app" / "streamlit_app.py"

# Keeps the sweep page to 27 combinations.
_SWEEP_PINS = {
    "filter_width": 20,
    "filter_length": 20,
    "filter_depth": 0.1,
    "airflow": 0.47,
    "daily_runtime": 6,
    "sorbent_capture_efficiency": 0.018,
    "initial_co2_concentration": 0.0007,
}


def _app() -> AppTest:
    at = AppTest.from_file(str(APP_FILE), default_timeout=30)
    at.run()
    assert not at.exception
    return at


def _headline(at: AppTest) -> str:
    chips = [m.value for m in at.markdown if "swaps/wk" in m.value]
    assert len(chips) == 1
    return chips[0]


def _metric(at: AppTest, label: str) -> str:
    values = [m.value for m in at.metric if m.label == label]
    assert len(values) == 1, label
    return values[0]


def test_default_selection_renders_results() -> None:
    at = _app()
    chip = _headline(at)
    assert ">1.6<" in chip
    assert ">good<" in chip
    assert _metric(at, "Total Filter Weight") == "16.0 kg"
    assert _metric(at, "Frontal Area (A)") == "0.26 m²"


def test_changing_a_preset_recomputes() -> None:
    at = _app()
    at.radio(key="w_max_cartridge_weight").set_value(15).run()
    assert not at.exception

    chip = _headline(at)
    assert ">1.1<" in chip
    assert ">good<" in chip
    assert _metric(at, "Total Filter Weight") == "16.0 kg"

    at.radio(key="w_sorbent_working_capacity").set_value(0.12).run()
    chip = _headline(at)
    assert ">0.7<" in chip
    assert ">great<" in chip


def test_selection_survives_page_switch() -> None:
    at = _app()
    at.radio(key="w_max_cartridge_weight").set_value(15).run()

    for name, value in _SWEEP_PINS.items():
        at.session_state[f"sweep_pin_{name}"] = value
    at.radio(key="page").set_value("sweep").run()
    assert not at.exception
    assert not [m for m in at.markdown if "swaps/wk" in m.value]

    at.radio(key="page").set_value("calculator").run()
    assert not at.exception
    assert at.radio(key="w_max_cartridge_weight").value == 15
    assert ">1.1<" in _headline(at)
