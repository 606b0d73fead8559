"""i18n UI key coverage: literal t("...") keys and keys built from presets/outputs exist in EN and RU."""
from __future__ import annotations

import json
import re
from pathlib import Path

import pytest

from app.display import OUTPUT_DISPLAYS
from app.ui_components import _BAND_KEYS
from app.validation import _VALIDATION_EN
from sorbent_core.presets import PRESET_FIELDS

ROOT = Path(__file__).resolve().parents[1]
I18N_DIR = ROOT / "app" / "i18n"

# t("key") or t('key') with a plain string literal; f-strings and variables are not matched.
_T_CALL = re.compile(r'\bt\s*\(\s*["\']([^"\']+)["\']\s*')


def _load_json(path: Path) -> dict:
    with path.open(encoding="utf-8") as f:
        return json.load(f)


def _ui_sources() -> list[Path]:
    return [
        ROOT / "app" / "streamlit_app.py",
        ROOT / "app" / "ui_components.py",
        *sorted((ROOT / "app" / "views").glob("*.py")),
    ]


def _literal_keys() -> set[str]:
    keys: set[str] = set()
    for path in _ui_sources():
        keys |= set(_T_CALL.findall(path.read_text(encoding="utf-8")))
    return keys


def _dynamic_keys() -> set[str]:
    keys: set[str] = {"band.unknown"}
    for field in PRESET_FIELDS:
        keys |= {field.label_key, field.help_key}
    for out in OUTPUT_DISPLAYS:
        keys |= {out.label_key, out.help_key}
    keys |= set(_BAND_KEYS.values())
    keys |= set(_VALIDATION_EN)
    return keys


@pytest.mark.parametrize("lang", ["en", "ru"])
def test_literal_ui_keys_exist(lang: str) -> None:
    strings = _load_json(I18N_DIR / f"{lang}.json")
    literal = _literal_keys()
    assert "calculator.header" in literal
    missing = literal - set(strings)
    assert not missing, f"Keys in UI but missing in {lang}: {sorted(missing)}"


@pytest.mark.parametrize("lang", ["en", "ru"])
def test_generated_keys_exist(lang: str) -> None:
    strings = _load_json(I18N_DIR / f"{lang}.json")
    missing = _dynamic_keys() - set(strings)
    assert not missing, f"Generated keys missing in {lang}: {sorted(missing)}"


def test_no_orphan_keys() -> None:
    en = _load_json(I18N_DIR / "en.json")
    orphans = set(en) - _literal_keys() - _dynamic_keys()
    assert not orphans, f"Keys not referenced by the UI: {sorted(orphans)}"
