"""
i18n: one flat JSON dictionary per language (en.json, ru.json) next to this module.
The active language lives in st.session_state["lang"]; EN is the default.
"""
from __future__ import annotations

import json
from pathlib import Path

import streamlit as st

DEFAULT_LANG = "EN"

_I18N_DIR = Path(__file__).resolve().parent
_CACHE: dict[str, dict[str, str]] = {}


def available_languages() -> list[str]:
    """Language codes with a bundled dictionary, default first."""
    codes = sorted(p.stem.upper() for p in _I18N_DIR.glob("*.json"))
    if DEFAULT_LANG in codes:
        codes.remove(DEFAULT_LANG)
        codes.insert(0, DEFAULT_LANG)
    return codes


def load_lang(lang: str) -> dict[str, str]:
    """Cached dictionary for lang; empty when no file exists."""
    code = lang.upper()
    if code not in _CACHE:
        path = _I18N_DIR / f"{code.lower()}.json"
        strings: dict[str, str] = {}
        if path.exists():
            with path.open(encoding="utf-8") as f:
                strings = json.load(f)
        _CACHE[code] = strings
    return _CACHE[code]


def _active_lang() -> str:
    try:
        return str(st.session_state.get("lang", DEFAULT_LANG))
    except Exception:
        # No script run context (plain imports in tools/tests).
        return DEFAULT_LANG


def t(key: str, **kwargs) -> str:
    """
    Text for key in the active language, falling back to EN and then to the key itself.
    kwargs are applied with str.format; a bad placeholder leaves the raw text.
    """
    lang = _active_lang()
    raw = load_lang(lang).get(key)
    if raw is None and lang != DEFAULT_LANG:
        raw = load_lang(DEFAULT_LANG).get(key)
    if raw is None:
        raw = key
    if not kwargs:
        return raw
    try:
        return raw.format(**kwargs)
    except (KeyError, ValueError):
        return raw
