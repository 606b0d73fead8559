from __future__ import annotations

import sys
from pathlib import Path
import streamlit as st

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app.i18n import t  # noqa: E402
from app.i18n.core import DEFAULT_LANG, available_languages  # noqa: E402
from app.views import calculator, sweep  # noqa: E402
from app.views.calculator import selection_key, widget_key  # noqa: E402
from sorbent_core.presets import PRESET_FIELDS  # noqa: E402


def _init_state() -> None:
    state = st.session_state
    state.setdefault("lang", DEFAULT_LANG)
    state.setdefault("page", "calculator")
    for field in PRESET_FIELDS:
        state.setdefault(selection_key(field.name), field.default)


def main() -> None:
    st.set_page_config(page_title="Sorbent Cartridge Calculator", layout="wide")
    _init_state()
    state = st.session_state

    with st.sidebar:
        st.title(t("app.title"))
        st.selectbox(t("sidebar.language"), available_languages(), key="lang")
        st.radio(
            t("sidebar.navigation"),
            ["calculator", "sweep"],
            format_func=lambda x: t("nav.calculator") if x == "calculator" else t("nav.sweep"),
            key="page",
        )
        if st.button(t("sidebar.reset")):
            for field in PRESET_FIELDS:
                state[selection_key(field.name)] = field.default
                state.pop(widget_key(field.name), None)
            st.rerun()

    pages = {
        "calculator": calculator,
        "sweep": sweep,
    }

    pages[state["page"]].render(state)


if __name__ == "__main__":
    main()
