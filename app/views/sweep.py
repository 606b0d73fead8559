from __future__ import annotations

import pandas as pd
import streamlit as st

from app.display import format_preset
from app.i18n import t
from app.ui_components import band_color
from sorbent_core.classification import BANDS
from sorbent_core.presets import SELECTABLE_FIELDS
from sorbent_core.sweep import band_counts, best_combination, sweep_frame

_ANY = "*"


@st.cache_data(show_spinner=False)
def _cached_sweep(fixed_items: tuple[tuple[str, float], ...]) -> pd.DataFrame:
    return sweep_frame(dict(fixed_items))


def _band_style(band: str) -> str:
    return f"color: {band_color(band)}; font-weight: 600;"


def render(state: dict) -> None:
    st.header(t("sweep.header"))
    st.caption(t("sweep.caption"))

    fixed: dict[str, float] = {}
    with st.expander(t("sweep.pin_fields"), expanded=False):
        cols = st.columns(2)
        for i, field in enumerate(SELECTABLE_FIELDS):
            with cols[i % 2]:
                choice = st.selectbox(
                    t(field.label_key),
                    options=[_ANY, *field.values],
                    format_func=lambda v: t("sweep.any") if v == _ANY else format_preset(v),
                    key=f"sweep_pin_{field.name}",
                )
            if choice != _ANY:
                fixed[field.name] = choice

    frame = _cached_sweep(tuple(sorted(fixed.items())))
    st.caption(t("sweep.rows", n=len(frame)))

    counts = band_counts(frame)
    metric_cols = st.columns(len(BANDS))
    for col, band in zip(metric_cols, BANDS):
        col.metric(t(f"band.{band}"), counts[band])

    best = best_combination(frame)
    st.subheader(t("sweep.best"))
    st.json({k: (v.item() if hasattr(v, "item") else v) for k, v in best.items()})

    top_n = st.number_input(t("sweep.top_n"), min_value=1, max_value=len(frame), value=min(50, len(frame)))
    view = frame.sort_values("weekly_cartridge_swaps", kind="stable").head(int(top_n))
    st.dataframe(
        view.style.map(_band_style, subset=["band"]),
        use_container_width=True,
        hide_index=True,
    )
