from __future__ import annotations

from typing import Callable

import streamlit as st

from sorbent_core.classification import BAND_BAD, BAND_GOOD, BAND_GREAT, BAND_OKAY

_BAND_KEYS = {
    BAND_BAD: "band.bad",
    BAND_OKAY: "band.okay",
    BAND_GOOD: "band.good",
    BAND_GREAT: "band.great",
}


def band_color(band: str) -> str:
    """
    Accent color for a swap band.
    Colors are chosen to be readable in both Streamlit light/dark themes.
    """
    b = (band or "").lower().strip()
    if b == BAND_BAD:
        return "#e53e3e"
    if b == BAND_OKAY:
        return "#dd6b20"
    if b == BAND_GOOD:
        return "#38a169"
    if b == BAND_GREAT:
        return "#3182ce"
    return "#374151"


def display_value(label: str, value_text: str, unit: str = "", help_text: str | None = None) -> None:
    value = f"{value_text} {unit}".strip()
    st.metric(label, value, help=help_text)


def band_chip(
    label: str,
    value_text: str,
    band: str,
    *,
    unit: str = "",
    help_text: str | None = None,
    t: Callable[..., str] | None = None,
) -> None:
    """
    Headline output with a colored left border and band pill.
    When t is provided, the band name is localized.
    """
    color = band_color(band)
    band_label = t(_BAND_KEYS.get(band, "band.unknown")) if t else band
    title = (help_text or "").replace('"', "'")
    st.markdown(
        f"""
        <div title="{title}" style="
          border:1px solid #e0e0e0;
          border-left:5px solid {color};
          border-radius:4px;
          padding:0.75rem;
          display:flex;
          justify-content:space-between;
          align-items:center;
        ">
          <span>{label}</span>
          <span>
            <span style="font-size:1.5rem;font-weight:bold;color:{color};">{value_text}</span>
            <span style="margin-left:0.5rem;font-size:0.9rem;color:#777;">{unit}</span>
            <span style="
              display:inline-block;
              margin-left:0.75rem;
              padding:0.15rem 0.55rem;
              border-radius:999px;
              background:{color};
              color:white;
              font-weight:600;
              font-size:0.85rem;
              line-height:1.4;
              white-space:nowrap;
            ">{band_label}</span>
          </span>
        </div>
        """,
        unsafe_allow_html=True,
    )
