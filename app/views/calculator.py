from __future__ import annotations

from typing import Any

import streamlit as st

from app.display import GROUP_FINAL, GROUP_INTERMEDIATE, format_preset, format_value, outputs_in_group
from app.i18n import t
from app.ui_components import band_chip, display_value
from app.validation import validate_selection
from sorbent_core.engine import DegenerateResultError, evaluate_selection
from sorbent_core.presets import PRESET_FIELDS, SELECTABLE_FIELDS


def selection_key(name: str) -> str:
    return f"sel_{name}"


def widget_key(name: str) -> str:
    return f"w_{name}"


def current_selection(state: Any) -> dict[str, float]:
    return {f.name: state.get(selection_key(f.name), f.default) for f in PRESET_FIELDS}


def _render_controls(state: Any) -> None:
    st.subheader(t("calculator.controls"))
    for field in SELECTABLE_FIELDS:
        label = t(field.label_key)
        if field.unit:
            label = f"{label}, {field.unit}"
        # Widget state is dropped while another page is shown; the selection key is not.
        if widget_key(field.name) not in state:
            state[widget_key(field.name)] = state.get(selection_key(field.name), field.default)
        state[selection_key(field.name)] = st.radio(
            label,
            options=list(field.values),
            format_func=format_preset,
            horizontal=True,
            key=widget_key(field.name),
            help=t(field.help_key),
        )


def _render_group(title: str, group: str, values: dict[str, float], band: str) -> None:
    st.subheader(title)
    for out in outputs_in_group(group):
        text = format_value(values[out.name], out.decimals)
        if out.headline:
            band_chip(t(out.label_key), text, band, unit=out.unit, help_text=t(out.help_key), t=t)
        else:
            display_value(t(out.label_key), text, out.unit, t(out.help_key))


def render(state: dict) -> None:
    st.header(t("calculator.header"))
    st.caption(t("calculator.caption"))

    cols = st.columns([1, 2], gap="large")
    with cols[0]:
        _render_controls(state)

    selection = current_selection(state)
    with cols[1]:
        res = validate_selection(selection, translator=t)
        for w in res.warnings:
            st.warning(w)
        if res.has_errors:
            st.error(t("calculator.invalid_selection"))
            for e in res.errors:
                st.error(e)
            return

        try:
            evaluation = evaluate_selection(selection)
        except DegenerateResultError as exc:
            st.error(t("errors.degenerate", field=exc.field))
            return

        values = evaluation.outputs.as_dict()
        _render_group(t("calculator.intermediate"), GROUP_INTERMEDIATE, values, evaluation.band)
        _render_group(t("calculator.final"), GROUP_FINAL, values, evaluation.band)
        st.caption(t("calculator.lower_is_better"))
