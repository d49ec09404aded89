"""Streamlit frontend for the BMI Calculator.

Single-page app: unit toggle, weight/height form, notification banner and
result block.
"""

import streamlit as st

from bmi_app.components.result_display import render_measurement_input, render_notification, render_result
from bmi_app.config import configure_logging, prefs_db_path
from bmi_app.form import dismiss_notification, initial_state, submit, switch_unit, view
from bmi_app.models import UNIT_LABELS
from bmi_app.preferences import PreferenceStore

st.set_page_config(
    page_title="BMI Calculator",
    page_icon="⚖️",
    layout="centered",
)

TOGGLE_OPTIONS = {labels.toggle: unit for unit, labels in UNIT_LABELS.items()}


@st.cache_resource
def get_store(db_path: str) -> PreferenceStore:
    """One initialized preference store per database, shared across sessions."""
    configure_logging()
    store = PreferenceStore(db_path)
    store.init()
    return store


def _apply(state):
    """Replace the form state and sync the widgets to it."""
    st.session_state.form = state
    st.session_state.weight_text = state.weight_text
    st.session_state.height_text = state.height_text
    st.session_state.unit_choice = state.unit.labels.toggle


def _on_unit_change():
    unit = TOGGLE_OPTIONS[st.session_state.unit_choice]
    _apply(switch_unit(st.session_state.form, unit))
    st.session_state.pending_save = store.save_async(unit)


def _on_calculate():
    _apply(submit(
        st.session_state.form,
        st.session_state.weight_text,
        st.session_state.height_text,
    ))


# Storage is ready and the saved unit is loaded before the first render
store = get_store(prefs_db_path())

if 'form' not in st.session_state:
    _apply(initial_state(store.load()))
if 'pending_save' not in st.session_state:
    st.session_state.pending_save = None

current = view(st.session_state.form)

st.title("⚖️ BMI Calculator")

st.radio(
    "Unit system",
    list(TOGGLE_OPTIONS.keys()),
    key="unit_choice",
    horizontal=True,
    on_change=_on_unit_change,
    label_visibility="collapsed",
)

with st.form("bmi_form"):
    render_measurement_input(current.weight_label, "weight_text", current.weight_placeholder, current.weight_suffix)
    render_measurement_input(current.height_label, "height_text", current.height_placeholder, current.height_suffix)
    st.form_submit_button(
        "Calculate BMI",
        on_click=_on_calculate,
        type="primary",
        use_container_width=True,
    )

render_notification(current.notification)
render_result(current)

# Notifications last for one render
if current.notification is not None:
    st.session_state.form = dismiss_notification(st.session_state.form)
