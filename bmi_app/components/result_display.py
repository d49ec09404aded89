"""Result and notification display components for the calculator page."""

import streamlit as st

from bmi_app.components.charts import create_bmi_gauge
from bmi_app.form import FormView
from bmi_app.models import Notification


def render_notification(notification: Notification):
    """Render the transient banner with the color of its level.

    Color coding:
        - Green (success): Healthy Weight
        - Orange (warning): Underweight, Overweight
        - Red (error): Obesity, invalid input
    """
    if notification is None:
        return
    if notification.level == "success":
        st.success(notification.message)
    elif notification.level == "warning":
        st.warning(notification.message)
    else:
        st.error(notification.message)


def render_measurement_input(label: str, key: str, placeholder: str, suffix: str):
    """Text input with its unit suffix shown beside it."""
    input_col, suffix_col = st.columns([6, 1], vertical_alignment="bottom")
    with input_col:
        st.text_input(label, key=key, placeholder=placeholder)
    with suffix_col:
        st.caption(suffix)


def render_result(view: FormView):
    """Render the BMI value and category, colored by category, with a gauge.

    Args:
        view: FormView of the current state
    """
    if view.result_value is None:
        return

    st.divider()
    st.markdown("Your BMI:")
    st.markdown(
        f"<div style='font-size: 48px; font-weight: bold; color: {view.result_color}'>"
        f"{view.result_value}</div>"
        f"<div style='font-size: 24px; font-weight: 600; color: {view.result_color}'>"
        f"{view.result_category}</div>",
        unsafe_allow_html=True,
    )

    fig = create_bmi_gauge(view.result_bmi, view.result_category, view.result_color)
    st.plotly_chart(fig, use_container_width=True)
