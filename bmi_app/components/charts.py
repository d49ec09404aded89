"""Chart components using Plotly for data visualization."""

import plotly.graph_objects as go

from bmi_app.config import CATEGORY_COLORS, GAUGE_MAX_BMI, HEALTHY_RANGE, OVERWEIGHT_RANGE, UNDERWEIGHT_BELOW


def gauge_bands(max_bmi: float = GAUGE_MAX_BMI) -> list:
    """Colored category bands for the BMI gauge axis.

    The [24.9, 25) gap is drawn in the Obesity color, as it is classified.
    """
    return [
        {'range': [0, UNDERWEIGHT_BELOW], 'color': CATEGORY_COLORS["Underweight"]},
        {'range': list(HEALTHY_RANGE), 'color': CATEGORY_COLORS["Healthy Weight"]},
        {'range': [HEALTHY_RANGE[1], OVERWEIGHT_RANGE[0]], 'color': CATEGORY_COLORS["Obesity"]},
        {'range': list(OVERWEIGHT_RANGE), 'color': CATEGORY_COLORS["Overweight"]},
        {'range': [OVERWEIGHT_RANGE[1], max_bmi], 'color': CATEGORY_COLORS["Obesity"]},
    ]


def create_bmi_gauge(bmi: float, category: str, color: str, max_bmi: float = GAUGE_MAX_BMI):
    """Create gauge chart placing a BMI value among the category bands.

    Args:
        bmi: Rounded BMI value
        category: Category name shown as the title
        color: Category color for the marker line
        max_bmi: Upper end of the axis, extended when the value exceeds it

    Returns:
        Plotly figure
    """
    axis_max = max(max_bmi, bmi)

    fig = go.Figure(go.Indicator(
        mode="gauge+number",
        value=bmi,
        number={'valueformat': '.2f'},
        title={'text': category},
        gauge={
            'axis': {'range': [0, axis_max]},
            'bar': {'color': "black", 'thickness': 0.25},
            'steps': gauge_bands(axis_max),
            'threshold': {
                'line': {'color': color, 'width': 4},
                'thickness': 0.75,
                'value': bmi
            }
        }
    ))

    fig.update_layout(height=260, margin={'t': 60, 'b': 10, 'l': 30, 'r': 30})

    return fig
