"""Form state and event handling for the calculator screen.

The screen state is an immutable FormState. Each event (unit toggle,
Calculate) maps the current state to a new one, and ``view`` turns a state
into everything the page needs to draw.
"""

from dataclasses import dataclass, replace
from typing import Optional

from bmi_app.bmi_calculator import InvalidInputError, compute_bmi, format_result
from bmi_app.models import BMIResult, Notification, UnitSystem


@dataclass(frozen=True)
class FormState:
    """Everything shown on the calculator screen."""
    unit: UnitSystem = UnitSystem.METRIC
    weight_text: str = ""
    height_text: str = ""
    result: Optional[BMIResult] = None
    notification: Optional[Notification] = None


@dataclass(frozen=True)
class FormView:
    """Render-ready strings for one FormState."""
    unit: UnitSystem
    toggle_label: str
    weight_label: str
    height_label: str
    weight_placeholder: str
    height_placeholder: str
    weight_suffix: str
    height_suffix: str
    weight_text: str
    height_text: str
    result_bmi: Optional[float] = None
    result_value: Optional[str] = None
    result_category: Optional[str] = None
    result_color: Optional[str] = None
    notification: Optional[Notification] = None


def initial_state(unit: UnitSystem = UnitSystem.METRIC) -> FormState:
    return FormState(unit=unit)


def switch_unit(state: FormState, unit: UnitSystem) -> FormState:
    """Select a unit system.

    Entered values are discarded, not converted, and any result is cleared.
    """
    return FormState(unit=unit)


def submit(state: FormState, weight_text: str, height_text: str) -> FormState:
    """Handle the Calculate action.

    On invalid input the previous result stays on screen and an error
    notification is shown instead.
    """
    state = replace(state, weight_text=weight_text, height_text=height_text)
    try:
        result = compute_bmi(weight_text, height_text, state.unit)
    except InvalidInputError as e:
        return replace(state, notification=Notification(e.message, "error"))

    notification = Notification(format_result(result), result.category.notification_level)
    return replace(state, result=result, notification=notification)


def dismiss_notification(state: FormState) -> FormState:
    return replace(state, notification=None)


def view(state: FormState) -> FormView:
    """Build the render-ready view of a state."""
    labels = state.unit.labels
    result = state.result
    return FormView(
        unit=state.unit,
        toggle_label=labels.toggle,
        weight_label=labels.weight_label,
        height_label=labels.height_label,
        weight_placeholder=labels.weight_placeholder,
        height_placeholder=labels.height_placeholder,
        weight_suffix=labels.weight_suffix,
        height_suffix=labels.height_suffix,
        weight_text=state.weight_text,
        height_text=state.height_text,
        result_bmi=result.value if result else None,
        result_value=f"{result.value:.2f}" if result else None,
        result_category=result.category.value if result else None,
        result_color=result.category.color if result else None,
        notification=state.notification,
    )
