"""BMI calculation engine.

Uses the standard Body Mass Index formulas:
- Metric:   BMI = weight(kg) / height(m)^2, with height entered in cm
- Imperial: BMI = weight(lbs) / height(in)^2 × 703

Categories follow the adult cut-offs 18.5 / 24.9 / 25 / 29.9. The Obesity
branch is a fallback, so values in [24.9, 25) are reported as Obesity too.
"""

import logging
import math
from decimal import ROUND_HALF_UP, Decimal

from bmi_app.config import (
    BMI_DECIMAL_PLACES,
    CM_PER_METER,
    HEALTHY_RANGE,
    IMPERIAL_BMI_FACTOR,
    INVALID_INPUT_MESSAGE,
    OVERWEIGHT_RANGE,
    UNDERWEIGHT_BELOW,
)
from bmi_app.models import BMICategory, BMIResult, Measurement, UnitSystem

logger = logging.getLogger(__name__)


class InvalidInputError(ValueError):
    """Weight or height is empty, non-numeric, non-finite, zero or negative."""

    def __init__(self, message: str = INVALID_INPUT_MESSAGE):
        super().__init__(message)
        self.message = message


def _parse_positive(text) -> float:
    if text is None:
        raise InvalidInputError()
    text = str(text).strip()
    # float() also takes digit separators, which are not valid form input
    if "_" in text:
        raise InvalidInputError()
    try:
        value = float(text)
    except ValueError:
        raise InvalidInputError() from None
    if not math.isfinite(value) or value <= 0:
        raise InvalidInputError()
    return value


def parse_measurement(weight_text: str, height_text: str, unit: UnitSystem) -> Measurement:
    """Parse the two form fields into a Measurement.

    Raises InvalidInputError if either field is not a finite positive number.
    """
    return Measurement(
        weight=_parse_positive(weight_text),
        height=_parse_positive(height_text),
        unit=unit,
    )


def calculate_bmi(measurement: Measurement) -> float:
    """Calculate the unrounded BMI for a measurement."""
    if measurement.unit == UnitSystem.METRIC:
        height_m = measurement.height / CM_PER_METER
        return measurement.weight / (height_m * height_m)
    return (measurement.weight / (measurement.height * measurement.height)) * IMPERIAL_BMI_FACTOR


def classify_bmi(bmi: float) -> BMICategory:
    """Map a BMI value to its category."""
    if bmi < UNDERWEIGHT_BELOW:
        return BMICategory.UNDERWEIGHT
    elif HEALTHY_RANGE[0] <= bmi < HEALTHY_RANGE[1]:
        return BMICategory.HEALTHY
    elif OVERWEIGHT_RANGE[0] <= bmi < OVERWEIGHT_RANGE[1]:
        return BMICategory.OVERWEIGHT
    else:
        return BMICategory.OBESITY


def round_bmi(bmi: float) -> float:
    """Round to 2 decimal places, halves away from zero."""
    quantum = Decimal(1).scaleb(-BMI_DECIMAL_PLACES)
    return float(Decimal(bmi).quantize(quantum, rounding=ROUND_HALF_UP))


def compute_bmi(weight_text: str, height_text: str, unit: UnitSystem) -> BMIResult:
    """Validate the raw form fields and compute a categorized result.

    Steps:
    1. Parse both fields as finite positive numbers
    2. Apply the metric or imperial formula; a non-finite BMI is invalid input
    3. Classify the unrounded value
    4. Round the value for display
    """
    measurement = parse_measurement(weight_text, height_text, unit)
    try:
        bmi = calculate_bmi(measurement)
    except ZeroDivisionError:
        # height so small that its square underflows to zero
        raise InvalidInputError() from None
    if not math.isfinite(bmi):
        raise InvalidInputError()
    category = classify_bmi(bmi)
    result = BMIResult(value=round_bmi(bmi), category=category, message=category.message)
    logger.debug("BMI %.4f (%s) -> %s", bmi, unit.value, category.value)
    return result


def format_result(result: BMIResult) -> str:
    """Notification text for a result."""
    return f"Category: {result.category.value}. {result.message}"


def format_report(result: BMIResult, unit: UnitSystem) -> str:
    """Format a result for terminal display."""
    lines = [
        f"Units:     {unit.labels.toggle}",
        f"BMI:       {result.value:.2f}",
        f"Category:  {result.category.value}",
        f"Advice:    {result.message}",
    ]
    return "\n".join(lines)
