"""Data models for the BMI calculator."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from bmi_app.config import CATEGORY_COLORS, CATEGORY_MESSAGES, CATEGORY_NOTIFICATION_LEVELS


class UnitSystem(str, Enum):
    """Input unit convention. The value is the persisted string."""
    METRIC = "metric"
    IMPERIAL = "imperial"

    @classmethod
    def parse(cls, text: Optional[str]) -> "UnitSystem":
        """Map a stored string to a unit system; anything but "imperial" is metric."""
        return cls.IMPERIAL if text == cls.IMPERIAL.value else cls.METRIC

    @property
    def labels(self) -> "UnitLabels":
        return UNIT_LABELS[self]


@dataclass(frozen=True)
class UnitLabels:
    """Display strings for one unit system."""
    toggle: str
    weight_label: str
    height_label: str
    weight_placeholder: str
    height_placeholder: str
    weight_suffix: str
    height_suffix: str


UNIT_LABELS = {
    UnitSystem.METRIC: UnitLabels(
        toggle="Metric (kg / cm)",
        weight_label="Weight (kg)",
        height_label="Height (cm)",
        weight_placeholder="e.g., 75.0",
        height_placeholder="e.g., 175.0",
        weight_suffix="kg",
        height_suffix="cm",
    ),
    UnitSystem.IMPERIAL: UnitLabels(
        toggle="Imperial (lbs / in)",
        weight_label="Weight (lbs)",
        height_label="Height (in)",
        weight_placeholder="e.g., 165.0",
        height_placeholder="e.g., 68.0",
        weight_suffix="lbs",
        height_suffix="in",
    ),
}


class BMICategory(str, Enum):
    """Weight category derived from a BMI value."""
    UNDERWEIGHT = "Underweight"
    HEALTHY = "Healthy Weight"
    OVERWEIGHT = "Overweight"
    OBESITY = "Obesity"

    @property
    def message(self) -> str:
        return CATEGORY_MESSAGES[self.value]

    @property
    def color(self) -> str:
        return CATEGORY_COLORS[self.value]

    @property
    def notification_level(self) -> str:
        return CATEGORY_NOTIFICATION_LEVELS[self.value]


@dataclass(frozen=True)
class Measurement:
    """A validated weight/height pair for one calculation."""
    weight: float
    height: float
    unit: UnitSystem


@dataclass(frozen=True)
class BMIResult:
    """Outcome of one calculation."""
    value: float  # rounded to 2 decimal places
    category: BMICategory
    message: str


@dataclass(frozen=True)
class Notification:
    """Transient banner shown after an event."""
    message: str
    level: str  # success, warning, error
