"""Application configuration and constants."""

import logging
import os

# Storage
DATA_DIR_ENV = "BMI_CALCULATOR_HOME"
DEFAULT_DATA_DIR = os.path.join(os.path.expanduser("~"), ".bmi_calculator")
DB_FILENAME = "preferences.db"

# Persisted preference
UNIT_SYSTEM_KEY = "bmiUnitSystem"
DEFAULT_UNIT_SYSTEM = "metric"

# BMI formula
CM_PER_METER = 100
IMPERIAL_BMI_FACTOR = 703
BMI_DECIMAL_PLACES = 2

# Classification thresholds, checked in this order. Values in [24.9, 25)
# and >= 29.9 fall through to the last category.
UNDERWEIGHT_BELOW = 18.5
HEALTHY_RANGE = (18.5, 24.9)
OVERWEIGHT_RANGE = (25, 29.9)

# Advisory message and display color per category
CATEGORY_MESSAGES = {
    "Underweight": "Please consult a healthcare provider.",
    "Healthy Weight": "Keep up the good work!",
    "Overweight": "Lifestyle adjustments may be beneficial.",
    "Obesity": "It is highly recommended to speak with a doctor.",
}

CATEGORY_COLORS = {
    "Underweight": "#F9A825",
    "Healthy Weight": "#43A047",
    "Overweight": "#FB8C00",
    "Obesity": "#E53935",
}

# Banner level per category (maps onto st.success / st.warning / st.error)
CATEGORY_NOTIFICATION_LEVELS = {
    "Underweight": "warning",
    "Healthy Weight": "success",
    "Overweight": "warning",
    "Obesity": "error",
}

INVALID_INPUT_MESSAGE = "Please enter valid positive values."

# Gauge axis upper bound
GAUGE_MAX_BMI = 40

# Logging
LOG_LEVEL_ENV = "BMI_CALCULATOR_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def data_dir() -> str:
    """Directory holding the preference database."""
    return os.environ.get(DATA_DIR_ENV) or DEFAULT_DATA_DIR


def prefs_db_path() -> str:
    """Path of the SQLite preference database."""
    return os.path.join(data_dir(), DB_FILENAME)


def configure_logging() -> None:
    """Set up root logging once for the CLI and the Streamlit app."""
    level = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    logging.basicConfig(level=getattr(logging, level, logging.WARNING), format=LOG_FORMAT)
