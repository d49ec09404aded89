"""End-to-end tests for the Streamlit page, run headlessly with AppTest."""

import os
import tempfile
import unittest

from streamlit.testing.v1 import AppTest

from bmi_app.config import DATA_DIR_ENV, prefs_db_path
from bmi_app.models import UnitSystem
from bmi_app.preferences import PreferenceStore

APP_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "streamlit_app.py")

METRIC = "Metric (kg / cm)"
IMPERIAL = "Imperial (lbs / in)"


class TestStreamlitApp(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self._old_home = os.environ.get(DATA_DIR_ENV)
        os.environ[DATA_DIR_ENV] = self.tmp.name

    def tearDown(self):
        if self._old_home is None:
            os.environ.pop(DATA_DIR_ENV, None)
        else:
            os.environ[DATA_DIR_ENV] = self._old_home
        self.tmp.cleanup()

    def _app(self):
        at = AppTest.from_file(APP_PATH, default_timeout=30)
        at.run()
        self.assertFalse(at.exception)
        return at

    def _calculate(self, at, weight, height):
        at.text_input(key="weight_text").input(weight)
        at.text_input(key="height_text").input(height)
        at.button[0].click()
        at.run()
        self.assertFalse(at.exception)

    def _page_text(self, at):
        return "\n".join(m.value for m in at.markdown)

    def test_starts_in_metric_without_saved_unit(self):
        at = self._app()
        self.assertEqual(at.radio[0].value, METRIC)
        self.assertEqual(at.text_input(key="weight_text").label, "Weight (kg)")
        self.assertEqual(at.text_input(key="height_text").label, "Height (cm)")
        self.assertEqual([c.value for c in at.caption], ["kg", "cm"])

    def test_starts_with_saved_unit(self):
        store = PreferenceStore(prefs_db_path())
        store.init()
        store.save(UnitSystem.IMPERIAL)

        at = self._app()
        self.assertEqual(at.radio[0].value, IMPERIAL)
        self.assertEqual(at.text_input(key="weight_text").label, "Weight (lbs)")

    def test_calculate_shows_result_and_notification(self):
        at = self._app()
        self._calculate(at, "70", "175")
        self.assertIn("22.86", self._page_text(at))
        self.assertIn("Healthy Weight", self._page_text(at))
        self.assertEqual(at.success[0].value, "Category: Healthy Weight. Keep up the good work!")

    def test_notification_is_transient(self):
        at = self._app()
        self._calculate(at, "70", "175")
        at.run()
        self.assertEqual(len(at.success), 0)
        self.assertIn("22.86", self._page_text(at))

    def test_invalid_input_shows_error_and_no_result(self):
        at = self._app()
        self._calculate(at, "-5", "170")
        self.assertEqual(at.error[0].value, "Please enter valid positive values.")
        self.assertNotIn("Your BMI:", self._page_text(at))

    def test_invalid_input_keeps_previous_result(self):
        at = self._app()
        self._calculate(at, "70", "175")
        self._calculate(at, "abc", "175")
        self.assertEqual(at.error[0].value, "Please enter valid positive values.")
        self.assertIn("22.86", self._page_text(at))

    def test_switch_unit_clears_and_persists(self):
        at = self._app()
        self._calculate(at, "70", "175")

        at.radio[0].set_value(IMPERIAL)
        at.run()
        self.assertFalse(at.exception)

        self.assertEqual(at.text_input(key="weight_text").value, "")
        self.assertEqual(at.text_input(key="height_text").value, "")
        self.assertEqual([c.value for c in at.caption], ["lbs", "in"])
        self.assertEqual(at.text_input(key="weight_text").label, "Weight (lbs)")
        self.assertNotIn("Your BMI:", self._page_text(at))

        self.assertTrue(at.session_state["pending_save"].result(timeout=5))
        self.assertEqual(PreferenceStore(prefs_db_path()).load(), UnitSystem.IMPERIAL)

    def test_imperial_calculation(self):
        at = self._app()
        at.radio[0].set_value(IMPERIAL)
        at.run()
        self._calculate(at, "90", "70")
        self.assertIn("12.91", self._page_text(at))
        self.assertIn("Underweight", at.warning[0].value)


if __name__ == "__main__":
    unittest.main()
