"""Tests for the BMI gauge chart."""

import unittest

from bmi_app.components.charts import create_bmi_gauge, gauge_bands
from bmi_app.form import initial_state, submit, view
from bmi_app.models import BMICategory


class TestBMIGauge(unittest.TestCase):
    def test_gauge_shows_value_and_category(self):
        v = view(submit(initial_state(), "70", "175"))
        fig = create_bmi_gauge(v.result_bmi, v.result_category, v.result_color)
        indicator = fig.data[0]
        self.assertAlmostEqual(indicator.value, 22.86)
        self.assertEqual(indicator.title.text, "Healthy Weight")
        self.assertEqual(indicator.gauge.threshold.line.color, BMICategory.HEALTHY.color)

    def test_axis_extends_for_large_values(self):
        fig = create_bmi_gauge(88.89, "Obesity", BMICategory.OBESITY.color)
        self.assertEqual(fig.data[0].gauge.axis.range[1], 88.89)

    def test_bands_cover_axis_without_gaps(self):
        bands = gauge_bands(40)
        self.assertEqual(bands[0]['range'][0], 0)
        self.assertEqual(bands[-1]['range'][1], 40)
        for prev, nxt in zip(bands, bands[1:]):
            self.assertEqual(prev['range'][1], nxt['range'][0])

    def test_gap_band_uses_obesity_color(self):
        gap = gauge_bands()[2]
        self.assertEqual(gap['range'], [24.9, 25])
        self.assertEqual(gap['color'], BMICategory.OBESITY.color)


if __name__ == "__main__":
    unittest.main()
