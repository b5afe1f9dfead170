import os
import sys
import unittest

sys.path.append(os.path.dirname(os.path.dirname(__file__)))
from algorithms import MathTools, WeightConverter


class MathToolsTestCase(unittest.TestCase):
    def test_bmi(self) -> None:
        self.assertAlmostEqual(MathTools.bmi(70, 175), 22.857142857, places=6)
        with self.assertRaises(ValueError):
            MathTools.bmi(70, 0)

    def test_bmi_rejects_degenerate_results(self) -> None:
        with self.assertRaises(ValueError):
            MathTools.bmi(70, 1e-200)
        with self.assertRaises(ValueError):
            MathTools.bmi(1e300, 1e-10)
        with self.assertRaises(ValueError):
            MathTools.bmi(70, 1e300)
        with self.assertRaises(ValueError):
            MathTools.parse_positive_real(10**400, "w")

    def test_whole_hours_truncates(self) -> None:
        self.assertEqual(MathTools.whole_hours(59), 0)
        self.assertEqual(MathTools.whole_hours(90), 1)
        self.assertEqual(MathTools.whole_hours(120), 2)

    def test_parse_int(self) -> None:
        self.assertEqual(MathTools.parse_int(" 42 ", "x"), 42)
        self.assertEqual(MathTools.parse_int(-3, "x"), -3)
        for bad in (True, 1.5, "1.5", None, "abc"):
            with self.assertRaises(ValueError):
                MathTools.parse_int(bad, "x")

    def test_parse_positive_real(self) -> None:
        self.assertEqual(MathTools.parse_positive_real("1.75", "h"), 1.75)
        for bad in (0, -1, "inf", "", False):
            with self.assertRaises(ValueError):
                MathTools.parse_positive_real(bad, "h")

    def test_weight_conversion(self) -> None:
        self.assertEqual(WeightConverter.to_kg(70, "kg"), 70)
        self.assertEqual(WeightConverter.to_kg(154.32, "lb"), 70.0)
        self.assertEqual(WeightConverter.to_cm(70, "in"), 177.8)
        self.assertEqual(WeightConverter.to_cm(175, "cm"), 175)
        with self.assertRaises(ValueError):
            WeightConverter.to_kg(70, "stone")
        with self.assertRaises(ValueError):
            WeightConverter.to_cm(70, "ft")


if __name__ == "__main__":
    unittest.main()
