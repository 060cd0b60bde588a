import sys
import unittest
from datetime import timedelta
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))
sys.path.insert(0, str(ROOT / "packages" / "telemetry"))

from statusbar_renderer.tiers import (
    BATTERY_TIERS,
    LOAD_TIERS,
    MEMORY_TIERS,
    TEMPERATURE_TIERS,
    ThresholdTiers,
    Tier,
    classify,
    classify_load,
)


class ClassifierTests(unittest.TestCase):
    def test_battery_examples(self):
        self.assertEqual(classify(3, BATTERY_TIERS), Tier.URGENT)
        self.assertEqual(classify(10, BATTERY_TIERS), Tier.BAD)
        self.assertEqual(classify(20, BATTERY_TIERS), Tier.DEGRADED)
        self.assertEqual(classify(50, BATTERY_TIERS), Tier.NORMAL)

    def test_battery_boundaries_are_inclusive(self):
        self.assertEqual(BATTERY_TIERS.classify(5), Tier.URGENT)
        self.assertEqual(BATTERY_TIERS.classify(6), Tier.BAD)
        self.assertEqual(BATTERY_TIERS.classify(15), Tier.BAD)
        self.assertEqual(BATTERY_TIERS.classify(25), Tier.DEGRADED)
        self.assertEqual(BATTERY_TIERS.classify(26), Tier.NORMAL)

    def test_every_percentage_yields_one_tier(self):
        for pct in range(0, 101):
            self.assertIsInstance(BATTERY_TIERS.classify(pct), Tier)

    def test_load_boundaries_are_exclusive(self):
        self.assertEqual(LOAD_TIERS.classify(8), Tier.BAD)
        self.assertEqual(LOAD_TIERS.classify(8.01), Tier.URGENT)
        self.assertEqual(LOAD_TIERS.classify(1), Tier.NORMAL)
        self.assertEqual(LOAD_TIERS.classify(1.5), Tier.DEGRADED)

    def test_memory_has_favorable_tier(self):
        self.assertEqual(MEMORY_TIERS.classify(0.3), Tier.URGENT)
        self.assertEqual(MEMORY_TIERS.classify(0.7), Tier.BAD)
        self.assertEqual(MEMORY_TIERS.classify(1.5), Tier.DEGRADED)
        self.assertEqual(MEMORY_TIERS.classify(5), Tier.NORMAL)
        self.assertEqual(MEMORY_TIERS.classify(16), Tier.GOOD)

    def test_temperature(self):
        self.assertEqual(TEMPERATURE_TIERS.classify(60), Tier.NORMAL)
        self.assertEqual(TEMPERATURE_TIERS.classify(60.5), Tier.DEGRADED)
        self.assertEqual(TEMPERATURE_TIERS.classify(75), Tier.BAD)
        self.assertEqual(TEMPERATURE_TIERS.classify(95), Tier.URGENT)

    def test_nan_is_normal(self):
        self.assertEqual(TEMPERATURE_TIERS.classify(float("nan")), Tier.NORMAL)

    def test_custom_table(self):
        tiers = ThresholdTiers.of((">=", 100, Tier.BAD), (">=", 50, Tier.DEGRADED))
        self.assertEqual(tiers.classify(100), Tier.BAD)
        self.assertEqual(tiers.classify(50), Tier.DEGRADED)
        self.assertEqual(tiers.classify(49.9), Tier.NORMAL)

    def test_empty_table_is_normal(self):
        self.assertEqual(ThresholdTiers(()).classify(1e9), Tier.NORMAL)

    def test_rejects_unordered_boundaries(self):
        with self.assertRaises(ValueError):
            ThresholdTiers.of((">", 1, Tier.DEGRADED), (">", 8, Tier.URGENT))
        with self.assertRaises(ValueError):
            ThresholdTiers.of(("<=", 25, Tier.DEGRADED), ("<=", 5, Tier.URGENT))


class LoadWarmupTests(unittest.TestCase):
    def test_suppressed_during_warmup(self):
        self.assertEqual(classify_load(10, timedelta(minutes=5)), Tier.NORMAL)

    def test_classified_after_warmup(self):
        self.assertEqual(classify_load(10, timedelta(minutes=15)), Tier.URGENT)
        self.assertEqual(classify_load(10, timedelta(minutes=10)), Tier.URGENT)

    def test_custom_warmup(self):
        self.assertEqual(classify_load(5, timedelta(minutes=1), warmup=timedelta(0)), Tier.BAD)


if __name__ == "__main__":
    unittest.main()
