from __future__ import annotations

import math
import unittest

import numpy as np

import shirorand
from shirorand.core.bits import MASK64
from shirorand.generator import Generator


class ScriptedEngine:
    """Engine replaying a fixed list of raw 64-bit draws."""

    VARIANT = "scripted"

    def __init__(self, draws: list[int]) -> None:
        self._draws = list(draws)

    def next(self) -> int:
        return self._draws.pop(0)

    def reseed(self, value: int) -> None:
        raise AssertionError("scripted engine cannot be reseeded")

    @property
    def remaining(self) -> int:
        return len(self._draws)


class ExponentialTest(unittest.TestCase):
    def test_never_negative(self) -> None:
        rng = shirorand.new()
        for _ in range(100_000):
            value = rng.exponential()
            self.assertGreaterEqual(value, 0.0)
            self.assertTrue(math.isfinite(value))

    def test_sample_mean_close_to_one(self) -> None:
        rng = shirorand.new()
        rng.reseed(31337)
        samples = np.fromiter((rng.exponential() for _ in range(1_000_000)), dtype=float, count=1_000_000)
        self.assertAlmostEqual(float(samples.mean()), 1.0, delta=0.01)


class NormalTest(unittest.TestCase):
    def setUp(self) -> None:
        self.rng = shirorand.new()
        self.rng.reseed(8675309)

    def _collect(self, pairs: int, draw) -> np.ndarray:
        values = np.empty(pairs * 2, dtype=float)
        for index in range(pairs):
            values[2 * index], values[2 * index + 1] = draw()
        return values

    def test_standard_moments(self) -> None:
        samples = self._collect(500_000, self.rng.normal)
        self.assertAlmostEqual(float(samples.mean()), 0.0, delta=0.01)
        self.assertAlmostEqual(float(samples.std()), 1.0, delta=0.01)

    def test_outputs_are_finite_pairs(self) -> None:
        for _ in range(10_000):
            x, y = self.rng.normal()
            self.assertTrue(math.isfinite(x) and math.isfinite(y))

    def test_normal_dist_rescales_both_outputs(self) -> None:
        self.rng.reseed(3)
        x, y = self.rng.normal()
        self.rng.reseed(3)
        scaled_x, scaled_y = self.rng.normal_dist(10.0, 2.5)
        self.assertAlmostEqual(scaled_x, x * 2.5 + 10.0)
        self.assertAlmostEqual(scaled_y, y * 2.5 + 10.0)

    def test_normal_dist_moments(self) -> None:
        samples = self._collect(50_000, lambda: self.rng.normal_dist(-4.0, 3.0))
        self.assertAlmostEqual(float(samples.mean()), -4.0, delta=0.1)
        self.assertAlmostEqual(float(samples.std()), 3.0, delta=0.1)


class SamplerEdgeCaseTest(unittest.TestCase):
    # bits(54) of 1 << 63 is 2**53, which maps to 0.0; 3 << 62 maps to 0.5.
    def test_normal_skips_zero_draws_and_zero_pair(self) -> None:
        engine = ScriptedEngine([0, 1 << 63, 1 << 63, 3 << 62, 3 << 62])
        x, y = Generator(engine).normal()
        expected = 0.5 * math.sqrt(-2.0 * math.log(0.5) / 0.5)
        self.assertEqual((x, y), (expected, expected))
        self.assertAlmostEqual(x, 0.8325546111576977)
        self.assertEqual(engine.remaining, 0)

    def test_normal_redraws_pair_outside_unit_circle(self) -> None:
        engine = ScriptedEngine([MASK64, MASK64, 3 << 62, 3 << 62])
        x, y = Generator(engine).normal()
        self.assertEqual(engine.remaining, 0)
        self.assertAlmostEqual(x, 0.8325546111576977)
        self.assertAlmostEqual(y, 0.8325546111576977)

    def test_normal_accepts_negative_half(self) -> None:
        # 1 << 62 maps to -0.5.
        engine = ScriptedEngine([1 << 62, 3 << 62])
        x, y = Generator(engine).normal()
        self.assertAlmostEqual(x, -0.8325546111576977)
        self.assertAlmostEqual(y, 0.8325546111576977)

    def test_exponential_zero_draw_is_finite(self) -> None:
        value = Generator(ScriptedEngine([0])).exponential()
        self.assertTrue(math.isfinite(value))
        self.assertAlmostEqual(value, 53 * math.log(2.0))

    def test_exponential_all_ones_draw_is_positive_zero(self) -> None:
        value = Generator(ScriptedEngine([MASK64])).exponential()
        self.assertEqual(value, 0.0)
        self.assertEqual(math.copysign(1.0, value), 1.0)


if __name__ == "__main__":
    unittest.main()
