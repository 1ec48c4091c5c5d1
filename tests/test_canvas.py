"""Tests for pendulum/canvas.py geometry helpers."""

import math

import pytest

pytest.importorskip("PyQt6.QtWidgets")

from pendulum.canvas import tip_position  # noqa: E402
from simulation import DoublePendulum  # noqa: E402


class TestTipPosition:

    def test_straight_down(self):
        dp = DoublePendulum(0.0, 0.0, 0.0, 0.0, 100.0, 5.0)
        assert tip_position(dp) == pytest.approx((0.0, 200.0))

    def test_composes_joint_and_second_angle(self):
        dp = DoublePendulum(math.pi / 2, 0.0, 0.0, 0.0, 100.0, 5.0)
        x, y = tip_position(dp)
        assert x == pytest.approx(100.0)
        assert y == pytest.approx(100.0)
