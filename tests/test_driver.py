"""Tests for pendulum/driver.py: pause, reset, tick, divergence reporting."""

import logging
import math

import pytest

from pendulum.driver import PendulumDriver
from simulation import DEFAULT_SUBSTEPS, DoublePendulum, default_pendulum


def _degenerate():
    return DoublePendulum(math.pi / 4, 0.0, 0.0, 0.0, 100.0, 0.0)


class TestInitialState:

    def test_starts_running_at_zero(self):
        driver = PendulumDriver()
        assert driver.playing
        assert driver.t == 0.0
        assert driver.substeps == DEFAULT_SUBSTEPS
        assert driver.system == default_pendulum()
        assert not driver.diverged


class TestTick:

    def test_tick_matches_multi_step(self):
        driver = PendulumDriver(substeps=5)
        expected = default_pendulum()
        for _ in range(10):
            assert driver.tick(0.1)
            expected.multi_step(0.1, 5)
        assert driver.system == expected
        assert driver.t == pytest.approx(1.0)

    def test_paused_tick_is_noop(self):
        driver = PendulumDriver()
        driver.tick(0.1)
        driver.toggle_pause()
        before = driver.system.state_vector()
        t_before = driver.t

        assert not driver.tick(0.1)
        assert driver.system.state_vector() == before
        assert driver.t == t_before

    def test_step_once_ignores_pause(self):
        driver = PendulumDriver()
        driver.toggle_pause()
        driver.step_once(0.1)
        driver.step_once(0.1)
        assert driver.t == pytest.approx(0.2)
        assert driver.system != default_pendulum()

    def test_substeps_change_applies_to_next_tick(self):
        driver = PendulumDriver(substeps=1)
        driver.substeps = 20
        driver.tick(0.5)

        expected = default_pendulum()
        expected.multi_step(0.5, 20)
        assert driver.system == expected


class TestTogglePause:

    def test_toggle_round_trip(self):
        driver = PendulumDriver()
        driver.toggle_pause()
        assert not driver.playing
        driver.toggle_pause()
        assert driver.playing


class TestReset:

    def test_reset_rebuilds_from_factory(self):
        driver = PendulumDriver()
        for _ in range(30):
            driver.tick(0.1)
        driver.toggle_pause()

        old_system = driver.system
        driver.reset()

        assert driver.system is not old_system
        assert driver.system == default_pendulum()
        assert driver.t == 0.0
        assert driver.playing

    def test_reset_replays_same_trajectory(self):
        driver = PendulumDriver()
        first = []
        for _ in range(10):
            driver.tick(0.1)
            first.append(driver.system.state_vector())

        driver.reset()
        for expected in first:
            driver.tick(0.1)
            assert driver.system.state_vector() == expected

    def test_custom_factory(self):
        driver = PendulumDriver(
            factory=lambda: DoublePendulum.initial(angle=1.0, length=2.0, mass=1.0),
        )
        driver.tick(0.1)
        driver.reset()
        assert driver.system.a1 == 1.0
        assert driver.system.length == 2.0


class TestDivergence:

    def test_warns_once_when_state_goes_non_finite(self, caplog):
        driver = PendulumDriver(factory=_degenerate)
        with caplog.at_level(logging.WARNING, logger="pendulum.driver"):
            driver.tick(0.1)
            driver.tick(0.1)

        assert driver.diverged
        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert "non-finite" in warnings[0].getMessage()

    def test_reset_clears_divergence(self):
        driver = PendulumDriver(factory=_degenerate)
        driver.tick(0.1)
        assert driver.diverged
        driver.reset()
        assert not driver.diverged
        assert driver.system.is_finite()

    def test_healthy_run_never_diverges(self):
        driver = PendulumDriver()
        for _ in range(600):
            driver.tick(1 / 60)
        assert not driver.diverged
