"""Pendulum driver: play/pause/reset/tick state machine around the engine.

Owns the single DoublePendulum instance of a running simulation. The
Qt view forwards its frame clock and button presses here; nothing in
this module depends on Qt so it can be exercised headless.
"""

import logging

from simulation import DEFAULT_SUBSTEPS, default_pendulum

logger = logging.getLogger(__name__)


class PendulumDriver:
    """Paused <-> Running, with reset and time advance on tick."""

    def __init__(self, factory=default_pendulum, substeps=DEFAULT_SUBSTEPS):
        self._factory = factory
        self.substeps = substeps
        self.system = factory()
        self.t = 0.0
        self.playing = True
        self._diverged = False

    @property
    def diverged(self):
        """True once the state has gone non-finite. Cleared by reset()."""
        return self._diverged

    def toggle_pause(self):
        self.playing = not self.playing
        logger.debug("Simulation %s at t=%.3f",
                     "resumed" if self.playing else "paused", self.t)

    def reset(self):
        """Discard the current state and start over from the factory."""
        self.system = self._factory()
        self.t = 0.0
        self.playing = True
        self._diverged = False
        logger.debug("Simulation reset")

    def tick(self, dt):
        """Advance by ``dt`` if running. Returns True if time advanced."""
        if not self.playing:
            return False
        self.step_once(dt)
        return True

    def step_once(self, dt):
        """Advance by ``dt`` whether or not the simulation is running."""
        self.system.multi_step(dt, self.substeps)
        self.t += dt
        if not self._diverged and not self.system.is_finite():
            self._diverged = True
            logger.warning(
                "Pendulum state became non-finite at t=%.3f; reset to recover",
                self.t,
            )
