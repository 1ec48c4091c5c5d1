"""Pendulum view: wires the frame clock, driver, canvas, and controls.

The QTimer is the only time source. Each timeout advances the driver by
one frame's worth of simulated time; the canvas then reads the new
angles back from the engine.
"""

import logging

from PyQt6.QtCore import Qt, QTimer
from PyQt6.QtWidgets import QWidget, QHBoxLayout, QSplitter, QLabel

from simulation import total_energy
from pendulum.canvas import PendulumCanvas
from pendulum.controls import PendulumControls
from pendulum.driver import PendulumDriver

logger = logging.getLogger(__name__)


class PendulumView(QWidget):
    """Complete pendulum mode: canvas + controls + simulation wiring."""

    FPS = 60

    def __init__(self, driver=None, parent=None):
        super().__init__(parent)

        self.driver = driver if driver is not None else PendulumDriver()

        self.canvas = PendulumCanvas()
        self.controls = PendulumControls(substeps=self.driver.substeps)

        splitter = QSplitter(Qt.Orientation.Horizontal)
        splitter.addWidget(self.canvas)
        splitter.addWidget(self.controls)
        splitter.setStretchFactor(0, 3)
        splitter.setStretchFactor(1, 1)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(splitter)

        # Status bar labels (main window places these in a real status bar)
        self.time_label = QLabel()
        self.energy_label = QLabel()
        self.drift_label = QLabel()

        self.initial_energy = total_energy(self.driver.system)

        # Timer
        self.timer = QTimer()
        self.timer.setInterval(int(1000 / self.FPS))
        self.timer.timeout.connect(self._on_timer)

        # Wire signals
        self.controls.play_btn.clicked.connect(self._toggle_play)
        self.controls.reset_btn.clicked.connect(self._reset)
        self.controls.tick_btn.clicked.connect(self._on_tick_clicked)
        self.controls.substeps_spin.valueChanged.connect(self._on_substeps_changed)

        self._update_display(append_trail=False)
        self._sync_playing()

    # -- Playback --

    def _sync_playing(self):
        self.controls.set_playing(self.driver.playing)
        if self.driver.playing:
            self.timer.start()
        else:
            self.timer.stop()

    def _toggle_play(self):
        self.driver.toggle_pause()
        self._sync_playing()

    def _reset(self):
        self.driver.reset()
        self.initial_energy = total_energy(self.driver.system)
        self.canvas.clear_trail()
        self.controls.status_label.clear()
        self._update_display(append_trail=False)
        self._sync_playing()

    def _on_timer(self):
        if self.driver.tick(1.0 / self.FPS):
            self._update_display()

    def _on_tick_clicked(self):
        self.driver.step_once(self.controls.get_tick())
        self._update_display()

    def _on_substeps_changed(self, value):
        self.driver.substeps = value
        logger.info("Using %d sub-steps per frame", value)

    # -- Display --

    def _update_display(self, append_trail=True):
        system = self.driver.system
        self.canvas.set_pendulum(system, append_trail=append_trail)

        self.time_label.setText(f"  t = {self.driver.t:.3f} s  ")
        if self.driver.diverged:
            self.energy_label.setText("  E = nan  ")
            self.drift_label.setText("")
            self.controls.status_label.setText("Diverged: press Reset")
            return

        energy = total_energy(system)
        drift = energy - self.initial_energy
        self.energy_label.setText(f"  E = {energy:.4f} J  ")
        self.drift_label.setText(f"  \u0394E = {drift:+.6f} J  ")
