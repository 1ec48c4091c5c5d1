"""Pendulum control panel: playback buttons and integration settings."""

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QGridLayout, QHBoxLayout,
    QLabel, QPushButton, QGroupBox, QSpinBox, QDoubleSpinBox,
)

from simulation import DEFAULT_SUBSTEPS, DEFAULT_TICK


class PendulumControls(QWidget):
    """Play/Pause, Reset and single-tick buttons plus sub-step settings."""

    def __init__(self, parent=None, substeps=DEFAULT_SUBSTEPS):
        super().__init__(parent)
        self._init_ui(substeps)

    def _init_ui(self, substeps):
        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(8, 8, 8, 8)

        # --- Integration ---
        sim_group = QGroupBox("Integration")
        sim_layout = QGridLayout()
        sim_group.setLayout(sim_layout)

        self.substeps_spin = QSpinBox()
        self.substeps_spin.setRange(1, 1000)
        self.substeps_spin.setValue(substeps)
        sim_layout.addWidget(QLabel("Sub-steps per frame"), 0, 0)
        sim_layout.addWidget(self.substeps_spin, 0, 1)

        self.tick_spin = QDoubleSpinBox()
        self.tick_spin.setRange(0.001, 10.0)
        self.tick_spin.setDecimals(3)
        self.tick_spin.setSingleStep(0.01)
        self.tick_spin.setValue(DEFAULT_TICK)
        self.tick_spin.setSuffix(" s")
        sim_layout.addWidget(QLabel("Manual tick"), 1, 0)
        sim_layout.addWidget(self.tick_spin, 1, 1)

        main_layout.addWidget(sim_group)

        # --- Playback ---
        pb_group = QGroupBox("Playback")
        pb_layout = QHBoxLayout()
        pb_group.setLayout(pb_layout)

        self.play_btn = QPushButton("Pause")
        self.reset_btn = QPushButton("Reset")
        self.tick_btn = QPushButton("Tick")

        pb_layout.addWidget(self.play_btn)
        pb_layout.addWidget(self.reset_btn)
        pb_layout.addWidget(self.tick_btn)

        main_layout.addWidget(pb_group)

        self.status_label = QLabel()
        self.status_label.setAlignment(Qt.AlignmentFlag.AlignLeft)
        self.status_label.setStyleSheet("color: #aa0000;")
        main_layout.addWidget(self.status_label)
        main_layout.addStretch()

    # -- Public accessors --

    def get_substeps(self):
        return self.substeps_spin.value()

    def get_tick(self):
        return self.tick_spin.value()

    def set_playing(self, playing):
        self.play_btn.setText("Pause" if playing else "Play")
