"""App window: hosts the pendulum view and its status bar."""

import logging

from PyQt6.QtWidgets import QMainWindow, QStatusBar

from pendulum.view import PendulumView

logger = logging.getLogger(__name__)


class AppWindow(QMainWindow):
    """Top-level window for a single running double pendulum."""

    def __init__(self, driver=None):
        super().__init__()
        self.setWindowTitle("Double Pendulum")
        self.resize(900, 600)

        self.pendulum_view = PendulumView(driver)
        self.setCentralWidget(self.pendulum_view)

        # --- Status bar ---
        self._status_bar = QStatusBar()
        self.setStatusBar(self._status_bar)
        self._status_bar.addWidget(self.pendulum_view.time_label)
        self._status_bar.addWidget(self.pendulum_view.energy_label)
        self._status_bar.addWidget(self.pendulum_view.drift_label)

        system = self.pendulum_view.driver.system
        logger.info(
            "Started with a1=%.3f, a2=%.3f, length=%.1f, mass=%.1f",
            system.a1, system.a2, system.length, system.mass,
        )
