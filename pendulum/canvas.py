"""Pendulum canvas: QPainter rendering of the double compound pendulum.

Reads only the public angular state of the engine. Coordinates follow
the SVG convention used by DoublePendulum.joint_position: origin at the
pivot, y pointing down.
"""

import math
from collections import deque

from PyQt6.QtCore import Qt, QPointF
from PyQt6.QtGui import QPainter, QPen, QBrush, QColor
from PyQt6.QtWidgets import QWidget

from simulation import default_pendulum


def tip_position(pendulum):
    """Free end of the second rod, composed from the joint and ``a2``."""
    jx, jy = pendulum.joint_position()
    return (
        jx + pendulum.length * math.sin(pendulum.a2),
        jy + pendulum.length * math.cos(pendulum.a2),
    )


class PendulumCanvas(QWidget):
    """Custom widget that draws both rods, their joints and a tip trail."""

    TRAIL_LENGTH = 200
    ROD_WIDTH = 10.0
    CIRCLE_SCALE = 0.8

    def __init__(self, parent=None):
        super().__init__(parent)
        self.pendulum = default_pendulum()
        self.trail = deque(maxlen=self.TRAIL_LENGTH)
        self.setMinimumSize(400, 400)

    def set_pendulum(self, pendulum, append_trail=True):
        """Show ``pendulum`` on the next repaint."""
        self.pendulum = pendulum
        if append_trail and pendulum.is_finite():
            self.trail.append(tip_position(pendulum))
        self.update()

    def clear_trail(self):
        self.trail.clear()

    def _scale(self):
        w, h = self.width(), self.height()
        return min(w, h) * 0.45 / max(2 * abs(self.pendulum.length), 0.01)

    def _to_pixel(self, x, y):
        """Convert engine coords (y down) to pixel coords."""
        scale = self._scale()
        return self.width() / 2 + x * scale, self.height() / 2 + y * scale

    def _draw_rod(self, painter, start, end, color):
        pen = QPen(color)
        pen.setWidthF(self.ROD_WIDTH)
        pen.setCapStyle(Qt.PenCapStyle.FlatCap)
        painter.setPen(pen)
        painter.drawLine(QPointF(*start), QPointF(*end))

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        painter.fillRect(self.rect(), QColor(255, 255, 255))

        if not self.pendulum.is_finite():
            painter.setPen(QColor(200, 0, 0))
            painter.drawText(
                self.rect(), Qt.AlignmentFlag.AlignCenter,
                "Simulation diverged - press Reset",
            )
            painter.end()
            return

        pivot_px = self._to_pixel(0.0, 0.0)
        joint_px = self._to_pixel(*self.pendulum.joint_position())
        tip_px = self._to_pixel(*tip_position(self.pendulum))

        # Trail of the free end
        if len(self.trail) > 1:
            trail_list = list(self.trail)
            for i in range(1, len(trail_list)):
                alpha = int(255 * i / len(trail_list))
                pen = QPen(QColor(120, 120, 120, alpha))
                pen.setWidthF(1.5)
                painter.setPen(pen)
                painter.drawLine(QPointF(*self._to_pixel(*trail_list[i - 1])),
                                 QPointF(*self._to_pixel(*trail_list[i])))

        # Rods
        self._draw_rod(painter, pivot_px, joint_px, QColor("blue"))
        self._draw_rod(painter, joint_px, tip_px, QColor("red"))

        # Pivot and joint
        radius = self.ROD_WIDTH * self.CIRCLE_SCALE
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(QBrush(QColor("black")))
        painter.drawEllipse(QPointF(*pivot_px), radius, radius)
        painter.drawEllipse(QPointF(*joint_px), radius, radius)

        painter.end()
