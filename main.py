"""Entry point for the Double Pendulum application."""

import argparse
import functools
import logging
import sys

from PyQt6.QtWidgets import QApplication

from app_window import AppWindow
from pendulum.driver import PendulumDriver
from simulation import (
    DEFAULT_ANGLE, DEFAULT_SUBSTEPS, ROD_LENGTH, ROD_MASS, DoublePendulum,
)


def _positive_int(text):
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return value


def build_parser():
    parser = argparse.ArgumentParser(
        description="Animate a double compound pendulum.",
    )
    parser.add_argument(
        "--substeps",
        type=_positive_int,
        default=DEFAULT_SUBSTEPS,
        help=f"Integration sub-steps per frame (default: {DEFAULT_SUBSTEPS})",
    )
    parser.add_argument(
        "--angle",
        type=float,
        default=DEFAULT_ANGLE,
        help="Initial angle of the first rod in radians (default: pi/4)",
    )
    parser.add_argument(
        "--length",
        type=float,
        default=ROD_LENGTH,
        help=f"Length of both rods (default: {ROD_LENGTH})",
    )
    parser.add_argument(
        "--mass",
        type=float,
        default=ROD_MASS,
        help=f"Mass of both rods (default: {ROD_MASS})",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: INFO)",
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    factory = functools.partial(
        DoublePendulum.initial,
        angle=args.angle, length=args.length, mass=args.mass,
    )
    driver = PendulumDriver(factory=factory, substeps=args.substeps)

    app = QApplication(sys.argv[:1])
    window = AppWindow(driver)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
