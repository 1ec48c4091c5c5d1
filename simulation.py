"""Double compound pendulum physics engine.

Two identical uniform rods (shared length and mass) hang from a fixed
pivot. The state is kept in Hamiltonian form: the two angles plus their
conjugate generalized angular momenta. ``DoublePendulum.step`` advances it
with a single explicit forward update, ``multi_step`` subdivides a coarse
tick (one animation frame) into equal sub-steps to limit the drift of that
first-order scheme.

Angles follow the SVG convention of the renderer: 0 is straight down and
pi/2 points to the right, with y growing downward.

Degenerate inputs (zero length or mass, a vanishing denominator, zero
sub-steps) are never rejected. The arithmetic is done in numpy float64 so
they degrade to inf/nan instead of raising ZeroDivisionError.
"""

import math

import numpy as np
from scipy.integrate import solve_ivp

# Gravitational acceleration (m/s^2), not configurable
G = 9.81

# Initial configuration shown on start and after a reset
DEFAULT_ANGLE = math.pi / 4
ROD_LENGTH = 100.0
ROD_MASS = 5.0

# One frame tick of DEFAULT_TICK seconds is split into DEFAULT_SUBSTEPS
DEFAULT_SUBSTEPS = 5
DEFAULT_TICK = 0.1


def hamiltonian_derivatives(a1, a2, p1, p2, length, mass):
    """Hamilton's equations for two equal uniform rods.

    Returns (v1, v2, dp1, dp2): the angular velocities and the time
    derivatives of the generalized momenta, all evaluated at the given
    state. See https://en.wikipedia.org/wiki/Double_pendulum#Lagrangian
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        length = np.float64(length)
        ml2 = np.float64(mass) * length**2
        da = np.float64(a1) - a2
        cos_da = np.cos(da)
        sin_da = np.sin(da)
        denom = 16.0 - 9.0 * cos_da**2

        v1 = (6.0 / ml2) * (2.0 * p1 - 3.0 * p2 * cos_da) / denom
        v2 = (6.0 / ml2) * (8.0 * p2 - 3.0 * p1 * cos_da) / denom

        dp1 = -0.5 * ml2 * (v1 * v2 * sin_da + 3.0 * (G / length) * np.sin(a1))
        dp2 = -0.5 * ml2 * (-v1 * v2 * sin_da + (G / length) * np.sin(a2))

    return v1, v2, dp1, dp2


class DoublePendulum:
    """A set of two linked compound pendulums.

    ``a1`` is the angle of the first rod from vertical, ``a2`` the angle of
    the second rod. The momenta are internal to the integrator and can only
    change through ``step``; ``length`` and ``mass`` are fixed at
    construction.
    """

    __slots__ = ("a1", "a2", "_p1", "_p2", "_length", "_mass")

    def __init__(self, a1, a2, p1, p2, length, mass):
        self.a1 = a1
        self.a2 = a2
        self._p1 = p1
        self._p2 = p2
        self._length = length
        self._mass = mass

    @classmethod
    def initial(cls, angle=DEFAULT_ANGLE, length=ROD_LENGTH, mass=ROD_MASS):
        """First rod tilted by ``angle``, second rod hanging down, at rest."""
        return cls(angle, 0.0, 0.0, 0.0, length, mass)

    @property
    def length(self):
        return self._length

    @property
    def mass(self):
        return self._mass

    def __repr__(self):
        return (
            f"DoublePendulum(a1={self.a1!r}, a2={self.a2!r}, "
            f"length={self._length!r}, mass={self._mass!r})"
        )

    def __eq__(self, other):
        if not isinstance(other, DoublePendulum):
            return NotImplemented
        return (
            self.state_vector() == other.state_vector()
            and self._length == other._length
            and self._mass == other._mass
        )

    __hash__ = None

    def state_vector(self):
        """Return (a1, a2, p1, p2) as an immutable snapshot."""
        return (self.a1, self.a2, self._p1, self._p2)

    def is_finite(self):
        return all(math.isfinite(v) for v in self.state_vector())

    def step(self, dt):
        """Advance the system by ``dt`` as one discrete forward step.

        All four updates use derivatives evaluated at the pre-step state.
        A negative ``dt`` integrates backward.
        """
        v1, v2, dp1, dp2 = hamiltonian_derivatives(
            self.a1, self.a2, self._p1, self._p2, self._length, self._mass,
        )
        with np.errstate(invalid="ignore", over="ignore"):
            self.a1 = float(self.a1 + v1 * dt)
            self.a2 = float(self.a2 + v2 * dt)
            self._p1 = float(self._p1 + dp1 * dt)
            self._p2 = float(self._p2 + dp2 * dt)

    def multi_step(self, dt, num_steps):
        """Advance ``dt`` in total using ``num_steps`` equal increments.

        More increments give better accuracy at the cost of computation.
        ``num_steps == 0`` leaves the state untouched.
        """
        with np.errstate(divide="ignore", invalid="ignore"):
            sub_dt = np.float64(dt) / num_steps
        for _ in range(num_steps):
            self.step(sub_dt)

    def joint_position(self):
        """Location of the joint between the two rods.

        Relative to the first rod's pivot, y pointing down.
        """
        with np.errstate(invalid="ignore"):
            x = self._length * np.sin(self.a1)
            y = self._length * np.cos(self.a1)
        return float(x), float(y)


def default_pendulum():
    """The pendulum shown when the app starts or is reset."""
    return DoublePendulum.initial()


def total_energy(pendulum):
    """Compute the Hamiltonian T + V for the current state.

    Potential energy is measured from the pivot. Purely diagnostic.
    """
    a1, a2, p1, p2 = pendulum.state_vector()
    length, mass = np.float64(pendulum.length), np.float64(pendulum.mass)
    v1, v2, _, _ = hamiltonian_derivatives(a1, a2, p1, p2, length, mass)

    with np.errstate(invalid="ignore", over="ignore"):
        # Kinetic energy of two uniform rods
        T = (mass * length**2 / 6.0) * (
            v2**2 + 4.0 * v1**2 + 3.0 * v1 * v2 * np.cos(a1 - a2)
        )
        V = -0.5 * mass * G * length * (3.0 * np.cos(a1) + np.cos(a2))

    return float(T + V)


def simulate(pendulum, t_end, dt):
    """Integrate the same Hamiltonian system with a high-order solver.

    The pendulum is not mutated. Used as the reference flow to measure
    how far the forward stepper drifts.

    Returns:
        t_array: 1D array of time values at uniform dt spacing
        state_array: 2D array of shape (len(t_array), 4) holding
            [a1, a2, p1, p2]
    """
    length, mass = pendulum.length, pendulum.mass
    t_eval = np.arange(0, t_end, dt)
    y0 = list(pendulum.state_vector())

    sol = solve_ivp(
        fun=lambda t, y: hamiltonian_derivatives(*y, length, mass),
        t_span=(0, t_end),
        y0=y0,
        method="DOP853",
        t_eval=t_eval,
        rtol=1e-12,
        atol=1e-12,
    )

    return sol.t, sol.y.T
