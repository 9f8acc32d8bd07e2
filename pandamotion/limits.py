"""Limits on commanded rates for joint, Cartesian and elbow motion."""

from __future__ import annotations

import sys

DELTA_T = 1e-3
"""Sample time of the control loop in seconds."""

LIMIT_EPS = 1e-3
"""Margin subtracted from every limit."""

NORM_EPS = sys.float_info.epsilon
"""Norm below which Cartesian accelerations or jerks are not limited."""

TOL_NUMBER_PACKETS_LOST = 3.0
"""Lost packets allowed for when deriving velocity limits."""

FACTOR_CARTESIAN_ROTATION_POSE_INTERFACE = 0.99
"""Scale for rotational limits when commanding Cartesian poses."""


def _velocity_limit(nominal: float, acceleration: float) -> float:
    return nominal - LIMIT_EPS - TOL_NUMBER_PACKETS_LOST * DELTA_T * acceleration


MAX_TORQUE_RATE: tuple[float, ...] = tuple(1000.0 - LIMIT_EPS for _ in range(7))

MAX_JOINT_JERK: tuple[float, ...] = tuple(
    value - LIMIT_EPS
    for value in (7500.0, 3750.0, 5000.0, 6250.0, 7500.0, 10000.0, 10000.0)
)

MAX_JOINT_ACCELERATION: tuple[float, ...] = tuple(
    value - LIMIT_EPS for value in (15.0, 7.5, 10.0, 12.5, 15.0, 20.0, 20.0)
)

MAX_JOINT_VELOCITY: tuple[float, ...] = tuple(
    _velocity_limit(nominal, acceleration)
    for nominal, acceleration in zip(
        (2.1750, 2.1750, 2.1750, 2.1750, 2.6100, 2.6100, 2.6100),
        MAX_JOINT_ACCELERATION,
    )
)

MAX_TRANSLATIONAL_JERK = 6500.0 - LIMIT_EPS
MAX_TRANSLATIONAL_ACCELERATION = 13.0 - LIMIT_EPS
MAX_TRANSLATIONAL_VELOCITY = _velocity_limit(2.0, MAX_TRANSLATIONAL_ACCELERATION)

MAX_ROTATIONAL_JERK = 12500.0 - LIMIT_EPS
MAX_ROTATIONAL_ACCELERATION = 25.0 - LIMIT_EPS
MAX_ROTATIONAL_VELOCITY = _velocity_limit(2.5, MAX_ROTATIONAL_ACCELERATION)

MAX_ELBOW_JERK = 5000.0 - LIMIT_EPS
MAX_ELBOW_ACCELERATION = 10.0 - LIMIT_EPS
MAX_ELBOW_VELOCITY = _velocity_limit(2.1750, MAX_ELBOW_ACCELERATION)