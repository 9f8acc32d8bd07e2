"""Time-parametrised demonstration motions for joint and Cartesian control."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

_POSE_SIZE = 16
_ELBOW_SIZE = 2
_JOINTS = 7
_ARC_RADIUS = 0.3
_ARC_DURATION = 10.0
_ELBOW_DURATION = 10.0
_JOINT_POSITION_DURATION = 5.0


@dataclass(frozen=True)
class Command:
    """One control-cycle command: the commanded values, an optional elbow and the finish flag."""

    values: tuple[float, ...]
    elbow: tuple[float, ...] | None = None
    motion_finished: bool = False


def _as_vector(values: Sequence[float], size: int, name: str) -> list[float]:
    vector = [float(value) for value in values]
    if len(vector) != size:
        raise ValueError(f"{name} must have {size} entries, got {len(vector)}")
    return vector


def _check_time(time: float) -> float:
    time = float(time)
    if not math.isfinite(time) or time < 0.0:
        raise ValueError(f"time must be finite and non-negative, got {time}")
    return time


def _oscillation(time: float, time_max: float, peak: float) -> float:
    """Raised-cosine pulse whose sign flips every time_max seconds."""
    if time_max <= 0.0:
        raise ValueError(f"time_max must be positive, got {time_max}")
    periods = round((time - math.fmod(time, time_max)) / time_max)
    cycle = 1.0 if periods % 2 == 0 else -1.0
    return cycle * peak / 2.0 * (1.0 - math.cos(2.0 * math.pi / time_max * time))


def cartesian_pose_arc(initial_pose: Sequence[float], time: float) -> Command:
    """Move the end effector along an arc in the x-z plane and back over ten seconds."""
    time = _check_time(time)
    pose = _as_vector(initial_pose, _POSE_SIZE, "initial_pose")
    angle = math.pi / 4.0 * (1.0 - math.cos(math.pi / 5.0 * time))
    pose[12] += _ARC_RADIUS * math.sin(angle)
    pose[14] += _ARC_RADIUS * (math.cos(angle) - 1.0)
    return Command(values=tuple(pose), motion_finished=time >= _ARC_DURATION)


def cartesian_velocity_wave(
    time: float,
    time_max: float = 4.0,
    v_max: float = 0.1,
    angle: float = math.pi / 4.0,
) -> Command:
    """Cartesian twist that pulses forward then back along a direction in the x-z plane."""
    time = _check_time(time)
    v = _oscillation(time, time_max, v_max)
    twist = (math.cos(angle) * v, 0.0, -math.sin(angle) * v, 0.0, 0.0, 0.0)
    return Command(values=twist, motion_finished=time >= 2.0 * time_max)


def consecutive_joint_velocity(
    time: float, time_max: float = 4.0, omega_max: float = 0.2
) -> Command:
    """Joint velocities that swing the third joint forth and back."""
    time = _check_time(time)
    omega = _oscillation(time, time_max, omega_max)
    velocities = (0.0, 0.0, omega, 0.0, 0.0, 0.0, 0.0)
    return Command(values=velocities, motion_finished=time >= 2.0 * time_max)


def elbow_swing(
    initial_pose: Sequence[float], initial_elbow: Sequence[float], time: float
) -> Command:
    """Keep the end-effector pose fixed while swinging the elbow out and back."""
    time = _check_time(time)
    pose = _as_vector(initial_pose, _POSE_SIZE, "initial_pose")
    elbow = _as_vector(initial_elbow, _ELBOW_SIZE, "initial_elbow")
    elbow[0] += math.pi / 10.0 * (1.0 - math.cos(math.pi / 5.0 * time))
    return Command(
        values=tuple(pose),
        elbow=tuple(elbow),
        motion_finished=time >= _ELBOW_DURATION,
    )


def joint_position_wave(initial_position: Sequence[float], time: float) -> Command:
    """Move joints four, five and seven out and back over five seconds."""
    time = _check_time(time)
    q = _as_vector(initial_position, _JOINTS, "initial_position")
    delta_angle = math.pi / 8.0 * (1.0 - math.cos(math.pi / 2.5 * time))
    for joint in (3, 4, 6):
        q[joint] += delta_angle
    return Command(values=tuple(q), motion_finished=time >= _JOINT_POSITION_DURATION)


def joint_velocity_wave(
    time: float, time_max: float = 1.0, omega_max: float = 1.0
) -> Command:
    """Joint velocities that swing the last four joints forth and back."""
    time = _check_time(time)
    omega = _oscillation(time, time_max, omega_max)
    velocities = (0.0, 0.0, 0.0, omega, omega, omega, omega)
    return Command(values=velocities, motion_finished=time >= 2.0 * time_max)