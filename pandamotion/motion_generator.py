"""Synchronised point-to-point joint motion towards a goal configuration."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from pandamotion.duration import Duration

_JOINTS = 7
_DELTA_Q_MOTION_FINISHED = 1e-6
_DQ_MAX = (2.0, 2.0, 2.0, 2.0, 2.5, 2.5, 2.5)
_DDQ_MAX_START = (5.0,) * _JOINTS
_DDQ_MAX_GOAL = (5.0,) * _JOINTS


def _sign(value: float) -> int:
    return (value > 0) - (value < 0)


def _as_joint_vector(values: Sequence[float], name: str) -> tuple[float, ...]:
    vector = tuple(float(value) for value in values)
    if len(vector) != _JOINTS:
        raise ValueError(f"{name} must have {_JOINTS} entries, got {len(vector)}")
    return vector


@dataclass(frozen=True)
class JointMotion:
    """Joint positions to command, and whether the motion has finished."""

    q: tuple[float, ...]
    motion_finished: bool = False


@dataclass(frozen=True)
class _JointProfile:
    delta_q: float
    dq_max_sync: float = 0.0
    t_1_sync: float = 0.0
    t_2_sync: float = 0.0
    t_f_sync: float = 0.0
    q_1: float = 0.0

    @property
    def is_trivial(self) -> bool:
        return abs(self.delta_q) < _DELTA_Q_MOTION_FINISHED

    def offset_at(self, t: float) -> tuple[float, bool]:
        """Return the offset from the start position at time t and whether it is final."""
        if self.is_trivial:
            return 0.0, True
        sign = _sign(self.delta_q)
        t_d = self.t_2_sync - self.t_1_sync
        delta_t_2 = self.t_f_sync - self.t_2_sync
        if t < self.t_1_sync:
            offset = (
                -1.0
                / self.t_1_sync**3
                * self.dq_max_sync
                * sign
                * (0.5 * t - self.t_1_sync)
                * t**3
            )
            return offset, False
        if t < self.t_2_sync:
            return self.q_1 + (t - self.t_1_sync) * self.dq_max_sync * sign, False
        if t < self.t_f_sync:
            shifted = t - self.t_1_sync - t_d
            offset = self.delta_q + 0.5 * (
                1.0 / delta_t_2**3 * (shifted - 2.0 * delta_t_2) * shifted**3
                + (2.0 * t - 2.0 * self.t_1_sync - delta_t_2 - 2.0 * t_d)
            ) * self.dq_max_sync * sign
            return offset, False
        return self.delta_q, True


class MotionGenerator:
    """Generates a smooth joint motion to a goal, with all joints arriving together."""

    def __init__(self, speed_factor: float, q_goal: Sequence[float]) -> None:
        if speed_factor <= 0:
            raise ValueError(f"speed_factor must be positive, got {speed_factor}")
        self._q_goal = _as_joint_vector(q_goal, "q_goal")
        self._dq_max = tuple(v * speed_factor for v in _DQ_MAX)
        self._ddq_max_start = tuple(v * speed_factor for v in _DDQ_MAX_START)
        self._ddq_max_goal = tuple(v * speed_factor for v in _DDQ_MAX_GOAL)
        self._time = 0.0
        self._q_start: tuple[float, ...] = (0.0,) * _JOINTS
        self._profiles = tuple(_JointProfile(0.0) for _ in range(_JOINTS))

    def __call__(self, q_d: Sequence[float], period: Duration) -> JointMotion:
        """Advance by one control period and return the joint positions to command."""
        self._time += period.to_sec()
        if self._time == 0.0:
            self._q_start = _as_joint_vector(q_d, "q_d")
            deltas = [goal - start for goal, start in zip(self._q_goal, self._q_start)]
            self._profiles = self._synchronize(deltas)

        offsets = [profile.offset_at(self._time) for profile in self._profiles]
        positions = tuple(start + offset for start, (offset, _) in zip(self._q_start, offsets))
        return JointMotion(q=positions, motion_finished=all(done for _, done in offsets))

    def _synchronize(self, deltas: Sequence[float]) -> tuple[_JointProfile, ...]:
        limits = list(zip(deltas, self._dq_max, self._ddq_max_start, self._ddq_max_goal))

        finish_times = []
        for delta, dq_max, acc_start, acc_goal in limits:
            if abs(delta) <= _DELTA_Q_MOTION_FINISHED:
                finish_times.append(0.0)
                continue
            dq_reach = dq_max
            if abs(delta) < 0.75 * dq_max**2 / acc_start + 0.75 * dq_max**2 / acc_goal:
                dq_reach = math.sqrt(
                    4.0 / 3.0 * delta * _sign(delta) * (acc_start * acc_goal) / (acc_start + acc_goal)
                )
            t_1 = 1.5 * dq_reach / acc_start
            delta_t_2 = 1.5 * dq_reach / acc_goal
            finish_times.append(t_1 / 2.0 + delta_t_2 / 2.0 + abs(delta) / dq_reach)
        max_t_f = max(finish_times)

        profiles = []
        for delta, _, acc_start, acc_goal in limits:
            if abs(delta) <= _DELTA_Q_MOTION_FINISHED:
                profiles.append(_JointProfile(delta))
                continue
            a = 1.5 / 2.0 * (acc_goal + acc_start)
            b = -max_t_f * acc_goal * acc_start
            c = abs(delta) * acc_goal * acc_start
            discriminant = max(b * b - 4.0 * a * c, 0.0)
            dq_max_sync = (-b - math.sqrt(discriminant)) / (2.0 * a)
            t_1_sync = 1.5 * dq_max_sync / acc_start
            delta_t_2_sync = 1.5 * dq_max_sync / acc_goal
            t_f_sync = t_1_sync / 2.0 + delta_t_2_sync / 2.0 + abs(delta / dq_max_sync)
            profiles.append(
                _JointProfile(
                    delta_q=delta,
                    dq_max_sync=dq_max_sync,
                    t_1_sync=t_1_sync,
                    t_2_sync=t_f_sync - delta_t_2_sync,
                    t_f_sync=t_f_sync,
                    q_1=dq_max_sync * _sign(delta) * 0.5 * t_1_sync,
                )
            )
        return tuple(profiles)