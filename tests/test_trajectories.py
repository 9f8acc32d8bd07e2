import math

import pytest

from pandamotion.trajectories import (
    Command,
    cartesian_pose_arc,
    cartesian_velocity_wave,
    consecutive_joint_velocity,
    elbow_swing,
    joint_position_wave,
    joint_velocity_wave,
)

IDENTITY = (1.0, 0.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.4, 0.1, 0.5, 1.0)
Q_START = (0.0, -0.5, 0.0, -2.0, 0.0, 1.5, 0.7)


def test_pose_arc_starts_at_initial_pose():
    command = cartesian_pose_arc(IDENTITY, 0.0)
    assert command.values == pytest.approx(IDENTITY)
    assert command.motion_finished is False
    assert command.elbow is None


def test_pose_arc_midpoint_reaches_radius():
    command = cartesian_pose_arc(IDENTITY, 5.0)
    assert command.values[12] == pytest.approx(IDENTITY[12] + 0.3)
    assert command.values[14] == pytest.approx(IDENTITY[14] - 0.3)
    assert command.values[13] == IDENTITY[13]
    assert command.values[:12] == IDENTITY[:12]


def test_pose_arc_returns_and_finishes():
    command = cartesian_pose_arc(IDENTITY, 10.0)
    assert command.motion_finished is True
    assert command.values == pytest.approx(IDENTITY, abs=1e-12)


def test_pose_arc_is_symmetric_in_time():
    early = cartesian_pose_arc(IDENTITY, 2.0)
    late = cartesian_pose_arc(IDENTITY, 8.0)
    assert early.values == pytest.approx(late.values)


def test_pose_arc_rejects_wrong_size():
    with pytest.raises(ValueError):
        cartesian_pose_arc(IDENTITY[:15], 0.0)


def test_pose_arc_rejects_negative_time():
    with pytest.raises(ValueError):
        cartesian_pose_arc(IDENTITY, -0.001)


def test_velocity_wave_peaks_forward_then_backward():
    forward = cartesian_velocity_wave(2.0, time_max=4.0, v_max=0.1, angle=0.0)
    backward = cartesian_velocity_wave(6.0, time_max=4.0, v_max=0.1, angle=0.0)
    assert forward.values[0] == pytest.approx(0.1)
    assert backward.values[0] == pytest.approx(-0.1)
    assert forward.values[1:] == pytest.approx((0.0,) * 5)


def test_velocity_wave_direction_is_in_xz_plane():
    command = cartesian_velocity_wave(1.3)
    vx, vy, vz = command.values[:3]
    assert vy == 0.0
    assert vz == pytest.approx(-vx)
    assert command.values[3:] == (0.0, 0.0, 0.0)


def test_velocity_wave_finishes_at_twice_time_max():
    assert cartesian_velocity_wave(7.999).motion_finished is False
    final = cartesian_velocity_wave(8.0)
    assert final.motion_finished is True
    assert final.values == pytest.approx((0.0,) * 6, abs=1e-12)


def test_velocity_wave_rejects_non_positive_time_max():
    with pytest.raises(ValueError):
        cartesian_velocity_wave(1.0, time_max=0.0)


def test_consecutive_velocity_moves_third_joint_only():
    forward = consecutive_joint_velocity(2.0)
    backward = consecutive_joint_velocity(6.0)
    assert forward.values[2] == pytest.approx(0.2)
    assert backward.values[2] == pytest.approx(-0.2)
    others = [v for i, v in enumerate(forward.values) if i != 2]
    assert others == [0.0] * 6


def test_consecutive_velocity_finishes():
    assert consecutive_joint_velocity(7.5).motion_finished is False
    assert consecutive_joint_velocity(8.0).motion_finished is True


def test_joint_velocity_wave_values():
    forward = joint_velocity_wave(0.5)
    backward = joint_velocity_wave(1.5)
    assert forward.values[:3] == (0.0, 0.0, 0.0)
    assert forward.values[3:] == pytest.approx((1.0,) * 4)
    assert backward.values[3:] == pytest.approx((-1.0,) * 4)


def test_joint_velocity_wave_finishes_at_rest():
    final = joint_velocity_wave(2.0)
    assert final.motion_finished is True
    assert final.values == pytest.approx((0.0,) * 7, abs=1e-12)
    assert joint_velocity_wave(1.999).motion_finished is False


def test_joint_position_wave_moves_selected_joints():
    command = joint_position_wave(Q_START, 2.5)
    delta = [c - s for c, s in zip(command.values, Q_START)]
    assert delta[3] == pytest.approx(math.pi / 4)
    assert delta[3] == pytest.approx(delta[4])
    assert delta[3] == pytest.approx(delta[6])
    assert [delta[i] for i in (0, 1, 2, 5)] == [0.0] * 4
    assert command.motion_finished is False


def test_joint_position_wave_returns_and_finishes():
    start = joint_position_wave(Q_START, 0.0)
    final = joint_position_wave(Q_START, 5.0)
    assert start.values == pytest.approx(Q_START)
    assert final.values == pytest.approx(Q_START, abs=1e-12)
    assert final.motion_finished is True


def test_joint_position_wave_rejects_wrong_size():
    with pytest.raises(ValueError):
        joint_position_wave(Q_START + (0.0,), 1.0)


def test_elbow_swing_keeps_pose_and_moves_elbow():
    command = elbow_swing(IDENTITY, (0.1, -1.0), 5.0)
    assert command.values == IDENTITY
    assert command.elbow[0] == pytest.approx(0.1 + math.pi / 5)
    assert command.elbow[1] == -1.0
    assert command.motion_finished is False


def test_elbow_swing_finishes_back_at_start():
    command = elbow_swing(IDENTITY, (0.1, -1.0), 10.0)
    assert command.motion_finished is True
    assert command.elbow == pytest.approx((0.1, -1.0), abs=1e-12)


def test_elbow_swing_rejects_wrong_elbow_size():
    with pytest.raises(ValueError):
        elbow_swing(IDENTITY, (0.1,), 1.0)


def test_command_is_immutable():
    command = Command(values=(1.0, 2.0))
    with pytest.raises(AttributeError):
        command.motion_finished = True  # type: ignore[misc]
    assert command.motion_finished is False