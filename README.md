# pandamotion

Pure-Python building blocks for 1 kHz control loops on a seven-joint robot arm.
It needs nothing beyond the standard library.

## What is in the package

- `pandamotion.duration.Duration` is an immutable, non-negative duration in
  whole milliseconds. It supports arithmetic and comparison, and converts to and
  from `datetime.timedelta`.
- `pandamotion.states` holds the dataclasses `GripperState` and
  `VacuumGripperState` and the enum `VacuumGripperDeviceStatus`
  (`GREEN`, `YELLOW`, `ORANGE`, `RED`). Each state has a `to_json()` method, and
  its `str()` gives the same JSON object. The fields `temperature`,
  `actual_power` and `vacuum` are checked to lie in 0..65535.
- `pandamotion.limits` holds constants: the sample time `DELTA_T`, and the joint,
  Cartesian and elbow limits on velocity, acceleration and jerk, for example
  `MAX_JOINT_VELOCITY`, `MAX_TRANSLATIONAL_JERK` and `MAX_ELBOW_ACCELERATION`.
- `pandamotion.motion_generator.MotionGenerator` generates a synchronised
  point-to-point joint motion in which all seven joints arrive at the same time.
  Each call returns a `JointMotion` with the fields `q` and `motion_finished`.
- `pandamotion.trajectories` contains time-parametrised sample motions. Each one
  returns a `Command` with the fields `values`, `elbow` (or `None`) and
  `motion_finished`:
  - `cartesian_pose_arc(initial_pose, time)`
  - `cartesian_velocity_wave(time, time_max=4.0, v_max=0.1, angle=pi/4)`
  - `consecutive_joint_velocity(time, time_max=4.0, omega_max=0.2)`
  - `elbow_swing(initial_pose, initial_elbow, time)`
  - `joint_position_wave(initial_position, time)`
  - `joint_velocity_wave(time, time_max=1.0, omega_max=1.0)`

## Usage

### Durations

```python
from datetime import timedelta
from pandamotion.duration import Duration

period = Duration(4)
print((period + Duration(3)).to_msec())   # 7
print((2 * period).to_sec())              # 0.008
print(Duration(4) // Duration(3))         # 1
print((Duration(4) % 3).to_msec())        # 1
print(Duration.from_timedelta(timedelta(seconds=1.5)).to_msec())  # 1500
```

Subtracting a longer duration from a shorter one raises `ValueError`. Dividing
by zero raises `ZeroDivisionError`.

### Moving to a joint goal

Call `MotionGenerator` once per control cycle. Pass it the current desired joint
positions and the time since the last cycle. On the first call the period must be
zero, and the generator plans the motion from the positions you pass in.

```python
import math
from pandamotion.duration import Duration
from pandamotion.motion_generator import MotionGenerator

q_goal = [0, -math.pi / 4, 0, -3 * math.pi / 4, 0, math.pi / 2, math.pi / 4]
generator = MotionGenerator(0.5, q_goal)

q_d = [0.0] * 7
period = Duration(0)
while True:
    motion = generator(q_d, period)
    q_d = list(motion.q)
    if motion.motion_finished:
        break
    period = Duration(1)
```

### Sample trajectories

```python
from pandamotion.trajectories import joint_velocity_wave

command = joint_velocity_wave(0.5, time_max=1.0, omega_max=1.0)
print(command.values, command.motion_finished)
```

The sample motions raise `ValueError` for a negative or non-finite time, for
vectors of the wrong length, and for a `time_max` that is not positive.

### Device states

```python
from pandamotion.states import GripperState

state = GripperState(width=0.04, max_width=0.08, is_grasped=True, temperature=30)
print(state)   # {"width": 0.04, "max_width": 0.08, "is_grasped": true, "temperature": 30, "time": 0}
```

## What the package does not do

- It does not connect to a robot, a gripper or a vacuum gripper over the network.
  The state classes are plain records that you fill in yourself.
- It does not run a control loop. You call the generators and trajectory
  functions yourself, once per cycle.
- `pandamotion.limits` only defines the limit values. It does not clamp or
  rate-limit commands.
- The package has no dynamics model, no kinematics and no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```