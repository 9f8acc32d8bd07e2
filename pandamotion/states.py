"""Gripper and vacuum gripper state records."""

from __future__ import annotations

import enum
import json
from dataclasses import dataclass, field

from pandamotion.duration import Duration

_UINT16_MAX = 0xFFFF


def _check_uint16(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer")
    if not 0 <= value <= _UINT16_MAX:
        raise ValueError(f"{name} must be within 0..{_UINT16_MAX}, got {value}")


@dataclass
class GripperState:
    """State of the parallel gripper."""

    width: float = 0.0
    max_width: float = 0.0
    is_grasped: bool = False
    temperature: int = 0
    time: Duration = field(default_factory=Duration)

    def __post_init__(self) -> None:
        _check_uint16("temperature", self.temperature)

    def to_json(self) -> str:
        """Return the state as a JSON object with one key per field."""
        return json.dumps(
            {
                "width": self.width,
                "max_width": self.max_width,
                "is_grasped": self.is_grasped,
                "temperature": self.temperature,
                "time": self.time.to_msec(),
            }
        )

    def __str__(self) -> str:
        return self.to_json()


class VacuumGripperDeviceStatus(enum.IntEnum):
    """Health of the vacuum gripper device."""

    GREEN = 0
    YELLOW = 1
    ORANGE = 2
    RED = 3


@dataclass
class VacuumGripperState:
    """State of the vacuum gripper."""

    in_control_range: bool = False
    part_detached: bool = False
    part_present: bool = False
    device_status: VacuumGripperDeviceStatus = VacuumGripperDeviceStatus.GREEN
    actual_power: int = 0
    vacuum: int = 0
    time: Duration = field(default_factory=Duration)

    def __post_init__(self) -> None:
        self.device_status = VacuumGripperDeviceStatus(self.device_status)
        _check_uint16("actual_power", self.actual_power)
        _check_uint16("vacuum", self.vacuum)

    def to_json(self) -> str:
        """Return the state as a JSON object with one key per field."""
        return json.dumps(
            {
                "in_control_range": self.in_control_range,
                "part_detached": self.part_detached,
                "part_present": self.part_present,
                "device_status": self.device_status.name,
                "actual_power": self.actual_power,
                "vacuum": self.vacuum,
                "time": self.time.to_msec(),
            }
        )

    def __str__(self) -> str:
        return self.to_json()