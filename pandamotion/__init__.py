"""Durations, gripper states, rate limits, joint motion generation and sample trajectories."""

__version__ = "0.9.2"

__all__ = ["duration", "states", "limits", "motion_generator", "trajectories"]