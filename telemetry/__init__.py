"""
Missing Data Simulator Telemetry Module - Initialization
========================================================

Measurement types and synthetic ground-truth frames.

Components:
-----------
1. measurement.py - ChannelKey, Quality, Measurement, Frame
2. simulator.py   - Synthetic frame generation (testing/validation)
3. __init__.py    - Module initialization and exports

Frame Flow:
-----------
Host / FrameSimulator
    ↓
Frame (one timestamp, keyed by ChannelKey)
    ↓
MissingDataAdapter.publish_frame
    ↓
Derived measurements (values possibly NaN) → Host

Usage:
------
from telemetry import ChannelKey, FrameSimulator

channels = [ChannelKey("PPA", i) for i in range(1, 5)]
sim = FrameSimulator(channels, frames_per_second=30, seed=1)
for frame in sim.generate(n_frames=300):
    outputs = adapter.publish_frame(frame)

Version: 1.0.0
Author: Missing Data Sim Team
Date: October 19, 2026
"""

from .measurement import (
    ChannelKey,
    Quality,
    Measurement,
    Frame,
)

from .simulator import (
    FrameSimulator,
    SignalModel,
    NoiseModel,
)

__all__ = [
    # Measurement model
    "ChannelKey",
    "Quality",
    "Measurement",
    "Frame",
    # Simulator
    "FrameSimulator",
    "SignalModel",
    "NoiseModel",
]

__version__ = "1.0.0"
__author__ = "Missing Data Sim Team"
__date__ = "2026-10-19"
