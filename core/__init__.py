"""
Missing Data Simulator Core Module - Initialization
===================================================

Core module provides the frame-level fault injection: channel alignment,
the uniform drop model and the corruption-rate statistics.

Components:
-----------
1. binder.py     - Channel Binder (input/output alignment)
2. dropper.py    - Drop Simulator (per-value Bernoulli corruption)
3. statistics.py - Statistics Tracker (per-cycle and lifetime counts)

Usage:
------
from core import bind_channels, DropSimulator, StatisticsTracker

binding = bind_channels(input_keys, output_templates)
tracker = StatisticsTracker()
dropper = DropSimulator(config, np.random.default_rng(config.seed))

for frame in frames:
    message = tracker.on_frame(frame.index)
    outputs = dropper.process(frame, binding.inputs, binding.outputs,
                              tracker.stats)

Version: 1.0.0
Author: Missing Data Sim Team
Date: October 19, 2026
"""

from .binder import (
    BindingResult,
    bind_channels,
)

from .dropper import (
    DropSimulator,
)

from .statistics import (
    RunningStats,
    StatisticsTracker,
)

__all__ = [
    # Binder
    "BindingResult",
    "bind_channels",
    # Drop model
    "DropSimulator",
    # Statistics
    "RunningStats",
    "StatisticsTracker",
]

__version__ = "1.0.0"
__author__ = "Missing Data Sim Team"
__date__ = "2026-10-19"
