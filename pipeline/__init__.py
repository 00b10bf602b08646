"""
Missing Data Simulator Pipeline Module - Initialization
=======================================================

Host-facing glue around the core drop stage.

Components:
-----------
1. adapter.py    - MissingDataAdapter (initialize / publish_frame contract)
2. evaluation.py - Ground-truth recording and gap scoring

Pipeline:
---------
Host frame → [Statistics boundary] → [Drop Simulator] → derived frame → Host

Usage:
------
from pipeline import MissingDataAdapter, GroundTruthRecorder, gap_rmse
from telemetry import FrameSimulator
from utils import load_drop_config

config = load_drop_config("config/drop.yaml")
adapter = MissingDataAdapter(config)
adapter.initialize()

sim = FrameSimulator(config.input_channels, frames_per_second=30, seed=3)
recorder = GroundTruthRecorder(adapter.inputs)
for frame in sim.generate(3000):
    recorder.record(frame, adapter.publish_frame(frame))

print(recorder.realized_drop_rate())

Version: 1.0.0
Author: Missing Data Sim Team
Date: October 19, 2026
"""

from .adapter import (
    MissingDataAdapter,
    MessageLevel,
    AdapterStateError,
)

from .evaluation import (
    GroundTruthRecorder,
    gap_rmse,
)

__all__ = [
    # Adapter
    "MissingDataAdapter",
    "MessageLevel",
    "AdapterStateError",
    # Evaluation
    "GroundTruthRecorder",
    "gap_rmse",
]

__version__ = "1.0.0"
__author__ = "Missing Data Sim Team"
__date__ = "2026-10-19"
