"""
Missing Data Simulator Pipeline - Ground-Truth Evaluation
=========================================================

Keeps the clean input next to the corrupted output so gap-filling
algorithms can be scored against known values.

Recorded Arrays (frames × channels):
------------------------------------
- truth:     input value per bound channel (NaN when absent from the frame)
- corrupted: value emitted by the drop stage (NaN where dropped)
- gap_mask:  True where the emitted value is NaN

Scoring:
--------
    RMSE_gap = sqrt(mean((truth - estimate)^2 over gap positions))

Example:
--------
>>> recorder = GroundTruthRecorder(adapter.inputs)
>>> for frame in sim.generate(600):
...     recorder.record(frame, adapter.publish_frame(frame))
>>> estimate = my_gap_filler(recorder.corrupted())
>>> gap_rmse(recorder.truth(), estimate, recorder.gap_mask())

Author: Missing Data Sim Team
Date: October 19, 2026
"""

import numpy as np
from typing import List, Sequence
import logging

from telemetry.measurement import ChannelKey, Frame, Measurement

logger = logging.getLogger(__name__)


class GroundTruthRecorder:
    """Records clean and corrupted values frame by frame."""

    def __init__(self, inputs: Sequence[ChannelKey]):
        """
        Initialize recorder.

        Args:
            inputs: Bound input channels, in output order
        """
        self.inputs = tuple(inputs)
        self.timestamps: List[float] = []
        self._truth: List[List[float]] = []
        self._corrupted: List[List[float]] = []

    def record(self, frame: Frame, outputs: Sequence[Measurement]) -> None:
        """
        Record one frame and the measurements derived from it.

        Args:
            frame: Input frame
            outputs: Derived measurements for the frame
        """
        if len(outputs) != len(self.inputs):
            raise ValueError(
                f"Expected {len(self.inputs)} outputs, got {len(outputs)}"
            )

        row = []
        for key in self.inputs:
            measurement = frame.get(key)
            row.append(measurement.value if measurement is not None else np.nan)

        self.timestamps.append(frame.timestamp)
        self._truth.append(row)
        self._corrupted.append([m.value for m in outputs])

    def truth(self) -> np.ndarray:
        return self._as_array(self._truth)

    def corrupted(self) -> np.ndarray:
        return self._as_array(self._corrupted)

    def gap_mask(self) -> np.ndarray:
        return np.isnan(self.corrupted())

    def realized_drop_rate(self) -> float:
        """Fraction of recorded values emitted as NaN (0 when empty)."""
        mask = self.gap_mask()
        if mask.size == 0:
            return 0.0
        return float(np.mean(mask))

    def __len__(self) -> int:
        return len(self.timestamps)

    def _as_array(self, rows: List[List[float]]) -> np.ndarray:
        if not rows:
            return np.empty((0, len(self.inputs)))
        return np.array(rows, dtype=float)


def gap_rmse(truth: np.ndarray,
             estimate: np.ndarray,
             mask: np.ndarray) -> float:
    """
    Root-mean-square error of an estimate over gap positions.

    Args:
        truth: Ground-truth values
        estimate: Reconstructed values, same shape
        mask: True at positions to score

    Returns:
        RMSE over masked positions, NaN when the mask is empty
    """
    truth = np.asarray(truth, dtype=float)
    estimate = np.asarray(estimate, dtype=float)
    mask = np.asarray(mask, dtype=bool)

    if truth.shape != estimate.shape or truth.shape != mask.shape:
        raise ValueError("truth, estimate and mask must have the same shape")

    if not mask.any():
        return float("nan")

    errors = truth[mask] - estimate[mask]
    return float(np.sqrt(np.mean(errors ** 2)))
