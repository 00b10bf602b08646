"""
Missing Data Simulator Core - Drop Simulator
============================================

Per-frame corruption of channel values under the uniform drop model.

Algorithm (for each bound channel pair i):
------------------------------------------
1. Read inputs[i] from the frame. Absent or non-GOOD samples read as 0.0.
2. If uniform drop is enabled, draw r ~ U[0, 1) (one draw per value).
   If r < p the value becomes NaN and the missing count increments.
3. The total count increments for every value, dropped or not.
4. outputs[i] is cloned with the value and the frame timestamp.

Draws are independent Bernoulli trials with success probability p.
No draws are consumed when uniform drop is disabled, so the sequence of
decisions is reproducible for a given seed, configuration and frame
sequence.

Example:
--------
>>> import numpy as np
>>> dropper = DropSimulator(config, np.random.default_rng(42))
>>> outputs = dropper.process(frame, inputs, templates, stats)

Author: Missing Data Sim Team
Date: October 19, 2026
"""

import numpy as np
from typing import List, Sequence
import logging

from telemetry.measurement import ChannelKey, Frame, Measurement
from .statistics import RunningStats

logger = logging.getLogger(__name__)


class DropSimulator:
    """
    Replaces values with NaN according to independent trials.

    `rng` is anything with a `random()` method returning a float in
    [0, 1), normally a numpy Generator.
    """

    def __init__(self, config, rng):
        """
        Initialize drop simulator.

        Args:
            config: DropConfig (uniform_drop_enabled, drop_probability)
            rng: Random source
        """
        self.config = config
        self.rng = rng

    def should_drop(self) -> bool:
        """Run one trial. Always False when uniform drop is disabled."""
        if not self.config.uniform_drop_enabled:
            return False
        return self.rng.random() < self.config.drop_probability

    def process(self,
                frame: Frame,
                inputs: Sequence[ChannelKey],
                outputs: Sequence[Measurement],
                stats: RunningStats) -> List[Measurement]:
        """
        Derive one output frame.

        Args:
            frame: Input frame
            inputs: Bound input channels
            outputs: Bound output templates, same length as inputs
            stats: Counters updated once per value

        Returns:
            Derived measurements, ordered like outputs
        """
        derived = []

        for key, template in zip(inputs, outputs):
            measurement = frame.get(key)
            value = 0.0

            if measurement is not None and measurement.is_good:
                value = measurement.value

            dropped = self.should_drop()
            if dropped:
                value = np.nan

            stats.record(dropped)
            derived.append(template.clone(value, frame.timestamp))

        return derived
