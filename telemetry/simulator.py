"""
Missing Data Simulator - Synthetic Frame Source
===============================================

Generates clean, time-aligned frames that serve as ground truth for
gap-filling experiments.

Simulation Components:
----------------------
1. SignalModel    - Deterministic per-channel waveform
2. NoiseModel     - Sensor noise, bad-quality samples, absent channels
3. FrameSimulator - Frame orchestration at a fixed frame rate

Signal Model:
-------------
    x_c(t) = offset_c + amplitude_c × sin(2π × f_c × t + φ_c)

    where:
    - offset_c: nominal level of channel c
    - amplitude_c: oscillation amplitude
    - f_c: oscillation frequency [Hz]
    - φ_c: phase, spread evenly across channels

Frame Indexing:
---------------
Frames are produced at `frames_per_second`. Each frame carries
index = frame_number % frames_per_second, so index 0 is the first frame
of every second (the reporting-cycle boundary of the drop stage).

Example:
--------
>>> from telemetry import FrameSimulator, ChannelKey
>>>
>>> channels = [ChannelKey("PPA", i) for i in range(1, 4)]
>>> sim = FrameSimulator(channels, frames_per_second=30, seed=7)
>>>
>>> # One minute of frames
>>> for frame in sim.generate(30 * 60):
...     outputs = adapter.publish_frame(frame)

Author: Missing Data Sim Team
Date: October 19, 2026
"""

import numpy as np
from typing import Dict, Iterator, List, Optional, Sequence
import logging

from .measurement import ChannelKey, Frame, Measurement, Quality

logger = logging.getLogger(__name__)


class SignalModel:
    """
    Clean waveform for a set of channels.

    Channel c gets offset `offset + c × offset_step` and a phase spread
    evenly over one period, so channels are distinguishable in tests.

    Example:
    --------
    >>> signal = SignalModel(n_channels=3)
    >>> values = signal.evaluate(t=0.25)
    """

    def __init__(self,
                 n_channels: int,
                 offset: float = 60.0,
                 offset_step: float = 10.0,
                 amplitude: float = 1.0,
                 frequency_hz: float = 0.5):
        """
        Initialize signal model.

        Args:
            n_channels: Number of channels
            offset: Nominal level of the first channel
            offset_step: Level increment between channels
            amplitude: Oscillation amplitude
            frequency_hz: Oscillation frequency [Hz]
        """
        self.n_channels = n_channels
        self.offsets = offset + offset_step * np.arange(n_channels)
        self.amplitude = amplitude
        self.frequency_hz = frequency_hz
        self.phases = 2 * np.pi * np.arange(n_channels) / max(n_channels, 1)

    def evaluate(self, t: float) -> np.ndarray:
        """
        Evaluate every channel at time t.

        Args:
            t: Time [s]

        Returns:
            Clean values, one per channel
        """
        return self.offsets + self.amplitude * np.sin(
            2 * np.pi * self.frequency_hz * t + self.phases
        )


class NoiseModel:
    """
    Sensor imperfections layered on top of the clean signal.

    Noise Sources:
    ---------------
    1. Gaussian measurement noise
    2. Bad-quality samples (value delivered, flagged BAD)
    3. Absent samples (channel missing from the frame)
    """

    def __init__(self,
                 rng: np.random.Generator,
                 sigma: float = 0.0,
                 bad_quality_probability: float = 0.0,
                 absent_probability: float = 0.0):
        """
        Initialize noise model.

        Args:
            rng: Random generator
            sigma: Gaussian noise std dev
            bad_quality_probability: Probability a sample is flagged BAD
            absent_probability: Probability a sample is left out of the frame
        """
        self.rng = rng
        self.sigma = sigma
        self.bad_quality_probability = bad_quality_probability
        self.absent_probability = absent_probability

    def add_noise(self, values: np.ndarray) -> np.ndarray:
        if self.sigma <= 0:
            return values.copy()
        return values + self.rng.normal(0, self.sigma, size=values.shape)

    def quality_flags(self, n: int) -> List[Quality]:
        if self.bad_quality_probability <= 0:
            return [Quality.GOOD] * n
        bad = self.rng.random(n) < self.bad_quality_probability
        return [Quality.BAD if b else Quality.GOOD for b in bad]

    def present_mask(self, n: int) -> np.ndarray:
        if self.absent_probability <= 0:
            return np.ones(n, dtype=bool)
        return self.rng.random(n) >= self.absent_probability


class FrameSimulator:
    """
    Synthetic frame source at a fixed frame rate.

    Features:
    ---------
    1. Deterministic waveform per channel
    2. Optional noise, bad quality and absent samples
    3. Reproducible under a fixed seed
    4. Statistics tracking

    Example:
    --------
    >>> sim = FrameSimulator([ChannelKey("PPA", 1)], frames_per_second=10)
    >>> frame = sim.step()
    >>> frame.index
    0
    """

    def __init__(self,
                 channels: Sequence[ChannelKey],
                 frames_per_second: int = 30,
                 start_time: float = 0.0,
                 seed: Optional[int] = None,
                 signal: Optional[SignalModel] = None,
                 sigma: float = 0.0,
                 bad_quality_probability: float = 0.0,
                 absent_probability: float = 0.0):
        """
        Initialize frame simulator.

        Args:
            channels: Channels present in every frame
            frames_per_second: Frame rate
            start_time: Timestamp of the first frame [s]
            seed: Seed for noise generation
            signal: Waveform model (defaults to SignalModel over channels)
            sigma: Gaussian noise std dev
            bad_quality_probability: Probability of BAD quality per sample
            absent_probability: Probability a sample is absent
        """
        if frames_per_second <= 0:
            raise ValueError("frames_per_second must be positive")

        self.channels = list(channels)
        self.frames_per_second = frames_per_second
        self.start_time = start_time
        self.seed = seed
        self.signal = signal or SignalModel(len(self.channels))
        self._noise_args = (sigma, bad_quality_probability, absent_probability)

        self.reset()

        logger.info(
            f"FrameSimulator initialized: {len(self.channels)} channels "
            f"@ {frames_per_second} fps"
        )

    def step(self) -> Frame:
        """
        Produce the next frame.

        Returns:
            Frame at the next timestamp
        """
        t = self.start_time + self.frame_number / self.frames_per_second
        index = self.frame_number % self.frames_per_second

        values = self.noise.add_noise(self.signal.evaluate(t))
        qualities = self.noise.quality_flags(len(self.channels))
        present = self.noise.present_mask(len(self.channels))

        measurements = [
            Measurement(key, float(value), t, quality)
            for key, value, quality, keep
            in zip(self.channels, values, qualities, present)
            if keep
        ]

        self.n_bad += sum(1 for m in measurements if not m.is_good)
        self.n_absent += int(len(self.channels) - np.count_nonzero(present))
        self.frame_number += 1

        return Frame.from_measurements(t, measurements, index)

    def generate(self, n_frames: int) -> Iterator[Frame]:
        """
        Yield the next n_frames frames.

        Args:
            n_frames: Number of frames
        """
        for _ in range(n_frames):
            yield self.step()

    def get_statistics(self) -> Dict:
        """
        Get simulation statistics.

        Returns:
            Dictionary of statistics
        """
        n_samples = self.frame_number * len(self.channels)
        return {
            "n_frames": self.frame_number,
            "seconds_simulated": self.frame_number / self.frames_per_second,
            "n_samples": n_samples,
            "bad_quality_samples": self.n_bad,
            "absent_samples": self.n_absent,
        }

    def reset(self):
        """Reset simulator state, reseeding the noise generator."""
        self.noise = NoiseModel(np.random.default_rng(self.seed), *self._noise_args)
        self.frame_number = 0
        self.n_bad = 0
        self.n_absent = 0
