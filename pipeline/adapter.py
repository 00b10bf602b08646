"""
Missing Data Simulator Pipeline - Host Adapter
==============================================

Plugs the drop stage into a host pipeline that delivers time-aligned
frames one at a time.

Adapter Lifecycle:
------------------
1. initialize()
   - Bind input channels to output templates (warn once on mismatch)
   - Create the random generator (seeded from config)
   - Zero the statistics
2. publish_frame(frame), once per frame
   - Report and reset statistics on frame.index == 0
   - Corrupt values, clone output templates
   - Hand derived measurements to the output handler
3. get_statistics() / log_statistics()

Status Channel:
---------------
Status messages are logged on this module's logger and forwarded to an
optional `status_handler(level, message)` callable. Levels are
MessageLevel.INFO and MessageLevel.WARNING.

Frames for one adapter must not be delivered concurrently; the adapter
holds private, unlocked state (generator and counters).

Example:
--------
>>> from pipeline import MissingDataAdapter
>>> from utils import DropConfig, parse_connection_string
>>>
>>> config = DropConfig.from_settings(parse_connection_string(
...     "DropUniform=true; Puniform=10; Seed=1; "
...     "InputMeasurementKeys={PPA:1;PPA:2}; OutputMeasurements={SIM:1;SIM:2}"
... ))
>>> adapter = MissingDataAdapter(config, output_handler=publish)
>>> adapter.initialize()
>>> for frame in frames:
...     adapter.publish_frame(frame)

Author: Missing Data Sim Team
Date: October 19, 2026
"""

import numpy as np
from enum import Enum
from typing import Callable, Dict, Iterable, Iterator, List, Optional
import logging

from core.binder import bind_channels
from core.dropper import DropSimulator
from core.statistics import StatisticsTracker
from telemetry.measurement import Frame, Measurement
from utils.config import DropConfig
from utils.logging import get_logger, log_statistics

logger = get_logger(__name__)


class MessageLevel(Enum):
    """Status message levels."""
    INFO = logging.INFO
    WARNING = logging.WARNING


class AdapterStateError(RuntimeError):
    """Adapter used before initialize()."""
    pass


StatusHandler = Callable[[MessageLevel, str], None]
OutputHandler = Callable[[List[Measurement]], None]


class MissingDataAdapter:
    """
    Frame-synchronized missing data generator.

    Wraps the Channel Binder, Drop Simulator and Statistics Tracker behind
    an initialize / publish_frame contract.
    """

    supports_temporal_processing = False

    def __init__(self,
                 config: DropConfig,
                 status_handler: Optional[StatusHandler] = None,
                 output_handler: Optional[OutputHandler] = None,
                 rng=None):
        """
        Initialize adapter.

        Args:
            config: Drop configuration
            status_handler: Receives (level, message) status messages
            output_handler: Receives each list of derived measurements
            rng: Random source overriding the seeded numpy generator
        """
        self.config = config
        self.status_handler = status_handler
        self.output_handler = output_handler
        self._injected_rng = rng

        self.inputs = ()
        self.outputs = ()
        self.tracker = StatisticsTracker()
        self.dropper = None
        self.frames_processed = 0

    @property
    def initialized(self) -> bool:
        return self.dropper is not None

    def initialize(self) -> None:
        """Bind channels and set up the drop model."""
        binding = bind_channels(self.config.input_channels,
                                self.config.output_channels)
        self.inputs = binding.inputs
        self.outputs = binding.outputs

        if binding.warning:
            self._on_status(MessageLevel.WARNING, binding.warning)

        rng = self._injected_rng
        if rng is None:
            rng = np.random.default_rng(self.config.seed)

        self.dropper = DropSimulator(self.config, rng)
        self.tracker = StatisticsTracker()
        self.frames_processed = 0

        logger.info(
            f"MissingDataAdapter initialized: {len(self.inputs)} channels, "
            f"uniform drop {'on' if self.config.uniform_drop_enabled else 'off'} "
            f"({self.config.puniform:g}%)"
        )

    def publish_frame(self, frame: Frame) -> List[Measurement]:
        """
        Process one frame.

        Args:
            frame: Time-aligned input frame

        Returns:
            Derived measurements aligned with the bound outputs

        Raises:
            AdapterStateError: If initialize() has not been called
        """
        if not self.initialized:
            raise AdapterStateError("initialize() must be called before publish_frame()")

        message = self.tracker.on_frame(frame.index)
        if message is not None:
            self._on_status(MessageLevel.INFO, message)

        derived = self.dropper.process(frame, self.inputs, self.outputs,
                                       self.tracker.stats)
        self.frames_processed += 1

        if self.output_handler is not None:
            self.output_handler(derived)

        return derived

    def process_frames(self, frames: Iterable[Frame]) -> Iterator[List[Measurement]]:
        """Yield derived measurements for each frame in order."""
        for frame in frames:
            yield self.publish_frame(frame)

    def get_statistics(self) -> Dict:
        """
        Get adapter statistics.

        Returns:
            Tracker statistics plus channel and frame counts
        """
        stats = self.tracker.get_statistics()
        stats.update({
            "frames_processed": self.frames_processed,
            "bound_channels": len(self.inputs),
            "configured_inputs": len(self.config.input_channels),
            "configured_outputs": len(self.config.output_channels),
        })
        return stats

    def log_statistics(self) -> None:
        """Log the current statistics summary on this module's logger."""
        log_statistics(self.get_statistics(), logger=logger,
                       title="Missing Data Statistics")

    def _on_status(self, level: MessageLevel, message: str) -> None:
        logger.log(level.value, message)
        if self.status_handler is not None:
            self.status_handler(level, message)
