"""
Missing Data Simulator - Measurement Model
==========================================

Value types shared by every stage of the simulator.

Types:
------
1. ChannelKey  - Identity of one time-series channel ("SOURCE:ID")
2. Quality     - Good/bad quality flag of a sample
3. Measurement - Value + quality + timestamp at one channel
4. Frame       - Measurements sharing exactly one timestamp

Measurements are immutable. Derived measurements are produced by cloning
an output template with a new value and timestamp, so the template's
metadata (key, unit, destination) survives unchanged.

Example:
--------
>>> key = ChannelKey.parse("PPA:12")
>>> template = Measurement(key, unit="MW", destination="HISTORIAN")
>>> m = template.clone(42.0, timestamp=1.5)
>>> m.unit
'MW'

Author: Missing Data Sim Team
Date: October 19, 2026
"""

import math
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict, Iterable, Optional


@dataclass(frozen=True, order=True)
class ChannelKey:
    """Opaque identifier of a channel, compared by value."""

    source: str
    id: int

    @classmethod
    def parse(cls, text: str) -> "ChannelKey":
        """
        Parse a key written as ``SOURCE:ID``.

        Args:
            text: Key text, e.g. "PPA:12"

        Returns:
            ChannelKey

        Raises:
            ValueError: If the text is not of the form SOURCE:ID
        """
        source, sep, number = text.strip().rpartition(":")
        if not sep or not source:
            raise ValueError(f"Invalid channel key: {text!r}")
        try:
            return cls(source.strip(), int(number))
        except ValueError:
            raise ValueError(f"Invalid channel key: {text!r}") from None

    def __str__(self) -> str:
        return f"{self.source}:{self.id}"


class Quality(Enum):
    """Sample quality flag."""
    GOOD = "good"
    BAD = "bad"


@dataclass(frozen=True)
class Measurement:
    """
    Value observed at one channel and timestamp.

    NaN marks a missing value.
    """

    key: ChannelKey
    value: float = math.nan
    timestamp: float = 0.0
    quality: Quality = Quality.GOOD
    unit: str = ""
    destination: str = ""

    @property
    def is_good(self) -> bool:
        return self.quality is Quality.GOOD

    @property
    def is_missing(self) -> bool:
        return math.isnan(self.value)

    def clone(self, value: float, timestamp: float) -> "Measurement":
        """
        Copy this measurement with a new value and timestamp.

        Args:
            value: New value (NaN for missing)
            timestamp: New timestamp

        Returns:
            Measurement carrying this one's key and metadata
        """
        return replace(self, value=float(value), timestamp=timestamp)


@dataclass
class Frame:
    """
    Measurements from different channels sharing one timestamp.

    ``index`` is the frame's position within the host's current batch;
    index 0 marks the start of a reporting cycle.
    """

    timestamp: float
    measurements: Dict[ChannelKey, Measurement] = field(default_factory=dict)
    index: int = 0

    @classmethod
    def from_measurements(cls,
                          timestamp: float,
                          measurements: Iterable[Measurement],
                          index: int = 0) -> "Frame":
        """Build a frame keyed by each measurement's channel key."""
        return cls(timestamp, {m.key: m for m in measurements}, index)

    def get(self, key: ChannelKey) -> Optional[Measurement]:
        return self.measurements.get(key)

    def __len__(self) -> int:
        return len(self.measurements)
