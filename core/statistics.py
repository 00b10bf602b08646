"""
Missing Data Simulator Core - Statistics Tracker
================================================

Running counts of produced and dropped values.

Reporting Cycle:
----------------
The host marks the start of every reporting cycle with frame index 0
(e.g. the first frame of each second). On that frame, before any of its
values are processed, the tracker:

1. Computes percentage = missing / total × 100 (0 when total is 0)
2. Builds "Generated {missing} missing points ({percentage}%)"
3. Resets the cycle counters

so each report covers the previous cycle only. Lifetime totals are kept
alongside and are never reset.

Example:
--------
>>> tracker = StatisticsTracker()
>>> tracker.stats.record(True)
>>> tracker.stats.record(False)
>>> tracker.on_frame(0)
'Generated 1 missing points (50%)'

Author: Missing Data Sim Team
Date: October 19, 2026
"""

from dataclasses import dataclass
from typing import Dict, Optional
import logging

logger = logging.getLogger(__name__)


@dataclass
class RunningStats:
    """Counters for the current reporting cycle."""

    missing_count: int = 0
    total_count: int = 0

    def record(self, is_dropped: bool) -> None:
        """Count one produced value."""
        if is_dropped:
            self.missing_count += 1
        self.total_count += 1

    def reset(self) -> None:
        self.missing_count = 0
        self.total_count = 0

    @property
    def percentage(self) -> float:
        if self.total_count > 0:
            return self.missing_count / self.total_count * 100.0
        return 0.0


class StatisticsTracker:
    """
    Reports and resets RunningStats at each reporting-cycle boundary.

    The per-cycle counters live in `stats` and are handed to the drop
    simulator, which updates them while processing a frame.
    """

    def __init__(self):
        """Initialize tracker with zeroed counters."""
        self.stats = RunningStats()
        self.cycles = 0
        self.lifetime_missing = 0
        self.lifetime_total = 0

    def report(self) -> str:
        """
        Summarize the current cycle, then reset its counters.

        Returns:
            Human-readable summary
        """
        message = (
            f"Generated {self.stats.missing_count} missing points "
            f"({self.stats.percentage:g}%)"
        )

        self.lifetime_missing += self.stats.missing_count
        self.lifetime_total += self.stats.total_count
        self.cycles += 1
        self.reset()

        return message

    def on_frame(self, index: int) -> Optional[str]:
        """
        Check a frame index for a reporting-cycle boundary.

        Args:
            index: Host-supplied frame index

        Returns:
            Summary of the previous cycle when index == 0, else None
        """
        if index == 0:
            return self.report()
        return None

    def reset(self) -> None:
        self.stats.reset()

    def get_statistics(self) -> Dict:
        """
        Get cycle and lifetime statistics.

        Returns:
            Dictionary of statistics
        """
        lifetime_missing = self.lifetime_missing + self.stats.missing_count
        lifetime_total = self.lifetime_total + self.stats.total_count
        return {
            "cycles_reported": self.cycles,
            "cycle_missing": self.stats.missing_count,
            "cycle_total": self.stats.total_count,
            "cycle_percentage": self.stats.percentage,
            "lifetime_missing": lifetime_missing,
            "lifetime_total": lifetime_total,
            "lifetime_percentage": (
                lifetime_missing / lifetime_total * 100.0 if lifetime_total else 0.0
            ),
        }
