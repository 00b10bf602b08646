"""
Missing Data Simulator Tests - Pipeline
=======================================

Integration tests for the host-facing pipeline:
- MissingDataAdapter lifecycle and status channel
- End-to-end frame processing
- Ground-truth recording and gap scoring

Test Coverage:
--------------
1. Initialization
   - Channel binding and mismatch warning
   - Use before initialize()

2. Frame Processing
   - Two-frame reference scenario
   - Cycle reports on index 0
   - Output handler delivery
   - Reproducibility under a seed

3. Evaluation
   - Truth / corrupted arrays
   - Realized drop rate
   - Gap RMSE

Author: Missing Data Sim Team
Date: October 19, 2026
"""

import math
import unittest
import numpy as np
import logging

from pipeline.adapter import AdapterStateError, MessageLevel, MissingDataAdapter
from pipeline.evaluation import GroundTruthRecorder, gap_rmse
from telemetry.measurement import ChannelKey, Frame, Measurement, Quality
from telemetry.simulator import FrameSimulator
from utils.config import ConfigError, DropConfig

from .test_core import ScriptedRandom

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

A = ChannelKey("PPA", 1)
B = ChannelKey("PPA", 2)
A_OUT = Measurement(ChannelKey("SIM", 1), unit="Hz")
B_OUT = Measurement(ChannelKey("SIM", 2), unit="Hz")


def make_config(**kwargs):
    defaults = dict(
        uniform_drop_enabled=True,
        drop_probability=0.5,
        input_channels=(A, B),
        output_channels=(A_OUT, B_OUT),
    )
    defaults.update(kwargs)
    return DropConfig(**defaults)


class StatusRecorder:
    def __init__(self):
        self.messages = []

    def __call__(self, level, message):
        self.messages.append((level, message))


class TestAdapterInitialization(unittest.TestCase):
    """Test adapter setup."""

    def test_publish_before_initialize(self):
        adapter = MissingDataAdapter(make_config())
        frame = Frame(0.0, {}, 0)

        with self.assertRaises(AdapterStateError):
            adapter.publish_frame(frame)

    def test_no_warning_when_lengths_match(self):
        status = StatusRecorder()
        adapter = MissingDataAdapter(make_config(), status_handler=status)
        adapter.initialize()

        self.assertEqual(status.messages, [])
        self.assertEqual(adapter.inputs, (A, B))
        self.assertEqual(adapter.outputs, (A_OUT, B_OUT))

    def test_mismatch_warns_once_and_truncates(self):
        status = StatusRecorder()
        config = make_config(input_channels=(A, B, ChannelKey("PPA", 3)))
        adapter = MissingDataAdapter(config, status_handler=status,
                                     rng=ScriptedRandom([0.9] * 20))
        adapter.initialize()

        self.assertEqual(status.messages,
                         [(MessageLevel.WARNING, "There are 3 inputs but 2 outputs")])
        self.assertEqual(adapter.inputs, (A, B))

        for i in range(1, 5):
            adapter.publish_frame(Frame(float(i), {}, i))

        warnings = [m for m in status.messages if m[0] is MessageLevel.WARNING]
        self.assertEqual(len(warnings), 1)

    def test_warning_is_logged(self):
        config = make_config(output_channels=(A_OUT,))
        adapter = MissingDataAdapter(config)

        with self.assertLogs("pipeline.adapter", level="WARNING") as captured:
            adapter.initialize()

        self.assertIn("There are 2 inputs but 1 outputs", captured.output[0])

    def test_not_temporal(self):
        self.assertFalse(MissingDataAdapter.supports_temporal_processing)


class TestAdapterProcessing(unittest.TestCase):
    """Test frame processing through the adapter."""

    def test_reference_scenario(self):
        """Two frames at Puniform = 50 with scripted draws."""
        status = StatusRecorder()
        adapter = MissingDataAdapter(
            make_config(), status_handler=status,
            rng=ScriptedRandom([0.9, 0.1, 0.8, 0.2]),
        )
        adapter.initialize()

        frame1 = Frame.from_measurements(
            100.0, [Measurement(A, 10.0, 100.0), Measurement(B, 20.0, 100.0)], index=0)
        out1 = adapter.publish_frame(frame1)

        self.assertEqual(out1[0].value, 10.0)
        self.assertTrue(math.isnan(out1[1].value))
        self.assertEqual(adapter.tracker.stats.missing_count, 1)
        self.assertEqual(adapter.tracker.stats.total_count, 2)

        frame2 = Frame.from_measurements(
            100.1, [Measurement(A, 30.0, 100.1, Quality.BAD),
                    Measurement(B, 40.0, 100.1)], index=1)
        out2 = adapter.publish_frame(frame2)

        self.assertEqual(out2[0].value, 0.0)
        self.assertTrue(math.isnan(out2[1].value))
        self.assertEqual(adapter.tracker.stats.missing_count, 2)
        self.assertEqual(adapter.tracker.stats.total_count, 4)

        self.assertEqual([m.timestamp for m in out1], [100.0, 100.0])
        self.assertEqual([m.timestamp for m in out2], [100.1, 100.1])
        self.assertEqual([m.key for m in out2], [A_OUT.key, B_OUT.key])

        # First frame reports the (empty) previous cycle
        self.assertEqual(status.messages,
                         [(MessageLevel.INFO, "Generated 0 missing points (0%)")])

    def test_report_precedes_processing(self):
        status = StatusRecorder()
        adapter = MissingDataAdapter(
            make_config(), status_handler=status,
            rng=ScriptedRandom([0.1, 0.9, 0.9, 0.9, 0.1, 0.1]),
        )
        adapter.initialize()

        adapter.publish_frame(Frame(0.0, {}, 0))
        adapter.publish_frame(Frame(0.5, {}, 1))
        adapter.publish_frame(Frame(1.0, {}, 0))

        self.assertEqual(status.messages[-1],
                         (MessageLevel.INFO, "Generated 1 missing points (25%)"))
        self.assertEqual(adapter.tracker.stats.missing_count, 2)
        self.assertEqual(adapter.tracker.stats.total_count, 2)

    def test_output_handler_receives_each_frame(self):
        published = []
        adapter = MissingDataAdapter(make_config(uniform_drop_enabled=False),
                                     output_handler=published.append)
        adapter.initialize()

        frames = [Frame.from_measurements(float(t), [Measurement(A, t, float(t))], t % 2)
                  for t in range(4)]
        results = list(adapter.process_frames(frames))

        self.assertEqual(len(published), 4)
        self.assertEqual(published, results)
        self.assertEqual([r[0].value for r in results], [0.0, 1.0, 2.0, 3.0])
        self.assertEqual(adapter.get_statistics()["frames_processed"], 4)

    def test_seeded_runs_match(self):
        channels = [ChannelKey("PPA", i) for i in range(1, 6)]
        config = DropConfig(
            uniform_drop_enabled=True,
            drop_probability=0.25,
            seed=99,
            input_channels=tuple(channels),
            output_channels=tuple(Measurement(ChannelKey("SIM", k.id)) for k in channels),
        )

        def run():
            adapter = MissingDataAdapter(config)
            adapter.initialize()
            sim = FrameSimulator(channels, frames_per_second=10, seed=4)
            return [[m.is_missing for m in adapter.publish_frame(f)]
                    for f in sim.generate(100)]

        self.assertEqual(run(), run())

    def test_reinitialize_resets_state(self):
        adapter = MissingDataAdapter(make_config(seed=1))
        adapter.initialize()
        adapter.publish_frame(Frame(0.0, {}, 1))
        adapter.initialize()

        stats = adapter.get_statistics()
        self.assertEqual(stats["frames_processed"], 0)
        self.assertEqual(stats["lifetime_total"], 0)
        self.assertEqual(stats["bound_channels"], 2)

    def test_log_statistics_summary(self):
        adapter = MissingDataAdapter(make_config(), rng=ScriptedRandom([0.1, 0.9]))
        adapter.initialize()
        adapter.publish_frame(Frame(0.0, {}, 1))

        with self.assertLogs("pipeline.adapter", level="INFO") as captured:
            adapter.log_statistics()

        self.assertEqual(captured.output[0],
                         "INFO:pipeline.adapter:=== Missing Data Statistics ===")
        self.assertIn("INFO:pipeline.adapter:cycle_missing: 1", captured.output)
        self.assertIn("INFO:pipeline.adapter:cycle_percentage: 50.0000", captured.output)
        self.assertIn("INFO:pipeline.adapter:frames_processed: 1", captured.output)

    def test_negative_seed_rejected_before_initialize(self):
        settings = {
            "DropUniform": "true",
            "Puniform": "10",
            "Seed": "-1",
            "InputMeasurementKeys": "PPA:1",
            "OutputMeasurements": "SIM:1",
        }

        with self.assertRaises(ConfigError):
            DropConfig.from_settings(settings)

        with self.assertRaises(ConfigError):
            make_config(seed=-1)


class TestGroundTruthEvaluation(unittest.TestCase):
    """Test ground-truth recording and scoring."""

    def setUp(self):
        """Set up test fixtures."""
        self.channels = [ChannelKey("PPA", i) for i in range(1, 4)]
        self.config = DropConfig(
            uniform_drop_enabled=True,
            drop_probability=0.1,
            seed=11,
            input_channels=tuple(self.channels),
            output_channels=tuple(Measurement(ChannelKey("SIM", k.id))
                                  for k in self.channels),
        )

    def test_recorded_arrays(self):
        adapter = MissingDataAdapter(self.config)
        adapter.initialize()
        sim = FrameSimulator(self.channels, frames_per_second=30, seed=8)
        recorder = GroundTruthRecorder(adapter.inputs)

        for frame in sim.generate(300):
            recorder.record(frame, adapter.publish_frame(frame))

        truth = recorder.truth()
        corrupted = recorder.corrupted()
        mask = recorder.gap_mask()

        self.assertEqual(truth.shape, (300, 3))
        self.assertEqual(len(recorder), 300)
        np.testing.assert_array_equal(truth[~mask], corrupted[~mask])
        self.assertAlmostEqual(recorder.realized_drop_rate(), 0.1, delta=0.04)

        stats = adapter.get_statistics()
        self.assertEqual(int(mask.sum()), stats["lifetime_missing"])

    def test_record_rejects_wrong_length(self):
        recorder = GroundTruthRecorder(self.channels)
        with self.assertRaises(ValueError):
            recorder.record(Frame(0.0, {}, 0), [])

    def test_empty_recorder(self):
        recorder = GroundTruthRecorder(self.channels)
        self.assertEqual(recorder.truth().shape, (0, 3))
        self.assertEqual(recorder.realized_drop_rate(), 0.0)

    def test_gap_rmse(self):
        truth = np.array([[1.0, 2.0], [3.0, 4.0]])
        estimate = np.array([[1.0, 0.0], [3.0, 4.0]])
        mask = np.array([[False, True], [False, False]])

        self.assertAlmostEqual(gap_rmse(truth, estimate, mask), 2.0)
        self.assertTrue(math.isnan(gap_rmse(truth, estimate, np.zeros((2, 2), bool))))

    def test_gap_rmse_shape_mismatch(self):
        with self.assertRaises(ValueError):
            gap_rmse(np.zeros(3), np.zeros(2), np.zeros(3, bool))


if __name__ == "__main__":
    unittest.main()
