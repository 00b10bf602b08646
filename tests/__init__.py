"""
Missing Data Simulator Tests Module - Initialization
====================================================

Unit and integration tests for the Missing Data Simulator.

Test Organization:
------------------
1. test_core.py      - Channel Binder, Drop Simulator, Statistics Tracker
2. test_pipeline.py  - Host adapter and ground-truth evaluation
3. test_telemetry.py - Measurement model and synthetic frames
4. test_config.py    - Settings parsing, YAML loading, logging

Example Test Run:
-----------------
$ pytest tests/

Version: 1.0.0
Author: Missing Data Sim Team
Date: October 19, 2026
"""

import unittest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

__version__ = "1.0.0"
__author__ = "Missing Data Sim Team"
__date__ = "2026-10-19"

TEST_MODULES = [
    "tests.test_core",
    "tests.test_pipeline",
    "tests.test_telemetry",
    "tests.test_config",
]


def create_test_suite():
    """
    Create comprehensive test suite.

    Returns:
        unittest.TestSuite with all tests
    """
    loader = unittest.TestLoader()
    return loader.loadTestsFromNames(TEST_MODULES)


def run_tests(verbosity: int = 2):
    """
    Run all tests.

    Args:
        verbosity: Output verbosity level

    Returns:
        unittest.TestResult
    """
    suite = create_test_suite()
    runner = unittest.TextTestRunner(verbosity=verbosity)
    return runner.run(suite)
