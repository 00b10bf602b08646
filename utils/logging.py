"""
Missing Data Simulator Utils - Logging
======================================

Log formatting, handler setup and statistics summaries for the drop stage.

Status messages of the adapter (channel mismatch warnings, per-cycle
"Generated N missing points" reports) travel through the standard logging
tree, so a host only needs to call setup_logging() once to capture them.

Log Format:
-----------
[2026-10-19 12:30:45.123] [INFO    ] [pipeline.adapter] Generated 3 missing points (5%)

Example:
--------
>>> from utils import setup_logging
>>> setup_logging("logs/", level="INFO", file_output=False)
>>> adapter.initialize()
>>> ...
>>> adapter.log_statistics()

Author: Missing Data Sim Team
Date: October 19, 2026
"""

import logging
import logging.handlers
from pathlib import Path
from typing import Any, Dict, List, Optional
from datetime import datetime


_loggers: Dict[str, logging.Logger] = {}


class StructuredFormatter(logging.Formatter):
    """[timestamp] [LEVEL] [logger] message, with millisecond timestamps."""

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created)
        stamp = created.strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
        line = f"[{stamp}] [{record.levelname:8}] [{record.name}] {record.getMessage()}"
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def setup_logging(log_dir: str = "logs",
                  level: str = "INFO",
                  console_output: bool = True,
                  file_output: bool = True) -> None:
    """
    Route all drop-stage loggers to console and/or a rotating log file.

    Existing root handlers are replaced.

    Args:
        log_dir: Directory for missing_data_<timestamp>.log files
        level: Log level name
        console_output: Attach a stream handler
        file_output: Attach a rotating file handler
    """
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        raise ValueError(f"Unknown log level: {level}")

    root = logging.getLogger()
    root.setLevel(log_level)
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    handlers: List[logging.Handler] = []

    if console_output:
        handlers.append(logging.StreamHandler())

    if file_output:
        directory = Path(log_dir)
        directory.mkdir(parents=True, exist_ok=True)
        log_file = directory / f"missing_data_{datetime.now():%Y%m%d_%H%M%S}.log"
        handlers.append(logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=10*1024*1024,  # 10 MB
            backupCount=5,
        ))

    formatter = StructuredFormatter()
    for handler in handlers:
        handler.setLevel(log_level)
        handler.setFormatter(formatter)
        root.addHandler(handler)

    root.info(f"Logging configured: level={level}, dir={log_dir}")


def get_logger(name: str) -> logging.Logger:
    """Cached module logger."""
    if name not in _loggers:
        _loggers[name] = logging.getLogger(name)
    return _loggers[name]


def format_statistics(stats: Dict[str, Any]) -> List[str]:
    """
    Render a statistics dictionary as "key: value" lines.

    Floats get four decimals; everything else uses str().
    """
    lines = []
    for key, value in stats.items():
        if isinstance(value, float):
            lines.append(f"{key}: {value:.4f}")
        else:
            lines.append(f"{key}: {value}")
    return lines


def log_statistics(stats: Dict[str, Any],
                   logger: Optional[logging.Logger] = None,
                   title: str = "Statistics Summary") -> None:
    """
    Log a statistics summary, one line per entry.

    Args:
        stats: Statistics dictionary (e.g. MissingDataAdapter.get_statistics())
        logger: Destination logger (defaults to this module's)
        title: Header line
    """
    logger = logger or get_logger(__name__)

    logger.info(f"=== {title} ===")
    for line in format_statistics(stats):
        logger.info(line)
