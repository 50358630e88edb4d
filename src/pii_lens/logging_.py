"""Logging utilities.

We use Python's standard `logging` module with a structured one-line format.
One line per record keeps scan logs greppable and easy to ship to ELK/Loki.

- Logs go to stderr, and to `<log_dir>/<run_id>.log` when a log dir is given.
- Matched PII values are never logged; only counts and categories.
"""

from __future__ import annotations
import logging
import os
from datetime import datetime
from typing import Optional

_FORMAT = "%(asctime)s %(levelname)s %(name)s | %(message)s"
_DATEFMT = "%Y-%m-%dT%H:%M:%S"

def setup_logging(log_dir: Optional[str] = None, run_id: Optional[str] = None, level: str = "INFO") -> Optional[str]:
    """
    Setup logging configuration.

    Args:
        log_dir: Directory for the log file (console only if None)
        run_id: Log file stem (defaults to a timestamp)
        level: Root log level name

    Returns:
        Path of the log file, if one was configured
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, str(level).upper(), logging.INFO))

    fmt = logging.Formatter(fmt=_FORMAT, datefmt=_DATEFMT)

    # Console
    ch = logging.StreamHandler()
    ch.setFormatter(fmt)
    root.addHandler(ch)

    if log_dir is None:
        return None

    # File
    os.makedirs(log_dir, exist_ok=True)
    run_id = run_id or datetime.now().strftime("scan_%Y%m%dT%H%M%S")
    log_path = os.path.join(log_dir, f"{run_id}.log")
    fh = logging.FileHandler(log_path, encoding="utf-8")
    fh.setFormatter(fmt)
    root.addHandler(fh)
    return log_path
