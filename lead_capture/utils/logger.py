from __future__ import annotations
import logging
import os
from pathlib import Path

_LOGGERS = {}

_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"


def get_logger(name: str = "lead_capture") -> logging.Logger:
    if name in _LOGGERS:
        return _LOGGERS[name]

    level = os.environ.get("LEAD_CAPTURE_LOG_LEVEL", "INFO").upper()
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.propagate = False

    # Console handler
    ch = logging.StreamHandler()
    ch.setLevel(level)
    ch.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(ch)

    # File handler (<LEAD_CAPTURE_LOG_DIR>/lead_capture.log), only when configured
    log_dir = os.environ.get("LEAD_CAPTURE_LOG_DIR")
    if log_dir:
        path = Path(log_dir)
        path.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(path / "lead_capture.log", encoding="utf-8")
        fh.setLevel(level)
        fh.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(fh)

    _LOGGERS[name] = logger
    return logger
