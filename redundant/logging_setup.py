"""
Logging configuration for redundant-sentences.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from redundant.config import Config


def setup_logging(config: Config, level: Optional[str] = None) -> logging.Logger:
    """
    Configure the root logger from Config (LOG_LEVEL) or an explicit level.
    Logs go to stderr so reports printed on stdout stay clean.
    """
    level_str = (level or config.log_level or "INFO").upper()
    log_level = getattr(logging, level_str, logging.INFO)

    logger = logging.getLogger()
    logger.setLevel(log_level)

    # Remove existing handlers
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(log_level)
    logger.addHandler(console_handler)

    return logger
