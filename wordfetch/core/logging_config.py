#!/usr/bin/env python3
"""
Logging setup for the scraping pipeline.

Library modules only create module-level loggers; the embedding
application calls configure_logging() once at startup.
"""

import sys
import logging
from typing import List, Optional

from .config import get_scraper_config

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """
    Attach a stdout handler and, when requested, an append-mode file handler.

    Without an explicit level the configured log_level is used
    (WORDFETCH_LOG_LEVEL or the config file).
    """
    level = (level or get_scraper_config().log_level).upper()
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        try:
            handlers.append(logging.FileHandler(log_file, mode='a', encoding='utf-8'))
        except OSError as exc:
            logging.basicConfig(level=level, format=LOG_FORMAT)
            logging.getLogger().setLevel(level)
            logging.warning("Failed to attach file logger: %s", exc)
            return
    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers)
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger().setLevel(level)
