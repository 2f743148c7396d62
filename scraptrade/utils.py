# scraptrade/utils.py
"""Shared logging setup.

Every module logs through the one `scraptrade` logger: listing creation and
contact reveals at INFO, storage failures with tracebacks. `LOG_LEVEL` sets the
threshold.
"""
import os
import logging
from dotenv import load_dotenv

load_dotenv()

def get_logger(name=__name__):
    level = os.getenv("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        format="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
        level=getattr(logging, level, logging.INFO)
    )
    return logging.getLogger(name)

logger = get_logger("scraptrade")
