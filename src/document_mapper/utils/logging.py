"""Logging utilities for the document mapper."""

import logging
import sys

from document_mapper.settings import settings

# Create and configure package logger
logger = logging.getLogger("document_mapper")

logging_level = getattr(logging, settings.logging_level.upper(), logging.INFO)

logger.setLevel(logging_level)

# Create formatter with process and thread IDs for worker identification
formatter = logging.Formatter("%(asctime)s - PID:%(process)d - Thread:%(thread)d - %(name)s - %(levelname)s - %(message)s")

if not logger.handlers:
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

# Prevent propagation to root logger to avoid duplicate logs
logger.propagate = False
