"""
Logging configuration shared by the CLI and the Streamlit app.
"""

import logging
import sys

import config.settings as settings


def setup_logging(log_level: str = settings.LOG_LEVEL, log_file: str = settings.LOG_FILE):
    """Configure logging for the entire application."""
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format=settings.LOG_FORMAT,
        handlers=handlers
    )
