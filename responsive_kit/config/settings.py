"""
Settings Module - responsive-kit
Default values for the toolkit configuration
"""
import logging

from .themes.breakpoints import DEFAULT_BREAKPOINT_WIDTHS, DEFAULT_EPSILON

logger = logging.getLogger(__name__)

# Overridden by core/config.py (environment, .env, JSON file)

DEFAULT_SETTINGS = {
    "breakpoints": dict(DEFAULT_BREAKPOINT_WIDTHS),
    "breakpoint_epsilon": DEFAULT_EPSILON,
    "log_level": "INFO",
    "log_dir": "logs",
}

logger.debug("Settings module loaded")
