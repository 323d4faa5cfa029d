"""
Core utilities and configuration for UniTracker.

This package provides core functionality including logging configuration,
database setup, domain models and the timer model.
"""

from unitracker.core.logging_config import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
