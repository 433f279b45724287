"""
Runner module for serp-extract.

This module contains:
- Logging setup
"""

from runner.logging_setup import setup_logging, get_logger

__version__ = "0.1.0"

__all__ = [
    "setup_logging",
    "get_logger",
]
