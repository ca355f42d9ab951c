"""
Logging configuration and utilities for the ESPD import engine.
"""
from .config import configure_logging, get_import_logger, get_logger, log_recovered_issue

__all__ = ["configure_logging", "get_logger", "get_import_logger", "log_recovered_issue"]
