"""
Utilities module for the Tech-Hub Activity Dashboard.
"""
from .logger import logger, init_logging, setup_logging, reset_logging

__all__ = ["logger", "init_logging", "setup_logging", "reset_logging"]
