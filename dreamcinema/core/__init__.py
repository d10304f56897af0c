"""
Dream Cinema Core Module

Contains configuration, constants, exceptions, logging and backoff helpers.
"""

from .config import Settings, get_settings
from .constants import *
from .exceptions import *
from .logging_config import setup_logging, get_logger, LogLevel
from .retry import BackoffPolicy, calculate_delay, wait_or_cancel

__all__ = [
    'Settings',
    'get_settings',
    'setup_logging',
    'get_logger',
    'LogLevel',
    'BackoffPolicy',
    'calculate_delay',
    'wait_or_cancel',
]
