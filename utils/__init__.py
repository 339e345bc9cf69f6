"""
Utilities package for SnapCook application.

Contains configuration, logging, and shared utilities.
"""

from .config import Config, get_config, reload_config
from .logger import setup_logging, get_logger, log_image_result, log_operation

__all__ = [
    'Config',
    'get_config',
    'reload_config',
    'setup_logging',
    'get_logger',
    'log_image_result',
    'log_operation'
]
