"""
Utility modules for the engine.
"""

from flexy_engine.utils.config import Config
from flexy_engine.utils.logging import PhaseTimer, default_log_file, log_exception, setup_logging

__all__ = [
    'Config',
    'PhaseTimer',
    'default_log_file',
    'log_exception',
    'setup_logging',
]
