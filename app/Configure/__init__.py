"""Configuration and logging setup for the stats bot"""

from .logger import ConfigLogger
from .settings.Settings import Settings, SafeConfig

__all__ = [
    'ConfigLogger',
    'Settings',
    'SafeConfig',
]
