"""
Config Module: Per-Operation Records and the Base Loader
"""

from diskann_config.config.record import ConfigRecord, FieldState
from diskann_config.config.loader import load_config

__all__ = [
    "ConfigRecord",
    "FieldState",
    "load_config",
]
