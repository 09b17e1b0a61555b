"""
Configuration utilities for the train booking manager.
"""

from .config import TrainbookConfig, load_config, DEFAULT_SEAT_CAPACITY

__all__ = [
    "TrainbookConfig",
    "load_config",
    "DEFAULT_SEAT_CAPACITY",
]
