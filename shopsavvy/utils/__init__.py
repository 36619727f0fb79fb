"""
Utility helpers (configuration loading).
"""

from .config_loader import Config, load_config

__all__ = ["Config", "load_config"]
