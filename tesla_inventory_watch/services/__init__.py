"""
Service layer for the Tesla Inventory Watch.
"""

from .config_manager import ConfigurationManager

__all__ = [
    "ConfigurationManager",
]
