"""
Pig Dice Configuration.

Environment variables, settings, and logging configuration.
"""

from pigdice.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
