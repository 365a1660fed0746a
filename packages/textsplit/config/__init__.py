# textsplit/config/__init__.py
"""
Configuration module for textsplit settings.
Provides a default settings object shared by the command line tools.
"""

from .base import LOG_LEVELS, SplitterConfig

# Instantiate settings once and export
settings = SplitterConfig()

__all__ = ["LOG_LEVELS", "SplitterConfig", "settings"]
