"""
Configuration for Semantic Canvas.
"""

from .settings import NewFileLocation, Settings, get_settings

__all__ = ["NewFileLocation", "Settings", "get_settings"]
