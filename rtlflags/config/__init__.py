"""
Configuration package for rtlflags.

Copyright BINGO Collaboration
Last Modified: 2026-10-19
"""

from .settings import Settings, load_settings

__all__ = ["Settings", "load_settings"]
