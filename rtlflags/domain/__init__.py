"""rtlflags/domain/__init__.py

Value types and models for the radio flags.

Copyright BINGO Collaboration
Last modified: 2026-10-19
"""

from .models import FlagSpec
from .values import FlagValue, SamplingMode, ScientificNotation, parse_bool

__all__ = [
    "FlagSpec",
    "FlagValue",
    "SamplingMode",
    "ScientificNotation",
    "parse_bool",
]
