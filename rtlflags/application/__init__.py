"""rtlflags/application/__init__.py

Application services for rtlflags.

Copyright BINGO Collaboration
Last modified: 2026-10-19
"""

from .context import FLAGS, Context, visited_flags

__all__ = ["Context", "FLAGS", "visited_flags"]
