"""rtlflags/domain/models.py

Pydantic model describing one radio flag.

Copyright BINGO Collaboration
Last modified: 2026-10-19
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

FlagKind = Literal["bool", "int", "gain_db", "sci", "sampling"]


class FlagSpec(BaseModel):
    """One row of the flag table.

    Attributes
    ----------
    name:
        Flag name as typed on the command line (without dashes).
    attr:
        Attribute of :class:`~rtlflags.application.context.Context` holding
        the pending value.
    setter:
        Name of the :class:`~rtlflags.ports.Radio` method that applies it.
    kind:
        Value type, which selects the parser and the coercion.
    default:
        Default shown in help output. Display only.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    attr: str
    setter: str
    kind: FlagKind
    description: str
    default: str
