"""Shared pytest fixtures for the rtlflags test suite.

Copyright BINGO Collaboration
Last Modified: 2026-10-19
"""

from __future__ import annotations

import argparse

import pytest

from rtlflags.adapters import LoggingRadio
from rtlflags.application import Context


class FailingRadio(LoggingRadio):
    """Dry-run radio whose listed setters raise instead of recording."""

    def __init__(self, *failing: str) -> None:
        super().__init__()
        self.failing = set(failing)

    def _record(self, setter, value):
        if setter in self.failing:
            raise OSError(f"{setter} refused {value!r}")
        super()._record(setter, value)


@pytest.fixture
def radio() -> LoggingRadio:
    return LoggingRadio()


@pytest.fixture
def context(radio) -> Context:
    return Context(radio)


@pytest.fixture
def parser(context) -> argparse.ArgumentParser:
    """Parser with the radio flags registered on ``context``."""
    p = argparse.ArgumentParser(prog="rtlflags-test")
    context.register_flags(p)
    return p


@pytest.fixture
def failing_radio_factory():
    return FailingRadio
