"""
Environment-driven settings for the rtlflags command.
Path: rtlflags/config/settings.py
Copyright BINGO Collaboration
Last Modified: 2026-10-19
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Process-level options that are not device flags.

    Command-line options of the same meaning take precedence.
    """

    log_level: str = Field(default="INFO", description="Logger level name")
    log_dir: Optional[str] = Field(
        default=None,
        description="Directory for rtlflags.log; console only when unset",
    )
    rtltcp_address: Optional[str] = Field(
        default=None,
        description="Default rtl-sdr TCP server as HOST[:PORT]",
    )
    device_index: Optional[int] = Field(
        default=None,
        ge=0,
        description="Default local rtl-sdr dongle index",
    )

    model_config = {
        "env_prefix": "RTLFLAGS_",
        "env_file": ".env",
        "case_sensitive": False,
        "extra": "ignore",
    }


def load_settings() -> Settings:
    return Settings()
