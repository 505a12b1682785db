from __future__ import annotations

import codecs
import os
from dataclasses import dataclass


def _get_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _get_str(name: str, default: str = "") -> str:
    return (os.getenv(name) or default).strip()


def _get_encoding(name: str, default: str = "utf-8") -> str:
    raw = _get_str(name, default) or default
    try:
        codecs.lookup(raw)
    except LookupError:
        return default
    return raw


@dataclass(frozen=True)
class Settings:
    # Text encoding used to decode UDP log packets.
    packet_encoding: str = "utf-8"

    # sv_logsecret the server is expected to send; empty disables the check.
    expected_secret: str = ""

    # Log bodies that no line shape recognized (DEBUG) while batch parsing.
    log_unrecognized: bool = False

    @staticmethod
    def from_env() -> "Settings":
        return Settings(
            packet_encoding=_get_encoding("SRCDS_LOG_ENCODING"),
            expected_secret=_get_str("SRCDS_LOG_SECRET"),
            log_unrecognized=_get_bool("SRCDS_LOG_UNRECOGNIZED_DEBUG", False),
        )
