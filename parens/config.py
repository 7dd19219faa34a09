from __future__ import annotations
import logging
import os

_DEFAULT_SOURCE_NAME = "<string>"


def get_source_name() -> str:
    """Default label attached to parse errors when the caller gives none."""
    return os.environ.get("PARENS_SOURCE_NAME") or _DEFAULT_SOURCE_NAME


def get_log_level() -> int | None:
    """Level for the `parens` logger from PARENS_LOGLEVEL, or None when unset."""
    raw = os.environ.get("PARENS_LOGLEVEL")
    if not raw:
        return None
    level = getattr(logging, raw.strip().upper(), None)
    if isinstance(level, int):
        return level
    return logging.WARNING


def apply_log_level() -> None:
    level = get_log_level()
    if level is not None:
        logging.getLogger("parens").setLevel(level)
